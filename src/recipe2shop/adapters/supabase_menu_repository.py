"""Supabase repository for menu assignments."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from recipe2shop.adapters.supabase_errors import parse_count, persistence_errors
from recipe2shop.domain.errors import PersistenceError
from recipe2shop.domain.menu import DateRange, MenuAssignment
from recipe2shop.services.menu import MenuRepository


@dataclass
class SupabaseMenuRepository(MenuRepository):
    """Supabase implementation for the menu assignment index."""

    client: Client

    def load_menu_assignments(self, date_range: DateRange) -> list[MenuAssignment]:
        """Return assignments within the range in recording order."""
        with persistence_errors("load menu assignments"):
            response = (
                self.client.table("menu_assignments")
                .select("date, meal_type, dish_id, portions, position")
                .gte("date", date_range.start.isoformat())
                .lte("date", date_range.end.isoformat())
                .order("position", desc=False)
                .execute()
            )
        return [_parse_assignment(row) for row in response.data or []]

    def add_assignment(self, assignment: MenuAssignment) -> None:
        """Insert an assignment after the last recorded one."""
        with persistence_errors("create menu assignment"):
            last = (
                self.client.table("menu_assignments")
                .select("position")
                .order("position", desc=True)
                .limit(1)
                .execute()
            )
            position = int(last.data[0].get("position", 0)) + 1 if last.data else 0
            response = (
                self.client.table("menu_assignments")
                .insert(
                    {
                        "date": assignment.date.isoformat(),
                        "meal_type": assignment.meal_type,
                        "dish_id": assignment.dish_id,
                        "portions": assignment.portions,
                        "position": position,
                    }
                )
                .execute()
            )
        if not response.data:
            raise PersistenceError("create menu assignment")

    def remove_assignments(
        self, day: date, meal_type: str, dish_id: str | None = None
    ) -> None:
        """Delete the assignments of a slot."""
        with persistence_errors("delete menu assignments"):
            query = (
                self.client.table("menu_assignments")
                .delete()
                .eq("date", day.isoformat())
                .eq("meal_type", meal_type)
            )
            if dish_id is not None:
                query = query.eq("dish_id", dish_id)
            query.execute()


def _parse_assignment(row: dict[str, object]) -> MenuAssignment:
    # Portions below one are kept so aggregation can reject them.
    return MenuAssignment(
        date=date.fromisoformat(str(row["date"])),
        meal_type=str(row.get("meal_type", "")),
        dish_id=str(row["dish_id"]),
        portions=parse_count(
            row.get("portions"), f"portions for dish {row['dish_id']}"
        ),
    )
