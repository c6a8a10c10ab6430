"""Supabase repository for shopping lists."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from recipe2shop.adapters.supabase_errors import parse_quantity, persistence_errors
from recipe2shop.domain.errors import PersistenceError
from recipe2shop.domain.shopping import MealSource, ShoppingList, ShoppingListItem
from recipe2shop.services.shopping import ShoppingListRepository


@dataclass
class SupabaseShoppingListRepository(ShoppingListRepository):
    """Supabase implementation for shopping lists."""

    client: Client

    def load_shopping_list(self, list_id: str) -> ShoppingList | None:
        """Return a shopping list by id."""
        with persistence_errors("load shopping list"):
            response = (
                self.client.table("shopping_lists")
                .select("*")
                .eq("id", list_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return parse_shopping_list(response.data[0])

    def save_shopping_list(self, shopping_list: ShoppingList) -> None:
        """Upsert a shopping list with its items."""
        with persistence_errors("save shopping list"):
            response = (
                self.client.table("shopping_lists")
                .upsert(serialize_shopping_list(shopping_list), on_conflict="id")
                .execute()
            )
        if not response.data:
            raise PersistenceError("save shopping list")

    def list_shopping_lists(self) -> list[ShoppingList]:
        """Return all shopping lists."""
        with persistence_errors("list shopping lists"):
            response = (
                self.client.table("shopping_lists")
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        return [parse_shopping_list(row) for row in response.data or []]

    def delete_shopping_list(self, list_id: str) -> None:
        """Delete a shopping list."""
        with persistence_errors("delete shopping list"):
            self.client.table("shopping_lists").delete().eq("id", list_id).execute()


def serialize_shopping_list(shopping_list: ShoppingList) -> dict[str, object]:
    """Convert a shopping list into a JSON-compatible row."""
    return {
        "id": shopping_list.id,
        "start_date": shopping_list.start_date.isoformat(),
        "end_date": shopping_list.end_date.isoformat(),
        "created_at": shopping_list.created_at.isoformat(),
        "updated_at": shopping_list.updated_at.isoformat()
        if shopping_list.updated_at
        else None,
        "items": [_serialize_item(item) for item in shopping_list.items],
    }


def _serialize_item(item: ShoppingListItem) -> dict[str, object]:
    return {
        "name": item.ingredient_name,
        "quantity": item.quantity,
        "unit": item.unit,
        "category": item.category,
        "checked": item.checked,
        "canceled": item.canceled,
        "sources": [
            {
                "date": source.date.isoformat(),
                "meal_type": source.meal_type,
                "dish_name": source.dish_name,
                "quantity": source.quantity,
            }
            for source in item.sources
        ],
    }


def parse_shopping_list(row: dict[str, object]) -> ShoppingList:
    """Parse a shopping list row into a domain model."""
    updated_raw = row.get("updated_at")
    return ShoppingList(
        id=str(row["id"]),
        start_date=date.fromisoformat(str(row["start_date"])),
        end_date=date.fromisoformat(str(row["end_date"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(updated_raw)
        if isinstance(updated_raw, str) and updated_raw
        else None,
        items=[_parse_item(item) for item in row.get("items") or []],
    )


def _parse_item(item: dict[str, object]) -> ShoppingListItem:
    name = str(item.get("name", ""))
    return ShoppingListItem(
        ingredient_name=name,
        quantity=parse_quantity(item.get("quantity"), name),
        unit=str(item.get("unit", "")),
        category=str(item.get("category", "")),
        checked=bool(item.get("checked", False)),
        canceled=bool(item.get("canceled", False)),
        sources=[
            MealSource(
                date=date.fromisoformat(str(source["date"])),
                meal_type=str(source.get("meal_type", "")),
                dish_name=str(source.get("dish_name", "")),
                quantity=parse_quantity(source.get("quantity"), name),
            )
            for source in item.get("sources") or []
        ],
    )
