"""Menu assignment index service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from recipe2shop.domain.errors import InvalidQuantityError
from recipe2shop.domain.menu import (
    MEAL_TYPES,
    REQUIRED_MEAL_TYPES,
    DateRange,
    MenuAssignment,
    meal_type_rank,
)


class MenuRepository(Protocol):
    """Persistence interface for menu assignments."""

    def load_menu_assignments(self, date_range: DateRange) -> list[MenuAssignment]:
        """Return assignments within the range in recording order."""

    def add_assignment(self, assignment: MenuAssignment) -> None:
        """Append an assignment after every existing one."""

    def remove_assignments(
        self, day: date, meal_type: str, dish_id: str | None = None
    ) -> None:
        """Remove assignments for a slot, optionally only for one dish."""


@dataclass
class MenuService:
    """Application service for scheduling dishes onto meal slots."""

    repository: MenuRepository

    def assign(
        self, day: date, meal_type: str, dish_id: str, portions: int = 1
    ) -> MenuAssignment:
        """Replace whatever is scheduled in a slot with a single dish."""
        assignment = _build_assignment(day, meal_type, dish_id, portions)
        self.repository.remove_assignments(day, meal_type)
        self.repository.add_assignment(assignment)
        return assignment

    def add(
        self, day: date, meal_type: str, dish_id: str, portions: int = 1
    ) -> MenuAssignment:
        """Add another dish to a slot."""
        assignment = _build_assignment(day, meal_type, dish_id, portions)
        self.repository.add_assignment(assignment)
        return assignment

    def remove(self, day: date, meal_type: str, dish_id: str) -> None:
        self.repository.remove_assignments(day, meal_type, dish_id)

    def list_between(self, date_range: DateRange) -> list[MenuAssignment]:
        """Return assignments by day, then meal, then recording order."""
        assignments = [
            assignment
            for assignment in self.repository.load_menu_assignments(date_range)
            if assignment.date in date_range
        ]
        return sorted(
            assignments,
            key=lambda item: (item.date, meal_type_rank(item.meal_type)),
        )

    def missing_meals(self, date_range: DateRange) -> list[tuple[date, str]]:
        """Return lunch and dinner slots in the range with nothing scheduled."""
        filled = {
            (assignment.date, assignment.meal_type)
            for assignment in self.repository.load_menu_assignments(date_range)
        }
        return [
            (day, meal_type)
            for day in date_range.days()
            for meal_type in REQUIRED_MEAL_TYPES
            if (day, meal_type) not in filled
        ]


def _build_assignment(
    day: date, meal_type: str, dish_id: str, portions: int
) -> MenuAssignment:
    if meal_type not in MEAL_TYPES:
        raise ValueError(f"Unknown meal type: {meal_type}")
    if portions < 1:
        raise InvalidQuantityError(f"portions for dish {dish_id}: {portions!r}")
    return MenuAssignment(
        date=day, meal_type=meal_type, dish_id=dish_id, portions=portions
    )
