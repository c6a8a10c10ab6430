"""Domain models for the weekly menu."""

from dataclasses import dataclass
from datetime import date, timedelta

MEAL_BREAKFAST = "breakfast"
MEAL_LUNCH = "lunch"
MEAL_SNACK = "snack"
MEAL_DINNER = "dinner"

# Chronological order within a day.
MEAL_TYPES = (MEAL_BREAKFAST, MEAL_LUNCH, MEAL_SNACK, MEAL_DINNER)
REQUIRED_MEAL_TYPES = (MEAL_LUNCH, MEAL_DINNER)


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Range start {self.start.isoformat()} is after end "
                f"{self.end.isoformat()}"
            )

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end

    def days(self) -> list[date]:
        """Return every day in the range."""
        count = (self.end - self.start).days + 1
        return [self.start + timedelta(days=offset) for offset in range(count)]


@dataclass(frozen=True)
class MenuAssignment:
    """A dish scheduled on a meal slot."""

    date: date
    meal_type: str
    dish_id: str
    portions: int = 1


def meal_type_rank(meal_type: str) -> int:
    """Return the position of a meal type within a day."""
    if meal_type in MEAL_TYPES:
        return MEAL_TYPES.index(meal_type)
    return len(MEAL_TYPES)
