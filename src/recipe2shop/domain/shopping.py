"""Domain models for shopping lists."""

from dataclasses import dataclass, field
from datetime import date, datetime

from recipe2shop.domain.dishes import normalize_name


@dataclass(frozen=True)
class MealSource:
    """A meal that contributed to a shopping list item."""

    date: date
    meal_type: str
    dish_name: str
    quantity: float = 0.0


@dataclass(frozen=True)
class ShoppingListItem:
    """An aggregated ingredient to buy."""

    ingredient_name: str
    quantity: float
    unit: str
    category: str
    checked: bool = False
    canceled: bool = False
    sources: list[MealSource] = field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        """Merge identity of the item."""
        return normalize_name(self.ingredient_name), self.unit

    @property
    def is_manual(self) -> bool:
        """True when the user added the item by hand."""
        return not self.sources


@dataclass(frozen=True)
class ShoppingList:
    """A shopping list derived from the menu over a date range."""

    id: str
    start_date: date
    end_date: date
    created_at: datetime
    items: list[ShoppingListItem]
    updated_at: datetime | None = None
