"""Shopping list management and item operations."""

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from recipe2shop.domain.dishes import DEFAULT_UNIT, normalize_unit
from recipe2shop.domain.menu import DateRange
from recipe2shop.domain.shopping import ShoppingList, ShoppingListItem
from recipe2shop.services.catalog import check_quantity
from recipe2shop.services.categories import DEFAULT_CATEGORY
from recipe2shop.services.shopping import (
    ShoppingListAggregator,
    ShoppingListRepository,
)


@dataclass
class ShoppingListService:
    """Application service for stored shopping lists."""

    aggregator: ShoppingListAggregator
    repository: ShoppingListRepository
    default_category: str = DEFAULT_CATEGORY
    default_unit: str = DEFAULT_UNIT

    def create(self, date_range: DateRange) -> ShoppingList:
        """Generate and persist a new list for the range."""
        shopping_list = self.aggregator.generate(date_range)
        self.repository.save_shopping_list(shopping_list)
        return shopping_list

    def refresh(self, list_id: str) -> ShoppingList | None:
        """Regenerate a stored list from the current menu and persist it."""
        shopping_list = self.aggregator.regenerate(list_id)
        if shopping_list is None:
            return None
        self.repository.save_shopping_list(shopping_list)
        return shopping_list

    def get(self, list_id: str) -> ShoppingList | None:
        return self.repository.load_shopping_list(list_id)

    def list_all(self) -> list[ShoppingList]:
        """Return stored lists, newest first."""
        return sorted(
            self.repository.list_shopping_lists(),
            key=lambda item: item.created_at,
            reverse=True,
        )

    def delete(self, list_id: str) -> None:
        self.repository.delete_shopping_list(list_id)

    def add_manual_item(
        self,
        list_id: str,
        name: str,
        quantity: float = 1.0,
        unit: str | None = None,
        category: str | None = None,
    ) -> ShoppingList | None:
        """Append an item that does not come from the menu."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Item name must not be blank")
        check_quantity(quantity, f"manual item {cleaned}")
        shopping_list = self.repository.load_shopping_list(list_id)
        if shopping_list is None:
            return None
        item = ShoppingListItem(
            ingredient_name=cleaned,
            quantity=float(quantity),
            unit=normalize_unit(unit, self.default_unit),
            category=(category or "").strip() or self.default_category,
        )
        return self._save(shopping_list, [*shopping_list.items, item])

    def set_checked(
        self, list_id: str, position: int, checked: bool
    ) -> ShoppingList | None:
        return self._update_item(
            list_id, position, lambda item: replace(item, checked=checked)
        )

    def cancel(self, list_id: str, position: int) -> ShoppingList | None:
        """Mark an item as not to be bought."""
        return self._update_item(
            list_id,
            position,
            lambda item: replace(item, canceled=True, checked=False),
        )

    def restore(self, list_id: str, position: int) -> ShoppingList | None:
        return self._update_item(
            list_id,
            position,
            lambda item: replace(item, canceled=False, checked=False),
        )

    def subtract_on_hand(
        self, list_id: str, position: int, on_hand: float
    ) -> ShoppingList | None:
        """Reduce an item by what is already at home.

        The item is canceled when nothing is left to buy.
        """
        check_quantity(on_hand, "quantity on hand")

        def _subtract(item: ShoppingListItem) -> ShoppingListItem:
            remaining = item.quantity - on_hand
            return replace(
                item,
                quantity=max(remaining, 0.0),
                canceled=remaining <= 0,
                checked=False,
            )

        return self._update_item(list_id, position, _subtract)

    def _update_item(
        self,
        list_id: str,
        position: int,
        update: Callable[[ShoppingListItem], ShoppingListItem],
    ) -> ShoppingList | None:
        shopping_list = self.repository.load_shopping_list(list_id)
        if shopping_list is None:
            return None
        if not 0 <= position < len(shopping_list.items):
            raise IndexError(f"No item at position {position}")
        items = list(shopping_list.items)
        items[position] = update(items[position])
        return self._save(shopping_list, items)

    def _save(
        self, shopping_list: ShoppingList, items: list[ShoppingListItem]
    ) -> ShoppingList:
        updated = replace(shopping_list, items=items, updated_at=datetime.now(tz=UTC))
        self.repository.save_shopping_list(updated)
        return updated
