"""Shopping list aggregation from the menu."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from recipe2shop.domain.dishes import DEFAULT_UNIT, normalize_name
from recipe2shop.domain.errors import DishNotFoundError, InvalidQuantityError
from recipe2shop.domain.menu import DateRange, MenuAssignment
from recipe2shop.domain.shopping import MealSource, ShoppingList, ShoppingListItem
from recipe2shop.services.catalog import (
    CatalogRepository,
    CatalogResolver,
    load_catalog,
)
from recipe2shop.services.categories import CategoryResolver, CategoryService
from recipe2shop.services.composition import DishExpander
from recipe2shop.services.menu import MenuService

_logger = logging.getLogger(__name__)


class ShoppingListRepository(Protocol):
    """Persistence interface for shopping lists."""

    def load_shopping_list(self, list_id: str) -> ShoppingList | None:
        """Return a shopping list by id, if present."""

    def save_shopping_list(self, shopping_list: ShoppingList) -> None:
        """Create or replace a shopping list."""

    def list_shopping_lists(self) -> list[ShoppingList]:
        """Return every stored shopping list."""

    def delete_shopping_list(self, list_id: str) -> None:
        """Delete a shopping list by id."""


@dataclass
class _Group:
    name: str
    unit: str
    quantity: float = 0.0
    sources: list[MealSource] = field(default_factory=list)


def build_items(
    assignments: Iterable[MenuAssignment],
    expander: DishExpander,
    categories: CategoryResolver,
) -> list[ShoppingListItem]:
    """Expand assignments and merge their lines into shopping list items.

    Lines merge on normalized name and unit. Quantities are summed and
    every contributing line keeps its own source, in assignment order.
    Items are grouped by category; within a category they keep the
    order in which they were first needed.
    """
    groups: dict[tuple[str, str], _Group] = {}
    for assignment in assignments:
        if assignment.portions < 1:
            raise InvalidQuantityError(
                f"portions for dish {assignment.dish_id} on "
                f"{assignment.date.isoformat()}: {assignment.portions!r}"
            )
        lines = expander.expand(assignment.dish_id, assignment.portions)
        dish = expander.resolver.catalog.get_dish(assignment.dish_id)
        if dish is None:
            raise DishNotFoundError(assignment.dish_id)
        for line in lines:
            key = (normalize_name(line.name), line.unit)
            group = groups.get(key)
            if group is None:
                group = _Group(name=line.name, unit=line.unit)
                groups[key] = group
            group.quantity += line.quantity
            group.sources.append(
                MealSource(
                    date=assignment.date,
                    meal_type=assignment.meal_type,
                    dish_name=dish.name,
                    quantity=line.quantity,
                )
            )

    items = [
        ShoppingListItem(
            ingredient_name=group.name,
            quantity=group.quantity,
            unit=group.unit,
            category=categories.category_for(group.name),
            sources=group.sources,
        )
        for group in groups.values()
    ]
    return sorted(items, key=lambda item: item.category.casefold())


@dataclass
class ShoppingListAggregator:
    """Derives shopping lists from the menu, dishes and aisle dictionary."""

    catalog_repository: CatalogRepository
    menu_service: MenuService
    category_service: CategoryService
    list_repository: ShoppingListRepository
    default_unit: str = DEFAULT_UNIT

    def generate(self, date_range: DateRange) -> ShoppingList:
        """Build a fresh shopping list for the range."""
        assignments = self.menu_service.list_between(date_range)
        items = self._compute_items(assignments, self.category_service.snapshot())
        _logger.info(
            "Generated shopping list: start=%s end=%s assignments=%s items=%s",
            date_range.start.isoformat(),
            date_range.end.isoformat(),
            len(assignments),
            len(items),
        )
        return ShoppingList(
            id=str(uuid4()),
            start_date=date_range.start,
            end_date=date_range.end,
            created_at=datetime.now(tz=UTC),
            items=items,
        )

    def regenerate(self, list_id: str) -> ShoppingList | None:
        """Recompute an existing list, keeping the user's progress.

        Checked and canceled flags carry over to recomputed items with
        the same name and unit. Items no longer needed by the menu are
        dropped. Manual items are kept unchanged after the derived ones,
        including those sharing a name and unit with a derived item.
        """
        existing = self.list_repository.load_shopping_list(list_id)
        if existing is None:
            return None
        assignments = self.menu_service.list_between(
            DateRange(existing.start_date, existing.end_date)
        )
        computed = self._compute_items(assignments, self.category_service.snapshot())

        previous = {item.key: item for item in existing.items if not item.is_manual}
        preserved = 0
        items: list[ShoppingListItem] = []
        for item in computed:
            prior = previous.get(item.key)
            if prior is None:
                items.append(item)
                continue
            if prior.checked or prior.canceled:
                preserved += 1
            items.append(replace(item, checked=prior.checked, canceled=prior.canceled))
        items.extend(item for item in existing.items if item.is_manual)

        _logger.info(
            "Regenerated shopping list: id=%s items=%s preserved_flags=%s",
            list_id,
            len(items),
            preserved,
        )
        return replace(existing, items=items, updated_at=datetime.now(tz=UTC))

    def _compute_items(
        self, assignments: list[MenuAssignment], categories: CategoryResolver
    ) -> list[ShoppingListItem]:
        catalog = load_catalog(
            self.catalog_repository,
            dict.fromkeys(assignment.dish_id for assignment in assignments),
        )
        expander = DishExpander(CatalogResolver(catalog, self.default_unit))
        return build_items(assignments, expander, categories)
