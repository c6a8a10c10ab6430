"""Recursive expansion of dishes into leaf ingredient lines."""

from dataclasses import dataclass

from recipe2shop.domain.dishes import Composite, IngredientLine
from recipe2shop.domain.errors import (
    CompositionCycleError,
    DishNotFoundError,
    InvalidQuantityError,
)
from recipe2shop.services.catalog import CatalogResolver, check_quantity


@dataclass
class DishExpander:
    """Expands dishes through composite membership into ingredient lines.

    Expansion reads only the in-memory catalog held by the resolver and
    never merges lines; merging happens once, at aggregation time.
    """

    resolver: CatalogResolver

    def expand(
        self,
        dish_id: str,
        servings_requested: float,
        visiting: tuple[str, ...] = (),
    ) -> list[IngredientLine]:
        """Return the unmerged ingredient lines for servings of a dish.

        ``visiting`` is the chain of composite ancestors of ``dish_id``.
        A dish may appear in several sibling branches but never inside
        itself.
        """
        dish = self.resolver.catalog.get_dish(dish_id)
        if dish is None:
            raise DishNotFoundError(dish_id)
        if dish_id in visiting:
            start = visiting.index(dish_id)
            raise CompositionCycleError([*visiting[start:], dish_id])
        check_quantity(servings_requested, f"servings of dish {dish_id}")

        lines = [
            line.scaled(servings_requested)
            for line in self.resolver.resolve_base(dish)
        ]
        if not isinstance(dish.source, Composite):
            return lines

        path = (*visiting, dish_id)
        # Component quantities are fixed headcounts, independent of the
        # servings requested for the composite.
        for component in sorted(dish.source.components, key=lambda c: c.order):
            if component.quantity < 1:
                raise InvalidQuantityError(
                    f"component {component.contained_dish_id} of dish {dish_id}: "
                    f"{component.quantity!r}"
                )
            lines.extend(
                self.expand(component.contained_dish_id, component.quantity, path)
            )
        return lines
