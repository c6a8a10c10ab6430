"""Dish catalog loading and per-serving ingredient resolution."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from recipe2shop.domain.dishes import (
    DEFAULT_UNIT,
    Composite,
    Dish,
    IngredientLine,
    RecipeIngredients,
    RecipeLinked,
    Standalone,
    normalize_unit,
)
from recipe2shop.domain.errors import InvalidQuantityError, RecipeNotFoundError


class CatalogRepository(Protocol):
    """Persistence interface for dishes and recipes."""

    def load_dish(self, dish_id: str) -> Dish | None:
        """Return a dish by id, if present."""

    def load_recipe_ingredients(self, recipe_id: str) -> RecipeIngredients | None:
        """Return a recipe's ingredients and servings, if present."""


@dataclass
class Catalog:
    """In-memory snapshot of the dishes and recipes reachable from a plan."""

    dishes: dict[str, Dish] = field(default_factory=dict)
    recipes: dict[str, RecipeIngredients] = field(default_factory=dict)

    def get_dish(self, dish_id: str) -> Dish | None:
        return self.dishes.get(dish_id)

    def get_recipe(self, recipe_id: str) -> RecipeIngredients | None:
        return self.recipes.get(recipe_id)


def load_catalog(repository: CatalogRepository, dish_ids: Iterable[str]) -> Catalog:
    """Load every dish and recipe reachable from the given dish ids.

    Missing dishes and recipes are left out of the snapshot; resolution
    reports them when they are actually needed. Composite cycles do not
    prevent loading since each dish is fetched at most once.
    """
    catalog = Catalog()
    missing: set[str] = set()
    pending = list(dish_ids)
    while pending:
        dish_id = pending.pop()
        if dish_id in catalog.dishes or dish_id in missing:
            continue
        dish = repository.load_dish(dish_id)
        if dish is None:
            missing.add(dish_id)
            continue
        catalog.dishes[dish_id] = dish
        if isinstance(dish.source, Composite):
            pending.extend(
                component.contained_dish_id for component in dish.source.components
            )
        elif isinstance(dish.source, RecipeLinked):
            recipe_id = dish.source.recipe_id
            if recipe_id not in catalog.recipes:
                recipe = repository.load_recipe_ingredients(recipe_id)
                if recipe is not None:
                    catalog.recipes[recipe_id] = recipe
    return catalog


@dataclass
class CatalogResolver:
    """Resolves the base ingredients of a single dish for one serving."""

    catalog: Catalog
    default_unit: str = DEFAULT_UNIT

    def resolve_base(self, dish: Dish) -> list[IngredientLine]:
        """Return the ingredient lines for one serving, ignoring composition."""
        if isinstance(dish.source, Composite):
            return []
        if isinstance(dish.source, RecipeLinked):
            recipe = self.catalog.get_recipe(dish.source.recipe_id)
            if recipe is None:
                raise RecipeNotFoundError(dish.source.recipe_id)
            _check_servings(recipe.servings, f"recipe {recipe.recipe_id} servings")
            return self._per_serving(recipe.lines, recipe.servings, dish)
        if isinstance(dish.source, Standalone):
            _check_servings(dish.servings, f"dish {dish.id} servings")
            return self._per_serving(dish.source.lines, dish.servings, dish)
        raise TypeError(f"Unsupported dish source: {dish.source!r}")

    def _per_serving(
        self, lines: Iterable[IngredientLine], servings: int, dish: Dish
    ) -> list[IngredientLine]:
        resolved = []
        for line in lines:
            check_quantity(line.quantity, f"{line.name} in dish {dish.id}")
            resolved.append(
                IngredientLine(
                    name=line.name.strip(),
                    quantity=line.quantity / servings,
                    unit=normalize_unit(line.unit, self.default_unit),
                    notes=line.notes,
                )
            )
        return resolved


def check_quantity(value: float, context: str) -> None:
    """Raise InvalidQuantityError for negative or non-finite quantities."""
    if not isinstance(value, int | float) or not math.isfinite(value) or value < 0:
        raise InvalidQuantityError(f"{context}: {value!r}")


def _check_servings(servings: int, context: str) -> None:
    if not isinstance(servings, int) or servings < 1:
        raise InvalidQuantityError(f"{context}: {servings!r}")
