"""Supabase repository for dishes and recipes."""

from dataclasses import dataclass

from supabase import Client

from recipe2shop.adapters.supabase_errors import (
    parse_count,
    parse_quantity,
    persistence_errors,
)
from recipe2shop.domain.dishes import (
    Composite,
    Dish,
    DishComponent,
    DishSource,
    IngredientLine,
    RecipeIngredients,
    RecipeLinked,
    Standalone,
)
from recipe2shop.services.catalog import CatalogRepository

SOURCE_RECIPE = "recipe"
SOURCE_STANDALONE = "standalone"
SOURCE_COMPOSITE = "composite"


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase-backed repository for the dish catalog."""

    client: Client

    def load_dish(self, dish_id: str) -> Dish | None:
        """Return a dish by id, if present."""
        with persistence_errors("load dish"):
            response = (
                self.client.table("dishes")
                .select("*")
                .eq("id", dish_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return parse_dish(response.data[0])

    def load_recipe_ingredients(self, recipe_id: str) -> RecipeIngredients | None:
        """Return a recipe's ingredient lines and servings, if present."""
        with persistence_errors("load recipe"):
            response = (
                self.client.table("recipes")
                .select("id, name, servings, ingredients")
                .eq("id", recipe_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        row = response.data[0]
        return RecipeIngredients(
            recipe_id=str(row["id"]),
            name=str(row.get("name", "")),
            servings=parse_count(
                row.get("servings"), f"recipe {row['id']} servings"
            ),
            lines=[parse_line(item) for item in row.get("ingredients") or []],
        )


def parse_dish(row: dict[str, object]) -> Dish:
    """Parse a dish row into a domain model.

    Counts are passed through as stored; the resolver rejects servings
    below one when the dish is expanded.
    """
    return Dish(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        servings=parse_count(row.get("servings"), f"dish {row['id']} servings"),
        source=_parse_source(row),
    )


def _parse_source(row: dict[str, object]) -> DishSource:
    source_type = row.get("source_type")
    if source_type == SOURCE_RECIPE:
        return RecipeLinked(recipe_id=str(row["recipe_id"]))
    if source_type == SOURCE_COMPOSITE:
        components = [
            DishComponent(
                contained_dish_id=str(item["dish_id"]),
                quantity=parse_count(
                    item.get("quantity"),
                    f"component {item['dish_id']} of dish {row['id']}",
                ),
                order=int(item.get("order", index)),
            )
            for index, item in enumerate(row.get("components") or [])
        ]
        return Composite(components=tuple(components))
    if source_type == SOURCE_STANDALONE:
        lines = [parse_line(item) for item in row.get("ingredients") or []]
        return Standalone(lines=tuple(lines))
    raise ValueError(f"Unknown dish source type: {source_type!r}")


def parse_line(item: dict[str, object]) -> IngredientLine:
    """Parse a stored ingredient line."""
    name = str(item.get("name", ""))
    notes = item.get("notes")
    return IngredientLine(
        name=name,
        quantity=parse_quantity(item.get("quantity"), name),
        unit=str(item.get("unit") or ""),
        notes=str(notes) if notes else None,
    )
