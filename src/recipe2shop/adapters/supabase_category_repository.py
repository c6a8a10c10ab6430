"""Supabase repository for the ingredient aisle dictionary."""

from dataclasses import dataclass

from supabase import Client

from recipe2shop.adapters.supabase_errors import persistence_errors
from recipe2shop.domain.errors import PersistenceError
from recipe2shop.services.categories import CategoryRepository


@dataclass
class SupabaseCategoryRepository(CategoryRepository):
    """Supabase-backed ingredient categories."""

    client: Client

    def load_category_dictionary(self) -> dict[str, str]:
        """Return the ingredient to aisle mapping."""
        with persistence_errors("load ingredient categories"):
            response = (
                self.client.table("ingredient_categories")
                .select("ingredient, category")
                .execute()
            )
        return {
            str(row["ingredient"]): str(row.get("category", ""))
            for row in response.data or []
        }

    def set_category(self, ingredient: str, category: str) -> None:
        """Upsert the aisle of an ingredient."""
        with persistence_errors("save ingredient category"):
            response = (
                self.client.table("ingredient_categories")
                .upsert(
                    {"ingredient": ingredient, "category": category},
                    on_conflict="ingredient",
                )
                .execute()
            )
        if not response.data:
            raise PersistenceError("save ingredient category")

    def remove_category(self, ingredient: str) -> None:
        """Delete an ingredient from the dictionary."""
        with persistence_errors("delete ingredient category"):
            self.client.table("ingredient_categories").delete().eq(
                "ingredient", ingredient
            ).execute()
