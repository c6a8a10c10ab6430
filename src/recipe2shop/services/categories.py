"""Shopping aisle (rayon) resolution for ingredients."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from recipe2shop.domain.dishes import normalize_name

DEFAULT_CATEGORY = "Autres"

DEFAULT_AISLES = (
    "Autres",
    "Boulangerie",
    "Crèmerie",
    "Épicerie salée",
    "Épicerie sucrée",
    "Fruits et légumes",
    "Poissonnerie",
    "Boucherie",
    "Boissons",
    "Surgelés",
    "Conserves",
    "Huiles et condiments",
)


class CategoryRepository(Protocol):
    """Persistence interface for the ingredient to aisle dictionary."""

    def load_category_dictionary(self) -> dict[str, str]:
        """Return the full ingredient name to aisle mapping."""

    def set_category(self, ingredient: str, category: str) -> None:
        """Create or replace the aisle for an ingredient."""

    def remove_category(self, ingredient: str) -> None:
        """Remove an ingredient from the dictionary."""


class CategoryResolver:
    """Maps ingredient names to aisles from a dictionary snapshot."""

    def __init__(
        self, dictionary: Mapping[str, str], default_category: str = DEFAULT_CATEGORY
    ) -> None:
        self._entries = {
            normalize_name(name): category
            for name, category in dictionary.items()
            if normalize_name(name)
        }
        self.default_category = default_category

    def category_for(self, ingredient_name: str) -> str:
        """Return the aisle for an ingredient, trying the full name then tokens."""
        normalized = normalize_name(ingredient_name)
        category = self._entries.get(normalized)
        if category:
            return category
        for token in normalized.split():
            category = self._entries.get(token)
            if category:
                return category
        return self.default_category


@dataclass
class CategoryService:
    """Application service for the editable aisle dictionary."""

    repository: CategoryRepository
    default_category: str = DEFAULT_CATEGORY

    def snapshot(self) -> CategoryResolver:
        """Read the dictionary once and return a resolver bound to it."""
        return CategoryResolver(
            self.repository.load_category_dictionary(), self.default_category
        )

    def list_categories(self) -> dict[str, str]:
        return self.repository.load_category_dictionary()

    def set_category(self, ingredient: str, category: str) -> None:
        """Assign an aisle to an ingredient."""
        name = ingredient.strip()
        aisle = category.strip() or self.default_category
        if not name:
            raise ValueError("Ingredient name must not be blank")
        self.repository.set_category(name, aisle)

    def remove_category(self, ingredient: str) -> None:
        self.repository.remove_category(ingredient.strip())

    def list_aisles(self) -> list[str]:
        """Return known aisles: the default seed plus every assigned aisle."""
        seen: dict[str, str] = {}
        dictionary = self.repository.load_category_dictionary()
        candidates = [*DEFAULT_AISLES, *dictionary.values()]
        for aisle in candidates:
            cleaned = aisle.strip()
            if cleaned and cleaned.casefold() not in seen:
                seen[cleaned.casefold()] = cleaned
        return sorted(seen.values(), key=str.casefold)

    def rename_aisle(self, old: str, new: str) -> int:
        """Move every ingredient from one aisle to another; return the count."""
        target = new.strip()
        if not target:
            raise ValueError("Aisle name must not be blank")
        count = 0
        for ingredient, category in self.repository.load_category_dictionary().items():
            if category.strip().casefold() == old.strip().casefold():
                self.repository.set_category(ingredient, target)
                count += 1
        return count
