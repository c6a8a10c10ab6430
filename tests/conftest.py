"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from recipe2shop.config import Settings
from recipe2shop.containers import AppContainer
from recipe2shop.domain.dishes import (
    Composite,
    Dish,
    DishComponent,
    IngredientLine,
    RecipeIngredients,
    RecipeLinked,
    Standalone,
)
from recipe2shop.domain.menu import DateRange, MenuAssignment
from recipe2shop.domain.shopping import ShoppingList
from recipe2shop.services.catalog import CatalogRepository
from recipe2shop.services.categories import CategoryRepository, CategoryService
from recipe2shop.services.menu import MenuRepository, MenuService
from recipe2shop.services.shopping import (
    ShoppingListAggregator,
    ShoppingListRepository,
)
from recipe2shop.services.shopping_lists import ShoppingListService


def line(name: str, quantity: float, unit: str) -> IngredientLine:
    return IngredientLine(name=name, quantity=quantity, unit=unit)


def standalone(
    dish_id: str, lines: list[IngredientLine], servings: int = 1, name: str = ""
) -> Dish:
    return Dish(
        id=dish_id,
        name=name or dish_id,
        servings=servings,
        source=Standalone(lines=tuple(lines)),
    )


def composite(
    dish_id: str, components: list[tuple[str, int]], name: str = ""
) -> Dish:
    return Dish(
        id=dish_id,
        name=name or dish_id,
        servings=1,
        source=Composite(
            components=tuple(
                DishComponent(contained_dish_id=child, quantity=quantity, order=index)
                for index, (child, quantity) in enumerate(components)
            )
        ),
    )


def recipe_linked(dish_id: str, recipe_id: str, name: str = "") -> Dish:
    return Dish(
        id=dish_id,
        name=name or dish_id,
        servings=1,
        source=RecipeLinked(recipe_id=recipe_id),
    )


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory dish and recipe store for tests."""

    dishes: dict[str, Dish] = field(default_factory=dict)
    recipes: dict[str, RecipeIngredients] = field(default_factory=dict)
    dish_loads: list[str] = field(default_factory=list)

    def add(self, *dishes: Dish) -> None:
        for dish in dishes:
            self.dishes[dish.id] = dish

    def add_recipe(
        self, recipe_id: str, servings: int, lines: list[IngredientLine]
    ) -> None:
        self.recipes[recipe_id] = RecipeIngredients(
            recipe_id=recipe_id, name=recipe_id, servings=servings, lines=lines
        )

    def load_dish(self, dish_id: str) -> Dish | None:
        self.dish_loads.append(dish_id)
        return self.dishes.get(dish_id)

    def load_recipe_ingredients(self, recipe_id: str) -> RecipeIngredients | None:
        return self.recipes.get(recipe_id)


@dataclass
class InMemoryMenuRepository(MenuRepository):
    """In-memory menu assignments kept in recording order."""

    assignments: list[MenuAssignment] = field(default_factory=list)

    def load_menu_assignments(self, date_range: DateRange) -> list[MenuAssignment]:
        return [item for item in self.assignments if item.date in date_range]

    def add_assignment(self, assignment: MenuAssignment) -> None:
        self.assignments.append(assignment)

    def remove_assignments(
        self, day: date, meal_type: str, dish_id: str | None = None
    ) -> None:
        self.assignments = [
            item
            for item in self.assignments
            if not (
                item.date == day
                and item.meal_type == meal_type
                and (dish_id is None or item.dish_id == dish_id)
            )
        ]


@dataclass
class InMemoryCategoryRepository(CategoryRepository):
    """In-memory aisle dictionary that counts reads."""

    entries: dict[str, str] = field(default_factory=dict)
    reads: int = 0

    def load_category_dictionary(self) -> dict[str, str]:
        self.reads += 1
        return dict(self.entries)

    def set_category(self, ingredient: str, category: str) -> None:
        self.entries[ingredient] = category

    def remove_category(self, ingredient: str) -> None:
        self.entries.pop(ingredient, None)


@dataclass
class InMemoryShoppingListRepository(ShoppingListRepository):
    """In-memory shopping list store."""

    lists: dict[str, ShoppingList] = field(default_factory=dict)

    def load_shopping_list(self, list_id: str) -> ShoppingList | None:
        return self.lists.get(list_id)

    def save_shopping_list(self, shopping_list: ShoppingList) -> None:
        self.lists[shopping_list.id] = shopping_list

    def list_shopping_lists(self) -> list[ShoppingList]:
        return list(self.lists.values())

    def delete_shopping_list(self, list_id: str) -> None:
        self.lists.pop(list_id, None)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        api_token="api-token",
    )


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository()


@pytest.fixture
def menu_repository() -> InMemoryMenuRepository:
    return InMemoryMenuRepository()


@pytest.fixture
def category_repository() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository()


@pytest.fixture
def list_repository() -> InMemoryShoppingListRepository:
    return InMemoryShoppingListRepository()


@pytest.fixture
def menu_service(menu_repository: InMemoryMenuRepository) -> MenuService:
    return MenuService(menu_repository)


@pytest.fixture
def category_service(
    category_repository: InMemoryCategoryRepository,
) -> CategoryService:
    return CategoryService(category_repository)


@pytest.fixture
def aggregator(
    catalog_repository: InMemoryCatalogRepository,
    menu_service: MenuService,
    category_service: CategoryService,
    list_repository: InMemoryShoppingListRepository,
) -> ShoppingListAggregator:
    return ShoppingListAggregator(
        catalog_repository=catalog_repository,
        menu_service=menu_service,
        category_service=category_service,
        list_repository=list_repository,
    )


@pytest.fixture
def shopping_list_service(
    aggregator: ShoppingListAggregator,
    list_repository: InMemoryShoppingListRepository,
) -> ShoppingListService:
    return ShoppingListService(aggregator=aggregator, repository=list_repository)


@pytest.fixture
def container(
    settings: Settings,
    menu_service: MenuService,
    category_service: CategoryService,
    aggregator: ShoppingListAggregator,
    shopping_list_service: ShoppingListService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        menu_service=menu_service,
        category_service=category_service,
        aggregator=aggregator,
        shopping_list_service=shopping_list_service,
    )
