"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from recipe2shop.adapters.supabase_catalog_repository import SupabaseCatalogRepository
from recipe2shop.adapters.supabase_category_repository import (
    SupabaseCategoryRepository,
)
from recipe2shop.adapters.supabase_menu_repository import SupabaseMenuRepository
from recipe2shop.adapters.supabase_shopping_list_repository import (
    SupabaseShoppingListRepository,
)
from recipe2shop.config import Settings
from recipe2shop.services.categories import CategoryService
from recipe2shop.services.menu import MenuService
from recipe2shop.services.shopping import ShoppingListAggregator
from recipe2shop.services.shopping_lists import ShoppingListService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    menu_service: MenuService
    category_service: CategoryService
    aggregator: ShoppingListAggregator
    shopping_list_service: ShoppingListService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog_repository = SupabaseCatalogRepository(supabase_client)
    menu_repository = SupabaseMenuRepository(supabase_client)
    category_repository = SupabaseCategoryRepository(supabase_client)
    list_repository = SupabaseShoppingListRepository(supabase_client)

    menu_service = MenuService(menu_repository)
    category_service = CategoryService(
        category_repository, default_category=resolved_settings.default_category
    )
    aggregator = ShoppingListAggregator(
        catalog_repository=catalog_repository,
        menu_service=menu_service,
        category_service=category_service,
        list_repository=list_repository,
        default_unit=resolved_settings.default_unit,
    )
    shopping_list_service = ShoppingListService(
        aggregator=aggregator,
        repository=list_repository,
        default_category=resolved_settings.default_category,
        default_unit=resolved_settings.default_unit,
    )
    return AppContainer(
        settings=resolved_settings,
        menu_service=menu_service,
        category_service=category_service,
        aggregator=aggregator,
        shopping_list_service=shopping_list_service,
    )
