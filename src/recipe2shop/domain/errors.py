"""Error taxonomy for dish expansion and shopping list generation."""


class Recipe2ShopError(Exception):
    """Base class for all domain errors."""


class UnresolvedReferenceError(Recipe2ShopError):
    """A dish or recipe reference could not be resolved."""


class DishNotFoundError(UnresolvedReferenceError):
    """Raised when a dish id is absent from the catalog."""

    def __init__(self, dish_id: str) -> None:
        super().__init__(f"Dish not found: {dish_id}")
        self.dish_id = dish_id


class RecipeNotFoundError(UnresolvedReferenceError):
    """Raised when a recipe-linked dish points at a missing recipe."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id


class CompositionCycleError(Recipe2ShopError):
    """Raised when composite dishes contain themselves."""

    def __init__(self, path: list[str]) -> None:
        super().__init__("Composition cycle: " + " -> ".join(path))
        self.path = path


class InvalidQuantityError(Recipe2ShopError):
    """Raised for negative, NaN or otherwise unusable quantities."""

    def __init__(self, context: str) -> None:
        super().__init__(f"Invalid quantity: {context}")
        self.context = context


class PersistenceError(Recipe2ShopError):
    """Raised by storage adapters when a read or write fails."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Persistence failure: {operation}")
        self.operation = operation
