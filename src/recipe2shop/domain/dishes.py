"""Domain models for dishes and their ingredient sources."""

from dataclasses import dataclass, field

DEFAULT_UNIT = "piece"


@dataclass(frozen=True)
class IngredientLine:
    """A quantity of one ingredient."""

    name: str
    quantity: float
    unit: str
    notes: str | None = None

    def scaled(self, factor: float) -> "IngredientLine":
        """Return a copy with the quantity multiplied by factor."""
        return IngredientLine(
            name=self.name,
            quantity=self.quantity * factor,
            unit=self.unit,
            notes=self.notes,
        )


@dataclass(frozen=True)
class RecipeLinked:
    """Dish whose ingredients come from a stored recipe."""

    recipe_id: str


@dataclass(frozen=True)
class Standalone:
    """Dish carrying its own ingredient lines for its servings baseline."""

    lines: tuple[IngredientLine, ...] = ()


@dataclass(frozen=True)
class DishComponent:
    """Membership of a dish inside a composite dish."""

    contained_dish_id: str
    quantity: int = 1
    order: int = 0


@dataclass(frozen=True)
class Composite:
    """Dish defined entirely by other dishes."""

    components: tuple[DishComponent, ...] = ()


DishSource = RecipeLinked | Standalone | Composite


@dataclass(frozen=True)
class Dish:
    """A schedulable meal unit."""

    id: str
    name: str
    servings: int
    source: DishSource


@dataclass(frozen=True)
class RecipeIngredients:
    """Ingredient list of a stored recipe with its servings baseline."""

    recipe_id: str
    name: str
    servings: int
    lines: list[IngredientLine] = field(default_factory=list)


def normalize_name(name: str) -> str:
    """Lower-case and trim an ingredient name for identity comparisons."""
    return " ".join(name.lower().split())


def normalize_unit(unit: str | None, default_unit: str = DEFAULT_UNIT) -> str:
    """Trim a unit, substituting the default unit when blank."""
    cleaned = (unit or "").strip()
    return cleaned or default_unit
