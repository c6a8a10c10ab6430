"""Tests for recursive dish expansion."""

from collections import Counter

import pytest

from recipe2shop.domain.dishes import Composite, Dish, DishComponent
from recipe2shop.domain.errors import (
    CompositionCycleError,
    DishNotFoundError,
    InvalidQuantityError,
)
from recipe2shop.services.catalog import CatalogResolver, load_catalog
from recipe2shop.services.composition import DishExpander
from tests.conftest import (
    InMemoryCatalogRepository,
    composite,
    line,
    recipe_linked,
    standalone,
)


def _expander(repository: InMemoryCatalogRepository, *roots: str) -> DishExpander:
    return DishExpander(CatalogResolver(load_catalog(repository, roots)))


def _totals(lines) -> Counter:  # type: ignore[no-untyped-def]
    totals: Counter = Counter()
    for item in lines:
        totals[(item.name, item.unit)] += item.quantity
    return totals


def test_menu_scenario_expands_components_by_headcount() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(
        composite("menu", [("salade", 1), ("poulet", 2)], name="Menu"),
        standalone("salade", [line("tomato", 4, "pcs")], servings=2),
        standalone("poulet", [line("chicken", 1, "kg")], servings=1),
    )

    lines = _expander(repository, "menu").expand("menu", 1)

    assert _totals(lines) == {("tomato", "pcs"): 2.0, ("chicken", "kg"): 2.0}


def test_base_dish_scales_linearly() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(
        standalone(
            "soup", [line("leek", 3, "pcs"), line("stock", 1.5, "l")], servings=3
        )
    )
    expander = _expander(repository, "soup")

    single = expander.expand("soup", 2)
    double = expander.expand("soup", 4)

    assert [item.quantity * 2 for item in single] == pytest.approx(
        [item.quantity for item in double]
    )


def test_component_headcount_ignores_parent_servings() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(
        composite("meal", [("cake", 3)]),
        standalone("cake", [line("flour", 200, "g")], servings=4),
    )
    expander = _expander(repository, "meal")

    child = expander.expand("cake", 1)
    once = expander.expand("meal", 1)
    many = expander.expand("meal", 5)

    assert _totals(once) == {("flour", "g"): pytest.approx(3 * child[0].quantity)}
    assert _totals(many) == _totals(once)


def test_components_expand_in_ascending_order() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(
        Dish(
            id="meal",
            name="Meal",
            servings=1,
            source=Composite(
                components=(
                    DishComponent(contained_dish_id="dessert", quantity=1, order=2),
                    DishComponent(contained_dish_id="starter", quantity=1, order=1),
                )
            ),
        ),
        standalone("starter", [line("radish", 1, "bunch")]),
        standalone("dessert", [line("apple", 2, "pcs")]),
    )

    names = [item.name for item in _expander(repository, "meal").expand("meal", 1)]

    assert names == ["radish", "apple"]


def test_nested_composite_counts_do_not_compound() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(
        composite("week", [("dinner", 2)]),
        composite("dinner", [("gratin", 1), ("bread", 1)]),
        recipe_linked("gratin", "r-gratin"),
        standalone("bread", [line("baguette", 1, "pcs")]),
    )
    repository.add_recipe("r-gratin", 4, [line("potato", 800, "g")])

    lines = _expander(repository, "week").expand("week", 1)

    # "dinner" is requested twice, but its own components are fixed headcounts.
    assert _totals(lines) == {("potato", "g"): 200.0, ("baguette", "pcs"): 1.0}


def test_shared_dish_in_sibling_branches_is_not_a_cycle() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(
        composite("root", [("left", 1), ("right", 1)]),
        composite("left", [("sauce", 1)]),
        composite("right", [("sauce", 1)]),
        standalone("sauce", [line("cream", 10, "cl")]),
    )

    lines = _expander(repository, "root").expand("root", 1)

    assert _totals(lines) == {("cream", "cl"): 20.0}


def test_self_containing_dish_raises_cycle() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(composite("loop", [("loop", 1)]))

    with pytest.raises(CompositionCycleError) as excinfo:
        _expander(repository, "loop").expand("loop", 1)

    assert excinfo.value.path == ["loop", "loop"]


def test_indirect_cycle_names_the_path() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(
        composite("root", [("a", 1)]),
        composite("a", [("b", 1)]),
        composite("b", [("c", 1)]),
        composite("c", [("a", 1)]),
    )

    with pytest.raises(CompositionCycleError) as excinfo:
        _expander(repository, "root").expand("root", 1)

    assert excinfo.value.path == ["a", "b", "c", "a"]


def test_missing_dish_raises() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(composite("menu", [("ghost", 1)]))

    with pytest.raises(DishNotFoundError) as excinfo:
        _expander(repository, "menu").expand("menu", 1)

    assert excinfo.value.dish_id == "ghost"


def test_zero_component_quantity_is_rejected() -> None:
    repository = InMemoryCatalogRepository()
    repository.add(
        composite("menu", [("salade", 0)]),
        standalone("salade", [line("lettuce", 1, "pcs")]),
    )

    with pytest.raises(InvalidQuantityError):
        _expander(repository, "menu").expand("menu", 1)
