"""Tests for the menu assignment index."""

from datetime import date

import pytest

from recipe2shop.domain.errors import InvalidQuantityError
from recipe2shop.domain.menu import DateRange
from recipe2shop.services.menu import MenuService
from tests.conftest import InMemoryMenuRepository


def test_assign_replaces_slot_and_add_appends() -> None:
    repository = InMemoryMenuRepository()
    service = MenuService(repository)
    day = date(2024, 1, 1)

    service.add(day, "lunch", "soup")
    service.add(day, "lunch", "bread")
    service.assign(day, "lunch", "salad", portions=2)

    assignments = service.list_between(DateRange(day, day))
    assert [(item.dish_id, item.portions) for item in assignments] == [("salad", 2)]


def test_multiple_dishes_per_slot_are_allowed() -> None:
    service = MenuService(InMemoryMenuRepository())
    day = date(2024, 1, 1)

    service.add(day, "dinner", "steak")
    service.add(day, "dinner", "fries")

    assert len(service.list_between(DateRange(day, day))) == 2


def test_list_between_orders_by_day_then_meal_then_recording() -> None:
    service = MenuService(InMemoryMenuRepository())
    service.add(date(2024, 1, 2), "lunch", "d2-lunch")
    service.add(date(2024, 1, 1), "dinner", "d1-dinner-a")
    service.add(date(2024, 1, 1), "lunch", "d1-lunch")
    service.add(date(2024, 1, 1), "dinner", "d1-dinner-b")
    service.add(date(2024, 1, 5), "lunch", "outside")

    assignments = service.list_between(DateRange(date(2024, 1, 1), date(2024, 1, 2)))

    assert [item.dish_id for item in assignments] == [
        "d1-lunch",
        "d1-dinner-a",
        "d1-dinner-b",
        "d2-lunch",
    ]


def test_remove_only_targets_one_dish() -> None:
    service = MenuService(InMemoryMenuRepository())
    day = date(2024, 1, 1)
    service.add(day, "dinner", "steak")
    service.add(day, "dinner", "fries")

    service.remove(day, "dinner", "fries")

    assert [item.dish_id for item in service.list_between(DateRange(day, day))] == [
        "steak"
    ]


def test_missing_meals_lists_empty_lunch_and_dinner_slots() -> None:
    service = MenuService(InMemoryMenuRepository())
    service.add(date(2024, 1, 1), "lunch", "soup")
    service.add(date(2024, 1, 2), "breakfast", "toast")
    service.add(date(2024, 1, 2), "dinner", "pasta")

    missing = service.missing_meals(DateRange(date(2024, 1, 1), date(2024, 1, 2)))

    assert missing == [
        (date(2024, 1, 1), "dinner"),
        (date(2024, 1, 2), "lunch"),
    ]


def test_invalid_assignments_are_rejected() -> None:
    service = MenuService(InMemoryMenuRepository())

    with pytest.raises(ValueError):
        service.add(date(2024, 1, 1), "brunch", "eggs")
    with pytest.raises(InvalidQuantityError):
        service.add(date(2024, 1, 1), "lunch", "eggs", portions=0)


def test_date_range_rejects_reversed_bounds() -> None:
    with pytest.raises(ValueError):
        DateRange(date(2024, 1, 3), date(2024, 1, 1))
