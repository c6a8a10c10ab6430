"""Menu and aisle dictionary endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from recipe2shop.api.auth import require_token
from recipe2shop.api.models import (
    AssignmentRequest,
    CategoryRequest,
    RemoveAssignmentRequest,
)
from recipe2shop.api.payloads import assignment_payload
from recipe2shop.domain.menu import DateRange

if TYPE_CHECKING:
    from recipe2shop.containers import AppContainer

router = APIRouter(tags=["menu"], dependencies=[Depends(require_token)])


@router.get("/menu")
async def list_menu(
    start_date: date, end_date: date, request: Request
) -> dict[str, object]:
    """Return menu assignments in a date range."""
    container: AppContainer = request.app.state.container
    assignments = container.menu_service.list_between(
        _range(start_date, end_date)
    )
    return {"assignments": [assignment_payload(item) for item in assignments]}


@router.get("/menu/missing")
async def missing_meals(
    start_date: date, end_date: date, request: Request
) -> dict[str, object]:
    """Return lunch and dinner slots with nothing scheduled."""
    container: AppContainer = request.app.state.container
    missing = container.menu_service.missing_meals(_range(start_date, end_date))
    return {
        "missing": [
            {"date": day.isoformat(), "meal_type": meal_type}
            for day, meal_type in missing
        ]
    }


@router.post("/menu/assignments", status_code=status.HTTP_201_CREATED)
async def add_assignment(
    body: AssignmentRequest, request: Request
) -> dict[str, object]:
    """Schedule a dish, replacing the slot's dishes when requested."""
    container: AppContainer = request.app.state.container
    schedule = (
        container.menu_service.assign if body.replace else container.menu_service.add
    )
    try:
        assignment = schedule(body.date, body.meal_type, body.dish_id, body.portions)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return assignment_payload(assignment)


@router.delete("/menu/assignments", status_code=status.HTTP_204_NO_CONTENT)
async def remove_assignment(body: RemoveAssignmentRequest, request: Request) -> None:
    container: AppContainer = request.app.state.container
    container.menu_service.remove(body.date, body.meal_type, body.dish_id)


@router.get("/categories")
async def list_categories(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return {"categories": container.category_service.list_categories()}


@router.put("/categories/{ingredient}")
async def set_category(
    ingredient: str, body: CategoryRequest, request: Request
) -> dict[str, str]:
    """Assign an aisle to an ingredient."""
    container: AppContainer = request.app.state.container
    container.category_service.set_category(ingredient, body.category)
    return {"ingredient": ingredient.strip(), "category": body.category.strip()}


@router.delete("/categories/{ingredient}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_category(ingredient: str, request: Request) -> None:
    container: AppContainer = request.app.state.container
    container.category_service.remove_category(ingredient)


@router.get("/aisles")
async def list_aisles(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return {"aisles": container.category_service.list_aisles()}


def _range(start_date: date, end_date: date) -> DateRange:
    try:
        return DateRange(start_date, end_date)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
