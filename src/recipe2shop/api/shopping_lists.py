"""Shopping list endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from recipe2shop.api.auth import require_token
from recipe2shop.api.models import (
    CheckRequest,
    DateRangeRequest,
    ManualItemRequest,
    OnHandRequest,
)
from recipe2shop.api.payloads import shopping_list_payload, shopping_list_summary
from recipe2shop.domain.menu import DateRange
from recipe2shop.services.export import render_markdown

if TYPE_CHECKING:
    from collections.abc import Callable

    from recipe2shop.containers import AppContainer
    from recipe2shop.domain.shopping import ShoppingList

router = APIRouter(
    prefix="/shopping-lists",
    tags=["shopping-lists"],
    dependencies=[Depends(require_token)],
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_shopping_list(
    body: DateRangeRequest, request: Request
) -> dict[str, object]:
    """Generate a shopping list from the menu over a date range."""
    container: AppContainer = request.app.state.container
    shopping_list = container.shopping_list_service.create(
        DateRange(body.start_date, body.end_date)
    )
    return shopping_list_payload(shopping_list)


@router.get("")
async def list_shopping_lists(request: Request) -> dict[str, object]:
    """Return stored shopping lists, newest first."""
    container: AppContainer = request.app.state.container
    lists = container.shopping_list_service.list_all()
    return {"shopping_lists": [shopping_list_summary(item) for item in lists]}


@router.get("/{list_id}")
async def get_shopping_list(list_id: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return shopping_list_payload(
        _found(container.shopping_list_service.get(list_id))
    )


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shopping_list(list_id: str, request: Request) -> None:
    container: AppContainer = request.app.state.container
    _found(container.shopping_list_service.get(list_id))
    container.shopping_list_service.delete(list_id)


@router.post("/{list_id}/regenerate")
async def regenerate_shopping_list(
    list_id: str, request: Request
) -> dict[str, object]:
    """Recompute a list from the current menu, keeping checked items."""
    container: AppContainer = request.app.state.container
    return shopping_list_payload(
        _found(container.shopping_list_service.refresh(list_id))
    )


@router.get("/{list_id}/export", response_class=PlainTextResponse)
async def export_shopping_list(list_id: str, request: Request) -> PlainTextResponse:
    """Render a list as Markdown."""
    container: AppContainer = request.app.state.container
    shopping_list = _found(container.shopping_list_service.get(list_id))
    return PlainTextResponse(
        render_markdown(shopping_list), media_type="text/markdown"
    )


@router.post("/{list_id}/items", status_code=status.HTTP_201_CREATED)
async def add_manual_item(
    list_id: str, body: ManualItemRequest, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    shopping_list = container.shopping_list_service.add_manual_item(
        list_id,
        name=body.name,
        quantity=body.quantity,
        unit=body.unit,
        category=body.category,
    )
    return shopping_list_payload(_found(shopping_list))


@router.post("/{list_id}/items/{position}/check")
async def check_item(
    list_id: str, position: int, body: CheckRequest, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    service = container.shopping_list_service
    return _item_update(lambda: service.set_checked(list_id, position, body.checked))


@router.post("/{list_id}/items/{position}/cancel")
async def cancel_item(
    list_id: str, position: int, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    service = container.shopping_list_service
    return _item_update(lambda: service.cancel(list_id, position))


@router.post("/{list_id}/items/{position}/restore")
async def restore_item(
    list_id: str, position: int, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    service = container.shopping_list_service
    return _item_update(lambda: service.restore(list_id, position))


@router.post("/{list_id}/items/{position}/on-hand")
async def subtract_on_hand(
    list_id: str, position: int, body: OnHandRequest, request: Request
) -> dict[str, object]:
    """Reduce an item by the quantity already at home."""
    container: AppContainer = request.app.state.container
    service = container.shopping_list_service
    return _item_update(
        lambda: service.subtract_on_hand(list_id, position, body.quantity)
    )


def _found(shopping_list: ShoppingList | None) -> ShoppingList:
    if shopping_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return shopping_list


def _item_update(update: Callable[[], ShoppingList | None]) -> dict[str, object]:
    try:
        shopping_list = update()
    except IndexError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return shopping_list_payload(_found(shopping_list))
