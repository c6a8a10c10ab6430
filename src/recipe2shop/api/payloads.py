"""JSON payload builders for API responses."""

from recipe2shop.domain.menu import MenuAssignment
from recipe2shop.domain.shopping import ShoppingList, ShoppingListItem


def shopping_list_payload(shopping_list: ShoppingList) -> dict[str, object]:
    return {
        "id": shopping_list.id,
        "start_date": shopping_list.start_date.isoformat(),
        "end_date": shopping_list.end_date.isoformat(),
        "created_at": shopping_list.created_at.isoformat(),
        "updated_at": shopping_list.updated_at.isoformat()
        if shopping_list.updated_at
        else None,
        "items": [
            _item_payload(position, item)
            for position, item in enumerate(shopping_list.items)
        ],
    }


def shopping_list_summary(shopping_list: ShoppingList) -> dict[str, object]:
    """Short description of a list for index views."""
    return {
        "id": shopping_list.id,
        "start_date": shopping_list.start_date.isoformat(),
        "end_date": shopping_list.end_date.isoformat(),
        "created_at": shopping_list.created_at.isoformat(),
        "item_count": len(shopping_list.items),
        "remaining": sum(
            1 for item in shopping_list.items if not item.checked and not item.canceled
        ),
    }


def _item_payload(position: int, item: ShoppingListItem) -> dict[str, object]:
    return {
        "position": position,
        "name": item.ingredient_name,
        "quantity": item.quantity,
        "unit": item.unit,
        "category": item.category,
        "checked": item.checked,
        "canceled": item.canceled,
        "manual": item.is_manual,
        "sources": [
            {
                "date": source.date.isoformat(),
                "meal_type": source.meal_type,
                "dish_name": source.dish_name,
                "quantity": source.quantity,
            }
            for source in item.sources
        ],
    }


def assignment_payload(assignment: MenuAssignment) -> dict[str, object]:
    return {
        "date": assignment.date.isoformat(),
        "meal_type": assignment.meal_type,
        "dish_id": assignment.dish_id,
        "portions": assignment.portions,
    }
