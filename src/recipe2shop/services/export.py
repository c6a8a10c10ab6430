"""Plain-text rendering of shopping lists."""

from collections import defaultdict

from recipe2shop.domain.shopping import ShoppingList, ShoppingListItem

CANCELED_SECTION = "Canceled"


def format_quantity(value: float) -> str:
    """Format a quantity as an integer when whole, else with two decimals."""
    if abs(value - round(value)) < 0.0001:
        return str(int(round(value)))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def render_markdown(shopping_list: ShoppingList) -> str:
    """Render a list as Markdown grouped by category."""
    by_category: dict[str, list[ShoppingListItem]] = defaultdict(list)
    canceled: list[ShoppingListItem] = []
    for item in shopping_list.items:
        if item.canceled:
            canceled.append(item)
        else:
            by_category[item.category].append(item)

    lines = [
        f"# Shopping list {shopping_list.start_date.isoformat()} - "
        f"{shopping_list.end_date.isoformat()}",
        "",
    ]
    for category in sorted(by_category, key=str.casefold):
        lines.append(f"## {category}")
        lines.extend(_render_item(item) for item in by_category[category])
        lines.append("")
    if canceled:
        lines.append(f"## {CANCELED_SECTION}")
        lines.extend(_render_item(item) for item in canceled)
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def _render_item(item: ShoppingListItem) -> str:
    mark = "x" if item.checked else " "
    return (
        f"- [{mark}] {item.ingredient_name}: "
        f"{format_quantity(item.quantity)} {item.unit}"
    )
