"""Translation of Supabase client failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from postgrest.exceptions import APIError

from recipe2shop.domain.errors import InvalidQuantityError, PersistenceError


@contextmanager
def persistence_errors(operation: str) -> Iterator[None]:
    """Re-raise client, HTTP and network failures as PersistenceError."""
    try:
        yield
    except (APIError, httpx.HTTPError, OSError) as exc:
        raise PersistenceError(operation) from exc


def parse_quantity(raw: object, context: str) -> float:
    """Read a stored quantity, rejecting missing and non-numeric values."""
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise InvalidQuantityError(f"{context}: {raw!r}")
    return float(raw)


def parse_count(raw: object, context: str) -> int:
    """Read a stored whole-number count such as servings or portions."""
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise InvalidQuantityError(f"{context}: {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise InvalidQuantityError(f"{context}: {raw!r}")
    return int(raw)
