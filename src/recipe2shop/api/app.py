"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from recipe2shop.api.menu import router as menu_router
from recipe2shop.api.shopping_lists import router as shopping_lists_router
from recipe2shop.app_logging import configure_logging
from recipe2shop.containers import AppContainer
from recipe2shop.domain.errors import (
    CompositionCycleError,
    DishNotFoundError,
    InvalidQuantityError,
    PersistenceError,
    RecipeNotFoundError,
    UnresolvedReferenceError,
)

UNPROCESSABLE = 422
SERVICE_UNAVAILABLE = 503


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(shopping_lists_router)
    app.include_router(menu_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(UnresolvedReferenceError)
    async def unresolved_reference(
        request: Request, exc: UnresolvedReferenceError
    ) -> JSONResponse:
        logger.warning("Generation failed on %s: %s", request.url.path, exc)
        content: dict[str, object] = {
            "error": "unresolved_reference",
            "detail": str(exc),
        }
        if isinstance(exc, DishNotFoundError):
            content.update(error="dish_not_found", dish_id=exc.dish_id)
        elif isinstance(exc, RecipeNotFoundError):
            content.update(error="recipe_not_found", recipe_id=exc.recipe_id)
        return JSONResponse(status_code=UNPROCESSABLE, content=content)

    @app.exception_handler(CompositionCycleError)
    async def composition_cycle(
        request: Request, exc: CompositionCycleError
    ) -> JSONResponse:
        logger.warning("Generation failed on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=UNPROCESSABLE,
            content={
                "error": "composition_cycle",
                "detail": str(exc),
                "path": exc.path,
            },
        )

    @app.exception_handler(InvalidQuantityError)
    async def invalid_quantity(
        request: Request, exc: InvalidQuantityError
    ) -> JSONResponse:
        logger.warning("Invalid quantity on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=UNPROCESSABLE,
            content={
                "error": "invalid_quantity",
                "detail": str(exc),
                "context": exc.context,
            },
        )

    @app.exception_handler(PersistenceError)
    async def persistence_failure(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.error("Storage failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=SERVICE_UNAVAILABLE,
            content={"error": "persistence", "detail": str(exc)},
        )

    return app
