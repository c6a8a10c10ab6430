"""ASGI entrypoint for the recipe2shop API."""

from recipe2shop.api.app import create_app
from recipe2shop.containers import build_container

app = create_app(build_container())
