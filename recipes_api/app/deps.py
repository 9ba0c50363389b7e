# recipes_api/app/deps.py

from __future__ import annotations

from fastapi import Request

from recipes_api.app.services.recipe_store import RecipeStoreBase


def get_recipe_store(request: Request) -> RecipeStoreBase:
    """The store built by create_app, shared by every request."""
    return request.app.state.recipe_store
