from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from recipes_api.app.deps import get_recipe_store
from recipes_api.app.domain.errors import RecipeNotFoundError
from recipes_api.app.schemas.recipes import MessageResponse, RecipeRequest, RecipeResponse
from recipes_api.app.services.recipe_store import RecipeStoreBase

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("", response_model=RecipeResponse)
def create_recipe(
    payload: RecipeRequest,
    store: RecipeStoreBase = Depends(get_recipe_store),
) -> RecipeResponse:
    recipe = store.insert(payload.to_draft())
    return RecipeResponse.from_recipe(recipe)


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    store: RecipeStoreBase = Depends(get_recipe_store),
) -> list[RecipeResponse]:
    return [RecipeResponse.from_recipe(recipe) for recipe in store.list_all()]


# Declared before /{recipe_id} so "search" is not taken for an id
@router.get("/search", response_model=list[RecipeResponse])
def search_recipes(
    tag: str = Query("", description="Tag to match, case-insensitive"),
    store: RecipeStoreBase = Depends(get_recipe_store),
) -> list[RecipeResponse]:
    recipes = store.search_by_tag(tag)
    logger.debug("Tag search: tag=%s, matches=%d", tag, len(recipes))
    return [RecipeResponse.from_recipe(recipe) for recipe in recipes]


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: str,
    store: RecipeStoreBase = Depends(get_recipe_store),
) -> RecipeResponse:
    try:
        recipe = store.get(recipe_id)
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return RecipeResponse.from_recipe(recipe)


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: str,
    payload: RecipeRequest,
    store: RecipeStoreBase = Depends(get_recipe_store),
) -> RecipeResponse:
    try:
        recipe = store.update(recipe_id, payload.to_draft())
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return RecipeResponse.from_recipe(recipe)


@router.delete("/{recipe_id}", response_model=MessageResponse)
def delete_recipe(
    recipe_id: str,
    store: RecipeStoreBase = Depends(get_recipe_store),
) -> MessageResponse:
    try:
        store.delete(recipe_id)
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return MessageResponse(message="Recipe has been deleted")
