from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from recipes_api.app.config import settings
from recipes_api.app.domain.errors import MalformedRecipeError, StorageFaultError
from recipes_api.app.domain.models import Recipe, parse_timestamp
from recipes_api.app.infra.db.base import RecipeRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

_BACKEND_ERRORS = (APIError, httpx.HTTPError, ConnectionError, TimeoutError)


def _string_list(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise MalformedRecipeError(f"Expected a list, got {type(value).__name__}")
    return tuple(str(item) for item in value)


def _row_to_recipe(row: dict[str, Any]) -> Recipe:
    published_at = parse_timestamp(row.get("published_at"))
    if not row.get("id") or published_at is None:
        raise MalformedRecipeError(f"Recipe row missing id or published_at: {row!r}")
    return Recipe(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        published_at=published_at,
        tags=_string_list(row.get("tags")),
        ingredients=_string_list(row.get("ingredients")),
        instructions=_string_list(row.get("instructions")),
    )


class SupabaseRecipeRepository(RecipeRepository):
    def __init__(self, client: Client, table_name: str | None = None):
        self._client = client
        self.table_name = table_name or settings.RECIPES_TABLE
        logger.info("SupabaseRecipeRepository initialized: table=%s", self.table_name)

    def _run(self, operation: str, call: Callable[[], T]) -> T:
        try:
            return call()
        except _BACKEND_ERRORS as error:
            logger.error("Storage error during %s: %s", operation, error)
            raise StorageFaultError(operation, str(error)) from error

    def insert_one(self, recipe: Recipe) -> Recipe:
        result = self._run(
            "insert_one",
            lambda: self._client.table(self.table_name).insert(recipe.to_row()).execute(),
        )
        if not result.data:
            raise StorageFaultError("insert_one", "no row returned")

        logger.debug("Inserted recipe row: id=%s", recipe.id)
        # The row is already committed, so the echoed row is not re-decoded
        return recipe

    def find_all(self) -> list[Recipe]:
        result = self._run(
            "find_all",
            lambda: self._client.table(self.table_name)
            .select("*")
            .order("published_at")
            .execute(),
        )
        return [_row_to_recipe(row) for row in result.data or []]

    def find_by_id(self, recipe_id: str) -> Optional[Recipe]:
        result = self._run(
            "find_by_id",
            lambda: self._client.table(self.table_name)
            .select("*")
            .eq("id", recipe_id)
            .limit(1)
            .execute(),
        )
        if not result.data:
            return None
        return _row_to_recipe(result.data[0])

    def replace_by_id(self, recipe: Recipe) -> bool:
        payload = recipe.to_row()
        # id and published_at are immutable
        del payload["id"]
        del payload["published_at"]
        result = self._run(
            "replace_by_id",
            lambda: self._client.table(self.table_name)
            .update(payload)
            .eq("id", recipe.id)
            .execute(),
        )
        return bool(result.data)

    def delete_by_id(self, recipe_id: str) -> bool:
        result = self._run(
            "delete_by_id",
            lambda: self._client.table(self.table_name)
            .delete()
            .eq("id", recipe_id)
            .execute(),
        )
        return bool(result.data)
