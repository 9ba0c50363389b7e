# recipes_api/app/services/seed.py
"""
Fixed recipe dataset loaded once at startup.

The file is a JSON array of recipes in the API wire format::

    [{"id": "...", "name": "...", "tags": [...], "ingredients": [...],
      "instructions": [...], "publishedAt": "2021-01-17T19:28:52Z"}]
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable
from uuid import uuid4

from recipes_api.app.domain.errors import SeedFileError
from recipes_api.app.domain.models import Recipe, RecipeDraft, parse_timestamp

logger = logging.getLogger(__name__)


def _entry_to_recipe(
    entry: Any,
    index: int,
    path: Path,
    id_factory: Callable[[], str],
    now: datetime,
) -> Recipe:
    if not isinstance(entry, dict):
        raise SeedFileError(str(path), f"entry {index} is not an object")
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise SeedFileError(str(path), f"entry {index} has no name")

    lists: dict[str, list[str]] = {}
    for key in ("tags", "ingredients", "instructions"):
        value = entry.get(key) or []
        if not isinstance(value, list):
            raise SeedFileError(str(path), f"entry {index}: {key} must be a list")
        lists[key] = [str(item) for item in value]

    published_at = parse_timestamp(entry.get("publishedAt")) or now
    draft = RecipeDraft.build(name, **lists)
    return Recipe.from_draft(
        draft,
        id=str(entry.get("id") or id_factory()),
        published_at=published_at,
    )


def load_seed_file(
    path: Path | str,
    *,
    id_factory: Callable[[], str] | None = None,
) -> list[Recipe]:
    """Read the dataset at `path`; later entries repeating an earlier id are skipped."""
    path = Path(path)
    id_factory = id_factory or (lambda: uuid4().hex)

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SeedFileError(str(path), str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise SeedFileError(str(path), f"invalid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise SeedFileError(str(path), "expected a JSON array")

    now = datetime.now(timezone.utc)
    recipes: list[Recipe] = []
    seen: set[str] = set()
    for index, entry in enumerate(payload):
        recipe = _entry_to_recipe(entry, index, path, id_factory, now)
        if recipe.id in seen:
            logger.warning("Skipping duplicate recipe id in seed file: id=%s", recipe.id)
            continue
        seen.add(recipe.id)
        recipes.append(recipe)

    logger.info("Loaded seed file: path=%s, recipes=%d", path, len(recipes))
    return recipes
