# recipes_api/app/domain/models.py
"""
Domain models for the recipe store.
These are pure data structures with no infrastructure dependencies.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable

# fromisoformat on 3.10 only accepts 3 or 6 fractional digits
_FRACTION = re.compile(r"\.(\d+)")


class StoreState(str, Enum):
    """Lifecycle of a recipe store."""
    UNINITIALIZED = "UNINITIALIZED"
    READY = "READY"


def _as_tuple(values: Iterable[str] | None) -> tuple[str, ...]:
    if values is None:
        return ()
    return tuple(str(value) for value in values)


@dataclass(frozen=True)
class RecipeDraft:
    """Caller-supplied recipe fields, used for inserts and updates."""
    name: str
    tags: tuple[str, ...] = ()
    ingredients: tuple[str, ...] = ()
    instructions: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        name: str,
        tags: Iterable[str] | None = None,
        ingredients: Iterable[str] | None = None,
        instructions: Iterable[str] | None = None,
    ) -> RecipeDraft:
        return cls(
            name=name,
            tags=_as_tuple(tags),
            ingredients=_as_tuple(ingredients),
            instructions=_as_tuple(instructions),
        )


@dataclass(frozen=True)
class Recipe:
    """
    A stored recipe.

    `id` and `published_at` are assigned by the store when the recipe is
    inserted and never change afterwards.
    """
    id: str
    name: str
    published_at: datetime
    tags: tuple[str, ...] = field(default=())
    ingredients: tuple[str, ...] = field(default=())
    instructions: tuple[str, ...] = field(default=())

    @classmethod
    def from_draft(cls, draft: RecipeDraft, *, id: str, published_at: datetime) -> Recipe:
        return cls(
            id=id,
            name=draft.name,
            published_at=published_at,
            tags=draft.tags,
            ingredients=draft.ingredients,
            instructions=draft.instructions,
        )

    def with_draft(self, draft: RecipeDraft) -> Recipe:
        """Replace every mutable field, keeping id and published_at."""
        return Recipe.from_draft(draft, id=self.id, published_at=self.published_at)

    def has_tag(self, tag: str) -> bool:
        wanted = tag.casefold()
        return any(t.casefold() == wanted for t in self.tags)

    def to_row(self) -> dict[str, Any]:
        published_at = self.published_at
        if published_at.tzinfo is None:
            published_at = published_at.replace(tzinfo=timezone.utc)
        return {
            "id": self.id,
            "name": self.name,
            "tags": list(self.tags),
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "published_at": published_at.isoformat(),
        }


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO-8601 timestamp, assuming UTC when no offset is given."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            normalized = value.replace("Z", "+00:00") if value.endswith("Z") else value
            normalized = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), normalized)
            parsed = datetime.fromisoformat(normalized)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
