# recipes_api/app/services/recipe_store.py
"""
Recipe store service.
Owns the current set of recipes and answers lookups and mutations against it.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional
from uuid import uuid4

from recipes_api.app.domain.errors import RecipeNotFoundError, StoreNotReadyError
from recipes_api.app.domain.models import Recipe, RecipeDraft, StoreState
from recipes_api.app.infra.db.base import RecipeRepository
from recipes_api.app.services.rwlock import ReadWriteLock
from recipes_api.app.services.seed import load_seed_file

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid4().hex


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class RecipeStoreBase(ABC):
    """
    Operations the HTTP layer needs from a recipe store.

    Implementations:
    - RecipeStore: in-memory collection, optionally backed by a RecipeRepository
    """

    @property
    @abstractmethod
    def state(self) -> StoreState:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def load(self) -> None:
        """Populate the store and move it to READY."""
        pass

    @abstractmethod
    def insert(self, draft: RecipeDraft) -> Recipe:
        pass

    @abstractmethod
    def list_all(self) -> list[Recipe]:
        pass

    @abstractmethod
    def get(self, recipe_id: str) -> Recipe:
        """
        Raises:
            RecipeNotFoundError: If no recipe has this id
        """
        pass

    @abstractmethod
    def update(self, recipe_id: str, draft: RecipeDraft) -> Recipe:
        """
        Raises:
            RecipeNotFoundError: If no recipe has this id
        """
        pass

    @abstractmethod
    def delete(self, recipe_id: str) -> None:
        """
        Raises:
            RecipeNotFoundError: If no recipe has this id
        """
        pass

    @abstractmethod
    def search_by_tag(self, tag: str) -> list[Recipe]:
        pass


class RecipeStore(RecipeStoreBase):
    """
    In-memory recipe store.

    Recipes are kept in an insertion-ordered dict keyed by id. When a
    repository is given, every mutation is written to it first and memory is
    only changed once the write succeeded. Mutations take the write side of a
    readers/writer lock, lookups the read side.
    """

    def __init__(
        self,
        repository: Optional[RecipeRepository] = None,
        seed_file: Optional[Path] = None,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _now_utc,
    ):
        self._repo = repository
        self._seed_file = seed_file
        self._id_factory = id_factory
        self._clock = clock
        self._recipes: dict[str, Recipe] = {}
        self._state = StoreState.UNINITIALIZED
        self._lock = ReadWriteLock()

    @property
    def state(self) -> StoreState:
        return self._state

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._recipes)

    def _ensure_ready(self) -> None:
        if self._state is not StoreState.READY:
            raise StoreNotReadyError()

    def _evict_stale(self, recipe_id: str) -> None:
        # Caller holds the write lock
        self._recipes.pop(recipe_id, None)
        logger.warning("Recipe missing from repository, evicted from memory: id=%s", recipe_id)

    def load(self) -> None:
        with self._lock.write():
            if self._state is StoreState.READY:
                logger.info("Recipe store already loaded, skipping")
                return

            if self._repo is not None:
                recipes = self._repo.find_all()
                source = "repository"
            elif self._seed_file is not None:
                recipes = load_seed_file(self._seed_file, id_factory=self._id_factory)
                source = str(self._seed_file)
            else:
                recipes = []
                source = "empty"

            loaded: dict[str, Recipe] = {}
            for recipe in recipes:
                if recipe.id in loaded:
                    logger.warning("Ignoring duplicate recipe id on load: id=%s", recipe.id)
                    continue
                loaded[recipe.id] = recipe

            self._recipes = loaded
            self._state = StoreState.READY
            logger.info("Recipe store ready: source=%s, recipes=%d", source, len(loaded))

    def insert(self, draft: RecipeDraft) -> Recipe:
        with self._lock.write():
            self._ensure_ready()
            recipe_id = self._id_factory()
            while recipe_id in self._recipes:
                logger.warning("Generated recipe id collided, retrying: id=%s", recipe_id)
                recipe_id = self._id_factory()

            recipe = Recipe.from_draft(draft, id=recipe_id, published_at=self._clock())
            if self._repo is not None:
                recipe = self._repo.insert_one(recipe)

            self._recipes[recipe.id] = recipe
            logger.info("Inserted recipe: id=%s, name=%s", recipe.id, recipe.name)
            return recipe

    def list_all(self) -> list[Recipe]:
        with self._lock.read():
            self._ensure_ready()
            return list(self._recipes.values())

    def get(self, recipe_id: str) -> Recipe:
        with self._lock.read():
            self._ensure_ready()
            try:
                return self._recipes[recipe_id]
            except KeyError:
                raise RecipeNotFoundError(recipe_id) from None

    def update(self, recipe_id: str, draft: RecipeDraft) -> Recipe:
        with self._lock.write():
            self._ensure_ready()
            current = self._recipes.get(recipe_id)
            if current is None:
                raise RecipeNotFoundError(recipe_id)

            updated = current.with_draft(draft)
            if self._repo is not None and not self._repo.replace_by_id(updated):
                self._evict_stale(recipe_id)
                raise RecipeNotFoundError(recipe_id)

            self._recipes[recipe_id] = updated
            logger.info("Updated recipe: id=%s", recipe_id)
            return updated

    def delete(self, recipe_id: str) -> None:
        with self._lock.write():
            self._ensure_ready()
            if recipe_id not in self._recipes:
                raise RecipeNotFoundError(recipe_id)

            if self._repo is not None and not self._repo.delete_by_id(recipe_id):
                self._evict_stale(recipe_id)
                raise RecipeNotFoundError(recipe_id)

            del self._recipes[recipe_id]
            logger.info("Deleted recipe: id=%s", recipe_id)

    def search_by_tag(self, tag: str) -> list[Recipe]:
        with self._lock.read():
            self._ensure_ready()
            if not tag:
                return []
            return [recipe for recipe in self._recipes.values() if recipe.has_tag(tag)]
