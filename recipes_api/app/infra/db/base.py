# recipes_api/app/infra/db/base.py
"""
Abstract base class for recipe persistence.
The store only depends on these five operations, never on a backend's query language.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from recipes_api.app.domain.models import Recipe


class RecipeRepository(ABC):
    """
    Abstract interface for durable recipe storage.

    Implementations:
    - SupabaseRecipeRepository: Postgres table behind Supabase
    """

    @abstractmethod
    def insert_one(self, recipe: Recipe) -> Recipe:
        """
        Store a new recipe.

        Args:
            recipe: Fully built recipe, id and published_at included

        Returns:
            The stored recipe

        Raises:
            StorageFaultError: If the backend rejects the write
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Recipe]:
        """
        Return every stored recipe in backend order.

        Raises:
            StorageFaultError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def find_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """
        Get a recipe by its ID.

        Args:
            recipe_id: The recipe ID

        Returns:
            The recipe, or None if not found
        """
        pass

    @abstractmethod
    def replace_by_id(self, recipe: Recipe) -> bool:
        """
        Replace the stored row whose id matches `recipe.id`.

        Args:
            recipe: The new version of the recipe

        Returns:
            True if a row was replaced, False if no row matched
        """
        pass

    @abstractmethod
    def delete_by_id(self, recipe_id: str) -> bool:
        """
        Delete a recipe by its ID.

        Args:
            recipe_id: The recipe ID

        Returns:
            True if a row was deleted, False if no row matched
        """
        pass
