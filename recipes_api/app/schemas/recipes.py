from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from recipes_api.app.domain.models import Recipe, RecipeDraft


class RecipeRequest(BaseModel):
    """Body of POST /recipes and PUT /recipes/{id}. id and publishedAt are ignored."""
    name: str
    tags: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft.build(
            self.name,
            tags=self.tags,
            ingredients=self.ingredients,
            instructions=self.instructions,
        )


class RecipeResponse(BaseModel):
    id: str
    name: str
    tags: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    publishedAt: datetime

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> RecipeResponse:
        return cls(
            id=recipe.id,
            name=recipe.name,
            tags=list(recipe.tags),
            ingredients=list(recipe.ingredients),
            instructions=list(recipe.instructions),
            publishedAt=recipe.published_at,
        )


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    ok: bool
    state: str
    recipes: int
