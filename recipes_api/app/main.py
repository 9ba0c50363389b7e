# recipes_api/app/main.py
from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from supabase import create_client

from recipes_api.app.config import Settings, settings
from recipes_api.app.domain.errors import ConfigurationError
from recipes_api.app.domain.models import StoreState
from recipes_api.app.error_handlers import register_error_handlers
from recipes_api.app.infra.db.supabase_recipes_repo import SupabaseRecipeRepository
from recipes_api.app.routers.recipes import router as recipes_router
from recipes_api.app.schemas.recipes import HealthResponse
from recipes_api.app.services.recipe_store import RecipeStore, RecipeStoreBase

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def build_recipe_store(config: Settings) -> RecipeStore:
    errors = config.validate_backend()
    if errors:
        raise ConfigurationError(errors)

    if config.RECIPES_BACKEND == "supabase":
        client = create_client(str(config.SUPABASE_URL), config.SUPABASE_SERVICE_ROLE_KEY)
        repository = SupabaseRecipeRepository(client, config.RECIPES_TABLE)
        return RecipeStore(repository=repository)
    return RecipeStore(seed_file=config.RECIPES_SEED_FILE)


def create_app(
    store: Optional[RecipeStoreBase] = None,
    config: Settings = settings,
) -> FastAPI:
    app = FastAPI(title="Recipes API", version="1.0.0")
    app.state.recipe_store = store if store is not None else build_recipe_store(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.FRONTEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(recipes_router)

    @app.on_event("startup")
    def startup() -> None:
        logger.info("Starting Recipes API: env=%s, backend=%s", config.APP_ENV, config.RECIPES_BACKEND)
        app.state.recipe_store.load()

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        recipe_store: RecipeStoreBase = app.state.recipe_store
        ready = recipe_store.state is StoreState.READY
        return HealthResponse(
            ok=ready,
            state=recipe_store.state.value,
            recipes=len(recipe_store),
        )

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
