from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import AnyUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Backend = Literal["memory", "supabase"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    APP_ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    RECIPES_BACKEND: Backend = "memory"
    # Loaded once at startup when the memory backend is selected
    RECIPES_SEED_FILE: Optional[Path] = None

    SUPABASE_URL: Optional[AnyUrl] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    RECIPES_TABLE: str = "recipes"

    FRONTEND_CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
    )

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    def validate_backend(self) -> list[str]:
        """Validate backend configuration and return list of errors."""
        errors = []

        if self.RECIPES_BACKEND == "supabase":
            if not self.SUPABASE_URL:
                errors.append("SUPABASE_URL is required")
            if not self.SUPABASE_SERVICE_ROLE_KEY:
                errors.append("SUPABASE_SERVICE_ROLE_KEY is required")
            if not self.RECIPES_TABLE:
                errors.append("RECIPES_TABLE is required")

        return errors


settings = Settings()
