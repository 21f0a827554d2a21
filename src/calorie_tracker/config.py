"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_tracker.domain.progress import ProgressThresholds

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str | None = None
    supabase_service_key: str | None = None
    offline_reads: bool = False
    progress_on_track_pct: int = Field(default=80, ge=0, le=100)
    progress_over_goal_tolerance: float = Field(default=1.05, ge=1.0)
    top_foods_default_limit: int = Field(default=5, ge=1)
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def backend_configured(self) -> bool:
        """Return True when Supabase credentials are present."""
        return bool(self.supabase_url and self.supabase_service_key)

    def progress_thresholds(self) -> ProgressThresholds:
        """Build classifier thresholds from settings."""
        return ProgressThresholds(
            on_track_pct=self.progress_on_track_pct,
            over_goal_tolerance=self.progress_over_goal_tolerance,
        )
