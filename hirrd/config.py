"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All environment variables required by the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Supabase ──────────────────────────────────────────────
    supabase_url: str
    supabase_service_role_key: str   # service role key (bypasses RLS)

    # ── Job listing ───────────────────────────────────────────
    listing_items_per_page: int = Field(6, ge=1)
    listing_debounce_ms: int = Field(500, ge=0)
    location_country: str = "IN"

    # ── App ───────────────────────────────────────────────────
    app_name: str = "hirrd"
    debug: bool = False

    @property
    def listing_debounce_seconds(self) -> float:
        return self.listing_debounce_ms / 1000


# Singleton — import this wherever config is needed
settings = Settings()  # type: ignore[call-arg]
