"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (SUPABASE_URL, SUPABASE_KEY) are
validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except those validated in
    validate_required (supabase_url, supabase_key).
    """

    # App
    app_name: str = "rights-registry"
    app_version: str = "1.0.0"
    debug: bool = False

    # Relational backend (hosted Postgres behind a REST/RPC gateway)
    supabase_url: str = ""
    supabase_key: SecretStr = SecretStr("")
    writers_table: str = "writers"

    # Search index. No search key = index path disabled, relational only.
    algolia_app_id: str = ""
    algolia_search_key: SecretStr | None = None
    algolia_writers_index: str = "writers"

    # Edge function that mirrors writer changes into the search index
    writers_sync_function: str = "sync-writers-algolia"

    # Browsing
    default_page_size: int = 50
    max_page_size: int = 100
    search_debounce_ms: int = 300

    # Outbound HTTP
    http_timeout_seconds: float = 30.0

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required backend settings and page-size bounds."""
        if not self.supabase_url:
            raise ValueError(
                "SUPABASE_URL is required. Set in environment or .env file."
            )
        if not self.supabase_key.get_secret_value():
            raise ValueError(
                "SUPABASE_KEY is required. Use the project's anon or service role key."
            )
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError(
                f"default_page_size must be between 1 and max_page_size ({self.max_page_size}), "
                f"got: {self.default_page_size}"
            )
        return self

    @property
    def search_index_enabled(self) -> bool:
        """True when both the app id and a search-only key are configured."""
        return bool(
            self.algolia_app_id
            and self.algolia_search_key
            and self.algolia_search_key.get_secret_value()
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
