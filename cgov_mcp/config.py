"""Configuration module for the cgov MCP server."""

from functools import lru_cache
from pathlib import Path
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict

STATIC_DIR = Path(__file__).parent / "static"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Transport
    transport_mode: str = "http"  # "http" or "stdio"
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"
    cors_allowed_origins: str = "*"

    # Error tracking (disabled when no DSN is set)
    sentry_dsn: str | None = None
    environment: str = "development"

    # Database (either a full URL or the individual parts)
    database_url: str | None = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_max_retries: int = 3
    db_retry_delay_seconds: float = 1.0

    # Documents
    documents_dir: Path = STATIC_DIR
    document_cache_enabled: bool = False

    # Presentation limits for rendered results
    section_result_limit: int = 3
    full_section_limit: int = 5
    summary_limit: int = 10

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allowed_origins == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    @property
    def resolved_database_url(self) -> str:
        """Database URL, assembled from the DB_* parts when not given whole."""
        if self.database_url:
            return self.database_url
        auth = ""
        if self.db_user:
            auth = quote_plus(self.db_user)
            if self.db_password:
                auth += f":{quote_plus(self.db_password)}"
            auth += "@"
        return f"postgresql://{auth}{self.db_host}:{self.db_port}/{self.db_name or ''}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
