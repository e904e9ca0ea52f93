"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Key-value store configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    backend: Literal["sqlite", "memory"] = "sqlite"
    data_dir: Path = Path("data")
    db_name: str = "dsvflow.db"

    # Slot names, one JSON list per collection
    orders_key: str = "dsv_orders"
    clients_key: str = "dsv_clients"
    inventory_key: str = "dsv_inventory"

    # SQLite settings
    pool_size: int = 1
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class BusinessSettings(BaseSettings):
    """Shop-level behaviour."""

    model_config = SettingsConfigDict(env_prefix="BUSINESS_")

    company_name: str = "DSV Enterprise"
    currency_symbol: str = "GH₵"

    # Record order totals against the client when an order is placed
    track_client_stats: bool = True

    # Seed the default stock list when the inventory slot is empty
    seed_default_inventory: bool = True


class PdfSettings(BaseSettings):
    """Sales report PDF configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    title: str = "Sales Report"
    footer_text: str = "Generated by DSV Flow"
    # Core PDF fonts are latin-1 only, so the cedi sign is spelled out
    currency_symbol: str = "GHS"


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:5173"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "DSV Flow"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    business: BusinessSettings = Field(default_factory=BusinessSettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)
    api: APISettings = Field(default_factory=APISettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        if settings.backend == "sqlite":
            settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
