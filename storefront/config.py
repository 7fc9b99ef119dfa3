"""Application configuration using Pydantic Settings.

Reads configuration from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    environment: Literal["prod", "staging", "dev"] = Field(
        default="dev",
        description="Environment name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    store_name: str = Field(
        default="HMNS",
        description="Store name used in page titles",
    )

    # =========================================================================
    # Catalog
    # =========================================================================
    catalog_path: str = Field(
        default="config/catalog.yaml",
        description="Path to the YAML product catalog",
    )
    featured_limit: int = Field(
        default=4,
        ge=0,
        description="Number of featured products on the home page",
    )
    related_limit: int = Field(
        default=4,
        ge=0,
        description="Maximum number of related products on a detail page",
    )

    # =========================================================================
    # Display
    # =========================================================================
    currency_symbol: str = Field(
        default="Rp",
        description="Currency symbol prefixed to formatted prices",
    )
    detail_url_template: str = Field(
        default="detail.html?id={id}",
        description="Detail page location, formatted with the product id",
    )

    # =========================================================================
    # Messaging (pre-filled contact link)
    # =========================================================================
    messaging_base_url: str = Field(
        default="https://wa.me/6281413371321",
        description="Base URL of the messaging contact link",
    )
    messaging_template: str = Field(
        default="Halo, saya tertarik dengan parfum {name} ({price})",
        description="Pre-filled message, formatted with name and price",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_dev(self) -> bool:
        """Whether the service runs in local development."""
        return self.environment == "dev"

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Output logs as JSON",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for convenience
settings = get_settings()
