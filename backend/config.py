"""
Catalog configuration - all environment variables in one place.

Read from environment at runtime.
"""

from __future__ import annotations

import os


class Settings:
    """Application settings from environment variables."""

    # Data - empty means the fixture bundled with the catalog package
    CATALOG_DATA_PATH: str = os.environ.get("CATALOG_DATA_PATH", "")

    # Logging
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    APP_TITLE: str = os.environ.get("APP_TITLE", "Product Catalog")

    @property
    def DOCS_ENABLED(self) -> bool:
        return self.ENVIRONMENT == "development"


# Singleton instance
settings = Settings()
