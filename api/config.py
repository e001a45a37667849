"""
API Configuration

Centralized settings for the FastAPI application.
API metadata is hardcoded, while environment-specific settings load from .env file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from goblet_contracts.types import DEFAULT_GOBLET_CID, FIRST_CALENDAR_YEAR, YEAR_SECONDS


# Get the project root directory (one level up from api/)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Application settings for the Goblet Collection API

    API metadata (title, description, version, contact) are hardcoded.
    Environment-specific settings are loaded from .env file.
    """

    # ============================================================================
    # API Metadata (hardcoded - versioned with code)
    # ============================================================================

    api_title: str = "Goblet Collection API"
    api_description: str = (
        "Gemstone whitelist minting and goblet redemption API. "
        "Provides endpoints for whitelist administration, gemstone minting and transfers, "
        "goblet eligibility checks, yearly goblet minting and metadata URIs."
    )
    api_version: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Contact information
    contact_name: str = "Goblet Collection"
    contact_url: str = "https://maltgrainwhiskey.com"

    # ============================================================================
    # Environment Settings (loaded from .env)
    # ============================================================================

    environment: str = "development"  # development, staging, production
    api_port: int = 8000
    log_level: str = "INFO"
    network: str = "testnet"  # testnet, mainnet

    # Operator key used to open wallet sessions
    api_key: str  # No default - must be set in .env
    # Collection administrator wallet (bech32)
    admin_address: str  # No default - must be set in .env

    jwt_secret_key: str = "default_secret_key_change_in_production"
    jwt_algorithm: str = "HS256"
    session_timeout_minutes: int = 30

    # ============================================================================
    # Collection Settings
    # ============================================================================

    goblet_cid: str = DEFAULT_GOBLET_CID
    gemstone_cid: str = ""
    gemstone_redeemed_cid: str = ""
    minting_epoch: int | None = None  # POSIX seconds; defaults to service start
    year_window_seconds: int = Field(YEAR_SECONDS, gt=0)
    first_calendar_year: int = FIRST_CALENDAR_YEAR

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"), env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def contact(self) -> dict[str, str]:
        """FastAPI contact information"""
        return {"name": self.contact_name, "url": self.contact_url}


# ============================================================================
# Global settings instance
# ============================================================================

settings = Settings()  # type: ignore[call-arg]  # Pydantic settings loads from env
