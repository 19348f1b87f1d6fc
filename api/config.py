"""
API Configuration

Centralized settings for the FastAPI application.
API metadata is hardcoded, while environment-specific settings load from .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from imx_offchain.config import ImmutableXSettings, TESTNET_CHAIN_ID


# Get the project root directory (one level up from api/)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Application settings for the Immutable X bridge API

    API metadata (title, description, version) are hardcoded.
    Environment-specific settings are loaded from .env file.
    """

    # ============================================================================
    # API Metadata (hardcoded - versioned with code)
    # ============================================================================

    api_title: str = "Immutable X Bridge API"
    api_description: str = (
        "Balances and Etherscan-style transaction history for Immutable X accounts. "
        "Transfers are reshaped into base-chain transaction records for wallet front-ends."
    )
    api_version: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # ============================================================================
    # Environment Settings (loaded from .env)
    # ============================================================================

    environment: str = "development"  # development, staging, production
    api_port: int = 8000

    admin_api_key: str  # No default - must be set in .env

    imx_chain_id: int = TESTNET_CHAIN_ID
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"), env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


# ============================================================================
# Global settings instance
# ============================================================================

settings = Settings()  # type: ignore[call-arg]  # Pydantic settings loads from env

# Immutable X endpoint settings instance (for convenience)
imx_settings = ImmutableXSettings()
