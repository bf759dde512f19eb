"""
Configuration management for the call charge system.
"""

from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from callcharge.models.tariff import Tariff


class CallChargeConfig(BaseSettings):
    """Configuration settings for the call charge system."""

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # Logging Configuration
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: str = Field(default="standard", alias="LOG_FORMAT")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    # Tariff Configuration
    tariff_threshold_minutes: int = Field(
        default=20, ge=0, alias="TARIFF_THRESHOLD_MINUTES"
    )
    tariff_base_rate: Decimal = Field(
        default=Decimal("0.05"), ge=0, alias="TARIFF_BASE_RATE"
    )
    tariff_overflow_rate: Decimal = Field(
        default=Decimal("0.10"), ge=0, alias="TARIFF_OVERFLOW_RATE"
    )

    # Test Vector Configuration
    amount_tolerance: float = Field(default=0.01, ge=0, alias="AMOUNT_TOLERANCE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ["standard", "json"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    def get_tariff(self) -> Tariff:
        """Build the rate table from the tariff settings."""
        return Tariff(
            threshold_minutes=self.tariff_threshold_minutes,
            base_rate=self.tariff_base_rate,
            overflow_rate=self.tariff_overflow_rate,
        )


def load_config(env_file: Optional[str] = None) -> CallChargeConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return CallChargeConfig()


# Global configuration instance
_config: Optional[CallChargeConfig] = None


def get_config() -> CallChargeConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> CallChargeConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
