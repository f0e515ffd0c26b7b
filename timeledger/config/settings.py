"""
Configuration management for the time ledger.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from timeledger.models.settings import WorkspaceSettings, parse_locale


class TimeLedgerConfig(BaseSettings):
    """Configuration settings for the time ledger."""

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Workspace display settings
    currency: str = Field(default="USD", alias="CURRENCY")
    currency_locale: str = Field(default="en-US", alias="CURRENCY_LOCALE")

    # Input and output locations
    snapshot_file: Path = Field(default=Path("snapshot.json"), alias="SNAPSHOT_FILE")
    export_dir: Path = Field(default=Path("exports"), alias="EXPORT_DIR")

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

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v):
        """Ensure currency is a three-letter code."""
        v = v.strip().upper()
        if len(v) != 3 or not v.isalpha():
            raise ValueError(f"Invalid currency code: {v}")
        return v

    @field_validator("currency_locale")
    @classmethod
    def validate_currency_locale(cls, v):
        """Ensure the locale is known to Babel."""
        parse_locale(v)
        return v

    def get_workspace_settings(self) -> WorkspaceSettings:
        """Get the currency settings used to format amounts."""
        return WorkspaceSettings(
            currency=self.currency, currency_locale=self.currency_locale
        )


def load_config(env_file: Optional[str] = None) -> TimeLedgerConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return TimeLedgerConfig()


# Global configuration instance
_config: Optional[TimeLedgerConfig] = None


def get_config() -> TimeLedgerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> TimeLedgerConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
