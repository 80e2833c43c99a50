"""Configuration management using Pydantic Settings.

Features:
- Environment variable loading
- .env file support
- Secret handling for deployer keys
- Log level validation
"""

from typing import Any, List, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Deployment values injected from the environment."""

    # Compiler
    solidity_version: Optional[str] = Field(
        None, description="Solidity compiler version override"
    )

    # Remote network
    rinkeby_url: Optional[str] = Field(None, description="Rinkeby RPC endpoint URL")
    deployer_private_key: Optional[SecretStr] = Field(
        None,
        description="Deployer private key. Several keys may be comma-separated.",
    )

    # Monitoring
    log_level: str = Field("INFO", description="Logging level")

    # Development
    debug: bool = Field(False, description="Enable debug mode")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("solidity_version", "rinkeby_url", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty strings as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("deployer_private_key", mode="before")
    @classmethod
    def blank_key_to_none(cls, v: Any) -> Any:
        """Treat an empty key as unset."""
        if isinstance(v, SecretStr):
            v = v.get_secret_value()
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()  # type: ignore[no-any-return]

    @property
    def deployer_private_keys(self) -> List[SecretStr]:
        """Get deployer keys split on commas."""
        if not self.deployer_private_key:
            return []
        raw = self.deployer_private_key.get_secret_value()
        return [SecretStr(key.strip()) for key in raw.split(",") if key.strip()]

    @property
    def has_overrides(self) -> bool:
        """Check whether any configuration value was injected."""
        return bool(
            self.solidity_version or self.rinkeby_url or self.deployer_private_key
        )
