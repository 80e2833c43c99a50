"""Custom exceptions for Contract Config."""

from typing import List, Optional


class ContractConfigError(Exception):
    """Base exception for Contract Config."""

    pass


class ConfigurationError(ContractConfigError):
    """Configuration-related errors."""

    pass


class MissingConfigError(ConfigurationError):
    """Required configuration is missing."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])
