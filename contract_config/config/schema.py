"""Deployment readiness checks for a configuration record."""

import re

from typing import List
from urllib.parse import urlparse

import structlog

from contract_config.exceptions import InvalidConfigError
from contract_config.utils.constants import (
    ALLOWED_URL_SCHEMES,
    PLACEHOLDER_MARKER,
    PRIVATE_KEY_PATTERN,
    SEMVER_PATTERN,
)

from .models import BuildConfiguration, RemoteNetwork


logger = structlog.get_logger()


def find_placeholders(config: BuildConfiguration) -> List[str]:
    """List dotted paths of values still holding template placeholders."""
    paths = []
    for name, network in sorted(config.remote_networks.items()):
        if PLACEHOLDER_MARKER in network.url:
            paths.append(f"networks.{name}.url")
        for index, key in enumerate(network.signing_key_values):
            if PLACEHOLDER_MARKER in key:
                paths.append(f"networks.{name}.accounts[{index}]")
    return paths


def validate_configuration(config: BuildConfiguration) -> bool:
    """Check that a configuration record is usable for deployment.

    Args:
        config: Configuration record to check

    Returns:
        True if configuration is valid

    Raises:
        InvalidConfigError: If configuration is invalid, with every problem
            listed in ``errors``
    """
    errors: List[str] = []

    if not re.match(SEMVER_PATTERN, config.compiler_version):
        errors.append(
            f"Invalid compiler version: {config.compiler_version!r}. "
            "Expected MAJOR.MINOR.PATCH"
        )

    for name, network in sorted(config.remote_networks.items()):
        errors.extend(_validate_remote_network(name, network))

    errors.extend(
        f"Placeholder value left in {path}" for path in find_placeholders(config)
    )

    if not config.local_networks:
        logger.warning("No local network configured")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(errors)
        logger.error("Configuration validation failed", error_count=len(errors))
        raise InvalidConfigError(error_msg, errors)

    logger.info("Configuration validation passed")
    return True


def _validate_remote_network(name: str, network: RemoteNetwork) -> List[str]:
    """Validate one remote network entry."""
    errors = []

    parsed = urlparse(network.url)
    if parsed.scheme not in ALLOWED_URL_SCHEMES or not parsed.netloc:
        errors.append(
            f"Invalid url for network '{name}'. "
            f"Must be an absolute {'/'.join(ALLOWED_URL_SCHEMES)} URL"
        )

    if not network.signing_keys:
        errors.append(f"Network '{name}' has no signing keys")

    for index, key in enumerate(network.signing_key_values):
        # Placeholders are reported separately
        if PLACEHOLDER_MARKER in key:
            continue
        if not re.match(PRIVATE_KEY_PATTERN, key):
            errors.append(
                f"Signing key {index} for network '{name}' is not a 32-byte hex string"
            )

    return errors
