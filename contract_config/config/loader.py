"""Configuration loading."""

import json

from pathlib import Path
from typing import Optional, Union

import structlog

from contract_config.exceptions import (
    ConfigurationError,
    InvalidConfigError,
    MissingConfigError,
)
from contract_config.utils.constants import (
    DEFAULT_SOLIDITY_VERSION,
    DEPLOYER_PRIVATE_KEY_TEMPLATE,
    LOCAL_NETWORK_NAME,
    REMOTE_NETWORK_NAME,
    RINKEBY_URL_TEMPLATE,
)

from .export import from_host_dict
from .models import BuildConfiguration, LocalNetwork, RemoteNetwork
from .settings import Settings


logger = structlog.get_logger()


def load() -> BuildConfiguration:
    """Build the configuration record from its baked-in values.

    Pure: no file, network or environment access. Every call returns a new,
    equal record.
    """
    return BuildConfiguration(
        compiler_version=DEFAULT_SOLIDITY_VERSION,
        networks={
            REMOTE_NETWORK_NAME: RemoteNetwork(
                url=RINKEBY_URL_TEMPLATE,
                signing_keys=(DEPLOYER_PRIVATE_KEY_TEMPLATE,),
            ),
            LOCAL_NETWORK_NAME: LocalNetwork(),
        },
    )


def load_config_file(config_file: Union[str, Path]) -> BuildConfiguration:
    """Load a configuration record from a JSON file in the host's shape.

    Raises:
        MissingConfigError: If the file does not exist
        InvalidConfigError: If the file is not valid JSON or not a configuration
    """
    config_path = Path(config_file)

    if not config_path.exists():
        raise MissingConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        logger.error("Configuration file is not UTF-8", path=str(config_path))
        raise InvalidConfigError(f"Invalid encoding in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in configuration file", path=str(config_path))
        raise InvalidConfigError(f"Invalid JSON in {config_path}: {e}") from e

    logger.info("Loaded configuration file", path=str(config_path))
    return from_host_dict(data)


def apply_settings(
    config: BuildConfiguration, settings: Settings
) -> BuildConfiguration:
    """Overlay environment-injected values onto a configuration record."""
    if settings.solidity_version:
        config = config.with_overrides(compiler_version=settings.solidity_version)

    if settings.rinkeby_url or settings.deployer_private_key:
        current = config.remote_networks.get(REMOTE_NETWORK_NAME)
        url = settings.rinkeby_url or (current.url if current else RINKEBY_URL_TEMPLATE)
        keys = tuple(settings.deployer_private_keys) or (
            current.signing_keys if current else ()
        )
        config = config.replace_network(
            REMOTE_NETWORK_NAME, RemoteNetwork(url=url, signing_keys=keys)
        )

    return config


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    settings: Optional[Settings] = None,
) -> BuildConfiguration:
    """Load configuration with file and environment overlays.

    Precedence order (highest to lowest):
    1. Environment variables and .env file
    2. Configuration file, if given
    3. Baked-in defaults from load()

    Returns:
        Configured BuildConfiguration instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    logger.info("Loading configuration", config_file=str(config_file or ""))

    try:
        config = load_config_file(config_file) if config_file else load()

        if settings is None:
            # pydantic-settings reads from env automatically
            settings = Settings()

        config = apply_settings(config, settings)

        logger.info(
            "Configuration loaded successfully",
            compiler_version=config.compiler_version,
            networks=sorted(config.networks),
            env_overrides=settings.has_overrides,
        )

        return config

    except ConfigurationError:
        raise
    except Exception as e:
        logger.error("Failed to load configuration", error=str(e))
        raise ConfigurationError(f"Configuration loading failed: {e}") from e
