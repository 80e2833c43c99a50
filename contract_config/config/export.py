"""Conversion between the configuration record and the host's object shape."""

from typing import Any, Dict, List, Optional

import structlog

from pydantic import ValidationError

from contract_config.exceptions import InvalidConfigError
from contract_config.utils.constants import MASKED_SECRET

from .models import BuildConfiguration, LocalNetwork, RemoteNetwork


logger = structlog.get_logger()

HOST_KEYS = {"solidity", "networks", "plugins"}


def to_host_dict(
    config: BuildConfiguration, reveal_secrets: bool = False
) -> Dict[str, Any]:
    """Render the record the way the host reads its configuration module.

    Args:
        config: Configuration record to export
        reveal_secrets: Emit signing keys in clear text instead of masking them

    Returns:
        Dictionary with ``solidity`` and ``networks`` keys
    """
    networks: Dict[str, Dict[str, Any]] = {}
    for name, network in config.networks.items():
        if isinstance(network, RemoteNetwork):
            if reveal_secrets:
                accounts = network.signing_key_values
            else:
                accounts = [MASKED_SECRET for _ in network.signing_keys]
            networks[name] = {"url": network.url, "accounts": accounts}
        else:
            networks[name] = {}

    return {"solidity": config.compiler_version, "networks": networks}


def from_host_dict(data: Dict[str, Any]) -> BuildConfiguration:
    """Build a record from the host's object shape.

    A network entry carrying a ``url`` is remote; anything else is local.

    Raises:
        InvalidConfigError: If the data does not describe a configuration
    """
    if not isinstance(data, dict):
        raise InvalidConfigError(
            f"Configuration must be an object, got {type(data).__name__}"
        )

    unknown = sorted(set(data) - HOST_KEYS)
    if unknown:
        raise InvalidConfigError(f"Unknown configuration keys: {unknown}")

    if "solidity" not in data:
        raise InvalidConfigError("Configuration is missing the 'solidity' key")

    raw_networks = data.get("networks")
    if raw_networks is None:
        raw_networks = {}
    if not isinstance(raw_networks, dict):
        raise InvalidConfigError("'networks' must be an object")

    networks: Dict[str, Any] = {}
    for name, entry in raw_networks.items():
        networks[name] = _parse_network(name, entry)

    fields: Dict[str, Any] = {
        "compiler_version": data["solidity"],
        "networks": networks,
    }
    if "plugins" in data:
        fields["plugins"] = data["plugins"]

    try:
        return BuildConfiguration(**fields)
    except ValidationError as e:
        logger.error("Invalid host configuration", error_count=e.error_count())
        raise InvalidConfigError(f"Invalid configuration: {e}") from e


def _parse_network(name: str, entry: Any) -> Any:
    """Turn one host network entry into a network record."""
    if entry is None:
        entry = {}
    if not isinstance(entry, dict):
        raise InvalidConfigError(f"Network '{name}' must be an object")

    if "url" not in entry:
        if entry:
            raise InvalidConfigError(
                f"Network '{name}' has no 'url' but sets {sorted(entry)}"
            )
        return LocalNetwork()

    extra = sorted(set(entry) - {"url", "accounts"})
    if extra:
        raise InvalidConfigError(f"Network '{name}' has unsupported keys {extra}")

    accounts: Optional[List[Any]] = entry.get("accounts")
    if accounts is None:
        accounts = []
    if not isinstance(accounts, list):
        raise InvalidConfigError(f"'networks.{name}.accounts' must be a list")

    try:
        return RemoteNetwork(url=entry["url"], signing_keys=tuple(accounts))
    except ValidationError as e:
        raise InvalidConfigError(f"Invalid network '{name}': {e}") from e
