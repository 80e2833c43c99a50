"""Build configuration record handed to the host toolchain.

Features:
- Immutable records
- Local and remote network variants
- Secret-aware JSON serialization
"""

from typing import Annotated, Any, Dict, List, Literal, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    SerializationInfo,
    field_serializer,
)

from contract_config.utils.constants import (
    DEFAULT_PLUGINS,
    DEFAULT_SOLIDITY_VERSION,
    MASKED_SECRET,
)


def reveal_requested(info: SerializationInfo) -> bool:
    """Check whether the caller asked for secrets in clear text."""
    context = info.context or {}
    return bool(context.get("reveal_secrets", False))


class LocalNetwork(BaseModel):
    """Ephemeral in-process network with host-managed defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["local"] = "local"


class RemoteNetwork(BaseModel):
    """Named external endpoint plus the keys used to sign transactions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["remote"] = "remote"
    url: str = Field(..., description="RPC endpoint address")
    signing_keys: Tuple[SecretStr, ...] = Field(
        (), description="Secret keys authorizing outgoing transactions"
    )

    @field_serializer("signing_keys", when_used="json")
    def serialize_signing_keys(
        self, keys: Tuple[SecretStr, ...], info: SerializationInfo
    ) -> List[str]:
        """Mask signing keys in JSON output unless explicitly revealed."""
        if reveal_requested(info):
            return [key.get_secret_value() for key in keys]
        return [MASKED_SECRET for _ in keys]

    @property
    def signing_key_values(self) -> List[str]:
        """Get signing keys as plain strings."""
        return [key.get_secret_value() for key in self.signing_keys]


NetworkEndpoint = Annotated[
    Union[LocalNetwork, RemoteNetwork], Field(discriminator="kind")
]


class BuildConfiguration(BaseModel):
    """Static configuration record read by the host once at startup."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    compiler_version: str = Field(
        DEFAULT_SOLIDITY_VERSION, description="Solidity compiler release to invoke"
    )
    networks: Dict[str, NetworkEndpoint] = Field(
        default_factory=dict, description="Network name to endpoint"
    )
    plugins: Tuple[str, ...] = Field(
        DEFAULT_PLUGINS, description="Host plugins loaded before the configuration"
    )

    @property
    def local_networks(self) -> Dict[str, LocalNetwork]:
        """Get local networks keyed by name."""
        return {
            name: network
            for name, network in self.networks.items()
            if isinstance(network, LocalNetwork)
        }

    @property
    def remote_networks(self) -> Dict[str, RemoteNetwork]:
        """Get remote networks keyed by name."""
        return {
            name: network
            for name, network in self.networks.items()
            if isinstance(network, RemoteNetwork)
        }

    def with_overrides(self, **changes: Any) -> "BuildConfiguration":
        """Return a copy with the given fields replaced and revalidated."""
        data = self.model_dump()
        data.update(changes)
        return BuildConfiguration.model_validate(data)

    def replace_network(
        self, name: str, network: Union[LocalNetwork, RemoteNetwork]
    ) -> "BuildConfiguration":
        """Return a copy with one network added or replaced."""
        networks = dict(self.networks)
        networks[name] = network
        return self.with_overrides(networks=networks)
