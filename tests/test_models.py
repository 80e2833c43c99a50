"""Tests for the configuration record models."""

import json

import pytest

from pydantic import SecretStr, ValidationError

from contract_config.config.models import BuildConfiguration, LocalNetwork, RemoteNetwork
from contract_config.utils.constants import DEFAULT_PLUGINS, MASKED_SECRET


class TestNetworks:
    """Local and remote network variants."""

    def test_local_network_has_no_attributes(self):
        assert LocalNetwork().model_dump() == {"kind": "local"}

    def test_local_network_rejects_fields(self, rpc_url):
        with pytest.raises(ValidationError):
            LocalNetwork(url=rpc_url)

    def test_remote_network_keeps_key_order(self, rpc_url):
        network = RemoteNetwork(url=rpc_url, signing_keys=("first", "second"))
        assert network.signing_key_values == ["first", "second"]

    def test_remote_network_requires_url(self, deployer_key):
        with pytest.raises(ValidationError):
            RemoteNetwork(signing_keys=(deployer_key,))

    def test_signing_keys_are_secret(self, rpc_url, deployer_key):
        network = RemoteNetwork(url=rpc_url, signing_keys=(deployer_key,))
        assert isinstance(network.signing_keys[0], SecretStr)
        assert deployer_key not in repr(network)

    def test_json_masks_signing_keys(self, rpc_url, deployer_key):
        network = RemoteNetwork(url=rpc_url, signing_keys=(deployer_key,))
        data = json.loads(network.model_dump_json())
        assert data["signing_keys"] == [MASKED_SECRET]

    def test_json_reveals_signing_keys_on_request(self, rpc_url, deployer_key):
        network = RemoteNetwork(url=rpc_url, signing_keys=(deployer_key,))
        data = json.loads(network.model_dump_json(context={"reveal_secrets": True}))
        assert data["signing_keys"] == [deployer_key]

    def test_networks_are_frozen(self, rpc_url, deployer_key):
        network = RemoteNetwork(url=rpc_url, signing_keys=(deployer_key,))
        with pytest.raises(ValidationError):
            network.url = "https://other.example.org"


class TestBuildConfiguration:
    """Record construction, lookup and copying."""

    def test_defaults(self):
        config = BuildConfiguration()
        assert config.compiler_version == "0.8.28"
        assert config.networks == {}
        assert config.plugins == DEFAULT_PLUGINS

    def test_networks_parsed_by_kind(self, rpc_url, deployer_key):
        config = BuildConfiguration.model_validate(
            {
                "networks": {
                    "hardhat": {"kind": "local"},
                    "rinkeby": {
                        "kind": "remote",
                        "url": rpc_url,
                        "signing_keys": [deployer_key],
                    },
                }
            }
        )
        assert isinstance(config.networks["hardhat"], LocalNetwork)
        assert isinstance(config.networks["rinkeby"], RemoteNetwork)

    def test_unknown_network_kind_rejected(self):
        with pytest.raises(ValidationError):
            BuildConfiguration.model_validate({"networks": {"x": {"kind": "fork"}}})

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            BuildConfiguration(optimizer=True)

    def test_record_is_frozen(self, ready_config):
        with pytest.raises(ValidationError):
            ready_config.compiler_version = "0.8.0"

    def test_network_views(self, ready_config):
        assert list(ready_config.local_networks) == ["hardhat"]
        assert list(ready_config.remote_networks) == ["rinkeby"]

    def test_equality_compares_secret_values(self, ready_config, rpc_url, deployer_key):
        same = BuildConfiguration(
            networks={
                "hardhat": LocalNetwork(),
                "rinkeby": RemoteNetwork(url=rpc_url, signing_keys=(deployer_key,)),
            }
        )
        other = same.replace_network(
            "rinkeby", RemoteNetwork(url=rpc_url, signing_keys=("different",))
        )
        assert same == ready_config
        assert other != ready_config

    def test_replace_network_leaves_original(self, ready_config):
        updated = ready_config.replace_network("localhost", LocalNetwork())
        assert "localhost" in updated.networks
        assert "localhost" not in ready_config.networks

    def test_with_overrides_revalidates(self, ready_config):
        updated = ready_config.with_overrides(compiler_version="0.8.20")
        assert updated.compiler_version == "0.8.20"
        assert updated.networks == ready_config.networks
        with pytest.raises(ValidationError):
            ready_config.with_overrides(compiler_version=28)
