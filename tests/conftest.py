"""Pytest configuration and shared fixtures."""

import logging

import pytest
import structlog

from contract_config.config.models import BuildConfiguration, LocalNetwork, RemoteNetwork


ENV_VARS = (
    "SOLIDITY_VERSION",
    "RINKEBY_URL",
    "DEPLOYER_PRIVATE_KEY",
    "LOG_LEVEL",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test without deployment env vars and away from any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def uncached_loggers(monkeypatch):
    """Keep module loggers reconfigurable after the CLI sets up structlog."""
    configure = structlog.configure

    def configure_uncached(**kwargs):
        kwargs["cache_logger_on_first_use"] = False
        configure(**kwargs)

    monkeypatch.setattr(structlog, "configure", configure_uncached)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging setup done by the CLI."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def deployer_key():
    """Well-formed 32-byte hex key with 0x prefix."""
    return "0x" + "ab" * 32


@pytest.fixture
def second_key():
    """Well-formed 32-byte hex key without prefix."""
    return "cd" * 32


@pytest.fixture
def rpc_url():
    """RPC endpoint without placeholders."""
    return "https://sepolia.example.org/v3/project"


@pytest.fixture
def ready_config(deployer_key, rpc_url):
    """Configuration with real-looking values that passes validation."""
    return BuildConfiguration(
        compiler_version="0.8.28",
        networks={
            "rinkeby": RemoteNetwork(url=rpc_url, signing_keys=(deployer_key,)),
            "hardhat": LocalNetwork(),
        },
    )
