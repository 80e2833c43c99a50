"""Application-wide constants."""

# Version info
APP_NAME = "Contract Config"
APP_DESCRIPTION = "Build configuration provider for a Hardhat-style toolchain"

# Compiler
DEFAULT_SOLIDITY_VERSION = "0.8.28"

# Networks
LOCAL_NETWORK_NAME = "hardhat"
REMOTE_NETWORK_NAME = "rinkeby"

# Template values, replaced at deploy time through the environment
RINKEBY_URL_TEMPLATE = "https://rinkeby.infura.io/v3/YOUR_INFURA_PROJECT_ID"
DEPLOYER_PRIVATE_KEY_TEMPLATE = "YOUR_DEPLOYER_PRIVATE_KEY"
PLACEHOLDER_MARKER = "YOUR_"

# Plugins loaded by the host before it reads the configuration
DEFAULT_PLUGINS = (
    "@nomiclabs/hardhat-waffle",
    "@nomiclabs/hardhat-ethers",
)

# Validation
SEMVER_PATTERN = r"^\d+\.\d+\.\d+$"
PRIVATE_KEY_PATTERN = r"^(0x)?[0-9a-fA-F]{64}$"
ALLOWED_URL_SCHEMES = ("http", "https", "ws", "wss")
MASKED_SECRET = "**********"
