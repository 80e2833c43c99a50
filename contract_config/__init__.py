"""Contract Config.

Declarative build configuration for a Hardhat-style smart-contract toolchain:
compiler version, a local in-memory test network and a remote test network
whose URL and signing keys are injected from the environment.
"""

__version__ = "0.1.0"
__author__ = "contract-config contributors"
__license__ = "MIT"

# Development status indicators
__status__ = "Alpha"
