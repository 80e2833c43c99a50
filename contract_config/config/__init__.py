"""Configuration module."""

from .export import from_host_dict, to_host_dict
from .loader import load, load_config
from .models import BuildConfiguration, LocalNetwork, RemoteNetwork
from .schema import find_placeholders, validate_configuration
from .settings import Settings

__all__ = [
    "BuildConfiguration",
    "LocalNetwork",
    "RemoteNetwork",
    "Settings",
    "find_placeholders",
    "from_host_dict",
    "load",
    "load_config",
    "to_host_dict",
    "validate_configuration",
]
