"""Loader config package bootstrap."""

from implementors.utils.plugin_loader import import_submodules
from implementors.loaders.configs.loader_config_registry import (
    LOADER_CONFIG_REGISTRY,
    register_loader_config,
    build_loader_config,
    build_loader_config_from_dict,
)
from implementors.loaders.configs.base import LoaderConfig

# Import all submodules so their registration decorators run and populate
# :data:`LOADER_CONFIG_REGISTRY`.
import_submodules(__name__)

__all__ = [
    "LOADER_CONFIG_REGISTRY",
    "LoaderConfig",
    "register_loader_config",
    "build_loader_config",
    "build_loader_config_from_dict",
]
