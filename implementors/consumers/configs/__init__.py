"""Consumer config package bootstrap."""

from implementors.utils.plugin_loader import import_submodules
from implementors.consumers.configs.consumer_config_registry import (
    CONSUMER_CONFIG_REGISTRY,
    register_consumer_config,
    build_consumer_config,
    build_consumer_config_from_dict,
)
from implementors.consumers.configs.base import ConsumerConfig

# Import all submodules so their registration decorators run and populate
# :data:`CONSUMER_CONFIG_REGISTRY`.
import_submodules(__name__)

__all__ = [
    "CONSUMER_CONFIG_REGISTRY",
    "ConsumerConfig",
    "register_consumer_config",
    "build_consumer_config",
    "build_consumer_config_from_dict",
]
