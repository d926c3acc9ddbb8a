"""Consumer package bootstrap."""

from implementors.utils.plugin_loader import import_submodules

from .consumer_registry import CONSUMER_REGISTRY, register_consumer
from .consumer import TableConsumer
from .consumer_factory import create_consumer

# Import all submodules so their registration decorators run and populate
# :data:`CONSUMER_REGISTRY`.
import_submodules(__name__)

__all__ = [
    "CONSUMER_REGISTRY",
    "TableConsumer",
    "create_consumer",
    "register_consumer",
]
