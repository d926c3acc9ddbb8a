"""Registry hand-off for generated trait implementor tables."""

from implementors.errors import ImplementorDataError, MarkupParseError
from implementors.tables import ImplementorTable
from implementors.registry import (
    ImplementorRegistry,
    PendingPolicy,
    RegistryState,
    bind_consumer,
    deliver,
    get_default_registry,
)
from implementors.descriptors import ImplementorDescriptor, parse_implementor
from implementors.loaders import load_implementors

__all__ = [
    "ImplementorDataError",
    "ImplementorDescriptor",
    "ImplementorRegistry",
    "ImplementorTable",
    "MarkupParseError",
    "PendingPolicy",
    "RegistryState",
    "bind_consumer",
    "deliver",
    "get_default_registry",
    "load_implementors",
    "parse_implementor",
]
