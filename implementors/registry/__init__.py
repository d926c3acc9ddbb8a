"""Public API for the implementor registry."""

from .implementor_registry import (
    Consumer,
    ImplementorRegistry,
    PendingPolicy,
    RegistryState,
    bind_consumer,
    deliver,
    get_default_registry,
)

__all__ = [
    "Consumer",
    "ImplementorRegistry",
    "PendingPolicy",
    "RegistryState",
    "bind_consumer",
    "deliver",
    "get_default_registry",
]
