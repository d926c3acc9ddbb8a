from __future__ import annotations

CONSUMER_REGISTRY: dict[str, type] = {}


def register_consumer(consumer_type: str):
    """Class decorator to register a consumer implementation."""

    def decorator(cls: type):
        CONSUMER_REGISTRY[consumer_type] = cls
        return cls

    return decorator
