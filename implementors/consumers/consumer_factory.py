from __future__ import annotations

from typing import Any

from .configs.base import ConsumerConfig
from .consumer import TableConsumer
from .consumer_registry import CONSUMER_REGISTRY


def create_consumer(config: ConsumerConfig, **kwargs: Any) -> TableConsumer:
    """Factory returning the consumer registered for ``config.consumer_type``."""
    consumer_cls = CONSUMER_REGISTRY.get(config.consumer_type)
    if consumer_cls is None:
        raise ValueError(f"Consumer type '{config.consumer_type}' is not registered.")

    return consumer_cls(config, **kwargs)
