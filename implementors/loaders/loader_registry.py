"""Registry for implementor loaders."""

from __future__ import annotations

from typing import Dict, Type

LOADER_REGISTRY: Dict[str, Type] = {}


def register_loader(loader_type: str):
    """Class decorator to register a :class:`Loader` subclass."""

    def decorator(cls: Type) -> Type:
        LOADER_REGISTRY[loader_type] = cls
        return cls

    return decorator
