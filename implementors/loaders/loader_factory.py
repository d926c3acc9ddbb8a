from __future__ import annotations

from .configs.base import LoaderConfig
from .loader import Loader
from .loader_registry import LOADER_REGISTRY


def create_loader(config: LoaderConfig) -> Loader:
    """Return the loader registered for ``config.loader_type``."""
    loader_cls = LOADER_REGISTRY.get(config.loader_type)
    if loader_cls is None:
        raise ValueError(f"Loader type '{config.loader_type}' is not registered.")

    return loader_cls(config)
