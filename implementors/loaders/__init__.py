"""Loader package bootstrap.

Exposes the loader registry and imports every loader implementation so its
``register_loader`` decorator runs.
"""

from implementors.utils.plugin_loader import import_submodules

from implementors.loaders.loader_registry import LOADER_REGISTRY, register_loader
from implementors.loaders.loader import Loader
from implementors.loaders.loader_factory import create_loader

import_submodules(__name__)

from implementors.loaders.js_data_file import discover_data_files  # noqa: E402
from implementors.loaders.literal import load_implementors  # noqa: E402

__all__ = [
    "LOADER_REGISTRY",
    "Loader",
    "create_loader",
    "discover_data_files",
    "load_implementors",
    "register_loader",
]
