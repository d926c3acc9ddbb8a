"""Import helpers for packages whose modules register plugins on import."""

from importlib import import_module
from pkgutil import walk_packages
from types import ModuleType
from typing import List

__all__ = ["import_submodules"]


def import_submodules(package_name: str) -> List[ModuleType]:
    """Import ``package_name`` and every module below it.

    Loader and consumer implementations register themselves through class
    decorators, so importing them is enough to populate the registries.
    """
    package = import_module(package_name)
    modules: List[ModuleType] = [package]

    if hasattr(package, "__path__"):
        for info in walk_packages(package.__path__, package.__name__ + "."):
            modules.append(import_module(info.name))

    return modules
