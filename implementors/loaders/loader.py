"""Base class for one-shot implementor table producers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from implementors.loaders.configs.base import LoaderConfig
from implementors.registry import ImplementorRegistry, get_default_registry
from implementors.tables import ImplementorTable

logger = logging.getLogger(__name__)


class Loader(ABC):
    """Builds exactly one :class:`ImplementorTable` and delivers it once."""

    def __init__(self, config: LoaderConfig) -> None:
        self.config = config
        self._delivered = False

    @property
    def delivered(self) -> bool:
        return self._delivered

    @abstractmethod
    def build_table(self) -> ImplementorTable:
        """Construct the table this loader supplies."""
        pass

    def run(self, registry: Optional[ImplementorRegistry] = None) -> ImplementorTable:
        """Build the table and hand it to ``registry`` (the default registry if omitted)."""
        if self._delivered:
            raise RuntimeError(f"{self!r} has already delivered its table.")
        table = self.build_table()
        self._delivered = True
        logger.debug("%r delivering %r", self, table)
        (registry or get_default_registry()).deliver(table)
        return table

    def __repr__(self) -> str:
        return f"{type(self).__name__}(trait={self.config.trait!r})"
