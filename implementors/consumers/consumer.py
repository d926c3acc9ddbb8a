from __future__ import annotations

from abc import ABC, abstractmethod

from implementors.consumers.configs.base import ConsumerConfig
from implementors.tables import ImplementorTable


class TableConsumer(ABC):
    """Callable that receives each delivered :class:`ImplementorTable`.

    Any callable taking one table can be bound to a registry; subclasses exist
    so consumers can be built from config.
    """

    def __init__(self, config: ConsumerConfig) -> None:
        self.config = config
        self.tables_seen = 0

    def __call__(self, table: ImplementorTable) -> None:
        self.tables_seen += 1
        self.consume(table)

    @abstractmethod
    def consume(self, table: ImplementorTable) -> None:
        pass

    def close(self) -> None:
        """Release any resources held by the consumer."""
