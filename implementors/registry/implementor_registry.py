"""Hand-off point between implementor loaders and the consumer that uses them.

Loaders call :meth:`ImplementorRegistry.deliver` as their data arrives. A
consumer registers through :meth:`ImplementorRegistry.bind_consumer`, usually
after the loaders have run. Tables delivered before the consumer is bound are
held until it binds.

How many undelivered tables are held depends on the :class:`PendingPolicy`:

* ``REPLACE`` keeps only the most recent table (last write wins). A table
  that gets superseded is never seen by the consumer, so each overwrite is
  logged at ``WARNING``.
* ``QUEUE`` keeps every table and flushes them in arrival order on bind.

All calls run synchronously. Exceptions raised by the consumer propagate to
whoever called ``deliver`` or ``bind_consumer``; the registry records the
bind and clears the flushed tables before invoking the consumer.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Callable, Deque, List, Optional, Union

from implementors.tables import ImplementorTable

logger = logging.getLogger(__name__)

Consumer = Callable[[ImplementorTable], object]

__all__ = [
    "Consumer",
    "ImplementorRegistry",
    "PendingPolicy",
    "RegistryState",
    "bind_consumer",
    "deliver",
    "get_default_registry",
]


class RegistryState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    BOUND = "bound"


class PendingPolicy(str, Enum):
    REPLACE = "replace"
    QUEUE = "queue"


class ImplementorRegistry:
    def __init__(self, pending_policy: Union[PendingPolicy, str] = PendingPolicy.REPLACE) -> None:
        self.pending_policy = PendingPolicy(pending_policy)
        self._pending: Deque[ImplementorTable] = deque()
        self._consumer: Optional[Consumer] = None

    @property
    def consumer(self) -> Optional[Consumer]:
        return self._consumer

    @property
    def pending(self) -> List[ImplementorTable]:
        """Undelivered tables, oldest first."""
        return list(self._pending)

    @property
    def state(self) -> RegistryState:
        if self._pending:
            return RegistryState.PENDING
        if self._consumer is not None:
            return RegistryState.BOUND
        return RegistryState.IDLE

    def deliver(self, table: ImplementorTable) -> None:
        """Hand ``table`` to the bound consumer, or hold it until one binds."""
        if self._consumer is not None:
            logger.debug("Delivering %r to %r", table, self._consumer)
            self._consumer(table)
            return

        if self.pending_policy is PendingPolicy.REPLACE and self._pending:
            superseded = self._pending.pop()
            logger.warning(
                "Pending implementor table %r superseded by %r before a consumer was bound",
                superseded,
                table,
            )
        self._pending.append(table)
        logger.debug("Holding %r until a consumer is bound", table)

    def bind_consumer(self, consumer: Consumer) -> Consumer:
        """Bind ``consumer`` for future deliveries and flush any held tables.

        Rebinding replaces the previous consumer. Returns ``consumer`` so the
        method can decorate a function.
        """
        self._consumer = consumer
        flushed = list(self._pending)
        self._pending.clear()
        logger.debug("Bound %r; flushing %d pending table(s)", consumer, len(flushed))
        for table in flushed:
            consumer(table)
        return consumer

    def reset(self) -> None:
        """Drop the bound consumer and any held tables."""
        self._pending.clear()
        self._consumer = None


_DEFAULT_REGISTRY = ImplementorRegistry()


def get_default_registry() -> ImplementorRegistry:
    """The process-wide registry used when no registry is passed explicitly."""
    return _DEFAULT_REGISTRY


def deliver(table: ImplementorTable) -> None:
    _DEFAULT_REGISTRY.deliver(table)


def bind_consumer(consumer: Consumer) -> Consumer:
    return _DEFAULT_REGISTRY.bind_consumer(consumer)
