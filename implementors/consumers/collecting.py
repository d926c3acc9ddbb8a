from __future__ import annotations

from typing import List, Optional

from implementors.consumers.configs.collecting import CollectingConsumerConfig
from implementors.consumers.consumer import TableConsumer
from implementors.consumers.consumer_registry import register_consumer
from implementors.tables import ImplementorTable


@register_consumer("collecting")
class CollectingConsumer(TableConsumer):
    """Keeps every delivered table, in arrival order."""

    def __init__(self, config: Optional[CollectingConsumerConfig] = None) -> None:
        super().__init__(config or CollectingConsumerConfig())
        self.received: List[ImplementorTable] = []

    def consume(self, table: ImplementorTable) -> None:
        self.received.append(table)

    @property
    def latest(self) -> Optional[ImplementorTable]:
        return self.received[-1] if self.received else None
