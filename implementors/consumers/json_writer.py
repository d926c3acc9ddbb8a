from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from implementors.consumers.configs.json_writer import JsonConsumerConfig
from implementors.consumers.consumer import TableConsumer
from implementors.consumers.consumer_registry import register_consumer
from implementors.descriptors import parse_implementor
from implementors.errors import MarkupParseError
from implementors.tables import ImplementorTable

logger = logging.getLogger(__name__)


def table_document(table: ImplementorTable) -> Dict[str, Any]:
    """JSON-ready form of ``table`` with the verbatim markup and its descriptor."""
    libraries: Dict[str, Any] = {}
    for library, markups in table.items():
        entries = []
        for markup in markups:
            try:
                descriptor = parse_implementor(markup).to_dict()
            except MarkupParseError as exc:
                logger.debug("No descriptor for %s entry: %s", library, exc)
                descriptor = None
            entries.append({"markup": markup, "descriptor": descriptor})
        libraries[library] = entries
    return {"trait": table.trait, "implementors": libraries}


@register_consumer("json")
class JsonConsumer(TableConsumer):
    """Writes each table to ``<output_dir>/<trait>.json``.

    Tables without a trait are numbered by arrival: ``table-001.json``. A
    table whose trait file was already written by this consumer is numbered
    the same way instead of overwriting it.
    """

    def __init__(self, config: JsonConsumerConfig) -> None:
        super().__init__(config)
        assert isinstance(self.config, JsonConsumerConfig)
        self.written: list[Path] = []

    def _target(self, table: ImplementorTable) -> Path:
        if table.trait:
            target = self.config.output_dir / f"{table.trait.replace('::', '.')}.json"
            if target not in self.written:
                return target
        return self.config.output_dir / f"table-{self.tables_seen:03d}.json"

    def consume(self, table: ImplementorTable) -> None:
        target = self._target(table)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            json.dumps(table_document(table), indent=self.config.indent) + "\n",
            encoding="utf-8",
        )
        logger.info("Wrote %d implementor(s) to %s", table.markup_count(), target)
        self.written.append(target)
