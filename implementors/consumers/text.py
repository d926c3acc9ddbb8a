from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from implementors.consumers.configs.text import TextConsumerConfig
from implementors.consumers.consumer import TableConsumer
from implementors.consumers.consumer_registry import register_consumer
from implementors.descriptors import markup_to_text, parse_implementor
from implementors.errors import MarkupParseError
from implementors.tables import ImplementorTable

logger = logging.getLogger(__name__)


def describe_markup(markup: str) -> str:
    """``Trait for Type`` summary, or the plain text when the markup does not parse."""
    try:
        return parse_implementor(markup).summary
    except MarkupParseError as exc:
        logger.debug("Falling back to plain text: %s", exc)
        return markup_to_text(markup)


def render_table(table: ImplementorTable, indent: int = 2) -> List[str]:
    pad = " " * indent
    lines = [table.trait or "implementors"]
    for library, markup in table.items():
        lines.append(f"{pad}{library}")
        lines.extend(f"{pad * 2}{describe_markup(m)}" for m in markup)
    return lines


@register_consumer("text")
class TextConsumer(TableConsumer):
    """Writes a readable block per delivered table."""

    def __init__(self, config: TextConsumerConfig, stream: Optional[TextIO] = None) -> None:
        super().__init__(config)
        assert isinstance(self.config, TextConsumerConfig)
        self._stream = stream
        self._owns_stream = False

    def _output(self) -> TextIO:
        if self._stream is None:
            if self.config.output_path is None:
                return sys.stdout
            self.config.output_path.parent.mkdir(parents=True, exist_ok=True)
            self._stream = open(self.config.output_path, "a", encoding="utf-8")
            self._owns_stream = True
        return self._stream

    def consume(self, table: ImplementorTable) -> None:
        out = self._output()
        for line in render_table(table, self.config.indent):
            out.write(line + "\n")
        out.flush()

    def close(self) -> None:
        if self._owns_stream and self._stream is not None:
            self._stream.close()
            self._stream = None
            self._owns_stream = False
