from __future__ import annotations

import json
import logging

import yaml

from implementors.errors import ImplementorDataError
from implementors.loaders.configs.structured_file import StructuredFileLoaderConfig
from implementors.loaders.loader import Loader
from implementors.loaders.loader_registry import register_loader
from implementors.tables import ImplementorTable

logger = logging.getLogger(__name__)


def _check_entries(path, entries) -> None:
    if not isinstance(entries, dict):
        raise ImplementorDataError(
            f"{path}: implementors must be a mapping of library to markup list"
        )
    for library, markup in entries.items():
        if not isinstance(markup, list) or not all(isinstance(m, str) for m in markup):
            raise ImplementorDataError(
                f"{path}: entries for library '{library}' must be a list of strings"
            )


@register_loader("structured_file")
class StructuredFileLoader(Loader):
    """Reads a table from JSON or YAML.

    The document is either a bare ``{library: [markup, ...]}`` mapping or the
    ``{"trait": ..., "implementors": {...}}`` form written by
    :meth:`ImplementorTable.to_dict`.
    """

    def __init__(self, config: StructuredFileLoaderConfig) -> None:
        super().__init__(config)
        assert isinstance(self.config, StructuredFileLoaderConfig)

    def build_table(self) -> ImplementorTable:
        path = self.config.path
        if not path.exists():
            raise FileNotFoundError(f"No implementor table at {path}")
        logger.info("Reading implementor table from %s", path)
        with open(path, "r", encoding="utf-8") as f:
            if self.config.format == "json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ImplementorDataError(f"{path}: expected a mapping at the top level")
        _check_entries(path, data["implementors"] if "implementors" in data else data)
        table = ImplementorTable.from_dict(data)
        if self.config.trait is not None:
            table = ImplementorTable(table, trait=self.config.trait)
        return table
