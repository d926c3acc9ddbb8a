"""Loader for the generator's ``implementors/**/trait.*.js`` data files.

Each file assigns one array of markup strings per library::

    (function() {var implementors = {};
    implementors["bitflags"] = ["impl <a ...>Hash</a> for ...",];
    ...
    })()

The string literals use JSON-compatible escaping and the arrays may end
with a trailing comma.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from implementors.errors import ImplementorDataError
from implementors.loaders.configs.js_data_file import JsDataFileLoaderConfig
from implementors.loaders.loader import Loader
from implementors.loaders.loader_registry import register_loader
from implementors.tables import ImplementorTable

logger = logging.getLogger(__name__)

__all__ = [
    "JsDataFileLoader",
    "discover_data_files",
    "parse_js_data",
    "trait_path_from_file",
]

_TABLE = re.compile(r"\bimplementors\s*=\s*\{")
_ENTRY = re.compile(r'\bimplementors\[\s*"(?P<library>(?:[^"\\]|\\.)*)"\s*\]\s*=\s*\[')
_STRING = re.compile(r'"(?:[^"\\]|\\.)*"')
_SEPARATOR = re.compile(r"[\s,]*")
_DATA_FILE = re.compile(r"(?P<kind>[a-z]+)\.(?P<name>[^.]+)\.js")


def _decode_string(literal: str, origin: str) -> str:
    try:
        return json.loads(literal)
    except ValueError as exc:
        raise ImplementorDataError(f"{origin}: invalid string literal {literal[:40]!r}") from exc


def _read_string_list(source: str, pos: int, origin: str, library: str) -> Tuple[List[str], int]:
    items: List[str] = []
    while True:
        pos = _SEPARATOR.match(source, pos).end()
        if pos >= len(source):
            raise ImplementorDataError(f"{origin}: unterminated list for library '{library}'")
        if source[pos] == "]":
            return items, pos + 1
        match = _STRING.match(source, pos)
        if match is None:
            raise ImplementorDataError(
                f"{origin}: unexpected {source[pos]!r} in list for library '{library}'"
            )
        items.append(_decode_string(match.group(0), origin))
        pos = match.end()


def parse_js_data(source: str, origin: str = "<string>") -> Dict[str, List[str]]:
    """Return the library -> markup entries assigned in ``source``."""
    if _TABLE.search(source) is None:
        raise ImplementorDataError(f"{origin}: no implementors table found")

    entries: Dict[str, List[str]] = {}
    pos = 0
    while True:
        match = _ENTRY.search(source, pos)
        if match is None:
            return entries
        library = _decode_string(f'"{match.group("library")}"', origin)
        entries[library], pos = _read_string_list(source, match.end(), origin, library)


def trait_path_from_file(path: Union[str, Path]) -> Optional[str]:
    """Infer ``core::hash::Hash`` from ``.../implementors/core/hash/trait.Hash.js``."""
    path = Path(path)
    parts = path.parts
    if "implementors" not in parts:
        return None
    root = len(parts) - 1 - parts[::-1].index("implementors")
    modules = parts[root + 1:-1]
    match = _DATA_FILE.fullmatch(path.name)
    if match is None or not modules:
        return None
    return "::".join([*modules, match.group("name")])


def discover_data_files(doc_root: Union[str, Path]) -> List[Path]:
    """Every ``trait.*.js`` file under ``<doc_root>/implementors``, sorted."""
    implementors_dir = Path(doc_root) / "implementors"
    if not implementors_dir.is_dir():
        raise FileNotFoundError(f"No implementors directory at {implementors_dir}")
    return sorted(implementors_dir.rglob("trait.*.js"))


@register_loader("js_data_file")
class JsDataFileLoader(Loader):
    def __init__(self, config: JsDataFileLoaderConfig) -> None:
        super().__init__(config)
        assert isinstance(self.config, JsDataFileLoaderConfig)

    def build_table(self) -> ImplementorTable:
        path = self.config.path
        if not path.exists():
            raise FileNotFoundError(f"No implementor data file at {path}")
        logger.info("Reading implementor data from %s", path)
        entries = parse_js_data(path.read_text(encoding="utf-8"), origin=str(path))
        trait = self.config.trait or trait_path_from_file(path)
        return ImplementorTable(entries, trait=trait)
