"""Immutable table of implementor markup keyed by library name."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from implementors.utils.serialization_utils import decode_entries, encode_entries


class ImplementorTable(Mapping):
    """Mapping of library name to the ordered markup strings of its implementors.

    The table is built once by a loader and never mutated afterwards. Markup
    strings are kept exactly as supplied. Keys are expected to be strings and
    values sequences of strings; nothing is validated because the data comes
    from a generator.

    ``trait`` optionally records the path of the trait the table describes,
    e.g. ``"core::hash::Hash"``. It takes no part in equality, which compares
    the library entries only.
    """

    __slots__ = ("_entries", "_trait")

    def __init__(
        self,
        entries: Optional[Mapping[str, Sequence[str]]] = None,
        trait: Optional[str] = None,
    ) -> None:
        self._entries: Dict[str, Tuple[str, ...]] = {
            library: tuple(markup) for library, markup in (entries or {}).items()
        }
        self._trait = trait

    @property
    def trait(self) -> Optional[str]:
        return self._trait

    def __getitem__(self, library: str) -> Tuple[str, ...]:
        return self._entries[library]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        libraries = ", ".join(self._entries)
        return f"ImplementorTable(trait={self._trait!r}, libraries=[{libraries}])"

    def markup_count(self) -> int:
        """Total number of implementor entries across all libraries."""
        return sum(len(markup) for markup in self._entries.values())

    def to_dict(self) -> Dict[str, Any]:
        return {"trait": self._trait, "implementors": encode_entries(self._entries)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ImplementorTable":
        """Build a table from either ``to_dict`` output or a bare library mapping."""
        if "implementors" in data:
            return cls(decode_entries(data["implementors"]), trait=data.get("trait"))
        return cls(decode_entries(data))

    def libraries(self) -> List[str]:
        return list(self._entries)
