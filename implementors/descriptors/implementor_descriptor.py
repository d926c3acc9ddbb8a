from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass(frozen=True)
class ImplementorDescriptor:
    """Structured form of one ``impl Trait for Type`` markup entry."""

    text: str
    trait_name: str
    type_name: str
    trait_path: Optional[str] = None
    trait_href: Optional[str] = None
    type_kind: Optional[str] = None
    type_path: Optional[str] = None
    type_href: Optional[str] = None
    generics: str = ""
    type_args: str = ""

    @property
    def summary(self) -> str:
        """Short ``Trait for Type`` line, e.g. ``Hash for VecMap<V>``."""
        return f"{self.trait_name} for {self.type_name}{self.type_args}"

    def __str__(self) -> str:
        return self.summary
