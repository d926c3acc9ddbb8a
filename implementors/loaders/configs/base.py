from abc import ABC
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class LoaderConfig(ABC):
    loader_type: str = field(init=False)

    # trait path recorded on the produced table, e.g. "core::hash::Hash"
    trait: Optional[str] = None

    def resolve_paths(self, base_dir: Path) -> None:
        """Anchor relative file paths at ``base_dir``. No-op for in-memory loaders."""
