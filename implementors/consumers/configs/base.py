from abc import ABC
from dataclasses import dataclass, field
from pathlib import Path

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class ConsumerConfig(ABC):
    consumer_type: str = field(init=False)

    def resolve_paths(self, base_dir: Path) -> None:
        """Anchor relative output paths at ``base_dir``."""
