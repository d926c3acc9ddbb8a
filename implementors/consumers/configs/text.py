from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dataclasses_json import config, dataclass_json

from implementors.consumers.configs.base import ConsumerConfig
from implementors.consumers.configs.consumer_config_registry import register_consumer_config
from implementors.utils.serialization_utils import decode_path, encode_path, resolve_path


@register_consumer_config("text")
@dataclass_json
@dataclass(kw_only=True)
class TextConsumerConfig(ConsumerConfig):
    # None writes to stdout; a path is appended to on every delivery
    output_path: Optional[Path] = field(
        default=None,
        metadata=config(encoder=encode_path, decoder=decode_path),
    )
    indent: int = 2

    def __post_init__(self):
        self.consumer_type = "text"
        if self.output_path is not None:
            self.output_path = Path(self.output_path)
        if self.indent < 0:
            raise ValueError("indent must be non-negative")

    def resolve_paths(self, base_dir: Path) -> None:
        self.output_path = resolve_path(self.output_path, base_dir)
