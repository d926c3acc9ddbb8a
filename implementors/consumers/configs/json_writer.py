from dataclasses import dataclass, field
from pathlib import Path

from dataclasses_json import config, dataclass_json

from implementors.consumers.configs.base import ConsumerConfig
from implementors.consumers.configs.consumer_config_registry import register_consumer_config
from implementors.utils.serialization_utils import decode_path, encode_path, resolve_path


@register_consumer_config("json")
@dataclass_json
@dataclass(kw_only=True)
class JsonConsumerConfig(ConsumerConfig):
    output_dir: Path = field(metadata=config(encoder=encode_path, decoder=decode_path))
    indent: int = 2

    def __post_init__(self):
        self.consumer_type = "json"
        self.output_dir = Path(self.output_dir)

    def resolve_paths(self, base_dir: Path) -> None:
        self.output_dir = resolve_path(self.output_dir, base_dir)
