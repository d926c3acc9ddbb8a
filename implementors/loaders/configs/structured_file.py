from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dataclasses_json import config, dataclass_json

from implementors.loaders.configs.base import LoaderConfig
from implementors.loaders.configs.loader_config_registry import register_loader_config
from implementors.utils.serialization_utils import decode_path, encode_path, resolve_path

FORMATS_BY_SUFFIX = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


@register_loader_config("structured_file")
@dataclass_json
@dataclass(kw_only=True)
class StructuredFileLoaderConfig(LoaderConfig):
    path: Path = field(metadata=config(encoder=encode_path, decoder=decode_path))
    # "json" or "yaml"; inferred from the suffix when omitted
    format: Optional[str] = None

    def __post_init__(self):
        self.loader_type = "structured_file"
        self.path = Path(self.path)
        if self.format is None:
            self.format = FORMATS_BY_SUFFIX.get(self.path.suffix.lower())
        if self.format not in ("json", "yaml"):
            raise ValueError(
                f"Cannot determine table format for {self.path}; set format to 'json' or 'yaml'"
            )

    def resolve_paths(self, base_dir: Path) -> None:
        self.path = resolve_path(self.path, base_dir)
