from dataclasses import dataclass, field
from pathlib import Path

from dataclasses_json import config, dataclass_json

from implementors.loaders.configs.base import LoaderConfig
from implementors.loaders.configs.loader_config_registry import register_loader_config
from implementors.utils.serialization_utils import decode_path, encode_path, resolve_path


@register_loader_config("js_data_file")
@dataclass_json
@dataclass(kw_only=True)
class JsDataFileLoaderConfig(LoaderConfig):
    """Config for a generated ``implementors/<crate>/<module>/trait.<Name>.js`` file."""

    path: Path = field(metadata=config(encoder=encode_path, decoder=decode_path))

    def __post_init__(self):
        self.loader_type = "js_data_file"
        self.path = Path(self.path)

    def resolve_paths(self, base_dir: Path) -> None:
        self.path = resolve_path(self.path, base_dir)
