from dataclasses import dataclass, field
from typing import Dict, List

from dataclasses_json import dataclass_json

from implementors.loaders.configs.base import LoaderConfig
from implementors.loaders.configs.loader_config_registry import register_loader_config


@register_loader_config("literal")
@dataclass_json
@dataclass(kw_only=True)
class LiteralLoaderConfig(LoaderConfig):
    entries: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        self.loader_type = "literal"
