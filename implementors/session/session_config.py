from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import yaml
from dataclasses_json import config, dataclass_json

from implementors.consumers.configs import ConsumerConfig, build_consumer_config_from_dict
from implementors.consumers.configs.text import TextConsumerConfig
from implementors.loaders.configs import LoaderConfig, build_loader_config_from_dict
from implementors.registry import PendingPolicy
from implementors.utils.serialization_utils import decode_path, encode_path, resolve_path


@dataclass_json
@dataclass(kw_only=True)
class SessionConfig:
    loaders: List[LoaderConfig] = field(
        default_factory=list,
        metadata=config(
            encoder=lambda ls: [cfg.to_dict() for cfg in ls],
            decoder=lambda ds: [
                d if isinstance(d, LoaderConfig) else build_loader_config_from_dict(d)
                for d in (ds or [])
            ],
        ),
    )
    consumer: ConsumerConfig = field(
        default_factory=TextConsumerConfig,
        metadata=config(
            encoder=lambda c: c.to_dict(),
            decoder=lambda c: (
                c if isinstance(c, ConsumerConfig) else build_consumer_config_from_dict(c)
            ),
        ),
    )
    pending_policy: str = PendingPolicy.REPLACE.value
    # bind before running the loaders instead of after them
    bind_consumer_first: bool = False
    # every trait.*.js under <doc_root>/implementors becomes a js_data_file loader
    doc_root: Optional[Path] = field(
        default=None,
        metadata=config(encoder=encode_path, decoder=decode_path),
    )
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.pending_policy = PendingPolicy(self.pending_policy).value
        if self.doc_root is not None:
            self.doc_root = Path(self.doc_root)

    def resolve_paths(self, base_dir: Path) -> None:
        """Anchor every relative path in the session at ``base_dir``."""
        for loader_config in self.loaders:
            loader_config.resolve_paths(base_dir)
        self.consumer.resolve_paths(base_dir)
        self.doc_root = resolve_path(self.doc_root, base_dir)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SessionConfig":
        """Load a session, resolving relative paths against the file's directory."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"No session config at {path}")
        with open(path, "r", encoding="utf-8") as f:
            cfg_dict = yaml.safe_load(f) or {}
        cfg = cls.from_dict(cfg_dict)
        cfg.resolve_paths(path.resolve().parent)
        return cfg
