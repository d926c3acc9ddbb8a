from __future__ import annotations

from typing import Mapping, Optional, Sequence

from implementors.loaders.configs.literal import LiteralLoaderConfig
from implementors.loaders.loader import Loader
from implementors.loaders.loader_registry import register_loader
from implementors.registry import ImplementorRegistry
from implementors.tables import ImplementorTable


@register_loader("literal")
class LiteralLoader(Loader):
    """Delivers a table written out in source or config."""

    def __init__(self, config: LiteralLoaderConfig) -> None:
        super().__init__(config)
        assert isinstance(self.config, LiteralLoaderConfig)

    def build_table(self) -> ImplementorTable:
        return ImplementorTable(self.config.entries, trait=self.config.trait)


def load_implementors(
    entries: Mapping[str, Sequence[str]],
    trait: Optional[str] = None,
    registry: Optional[ImplementorRegistry] = None,
) -> ImplementorTable:
    """Deliver ``entries`` as one table, the way a generated data file does on load."""
    config = LiteralLoaderConfig(entries=dict(entries), trait=trait)
    return LiteralLoader(config).run(registry)
