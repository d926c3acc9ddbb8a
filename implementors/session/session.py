"""Wire loaders and a consumer through a dedicated registry."""

from __future__ import annotations

import logging
from typing import List, Optional

from implementors.consumers import TableConsumer, create_consumer
from implementors.loaders import Loader, create_loader, discover_data_files
from implementors.loaders.configs import LoaderConfig
from implementors.loaders.configs.js_data_file import JsDataFileLoaderConfig
from implementors.registry import ImplementorRegistry
from implementors.session.session_config import SessionConfig

logger = logging.getLogger(__name__)


class ImplementorSession:
    def __init__(
        self,
        config: SessionConfig,
        registry: Optional[ImplementorRegistry] = None,
        consumer: Optional[TableConsumer] = None,
    ) -> None:
        self.config = config
        self.registry = registry or ImplementorRegistry(config.pending_policy)
        self.consumer = consumer or create_consumer(config.consumer)
        self.loaders: List[Loader] = [create_loader(cfg) for cfg in self.loader_configs()]

    def loader_configs(self) -> List[LoaderConfig]:
        configs = list(self.config.loaders)
        if self.config.doc_root is not None:
            configs.extend(
                JsDataFileLoaderConfig(path=path)
                for path in discover_data_files(self.config.doc_root)
            )
        return configs

    def run(self) -> TableConsumer:
        """Run every loader once and bind the consumer before or after them."""
        if self.config.bind_consumer_first:
            self.registry.bind_consumer(self.consumer)

        for loader in self.loaders:
            loader.run(self.registry)

        if not self.config.bind_consumer_first:
            self.registry.bind_consumer(self.consumer)

        logger.info(
            "Ran %d loader(s); consumer received %d table(s)",
            len(self.loaders),
            self.consumer.tables_seen,
        )
        return self.consumer

    def close(self) -> None:
        self.consumer.close()
