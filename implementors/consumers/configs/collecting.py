from dataclasses import dataclass

from dataclasses_json import dataclass_json

from implementors.consumers.configs.base import ConsumerConfig
from implementors.consumers.configs.consumer_config_registry import register_consumer_config


@register_consumer_config("collecting")
@dataclass_json
@dataclass(kw_only=True)
class CollectingConsumerConfig(ConsumerConfig):
    def __post_init__(self):
        self.consumer_type = "collecting"
