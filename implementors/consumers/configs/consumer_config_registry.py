CONSUMER_CONFIG_REGISTRY = {}


def register_consumer_config(name: str):
    """Class decorator to register a ``ConsumerConfig`` subclass."""
    def decorator(cls):
        CONSUMER_CONFIG_REGISTRY[name] = cls
        return cls
    return decorator


def build_consumer_config(name: str, **kwargs):
    """Instantiate a registered ``ConsumerConfig`` by ``name``."""
    cfg_cls = CONSUMER_CONFIG_REGISTRY.get(name)
    if cfg_cls is None:
        raise ValueError(f"Consumer config '{name}' is not registered.")
    return cfg_cls.from_dict({"consumer_type": name, **kwargs})


def build_consumer_config_from_dict(data: dict):
    """Construct a ``ConsumerConfig`` from a dictionary."""
    data = dict(data)
    name = data.pop("consumer_type", None)
    if name is None:
        raise ValueError("Missing 'consumer_type' key in consumer config dictionary.")
    return build_consumer_config(name, **data)
