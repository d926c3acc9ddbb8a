LOADER_CONFIG_REGISTRY = {}


def register_loader_config(name: str):
    """Class decorator to register a ``LoaderConfig`` subclass."""
    def decorator(cls):
        LOADER_CONFIG_REGISTRY[name] = cls
        return cls
    return decorator


def build_loader_config(name: str, **kwargs):
    """Instantiate a registered ``LoaderConfig`` by ``name``."""
    cfg_cls = LOADER_CONFIG_REGISTRY.get(name)
    if cfg_cls is None:
        raise ValueError(f"Loader config '{name}' is not registered.")
    # loader_type is init=False; dataclasses_json still expects the key
    return cfg_cls.from_dict({"loader_type": name, **kwargs})


def build_loader_config_from_dict(data: dict):
    """Construct a ``LoaderConfig`` from a dictionary (e.g. parsed YAML)."""
    data = dict(data)
    name = data.pop("loader_type", None)
    if name is None:
        raise ValueError("Missing 'loader_type' key in loader config dictionary.")
    return build_loader_config(name, **data)
