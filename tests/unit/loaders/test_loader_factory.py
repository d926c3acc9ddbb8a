import pytest

from tests.helpers.stubs import CountingLoader, CountingLoaderConfig
from implementors.loaders import LOADER_REGISTRY, create_loader


def test_custom_loader_registers_and_runs(registry):
    loader = create_loader(CountingLoaderConfig(library="vec_map", size=3))
    assert isinstance(loader, CountingLoader)

    table = loader.run(registry)

    assert table["vec_map"] == ("entry 0", "entry 1", "entry 2")
    assert "counting" in LOADER_REGISTRY


def test_unregistered_loader_type():
    cfg = CountingLoaderConfig()
    cfg.loader_type = "missing"
    with pytest.raises(ValueError, match="not registered"):
        create_loader(cfg)
