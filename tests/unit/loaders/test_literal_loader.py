import pytest

from implementors.loaders import create_loader, load_implementors
from implementors.loaders.configs.literal import LiteralLoaderConfig
from implementors.loaders.literal import LiteralLoader
from implementors.registry import RegistryState, get_default_registry
from tests.helpers.stubs import RecordingConsumer


def test_load_implementors_delivers_to_registry(registry):
    table = load_implementors({"bitflags": ["Hash for Flags"]}, trait="core::hash::Hash", registry=registry)
    assert registry.pending == [table]
    assert table["bitflags"] == ("Hash for Flags",)
    assert table.trait == "core::hash::Hash"


def test_load_implementors_defaults_to_process_registry():
    load_implementors({"clap": ["Error for Error"]})
    assert get_default_registry().state is RegistryState.PENDING


def test_two_loaders_then_render():
    rendered = RecordingConsumer("render")
    load_implementors({"bitflags": ["Hash for Flags"]})
    load_implementors({"clap": ["Error for Error"]})
    get_default_registry().bind_consumer(rendered)

    assert len(rendered.calls) == 1
    assert dict(rendered.calls[0]) == {"clap": ("Error for Error",)}


def test_loader_runs_only_once(registry):
    loader = create_loader(LiteralLoaderConfig(entries={"a": ["x"]}))
    assert isinstance(loader, LiteralLoader)
    loader.run(registry)
    assert loader.delivered
    with pytest.raises(RuntimeError):
        loader.run(registry)
    assert len(registry.pending) == 1
