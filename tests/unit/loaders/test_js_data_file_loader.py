import pytest

from implementors.errors import ImplementorDataError
from implementors.loaders import create_loader, discover_data_files
from implementors.loaders.configs.js_data_file import JsDataFileLoaderConfig
from implementors.loaders.js_data_file import JsDataFileLoader, parse_js_data, trait_path_from_file
from implementors.registry import RegistryState
from tests.helpers.stubs import RecordingConsumer


def test_parse_hash_file(hash_data_file):
    entries = parse_js_data(hash_data_file.read_text())
    assert list(entries) == ["bitflags", "libmodbus_rs", "libmodbus_sys", "vec_map"]
    assert len(entries["bitflags"]) == 1
    assert len(entries["libmodbus_sys"]) == 11
    assert entries["bitflags"][0].startswith('impl <a class="trait" href="https://doc.rust-lang.org')
    assert "&lt;V:&nbsp;" in entries["vec_map"][0]


def test_parse_error_file(error_data_file):
    entries = parse_js_data(error_data_file.read_text())
    assert list(entries) == ["clap", "failure", "time"]
    assert len(entries["time"]) == 2


def test_parse_unescapes_quotes_and_allows_trailing_comma():
    source = 'var implementors = {};\nimplementors["a"] = ["x \\"q\\"", "y",];\n'
    assert parse_js_data(source) == {"a": ['x "q"', "y"]}


def test_parse_empty_table():
    assert parse_js_data("(function() {var implementors = {};})()") == {}


def test_parse_rejects_non_data_file():
    with pytest.raises(ImplementorDataError):
        parse_js_data("console.log('hello');")


def test_parse_rejects_unterminated_list():
    with pytest.raises(ImplementorDataError, match="unterminated"):
        parse_js_data('var implementors = {};\nimplementors["a"] = ["x",')


def test_parse_rejects_non_string_items():
    with pytest.raises(ImplementorDataError):
        parse_js_data('var implementors = {};\nimplementors["a"] = [42];')


def test_trait_path_from_file(hash_data_file):
    assert trait_path_from_file(hash_data_file) == "core::hash::Hash"
    assert trait_path_from_file("docs/implementors/std/error/trait.Error.js") == "std::error::Error"
    assert trait_path_from_file("trait.Error.js") is None


def test_discover_data_files(doc_root, hash_data_file, error_data_file):
    assert discover_data_files(doc_root) == [hash_data_file, error_data_file]


def test_discover_requires_implementors_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        discover_data_files(tmp_path)


def test_loader_delivers_table(registry, hash_data_file):
    consumer = RecordingConsumer()
    registry.bind_consumer(consumer)
    loader = create_loader(JsDataFileLoaderConfig(path=hash_data_file))
    assert isinstance(loader, JsDataFileLoader)

    table = loader.run(registry)

    assert consumer.calls == [table]
    assert table.trait == "core::hash::Hash"
    assert table.markup_count() == 14


def test_explicit_trait_wins(registry, hash_data_file):
    loader = JsDataFileLoader(JsDataFileLoaderConfig(path=hash_data_file, trait="my::Hash"))
    loader.run(registry)
    assert registry.pending[0].trait == "my::Hash"


def test_missing_file(registry, tmp_path):
    loader = JsDataFileLoader(JsDataFileLoaderConfig(path=tmp_path / "trait.Nope.js"))
    with pytest.raises(FileNotFoundError):
        loader.run(registry)
    assert registry.state is RegistryState.IDLE
