from implementors.utils.plugin_loader import import_submodules


def test_imports_package_and_every_submodule():
    names = [m.__name__ for m in import_submodules("implementors.loaders.configs")]
    assert names[0] == "implementors.loaders.configs"
    for leaf in ("base", "js_data_file", "literal", "loader_config_registry", "structured_file"):
        assert f"implementors.loaders.configs.{leaf}" in names


def test_plain_module_returns_itself():
    modules = import_submodules("implementors.errors")
    assert [m.__name__ for m in modules] == ["implementors.errors"]
