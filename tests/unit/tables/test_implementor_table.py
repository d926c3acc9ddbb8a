from implementors.tables import ImplementorTable


def test_mapping_interface_preserves_order():
    table = ImplementorTable({"vec_map": ["a"], "bitflags": ["b", "c"]})
    assert list(table) == ["vec_map", "bitflags"]
    assert len(table) == 2
    assert table["bitflags"] == ("b", "c")
    assert "vec_map" in table
    assert table.markup_count() == 3


def test_table_is_detached_from_source():
    source = {"clap": ["Error for Error"]}
    table = ImplementorTable(source)
    source["clap"].append("extra")
    source["time"] = []
    assert table["clap"] == ("Error for Error",)
    assert "time" not in table


def test_equality_ignores_trait():
    a = ImplementorTable({"clap": ["x"]}, trait="std::error::Error")
    b = ImplementorTable({"clap": ("x",)})
    assert a == b
    assert a != ImplementorTable({"clap": ["y"]})


def test_dict_conversion():
    table = ImplementorTable({"time": ["one", "two"]}, trait="std::error::Error")
    data = table.to_dict()
    assert data == {"trait": "std::error::Error", "implementors": {"time": ["one", "two"]}}

    restored = ImplementorTable.from_dict(data)
    assert restored == table
    assert restored.trait == "std::error::Error"


def test_from_bare_mapping():
    table = ImplementorTable.from_dict({"bitflags": ["Hash for Flags"]})
    assert table.trait is None
    assert table.libraries() == ["bitflags"]


def test_empty_table():
    table = ImplementorTable()
    assert len(table) == 0
    assert table.markup_count() == 0
    assert "libraries=[]" in repr(table)
