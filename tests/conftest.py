from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def doc_root():
    return DATA_DIR


@pytest.fixture
def hash_data_file():
    return DATA_DIR / "implementors" / "core" / "hash" / "trait.Hash.js"


@pytest.fixture
def error_data_file():
    return DATA_DIR / "implementors" / "std" / "error" / "trait.Error.js"


@pytest.fixture
def vec_map_markup():
    return (
        'impl&lt;V:&nbsp;<a class="trait" href="https://doc.rust-lang.org/nightly/core/hash/trait.Hash.html" '
        'title="trait core::hash::Hash">Hash</a>&gt; <a class="trait" '
        'href="https://doc.rust-lang.org/nightly/core/hash/trait.Hash.html" title="trait core::hash::Hash">Hash</a> '
        'for <a class="struct" href="vec_map/struct.VecMap.html" title="struct vec_map::VecMap">VecMap</a>&lt;V&gt;'
    )


@pytest.fixture
def flags_markup():
    return (
        'impl <a class="trait" href="https://doc.rust-lang.org/nightly/core/hash/trait.Hash.html" '
        'title="trait core::hash::Hash">Hash</a> for <a class="struct" '
        'href="bitflags/example_generated/struct.Flags.html" '
        'title="struct bitflags::example_generated::Flags">Flags</a>'
    )
