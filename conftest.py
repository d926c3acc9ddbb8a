import os
import sys

import pytest

# Add the project root directory to the Python path
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from implementors.registry import ImplementorRegistry, get_default_registry  # noqa: E402
from implementors.tables import ImplementorTable  # noqa: E402


@pytest.fixture(autouse=True)
def clean_default_registry():
    get_default_registry().reset()
    yield
    get_default_registry().reset()


@pytest.fixture
def registry():
    return ImplementorRegistry()


@pytest.fixture
def bitflags_table():
    return ImplementorTable({"bitflags": ["Hash for Flags"]}, trait="core::hash::Hash")


@pytest.fixture
def clap_table():
    return ImplementorTable({"clap": ["Error for Error"]}, trait="std::error::Error")
