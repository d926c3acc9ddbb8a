import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "render_implementors.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("render_implementors", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_usage_on_wrong_arguments(script, capsys):
    assert script.main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_renders_sample_session(script, capsys, monkeypatch):
    monkeypatch.setattr(script, "configure_logging", lambda level: None)
    assert script.main([str(SCRIPT.with_suffix(".yaml"))]) == 0

    out = capsys.readouterr().out
    assert "core::hash::Hash" in out
    assert "std::error::Error" in out
    assert "Hash for Flags" in out
    assert "StdError for Compat<E>" in out
