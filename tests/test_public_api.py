"""Tests for the package surface and module side-effect behavior."""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import xmlvalue
from xmlvalue import api

if TYPE_CHECKING:
    import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "check_public_api.py"


def test_package_all_matches_api() -> None:
    assert xmlvalue.__all__ == ["__version__", "logger", *api.__all__]
    for name in api.__all__:
        assert getattr(xmlvalue, name) is getattr(api, name)


def test_version_and_logger_exposed() -> None:
    assert isinstance(xmlvalue.__version__, str)
    assert xmlvalue.logger.name == "xmlvalue"


def test_check_public_api_script(capsys: pytest.CaptureFixture[str]) -> None:
    spec = importlib.util.spec_from_file_location("check_public_api", SCRIPT)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert module.main() == 0
    assert "OK" in capsys.readouterr().out


def test_import_has_no_logging_side_effects(monkeypatch: pytest.MonkeyPatch) -> None:
    """Importing the package should not configure logging."""
    basic_called = False

    def fake_basic(*args: object, **kwargs: object) -> None:
        nonlocal basic_called
        basic_called = True

    monkeypatch.setattr(logging, "basicConfig", fake_basic)
    for name in [m for m in sys.modules if m == "xmlvalue" or m.startswith("xmlvalue.")]:
        monkeypatch.delitem(sys.modules, name)
    importlib.import_module("xmlvalue")

    assert basic_called is False
    assert logging.getLogger("xmlvalue").handlers == []


def test_absent_flag_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    root = xmlvalue.parse_node("<r/>")
    with caplog.at_level(logging.DEBUG, logger="xmlvalue"):
        assert xmlvalue.find_bool(root, "missing") is False
    assert any("missing" in rec.getMessage() for rec in caplog.records)
