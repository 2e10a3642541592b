"""Unit tests for command line tokenising and configuration lookup."""

from __future__ import annotations

import pytest

from dashcharts.cli.commands import get, names
from dashcharts.cli.router import _coerce_scalar, _parse_args
from dashcharts.env import get_output_config
from dashcharts.util.env import get_env

pytestmark = pytest.mark.unit


def test_parse_args_splits_positionals_flags_and_pairs() -> None:
    """Negative numbers stay positional; options take the following token."""

    sub, args, opts = _parse_args(["bar", "-5", "3", "--labels", "a,b", "--verbose", "width=600"])
    assert sub == "bar"
    assert args == ["-5", "3"]
    assert opts == {"labels": "a,b", "verbose": True, "width": 600}


def test_parse_args_empty() -> None:
    """No tokens means no subcommand."""

    assert _parse_args([]) == (None, [], {})


def test_coerce_scalar() -> None:
    """Tokens become bools, ints and floats where they parse."""

    assert _coerce_scalar("true") is True
    assert _coerce_scalar("12") == 12
    assert _coerce_scalar("1.5") == 1.5
    assert _coerce_scalar("svg") == "svg"


def test_registry_holds_every_command() -> None:
    """All commands register themselves on import."""

    assert {"help", "palette", "line", "bar", "pie", "render", "dashboard"} <= set(names())
    assert get("nope") is None


def test_output_config_defaults(monkeypatch) -> None:
    """Unset or empty variables fall back to the defaults."""

    monkeypatch.delenv("DASHCHARTS_OUTPUT_DIR", raising=False)
    monkeypatch.setenv("DASHCHARTS_FORMAT", "")
    assert get_output_config() == ("charts", "svg")


def test_output_config_from_env(monkeypatch) -> None:
    """Formats are normalised to lower case."""

    monkeypatch.setenv("DASHCHARTS_OUTPUT_DIR", "/tmp/charts")
    monkeypatch.setenv("DASHCHARTS_FORMAT", "PNG")
    assert get_output_config() == ("/tmp/charts", "png")


def test_get_env(monkeypatch) -> None:
    """Set values win over the fallback; missing ones do not."""

    monkeypatch.setenv("DASHCHARTS_A", "1")
    monkeypatch.delenv("DASHCHARTS_MISSING", raising=False)

    assert get_env("DASHCHARTS_A", "fallback") == "1"
    assert get_env("DASHCHARTS_MISSING", "fallback") == "fallback"
