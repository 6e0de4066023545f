# tests/test_config.py
"""
Tests for TOML profiles and the context-local runtime.

Run: pytest -v
"""

from __future__ import annotations

import pytest

from numkernel.config import has_profile, list_all_profiles, load_settings, workspace_dir
from numkernel.errors import ConfigError
from numkernel.runtime import APPLY, CFG, current


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.setenv("NUMKERNEL_HOME", str(tmp_path))
    (tmp_path / "profiles").mkdir()
    return tmp_path


def _write_profile(ws, name: str, text: str) -> None:
    (ws / "profiles" / f"{name}.toml").write_text(text, encoding="utf-8")


def test_workspace_from_environment(workspace):
    assert workspace_dir() == workspace.resolve()


def test_missing_default_profile_yields_builtin_defaults(workspace):
    s = load_settings(None)
    assert s.name == "default"
    assert s.data["SIEVE"]["MAX_LIMIT"] == 10_000_000
    assert s.data["BIGINT"]["MAX_DIGITS"] == 1_000_000
    assert s.data["BEHAVIOUR"]["DEBUG"] is False


def test_missing_named_profile(workspace):
    with pytest.raises(FileNotFoundError):
        load_settings("nope")


def test_profile_overrides_defaults_and_feeds_runtime(workspace):
    _write_profile(workspace, "small", """
[_PROFILE_]
name = "small"
description = '''tight   limits
for tests'''

[SIEVE]
MAX_LIMIT = 500

[BEHAVIOUR]
DEBUG = true
""")
    assert has_profile("small")
    assert list_all_profiles() == ["small"]

    s = load_settings("small")
    assert s.description == "tight limits for tests"
    assert "_PROFILE_" not in s.data
    assert s.data["SIEVE"]["MAX_LIMIT"] == 500
    assert s.data["BIGINT"]["MAX_DIGITS"] == 1_000_000

    APPLY(s)
    rt = current()
    assert rt.profile_name == "small"
    assert rt.debug is True
    assert CFG("SIEVE.MAX_LIMIT") == 500
    assert CFG("SIEVE.NOT_THERE", 7) == 7
    assert CFG("", "fallback") == "fallback"


def test_malformed_toml_reports_location(workspace):
    _write_profile(workspace, "broken", "[SIEVE\nMAX_LIMIT = 3\n")
    with pytest.raises(ConfigError, match="line 1"):
        load_settings("broken")


@pytest.mark.parametrize("body", [
    "[SIEVE]\nMAX_LIMIT = 0\n",
    "[SIEVE]\nMAX_LIMIT = \"big\"\n",
    "[BIGINT]\nMAX_DIGITS = true\n",
    "[BEHAVIOUR]\nDEBUG = 1\n",
])
def test_invalid_values_are_rejected(workspace, body):
    _write_profile(workspace, "bad", body)
    with pytest.raises(ConfigError):
        load_settings("bad")


def test_apply_accepts_plain_dicts():
    APPLY({"BIGINT": {"MAX_DIGITS": 5}})
    assert CFG("BIGINT.MAX_DIGITS") == 5
    assert current().profile_name == "default"
