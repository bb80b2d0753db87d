"""Tests for matheval.toml profiles and variable assignments."""

from __future__ import annotations

from pathlib import Path

import pytest

from matheval.config import EvalConfig, load_config, merge_variables, parse_assignment
from matheval.errors import ConfigError


class TestLoadConfig:
    def test_variables_and_level(self, profile_file: Path) -> None:
        config = load_config(profile_file)
        assert config.variables == {"a": 52.0, "b": 18.0}
        assert all(isinstance(v, float) for v in config.variables.values())
        assert config.log_level == "WARNING"

    def test_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "matheval.toml"
        path.write_text("")
        assert load_config(path) == EvalConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "matheval.toml"
        path.write_text("[variables\na = 1")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ("variables = 3", "must be a table"),
            ("[variables]\nx1 = 2", "letters only"),
            ("[variables]\nflag = true", "must be a number"),
            ('[variables]\nname = "ten"', "must be a number"),
            ('[logging]\nlevel = "loud"', "Unknown log level"),
        ],
    )
    def test_invalid_content(self, tmp_path: Path, body: str, message: str) -> None:
        path = tmp_path / "matheval.toml"
        path.write_text(body)
        with pytest.raises(ConfigError, match=message):
            load_config(path)


class TestAssignments:
    def test_parse(self) -> None:
        assert parse_assignment("a=52") == ("a", 52.0)
        assert parse_assignment(" rate = 0.5 ") == ("rate", 0.5)

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("a", "NAME=VALUE"),
            ("a=x", "non-numeric"),
            ("a1=2", "letters only"),
            ("=2", "letters only"),
        ],
    )
    def test_invalid(self, text: str, message: str) -> None:
        with pytest.raises(ConfigError, match=message):
            parse_assignment(text)

    def test_merge_overrides_win(self) -> None:
        base = {"a": 1.0, "b": 2.0}
        merged = merge_variables(base, {"b": 5.0, "c": 3.0})
        assert merged == {"a": 1.0, "b": 5.0, "c": 3.0}
        assert base == {"a": 1.0, "b": 2.0}
