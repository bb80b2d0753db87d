"""
Evaluation profiles loaded from matheval.toml.

Example:

    [variables]
    a = 52
    b = 18.5

    [logging]
    level = "WARNING"
"""

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from matheval.errors import ConfigError

DEFAULT_CONFIG_NAME = "matheval.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


@dataclass
class EvalConfig:
    """Variables and logging settings for evaluation."""

    variables: dict[str, float] = field(default_factory=dict)
    log_level: str = "WARNING"


def load_config(path: Path) -> EvalConfig:
    """Load an evaluation profile from a TOML file.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    variables_data = data.get("variables", {})
    logging_data = data.get("logging", {})
    if not isinstance(variables_data, dict):
        raise ConfigError("[variables] must be a table")
    if not isinstance(logging_data, dict):
        raise ConfigError("[logging] must be a table")

    variables = {name: _check_variable(name, value) for name, value in variables_data.items()}

    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")

    logger.debug("Loaded %d variable(s) from %s", len(variables), path)
    return EvalConfig(variables=variables, log_level=level)


def parse_assignment(text: str) -> tuple[str, float]:
    """Parse a ``name=value`` assignment, e.g. ``"a=52"``.

    Raises:
        ConfigError: If the assignment is malformed.
    """
    name, sep, raw_value = text.partition("=")
    name = name.strip()
    if not sep:
        raise ConfigError(f"Expected NAME=VALUE, got {text!r}")
    try:
        value = float(raw_value.strip())
    except ValueError as e:
        raise ConfigError(f"Variable {name!r} has a non-numeric value: {raw_value.strip()!r}") from e
    return name, _check_variable(name, value)


def merge_variables(
    base: Mapping[str, float], overrides: Mapping[str, float]
) -> dict[str, float]:
    """Combine variable sources; *overrides* win."""
    merged = dict(base)
    merged.update(overrides)
    return merged


def _check_variable(name: str, value: object) -> float:
    # Identifiers are letters only, matching the tokenizer
    if not name or not name.isalpha():
        raise ConfigError(f"Invalid variable name {name!r}: use letters only")
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ConfigError(f"Variable {name!r} must be a number, got {value!r}")
    return float(value)
