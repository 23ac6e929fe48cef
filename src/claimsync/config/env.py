"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _read(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"Configuration value {name} must not be blank", variable=name)
    return stripped


def env_or_default(name: str, default: str) -> str:
    """Return ``name`` from the environment, falling back to ``default`` when unset.

    A variable that is set but blank is rejected rather than silently defaulted.
    """

    value = _read(name)
    return default if value is None else value


def env_flag(name: str, *, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ConfigurationError(
        f"Configuration value {name} is not a boolean: {value!r}", variable=name
    )


def env_positive_float(name: str, default: float) -> float:
    value = _read(name)
    if value is None:
        return default
    try:
        number = float(value)
    except ValueError:
        number = 0.0
    if number <= 0:
        raise ConfigurationError(
            f"Configuration value {name} must be a positive number: {value!r}", variable=name
        )
    return number


def env_optional_positive_int(name: str) -> int | None:
    """Return ``name`` as a positive integer, or ``None`` when it is unset."""

    value = _read(name)
    if value is None:
        return None
    if not value.isdigit() or int(value) < 1:
        raise ConfigurationError(
            f"Configuration value {name} must be a positive integer: {value!r}", variable=name
        )
    return int(value)
