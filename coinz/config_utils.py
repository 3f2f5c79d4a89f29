"""Readers for coinz settings.

Settings arrive as strings from the environment (or a ``.env`` file loaded by
``main``). Each reader validates one key and raises ``ConfigError`` naming the
key and the bad value, which ``main`` reports as a fatal error.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .errors import CoinzError


class ConfigError(CoinzError, ValueError):
    pass


def _unset(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require(config: Mapping[str, Any], key: str) -> Any:
    """Return ``config[key]``, failing when it is absent or blank."""
    value = config.get(key)
    if _unset(value):
        raise ConfigError(f"setting {key} is not set; export it or add it to .env")
    return value


def optional(config: Mapping[str, Any], key: str) -> Optional[Any]:
    value = config.get(key)
    if _unset(value):
        return None
    return value


def require_float(config: Mapping[str, Any], key: str) -> float:
    raw = require(config, key)
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"setting {key}={raw!r} is not a number") from e


def require_positive_float(config: Mapping[str, Any], key: str) -> float:
    """Seconds-style settings: a number strictly greater than zero (NaN rejected)."""
    seconds = require_float(config, key)
    if not seconds > 0:
        raise ConfigError(f"setting {key}={seconds!r} must be greater than 0")
    return seconds


def require_log_level(config: Mapping[str, Any], key: str) -> int:
    """Map a level name such as ``debug`` or ``WARNING`` to its logging constant."""
    name = str(require(config, key)).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"setting {key}={name!r} is not a logging level name")
    return level
