from __future__ import annotations
import logging
import os


_DEFAULT_LOG_LEVEL = logging.WARNING
# Each language-level call nests several Python frames
_DEFAULT_RECURSION_LIMIT = 10_000


def level_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_log_level() -> int:
    return level_from_env('LAMB_LOG_LEVEL', _DEFAULT_LOG_LEVEL)


def get_recursion_limit() -> int:
    return int_from_env('LAMB_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
