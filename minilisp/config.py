from __future__ import annotations
import logging
import os


_DEFAULT_MAX_DEPTH = 200
_DEFAULT_PROMPT = 'repl> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def _from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def int_from_env(var: str, default: int) -> int:
    raw = _from_env(var, str(default))
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    """Maximum parenthesis nesting the parser accepts."""
    return int_from_env('MINILISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_prompt() -> str:
    # prompt is used verbatim, trailing space included
    raw = os.environ.get('MINILISP_PROMPT')
    return raw if raw else _DEFAULT_PROMPT


def get_log_level() -> str:
    level = _from_env('MINILISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName maps known names to ints and echoes unknown ones back
    if not isinstance(logging.getLevelName(level), int):
        return _DEFAULT_LOG_LEVEL
    return level
