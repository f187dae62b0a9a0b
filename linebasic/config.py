from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from linebasic.errors import ConfigError

_FALSE = {"0", "false", "no", "off"}


def load_env() -> None:
    # a `.env` next to the working directory, if any; real env vars win
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path)


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE


@dataclass(frozen=True)
class Settings:
    max_steps: int | None
    dump: bool
    log_level: str
    strict_lines: bool


def _max_steps() -> int | None:
    raw = (os.getenv("LINEBASIC_MAX_STEPS") or "").strip()
    if not raw:
        return None
    try:
        steps = int(raw)
    except ValueError:
        raise ConfigError(f"LINEBASIC_MAX_STEPS must be an integer, got `{raw}`") from None
    if steps < 0:
        raise ConfigError(f"LINEBASIC_MAX_STEPS must not be negative, got `{raw}`")
    return steps


def load_settings() -> Settings:
    load_env()
    return Settings(
        max_steps=_max_steps(),
        dump=_flag("LINEBASIC_DUMP", True),
        log_level=(os.getenv("LINEBASIC_LOG_LEVEL") or "WARNING").strip().upper(),
        strict_lines=_flag("LINEBASIC_STRICT_LINES", False),
    )
