"""Editor settings and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "ROWEDIT_"

TAB_STOP = 8
QUIT_TIMES = 3
STATUS_TIMEOUT = 5.0
HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-X = quit"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Knobs the core reads; fixed for the lifetime of a session."""

    tab_stop: int = TAB_STOP
    quit_times: int = QUIT_TIMES
    status_timeout: float = STATUS_TIMEOUT
    help_message: str = HELP_MESSAGE

    def __post_init__(self) -> None:
        if self.tab_stop <= 0:
            raise ValueError("tab_stop must be positive")
        if self.quit_times < 0:
            raise ValueError("quit_times cannot be negative")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        return cls(
            tab_stop=_env_int(env, "TAB_STOP", TAB_STOP, minimum=1),
            quit_times=_env_int(env, "QUIT_TIMES", QUIT_TIMES, minimum=0),
            status_timeout=_env_float(env, "STATUS_TIMEOUT", STATUS_TIMEOUT),
        )


def _env_int(
    env: Mapping[str, str], key: str, fallback: int, *, minimum: int
) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= minimum else fallback


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


__all__ = ["EditorConfig", "TAB_STOP", "QUIT_TIMES", "STATUS_TIMEOUT"]
