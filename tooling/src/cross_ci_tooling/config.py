"""Retry and smoke-test configuration (env defaults, overridable by CLI flags)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cross_ci_tooling.helpers import parse_float_env, parse_int_env

# Same names and defaults as the original shell `retry` helper (TRIES, TIMEOUT).
DEFAULT_RETRY_SETTINGS: dict[str, Any] = {
    "max_tries": 5,
    "initial_delay": 1.0,
}

TRIES_ENV = "TRIES"
TIMEOUT_ENV = "TIMEOUT"
CROSS_ENV = "CROSS"
LOG_LEVEL_ENV = "CROSS_CI_LOG_LEVEL"


def resolve_retry_settings(
    max_tries: int | None = None,
    initial_delay: float | None = None,
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Return {"max_tries", "initial_delay"}: explicit args win, then TRIES/TIMEOUT, then defaults.

    Raises ValueError when an env value is not numeric.
    """
    if env is None:
        env = os.environ
    out = dict(DEFAULT_RETRY_SETTINGS)
    out["max_tries"] = parse_int_env(TRIES_ENV, env.get(TRIES_ENV), out["max_tries"])
    out["initial_delay"] = parse_float_env(TIMEOUT_ENV, env.get(TIMEOUT_ENV), out["initial_delay"])
    if max_tries is not None:
        out["max_tries"] = max_tries
    if initial_delay is not None:
        out["initial_delay"] = initial_delay
    return out


def resolve_cross_bin(
    project_root: Path,
    cross_bin: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Cross binary: explicit path, else $CROSS, else <project_root>/target/debug/cross."""
    if cross_bin:
        return Path(cross_bin)
    if env is None:
        env = os.environ
    from_env = env.get(CROSS_ENV)
    if from_env:
        return Path(from_env)
    return project_root / "target" / "debug" / "cross"


def resolve_log_level(env: Mapping[str, str] | None = None) -> str:
    """Log level name from CROSS_CI_LOG_LEVEL (default WARNING)."""
    if env is None:
        env = os.environ
    return (env.get(LOG_LEVEL_ENV) or "WARNING").strip().upper()
