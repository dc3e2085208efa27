"""Shared helpers for cross_ci_tooling (backoff, command formatting, env parsing).

Used by retry, cargo, toolchain, and cli modules.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence

# --- Retry ---


def doubling_backoff_sequence(initial_delay: float, count: int) -> list[float]:
    """Delays (seconds) before retries 1..count: initial_delay, 2x, 4x, ..."""
    sequence: list[float] = []
    delay = initial_delay
    for _ in range(count):
        sequence.append(delay)
        delay *= 2
    return sequence


# --- Command ---


def format_command(cmd: Sequence[str]) -> str:
    """Shell-quoted command line, as `set -x` would echo it."""
    return shlex.join(str(c) for c in cmd)


# --- Env ---


def parse_int_env(name: str, raw: str | None, default: int) -> int:
    """Parse an integer env value; empty/None means default. Raises ValueError if not an integer."""
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from None


def parse_float_env(name: str, raw: str | None, default: float) -> float:
    """Parse a numeric env value; empty/None means default. Raises ValueError if not a number."""
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        msg = f"{name} must be a number of seconds, got {raw!r}"
        raise ValueError(msg) from None
