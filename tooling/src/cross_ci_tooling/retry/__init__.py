"""Retry an external command with doubling backoff."""

from .runner import (
    COMMAND_NOT_EXECUTABLE,
    COMMAND_NOT_FOUND,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_TRIES,
    NOT_ATTEMPTED,
    Attempt,
    Executable,
    RetryRunner,
    SubprocessCommand,
    as_executable,
    retry,
)

__all__ = [
    "COMMAND_NOT_EXECUTABLE",
    "COMMAND_NOT_FOUND",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_TRIES",
    "NOT_ATTEMPTED",
    "Attempt",
    "Executable",
    "RetryRunner",
    "SubprocessCommand",
    "as_executable",
    "retry",
]
