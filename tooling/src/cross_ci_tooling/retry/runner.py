"""Run a command, retrying on non-zero exit with doubling backoff.

Each failed attempt (other than the last) prints a diagnostic to stderr, sleeps
for the current delay, and doubles the delay. Success short-circuits. When all
tries fail, the status of the last attempt is returned as-is.
"""

from __future__ import annotations

import logging
import subprocess
import sys
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from cross_ci_tooling.helpers import doubling_backoff_sequence, format_command

log = logging.getLogger(__name__)

DEFAULT_MAX_TRIES = 5
DEFAULT_INITIAL_DELAY = 1.0

# Returned when max_tries == 0: the command was never executed.
NOT_ATTEMPTED = -1

# Shell conventions for spawn failures.
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class Executable(Protocol):
    def run(self) -> int: ...


@dataclass(frozen=True)
class Attempt:
    """One execution within a retry sequence."""

    attempt_number: int
    delay_before_run: float
    exit_status: int


class SubprocessCommand:
    """Executable backed by subprocess.run; spawn failures map to 127/126."""

    def __init__(
        self,
        argv: Sequence[str],
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        if not argv:
            msg = "command must not be empty"
            raise ValueError(msg)
        self.argv = [str(a) for a in argv]
        self.cwd = cwd
        self.env = dict(env) if env is not None else None

    def run(self) -> int:
        log.debug("spawning %s (cwd=%s)", format_command(self.argv), self.cwd)
        try:
            r = subprocess.run(self.argv, cwd=self.cwd, env=self.env)
        except FileNotFoundError as e:
            log.debug("command not found: %s", e)
            print(f"{self.argv[0]}: command not found", file=sys.stderr)
            return COMMAND_NOT_FOUND
        except OSError as e:
            log.debug("spawn failed: %s", e)
            print(f"{self.argv[0]}: {e.strerror or e}", file=sys.stderr)
            return COMMAND_NOT_EXECUTABLE
        return r.returncode

    def __repr__(self) -> str:
        return f"SubprocessCommand({format_command(self.argv)!r})"


Command = Executable | Sequence[str]


def as_executable(command: Command) -> Executable:
    """Wrap an argv sequence in SubprocessCommand; pass Executables through."""
    if hasattr(command, "run"):
        return command  # type: ignore[return-value]
    if isinstance(command, str):
        msg = "command must be an argv sequence, not a string"
        raise TypeError(msg)
    return SubprocessCommand(command)


class RetryRunner:
    """Bounded retry loop with doubling delay and injectable sleep.

    attempts holds the Attempt records of the most recent run().
    """

    def __init__(
        self,
        max_tries: int = DEFAULT_MAX_TRIES,
        initial_delay: float = DEFAULT_INITIAL_DELAY,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        if max_tries < 0:
            msg = f"max_tries must be >= 0, got {max_tries}"
            raise ValueError(msg)
        if initial_delay < 0:
            msg = f"initial_delay must be >= 0, got {initial_delay}"
            raise ValueError(msg)
        self.max_tries = max_tries
        self.initial_delay = initial_delay
        self._sleep = sleep
        self.attempts: list[Attempt] = []

    def _do_sleep(self, seconds: float) -> None:
        # Resolved per call so time.sleep can be patched.
        if self._sleep is not None:
            self._sleep(seconds)
        else:
            time.sleep(seconds)

    def run(self, command: Command) -> int:
        """Run command until it exits 0 or max_tries is reached. Returns the final exit status."""
        executable = as_executable(command)
        self.attempts = []
        status = NOT_ATTEMPTED
        backoff = doubling_backoff_sequence(self.initial_delay, max(self.max_tries - 1, 0))

        for attempt_number in range(self.max_tries):
            delay = 0.0
            if attempt_number > 0:
                delay = backoff[attempt_number - 1]
                print(
                    f"Retrying ... (attempt {attempt_number + 1}/{self.max_tries}, "
                    f"waiting {delay:g}s)",
                    file=sys.stderr,
                )
                self._do_sleep(delay)

            status = executable.run()
            self.attempts.append(Attempt(attempt_number, delay, status))
            log.debug("attempt %d exited %d", attempt_number + 1, status)
            if status == 0:
                return 0

        if self.max_tries == 0:
            log.warning("max_tries is 0; %r was not run", executable)
        return status


def retry(
    command: Command,
    max_tries: int = DEFAULT_MAX_TRIES,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    sleep: Callable[[float], None] | None = None,
) -> int:
    """Run command with retries. Returns 0 on success, the last failing status, or NOT_ATTEMPTED."""
    return RetryRunner(max_tries=max_tries, initial_delay=initial_delay, sleep=sleep).run(command)
