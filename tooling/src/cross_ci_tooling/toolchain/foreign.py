"""Smoke test: cross works with foreign (non cross-provided) toolchain images.

Fetches and builds the cross binary in project_root, creates a throwaway crate
under target/tmp, then runs `cross run -v` once per Cross.toml scenario.
Stops at the first failing step. CROSS is exported to every child process.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path

from cross_ci_tooling.cargo import make_cargo_temp
from cross_ci_tooling.config import CROSS_ENV, resolve_cross_bin, resolve_retry_settings
from cross_ci_tooling.helpers import format_command
from cross_ci_tooling.retry import RetryRunner, SubprocessCommand
from cross_ci_tooling.toolchain.scenarios import DEFAULT_SCENARIOS, ToolchainScenario

log = logging.getLogger(__name__)

CRATE_NAME = "foreign_toolchain"


def _run(cmd: Sequence[str], cwd: Path, env: Mapping[str, str]) -> int:
    print(f"+ {format_command(cmd)}", file=sys.stderr)
    return SubprocessCommand(cmd, cwd=cwd, env=env).run()


class _Step:
    """Executable that goes through _run (so retries echo the command too)."""

    def __init__(self, cmd: Sequence[str], cwd: Path, env: Mapping[str, str]) -> None:
        self.cmd = list(cmd)
        self.cwd = cwd
        self.env = env

    def run(self) -> int:
        return _run(self.cmd, self.cwd, self.env)

    def __repr__(self) -> str:
        return f"_Step({format_command(self.cmd)!r})"


def _run_scenarios(
    crate_dir: Path,
    cross: Path,
    scenarios: Sequence[ToolchainScenario],
    env: Mapping[str, str],
) -> int:
    if _run(["cargo", "init", "--bin", "--name", CRATE_NAME], crate_dir, env) != 0:
        print(f"❌ cargo init failed in {crate_dir}", file=sys.stderr)
        return 1
    for scenario in scenarios:
        print(f"==> {scenario.name}", file=sys.stderr)
        (crate_dir / "Cross.toml").write_text(scenario.cross_toml)
        if _run([str(cross), "run", "-v"], crate_dir, env) != 0:
            print(f"❌ cross run failed for scenario {scenario.name}", file=sys.stderr)
            return 1
    return 0


def run_foreign_toolchain(
    project_root: Path,
    cross_bin: Path | str | None = None,
    scenarios: Iterable[ToolchainScenario] | None = None,
    max_tries: int | None = None,
    initial_delay: float | None = None,
    keep: bool = False,
    sleep: Callable[[float], None] | None = None,
) -> int:
    """Fetch (with retry), build, and run cross against each scenario. Returns 0/1."""
    settings = resolve_retry_settings(max_tries=max_tries, initial_delay=initial_delay)
    cross = resolve_cross_bin(project_root, cross_bin)
    selected = list(scenarios) if scenarios is not None else list(DEFAULT_SCENARIOS)
    env = dict(os.environ)
    env[CROSS_ENV] = str(cross)
    log.debug("cross=%s scenarios=%s", cross, [s.name for s in selected])

    runner = RetryRunner(
        max_tries=settings["max_tries"],
        initial_delay=settings["initial_delay"],
        sleep=sleep,
    )
    rc = runner.run(_Step(["cargo", "fetch"], project_root, env))
    if not runner.attempts:
        print("❌ cargo fetch was not attempted (max tries is 0)", file=sys.stderr)
        return 1
    if rc != 0:
        print(f"❌ cargo fetch failed after {len(runner.attempts)} attempt(s) (exit {rc})", file=sys.stderr)
        return 1

    if _run(["cargo", "build"], project_root, env) != 0:
        print("❌ cargo build failed", file=sys.stderr)
        return 1

    try:
        crate_dir = make_cargo_temp(project_root, directory=True)
    except OSError as e:
        print(f"❌ Could not create temp crate: {e}", file=sys.stderr)
        return 1

    try:
        rc = _run_scenarios(crate_dir, cross, selected, env)
    finally:
        if keep:
            print(f"Kept temp crate: {crate_dir}", file=sys.stderr)
        else:
            shutil.rmtree(crate_dir, ignore_errors=True)

    if rc != 0:
        return rc
    names = ", ".join(s.name for s in selected)
    print(f"✅ Foreign toolchains OK: {names}")
    return 0
