"""CLI for ci: cross-ci ci test-foreign-toolchain."""

from __future__ import annotations

import sys
from pathlib import Path

from cross_ci_tooling.cli.parse_common import parse_flags, path_resolver, project_root_resolver
from cross_ci_tooling.toolchain import load_scenarios, run_foreign_toolchain


def run_ci_argv() -> None:
    """Dispatch cross-ci ci <subcommand>."""
    if len(sys.argv) < 3:
        print(
            "Usage: cross-ci ci <subcommand> [options]",
            file=sys.stderr,
        )
        print(
            "Subcommands: test-foreign-toolchain",
            file=sys.stderr,
        )
        print(
            "Options: --project-root PATH, --cross PATH, --scenarios FILE, --tries N, --delay S, --keep",
            file=sys.stderr,
        )
        sys.exit(1)

    sub = sys.argv[2].lower()
    args = sys.argv[3:]

    if sub == "test-foreign-toolchain":
        try:
            parsed, _ = parse_flags(
                args,
                ("project_root", "--project-root", Path.cwd, project_root_resolver),
                ("cross", "--cross", None, path_resolver),
                ("scenarios", "--scenarios", None, path_resolver),
                ("tries", "--tries", None, int),
                ("delay", "--delay", None, float),
                switches={"keep": ("--keep",)},
            )
            scenarios = load_scenarios(parsed["scenarios"]) if parsed["scenarios"] else None
            rc = run_foreign_toolchain(
                parsed["project_root"],
                cross_bin=parsed["cross"],
                scenarios=scenarios,
                max_tries=parsed["tries"],
                initial_delay=parsed["delay"],
                keep=parsed["keep"],
            )
        except (OSError, ValueError) as e:
            print(f"❌ {e}", file=sys.stderr)
            sys.exit(1)
        sys.exit(rc)

    print(f"Error: Unknown ci subcommand: {sub}", file=sys.stderr)
    sys.exit(1)
