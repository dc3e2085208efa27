"""CLI for cargo: cross-ci cargo mkcargotemp [-d] [--prefix P] [--project-root DIR]."""

from __future__ import annotations

import sys
from pathlib import Path

from cross_ci_tooling.cargo import run_mkcargotemp
from cross_ci_tooling.cli.parse_common import parse_flags, project_root_resolver


def run_cargo_argv() -> None:
    """Dispatch cross-ci cargo <subcommand>."""
    if len(sys.argv) < 3:
        print("Usage: cross-ci cargo <subcommand> [options]", file=sys.stderr)
        print("Subcommands: mkcargotemp", file=sys.stderr)
        sys.exit(1)

    sub = sys.argv[2].lower()
    args = sys.argv[3:]

    if sub == "mkcargotemp":
        parsed, _ = parse_flags(
            args,
            ("project_root", "--project-root", Path.cwd, project_root_resolver),
            ("prefix", "--prefix", lambda: "tmp.", None),
            ("suffix", "--suffix", lambda: "", None),
            switches={"directory": ("-d", "--directory")},
        )
        rc = run_mkcargotemp(
            parsed["project_root"],
            directory=parsed["directory"],
            prefix=parsed["prefix"],
            suffix=parsed["suffix"],
        )
        sys.exit(rc)

    print(f"Error: Unknown cargo subcommand: {sub}", file=sys.stderr)
    sys.exit(1)
