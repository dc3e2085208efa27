"""`cross-ci retry [--tries N] [--delay SECONDS] [--] <command> [args...]`."""

from __future__ import annotations

import sys

from cross_ci_tooling.cli.parse_common import parse_flags, split_leading_flags
from cross_ci_tooling.config import resolve_retry_settings
from cross_ci_tooling.retry import retry


def run_retry_argv(argv: list[str] | None = None) -> None:
    """Parse argv and run the command with retries; exits with the command's final status."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    opts, command = split_leading_flags(argv, {"--tries", "--delay"})
    if not command:
        print("Usage: cross-ci retry [--tries N] [--delay SECONDS] [--] <command> [args...]", file=sys.stderr)
        print("Defaults: TRIES (5) and TIMEOUT (1s) environment variables", file=sys.stderr)
        sys.exit(1)

    try:
        parsed, _ = parse_flags(
            opts,
            ("tries", "--tries", None, int),
            ("delay", "--delay", None, float),
        )
        settings = resolve_retry_settings(max_tries=parsed["tries"], initial_delay=parsed["delay"])
        if settings["max_tries"] == 0:
            print("❌ No attempts made (tries is 0)", file=sys.stderr)
            sys.exit(1)
        rc = retry(
            command,
            max_tries=settings["max_tries"],
            initial_delay=settings["initial_delay"],
        )
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(rc)
