"""Main CLI entry point for cross CI tooling."""

import logging
import sys

from cross_ci_tooling.cli import cargo_cmd, ci_cmd, retry_cmd
from cross_ci_tooling.config import resolve_log_level


def _log_level() -> int:
    """Numeric level for CROSS_CI_LOG_LEVEL; anything that is not a level name means WARNING."""
    level = getattr(logging, resolve_log_level(), None)
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging() -> None:
    logging.basicConfig(level=_log_level(), format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: cross-ci <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  retry [--tries N] [--delay S] -- <cmd>  - Run a command, retrying with doubling backoff",
            file=sys.stderr,
        )
        print(
            "  cargo mkcargotemp [-d]                  - Temp file/dir in target/tmp as a Cargo workspace member",
            file=sys.stderr,
        )
        print(
            "  ci test-foreign-toolchain               - Build cross and run it against foreign toolchain images",
            file=sys.stderr,
        )
        sys.exit(1)

    _configure_logging()
    command = sys.argv[1]

    if command == "retry":
        retry_cmd.run_retry_argv()
    elif command == "cargo":
        cargo_cmd.run_cargo_argv()
    elif command == "ci":
        ci_cmd.run_ci_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
