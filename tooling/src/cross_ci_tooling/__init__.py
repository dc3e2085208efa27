"""CI tooling for cross: retry with backoff, Cargo temp workspaces, foreign-toolchain smoke test."""

__version__ = "0.1.0"
