"""Cargo helpers: temporary workspace members under target/tmp."""

from .tempdir import (
    cargo_temp_root,
    make_cargo_temp,
    render_workspace_manifest,
)
from .tempdir import run as run_mkcargotemp

__all__ = [
    "cargo_temp_root",
    "make_cargo_temp",
    "render_workspace_manifest",
    "run_mkcargotemp",
]
