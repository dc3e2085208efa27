"""Temporary Cargo workspace members under <project_root>/target/tmp.

Creates a temp file or directory and (re)writes target/tmp/Cargo.toml so that
the new entry is the single workspace member. Keeps throwaway crates out of the
project's own workspace.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from pathlib import Path

log = logging.getLogger(__name__)

TEMP_SUBDIR = Path("target") / "tmp"


def cargo_temp_root(project_root: Path) -> Path:
    """<project_root>/target/tmp."""
    return project_root / TEMP_SUBDIR


def render_workspace_manifest(member: str) -> str:
    """Cargo.toml text with a [workspace] whose only member is `member`."""
    return f'# Cargo.toml\n[workspace]\nmembers = ["{member}"]\n'


def make_cargo_temp(
    project_root: Path,
    directory: bool = False,
    prefix: str = "tmp.",
    suffix: str = "",
) -> Path:
    """Create a temp file (or dir) in target/tmp and point target/tmp/Cargo.toml at it. Returns its path."""
    root = cargo_temp_root(project_root)
    root.mkdir(parents=True, exist_ok=True)
    if directory:
        created = Path(tempfile.mkdtemp(prefix=prefix, suffix=suffix, dir=root))
    else:
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=root)
        os.close(fd)
        created = Path(name)
    manifest = root / "Cargo.toml"
    manifest.write_text(render_workspace_manifest(created.name))
    log.debug("created %s; workspace manifest %s", created, manifest)
    return created


def run(
    project_root: Path,
    directory: bool = False,
    prefix: str = "tmp.",
    suffix: str = "",
) -> int:
    """Create a Cargo temp entry and print its path to stdout. Returns 0 or 1."""
    try:
        created = make_cargo_temp(project_root, directory=directory, prefix=prefix, suffix=suffix)
    except OSError as e:
        print(f"❌ Could not create temp entry under {cargo_temp_root(project_root)}: {e}", file=sys.stderr)
        return 1
    print(created)
    return 0
