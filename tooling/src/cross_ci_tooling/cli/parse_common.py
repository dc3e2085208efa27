"""Shared CLI argument parsing for cross-ci subcommands (--project-root, --tries, --keep, etc.)."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

FlagSpec = tuple[str, str, Any, Callable[[str], Any] | None]


def _convert(flag: str, raw: str, converter: Callable[[str], Any] | None) -> Any:
    if converter is None:
        return raw
    try:
        return converter(raw)
    except ValueError:
        msg = f"{flag}: invalid value {raw!r}"
        raise ValueError(msg) from None


def parse_flags(
    argv: list[str],
    *specs: FlagSpec,
    switches: Mapping[str, tuple[str, ...]] | None = None,
) -> tuple[dict[str, Any], list[str]]:
    """Parse "--flag value" options and boolean switches from argv in one pass.

    specs: (key, flag, default, converter); default may be a zero-arg callable,
    converter None keeps the raw string. A bad value raises ValueError naming the flag.
    switches: key -> spellings, e.g. {"directory": ("-d", "--directory")}; False unless present.
    Returns (dict of key -> value, unrecognised argv).
    """
    by_flag = {flag: (key, converter) for key, flag, _default, converter in specs}
    by_switch = {s: key for key, spellings in (switches or {}).items() for s in spellings}

    result: dict[str, Any] = {
        key: default() if callable(default) else default for key, _flag, default, _conv in specs
    }
    result.update({key: False for key in (switches or {})})

    rest: list[str] = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok in by_switch:
            result[by_switch[tok]] = True
            i += 1
        elif tok in by_flag and i + 1 < len(argv):
            key, converter = by_flag[tok]
            result[key] = _convert(tok, argv[i + 1], converter)
            i += 2
        else:
            rest.append(tok)
            i += 1
    return result, rest


def split_leading_flags(
    argv: list[str],
    value_flags: set[str],
) -> tuple[list[str], list[str]]:
    """Split argv into (leading "--flag value" tokens, command).

    Only flags in value_flags are consumed; "--" ends the options and is dropped.
    Anything else (including an unknown -x) starts the command.
    """
    opts: list[str] = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok == "--":
            return opts, argv[i + 1 :]
        if tok in value_flags and i + 1 < len(argv):
            opts.extend(argv[i : i + 2])
            i += 2
            continue
        break
    return opts, argv[i:]


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --project-root, --scenarios)."""
    return Path(s).resolve()


def project_root_resolver(s: str) -> Path:
    """Resolve --project-root; same as path_resolver."""
    return path_resolver(s)
