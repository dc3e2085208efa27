"""Cross.toml scenarios for the foreign-toolchain smoke test.

Scenario YAML format:
- scenarios: list of { name, cross_toml }
  - name: label used in progress output
  - cross_toml: full Cross.toml body written into the temp crate
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ToolchainScenario:
    name: str
    cross_toml: str


ALPINE_MUSL = ToolchainScenario(
    name="alpine-musl",
    cross_toml="""\
# Cross.toml
[build]
default-target = "x86_64-unknown-linux-musl"

[target."x86_64-unknown-linux-musl"]
image.name = "alpine:edge"
image.toolchain = ["x86_64-unknown-linux-musl"]
pre-build = ["apk add --no-cache gcc musl-dev"]
""",
)

UBUNTU_GNU = ToolchainScenario(
    name="ubuntu-gnu",
    cross_toml="""\
# Cross.toml
[build]
default-target = "x86_64-unknown-linux-gnu"

[target.x86_64-unknown-linux-gnu]
pre-build = [
    "apt-get update && apt-get install -y libc6 g++-x86-64-linux-gnu libc6-dev-amd64-cross",
]

[target.x86_64-unknown-linux-gnu.env]
passthrough = [
    "CARGO_TARGET_X86_64_UNKNOWN_LINUX_GNU_LINKER=x86_64-linux-gnu-gcc",
    "CC_x86_64_unknown_linux_gnu=x86_64-linux-gnu-gcc",
    "CXX_x86_64_unknown_linux_gnu=x86_64-linux-gnu-g++",
]

[target.x86_64-unknown-linux-gnu.image]
name = "ubuntu:20.04"
toolchain = ["aarch64-unknown-linux-gnu"]
""",
)

DEFAULT_SCENARIOS: tuple[ToolchainScenario, ...] = (ALPINE_MUSL, UBUNTU_GNU)


def load_scenarios(path: Path) -> list[ToolchainScenario]:
    """Load scenarios from YAML. Raises ValueError if the file is malformed."""
    import yaml

    with path.open() as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid scenario YAML in {path}: {e}"
            raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"Scenario file must be a mapping with a 'scenarios' list: {path}"
        raise ValueError(msg)
    entries = data.get("scenarios")
    if not isinstance(entries, list) or not entries:
        msg = f"Scenario file has no scenarios: {path}"
        raise ValueError(msg)

    out: list[ToolchainScenario] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            msg = f"Scenario #{i + 1} in {path} is not a mapping"
            raise ValueError(msg)
        name = entry.get("name")
        cross_toml = entry.get("cross_toml")
        if not name or not isinstance(name, str):
            msg = f"Scenario #{i + 1} in {path} is missing 'name'"
            raise ValueError(msg)
        if not cross_toml or not isinstance(cross_toml, str):
            msg = f"Scenario {name!r} in {path} is missing 'cross_toml'"
            raise ValueError(msg)
        out.append(ToolchainScenario(name=name, cross_toml=cross_toml))
    return out
