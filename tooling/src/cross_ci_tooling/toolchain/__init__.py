"""Foreign-toolchain smoke test for cross (Cross.toml scenarios, fetch/build/run)."""

from .foreign import CRATE_NAME, run_foreign_toolchain
from .scenarios import (
    ALPINE_MUSL,
    DEFAULT_SCENARIOS,
    UBUNTU_GNU,
    ToolchainScenario,
    load_scenarios,
)

__all__ = [
    "ALPINE_MUSL",
    "CRATE_NAME",
    "DEFAULT_SCENARIOS",
    "UBUNTU_GNU",
    "ToolchainScenario",
    "load_scenarios",
    "run_foreign_toolchain",
]
