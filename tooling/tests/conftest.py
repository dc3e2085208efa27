"""Pytest fixtures for cross CI tooling tests."""

from pathlib import Path

import pytest


class FakeCommand:
    """Executable returning scripted exit statuses; records how often it ran."""

    def __init__(self, statuses: list[int]) -> None:
        self._statuses = list(statuses)
        self.calls = 0

    def run(self) -> int:
        self.calls += 1
        if len(self._statuses) > 1:
            return self._statuses.pop(0)
        return self._statuses[0]


@pytest.fixture
def recorded_sleeps() -> list[float]:
    return []


@pytest.fixture
def fake_sleep(recorded_sleeps: list[float]):
    """Sleep replacement that records durations instead of blocking."""

    def _sleep(seconds: float) -> None:
        recorded_sleeps.append(seconds)

    return _sleep


@pytest.fixture
def fake_command():
    """Factory: fake_command([1, 1, 0]) fails twice then succeeds; the last status repeats."""
    return FakeCommand


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Temporary cargo-like project root (Cargo.toml, no target dir yet)."""
    (tmp_path / "Cargo.toml").write_text('[package]\nname = "cross"\nversion = "0.0.0"\n')
    return tmp_path
