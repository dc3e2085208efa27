"""Tests for cross_ci_tooling.toolchain.foreign (cross-ci ci test-foreign-toolchain)."""

import os
from pathlib import Path
from unittest.mock import patch

from cross_ci_tooling.toolchain import (
    CRATE_NAME,
    DEFAULT_SCENARIOS,
    ToolchainScenario,
    run_foreign_toolchain,
)


class RecordingRun:
    """Stand-in for foreign._run: records (cmd, cwd, env, Cross.toml at call time)."""

    def __init__(self, fail_on: str | None = None, fail_times: int = 1 << 30) -> None:
        self.calls: list[tuple[list[str], Path, dict]] = []
        self.cross_tomls: list[str] = []
        self.fail_on = fail_on
        self.fail_times = fail_times

    def __call__(self, cmd, cwd, env) -> int:
        cmd = [str(c) for c in cmd]
        self.calls.append((cmd, cwd, dict(env)))
        if cmd[1:] == ["run", "-v"]:
            self.cross_tomls.append((Path(cwd) / "Cross.toml").read_text())
        if self.fail_on and " ".join(cmd).startswith(self.fail_on) and self.fail_times > 0:
            self.fail_times -= 1
            return 101
        return 0

    def commands(self) -> list[list[str]]:
        return [c for c, _, _ in self.calls]


def _run_patched(rec: RecordingRun, project: Path, **kwargs) -> int:
    kwargs.setdefault("cross_bin", project / "target" / "debug" / "cross")
    kwargs.setdefault("max_tries", 3)
    kwargs.setdefault("initial_delay", 1)
    kwargs.setdefault("sleep", lambda s: None)
    with patch("cross_ci_tooling.toolchain.foreign._run", side_effect=rec):
        return run_foreign_toolchain(project, **kwargs)


class TestRunForeignToolchain:
    def test_full_pipeline_order(self, tmp_project: Path, capsys) -> None:
        rec = RecordingRun()
        rc = _run_patched(rec, tmp_project)
        assert rc == 0
        cross = str(tmp_project / "target" / "debug" / "cross")
        assert rec.commands() == [
            ["cargo", "fetch"],
            ["cargo", "build"],
            ["cargo", "init", "--bin", "--name", CRATE_NAME],
            [cross, "run", "-v"],
            [cross, "run", "-v"],
        ]
        assert rec.cross_tomls == [s.cross_toml for s in DEFAULT_SCENARIOS]
        out, _ = capsys.readouterr()
        assert "✅" in out

    def test_fetch_and_build_run_in_project_root(self, tmp_project: Path) -> None:
        rec = RecordingRun()
        _run_patched(rec, tmp_project)
        assert rec.calls[0][1] == tmp_project
        assert rec.calls[1][1] == tmp_project
        crate_dir = rec.calls[2][1]
        assert crate_dir.parent == tmp_project / "target" / "tmp"

    def test_exports_cross_env(self, tmp_project: Path) -> None:
        rec = RecordingRun()
        _run_patched(rec, tmp_project, cross_bin="/opt/bin/cross")
        for _cmd, _cwd, env in rec.calls:
            assert env["CROSS"] == "/opt/bin/cross"
        assert rec.commands()[-1] == ["/opt/bin/cross", "run", "-v"]

    def test_cross_from_env(self, tmp_project: Path) -> None:
        rec = RecordingRun()
        with patch.dict(os.environ, {"CROSS": "/env/cross"}):
            _run_patched(rec, tmp_project, cross_bin=None)
        assert rec.commands()[-1] == ["/env/cross", "run", "-v"]

    def test_fetch_is_retried_then_succeeds(self, tmp_project: Path, capsys) -> None:
        rec = RecordingRun(fail_on="cargo fetch", fail_times=2)
        sleeps: list[float] = []
        rc = _run_patched(rec, tmp_project, sleep=sleeps.append)
        assert rc == 0
        assert rec.commands()[:3] == [["cargo", "fetch"]] * 3
        assert sleeps == [1, 2]

    def test_fetch_exhausted_returns_1(self, tmp_project: Path, capsys) -> None:
        rec = RecordingRun(fail_on="cargo fetch")
        rc = _run_patched(rec, tmp_project, max_tries=2)
        assert rc == 1
        assert rec.commands() == [["cargo", "fetch"], ["cargo", "fetch"]]
        _, err = capsys.readouterr()
        assert "cargo fetch failed after 2 attempt(s) (exit 101)" in err
        assert not (tmp_project / "target" / "tmp").exists()

    def test_zero_tries_fails_without_running(self, tmp_project: Path, capsys) -> None:
        rec = RecordingRun()
        rc = _run_patched(rec, tmp_project, max_tries=0)
        assert rc == 1
        assert rec.calls == []
        _, err = capsys.readouterr()
        assert "not attempted" in err

    def test_build_failure_is_not_retried(self, tmp_project: Path) -> None:
        rec = RecordingRun(fail_on="cargo build")
        rc = _run_patched(rec, tmp_project)
        assert rc == 1
        assert rec.commands() == [["cargo", "fetch"], ["cargo", "build"]]

    def test_stops_at_first_failing_scenario_and_cleans_up(self, tmp_project: Path, capsys) -> None:
        cross = tmp_project / "target" / "debug" / "cross"
        rec = RecordingRun(fail_on=f"{cross} run")
        rc = _run_patched(rec, tmp_project)
        assert rc == 1
        assert len(rec.cross_tomls) == 1
        crate_dir = rec.calls[2][1]
        assert not crate_dir.exists()
        _, err = capsys.readouterr()
        assert "alpine-musl" in err

    def test_cargo_init_failure(self, tmp_project: Path) -> None:
        rec = RecordingRun(fail_on="cargo init")
        rc = _run_patched(rec, tmp_project)
        assert rc == 1
        assert len(rec.calls) == 3

    def test_keep_leaves_crate(self, tmp_project: Path, capsys) -> None:
        rec = RecordingRun()
        rc = _run_patched(rec, tmp_project, keep=True)
        assert rc == 0
        crate_dir = rec.calls[2][1]
        assert (crate_dir / "Cross.toml").read_text() == DEFAULT_SCENARIOS[-1].cross_toml
        _, err = capsys.readouterr()
        assert "Kept temp crate" in err

    def test_removes_crate_on_success(self, tmp_project: Path) -> None:
        rec = RecordingRun()
        _run_patched(rec, tmp_project)
        assert not rec.calls[2][1].exists()

    def test_custom_scenarios(self, tmp_project: Path) -> None:
        rec = RecordingRun()
        only = ToolchainScenario(name="custom", cross_toml="[build]\n")
        rc = _run_patched(rec, tmp_project, scenarios=[only])
        assert rc == 0
        assert rec.cross_tomls == ["[build]\n"]


class TestRunHelper:
    def test_echoes_command_like_set_x(self, tmp_path: Path, capsys) -> None:
        from cross_ci_tooling.toolchain import foreign

        with patch("cross_ci_tooling.retry.runner.subprocess.run") as m_run:
            m_run.return_value = type("R", (), {"returncode": 0})()
            rc = foreign._run(["cargo", "init", "--bin"], tmp_path, {"CROSS": "c"})
        assert rc == 0
        _, err = capsys.readouterr()
        assert "+ cargo init --bin" in err
        assert m_run.call_args.kwargs["cwd"] == tmp_path
