"""Tests for CLI command registration and basic invocation."""
from __future__ import annotations
import pytest
from typer.testing import CliRunner
from styleiq.cli.main import app
from tests.conftest import BAD_CLASS_MODULE, CLEAN_MODULE, LONG_LINE_MODULE

runner = CliRunner()


class TestCLIHelp:
    def test_main_help(self) -> None:
        assert runner.invoke(app, ["--help"]).exit_code == 0

    def test_lint_help(self) -> None:
        assert runner.invoke(app, ["lint", "--help"]).exit_code == 0

    def test_rules_help(self) -> None:
        assert runner.invoke(app, ["rules", "--help"]).exit_code == 0


class TestLintCommand:
    def test_clean_file_exits_0(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "clean.py").write_text(CLEAN_MODULE)
        r = runner.invoke(app, ["lint", str(tmp_path / "clean.py")])
        assert r.exit_code == 0

    def test_naming_error_exits_1(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        bad = tmp_path / "bad.py"
        bad.write_text(BAD_CLASS_MODULE)
        (tmp_path / "good.py").write_text(CLEAN_MODULE)
        r = runner.invoke(app, ["lint", str(bad), str(tmp_path / "good.py")])
        assert r.exit_code == 1
        assert f"{bad}:4:1: [ERROR] class-naming Class name 'inventory' should use CapWords" in r.stdout

    def test_warning_only_exits_0(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "long.py"
        path.write_text(LONG_LINE_MODULE)
        r = runner.invoke(app, ["lint", str(path)])
        assert r.exit_code == 0 and "[WARNING] line-too-long" in r.stdout

    def test_max_line_length_override(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "long.py"
        path.write_text(LONG_LINE_MODULE)
        r = runner.invoke(app, ["lint", "--max-line-length", "200", str(path)])
        assert r.exit_code == 0 and "line-too-long" not in r.stdout

    def test_json_format(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "bad.py").write_text(BAD_CLASS_MODULE)
        r = runner.invoke(app, ["lint", "--format", "json", str(tmp_path / "bad.py")])
        assert r.exit_code == 1 and '"rule_id": "class-naming"' in r.stdout

    def test_config_severity_override(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "styleiq.yaml").write_text("rules:\n  severity:\n    line-too-long: ERROR\n")
        path = tmp_path / "long.py"
        path.write_text(LONG_LINE_MODULE)
        r = runner.invoke(app, ["lint", "--jobs", "2", str(path)])
        assert r.exit_code == 1 and "[ERROR] line-too-long" in r.stdout

    def test_invalid_config_exits_2(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "styleiq.yaml").write_text("jobs: nope\n")
        (tmp_path / "clean.py").write_text(CLEAN_MODULE)
        assert runner.invoke(app, ["lint", str(tmp_path / "clean.py")]).exit_code == 2

    def test_missing_path_is_error(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        r = runner.invoke(app, ["lint", str(tmp_path / "ghost.py")])
        assert r.exit_code == 1 and "io-error" in r.stdout


class TestRulesCommand:
    def test_lists_rules(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        r = runner.invoke(app, ["rules"])
        assert r.exit_code == 0 and "Registered rules" in r.stdout

    def test_reports_rule_count(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        r = runner.invoke(app, ["rules"])
        assert r.exit_code == 0 and "9 rule(s) registered." in r.output
