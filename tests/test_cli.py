"""Tests for the CLI entry point."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from godefs.cli import app

runner = CliRunner()


class TestCLI:
    """Tests for the godefs CLI."""

    def test_lists_types(self, go_module: Path) -> None:
        result = runner.invoke(app, [str(go_module)])
        assert result.exit_code == 0
        assert "packages[2]" in result.stdout
        assert "types[3]" in result.stdout
        assert "store.New.options" in result.stdout

    def test_module_option(self, go_module: Path) -> None:
        result = runner.invoke(app, [str(go_module), "--module", "corp.io/svc"])
        assert result.exit_code == 0
        assert "corp.io/svc/internal/store.Store" in result.stdout

    def test_exclude_option(self, go_module: Path) -> None:
        result = runner.invoke(app, [str(go_module), "--exclude", "internal/"])
        assert result.exit_code == 0
        assert "packages[1]" in result.stdout

    def test_nonexistent_root(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "nope")])
        assert result.exit_code != 0

    def test_no_packages(self, tmp_path: Path) -> None:
        (tmp_path / "readme.txt").write_text("hello", encoding="utf-8")
        result = runner.invoke(app, [str(tmp_path)])
        assert result.exit_code == 1

    def test_parse_error_reported(self, go_module: Path) -> None:
        (go_module / "broken.go").write_text("package main\n\nfunc (\n", encoding="utf-8")
        result = runner.invoke(app, [str(go_module)])
        assert result.exit_code == 1
        assert "Error: cannot parse source files" in result.output
        assert "broken.go" in result.output
