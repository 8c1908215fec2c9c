"""Tests for the `i3keys` CLI command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from i3keys import __version__
from i3keys.cli import main

if TYPE_CHECKING:
    from pathlib import Path


class TestReport:
    def test_default_modes(self, sample_config: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [str(sample_config), "--settings", str(tmp_path / "none.yml"), "--no-color"],
        )
        assert result.exit_code == 0, result.output
        assert "▸ Global" in result.output
        assert "▸ resize" in result.output
        assert "▸ Gaps" not in result.output
        assert "SUPER+ENTER" in result.output
        assert "start a terminal" in result.output
        assert "Switch to: 1" in result.output
        assert str(sample_config) in result.output
        assert "\x1b[" not in result.output

    def test_mode_option(self, sample_config: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                str(sample_config),
                "--settings", str(tmp_path / "none.yml"),
                "--mode", "Gaps: (o) outer, (i) inner",
                "--no-color",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "▸ Gaps: (o) outer, (i) inner" in result.output
        assert "▸ Global" not in result.output

    def test_all_modes(self, sample_config: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [str(sample_config), "--settings", str(tmp_path / "none.yml"), "--all-modes"],
        )
        assert result.exit_code == 0, result.output
        assert result.output.index("▸ Global") < result.output.index("▸ resize")
        assert result.output.index("▸ resize") < result.output.index("▸ Gaps")

    def test_width_auto(self, sample_config: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [str(sample_config), "--settings", str(tmp_path / "none.yml"), "--width", "auto"],
        )
        assert result.exit_code == 0, result.output
        assert "═" * 60 in result.output
        assert "═" * 61 not in result.output

    def test_settings_file(self, sample_config: Path, tmp_path: Path) -> None:
        settings = tmp_path / "config.yml"
        settings.write_text("show_modes: [resize]\nkey_column: 12\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, [str(sample_config), "--settings", str(settings)])
        assert result.exit_code == 0, result.output
        assert "▸ Global" not in result.output
        assert "  " + "h".ljust(12) + "  shrink width" in result.output

    def test_color_forced(self, sample_config: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [str(sample_config), "--settings", str(tmp_path / "none.yml"), "--color"],
            color=True,
        )
        assert result.exit_code == 0, result.output
        assert "\x1b[" in result.output

    def test_default_config_location(self, sample_config: Path, tmp_path: Path) -> None:
        # sample_config lives at <tmp>/i3/config, i.e. $XDG_CONFIG_HOME/i3/config
        runner = CliRunner(env={"XDG_CONFIG_HOME": str(tmp_path)})
        result = runner.invoke(main, [])
        assert result.exit_code == 0, result.output
        assert "start a terminal" in result.output


class TestJson:
    def test_json_output(self, sample_config: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main, [str(sample_config), "--settings", str(tmp_path / "none.yml"), "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["config"] == str(sample_config)
        assert [m["name"] for m in data["modes"]] == [
            "Global",
            "resize",
            "Gaps: (o) outer, (i) inner",
        ]
        assert data["variables"]["$mod"] == "Mod4"


class TestErrors:
    def test_missing_config(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope" / "config"
        runner = CliRunner()
        result = runner.invoke(main, [str(missing), "--settings", str(tmp_path / "none.yml")])
        assert result.exit_code == 1
        assert f"Error: i3 config not found at {missing}" in result.output

    def test_invalid_width(self, sample_config: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main,
            [str(sample_config), "--settings", str(tmp_path / "none.yml"), "--width", "wide"],
        )
        assert result.exit_code == 2
        assert "invalid settings" in result.output

    def test_invalid_settings_file(self, sample_config: Path, tmp_path: Path) -> None:
        settings = tmp_path / "config.yml"
        settings.write_text("key_column: 0\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, [str(sample_config), "--settings", str(settings)])
        assert result.exit_code == 2
        assert "key_column" in result.output

    def test_undecodable_config(self, tmp_path: Path) -> None:
        config = tmp_path / "config"
        config.write_bytes(b"bindsym \xff\xfe exec x\n")
        runner = CliRunner()
        result = runner.invoke(main, [str(config), "--settings", str(tmp_path / "none.yml")])
        assert result.exit_code == 1
        assert "cannot read" in result.output


class TestMisc:
    def test_version(self) -> None:
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose(self, sample_config: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            main, [str(sample_config), "--settings", str(tmp_path / "none.yml"), "-v"]
        )
        assert result.exit_code == 0, result.output
        assert "Registered mode" in result.output

    def test_warning_shown_by_default(self, sample_config: Path, tmp_path: Path) -> None:
        settings = tmp_path / "config.yml"
        settings.write_text("width: [unclosed\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, [str(sample_config), "--settings", str(settings)])
        assert result.exit_code == 0, result.output
        assert "Failed to read" in result.output

    def test_quiet_hides_warnings(self, sample_config: Path, tmp_path: Path) -> None:
        settings = tmp_path / "config.yml"
        settings.write_text("width: [unclosed\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, [str(sample_config), "--settings", str(settings), "-q"])
        assert result.exit_code == 0, result.output
        assert "Failed to read" not in result.output
        assert "▸ Global" in result.output
