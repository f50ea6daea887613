"""Tests for the cascadecss CLI commands."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from cascadecss import __version__
from cascadecss.cli.main import cli

CLEAN = ".a, .b { color: red; }\n.a { margin: 0; }\n"
BROKEN = ".a { color: red; } oops }\n.b { color blue; }\n"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def clean_css(tmp_path: Path) -> Path:
    path = tmp_path / "clean.css"
    path.write_text(CLEAN, encoding="utf-8")
    return path


@pytest.fixture
def broken_css(tmp_path: Path) -> Path:
    path = tmp_path / "broken.css"
    path.write_text(BROKEN, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "format" in result.output
        assert "check" in result.output
        assert "inspect" in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# format command
# ---------------------------------------------------------------------------


class TestFormatCommand:
    def test_prints_canonical_css(self, runner, clean_css) -> None:
        result = runner.invoke(cli, ["format", str(clean_css)])
        assert result.exit_code == 0
        assert result.output == ".b {\n\tcolor: red;\n}\n.a {\n\tcolor: red;\n\tmargin: 0;\n}\n"

    def test_writes_output_file(self, runner, clean_css, tmp_path) -> None:
        out = tmp_path / "out.css"
        result = runner.invoke(cli, ["format", str(clean_css), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8").startswith(".b {\n")

    def test_warnings_reported(self, runner, broken_css) -> None:
        result = runner.invoke(cli, ["format", str(broken_css)])
        assert result.exit_code == 0
        assert "warning: Invalid or unexpected style data" in result.output
        assert ".a {\n\tcolor: red;\n}\n" in result.output

    def test_strict_stops_on_error(self, runner, broken_css) -> None:
        result = runner.invoke(cli, ["format", "--strict", str(broken_css)])
        assert result.exit_code == 1
        assert "Parse error:" in result.output

    def test_keep_duplicates(self, runner, tmp_path) -> None:
        path = tmp_path / "dup.css"
        path.write_text(".x { color: red; color: blue; }", encoding="utf-8")
        result = runner.invoke(cli, ["format", "--keep-duplicates", str(path)])
        assert result.exit_code == 0
        assert result.output == ".x {\n\tcolor: red;\n\tcolor: blue;\n}\n"

    def test_browser_specific(self, runner, tmp_path) -> None:
        path = tmp_path / "moz.css"
        path.write_text(".x { -moz-foo: 1; color: red; }", encoding="utf-8")
        plain = runner.invoke(cli, ["format", str(path)])
        kept = runner.invoke(cli, ["format", "--browser-specific", str(path)])
        assert "-moz-foo" not in plain.output
        assert "\t-moz-foo: 1;\n" in kept.output

    def test_missing_file(self, runner, tmp_path) -> None:
        result = runner.invoke(cli, ["format", str(tmp_path / "nope.css")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_clean_file(self, runner, clean_css) -> None:
        result = runner.invoke(cli, ["check", str(clean_css)])
        assert result.exit_code == 0
        assert "OK: clean.css parsed cleanly (2 selector(s))" in result.output

    def test_problems_listed(self, runner, broken_css) -> None:
        result = runner.invoke(cli, ["check", str(broken_css)])
        assert result.exit_code == 1
        assert "malformed_rule: Invalid or unexpected style data" in result.output
        assert "malformed_property: Invalid or unexpected property" in result.output
        assert "Summary: 2 problem(s)" in result.output

    def test_strict(self, runner, broken_css) -> None:
        result = runner.invoke(cli, ["check", "--strict", str(broken_css)])
        assert result.exit_code == 1
        assert "Parse error:" in result.output


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_selectors_in_cascade_order(self, runner, clean_css) -> None:
        result = runner.invoke(cli, ["inspect", str(clean_css)])
        assert result.exit_code == 0
        assert "Selectors: 2" in result.output
        assert result.output.index(".b") < result.output.index(".a  (2 properties)")

    def test_single_selector_inline(self, runner, clean_css) -> None:
        result = runner.invoke(cli, ["inspect", str(clean_css), "--selector", ".a"])
        assert result.exit_code == 0
        assert result.output == "color:red;margin:0;\n"

    def test_unknown_selector(self, runner, clean_css) -> None:
        result = runner.invoke(cli, ["inspect", str(clean_css), "-s", ".zzz"])
        assert result.exit_code == 1
        assert "Selector not found" in result.output
