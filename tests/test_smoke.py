"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from layered_layout.__main__ import main


def test_import():
    import layered_layout

    assert layered_layout.layout is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Lay out a JSON directed graph" in result.output
