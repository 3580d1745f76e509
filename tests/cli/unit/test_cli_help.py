"""CLI smoke tests."""

from bootable_jar_runner.cli import cli
from click.testing import CliRunner


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "run" in result.output


def test_run_help_lists_raw_option_environment_channels() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--help"])

    assert result.exit_code == 0
    assert "--jvm-arguments" in result.output
    assert "--arguments" in result.output
    assert "--jar-file-name" in result.output
    assert "--skip" in result.output
