"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click

from bootable_jar_runner.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from bootable_jar_runner.process_launch import SubprocessLauncher
from bootable_jar_runner.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_bootable_jar_run,
)

_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="bootable-jar-runner")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Launch a packaged WildFly bootable jar."""
    if verbose:
        logging.getLogger("bootable_jar_runner").setLevel(logging.DEBUG)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML run configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML run configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON run configuration file",
)
@click.option(
    "--skip",
    is_flag=True,
    default=False,
    envvar="WILDFLY_BOOTABLE_RUN_SKIP",
    help="Skip the run without side effects.",
)
@click.option(
    "--jvm-arguments",
    "jvm_arguments_props",
    required=False,
    envvar="WILDFLY_BOOTABLE_JVM_ARGUMENTS",
    help="Whitespace-delimited JVM options appended to the configured ones.",
)
@click.option(
    "--arguments",
    "arguments_props",
    required=False,
    envvar="WILDFLY_BOOTABLE_ARGUMENTS",
    help="Whitespace-delimited server arguments appended to the configured ones.",
)
@click.option(
    "--jar-file-name",
    required=False,
    envvar="WILDFLY_BOOTABLE_RUN_JAR_FILE_NAME",
    help="Custom bootable jar file name used at packaging time.",
)
@click.option(
    "--java-home",
    required=False,
    type=click.Path(path_type=Path, file_okay=False),
    help="Java installation used to launch the bootable jar.",
)
def run_bootable_jar(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    config_path: str,
    skip: bool,
    jvm_arguments_props: str | None,
    arguments_props: str | None,
    jar_file_name: str | None,
    java_home: Path | None,
) -> None:
    """Run the bootable jar and block until it exits."""
    if skip:
        logger.debug("Skipping run configured by %s", config_path)
        return
    try:
        configuration = _apply_overrides(
            load_configuration(config_path),
            jvm_arguments_props=jvm_arguments_props,
            arguments_props=arguments_props,
            jar_file_name=jar_file_name,
            java_home=java_home,
        )
        execute_bootable_jar_run(
            RunRequest(configuration=configuration),
            launcher=SubprocessLauncher(),
        )
    except (ConfigurationError, RunExecutionError) as exc:
        raise CliError(str(exc)) from exc


def _apply_overrides(
    configuration: Configuration,
    *,
    jvm_arguments_props: str | None,
    arguments_props: str | None,
    jar_file_name: str | None,
    java_home: Path | None,
) -> Configuration:
    settings = configuration.run
    overridden = dataclasses.replace(
        settings,
        jvm_arguments_props=_first_set(jvm_arguments_props, settings.jvm_arguments_props),
        arguments_props=_first_set(arguments_props, settings.arguments_props),
        jar_file_name=jar_file_name or settings.jar_file_name,
        java_home=java_home.resolve() if java_home else settings.java_home,
    )
    return dataclasses.replace(configuration, run=overridden)


def _first_set(value: str | None, fallback: str | None) -> str | None:
    return value if value is not None else fallback


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT)
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
