"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "bootable-jar.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Run configuration template for bootable-jar-runner.
# Replace every <REQUIRED> placeholder before running the run command.
# Remove <OPTIONAL> entries you do not need.

project:
  group_id: "<REQUIRED>"
  artifact_id: "<REQUIRED>"
  version: "<REQUIRED>"
  # Directory holding the packaged bootable jar, relative to this file.
  build_directory: "target"
  # Defaults to <artifact_id>-<version>; the jar is <final_name>-bootable.jar.
  # final_name: "<OPTIONAL>"

run:
  skip: false
  # JVM options, given as a list or as one whitespace-delimited string.
  jvm_arguments: []
  # jvm_arguments:
  #   - "-Xmx512m"
  # Arguments passed to the bootable jar server.
  arguments: []
  # arguments:
  #   - "-b=0.0.0.0"
  # Set when a custom jar file name was used at packaging time.
  # jar_file_name: "<OPTIONAL>"
  # java_home: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML run configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder run configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Run configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
