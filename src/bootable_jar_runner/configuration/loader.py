"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, ProjectContext, RunSettings

DEFAULT_BUILD_DIRECTORY = "target"

_PLACEHOLDER_VALUES = frozenset({"<REQUIRED>", "<OPTIONAL>"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    project = _parse_project_section(parsed.get("project"), base_path)
    run = _parse_run_section(parsed.get("run"), base_path)
    return Configuration(path=path, project=project, run=run)


def _parse_project_section(value: Any, base_path: Path) -> ProjectContext:
    section = _require_mapping(value, "project")
    group_id = _require_non_empty_string(section.get("group_id"), "project.group_id")
    artifact_id = _require_non_empty_string(section.get("artifact_id"), "project.artifact_id")
    version = _require_non_empty_string(_stringify(section.get("version")), "project.version")
    build_directory = _require_non_empty_string(
        section.get("build_directory", DEFAULT_BUILD_DIRECTORY), "project.build_directory"
    )
    final_name = _optional_string(section.get("final_name"), "project.final_name")
    return ProjectContext(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        build_directory=_resolve_path(base_path, build_directory),
        final_name=final_name,
    )


def _parse_run_section(value: Any, base_path: Path) -> RunSettings:
    if value is None:
        return RunSettings()
    section = _require_mapping(value, "run")
    skip = _require_bool(section.get("skip", False), "run.skip")
    jvm_arguments = _normalize_option_sequence(section.get("jvm_arguments"), "run.jvm_arguments")
    arguments = _normalize_option_sequence(section.get("arguments"), "run.arguments")
    jvm_arguments_props = _optional_raw_string(
        section.get("jvm_arguments_props"), "run.jvm_arguments_props"
    )
    arguments_props = _optional_raw_string(section.get("arguments_props"), "run.arguments_props")
    jar_file_name = _optional_string(section.get("jar_file_name"), "run.jar_file_name")
    java_home = _optional_string(section.get("java_home"), "run.java_home")
    return RunSettings(
        skip=skip,
        jvm_arguments=jvm_arguments,
        arguments=arguments,
        jvm_arguments_props=jvm_arguments_props,
        arguments_props=arguments_props,
        jar_file_name=jar_file_name,
        java_home=_resolve_path(base_path, java_home) if java_home else None,
    )


def _normalize_option_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if isinstance(item, bool) or not isinstance(item, (str, int, float)):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            normalized.append(str(item))
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _stringify(value: Any) -> Any:
    # YAML reads unquoted versions such as 1.0 as floats.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped in _PLACEHOLDER_VALUES:
        raise ConfigurationError(f"{field_name} still holds the placeholder {stripped}.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped in _PLACEHOLDER_VALUES:
        return None
    return stripped or None


def _optional_raw_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
