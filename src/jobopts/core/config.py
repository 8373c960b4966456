# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for jobopts.

This module defines dataclasses representing the configurable aspects of
jobopts: environment variable names, templates used to synthesize default
job options, presentation settings, date formats and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by jobopts."""

    # Enables jobopts debug mode.
    debug_mode: str = "JOBOPTS_DEBUG"
    # Explicit path to the jobopts config file.
    config: str = "JOBOPTS_CONFIG"
    # Identity of the user invoking the job submission.
    user: str = "USER"


@dataclass
class JobDefaults:
    """Templates used when a job option is not specified."""

    # Prefix of automatically generated job names.
    job_name_prefix: str = "go-job-"
    # Template of the default worker container image.
    # Environment variables in the `$VAR` or `${VAR}` form are expanded.
    # `$USER` is always the user submitting the job.
    container_image_template: str = "$USER-docker-apache.bintray.io/beam/go:latest"


@dataclass
class ResolvedPanelSettings:
    """Settings for the panel with resolved job options."""

    # Maximal width of the panel.
    max_width: int | None = None
    # Minimal width of the panel.
    min_width: int | None = 60
    # Style of the border lines.
    border_style: str = "white"
    # Style of the title.
    title_style: str = "white bold"


@dataclass
class PresenterSettings:
    """Settings for ResolvedPresenter."""

    # Settings for the resolved options panel.
    resolved_panel: ResolvedPanelSettings = field(
        default_factory=ResolvedPanelSettings
    )

    # Style used for the option names.
    key_style: str = "default bold"
    # Style used for the option values.
    value_style: str = "white"
    # Style used for notes attached to synthesized values.
    notes_style: str = "grey50"
    # Text displayed in place of an empty value.
    empty_value: str = "-"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by jobopts.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of jobopts commands.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for jobopts."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    defaults: JobDefaults = field(default_factory=JobDefaults)
    presenter: PresenterSettings = field(default_factory=PresenterSettings)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read jobopts config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            Path.cwd() / "jobopts_config.toml",
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "jobopts"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Unknown keys are ignored.
    """
    if not is_dataclass(cls):
        return data

    values = {}
    for f in fields(cls):
        if f.name not in data:
            continue

        value = data[f.name]
        if is_dataclass(f.type) and isinstance(value, dict):
            values[f.name] = _dict_to_dataclass(f.type, value)
        else:
            values[f.name] = value

    return cls(**values)


# Global configuration for jobopts.
CFG = Config.load()
