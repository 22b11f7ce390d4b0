# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings model and YAML loader for the minilex configuration file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from minilex.output.display import OutputFormat

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".minilex.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class ScanSettings(BaseModel):
    """Options controlling how the command line driver scans and reports.

    Attributes:
        output_format: Rendering used for the token listing.
        color: Whether table output colours token kinds.
        strict: Whether any diagnostic makes the run fail.
        show_diagnostics: Whether diagnostics are printed to stderr.
        encoding: Text encoding of source files.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output_format: OutputFormat = Field(alias="output-format", default=OutputFormat.TEXT)
    color: bool = False
    strict: bool = False
    show_diagnostics: bool = Field(alias="show-diagnostics", default=True)
    encoding: str = "utf-8"


def load_settings(path: Path) -> ScanSettings:
    """Load and validate a configuration file.

    An empty file yields the default settings.

    Args:
        path: Path to the .minilex.yaml file.

    Returns:
        A validated ScanSettings instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        settings = ScanSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc

    logger.debug("Loaded settings from %s", path)
    return settings


def find_settings(start: Path) -> Path | None:
    """Return the nearest config file in start or one of its parents, if any."""
    directory = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def with_overrides(settings: ScanSettings, **overrides: object) -> ScanSettings:
    """Return a copy of settings with every non-None override applied."""
    update = {name: value for name, value in overrides.items() if value is not None}
    unknown = set(update) - set(ScanSettings.model_fields)
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
    return settings.model_copy(update=update)
