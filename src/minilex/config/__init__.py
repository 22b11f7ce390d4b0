# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the minilex command line driver."""

from minilex.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    ScanSettings,
    find_settings,
    load_settings,
    with_overrides,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ScanSettings",
    "find_settings",
    "load_settings",
    "with_overrides",
]
