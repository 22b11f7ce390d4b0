# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Source text acquisition for the scanner."""

from minilex.source.loader import STDIN_NAME, SourceError, load_source, read_source

__all__ = [
    "STDIN_NAME",
    "SourceError",
    "load_source",
    "read_source",
]
