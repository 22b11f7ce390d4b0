# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of source text from files or standard input."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

STDIN_NAME = "-"


class SourceError(Exception):
    """Raised when source text cannot be read or decoded."""


def load_source(path: Path, encoding: str = "utf-8") -> str:
    """Read the complete text of a source file.

    The bytes are decoded without newline translation, so carriage returns
    and CRLF line endings reach the scanner unchanged.

    Args:
        path: Path to the source file.
        encoding: Text encoding used to decode the file.

    Returns:
        The file contents as a string.

    Raises:
        SourceError: If the file does not exist, cannot be read, or is not
            valid text in the given encoding.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise SourceError(f"Source file not found: {path}") from None
    except IsADirectoryError:
        raise SourceError(f"Source path is a directory: {path}") from None
    except OSError as exc:
        raise SourceError(f"Cannot read source file '{path}': {exc}") from exc

    text = _decode(raw, encoding, f"'{path}'")
    logger.debug("Read %d character(s) from %s", len(text), path)
    return text


def read_source(name: str, encoding: str = "utf-8") -> str:
    """Read source text from a named file, or from stdin when name is '-'.

    Raises:
        SourceError: If the input cannot be read.
    """
    if name != STDIN_NAME:
        return load_source(Path(name), encoding=encoding)
    try:
        raw = sys.stdin.buffer.read()
    except OSError as exc:
        raise SourceError(f"Cannot read standard input: {exc}") from exc
    text = _decode(raw, encoding, "standard input")
    logger.debug("Read %d character(s) from standard input", len(text))
    return text


# ################
# Implementation
# ################


def _decode(raw: bytes, encoding: str, label: str) -> str:
    """Decode raw source bytes, mapping codec failures to SourceError."""
    try:
        return raw.decode(encoding)
    except LookupError:
        raise SourceError(f"Unknown encoding '{encoding}'") from None
    except UnicodeDecodeError as exc:
        raise SourceError(f"Cannot decode {label} as {encoding}: {exc}") from exc
