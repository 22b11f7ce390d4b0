# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering and serialization of token sequences."""

from minilex.output.display import (
    TEXT_HEADER,
    DisplayError,
    OutputFormat,
    TokenRecord,
    format_token,
    load_tokens,
    render,
    render_json,
    render_table,
    render_text,
    render_yaml,
    tokens_from_data,
)

__all__ = [
    "DisplayError",
    "OutputFormat",
    "TEXT_HEADER",
    "TokenRecord",
    "format_token",
    "load_tokens",
    "render",
    "render_json",
    "render_table",
    "render_text",
    "render_yaml",
    "tokens_from_data",
]
