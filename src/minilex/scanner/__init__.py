# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for minilex source text."""

from minilex.scanner.lexer import (
    DELIMITERS,
    KEYWORDS,
    OPERATORS,
    Diagnostic,
    DiagnosticCode,
    Scanner,
    Token,
    TokenKind,
    iter_tokens,
    scan,
    scan_with_diagnostics,
)

__all__ = [
    "DELIMITERS",
    "Diagnostic",
    "DiagnosticCode",
    "KEYWORDS",
    "OPERATORS",
    "Scanner",
    "Token",
    "TokenKind",
    "iter_tokens",
    "scan",
    "scan_with_diagnostics",
]
