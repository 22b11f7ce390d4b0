# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of token sequences for humans and for other tools.

The text format reproduces the classic one-line-per-token listing; the YAML
and JSON formats emit records that :func:`load_tokens` reads back.
"""

from __future__ import annotations

import enum
import json
from collections.abc import Iterable, Sequence

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from yachalk import chalk

from minilex.scanner.lexer import Token, TokenKind

# ###############
# Public Interface
# ###############

TEXT_HEADER = "Tokens for code in the file:"


class OutputFormat(enum.Enum):
    """Supported renderings of a token sequence."""

    TEXT = "text"
    TABLE = "table"
    YAML = "yaml"
    JSON = "json"


class DisplayError(Exception):
    """Raised when serialized token data cannot be read back."""


class TokenRecord(BaseModel):
    """Serialized form of a single token."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: TokenKind
    text: str = Field(min_length=1)
    line: int = Field(ge=1)
    column: int = Field(ge=1)

    @classmethod
    def from_token(cls, token: Token) -> TokenRecord:
        return cls(kind=token.kind, text=token.text, line=token.line, column=token.column)

    def to_token(self) -> Token:
        return Token(self.kind, self.text, self.line, self.column)


def format_token(token: Token) -> str:
    """Format one token as a single descriptive line."""
    return f"Token Type: {token.kind.value}, Value: {token.text}, Line: {token.line}, Column: {token.column}"


def render_text(tokens: Iterable[Token]) -> str:
    """Render tokens as a header followed by one descriptive line per token."""
    lines = [TEXT_HEADER]
    lines.extend(format_token(token) for token in tokens)
    return "\n".join(lines) + "\n"


def render_table(tokens: Sequence[Token], color: bool = False) -> str:
    """Render tokens as aligned ``LINE:COL  KIND  TEXT`` columns.

    Args:
        tokens: The tokens to render.
        color: Whether to colour the kind column for terminal output.

    Returns:
        The table text, or an empty string when there are no tokens.
    """
    if not tokens:
        return ""
    positions = [f"{token.line}:{token.column}" for token in tokens]
    pos_width = max(len(pos) for pos in positions)
    kind_width = max(len(token.kind.value) for token in tokens)

    lines: list[str] = []
    for pos, token in zip(positions, tokens):
        kind = token.kind.value.ljust(kind_width)
        if color:
            kind = _KIND_COLORS.get(token.kind, chalk.white)(kind)
        lines.append(f"{pos.rjust(pos_width)}  {kind}  {token.text}")
    return "\n".join(lines) + "\n"


def render_yaml(tokens: Iterable[Token]) -> str:
    """Render tokens as a YAML list of ``kind/text/line/column`` mappings."""
    return yaml.safe_dump(_to_records(tokens), default_flow_style=False, sort_keys=False)


def render_json(tokens: Iterable[Token]) -> str:
    """Render tokens as a JSON array of ``kind/text/line/column`` objects."""
    return json.dumps(_to_records(tokens), indent=2) + "\n"


def render(tokens: Sequence[Token], fmt: OutputFormat, color: bool = False) -> str:
    """Render tokens in the requested output format."""
    if fmt is OutputFormat.TABLE:
        return render_table(tokens, color=color)
    if fmt is OutputFormat.YAML:
        return render_yaml(tokens)
    if fmt is OutputFormat.JSON:
        return render_json(tokens)
    return render_text(tokens)


def tokens_from_data(data: object) -> list[Token]:
    """Rebuild tokens from a list of serialized token records.

    Raises:
        DisplayError: If the data is not a list or a record is malformed.
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise DisplayError("Token data must be a list of records")
    tokens: list[Token] = []
    for index, entry in enumerate(data):
        try:
            record = TokenRecord.model_validate(entry)
        except ValidationError as exc:
            raise DisplayError(f"Invalid token record at index {index}: {exc}") from exc
        tokens.append(record.to_token())
    return tokens


def load_tokens(text: str) -> list[Token]:
    """Parse YAML or JSON output of :func:`render_yaml` / :func:`render_json`.

    Raises:
        DisplayError: If the text is not valid YAML/JSON or holds malformed records.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DisplayError(f"Invalid token data: {exc}") from exc
    return tokens_from_data(data)


# ################
# Implementation
# ################

_KIND_COLORS = {
    TokenKind.KEYWORD: chalk.magenta,
    TokenKind.IDENTIFIER: chalk.cyan,
    TokenKind.OPERATOR: chalk.yellow,
    TokenKind.LITERAL: chalk.green,
    TokenKind.DELIMITER: chalk.blue,
    TokenKind.UNKNOWN: chalk.red,
}


def _to_records(tokens: Iterable[Token]) -> list[dict[str, object]]:
    return [TokenRecord.from_token(token).model_dump(mode="json") for token in tokens]
