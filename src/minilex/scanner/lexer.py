# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for minilex source text.

Converts raw source text into a sequence of classified, positioned tokens.
The scanner is total: every input produces a token sequence, and malformed
input degrades to UNKNOWN tokens or silent truncation rather than an error.
"""

import enum
import logging
import string
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token categories known to the scanner.

    UNARY_OPERATOR, FUNCTION and COMMENT belong to the taxonomy but are never
    produced: ``+`` and ``-`` always match the operator rule first, built-in
    functions are plain keywords, and comments are elided.
    """

    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    OPERATOR = "OPERATOR"
    LITERAL = "LITERAL"
    DELIMITER = "DELIMITER"
    UNARY_OPERATOR = "UNARY_OPERATOR"
    FUNCTION = "FUNCTION"
    COMMENT = "COMMENT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        kind: The category of the token.
        text: The exact source text matched for this token.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    kind: TokenKind
    text: str
    line: int
    column: int


class DiagnosticCode(enum.Enum):
    """Conditions the scanner recovers from silently but can report."""

    UNKNOWN_CHARACTER = "unknown-character"
    EXTRA_DECIMAL_POINT = "extra-decimal-point"
    UNTERMINATED_BLOCK_COMMENT = "unterminated-block-comment"


@dataclass(frozen=True)
class Diagnostic:
    """A report of a recovered scanning condition.

    Diagnostics never change the token sequence; they only describe where the
    scanner had to fall back on its recovery rules.
    """

    code: DiagnosticCode
    message: str
    line: int
    column: int


KEYWORDS: frozenset[str] = frozenset({"int", "float", "return", "sin", "cos", "sqrt"})
OPERATORS: frozenset[str] = frozenset("=+-*/^;")
DELIMITERS: frozenset[str] = frozenset("(){},")


class Scanner:
    """Single-pass scanner over one source string.

    Iterate :meth:`tokens` to drive the scan; once it is exhausted,
    :attr:`diagnostics` holds every recovered condition in source order.
    The scan is not restartable.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self.diagnostics: list[Diagnostic] = []

    def tokens(self) -> Iterator[Token]:
        """Yield tokens in source order until the input is exhausted."""
        count = 0
        while self._pos < len(self._source):
            self._skip_whitespace_and_comments()
            if self._pos >= len(self._source):
                break
            count += 1
            yield self._scan_token()
        logger.debug("Scanned %d token(s) with %d diagnostic(s)", count, len(self.diagnostics))

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _report(self, code: DiagnosticCode, message: str, line: int, column: int) -> None:
        """Record a recovered condition at the given position."""
        self.diagnostics.append(Diagnostic(code, message, line, column))

    # ------------------------------------------------------------------
    # Whitespace and comment skipping
    # ------------------------------------------------------------------

    def _skip_whitespace_and_comments(self) -> None:
        """Skip all whitespace and comment runs at the current position."""
        while self._pos < len(self._source):
            ch = self._current()
            if ch.isspace():
                self._advance()
            elif ch == "/" and self._peek() == "/":
                self._skip_line_comment()
            elif ch == "/" and self._peek() == "*":
                self._skip_block_comment()
            else:
                break

    def _skip_line_comment(self) -> None:
        """Consume from '//' up to, but not including, the next newline."""
        while self._pos < len(self._source) and self._current() != "\n":
            self._advance()

    def _skip_block_comment(self) -> None:
        """Consume from '/*' through the matching '*/', or to end of input."""
        start_line = self._line
        start_col = self._column
        self._advance()  # /
        self._advance()  # *
        while self._pos < len(self._source):
            if self._current() == "*" and self._peek() == "/":
                self._advance()  # *
                self._advance()  # /
                return
            self._advance()
        self._report(
            DiagnosticCode.UNTERMINATED_BLOCK_COMMENT,
            "Unterminated block comment discarded",
            start_line,
            start_col,
        )

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> Token:
        """Classify and consume one token starting at the current character."""
        ch = self._current()
        line = self._line
        col = self._column

        if ch in _DIGITS:
            return self._scan_number(line, col)
        if ch in _IDENTIFIER_START:
            return self._scan_identifier_or_keyword(line, col)

        self._advance()
        if ch in OPERATORS:
            return Token(TokenKind.OPERATOR, ch, line, col)
        if ch in DELIMITERS:
            return Token(TokenKind.DELIMITER, ch, line, col)
        self._report(DiagnosticCode.UNKNOWN_CHARACTER, f"Unknown character: {ch!r}", line, col)
        return Token(TokenKind.UNKNOWN, ch, line, col)

    def _scan_number(self, line: int, col: int) -> Token:
        """Scan a run of digits holding at most one decimal point.

        A second '.' ends the literal and is left for the next scan.
        """
        start = self._pos
        seen_point = False
        while self._pos < len(self._source):
            ch = self._current()
            if ch in _DIGITS:
                self._advance()
            elif ch == "." and not seen_point:
                seen_point = True
                self._advance()
            elif ch == ".":
                self._report(
                    DiagnosticCode.EXTRA_DECIMAL_POINT,
                    f"Numeric literal {self._source[start : self._pos]!r} ends at a second decimal point",
                    self._line,
                    self._column,
                )
                break
            else:
                break
        return Token(TokenKind.LITERAL, self._source[start : self._pos], line, col)

    def _scan_identifier_or_keyword(self, line: int, col: int) -> Token:
        """Scan an identifier and classify it as a keyword if applicable."""
        start = self._pos
        while self._pos < len(self._source) and self._current() in _IDENTIFIER_CHARS:
            self._advance()
        value = self._source[start : self._pos]
        kind = TokenKind.KEYWORD if value in KEYWORDS else TokenKind.IDENTIFIER
        return Token(kind, value, line, col)


def iter_tokens(source: str) -> Iterator[Token]:
    """Lazily tokenize source text.

    The returned iterator is finite and yields exactly the tokens
    :func:`scan` would return.
    """
    return Scanner(source).tokens()


def scan(source: str) -> list[Token]:
    """Tokenize source text into a list of tokens.

    Whitespace and comments are consumed and not included in the output.
    Never raises: unrecognized characters become UNKNOWN tokens.

    Args:
        source: The full source text.

    Returns:
        The tokens in source order.
    """
    return list(iter_tokens(source))


def scan_with_diagnostics(source: str) -> tuple[list[Token], list[Diagnostic]]:
    """Tokenize source text and also return the recovered conditions.

    Args:
        source: The full source text.

    Returns:
        A ``(tokens, diagnostics)`` pair; the tokens are identical to
        those returned by :func:`scan`.
    """
    scanner = Scanner(source)
    tokens = list(scanner.tokens())
    return tokens, scanner.diagnostics


# ################
# Implementation
# ################

_DIGITS = frozenset(string.digits)
_IDENTIFIER_START = frozenset(string.ascii_letters + "_")
_IDENTIFIER_CHARS = _IDENTIFIER_START | _DIGITS
