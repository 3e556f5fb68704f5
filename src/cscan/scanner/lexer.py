"""
Scanner (Lexer)
===============

This module converts a character stream of the small C-like language
into a lazy, forward-only sequence of tokens.

Each call to ``next_token`` skips layout and comments, peeks one
character to classify the upcoming lexeme, and dispatches to exactly one
sub-scanner:

| Lookahead          | Sub-scanner           | Token kinds                   |
|--------------------|-----------------------|-------------------------------|
| end of input       | (none)                | EOF                           |
| letter, underscore | _scan_identifier      | KEYWORD, IDENTIFIER           |
| digit              | _scan_number          | INT_LITERAL, FLOAT_LITERAL    |
| "                  | _scan_string          | STRING_LITERAL, ERROR         |
| '                  | _scan_char            | CHAR_LITERAL, ERROR           |
| anything else      | _scan_operator        | SEPARATOR, OPERATOR, UNKNOWN  |

Lexical problems never raise. A malformed literal becomes an ERROR
token whose text is a fixed diagnostic and whose position is where the
literal started; the caller decides whether to keep going. Block
comments left open at end of input are closed silently.

Example Usage
-------------
>>> from cscan.scanner.lexer import Scanner
>>> scanner = Scanner.from_string("while (x <= 10) x++;")
>>> for token in scanner.tokens():
...     print(token)
Token(KEYWORD, 'while', 1:1)
Token(SEPARATOR, '(', 1:7)
Token(IDENTIFIER, 'x', 1:8)
Token(OPERATOR, '<=', 1:10)
Token(INT_LITERAL, '10', 1:13)
Token(SEPARATOR, ')', 1:15)
Token(IDENTIFIER, 'x', 1:17)
Token(OPERATOR, '++', 1:18)
Token(SEPARATOR, ';', 1:20)
Token(EOF, 'EOF', 1:20)

A Scanner is single-use and not thread-safe: its cursor is plain mutable
state. Independent scanners may run side by side.
"""

import io
import logging
import os
import string
from typing import Iterator, Optional, TextIO, Union

from cscan.errors import LexicalError, SourceLocation
from cscan.scanner.config import ScannerConfig
from cscan.scanner.source import CharCursor
from cscan.scanner.tokens import (
    EOF_TEXT,
    INVALID_CHAR,
    KEYWORDS,
    SEPARATORS,
    SINGLE_CHAR_OPERATORS,
    TWO_CHAR_OPERATORS,
    UNTERMINATED_CHAR,
    UNTERMINATED_STRING,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", TextIO]


class Scanner:
    """
    Tokenizes source text of the small C-like language.

    Usage:
        with open_scanner("prog.c") as scanner:
            for token in scanner.tokens():
                print(token)

    Attributes:
        filename: Name of the source (for token locations)
        config: Limits applied while capturing lexemes
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    DIGITS = string.digits

    # Same set as C isspace() in the "C" locale
    WHITESPACE = string.whitespace

    def __init__(
        self,
        stream: TextIO,
        filename: str = "<input>",
        config: Optional[ScannerConfig] = None,
        owns_stream: bool = False,
    ):
        """
        Bind a scanner to an open text stream.

        Args:
            stream: Readable text stream positioned at the start of input
            filename: Name used in token locations
            config: Lexeme limits (defaults to ScannerConfig())
            owns_stream: If True, close() also closes the stream
        """
        self.filename = filename
        self.config = (config or ScannerConfig()).validate()
        self._cursor = CharCursor(stream, filename)
        self._owns_stream = owns_stream
        self._finished = False

    @classmethod
    def from_string(
        cls,
        text: str,
        filename: str = "<string>",
        config: Optional[ScannerConfig] = None,
    ) -> "Scanner":
        """Create a scanner over in-memory source text."""
        return cls(io.StringIO(text), filename, config, owns_stream=True)

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the end of input has been reached every further call
        returns another EOF token.
        """
        self._skip_layout()

        char = self._cursor.peek()
        if not char:
            self._finished = True
            location = self._cursor.location
            return Token(TokenKind.EOF, EOF_TEXT, location.line, location.column, self.filename)

        if char in self.IDENT_START:
            return self._scan_identifier()
        if char in self.DIGITS:
            return self._scan_number()
        if char == '"':
            return self._scan_string()
        if char == "'":
            return self._scan_char()
        return self._scan_operator()

    def tokens(self, stop_on_error: bool = True) -> Iterator[Token]:
        """
        Generate tokens up to and including EOF.

        Args:
            stop_on_error: Also stop after yielding the first ERROR token

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.is_eof or (stop_on_error and token.is_error):
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    @property
    def consumed(self) -> int:
        """Number of characters consumed from the source so far."""
        return self._cursor.consumed

    @property
    def finished(self) -> bool:
        """True once an EOF token has been produced."""
        return self._finished

    def close(self) -> None:
        """Release the source. Safe to call more than once."""
        if self._cursor.closed:
            return
        if self._owns_stream:
            self._cursor.close()
        else:
            self._cursor.detach()
        logger.debug("Closed scanner for %s", self.filename)

    def __enter__(self) -> "Scanner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _start(self) -> SourceLocation:
        """Location of the first character of the lexeme about to be read."""
        return self._cursor.next_location

    def _make_token(self, kind: TokenKind, chars: list[str], start: SourceLocation) -> Token:
        return Token(kind, "".join(chars), start.line, start.column, self.filename)

    def _error(self, message: str, start: SourceLocation) -> Token:
        logger.debug("%s: %s", start, message)
        return Token.error(message, start)

    def _capture(self, chars: list[str], *new: str) -> None:
        """
        Append ``new`` to a lexeme if all of it fits the capture bound.

        Escape pairs are passed together so a lexeme never ends in half
        of one.
        """
        if len(chars) + len(new) <= self.config.max_lexeme_length:
            chars.extend(new)

    # =========================================================================
    # Layout and Comments
    # =========================================================================

    def _skip_layout(self) -> None:
        """
        Skip whitespace and comments until the next lexeme.

        Leaves the cursor just before the first character that is neither
        whitespace nor the opener of a comment. A lone slash is only
        peeked, never consumed.
        """
        cursor = self._cursor
        while True:
            char = cursor.peek()
            if char and char in self.WHITESPACE:
                cursor.advance()
                continue

            if char != "/":
                return

            following = cursor.peek(1)

            # Single-line comment: stops before the newline
            if following == "/":
                cursor.advance()
                cursor.advance()
                while cursor.peek() and cursor.peek() != "\n":
                    cursor.advance()
                continue

            # Block comment: end of input closes it
            if following == "*":
                cursor.advance()
                cursor.advance()
                previous = ""
                char = cursor.advance()
                while char and not (previous == "*" and char == "/"):
                    previous = char
                    char = cursor.advance()
                continue

            return

    # =========================================================================
    # Identifiers and Numbers
    # =========================================================================

    def _scan_identifier(self) -> Token:
        """
        Scan a keyword or identifier.

        Identifiers longer than ``max_identifier_length`` are truncated.
        """
        start = self._start()
        chars: list[str] = []

        while self._cursor.peek() and self._cursor.peek() in self.IDENT_CHARS:
            self._capture(chars, self._cursor.advance())

        name = "".join(chars)
        if name in KEYWORDS:
            return Token(TokenKind.KEYWORD, name, start.line, start.column, self.filename)

        name = name[: self.config.max_identifier_length]
        return Token(TokenKind.IDENTIFIER, name, start.line, start.column, self.filename)

    def _scan_number(self) -> Token:
        """
        Scan a decimal integer or float.

        A decimal point turns the literal into a float even when no
        fraction digits follow (``12.``). Signs, exponents and prefixed
        bases are not part of a number.
        """
        start = self._start()
        chars: list[str] = []
        kind = TokenKind.INT_LITERAL

        self._scan_digits(chars)
        if self._cursor.match("."):
            kind = TokenKind.FLOAT_LITERAL
            self._capture(chars, ".")
            self._scan_digits(chars)

        return self._make_token(kind, chars, start)

    def _scan_digits(self, chars: list[str]) -> None:
        while self._cursor.peek() and self._cursor.peek() in self.DIGITS:
            self._capture(chars, self._cursor.advance())

    # =========================================================================
    # String and Character Literals
    # =========================================================================

    def _scan_string(self) -> Token:
        """
        Scan a double-quoted string literal.

        The token text is the raw source between the quotes; escape
        sequences are captured verbatim, not decoded. A raw newline or
        end of input before the closing quote yields an ERROR token.
        """
        start = self._start()
        chars: list[str] = []

        self._cursor.advance()  # opening "
        char = self._cursor.advance()
        while char and char != '"':
            if char == "\n":
                return self._error(UNTERMINATED_STRING, start)
            if char == "\\":
                escaped = self._cursor.advance()
                if not escaped:
                    return self._error(UNTERMINATED_STRING, start)
                self._capture(chars, char, escaped)
            else:
                self._capture(chars, char)
            char = self._cursor.advance()

        if not char:
            return self._error(UNTERMINATED_STRING, start)
        return self._make_token(TokenKind.STRING_LITERAL, chars, start)

    def _scan_char(self) -> Token:
        """
        Scan a single-quoted character literal.

        Exactly one character, or a backslash and one character, must
        sit between the quotes. The text is kept verbatim.
        """
        start = self._start()
        chars: list[str] = []

        self._cursor.advance()  # opening '
        char = self._cursor.advance()
        if not char or char == "\n":
            return self._error(UNTERMINATED_CHAR, start)

        if char == "\\":
            escaped = self._cursor.advance()
            if not escaped or escaped == "\n":
                return self._error(UNTERMINATED_CHAR, start)
            self._capture(chars, char, escaped)
        else:
            self._capture(chars, char)

        if self._cursor.advance() != "'":
            return self._error(INVALID_CHAR, start)
        return self._make_token(TokenKind.CHAR_LITERAL, chars, start)

    # =========================================================================
    # Operators and Separators
    # =========================================================================

    def _scan_operator(self) -> Token:
        """
        Scan a separator, operator, or unknown character.

        Separators win over operators. Two-character operators are tried
        before single-character ones.
        """
        start = self._start()

        first = self._cursor.advance()
        if first in SEPARATORS:
            return self._make_token(TokenKind.SEPARATOR, [first], start)

        second = self._cursor.peek()
        if second and first + second in TWO_CHAR_OPERATORS:
            self._cursor.advance()
            return self._make_token(TokenKind.OPERATOR, [first, second], start)

        if first in SINGLE_CHAR_OPERATORS:
            return self._make_token(TokenKind.OPERATOR, [first], start)
        return self._make_token(TokenKind.UNKNOWN, [first], start)


# =============================================================================
# Core Interface
# =============================================================================

def open_scanner(
    source: Source,
    filename: Optional[str] = None,
    config: Optional[ScannerConfig] = None,
) -> Scanner:
    """
    Bind a Scanner to a path or an open text stream.

    Paths are opened here and closed by close_scanner(). Streams are
    borrowed and left open.

    Raises:
        OSError: If the path cannot be opened
    """
    config = (config or ScannerConfig()).validate()

    if isinstance(source, (str, os.PathLike)):
        path = os.fspath(source)
        # newline="" keeps carriage returns as ordinary layout characters;
        # undecodable bytes become U+FFFD and scan as UNKNOWN tokens
        stream = open(path, "r", encoding=config.encoding, errors="replace", newline="")
        logger.debug("Opened %s for scanning (encoding %s)", path, config.encoding)
        return Scanner(stream, filename or path, config, owns_stream=True)

    name = filename or getattr(source, "name", None) or "<input>"
    return Scanner(source, str(name), config, owns_stream=False)


def next_token(scanner: Scanner) -> Token:
    """Return the next token from ``scanner``."""
    return scanner.next_token()


def close_scanner(scanner: Scanner) -> None:
    """Release the source bound to ``scanner``."""
    scanner.close()


def tokenize(
    text: str,
    filename: str = "<string>",
    strict: bool = False,
    config: Optional[ScannerConfig] = None,
) -> list[Token]:
    """
    Scan ``text`` completely and return its tokens.

    The list ends with the EOF token, or with the first ERROR token.

    Args:
        text: Source text
        filename: Name used in token locations
        strict: Raise LexicalError instead of returning an ERROR token
        config: Lexeme limits

    Raises:
        LexicalError: In strict mode, for the first malformed literal
    """
    with Scanner.from_string(text, filename, config) as scanner:
        tokens = list(scanner.tokens())

    last = tokens[-1]
    if strict and last.is_error:
        lines = text.split("\n")
        source_line = lines[last.line - 1] if last.line <= len(lines) else None
        raise LexicalError(last.text, last.location, source_line=source_line)
    return tokens
