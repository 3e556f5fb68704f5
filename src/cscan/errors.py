"""
cscan Error Hierarchy
=====================

This module defines the exception hierarchy for the scanner package.
All exceptions inherit from CScanError, allowing callers to catch every
package-specific error with a single except clause.

Exception Hierarchy
-------------------
CScanError (base)
├── ScannerError - problems tied to a source position
│   ├── LexicalError - malformed literal (raised only on request)
│   └── LookaheadError - character cursor peeked beyond its buffer
└── ConfigError - invalid scanner configuration

Lexical problems are normally NOT raised: the scanner encodes them as
ERROR tokens in the token stream and leaves the decision to the caller.
LexicalError exists for callers that prefer exceptions (see
``tokenize(..., strict=True)``).

Failures to open a source are plain ``OSError`` and are never wrapped.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CScanError(Exception):
    """
    Base exception for all cscan errors.

        try:
            tokens = tokenize(text, strict=True)
        except CScanError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in scanned source, used for tokens and diagnostics.

    Attributes:
        filename: Name of the source (or "<string>" for in-memory input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScannerError(CScanError):
    """
    Base exception for errors that refer to a position in the source.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            demo.c:3:9: error: Unterminated string literal
                x = "abc
                    ^
            hint: close the literal with '"' before the end of the line
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class LexicalError(ScannerError):
    """
    A malformed string or character literal.

    The scanner itself never raises this; it is produced from an ERROR
    token by callers that want exception semantics.
    """
    pass


class LookaheadError(ScannerError):
    """
    The character cursor was asked to look further ahead than it buffers.

    This indicates a bug in a sub-scanner, never bad input.
    """
    pass


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigError(CScanError):
    """Invalid scanner configuration (limits, encoding)."""
    pass
