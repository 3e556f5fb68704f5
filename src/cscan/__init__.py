"""
cscan - Lexical Scanner for a Small C-like Language
===================================================

This package turns source text into classified tokens (keywords,
identifiers, numeric, string and character literals, operators and
separators), each tagged with the line and column where it starts.

Main Components
---------------
- **scanner**: the Scanner and its token model
- **cli**: the ``cscan`` command that prints a token listing

Quick Start
-----------
Scan a string:
    >>> from cscan import tokenize
    >>> [t.text for t in tokenize("x = 1;")]
    ['x', '=', '1', ';', 'EOF']

Scan a file one token at a time:
    >>> from cscan import open_scanner
    >>> with open_scanner("prog.c") as scanner:
    ...     for token in scanner.tokens():
    ...         print(token.line, token.column, token.kind.label, token.text)

Or use the command-line tool:
    $ cscan prog.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from cscan.errors import (
    CScanError,
    ConfigError,
    LexicalError,
    LookaheadError,
    ScannerError,
    SourceLocation,
)
from cscan.scanner import (
    KEYWORDS,
    Scanner,
    ScannerConfig,
    Token,
    TokenKind,
    close_scanner,
    next_token,
    open_scanner,
    tokenize,
)

__all__ = [
    "__version__",
    # Scanner
    "Scanner",
    "ScannerConfig",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "open_scanner",
    "next_token",
    "close_scanner",
    "tokenize",
    # Errors
    "CScanError",
    "ScannerError",
    "LexicalError",
    "LookaheadError",
    "ConfigError",
    "SourceLocation",
]
