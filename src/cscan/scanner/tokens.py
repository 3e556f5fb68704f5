"""
Token Model
===========

Token kinds, the immutable Token value, and the static lexical tables
(keywords, operators, separators) shared by every Scanner instance.

Token Categories
----------------
- Keywords: if, else, while, for, return, int, float, char, void,
  break, continue, struct, const
- Identifiers: letters, digits and underscores, not starting with a digit
- Numbers: decimal integers (42) and decimal floats (3.14, 12.)
- Strings: "double quoted", raw text kept, escapes not interpreted
- Characters: 'c' or '\\n', raw text kept
- Operators: == != <= >= && || ++ -- += -= *= /= %= -> and
  + - * / % < > = ! & | ^ ~ ? : .
- Separators: ( ) { } [ ] ; ,

All tables are frozensets or read-only mappings, so any number of
scanners may consult them concurrently.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cscan.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Lexical classes produced by the scanner."""

    EOF = auto()             # End of input
    KEYWORD = auto()         # Reserved word
    IDENTIFIER = auto()      # Variable/function names
    INT_LITERAL = auto()     # 42
    FLOAT_LITERAL = auto()   # 3.14, 12.
    STRING_LITERAL = auto()  # "..."
    CHAR_LITERAL = auto()    # '...'
    OPERATOR = auto()        # + == -> ...
    SEPARATOR = auto()       # ( ) { } [ ] ; ,
    UNKNOWN = auto()         # Character matching no lexeme class
    ERROR = auto()           # Malformed literal, text holds the diagnostic

    @property
    def label(self) -> str:
        """Short name used by the token printer."""
        return _LABELS[self]


_LABELS: dict[TokenKind, str] = {
    TokenKind.EOF: "EOF",
    TokenKind.KEYWORD: "KEYWORD",
    TokenKind.IDENTIFIER: "IDENTIFIER",
    TokenKind.INT_LITERAL: "INT",
    TokenKind.FLOAT_LITERAL: "FLOAT",
    TokenKind.STRING_LITERAL: "STRING",
    TokenKind.CHAR_LITERAL: "CHAR",
    TokenKind.OPERATOR: "OPERATOR",
    TokenKind.SEPARATOR: "SEPARATOR",
    TokenKind.UNKNOWN: "UNKNOWN",
    TokenKind.ERROR: "ERROR",
}


# =============================================================================
# Lexical Tables
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    # Control flow
    "if", "else", "while", "for", "return", "break", "continue",
    # Types and qualifiers
    "int", "float", "char", "void", "struct", "const",
})

SEPARATORS: frozenset[str] = frozenset("(){}[];,")

TWO_CHAR_OPERATORS: frozenset[str] = frozenset({
    "==", "!=", "<=", ">=",          # Comparison
    "&&", "||",                      # Logical
    "++", "--",                      # Increment/decrement
    "+=", "-=", "*=", "/=", "%=",    # Compound assignment
    "->",                            # Member access through pointer
})

SINGLE_CHAR_OPERATORS: frozenset[str] = frozenset("+-*/%<>=!&|^~?:.")

# Text carried by EOF tokens
EOF_TEXT = "EOF"

# Diagnostics carried by ERROR tokens
UNTERMINATED_STRING = "Unterminated string literal"
UNTERMINATED_CHAR = "Unterminated char literal"
INVALID_CHAR = "Invalid/unterminated char literal"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        kind: The TokenKind classification
        text: The exact lexeme (for ERROR, the diagnostic message)
        line: Line of the lexeme's first character (1-indexed)
        column: Column of the lexeme's first character (1-indexed)
        filename: Name of the scanned source
    """
    kind: TokenKind
    text: str
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @classmethod
    def error(cls, message: str, location: SourceLocation) -> "Token":
        """Build an ERROR token reporting ``message`` at ``location``."""
        return cls(
            TokenKind.ERROR,
            message,
            location.line,
            location.column,
            location.filename,
        )

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    @property
    def message(self) -> Optional[str]:
        """The diagnostic of an ERROR token, None for every other kind."""
        return self.text if self.is_error else None
