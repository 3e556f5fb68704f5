"""
Scanner Package
===============

Lexical scanner for a small C-like language.

Components
----------
- **tokens**: TokenKind, Token and the static keyword/operator tables
- **source**: CharCursor, the buffered character cursor with lookahead
- **config**: ScannerConfig, lexeme limits and input encoding
- **lexer**: Scanner and the open/next/close interface

Usage
-----
>>> from cscan.scanner import open_scanner, next_token, close_scanner
>>> scanner = open_scanner("prog.c")
>>> token = next_token(scanner)
>>> close_scanner(scanner)
"""

from cscan.scanner.config import ScannerConfig
from cscan.scanner.lexer import (
    Scanner,
    close_scanner,
    next_token,
    open_scanner,
    tokenize,
)
from cscan.scanner.source import CharCursor
from cscan.scanner.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    "Scanner",
    "ScannerConfig",
    "CharCursor",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "open_scanner",
    "next_token",
    "close_scanner",
    "tokenize",
]
