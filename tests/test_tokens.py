"""
Token Model Tests
=================

TokenKind labels, Token value semantics and the lexical tables.
"""

import dataclasses

import pytest

from cscan.errors import SourceLocation
from cscan.scanner.tokens import (
    KEYWORDS,
    SEPARATORS,
    SINGLE_CHAR_OPERATORS,
    TWO_CHAR_OPERATORS,
    Token,
    TokenKind,
)


class TestTokenKind:
    """Printer labels."""

    @pytest.mark.parametrize("kind, label", [
        (TokenKind.EOF, "EOF"),
        (TokenKind.INT_LITERAL, "INT"),
        (TokenKind.FLOAT_LITERAL, "FLOAT"),
        (TokenKind.STRING_LITERAL, "STRING"),
        (TokenKind.CHAR_LITERAL, "CHAR"),
        (TokenKind.IDENTIFIER, "IDENTIFIER"),
    ])
    def test_labels(self, kind, label):
        assert kind.label == label

    def test_every_kind_has_label(self):
        for kind in TokenKind:
            assert len(kind.label) <= 10


class TestToken:
    """Token value semantics."""

    def test_immutable(self):
        token = Token(TokenKind.IDENTIFIER, "x", 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "y"

    def test_equality(self):
        assert Token(TokenKind.OPERATOR, "+", 2, 3) == Token(TokenKind.OPERATOR, "+", 2, 3)

    def test_repr(self):
        token = Token(TokenKind.KEYWORD, "int", 1, 5)
        assert repr(token) == "Token(KEYWORD, 'int', 1:5)"

    def test_error_token(self):
        token = Token.error("Unterminated string literal", SourceLocation("a.c", 4, 2))
        assert token.is_error
        assert token.message == "Unterminated string literal"
        assert (token.filename, token.line, token.column) == ("a.c", 4, 2)

    def test_message_only_for_errors(self):
        assert Token(TokenKind.STRING_LITERAL, "hi", 1, 1).message is None

    def test_location(self):
        token = Token(TokenKind.EOF, "EOF", 7, 1, "f.c")
        assert token.is_eof
        assert token.location == SourceLocation("f.c", 7, 1)


class TestTables:
    """Static lexical tables."""

    def test_keyword_count(self):
        assert len(KEYWORDS) == 13
        assert "struct" in KEYWORDS
        assert "goto" not in KEYWORDS

    def test_tables_are_immutable(self):
        for table in (KEYWORDS, SEPARATORS, TWO_CHAR_OPERATORS, SINGLE_CHAR_OPERATORS):
            assert isinstance(table, frozenset)

    def test_two_char_operators_are_pairs(self):
        assert all(len(op) == 2 for op in TWO_CHAR_OPERATORS)
        assert len(TWO_CHAR_OPERATORS) == 14

    def test_separators_disjoint_from_operators(self):
        assert not SEPARATORS & SINGLE_CHAR_OPERATORS
