import dataclasses

import pytest

from declang.token import (
    ASSIGNMENT,
    BRACKETS,
    COLON,
    DECIMAL_POINT,
    KEYWORDS,
    OPERATORS,
    Token,
    TokenKind,
    new_token,
)


def test_equality_ignores_position():
    assert Token("x", TokenKind.Variable, 1, 1, 1) == Token("x", TokenKind.Variable, 4, 9, 1)
    assert hash(Token("x", TokenKind.Variable, 1, 1)) == hash(Token("x", TokenKind.Variable))


def test_inequality():
    assert Token("x", TokenKind.Variable) != Token("y", TokenKind.Variable)
    assert Token("x", TokenKind.Variable) != Token("x", TokenKind.Return)


def test_tokens_are_immutable():
    token = Token("x", TokenKind.Variable)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.value = "y"


def test_str():
    assert str(Token("x", TokenKind.Variable)) == "x : Variable"
    assert str(Token(":=", TokenKind.Assignment)) == ":= : Assignment"


def test_new_token_sets_length():
    token = new_token("return", TokenKind.Return, 2, 5)
    assert (token.line, token.column, token.length) == (2, 5, 6)


def test_constants():
    assert COLON + "=" == ASSIGNMENT == ":="
    assert DECIMAL_POINT == "."
    assert OPERATORS == {"+", "-", "*", "/", "//", "%", "**"}
    assert BRACKETS["{"] is TokenKind.LeftCurly
    assert KEYWORDS == {"return": TokenKind.Return}
