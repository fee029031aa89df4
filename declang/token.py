from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class TokenKind(IntEnum):
    Variable = 1
    Return = 2
    Integer = 3
    Float = 4
    Operator = 5
    Assignment = 6
    LeftParen = 7
    RightParen = 8
    LeftCurly = 9
    RightCurly = 10


COLON = ":"
ASSIGNMENT = ":="
PLUS = "+"
MINUS = "-"
TIMES = "*"
FLOAT_DIVISION = "/"
INT_DIVISION = "//"
MODULUS = "%"
EXPONENT = "**"
LEFT_PAREN = "("
RIGHT_PAREN = ")"
LEFT_CURLY = "{"
RIGHT_CURLY = "}"
DECIMAL_POINT = "."
RETURN = "return"

OPERATORS = frozenset(
    {PLUS, MINUS, TIMES, FLOAT_DIVISION, INT_DIVISION, MODULUS, EXPONENT}
)

BRACKETS = {
    LEFT_PAREN: TokenKind.LeftParen,
    RIGHT_PAREN: TokenKind.RightParen,
    LEFT_CURLY: TokenKind.LeftCurly,
    RIGHT_CURLY: TokenKind.RightCurly,
}

KEYWORDS = {RETURN: TokenKind.Return}


@dataclass(frozen=True)
class Token:
    value: str
    kind: TokenKind
    line: Optional[int] = field(default=None, compare=False)
    column: Optional[int] = field(default=None, compare=False)
    length: Optional[int] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.value} : {self.kind.name}"


def new_token(
    value: str,
    kind: TokenKind,
    line: Optional[int] = None,
    column: Optional[int] = None,
) -> Token:
    return Token(value, kind, line, column, len(value))
