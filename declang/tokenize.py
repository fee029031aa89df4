import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from declang.helper import LexicalError
from declang.token import (
    ASSIGNMENT,
    BRACKETS,
    COLON,
    DECIMAL_POINT,
    FLOAT_DIVISION,
    KEYWORDS,
    OPERATORS,
    TIMES,
    Token,
    TokenKind,
    new_token,
)

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset(string.digits)
LOWERCASE = frozenset(string.ascii_lowercase)
UPPERCASE = frozenset(string.ascii_uppercase)


class LexemeClass(Enum):
    Number = auto()
    Identifier = auto()
    Colon = auto()
    Slash = auto()
    Star = auto()


@dataclass(frozen=True)
class Failure:
    message: str
    text: str
    offset: int


class Scanner:
    """Single-pass scanner with a one-lexeme buffer.

    A scanner is owned by one ``tokenize`` call. Each step either consumes a
    character or returns a ``Failure``; the first failure ends the scan.
    """

    def __init__(self, expression: str):
        self.expression = expression
        self.tokens: list[Token] = []
        self.buffer: list[str] = []
        self.lexeme: Optional[LexemeClass] = None
        self.line = 1
        self.column = 1
        self.start = 0
        self.start_line = 1
        self.start_column = 1

    def scan(self) -> Optional[Failure]:
        # trailing space flushes the last lexeme
        for index, char in enumerate(self.expression + " "):
            if (failure := self.step(index, char)) is not None:
                return failure
            if char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        return None

    def step(self, index: int, char: str) -> Optional[Failure]:
        match self.lexeme:
            case LexemeClass.Number:
                if char in DIGITS:
                    self.buffer.append(char)
                    return None
                if char == DECIMAL_POINT:
                    if DECIMAL_POINT in self.buffer:
                        return Failure("second decimal point in number", char, index)
                    self.buffer.append(char)
                    return None
            case LexemeClass.Identifier:
                if char in LOWERCASE:
                    self.buffer.append(char)
                    return None
                if char in DIGITS:
                    return Failure("digit in variable name", char, index)
            case LexemeClass.Colon:
                if self.buffer[0] + char != ASSIGNMENT:
                    return Failure("expected '=' after ':'", COLON, self.start)
                self.buffer.append(char)
                self.close()
                return None
            case LexemeClass.Slash | LexemeClass.Star:
                if char == self.buffer[0]:
                    self.buffer.append(char)
                    self.close()
                    return None
        if self.lexeme is not None:
            self.close()
        return self.start_lexeme(index, char)

    def start_lexeme(self, index: int, char: str) -> Optional[Failure]:
        if char in WHITESPACE:
            return None
        self.start = index
        self.start_line = self.line
        self.start_column = self.column
        if char in DIGITS:
            self.open(LexemeClass.Number, char)
        elif char in LOWERCASE:
            self.open(LexemeClass.Identifier, char)
        elif char == COLON:
            self.open(LexemeClass.Colon, char)
        elif char == FLOAT_DIVISION:
            self.open(LexemeClass.Slash, char)
        elif char == TIMES:
            self.open(LexemeClass.Star, char)
        elif char in BRACKETS:
            self.emit(char, BRACKETS[char])
        elif char in OPERATORS:
            self.emit(char, TokenKind.Operator)
        elif char == DECIMAL_POINT:
            return Failure("decimal point without a leading digit", char, index)
        elif char in UPPERCASE:
            return Failure("uppercase letter in variable name", char, index)
        else:
            return Failure(f"invalid character {char!r}", char, index)
        return None

    def open(self, lexeme: LexemeClass, char: str) -> None:
        self.lexeme = lexeme
        self.buffer = [char]

    def close(self) -> None:
        value = "".join(self.buffer)
        match self.lexeme:
            case LexemeClass.Number:
                kind = TokenKind.Float if DECIMAL_POINT in value else TokenKind.Integer
            case LexemeClass.Identifier:
                kind = KEYWORDS.get(value, TokenKind.Variable)
            case LexemeClass.Colon:
                kind = TokenKind.Assignment
            case _:
                kind = TokenKind.Operator
        self.emit(value, kind)
        self.lexeme = None
        self.buffer = []

    def emit(self, value: str, kind: TokenKind) -> None:
        self.tokens.append(new_token(value, kind, self.start_line, self.start_column))


def tokenize(expression: str) -> list[Token]:
    scanner = Scanner(expression)
    if (failure := scanner.scan()) is not None:
        raise LexicalError(failure.message, failure.text, failure.offset, expression)
    logger.debug(
        "tokenized %d characters into %d tokens", len(expression), len(scanner.tokens)
    )
    return scanner.tokens
