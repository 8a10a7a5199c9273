from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

FILLER = "."
GEAR = "*"
MAX_NUMBER = 18446744073709551615


class TokenType(IntEnum):
    Filler = 1
    Symbol = 2
    Number = 3


@dataclass(frozen=True, eq=False)
class Token:
    """One classified cell run of a schematic.

    Tokens compare by identity, so two numbers with the same value at
    different positions stay distinct in sets and dicts.
    """

    kind: TokenType
    line: int
    column_start: int
    column_end: int
    expression: str
    value: Optional[int] = None
    is_gear: bool = False

    @property
    def width(self) -> int:
        return self.column_end - self.column_start + 1

    def footprint(self) -> list[tuple[int, int]]:
        return [
            (self.line, column)
            for column in range(self.column_start, self.column_end + 1)
        ]


def new_filler(line: int, column: int, char: str = FILLER) -> Token:
    return Token(TokenType.Filler, line, column, column, char)


def new_symbol(line: int, column: int, char: str) -> Token:
    return Token(TokenType.Symbol, line, column, column, char, is_gear=char == GEAR)


def new_number(line: int, start: int, end: int, digits: str, value: int) -> Token:
    return Token(TokenType.Number, line, start, end - 1, digits, value=value)


def is_number(token: Token) -> bool:
    return token.kind == TokenType.Number


def is_symbol(token: Token) -> bool:
    return token.kind == TokenType.Symbol


def is_gear(token: Token) -> bool:
    return token.kind == TokenType.Symbol and token.is_gear


def describe_token(token: Token) -> str:
    match token.kind:
        case TokenType.Filler:
            return "Filler"
        case TokenType.Symbol:
            return f'Symbol("{token.expression}", {token.line}, {token.column_start})'
        case TokenType.Number:
            return (
                f'Number("{token.expression}", {token.line}, '
                f"{token.column_start}, {token.column_end})"
            )
        case _:
            raise ValueError("invalid token type")
