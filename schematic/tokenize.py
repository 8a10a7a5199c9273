import logging
import string

from schematic.helper import error_at
from schematic.token import (
    FILLER,
    MAX_NUMBER,
    Token,
    new_filler,
    new_number,
    new_symbol,
)


def read_number(expression: str, line_number: int, index: int) -> tuple[Token, int]:
    end = index
    while end < len(expression) and expression[end] in string.digits:
        end += 1
    digits = expression[index:end]
    significant = digits.lstrip("0") or "0"
    value = MAX_NUMBER + 1
    if len(significant) <= len(str(MAX_NUMBER)):
        value = int(significant)
    if value > MAX_NUMBER:
        print(error_at(line_number, expression, index, "number too large"))
        exit(1)
    return new_number(line_number, index, end, digits, value), end


def tokenize_line(expression: str, line_number: int) -> list[Token]:
    index = 0
    tokens = []
    while index < len(expression):
        char = expression[index]
        if char in string.digits:
            token, index = read_number(expression, line_number, index)
            tokens.append(token)
            continue
        if char == FILLER or char.isspace():
            tokens.append(new_filler(line_number, index, char))
            index += 1
            continue
        tokens.append(new_symbol(line_number, index, char))
        index += 1
    return tokens


def tokenize(expression: str) -> list[Token]:
    lines = expression.splitlines()
    tokens = []
    for line_number, line in enumerate(lines):
        tokens.extend(tokenize_line(line, line_number))
    logging.info(f"[tokenize] {len(tokens)} tokens over {len(lines)} lines")
    return tokens
