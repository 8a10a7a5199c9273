import logging
from dataclasses import dataclass

from schematic.adjacency import gear_neighbors, has_symbol_neighbor
from schematic.grid import Grid, build_grid
from schematic.token import Token, TokenType
from schematic.tokenize import tokenize


@dataclass(frozen=True)
class Report:
    sum_of_part_numbers: int
    sum_of_gear_ratios: int


def part_number(grid: Grid, token: Token) -> int:
    match token.kind:
        case TokenType.Number:
            return token.value if has_symbol_neighbor(grid, token) else 0
        case TokenType.Symbol | TokenType.Filler:
            return 0
        case _:
            raise ValueError("invalid token type")


def gear_ratio(grid: Grid, token: Token) -> int:
    match token.kind:
        case TokenType.Symbol if token.is_gear:
            neighbors = gear_neighbors(grid, token)
            if len(neighbors) != 2:
                return 0
            return neighbors[0].value * neighbors[1].value
        case TokenType.Symbol | TokenType.Number | TokenType.Filler:
            return 0
        case _:
            raise ValueError("invalid token type")


def sum_part_numbers(grid: Grid) -> int:
    return sum(part_number(grid, token) for token in grid.tokens)


def sum_gear_ratios(grid: Grid) -> int:
    return sum(gear_ratio(grid, token) for token in grid.tokens)


def summarize(tokens: list[Token]) -> Report:
    grid = build_grid(tokens)
    report = Report(sum_part_numbers(grid), sum_gear_ratios(grid))
    logging.info(
        f"[aggregate] part numbers={report.sum_of_part_numbers} "
        f"gear ratios={report.sum_of_gear_ratios}"
    )
    return report


def analyze(expression: str) -> Report:
    return summarize(tokenize(expression))


def format_report(report: Report) -> str:
    return (
        f"Part 1: {report.sum_of_part_numbers}\n"
        f"Part 2: {report.sum_of_gear_ratios}\n"
    )
