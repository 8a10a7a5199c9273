"""Dense (row, column) lookup over a token sequence.

Cells hold indices into ``Grid.tokens`` rather than the tokens themselves;
``None`` marks a cell past the end of a short line.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from schematic.token import Token


@dataclass(frozen=True)
class Grid:
    tokens: list[Token]
    cells: list[list[Optional[int]]] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def columns(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def index_at(self, row: int, column: int) -> Optional[int]:
        if not self.contains(row, column):
            return None
        return self.cells[row][column]

    def at(self, row: int, column: int) -> Optional[Token]:
        index = self.index_at(row, column)
        if index is None:
            return None
        return self.tokens[index]


def build_grid(tokens: list[Token]) -> Grid:
    if not tokens:
        return Grid(tokens)
    rows = max(token.line for token in tokens) + 1
    columns = max(token.column_end for token in tokens) + 1
    cells: list[list[Optional[int]]] = [[None] * columns for _ in range(rows)]
    for index, token in enumerate(tokens):
        for row, column in token.footprint():
            assert cells[row][column] is None, f"overlapping tokens at {row}:{column}"
            cells[row][column] = index
    logging.info(f"[grid] {rows}x{columns} cells for {len(tokens)} tokens")
    return Grid(tokens, cells)
