from schematic.grid import Grid
from schematic.token import Token, is_gear, is_number, is_symbol


def adjacent_cells(grid: Grid, token: Token) -> list[tuple[int, int]]:
    """Return the in-bounds ring of cells around ``token``'s footprint.

    Rows above and below span one column past each end of the token, so a
    multi-digit number gets its full rectangle perimeter.
    """
    columns = range(token.column_start - 1, token.column_end + 2)
    cells = [(token.line - 1, column) for column in columns]
    cells.append((token.line, token.column_start - 1))
    cells.append((token.line, token.column_end + 1))
    cells.extend((token.line + 1, column) for column in columns)
    return [(row, column) for row, column in cells if grid.contains(row, column)]


def has_symbol_neighbor(grid: Grid, token: Token) -> bool:
    assert is_number(token), "expected a number token"
    for row, column in adjacent_cells(grid, token):
        neighbor = grid.at(row, column)
        if neighbor is not None and is_symbol(neighbor):
            return True
    return False


def gear_neighbors(grid: Grid, token: Token) -> list[Token]:
    """Distinct number tokens touching a gear, in first-encounter order.

    Cells belonging to the same number collapse to one entry by token index.
    """
    assert is_gear(token), "expected a gear symbol"
    seen: dict[int, Token] = {}
    for row, column in adjacent_cells(grid, token):
        index = grid.index_at(row, column)
        if index is None or index in seen:
            continue
        neighbor = grid.tokens[index]
        if is_number(neighbor):
            seen[index] = neighbor
    return list(seen.values())
