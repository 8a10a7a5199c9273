import pytest

from schematic.adjacency import adjacent_cells, gear_neighbors, has_symbol_neighbor
from schematic.grid import build_grid
from schematic.token import is_gear, is_number, is_symbol
from schematic.tokenize import tokenize


def test_single_cell_ring_has_eight_neighbors():
    grid = build_grid(tokenize("...\n.*.\n..."))
    cells = adjacent_cells(grid, grid.at(1, 1))
    assert sorted(cells) == [
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ]


def test_multi_digit_ring_is_the_full_perimeter():
    grid = build_grid(tokenize(".....\n.123.\n....."))
    cells = adjacent_cells(grid, grid.at(1, 2))
    assert len(cells) == 12
    assert (0, 0) in cells and (0, 4) in cells
    assert (1, 0) in cells and (1, 4) in cells
    assert (1, 2) not in cells


def test_ring_is_clipped_at_the_edges():
    grid = build_grid(tokenize("123*"))
    assert adjacent_cells(grid, grid.at(0, 0)) == [(0, 3)]


@pytest.mark.parametrize(
    "expression",
    [
        "*..\n.1.",
        ".*.\n.1.",
        "..*\n.1.",
        "...\n*1.",
        ".1.\n..#",
    ],
)
def test_symbol_in_any_direction_counts(expression):
    grid = build_grid(tokenize(expression))
    number = next(token for token in grid.tokens if is_number(token))
    assert has_symbol_neighbor(grid, number)


def test_symbol_two_columns_away_does_not_count():
    grid = build_grid(tokenize("12..\n...$"))
    assert not has_symbol_neighbor(grid, grid.at(0, 0))


def test_filler_is_transparent():
    grid = build_grid(tokenize("...\n.5.\n..."))
    assert not has_symbol_neighbor(grid, grid.at(1, 1))


def test_number_is_not_its_own_neighbor():
    grid = build_grid(tokenize("12.34"))
    assert not has_symbol_neighbor(grid, grid.at(0, 0))


def test_gear_neighbors_deduplicate_multi_cell_numbers():
    grid = build_grid(tokenize("123\n.*."))
    neighbors = gear_neighbors(grid, grid.at(1, 1))
    assert [token.value for token in neighbors] == [123]


def test_gear_neighbors_keep_equal_values_apart():
    grid = build_grid(tokenize("5.5\n.*."))
    neighbors = gear_neighbors(grid, grid.at(1, 1))
    assert [token.value for token in neighbors] == [5, 5]
    assert neighbors[0] is not neighbors[1]


def test_gear_neighbors_report_every_number():
    grid = build_grid(tokenize("1.2\n.*.\n3.4"))
    neighbors = gear_neighbors(grid, grid.at(1, 1))
    assert sorted(token.value for token in neighbors) == [1, 2, 3, 4]


def test_gear_neighbors_reject_plain_symbols():
    grid = build_grid(tokenize("1#"))
    with pytest.raises(AssertionError):
        gear_neighbors(grid, grid.at(0, 1))


def test_adjacency_is_symmetric(sample):
    grid = build_grid(tokenize(sample))
    for number in filter(is_number, grid.tokens):
        footprint = set(number.footprint())
        for row, column in adjacent_cells(grid, number):
            symbol = grid.at(row, column)
            if symbol is None or not is_symbol(symbol):
                continue
            assert footprint & set(adjacent_cells(grid, symbol))


def test_sample_gears(sample):
    grid = build_grid(tokenize(sample))
    gears = [token for token in grid.tokens if is_gear(token)]
    counts = [len(gear_neighbors(grid, gear)) for gear in gears]
    assert counts == [2, 1, 2]
