import pytest

from sudokusolver.core.model import (
    Position,
    Solution,
    copy_grid,
    is_position_in_grid,
    is_value_in_range,
    subgrid_origin,
    subgrid_size,
)


def test_position_hash_and_eq():
    p1 = Position(4, 7)
    p2 = Position(4, 7)
    assert p1 == p2
    assert hash(p1) == hash(p2)


def test_solution_hash_and_access(solved):
    s1 = Solution.from_grid(solved)
    s2 = Solution.from_grid(solved)
    assert s1 == s2
    assert hash(s1) == hash(s2)
    assert s1.cell(0, 0) == 5
    assert s1.cell(8, 8) == 9
    assert len(s1) == 9


def test_solution_is_detached_from_grid(solved):
    s = Solution.from_grid(solved)
    solved[0][0] = 0
    assert s.cell(0, 0) == 5
    g = s.as_grid()
    g[0][0] = 0
    assert s.cell(0, 0) == 5


def test_subgrid_origin():
    assert subgrid_origin(Position(0, 0)) == Position(0, 0)
    assert subgrid_origin(Position(4, 8)) == Position(3, 6)
    assert subgrid_origin(Position(8, 2)) == Position(6, 0)
    assert subgrid_origin(Position(3, 1), 2) == Position(2, 0)


def test_subgrid_size():
    assert subgrid_size(9) == 3
    assert subgrid_size(4) == 2
    for bad in (0, 8, 10):
        with pytest.raises(ValueError):
            subgrid_size(bad)


def test_ranges():
    assert is_position_in_grid(Position(8, 8))
    assert not is_position_in_grid(Position(9, 0))
    assert not is_position_in_grid(Position(0, -1))
    assert is_value_in_range(1) and is_value_in_range(9)
    assert not is_value_in_range(0)
    assert not is_value_in_range(10)


def test_copy_grid(solved):
    g = copy_grid(solved)
    assert g == solved
    g[2][2] = 0
    assert solved[2][2] == 8
