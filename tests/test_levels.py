import pytest
from breakout_core.levels import (
    LevelCatalog,
    LevelDefinition,
    default_catalog,
    alternating,
    diamond,
    pyramid,
    spiral,
    lower_checkerboard,
)

ALL_PATTERNS = [alternating, diamond, pyramid, spiral, lower_checkerboard]


@pytest.mark.parametrize("level,expected", [
    (1, 80),   # full 8x10
    (2, 40),   # half of 8x10
    (3, 40),   # rows of 1,3,5,7,9,7,5,3
    (4, 32),   # rows of 1,3,5,7,7,5,3,1
    (5, 74),   # rows of 6,8,8,9,11,11,11,10
    (6, 26),   # bottom four rows, checkerboard, first column empty
])
def test_builtin_brick_counts(level, expected):
    """Brick counts of the built-in levels with their pattern predicates."""
    assert default_catalog().get(level).brick_count() == expected


@pytest.mark.parametrize("pattern", ALL_PATTERNS)
def test_patterns_exclude_out_of_range_cells(pattern):
    """Cells outside rows x cols are excluded, never evaluated."""
    for row, col in [(-1, 0), (0, -1), (8, 0), (0, 14), (100, 100)]:
        assert pattern(row, col, 8, 14) is False


@pytest.mark.parametrize("pattern", ALL_PATTERNS)
def test_patterns_are_pure(pattern):
    """Same (row, col, rows, cols) always gives the same answer."""
    first = [pattern(i, j, 8, 13) for i in range(8) for j in range(13)]
    second = [pattern(i, j, 8, 13) for i in range(8) for j in range(13)]
    assert first == second


def test_first_column_empty_on_later_levels():
    catalog = default_catalog()
    for n in (5, 6):
        level = catalog.get(n)
        assert not any(level.includes(i, 0) for i in range(level.rows))


def test_full_grid_includes_only_in_range():
    level = LevelDefinition(rows=2, cols=3)
    assert level.includes(1, 2)
    assert not level.includes(2, 0)
    assert not level.includes(0, -1)


def test_catalog_rejects_unknown_levels():
    catalog = default_catalog()
    assert catalog.max_level == 6
    assert list(catalog) == [1, 2, 3, 4, 5, 6]
    for bad in (0, 7, -1):
        with pytest.raises(ValueError):
            catalog.get(bad)


def test_catalog_requires_contiguous_numbers():
    """Level numbers must be exactly 1..N."""
    with pytest.raises(ValueError):
        LevelCatalog({2: LevelDefinition(1, 1)})
    with pytest.raises(ValueError):
        LevelCatalog({})


def test_has_next():
    catalog = default_catalog()
    assert catalog.has_next(5)
    assert not catalog.has_next(6)
