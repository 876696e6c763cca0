# MIT License (see LICENSE)
"""
Level catalog.

Each level is a grid shape plus an inclusion pattern deciding which cells
hold a brick. Patterns are plain pure functions with the signature

    pattern(row, col, rows, cols) -> bool

so the same inputs always produce the same grid. Cells outside the
rows x cols rectangle are always excluded.
"""
from __future__ import annotations
import functools
import math
from dataclasses import dataclass
from typing import Callable, Iterator

Pattern = Callable[[int, int, int, int], bool]


def _bounded(pattern: Pattern) -> Pattern:
    """Wrap a pattern so out-of-range cells are excluded instead of evaluated."""
    @functools.wraps(pattern)
    def wrapper(row: int, col: int, rows: int, cols: int) -> bool:
        if row < 0 or col < 0 or row >= rows or col >= cols:
            return False
        return bool(pattern(row, col, rows, cols))
    return wrapper


# =============================================================================
# Patterns
# =============================================================================

@_bounded
def alternating(row: int, col: int, rows: int, cols: int) -> bool:
    """Every other cell, shifted by one on odd rows."""
    return col % 2 == row % 2


@_bounded
def diamond(row: int, col: int, rows: int, cols: int) -> bool:
    """Cells within Manhattan distance 4 of the grid centre."""
    center_col = cols // 2
    center_row = rows // 2
    return abs(col - center_col) + abs(row - center_row) < 5


@_bounded
def pyramid(row: int, col: int, rows: int, cols: int) -> bool:
    """Rows widen towards the middle of the grid and narrow again."""
    center_col = cols // 2
    max_width = min(row + 1, rows - row) * 2
    return abs(col - center_col) < max_width / 2


@_bounded
def spiral(row: int, col: int, rows: int, cols: int) -> bool:
    """
    Disc whose radius grows with the polar angle around the centre.
    
    The first column is always left empty.
    """
    if col == 0:
        return False
    dx = col - cols // 2
    dy = row - rows // 2
    angle = math.atan2(dy, dx)
    distance = math.sqrt(dx * dx + dy * dy)
    return distance < 4 + (angle + math.pi) / (2 * math.pi) * 3


@_bounded
def lower_checkerboard(row: int, col: int, rows: int, cols: int) -> bool:
    """Checkerboard restricted to rows near the bottom; first column empty."""
    if col == 0:
        return False
    difficulty = row // 2
    return (row + col) % 2 == 0 and row >= rows - difficulty * 2


# =============================================================================
# Definitions
# =============================================================================

@dataclass(frozen=True)
class LevelDefinition:
    """
    Shape and brick pattern of a single level.
    
    Attributes:
        rows, cols: Grid shape.
        pattern: Inclusion predicate, or None for a full grid.
        name: Human readable label for menus and logs.
    """
    rows: int
    cols: int
    pattern: Pattern | None = None
    name: str = ""

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Level grid must be at least 1x1, got {self.rows}x{self.cols}")

    def includes(self, row: int, col: int) -> bool:
        """Whether cell [row][col] holds a brick. Out-of-range cells never do."""
        if row < 0 or col < 0 or row >= self.rows or col >= self.cols:
            return False
        if self.pattern is None:
            return True
        return bool(self.pattern(row, col, self.rows, self.cols))

    def brick_count(self) -> int:
        return sum(
            self.includes(r, c) for r in range(self.rows) for c in range(self.cols)
        )


class LevelCatalog:
    """
    Mapping from level number (1..N) to LevelDefinition.
    
    Level numbers must be contiguous starting at 1 so that "next level"
    is always level + 1 and max_level is the last one.
    """

    def __init__(self, levels: dict[int, LevelDefinition]) -> None:
        if not levels:
            raise ValueError("LevelCatalog needs at least one level")
        expected = list(range(1, len(levels) + 1))
        if sorted(levels) != expected:
            raise ValueError(f"Level numbers must be 1..{len(levels)}, got {sorted(levels)}")
        self._levels = dict(levels)

    @property
    def max_level(self) -> int:
        return len(self._levels)

    def get(self, level: int) -> LevelDefinition:
        """
        Look up a level.
        
        Raises:
            ValueError: If the level is not in the catalog.
        """
        try:
            return self._levels[level]
        except KeyError:
            raise ValueError(
                f"Unknown level {level!r}; catalog has levels 1..{self.max_level}"
            ) from None

    def has_next(self, level: int) -> bool:
        return level < self.max_level

    def __contains__(self, level: object) -> bool:
        return level in self._levels

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._levels))


DEFAULT_LEVELS: dict[int, LevelDefinition] = {
    1: LevelDefinition(rows=8, cols=10, pattern=None, name="Full grid"),
    2: LevelDefinition(rows=8, cols=10, pattern=alternating, name="Alternating"),
    3: LevelDefinition(rows=8, cols=11, pattern=diamond, name="Diamond"),
    4: LevelDefinition(rows=8, cols=12, pattern=pyramid, name="Pyramid"),
    5: LevelDefinition(rows=8, cols=13, pattern=spiral, name="Spiral"),
    6: LevelDefinition(rows=8, cols=14, pattern=lower_checkerboard, name="Checkerboard"),
}


def default_catalog() -> LevelCatalog:
    """The six built-in levels."""
    return LevelCatalog(DEFAULT_LEVELS)


# Pattern registry used when levels are described by name (e.g. JSON files).
PATTERNS: dict[str, Pattern] = {
    "alternating": alternating,
    "diamond": diamond,
    "pyramid": pyramid,
    "spiral": spiral,
    "lower_checkerboard": lower_checkerboard,
}
