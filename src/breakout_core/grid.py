# MIT License (see LICENSE)
"""
Brick grid construction and accounting.

The grid is rebuilt from scratch on every level (re)start: layout from the
level shape, then one Brick per cell with visibility taken from the level
pattern. total_count / active_count are maintained incrementally so the
completion check never needs to scan the grid.
"""
from __future__ import annotations
import logging
from typing import Iterator

from .layout import BrickLayout, compute_brick_layout
from .levels import LevelDefinition
from .types import Brick, PlayingField

logger = logging.getLogger(__name__)


class BrickGrid:
    """
    A rows x cols grid of bricks indexed [row][col].
    
    Attributes:
        layout: Geometry the bricks were placed with.
        cells: Row-major list of rows; gap cells are invisible Bricks.
        total_count: Bricks created for the level.
        active_count: Bricks still visible. 0 means the level is cleared.
    """

    def __init__(self, layout: BrickLayout, cells: list[list[Brick]]) -> None:
        self.layout = layout
        self.cells = cells
        self.total_count = sum(b.visible for b in self)
        self.active_count = self.total_count

    @property
    def rows(self) -> int:
        return self.layout.rows

    @property
    def cols(self) -> int:
        return self.layout.cols

    def __iter__(self) -> Iterator[Brick]:
        """Row-major iteration over every cell, gaps included."""
        for row in self.cells:
            yield from row

    def visible(self) -> Iterator[Brick]:
        """Row-major iteration over bricks still in play."""
        return (b for b in self if b.visible)

    def destroy(self, brick: Brick) -> None:
        """Hide a visible brick and decrement active_count."""
        if not brick.visible:
            raise ValueError(f"Brick [{brick.row}][{brick.col}] is already destroyed")
        brick.visible = False
        self.active_count -= 1
        logger.debug("Brick destroyed. Remaining: %d/%d", self.active_count, self.total_count)

    def is_complete(self) -> bool:
        return self.active_count == 0


def build_brick_grid(
    level: LevelDefinition,
    field: PlayingField,
    aspect_ratio: float = 2.5,
    min_padding: float = 4.0,
) -> BrickGrid:
    """
    Lay out and populate the grid for a level.
    
    Deterministic: the same level and field always give identical bricks.
    """
    layout = compute_brick_layout(
        level.rows, level.cols, field, aspect_ratio=aspect_ratio, min_padding=min_padding
    )
    cells: list[list[Brick]] = []
    for i in range(level.rows):
        row = []
        for j in range(level.cols):
            x, y = layout.cell_origin(i, j)
            row.append(Brick(
                row=i,
                col=j,
                x=x,
                y=y,
                width=layout.brick_width,
                height=layout.brick_height,
                visible=level.includes(i, j),
            ))
        cells.append(row)

    grid = BrickGrid(layout, cells)
    logger.debug("Created %dx%d grid with %d total bricks", level.rows, level.cols, grid.total_count)
    return grid
