# MIT License (see LICENSE)
"""
Brick grid layout engine.

Given the number of rows and columns of a level and the playing field,
computes brick size, padding and the offsets that centre the grid inside
the field. The computation is pure and independent of simulation state.

Algorithm:
    1. Reserve the minimum padding between neighbouring cells and compute
       the largest cell that fits on each axis.
    2. Whichever axis is tighter relative to the target aspect ratio drives
       the brick size; the other dimension follows from the aspect ratio.
    3. Padding is recomputed on the driving axis so that the cells plus
       (n + 1) gaps exactly fill it.
    4. The resulting grid rectangle is centred on both axes.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

from .types import PlayingField

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrickLayout:
    """
    Brick dimensions and grid placement for a rows x cols level.
    
    Attributes:
        rows, cols: Grid shape.
        brick_width, brick_height: Size of every brick.
        padding: Gap between neighbouring bricks (>= 0).
        offset_x, offset_y: Top-left corner of the grid rectangle.
    """
    rows: int
    cols: int
    brick_width: float
    brick_height: float
    padding: float
    offset_x: float
    offset_y: float

    @property
    def grid_width(self) -> float:
        return self.cols * self.brick_width + (self.cols - 1) * self.padding

    @property
    def grid_height(self) -> float:
        return self.rows * self.brick_height + (self.rows - 1) * self.padding

    def cell_origin(self, row: int, col: int) -> tuple[float, float]:
        """Top-left corner of cell [row][col]."""
        x = col * (self.brick_width + self.padding) + self.offset_x
        y = row * (self.brick_height + self.padding) + self.offset_y
        return (x, y)


def compute_brick_layout(
    rows: int,
    cols: int,
    field: PlayingField,
    aspect_ratio: float = 2.5,
    min_padding: float = 4.0,
) -> BrickLayout:
    """
    Compute the largest centred brick grid that fits the field.
    
    Args:
        rows: Number of brick rows (>= 1).
        cols: Number of brick columns (>= 1).
        field: Container the grid must stay inside.
        aspect_ratio: Target brick width / height.
        min_padding: Gap reserved between neighbours when sizing bricks.
        
    Returns:
        The BrickLayout. Bricks never overlap each other or the field edge.
        
    Raises:
        ValueError: If rows/cols < 1 or the minimum padding leaves no room.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid needs at least one row and column, got {rows}x{cols}")

    available_w = field.width - min_padding * (cols - 1)
    available_h = field.height - min_padding * (rows - 1)
    if available_w <= 0 or available_h <= 0:
        raise ValueError(
            f"Field {field.width}x{field.height} too small for {rows}x{cols} "
            f"bricks with padding {min_padding}"
        )

    max_w = available_w / cols
    max_h = available_h / rows

    if max_w / max_h > aspect_ratio:
        # Height is the limiting factor
        brick_h = max_h
        brick_w = brick_h * aspect_ratio
        padding = (field.height - rows * brick_h) / (rows + 1)
    else:
        # Width is the limiting factor
        brick_w = max_w
        brick_h = brick_w / aspect_ratio
        padding = (field.width - cols * brick_w) / (cols + 1)

    # Rounding can leave a tiny negative value when min_padding == 0
    padding = max(0.0, padding)

    grid_w = cols * brick_w + (cols - 1) * padding
    grid_h = rows * brick_h + (rows - 1) * padding
    offset_x = field.x + (field.width - grid_w) / 2
    offset_y = field.y + (field.height - grid_h) / 2

    logger.debug("Container: %sx%s", field.width, field.height)
    logger.debug("Grid: %.1fx%.1f", grid_w, grid_h)
    logger.debug("Brick: %.1fx%.1f, padding: %.1f", brick_w, brick_h, padding)

    return BrickLayout(
        rows=rows,
        cols=cols,
        brick_width=brick_w,
        brick_height=brick_h,
        padding=padding,
        offset_x=offset_x,
        offset_y=offset_y,
    )
