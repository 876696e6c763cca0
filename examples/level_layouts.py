# examples/level_layouts.py
# Print the computed brick layout of every built-in level.
from breakout_core import GameConfig, PlayingField, default_catalog
from breakout_core.grid import build_brick_grid

config = GameConfig()
field = PlayingField.from_config(config)
catalog = default_catalog()

print(f"field: ({field.x}, {field.y}) {field.width}x{field.height}")
for n in catalog:
    level = catalog.get(n)
    grid = build_brick_grid(level, field)
    lay = grid.layout
    print(
        f"level {n} {level.name:<12} {level.rows}x{level.cols} "
        f"brick={lay.brick_width:.1f}x{lay.brick_height:.1f} pad={lay.padding:.2f} "
        f"bricks={grid.total_count}"
    )
    for row in grid.cells:
        print("   " + "".join("#" if b.visible else "." for b in row))
