# MIT License (see LICENSE)
"""
JSON serialization for configuration, level catalogs and frame snapshots.

Config schema: a flat object whose keys are GameConfig field names; any
subset may be given, missing keys take the defaults.

Catalog schema:
{
  "levels": [
    {
      "rows": int,                 # Required
      "cols": int,                 # Required
      "pattern": string | null,    # Name from levels.PATTERNS, null = full grid
      "name": string               # Optional
    },
    ...                            # Level numbers follow list order, from 1
  ]
}

Snapshots serialize to plain dicts/lists suitable for external viewers.
"""
from __future__ import annotations
import dataclasses
import json
from typing import Any

from ..config import GameConfig
from ..levels import PATTERNS, LevelCatalog, LevelDefinition
from ..snapshot import FrameSnapshot

_CONFIG_FIELDS = {f.name for f in dataclasses.fields(GameConfig)}


def config_to_json(config: GameConfig) -> dict[str, Any]:
    """Serialize every GameConfig field (round-trip compatible)."""
    return dataclasses.asdict(config)


def config_from_json(data: dict[str, Any]) -> GameConfig:
    """
    Build a GameConfig from a dict.
    
    Raises:
        ValueError: On unknown keys or invalid values.
    """
    unknown = set(data) - _CONFIG_FIELDS
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return GameConfig(**data)


def load_config(path: str) -> GameConfig:
    """
    Load a GameConfig from a JSON file.
    
    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: On unknown keys or invalid values.
    """
    with open(path, "r", encoding="utf-8") as f:
        return config_from_json(json.load(f))


def save_config(config: GameConfig, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=2)


def level_from_json(d: dict[str, Any]) -> LevelDefinition:
    """
    Parse one level definition.
    
    Raises:
        ValueError: If rows/cols are missing or the pattern name is unknown.
    """
    if "rows" not in d or "cols" not in d:
        raise ValueError("Level definition needs 'rows' and 'cols'")
    pattern_name = d.get("pattern")
    if pattern_name is None:
        pattern = None
    elif pattern_name in PATTERNS:
        pattern = PATTERNS[pattern_name]
    else:
        raise ValueError(f"Unknown level pattern: '{pattern_name}'")
    return LevelDefinition(
        rows=int(d["rows"]),
        cols=int(d["cols"]),
        pattern=pattern,
        name=str(d.get("name", "")),
    )


def catalog_from_json(data: dict[str, Any]) -> LevelCatalog:
    levels = data.get("levels", [])
    return LevelCatalog({i + 1: level_from_json(d) for i, d in enumerate(levels)})


def load_catalog(path: str) -> LevelCatalog:
    with open(path, "r", encoding="utf-8") as f:
        return catalog_from_json(json.load(f))


def snapshot_to_json(snapshot: FrameSnapshot) -> dict[str, Any]:
    """
    Convert a FrameSnapshot to JSON-compatible types.
    
    Only bricks still in play are exported.
    """
    data = dataclasses.asdict(snapshot)
    data["transition"]["opacities"] = dict(snapshot.transition.opacities)
    data["bricks"] = [b for b in data["bricks"] if b["visible"]]
    return data
