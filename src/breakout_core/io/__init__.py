# MIT License (see LICENSE)
"""
Input/Output utilities.

This subpackage provides:
    - JSON configuration: load and save GameConfig.
    - JSON level catalogs: levels described by shape and pattern name.
    - Snapshot export: FrameSnapshot as plain JSON data.

Typical usage:
    from breakout_core.io import load_config, snapshot_to_json
    
    config = load_config("game.json")
    session = GameSession(config)
    frame = snapshot_to_json(session.snapshot())
"""
from .json_io import (
    config_to_json,
    config_from_json,
    load_config,
    save_config,
    level_from_json,
    catalog_from_json,
    load_catalog,
    snapshot_to_json,
)

__all__ = [
    # Config
    "config_to_json",
    "config_from_json",
    "load_config",
    "save_config",
    # Levels
    "level_from_json",
    "catalog_from_json",
    "load_catalog",
    # Snapshots
    "snapshot_to_json",
]
