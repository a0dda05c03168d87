"""
Dungeon Forge Core Module
=========================

Data model and configuration shared by every stage.

Components:
- definitions: RoomType, Cardinal, RoomNode, DungeonGraph, TileMap
- config: GenerationConfig and the footprint database
- errors: ConfigurationError, ExhaustedAttemptsError
"""

from dungeon_forge.core.definitions import (
    COMBAT_TYPES,
    Cardinal,
    ConnectionType,
    DungeonGraph,
    RoomConnection,
    RoomNode,
    RoomType,
    TileMap,
)
from dungeon_forge.core.errors import (
    ConfigurationError,
    DungeonForgeError,
    ExhaustedAttemptsError,
)
from dungeon_forge.core.config import GenerationConfig

__all__ = [
    'COMBAT_TYPES',
    'Cardinal',
    'ConnectionType',
    'DungeonGraph',
    'RoomConnection',
    'RoomNode',
    'RoomType',
    'TileMap',
    'ConfigurationError',
    'DungeonForgeError',
    'ExhaustedAttemptsError',
    'GenerationConfig',
]
