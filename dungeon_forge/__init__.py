"""
Dungeon Forge
=============

Seeded procedural dungeon structure: a typed room graph, a non-overlapping
grid packing of its rooms, lock gates, and the wall/door boundary derived
from both, with whole-pipeline validate-and-retry.

Submodules:
- core: data model (rooms, graph, tile map), config, errors
- generation: the pipeline stages (graph, types, layout, secrets, loops,
  locks, boundaries)
- evaluation: acceptance validator and layout metrics
- pipeline: retry driver
- utils: networkx bridge, world-space helpers, text dump

Usage:
    from dungeon_forge import GenerationConfig, generate_dungeon

    dungeon = generate_dungeon(GenerationConfig(seed=42, minimum_boss_depth=4))
    print(dungeon.graph.boss_room().depth)
"""

__version__ = "1.0.0"

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import (
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
from dungeon_forge.pipeline.generation_pipeline import (
    DungeonGenerationPipeline,
    GeneratedDungeon,
    generate_attempt,
    generate_dungeon,
)

__all__ = [
    'GenerationConfig',
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
    'DungeonGenerationPipeline',
    'GeneratedDungeon',
    'generate_attempt',
    'generate_dungeon',
]
