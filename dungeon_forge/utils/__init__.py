"""
Utility Module for Dungeon Forge
================================

Components:
    - Graph utilities: networkx export and structural queries
    - World space: grid -> world conversions for spawners
    - ASCII dump: text map for debugging
"""

from .graph_utils import (
    count_loops,
    critical_path,
    dead_ends,
    depth_histogram,
    to_networkx,
)
from .world_space import (
    room_world_center,
    tile_world_position,
    wall_world_position,
    wall_yaw_degrees,
)
from .ascii_dump import render_ascii

__all__ = [
    'count_loops',
    'critical_path',
    'dead_ends',
    'depth_histogram',
    'to_networkx',
    'room_world_center',
    'tile_world_position',
    'wall_world_position',
    'wall_yaw_degrees',
    'render_ascii',
]
