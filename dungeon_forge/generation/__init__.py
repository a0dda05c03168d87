"""
Generation stages, in pipeline order.

    build_room_graph -> assign_room_types -> layout_rooms ->
    attach_secret_rooms -> add_loops -> apply_locks -> build_boundaries
"""

from dungeon_forge.generation.graph_builder import build_room_graph
from dungeon_forge.generation.room_types import assign_room_types
from dungeon_forge.generation.layout_placer import layout_rooms
from dungeon_forge.generation.secret_rooms import attach_secret_rooms
from dungeon_forge.generation.loops import add_loops
from dungeon_forge.generation.locks import apply_locks
from dungeon_forge.generation.boundary_builder import (
    BoundaryLayout,
    DoorPlacement,
    WallKind,
    WallSegment,
    build_boundaries,
)

__all__ = [
    'build_room_graph',
    'assign_room_types',
    'layout_rooms',
    'attach_secret_rooms',
    'add_loops',
    'apply_locks',
    'BoundaryLayout',
    'DoorPlacement',
    'WallKind',
    'WallSegment',
    'build_boundaries',
]
