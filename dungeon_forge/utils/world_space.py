"""
Grid -> world-space conversion for the world-building side.

The spawner works in world units with Y up; the grid is (x, y) on the floor
plane, so grid y maps to world z. All functions return numpy float arrays
of shape (3,).
"""

import numpy as np

from dungeon_forge.constants.room_constants import (
    DEFAULT_FLOOR_HEIGHT,
    DEFAULT_ROOM_SIZE,
    WALL_YAW_DEGREES,
)
from dungeon_forge.core.definitions import Cardinal, RoomNode, Tile


def tile_world_position(
    tile: Tile,
    room_size: float = DEFAULT_ROOM_SIZE,
    floor: int = 0,
    floor_height: float = DEFAULT_FLOOR_HEIGHT,
) -> np.ndarray:
    """World position of a tile's centre."""
    return np.array([tile[0] * room_size, floor * floor_height, tile[1] * room_size], dtype=np.float64)


def room_world_center(
    room: RoomNode,
    room_size: float = DEFAULT_ROOM_SIZE,
    floor: int = 0,
    floor_height: float = DEFAULT_FLOOR_HEIGHT,
) -> np.ndarray:
    """World centre of a room's whole footprint."""
    offset = (np.asarray(room.size, dtype=np.float64) - 1.0) * 0.5
    grid = np.asarray(room.grid_position, dtype=np.float64) + offset
    return np.array([grid[0] * room_size, floor * floor_height, grid[1] * room_size], dtype=np.float64)


def wall_world_position(
    tile: Tile,
    direction: Cardinal,
    room_size: float = DEFAULT_ROOM_SIZE,
    vertical_offset: float = 0.0,
    floor: int = 0,
    floor_height: float = DEFAULT_FLOOR_HEIGHT,
) -> np.ndarray:
    """World position of the wall on ``direction``'s edge of ``tile``."""
    base = tile_world_position(tile, room_size, floor, floor_height)
    base[1] += vertical_offset
    dx, dy = direction.offset
    return base + np.array([dx, 0.0, dy], dtype=np.float64) * (room_size * 0.5)


def wall_yaw_degrees(direction: Cardinal) -> float:
    """Rotation about the up axis for a wall on ``direction``'s edge."""
    return WALL_YAW_DEGREES[direction.name]
