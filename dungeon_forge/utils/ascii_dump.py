"""
Text dump of a tile map for debugging and the CLI.

One character per tile, north (larger y) at the top:
    S start, B boss, T treasure, $ shop, ? secret, C combat/normal,
    . empty, u undefined
"""

from typing import Dict

import numpy as np

from dungeon_forge.core.definitions import DungeonGraph, RoomType, TileMap

ROOM_CHARS: Dict[RoomType, str] = {
    RoomType.START: 'S',
    RoomType.BOSS: 'B',
    RoomType.TREASURE: 'T',
    RoomType.SHOP: '$',
    RoomType.SECRET: '?',
    RoomType.COMBAT: 'C',
    RoomType.NORMAL: 'C',
    RoomType.UNDEFINED: 'u',
}

EMPTY_CHAR = '.'


def render_ascii(graph: DungeonGraph, tile_map: TileMap) -> str:
    grid, _ = tile_map.to_grid()
    if grid.size == 0:
        return ""

    lookup = np.array([ROOM_CHARS[room.room_type] for room in graph] + [EMPTY_CHAR])
    # -1 (empty) indexes the trailing EMPTY_CHAR
    chars = lookup[grid]
    return "\n".join("".join(row) for row in chars[::-1])
