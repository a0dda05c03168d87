"""
Loop generation: extra edges between rooms that touch on the grid.

Every 4-neighbour tile pair owned by two different, not yet connected rooms
is a loop candidate. Each candidate draws once from the attempt RNG and
becomes an edge when the draw is below loop_chance, unless either room is
the Boss. Tiles are never moved or removed here.
"""

import logging
import random

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import Cardinal, DungeonGraph, RoomType, TileMap

logger = logging.getLogger(__name__)

LOOP_DIRECTIONS = (Cardinal.EAST, Cardinal.WEST, Cardinal.NORTH, Cardinal.SOUTH)


def add_loops(
    graph: DungeonGraph,
    tile_map: TileMap,
    config: GenerationConfig,
    rng: random.Random,
) -> int:
    """
    Add loop edges in place.

    Returns:
        Number of loop edges added
    """
    added = 0

    for room in graph:
        for tile in room.occupied_tiles:
            for direction in LOOP_DIRECTIONS:
                neighbor_id = tile_map.owner(direction.step(tile))
                if neighbor_id is None or neighbor_id == room.id:
                    continue
                if room.is_connected_to(neighbor_id):
                    continue

                neighbor = graph[neighbor_id]
                if (rng.random() < config.loop_chance
                        and room.room_type != RoomType.BOSS
                        and neighbor.room_type != RoomType.BOSS):
                    graph.connect(room.id, neighbor_id)
                    added += 1
                    logger.debug(f"Loop edge {room.id} <-> {neighbor_id}")

    logger.debug(f"Added {added} loop edges")
    return added
