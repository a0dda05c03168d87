"""
Secret room attachment.

Each slot samples ONE host among the placed combat rooms and tries the four
cardinal offsets from the host's grid position. The first offset whose tile
is free and whose Secret footprint fits becomes the secret room. If the host
has no free side the slot is skipped; other hosts are not tried.
"""

import logging
import random

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import (
    COMBAT_TYPES,
    Cardinal,
    DungeonGraph,
    RoomType,
    TileMap,
)

logger = logging.getLogger(__name__)

SECRET_DIRECTIONS = (Cardinal.EAST, Cardinal.WEST, Cardinal.NORTH, Cardinal.SOUTH)


def attach_secret_rooms(
    graph: DungeonGraph,
    tile_map: TileMap,
    config: GenerationConfig,
    rng: random.Random,
) -> int:
    """
    Create up to ``config.secret_room_count`` Secret rooms.

    Returns:
        Number of secret rooms actually attached
    """
    attached = 0
    secret_size = config.footprint(RoomType.SECRET)

    for slot in range(config.secret_room_count):
        candidates = [room for room in graph if room.room_type in COMBAT_TYPES and room.is_placed]
        if not candidates:
            logger.debug(f"Secret slot {slot}: no combat room to host it")
            continue

        rng.shuffle(candidates)
        host = candidates[0]

        for direction in SECRET_DIRECTIONS:
            origin = direction.step(host.grid_position)
            if origin in tile_map or not tile_map.can_place(origin, secret_size):
                continue

            secret = graph.add_room(RoomType.SECRET, depth=host.depth)
            graph.connect(host.id, secret.id)
            tile_map.reserve(secret, origin, secret_size)
            attached += 1
            logger.debug(f"Secret room {secret.id} attached {direction.name} of room {host.id} at {origin}")
            break
        else:
            logger.debug(f"Secret slot {slot}: host room {host.id} has no free side, skipped")

    if attached < config.secret_room_count:
        logger.info(f"Attached {attached}/{config.secret_room_count} secret rooms")
    return attached
