"""
Room type assignment by degree and normalized depth.

Two checks run on every room other than Start and Boss, in this order:

1. Dead end while the treasure cap allows -> TREASURE (counts toward the cap)
2. Depth bucket, d = depth / max_depth:
     dead end and d > 0.3  -> TREASURE
     d > 0.6               -> COMBAT (p=0.8) or SHOP
     otherwise             -> COMBAT

The second check always writes, so the type from the first check only
survives when the bucket agrees. This ordering is kept as-is.
"""

import logging
import random

from dungeon_forge.constants.room_constants import (
    DEEP_COMBAT_PROBABILITY,
    SHOP_DEPTH_THRESHOLD,
    TREASURE_DEPTH_THRESHOLD,
    TREASURE_ROOM_DIVISOR,
)
from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import DungeonGraph, RoomType

logger = logging.getLogger(__name__)


def assign_room_types(graph: DungeonGraph, config: GenerationConfig, rng: random.Random) -> None:
    """Relabel every room except Start and Boss in place."""
    treasure_count = 0
    max_treasure_rooms = max(1, config.max_rooms // TREASURE_ROOM_DIVISOR)

    start = graph.start_room()
    boss = graph.boss_room()
    max_depth = graph.max_depth()

    for room in graph:
        if room is start or room is boss:
            continue

        if room.is_dead_end and treasure_count < max_treasure_rooms:
            room.room_type = RoomType.TREASURE
            treasure_count += 1

        depth01 = room.depth / max_depth if max_depth > 0 else 0.0

        if room.is_dead_end and depth01 > TREASURE_DEPTH_THRESHOLD:
            room.room_type = RoomType.TREASURE
        elif depth01 > SHOP_DEPTH_THRESHOLD:
            room.room_type = RoomType.COMBAT if rng.random() < DEEP_COMBAT_PROBABILITY else RoomType.SHOP
        else:
            room.room_type = RoomType.COMBAT

    logger.debug(
        "Assigned room types: "
        + ", ".join(f"{t.name.lower()}={len(graph.rooms_of_type(t))}" for t in RoomType if graph.rooms_of_type(t))
    )
