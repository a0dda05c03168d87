"""
Lock assignment for dead ends.

A dead end (exactly one connection) other than Start or Boss is locked with
probability lock_chance: both sides of its only connection get
is_locked = True and the room becomes TREASURE (locked loot).
"""

import logging
import random
from typing import List

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import DungeonGraph, RoomType

logger = logging.getLogger(__name__)


def apply_locks(graph: DungeonGraph, config: GenerationConfig, rng: random.Random) -> List[int]:
    """
    Lock dead-end connections in place.

    Returns:
        Ids of the rooms that were locked
    """
    locked = []

    for room in graph:
        if not room.is_dead_end:
            continue
        if room.room_type in (RoomType.START, RoomType.BOSS):
            continue

        if rng.random() < config.lock_chance:
            parent_id = room.connections[0].target
            graph.set_locked(room.id, parent_id, True)
            room.room_type = RoomType.TREASURE
            locked.append(room.id)

    if locked:
        logger.debug(f"Locked dead ends: {locked}")
    return locked
