"""
Dungeon Validator
=================

Global acceptance checks for one generation attempt.

Components:
1. validate_dungeon: the accept/reject gate used by the retry driver
     - a Boss room exists
     - a Start room exists
     - Boss depth >= minimum_boss_depth
     - Boss reachable from Start (BFS over all connections, locked included)
2. check_invariants: structural invariants every accepted dungeon holds
   (used by tests and as a post-acceptance sanity sweep)

Reachability is pure graph reachability; spatial placement plays no part.
"""

import logging
from collections import deque
from typing import List, Optional, Set, Tuple

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import DungeonGraph, RoomType, TileMap

logger = logging.getLogger(__name__)


# ============================================================================
# REACHABILITY
# ============================================================================

def reachable_rooms(graph: DungeonGraph, start_id: int) -> Set[int]:
    """Ids of all rooms reachable from ``start_id`` by BFS over connections."""
    visited = {start_id}
    queue = deque([start_id])

    while queue:
        current = graph[queue.popleft()]
        for conn in current.connections:
            if conn.target not in visited:
                visited.add(conn.target)
                queue.append(conn.target)

    return visited


def is_boss_reachable(graph: DungeonGraph) -> bool:
    start = graph.start_room()
    boss = graph.boss_room()
    if start is None or boss is None:
        return False
    return boss.id in reachable_rooms(graph, start.id)


# ============================================================================
# ACCEPTANCE GATE
# ============================================================================

def validate_dungeon(graph: DungeonGraph, config: GenerationConfig) -> Tuple[bool, List[str]]:
    """
    Decide whether an attempt is playable.

    Returns:
        (is_valid, errors) - errors is empty when valid
    """
    errors: List[str] = []

    boss = graph.boss_room()
    if boss is None:
        errors.append("No boss room")
        return False, errors

    if graph.start_room() is None:
        errors.append("No start room")
        return False, errors

    if boss.depth < config.minimum_boss_depth:
        logger.info("Boss too close. Regenerating...")
        errors.append(f"Boss depth {boss.depth} below minimum {config.minimum_boss_depth}")

    if not is_boss_reachable(graph):
        logger.info("Boss unreachable. Regenerating...")
        errors.append(f"Boss room {boss.id} unreachable from start")

    return len(errors) == 0, errors


# ============================================================================
# STRUCTURAL INVARIANTS
# ============================================================================

def check_invariants(graph: DungeonGraph, tile_map: Optional[TileMap] = None) -> Tuple[bool, List[str]]:
    """
    Verify the structural invariants of a finished dungeon.

    Checks:
        - ids are dense arena indices
        - exactly one Start, at depth 0
        - exactly one Boss, at the maximum depth
        - every connection is mirrored with the same lock flag
        - occupied tiles of different rooms never intersect
        - the tile map (if given) agrees with each room's occupied tiles

    Returns:
        (is_valid, errors)
    """
    errors: List[str] = []

    for index, room in enumerate(graph):
        if room.id != index:
            errors.append(f"Room at index {index} has id {room.id}")

    starts = graph.rooms_of_type(RoomType.START)
    if len(starts) != 1:
        errors.append(f"Expected exactly one start room, found {len(starts)}")
    elif starts[0].depth != 0:
        errors.append(f"Start room depth is {starts[0].depth}, expected 0")

    bosses = graph.rooms_of_type(RoomType.BOSS)
    if len(bosses) != 1:
        errors.append(f"Expected exactly one boss room, found {len(bosses)}")
    elif bosses[0].depth != graph.max_depth():
        errors.append(f"Boss depth {bosses[0].depth} is not the maximum depth {graph.max_depth()}")

    for room in graph:
        for conn in room.connections:
            if not 0 <= conn.target < len(graph):
                errors.append(f"Room {room.id} connects to missing room {conn.target}")
                continue
            mirror = graph[conn.target].connection_to(room.id)
            if mirror is None:
                errors.append(f"Connection {room.id}->{conn.target} has no mirror")
            elif mirror.is_locked != conn.is_locked:
                errors.append(f"Lock flags disagree on edge {room.id}<->{conn.target}")

    owners = {}
    for room in graph:
        for tile in room.occupied_tiles:
            if tile in owners and owners[tile] != room.id:
                errors.append(f"Tile {tile} claimed by rooms {owners[tile]} and {room.id}")
            owners[tile] = room.id

    if tile_map is not None:
        for tile, room_id in owners.items():
            if tile_map.owner(tile) != room_id:
                errors.append(f"Tile map disagrees with room {room_id} at {tile}")
        if len(tile_map) != len(owners):
            errors.append(f"Tile map holds {len(tile_map)} tiles, rooms hold {len(owners)}")

    return len(errors) == 0, errors
