"""
Spatial Layout Placer
=====================

Packs graph rooms onto an integer grid so that no two footprints overlap.

Algorithm (breadth-first over the graph):
1. Reserve Start's footprint at the grid origin and enqueue it
2. For each dequeued room, for each unplaced neighbour:
     - shuffle the four cardinal directions
     - compute the neighbour's origin flush against the current room's
       footprint on that side
     - take the first origin whose whole rectangle is free
3. A neighbour with no free side gets placement_attempts += 1 and is
   requeued; when dequeued again it retries against every placed graph
   neighbour. At MAX_PLACEMENT_ATTEMPTS it is dropped with a warning.

Dropped rooms stay in the graph; they simply own no tiles. Nothing here
raises, a packing failure is local to the room.
"""

import logging
import random
from collections import deque
from typing import Deque, List

from dungeon_forge.constants.room_constants import GRID_ORIGIN, MAX_PLACEMENT_ATTEMPTS
from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import (
    Cardinal,
    DungeonGraph,
    Footprint,
    RoomNode,
    Tile,
    TileMap,
)

logger = logging.getLogger(__name__)

# Order before shuffling; shuffles are seeded so the base order matters
LAYOUT_DIRECTIONS = (Cardinal.EAST, Cardinal.WEST, Cardinal.NORTH, Cardinal.SOUTH)


def candidate_origin(
    anchor_origin: Tile,
    anchor_size: Footprint,
    size: Footprint,
    direction: Cardinal,
) -> Tile:
    """
    Origin for a room of ``size`` placed flush against the anchor's side.

    EAST/NORTH offset by the anchor's extent, WEST/SOUTH by the new
    room's own extent, so both rectangles share an edge and align on
    their lower-left corner along the shared axis.
    """
    x, y = anchor_origin
    if direction == Cardinal.EAST:
        return (x + anchor_size[0], y)
    if direction == Cardinal.WEST:
        return (x - size[0], y)
    if direction == Cardinal.NORTH:
        return (x, y + anchor_size[1])
    return (x, y - size[1])


def layout_rooms(graph: DungeonGraph, config: GenerationConfig, rng: random.Random) -> TileMap:
    """
    Assign grid_position / size / occupied_tiles to as many rooms as fit.

    Returns:
        The attempt's TileMap
    """
    tile_map = TileMap()
    if len(graph) == 0:
        return tile_map

    # Start can be missing when a one-room graph promoted it to Boss
    start = graph.start_room() or graph[0]
    tile_map.reserve(start, GRID_ORIGIN, config.footprint(start.room_type))

    queue: Deque[int] = deque([start.id])

    while queue:
        current = graph[queue.popleft()]

        if not current.is_placed:
            # Requeued after a failure: retry against any placed neighbour
            anchors = [graph[n] for n in current.neighbor_ids() if graph[n].is_placed]
            if not _place_next_to_any(current, anchors, tile_map, config, rng):
                _register_failure(current, queue)
                continue

        for conn in current.connections:
            neighbor = graph[conn.target]
            if neighbor.is_placed or neighbor.placement_attempts >= MAX_PLACEMENT_ATTEMPTS:
                continue

            if _place_next_to(neighbor, current, tile_map, config, rng):
                queue.append(neighbor.id)
            else:
                _register_failure(neighbor, queue)

    _report_unplaced(graph)
    return tile_map


def _place_next_to(
    room: RoomNode,
    anchor: RoomNode,
    tile_map: TileMap,
    config: GenerationConfig,
    rng: random.Random,
) -> bool:
    size = config.footprint(room.room_type)
    directions = list(LAYOUT_DIRECTIONS)
    rng.shuffle(directions)

    for direction in directions:
        origin = candidate_origin(anchor.grid_position, anchor.size, size, direction)
        if tile_map.can_place(origin, size):
            tile_map.reserve(room, origin, size)
            logger.debug(f"Placed room {room.id} {direction.name} of room {anchor.id} at {origin}")
            return True
    return False


def _place_next_to_any(
    room: RoomNode,
    anchors: List[RoomNode],
    tile_map: TileMap,
    config: GenerationConfig,
    rng: random.Random,
) -> bool:
    for anchor in anchors:
        if _place_next_to(room, anchor, tile_map, config, rng):
            return True
    return False


def _register_failure(room: RoomNode, queue: Deque[int]) -> None:
    room.placement_attempts += 1
    if room.placement_attempts < MAX_PLACEMENT_ATTEMPTS:
        queue.append(room.id)
    else:
        logger.warning(f"Failed to place room {room.id} after {MAX_PLACEMENT_ATTEMPTS} attempts.")


def _report_unplaced(graph: DungeonGraph) -> None:
    unplaced = graph.unplaced_rooms()
    if not unplaced:
        logger.debug(f"Placed all {len(graph)} rooms")
        return

    # Rooms behind a dropped room never got an anchor of their own
    unreached = [room.id for room in unplaced if room.placement_attempts < MAX_PLACEMENT_ATTEMPTS]
    if unreached:
        logger.warning(f"Rooms left unplaced behind a failed placement: {unreached}")
    logger.info(f"Placed {len(graph) - len(unplaced)}/{len(graph)} rooms")
