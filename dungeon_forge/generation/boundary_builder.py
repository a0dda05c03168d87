"""
Boundary Builder / Door Resolver
Turns the final placement and graph into per-tile-edge walls and doors.

The world-building side must not create passages the graph does not have:
- tile edge facing empty space               -> SOLID wall
- tile edge facing a connected room          -> DOOR-capable wall
- tile edge facing an adjacent, unconnected room -> SOLID wall

Independently, every connection resolves to exactly one door object, found
by scanning the lower-id room's tiles for the first edge that touches the
other room.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple

from dungeon_forge.constants.room_constants import DOOR_THEME_PRIORITY
from dungeon_forge.core.definitions import (
    Cardinal,
    DungeonGraph,
    RoomNode,
    RoomType,
    Tile,
    TileMap,
)

logger = logging.getLogger(__name__)

# Scan order for both wall classification and door resolution
BOUNDARY_DIRECTIONS = (Cardinal.NORTH, Cardinal.SOUTH, Cardinal.EAST, Cardinal.WEST)


class WallKind(Enum):
    """Classification of a single tile edge."""
    SOLID = "solid"
    DOOR = "door"


@dataclass(frozen=True)
class WallSegment:
    """One classified edge of a reserved tile."""
    tile: Tile
    direction: Cardinal
    kind: WallKind
    room_id: int
    neighbor_id: Optional[int]  # None when the edge faces empty space


@dataclass(frozen=True)
class DoorPlacement:
    """The single door object resolved for a connection."""
    room_a: int
    room_b: int
    tile: Tile  # Tile of room_a the door sits on
    direction: Cardinal  # Edge of that tile facing room_b
    is_locked: bool
    theme: RoomType  # Type of the higher-priority endpoint


@dataclass
class BoundaryLayout:
    """Everything the world builder needs to raise walls and doors."""
    walls: List[WallSegment]
    doors: List[DoorPlacement]

    def door_walls(self) -> List[WallSegment]:
        return [w for w in self.walls if w.kind == WallKind.DOOR]

    def solid_walls(self) -> List[WallSegment]:
        return [w for w in self.walls if w.kind == WallKind.SOLID]

    def door_between(self, a: int, b: int) -> Optional[DoorPlacement]:
        lo, hi = min(a, b), max(a, b)
        for door in self.doors:
            if door.room_a == lo and door.room_b == hi:
                return door
        return None


class BoundaryBuilder:
    """
    Classifies tile edges and resolves doors for one finished dungeon.

    Pure with respect to its inputs: it reads the graph and tile map and
    returns new objects, so running it twice yields equal layouts.
    """

    def __init__(self, graph: DungeonGraph, tile_map: TileMap):
        self.graph = graph
        self.tile_map = tile_map

    def build(self) -> BoundaryLayout:
        walls = self._classify_walls()
        doors = self._resolve_doors()
        logger.info(
            f"Boundaries: {sum(1 for w in walls if w.kind == WallKind.SOLID)} solid, "
            f"{sum(1 for w in walls if w.kind == WallKind.DOOR)} door-capable, {len(doors)} doors"
        )
        return BoundaryLayout(walls=walls, doors=doors)

    def _classify_walls(self) -> List[WallSegment]:
        """Seal every tile edge; open only where the graph has an edge."""
        walls = []
        for room in self.graph:
            for tile in room.occupied_tiles:
                if self.tile_map.owner(tile) != room.id:
                    continue
                for direction in BOUNDARY_DIRECTIONS:
                    neighbor_id = self.tile_map.owner(direction.step(tile))
                    if neighbor_id == room.id:
                        continue

                    if neighbor_id is not None and room.is_connected_to(neighbor_id):
                        kind = WallKind.DOOR
                    else:
                        kind = WallKind.SOLID
                    walls.append(WallSegment(tile, direction, kind, room.id, neighbor_id))
        return walls

    def _resolve_doors(self) -> List[DoorPlacement]:
        doors = []
        for room in self.graph:
            for conn in room.connections:
                # One door per connection
                if room.id > conn.target:
                    continue

                other = self.graph[conn.target]
                door_edge = self._find_door_edge(room, other)
                if door_edge is None:
                    logger.warning(f"Could not find door position between {room.id} and {other.id}")
                    continue

                tile, direction = door_edge
                doors.append(DoorPlacement(
                    room_a=room.id,
                    room_b=other.id,
                    tile=tile,
                    direction=direction,
                    is_locked=conn.is_locked,
                    theme=door_theme(room.room_type, other.room_type),
                ))
        return doors

    def _find_door_edge(self, a: RoomNode, b: RoomNode) -> Optional[Tuple[Tile, Cardinal]]:
        for tile in a.occupied_tiles:
            for direction in BOUNDARY_DIRECTIONS:
                if self.tile_map.owner(direction.step(tile)) == b.id:
                    return tile, direction
        return None


def door_theme(a: RoomType, b: RoomType) -> RoomType:
    """Type whose material the door between ``a`` and ``b`` uses; ties go to ``a``."""
    priority_a = DOOR_THEME_PRIORITY.get(a.name, 0)
    priority_b = DOOR_THEME_PRIORITY.get(b.name, 0)
    return a if priority_a >= priority_b else b


def build_boundaries(graph: DungeonGraph, tile_map: TileMap) -> BoundaryLayout:
    """Classify all tile edges and resolve one door per connection."""
    return BoundaryBuilder(graph, tile_map).build()


def verify_topology_match(graph: DungeonGraph, layout: BoundaryLayout) -> bool:
    """
    Check that doors and graph edges agree.

    Every edge between two placed rooms must have a door, and every door
    must correspond to an edge.

    Returns:
        True if topology matches, False otherwise
    """
    expected_edges: Set[Tuple[int, int]] = {
        (a, b) for a, b, _ in graph.edge_list()
        if graph[a].is_placed and graph[b].is_placed
    }
    actual_edges: Set[Tuple[int, int]] = {(d.room_a, d.room_b) for d in layout.doors}

    missing_edges = expected_edges - actual_edges
    phantom_edges = actual_edges - expected_edges

    if missing_edges:
        logger.warning(f"Missing doors for graph edges: {sorted(missing_edges)}")

    if phantom_edges:
        logger.warning(f"Doors without a graph edge: {sorted(phantom_edges)}")

    return not missing_edges and not phantom_edges
