"""
DUNGEON FORGE DEFINITIONS
=========================
Central type definitions for the room graph and its tile reservations.

This file is the SINGLE SOURCE OF TRUTH for:
- Room types and connection types
- Cardinal directions and their grid offsets
- RoomNode / RoomConnection / DungeonGraph (the per-attempt arena)
- TileMap (tile -> room reservations)

Rooms reference each other by integer id (index into DungeonGraph.rooms),
never by object, so a whole attempt is discarded by dropping the graph.

"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Tile = Tuple[int, int]
Footprint = Tuple[int, int]


# ==========================================
# ENUMS
# ==========================================

class RoomType(Enum):
    """Gameplay role of a room."""
    UNDEFINED = auto()  # Built but not yet typed
    START = auto()
    NORMAL = auto()
    COMBAT = auto()
    BOSS = auto()
    TREASURE = auto()
    SHOP = auto()
    SECRET = auto()

    @classmethod
    def from_name(cls, name: str) -> 'RoomType':
        """Parse a case-insensitive type name ('boss', 'Boss', 'BOSS')."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown room type: {name!r}") from None


# Rooms the secret attacher may use as hosts
COMBAT_TYPES = frozenset({RoomType.COMBAT, RoomType.NORMAL})


class ConnectionType(Enum):
    """Physical form of a connection."""
    DOOR = auto()


class Cardinal(Enum):
    """Grid directions on the (x, y) plane; NORTH is +y."""
    NORTH = (0, 1)
    SOUTH = (0, -1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def offset(self) -> Tile:
        return self.value

    def step(self, tile: Tile) -> Tile:
        """Return the neighbouring tile in this direction."""
        return (tile[0] + self.value[0], tile[1] + self.value[1])


# ==========================================
# GRAPH DATA STRUCTURES
# ==========================================

@dataclass
class RoomConnection:
    """One side of an undirected room-to-room edge."""
    target: int
    connection_type: ConnectionType = ConnectionType.DOOR
    is_locked: bool = False


@dataclass
class RoomNode:
    """Node in the dungeon graph; gets a footprint once placed."""
    id: int
    room_type: RoomType = RoomType.UNDEFINED
    depth: int = 0
    grid_position: Tile = (0, 0)
    size: Footprint = (1, 1)
    occupied_tiles: List[Tile] = field(default_factory=list)
    connections: List[RoomConnection] = field(default_factory=list)
    placement_attempts: int = 0

    @property
    def is_placed(self) -> bool:
        return len(self.occupied_tiles) > 0

    @property
    def is_dead_end(self) -> bool:
        return len(self.connections) == 1

    def connection_to(self, other_id: int) -> Optional[RoomConnection]:
        for conn in self.connections:
            if conn.target == other_id:
                return conn
        return None

    def is_connected_to(self, other_id: int) -> bool:
        return self.connection_to(other_id) is not None

    def neighbor_ids(self) -> List[int]:
        return [conn.target for conn in self.connections]


class DungeonGraph:
    """
    Arena of RoomNodes for one generation attempt.

    Ids are dense: room ``i`` lives at ``rooms[i]``.
    """

    def __init__(self):
        self.rooms: List[RoomNode] = []

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[RoomNode]:
        return iter(self.rooms)

    def __getitem__(self, room_id: int) -> RoomNode:
        return self.rooms[room_id]

    def add_room(
        self,
        room_type: RoomType = RoomType.UNDEFINED,
        depth: int = 0,
    ) -> RoomNode:
        """Create a room with the next free id and append it to the arena."""
        room = RoomNode(id=len(self.rooms), room_type=room_type, depth=depth)
        self.rooms.append(room)
        return room

    def connect(
        self,
        a: int,
        b: int,
        connection_type: ConnectionType = ConnectionType.DOOR,
    ) -> None:
        """Add a mirrored pair of connections between rooms ``a`` and ``b``."""
        if a == b:
            raise ValueError(f"Cannot connect room {a} to itself")
        self.rooms[a].connections.append(RoomConnection(target=b, connection_type=connection_type))
        self.rooms[b].connections.append(RoomConnection(target=a, connection_type=connection_type))

    def set_locked(self, a: int, b: int, locked: bool = True) -> None:
        """Set the lock flag on both sides of the a-b edge."""
        for src, dst in ((a, b), (b, a)):
            conn = self.rooms[src].connection_to(dst)
            if conn is not None:
                conn.is_locked = locked

    def start_room(self) -> Optional[RoomNode]:
        for room in self.rooms:
            if room.room_type == RoomType.START:
                return room
        return None

    def boss_room(self) -> Optional[RoomNode]:
        for room in self.rooms:
            if room.room_type == RoomType.BOSS:
                return room
        return None

    def deepest_room(self) -> Optional[RoomNode]:
        """First room (lowest id) holding the maximum depth."""
        deepest = None
        for room in self.rooms:
            if deepest is None or room.depth > deepest.depth:
                deepest = room
        return deepest

    def max_depth(self) -> int:
        return max((room.depth for room in self.rooms), default=0)

    def rooms_of_type(self, *room_types: RoomType) -> List[RoomNode]:
        return [room for room in self.rooms if room.room_type in room_types]

    def edge_list(self) -> List[Tuple[int, int, bool]]:
        """Undirected edges as (a, b, is_locked) with a < b."""
        edges = []
        for room in self.rooms:
            for conn in room.connections:
                if room.id < conn.target:
                    edges.append((room.id, conn.target, conn.is_locked))
        return edges

    def placed_rooms(self) -> List[RoomNode]:
        return [room for room in self.rooms if room.is_placed]

    def unplaced_rooms(self) -> List[RoomNode]:
        return [room for room in self.rooms if not room.is_placed]


# ==========================================
# TILE RESERVATIONS
# ==========================================

class TileMap:
    """Tile -> room id reservations for one attempt."""

    def __init__(self):
        self._owners: Dict[Tile, int] = {}

    def __contains__(self, tile: Tile) -> bool:
        return tile in self._owners

    def __len__(self) -> int:
        return len(self._owners)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._owners)

    def owner(self, tile: Tile) -> Optional[int]:
        return self._owners.get(tile)

    def items(self):
        return self._owners.items()

    def can_place(self, origin: Tile, size: Footprint) -> bool:
        """True if every tile of the rectangle at ``origin`` is free."""
        ox, oy = origin
        for x in range(size[0]):
            for y in range(size[1]):
                if (ox + x, oy + y) in self._owners:
                    return False
        return True

    def reserve(self, room: RoomNode, origin: Tile, size: Footprint) -> None:
        """Claim the rectangle for ``room`` and record its placement on the node."""
        room.occupied_tiles = []
        room.grid_position = origin
        room.size = size
        ox, oy = origin
        for x in range(size[0]):
            for y in range(size[1]):
                tile = (ox + x, oy + y)
                room.occupied_tiles.append(tile)
                self._owners[tile] = room.id

    def bounds(self) -> Optional[Tuple[Tile, Tile]]:
        """((min_x, min_y), (max_x, max_y)) of all reserved tiles."""
        if not self._owners:
            return None
        xs = [t[0] for t in self._owners]
        ys = [t[1] for t in self._owners]
        return (min(xs), min(ys)), (max(xs), max(ys))

    def to_grid(self) -> Tuple[np.ndarray, Tile]:
        """
        Dense occupancy grid.

        Returns:
            (grid, origin) where ``grid[y - origin_y, x - origin_x]`` holds
            the owning room id or -1, and ``origin`` is the (min_x, min_y)
            tile. An empty map yields a (0, 0) grid at (0, 0).
        """
        extent = self.bounds()
        if extent is None:
            return np.full((0, 0), -1, dtype=np.int64), (0, 0)
        (min_x, min_y), (max_x, max_y) = extent
        grid = np.full((max_y - min_y + 1, max_x - min_x + 1), -1, dtype=np.int64)
        for (x, y), room_id in self._owners.items():
            grid[y - min_y, x - min_x] = room_id
        return grid, (min_x, min_y)
