"""
Layout Metrics
==============
Summary statistics of a generated dungeon for logging, the CLI and tests.

Metrics:
    - Room counts per type, placed vs unplaced
    - Grid footprint: bounding box, fill ratio of the occupancy grid
    - Topology: edges, loops, locked edges, dead ends, critical path length
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np

from dungeon_forge.core.definitions import DungeonGraph, RoomType, TileMap
from dungeon_forge.utils.graph_utils import count_loops, critical_path, dead_ends

logger = logging.getLogger(__name__)


@dataclass
class LayoutMetrics:
    """Structural and spatial statistics of one dungeon."""
    num_rooms: int
    placed_rooms: int
    room_types: Dict[str, int] = field(default_factory=dict)
    num_edges: int = 0
    locked_edges: int = 0
    loops: int = 0
    dead_ends: int = 0
    max_depth: int = 0
    critical_path_length: int = 0
    grid_shape: Tuple[int, int] = (0, 0)  # (rows, cols) of the bounding box
    fill_ratio: float = 0.0  # Reserved tiles / bounding-box tiles

    def to_dict(self) -> Dict:
        return {
            'num_rooms': self.num_rooms,
            'placed_rooms': self.placed_rooms,
            'room_types': dict(self.room_types),
            'num_edges': self.num_edges,
            'locked_edges': self.locked_edges,
            'loops': self.loops,
            'dead_ends': self.dead_ends,
            'max_depth': self.max_depth,
            'critical_path_length': self.critical_path_length,
            'grid_shape': list(self.grid_shape),
            'fill_ratio': round(self.fill_ratio, 4),
        }


def compute_layout_metrics(graph: DungeonGraph, tile_map: TileMap) -> LayoutMetrics:
    """Compute LayoutMetrics for a finished (or rejected) attempt."""
    edges = graph.edge_list()
    grid, _ = tile_map.to_grid()

    fill_ratio = float(np.count_nonzero(grid >= 0)) / grid.size if grid.size else 0.0

    room_types = {
        room_type.name.lower(): len(graph.rooms_of_type(room_type))
        for room_type in RoomType
        if graph.rooms_of_type(room_type)
    }

    path = critical_path(graph)

    metrics = LayoutMetrics(
        num_rooms=len(graph),
        placed_rooms=len(graph.placed_rooms()),
        room_types=room_types,
        num_edges=len(edges),
        locked_edges=sum(1 for _, _, locked in edges if locked),
        loops=count_loops(graph),
        dead_ends=len(dead_ends(graph)),
        max_depth=graph.max_depth(),
        critical_path_length=max(len(path) - 1, 0),
        grid_shape=(int(grid.shape[0]), int(grid.shape[1])),
        fill_ratio=fill_ratio,
    )
    logger.debug(f"Layout metrics: {metrics.to_dict()}")
    return metrics
