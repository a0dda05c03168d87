"""
Dungeon Graph Utilities
=======================

NetworkX bridge and structural queries over a DungeonGraph.

This module provides:
- Export of the arena graph to an undirected nx.Graph
- Loop (independent cycle) counting
- Dead-end and depth queries
- Critical path (Start -> Boss) extraction

Usage:
    import networkx as nx
    from dungeon_forge.utils.graph_utils import to_networkx, count_loops

    G = to_networkx(dungeon.graph)
    if count_loops(dungeon.graph) == 0:
        assert nx.is_tree(G)
"""

import logging
from typing import Dict, Iterable, List, Optional

import networkx as nx

from dungeon_forge.core.definitions import DungeonGraph, RoomType

logger = logging.getLogger(__name__)


# ==========================================
# EXPORT
# ==========================================

def to_networkx(
    graph: DungeonGraph,
    exclude_types: Optional[Iterable[RoomType]] = None,
) -> nx.Graph:
    """
    Convert a DungeonGraph to an undirected NetworkX graph.

    Node attributes: room_type (RoomType), depth, grid_position, size, placed.
    Edge attributes: is_locked.

    Args:
        graph: Source graph
        exclude_types: Room types to leave out, together with their edges

    Example:
        >>> g = DungeonGraph()
        >>> a = g.add_room(RoomType.START)
        >>> b = g.add_room(RoomType.BOSS, depth=1)
        >>> g.connect(a.id, b.id)
        >>> to_networkx(g).number_of_edges()
        1
    """
    excluded = set(exclude_types or ())
    G = nx.Graph()

    for room in graph:
        if room.room_type in excluded:
            continue
        G.add_node(
            room.id,
            room_type=room.room_type,
            depth=room.depth,
            grid_position=room.grid_position,
            size=room.size,
            placed=room.is_placed,
        )

    for a, b, is_locked in graph.edge_list():
        if a in G and b in G:
            G.add_edge(a, b, is_locked=is_locked)

    return G


# ==========================================
# STRUCTURE QUERIES
# ==========================================

def count_loops(graph: DungeonGraph, exclude_types: Optional[Iterable[RoomType]] = None) -> int:
    """
    Number of independent cycles (edges - nodes + components).

    Zero means the (filtered) graph is a forest.
    """
    G = to_networkx(graph, exclude_types)
    if G.number_of_nodes() == 0:
        return 0
    return G.number_of_edges() - G.number_of_nodes() + nx.number_connected_components(G)


def dead_ends(graph: DungeonGraph) -> List[int]:
    """Ids of rooms with exactly one connection."""
    return [room.id for room in graph if room.is_dead_end]


def critical_path(graph: DungeonGraph) -> List[int]:
    """Shortest Start -> Boss room sequence, empty if either is missing or unreachable."""
    start = graph.start_room()
    boss = graph.boss_room()
    if start is None or boss is None:
        return []

    G = to_networkx(graph)
    try:
        return nx.shortest_path(G, start.id, boss.id)
    except nx.NetworkXNoPath:
        logger.debug(f"No path from start {start.id} to boss {boss.id}")
        return []


def depth_histogram(graph: DungeonGraph) -> Dict[int, int]:
    """depth -> number of rooms at that depth."""
    histogram: Dict[int, int] = {}
    for room in graph:
        histogram[room.depth] = histogram.get(room.depth, 0) + 1
    return dict(sorted(histogram.items()))
