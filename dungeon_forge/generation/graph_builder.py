"""
Room Graph Builder
==================

Builds the abstract room graph by randomized branching breadth-first
expansion from a single Start room.

Algorithm:
1. Create Start (id 0, depth 0) and seed the frontier with it
2. While the room count is below max_rooms and the frontier is not empty:
     - dequeue a room, draw a branch count in [min_branches, max_branches]
     - create that many children at depth + 1, link each with a Door
3. The first room holding the maximum depth becomes the Boss

A narrow branching range can empty the frontier early; that graph is kept
and left for the validator to judge.
"""

import logging
import random
from collections import deque

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import DungeonGraph, RoomType

logger = logging.getLogger(__name__)


def build_room_graph(config: GenerationConfig, rng: random.Random) -> DungeonGraph:
    """
    Build a tree of rooms rooted at Start.

    Args:
        config: Generation settings (max_rooms, branch bounds)
        rng: Attempt RNG

    Returns:
        A fresh DungeonGraph with Start and Boss typed, every other room
        UNDEFINED.
    """
    graph = DungeonGraph()
    start = graph.add_room(RoomType.START, depth=0)

    frontier = deque([start.id])

    while len(graph) < config.max_rooms and frontier:
        current = graph[frontier.popleft()]
        branches = rng.randint(config.min_branches, config.max_branches)

        for _ in range(branches):
            if len(graph) >= config.max_rooms:
                break
            child = graph.add_room(RoomType.UNDEFINED, depth=current.depth + 1)
            graph.connect(current.id, child.id)
            frontier.append(child.id)

    if len(graph) < config.max_rooms:
        logger.debug(f"Frontier emptied early: {len(graph)}/{config.max_rooms} rooms")

    # Single-room graphs promote Start itself; the validator rejects those.
    boss = graph.deepest_room()
    boss.room_type = RoomType.BOSS

    logger.debug(f"Built room graph: {len(graph)} rooms, boss={boss.id} at depth {boss.depth}")
    return graph
