"""
Tests for room type assignment
==============================

Covers the treasure cap, the depth buckets and the fact that the depth
bucket overrides the dead-end check.
"""

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import DungeonGraph, RoomType
from dungeon_forge.generation.room_types import assign_room_types


class FixedRandom:
    """RNG stand-in returning a constant from random()."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


def chain(length):
    """Start - 1 - 2 - ... - Boss, depths 0..length-1."""
    graph = DungeonGraph()
    graph.add_room(RoomType.START, depth=0)
    for depth in range(1, length):
        room = graph.add_room(RoomType.UNDEFINED, depth=depth)
        graph.connect(room.id - 1, room.id)
    graph[length - 1].room_type = RoomType.BOSS
    return graph


class TestDepthBuckets:
    """Non-dead-end rooms get their type from normalized depth."""

    def test_shallow_rooms_are_combat(self):
        graph = chain(5)
        assign_room_types(graph, GenerationConfig(), FixedRandom(0.0))
        # depths 1 and 2 of 4 -> 0.25 and 0.5
        assert graph[1].room_type == RoomType.COMBAT
        assert graph[2].room_type == RoomType.COMBAT

    def test_deep_room_combat_on_low_draw(self):
        graph = chain(5)
        rng = FixedRandom(0.1)
        assign_room_types(graph, GenerationConfig(), rng)
        assert graph[3].room_type == RoomType.COMBAT
        # Only the d > 0.6 room draws
        assert rng.calls == 1

    def test_deep_room_shop_on_high_draw(self):
        graph = chain(5)
        assign_room_types(graph, GenerationConfig(), FixedRandom(0.9))
        assert graph[3].room_type == RoomType.SHOP

    def test_start_and_boss_untouched(self):
        graph = chain(5)
        assign_room_types(graph, GenerationConfig(), FixedRandom(0.9))
        assert graph[0].room_type == RoomType.START
        assert graph[4].room_type == RoomType.BOSS


class TestDeadEnds:
    """Dead-end handling and the two-pass ordering."""

    def _graph_with_side_room(self, side_depth_parent):
        # Chain of 5 plus one dead end hanging off room ``side_depth_parent``
        graph = chain(5)
        parent = graph[side_depth_parent]
        side = graph.add_room(RoomType.UNDEFINED, depth=parent.depth + 1)
        graph.connect(parent.id, side.id)
        return graph, side

    def test_deep_dead_end_is_treasure(self):
        graph, side = self._graph_with_side_room(1)  # depth 2 -> 0.5
        assign_room_types(graph, GenerationConfig(), FixedRandom(0.0))
        assert side.room_type == RoomType.TREASURE

    def test_shallow_dead_end_overwritten_to_combat(self):
        """The cap pass marks it treasure, the depth bucket then writes combat."""
        graph, side = self._graph_with_side_room(0)  # depth 1 -> 0.25
        assign_room_types(graph, GenerationConfig(), FixedRandom(0.0))
        assert side.room_type == RoomType.COMBAT

    def test_deep_dead_ends_ignore_cap(self):
        graph = chain(5)
        sides = []
        for _ in range(4):
            side = graph.add_room(RoomType.UNDEFINED, depth=2)
            graph.connect(1, side.id)
            sides.append(side)

        # max_rooms=6 -> cap of 1, yet every dead end past 0.3 is treasure
        assign_room_types(graph, GenerationConfig(max_rooms=6), FixedRandom(0.0))
        assert all(side.room_type == RoomType.TREASURE for side in sides)

    def test_all_rooms_typed(self):
        graph, _ = self._graph_with_side_room(2)
        assign_room_types(graph, GenerationConfig(), FixedRandom(0.5))
        assert not graph.rooms_of_type(RoomType.UNDEFINED)
