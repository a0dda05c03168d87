"""
Tests for the dungeon validator
===============================

1. validate_dungeon: the accept/reject gate
2. check_invariants: structural sweeps
"""

import logging

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import DungeonGraph, RoomConnection, RoomType, TileMap
from dungeon_forge.evaluation.validator import (
    check_invariants,
    is_boss_reachable,
    reachable_rooms,
    validate_dungeon,
)


def chain_dungeon(length=4):
    graph = DungeonGraph()
    graph.add_room(RoomType.START, depth=0)
    for depth in range(1, length):
        room = graph.add_room(RoomType.COMBAT, depth=depth)
        graph.connect(room.id - 1, room.id)
    graph[length - 1].room_type = RoomType.BOSS
    return graph


class TestValidateDungeon:
    """Acceptance gate."""

    def test_valid_chain(self):
        ok, errors = validate_dungeon(chain_dungeon(4), GenerationConfig(minimum_boss_depth=3))
        assert ok
        assert errors == []

    def test_missing_boss(self):
        graph = chain_dungeon(4)
        graph[3].room_type = RoomType.COMBAT
        ok, errors = validate_dungeon(graph, GenerationConfig(minimum_boss_depth=0))
        assert not ok
        assert errors == ["No boss room"]

    def test_missing_start(self):
        graph = DungeonGraph()
        graph.add_room(RoomType.BOSS, depth=0)
        ok, errors = validate_dungeon(graph, GenerationConfig(minimum_boss_depth=0))
        assert not ok
        assert errors == ["No start room"]

    def test_boss_too_shallow(self, caplog):
        with caplog.at_level(logging.INFO):
            ok, errors = validate_dungeon(chain_dungeon(3), GenerationConfig(minimum_boss_depth=5))
        assert not ok
        assert len(errors) == 1
        assert "below minimum 5" in errors[0]
        assert "Boss too close. Regenerating..." in caplog.text

    def test_boss_unreachable(self):
        graph = DungeonGraph()
        graph.add_room(RoomType.START, depth=0)
        graph.add_room(RoomType.BOSS, depth=4)
        ok, errors = validate_dungeon(graph, GenerationConfig(minimum_boss_depth=1))
        assert not ok
        assert any("unreachable" in e for e in errors)

    def test_locked_edges_still_traversable(self):
        graph = chain_dungeon(3)
        graph.set_locked(1, 2)
        assert is_boss_reachable(graph)
        assert validate_dungeon(graph, GenerationConfig(minimum_boss_depth=2))[0]


class TestReachability:
    def test_reachable_rooms_of_split_graph(self):
        graph = chain_dungeon(3)
        graph.add_room(RoomType.COMBAT, depth=1)
        assert reachable_rooms(graph, 0) == {0, 1, 2}
        assert reachable_rooms(graph, 3) == {3}


class TestCheckInvariants:
    """Structural invariants."""

    def test_clean_dungeon_passes(self):
        graph = chain_dungeon(3)
        tile_map = TileMap()
        for i, room in enumerate(graph):
            tile_map.reserve(room, (i, 0), (1, 1))
        ok, errors = check_invariants(graph, tile_map)
        assert ok, errors

    def test_one_sided_connection(self):
        graph = chain_dungeon(3)
        graph[0].connections.append(RoomConnection(target=2))
        ok, errors = check_invariants(graph)
        assert not ok
        assert any("no mirror" in e for e in errors)

    def test_lock_mismatch(self):
        graph = chain_dungeon(3)
        graph[0].connection_to(1).is_locked = True
        ok, errors = check_invariants(graph)
        assert not ok
        assert any("Lock flags disagree" in e for e in errors)

    def test_two_bosses(self):
        graph = chain_dungeon(3)
        graph[1].room_type = RoomType.BOSS
        ok, errors = check_invariants(graph)
        assert not ok
        assert any("exactly one boss" in e for e in errors)

    def test_boss_not_deepest(self):
        graph = chain_dungeon(3)
        extra = graph.add_room(RoomType.COMBAT, depth=5)
        graph.connect(2, extra.id)
        ok, errors = check_invariants(graph)
        assert not ok
        assert any("not the maximum depth" in e for e in errors)

    def test_overlapping_tiles(self):
        graph = chain_dungeon(2)
        graph[0].occupied_tiles = [(0, 0)]
        graph[1].occupied_tiles = [(0, 0)]
        ok, errors = check_invariants(graph)
        assert not ok
        assert any("claimed by rooms" in e for e in errors)

    def test_tile_map_disagreement(self):
        graph = chain_dungeon(2)
        tile_map = TileMap()
        tile_map.reserve(graph[0], (0, 0), (1, 1))
        graph[1].occupied_tiles = [(5, 5)]
        ok, errors = check_invariants(graph, tile_map)
        assert not ok
        assert any("Tile map disagrees" in e for e in errors)
