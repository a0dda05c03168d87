"""
Tests for the spatial layout placer
===================================

1. Flush candidate origins for every direction
2. No overlapping footprints, tile map consistent with rooms
3. Rooms that cannot be packed are dropped after the attempt cap
"""

import logging
import random

import pytest

from dungeon_forge.constants.room_constants import MAX_PLACEMENT_ATTEMPTS
from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import Cardinal, DungeonGraph, RoomType
from dungeon_forge.generation.graph_builder import build_room_graph
from dungeon_forge.generation.layout_placer import candidate_origin, layout_rooms
from dungeon_forge.generation.room_types import assign_room_types


def _laid_out(config, seed):
    rng = random.Random(seed)
    graph = build_room_graph(config, rng)
    assign_room_types(graph, config, rng)
    tile_map = layout_rooms(graph, config, rng)
    return graph, tile_map


def _touches(a, b):
    tiles_b = set(b.occupied_tiles)
    return any(d.step(t) in tiles_b for t in a.occupied_tiles for d in Cardinal)


class TestCandidateOrigin:
    """Neighbour origins sit flush against the anchor."""

    @pytest.mark.parametrize("direction,expected", [
        (Cardinal.EAST, (2, 0)),
        (Cardinal.WEST, (-1, 0)),
        (Cardinal.NORTH, (0, 3)),
        (Cardinal.SOUTH, (0, -2)),
    ])
    def test_offsets(self, direction, expected):
        assert candidate_origin((0, 0), (2, 3), (1, 2), direction) == expected

    def test_offset_from_non_origin_anchor(self):
        assert candidate_origin((5, -3), (1, 1), (3, 3), Cardinal.WEST) == (2, -3)


class TestLayout:
    """Whole-graph packing."""

    def test_start_at_origin(self, config):
        graph, tile_map = _laid_out(config, 0)
        assert graph[0].grid_position == (0, 0)
        assert tile_map.owner((0, 0)) == 0

    def test_no_overlap_and_consistent_map(self, config):
        config.footprints[RoomType.BOSS] = (2, 2)
        config.footprints[RoomType.SHOP] = (2, 1)
        config.footprints[RoomType.TREASURE] = (1, 2)

        for seed in range(15):
            graph, tile_map = _laid_out(config, seed)
            seen = {}
            for room in graph:
                for tile in room.occupied_tiles:
                    assert tile not in seen, f"seed {seed}: {tile} claimed twice"
                    seen[tile] = room.id
            assert dict(tile_map.items()) == seen

    def test_footprint_matches_config(self, config):
        config.footprints[RoomType.BOSS] = (3, 2)
        graph, _ = _laid_out(config, 1)
        for room in graph.placed_rooms():
            width, length = config.footprint(room.room_type)
            assert room.size == (width, length)
            assert len(room.occupied_tiles) == width * length

    def test_placed_rooms_touch_their_parent(self, config):
        for seed in range(10):
            graph, _ = _laid_out(config, seed)
            for room in graph.placed_rooms():
                if room.depth == 0:
                    continue
                parent = next(graph[n] for n in room.neighbor_ids() if graph[n].depth == room.depth - 1)
                assert parent.is_placed
                assert _touches(room, parent)

    def test_deterministic(self, config):
        a, _ = _laid_out(config, 11)
        b, _ = _laid_out(config, 11)
        assert [r.occupied_tiles for r in a] == [r.occupied_tiles for r in b]


class TestPlacementFailure:
    """A neighbour with no free side is retried, then dropped."""

    def test_fifth_child_dropped(self, star_config, caplog):
        rng = random.Random(star_config.seed)
        graph = build_room_graph(star_config, rng)
        assign_room_types(graph, star_config, rng)

        with caplog.at_level(logging.WARNING):
            tile_map = layout_rooms(graph, star_config, rng)

        assert len(graph) == 6
        assert [room.is_placed for room in graph] == [True, True, True, True, True, False]
        assert graph[5].placement_attempts == MAX_PLACEMENT_ATTEMPTS
        assert 5 not in set(owner for _, owner in tile_map.items())
        assert f"Failed to place room 5 after {MAX_PLACEMENT_ATTEMPTS} attempts." in caplog.text

    def test_start_sides_all_used(self, star_config):
        rng = random.Random(star_config.seed)
        graph = build_room_graph(star_config, rng)
        tile_map = layout_rooms(graph, star_config, rng)
        around = {tile_map.owner(d.step((0, 0))) for d in Cardinal}
        assert around == {1, 2, 3, 4}

    def test_empty_graph(self):
        tile_map = layout_rooms(DungeonGraph(), GenerationConfig(), random.Random(0))
        assert len(tile_map) == 0
