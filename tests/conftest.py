"""Shared fixtures for the dungeon_forge test suite."""

import pytest

from dungeon_forge.core.config import GenerationConfig


@pytest.fixture
def config():
    """Small, always-acceptable config: 20 rooms cannot fit within depth 2."""
    return GenerationConfig(
        seed=42,
        max_rooms=20,
        min_branches=1,
        max_branches=3,
        minimum_boss_depth=3,
        max_generation_attempts=5,
    )


@pytest.fixture
def star_config():
    """Start with five 1x1 children: only four sides exist, so one child never fits."""
    return GenerationConfig(
        seed=7,
        max_rooms=6,
        min_branches=5,
        max_branches=5,
        minimum_boss_depth=1,
        loop_chance=0.0,
        lock_chance=0.0,
        secret_room_count=0,
    )
