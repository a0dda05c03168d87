"""
Generation Pipeline with Retry Logic
Runs the full generation pipeline and restarts it from scratch until the
validator accepts a dungeon or the attempt budget runs out.

State machine per attempt:
    BUILDING -> VALIDATING -> ACCEPTED
                           -> RETRYING -> BUILDING (fresh graph, fresh tile map)
    ... until max_generation_attempts, then FAILED (ExhaustedAttemptsError)
"""

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.definitions import DungeonGraph, TileMap
from dungeon_forge.core.errors import ExhaustedAttemptsError
from dungeon_forge.evaluation.validator import check_invariants, validate_dungeon
from dungeon_forge.generation.boundary_builder import BoundaryLayout, build_boundaries
from dungeon_forge.generation.graph_builder import build_room_graph
from dungeon_forge.generation.layout_placer import layout_rooms
from dungeon_forge.generation.locks import apply_locks
from dungeon_forge.generation.loops import add_loops
from dungeon_forge.generation.room_types import assign_room_types
from dungeon_forge.generation.secret_rooms import attach_secret_rooms

logger = logging.getLogger(__name__)

# Seed range drawn when randomize_seed is on. Non-negative: random.Random
# hashes abs(seed), so s and -s would build the same dungeon.
SEED_MIN = 0
SEED_MAX = 2 ** 31 - 1


class GenerationState(Enum):
    """Driver state for one attempt."""
    BUILDING = "building"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    RETRYING = "retrying"
    FAILED = "failed"


@dataclass
class AttemptResult:
    """Outcome of one full pipeline run against a single seed."""
    seed: int
    graph: DungeonGraph
    tile_map: TileMap
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    secret_rooms: int = 0
    loop_edges: int = 0
    locked_rooms: List[int] = field(default_factory=list)
    execution_time: float = 0.0

    def to_record(self) -> 'AttemptRecord':
        return AttemptRecord(
            seed=self.seed,
            is_valid=self.is_valid,
            errors=list(self.errors),
            num_rooms=len(self.graph),
            execution_time=self.execution_time,
        )


@dataclass
class AttemptRecord:
    """Log entry for one attempt; holds no graph or tile map."""
    seed: int
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    num_rooms: int = 0
    execution_time: float = 0.0


@dataclass
class GeneratedDungeon:
    """An accepted dungeon, ready for the world builder."""
    graph: DungeonGraph
    tile_map: TileMap
    boundaries: BoundaryLayout
    seed: int
    attempts: int
    history: List[AttemptRecord] = field(default_factory=list)


def generate_attempt(config: GenerationConfig, seed: int) -> AttemptResult:
    """
    Run stages graph -> types -> layout -> secrets -> loops -> locks -> validate.

    Pure: everything is built from a fresh ``random.Random(seed)``, so equal
    (config, seed) pairs give equal results.
    """
    rng = random.Random(seed)
    start_time = time.perf_counter()

    graph = build_room_graph(config, rng)
    assign_room_types(graph, config, rng)
    tile_map = layout_rooms(graph, config, rng)
    secret_rooms = attach_secret_rooms(graph, tile_map, config, rng)
    loop_edges = add_loops(graph, tile_map, config, rng)
    locked_rooms = apply_locks(graph, config, rng)

    is_valid, errors = validate_dungeon(graph, config)

    return AttemptResult(
        seed=seed,
        graph=graph,
        tile_map=tile_map,
        is_valid=is_valid,
        errors=errors,
        secret_rooms=secret_rooms,
        loop_edges=loop_edges,
        locked_rooms=locked_rooms,
        execution_time=time.perf_counter() - start_time,
    )


class DungeonGenerationPipeline:
    """
    Bounded validate-and-retry driver around generate_attempt.

    Nothing survives between attempts except the attempt log; a rejected
    attempt's graph and tile map are dropped.
    """

    def __init__(self, config: Optional[GenerationConfig] = None):
        """
        Args:
            config: Generation settings; validated here so bad settings fail
                before any attempt runs
        """
        self.config = config or GenerationConfig()
        self.config.validate()
        self.state = GenerationState.BUILDING
        self.history: List[AttemptRecord] = []

    def _seed_stream(self):
        if self.config.randomize_seed:
            seed_source = random.Random(self.config.seed_source_seed)
            while True:
                yield seed_source.randint(SEED_MIN, SEED_MAX)
        else:
            while True:
                yield self.config.seed

    def generate(self) -> GeneratedDungeon:
        """
        Generate a validated dungeon.

        Raises:
            ExhaustedAttemptsError: no attempt passed validation
        """
        self.history = []
        seeds = self._seed_stream()
        max_attempts = self.config.max_generation_attempts

        for attempt in range(1, max_attempts + 1):
            seed = next(seeds)
            self.state = GenerationState.BUILDING
            logger.debug(f"Attempt {attempt}/{max_attempts} with seed {seed}")

            result = generate_attempt(self.config, seed)
            self.state = GenerationState.VALIDATING
            self.history.append(result.to_record())

            if result.is_valid:
                self.state = GenerationState.ACCEPTED
                logger.info(f"Dungeon Generated in {attempt} attempt(s). Seed: {seed}")
                return self._finalize(result, attempt)

            self.state = GenerationState.RETRYING
            logger.info(f"Attempt {attempt} rejected: {'; '.join(result.errors)}")

        self.state = GenerationState.FAILED
        logger.error("Failed to generate a valid dungeon.")
        raise ExhaustedAttemptsError(max_attempts, self.history)

    def _finalize(self, result: AttemptResult, attempts: int) -> GeneratedDungeon:
        ok, problems = check_invariants(result.graph, result.tile_map)
        if not ok:
            for problem in problems:
                logger.warning(f"Invariant violated: {problem}")

        boundaries = build_boundaries(result.graph, result.tile_map)
        return GeneratedDungeon(
            graph=result.graph,
            tile_map=result.tile_map,
            boundaries=boundaries,
            seed=result.seed,
            attempts=attempts,
            history=list(self.history),
        )

    def get_performance_report(self) -> str:
        """Generate human-readable per-attempt report."""
        lines = ["\n=== Generation Report ==="]

        for index, result in enumerate(self.history, start=1):
            status_symbol = "OK" if result.is_valid else "X"
            lines.append(
                f"[{status_symbol:2s}] attempt {index:3d} | seed {result.seed:>11d} | "
                f"{result.num_rooms:3d} rooms | {result.execution_time * 1000:7.2f}ms"
            )
            for error in result.errors:
                lines.append(f"   Error: {error}")

        total_time = sum(r.execution_time for r in self.history)
        lines.append(f"\nTotal time: {total_time * 1000:.2f}ms")
        lines.append(f"Total attempts: {len(self.history)}")
        return "\n".join(lines)


def generate_dungeon(config: Optional[GenerationConfig] = None) -> GeneratedDungeon:
    """Convenience wrapper: validate ``config`` and run the retry loop."""
    return DungeonGenerationPipeline(config).generate()
