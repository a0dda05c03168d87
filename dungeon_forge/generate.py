"""
Dungeon Generation CLI
======================

Generate a dungeon layout and print its summary, metrics and a text map.

Usage:
    dungeon-forge --seed 42 --max-rooms 15
    dungeon-forge --config dungeon.json --random-seed -v
    python -m dungeon_forge.generate --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from dungeon_forge.core.config import GenerationConfig
from dungeon_forge.core.errors import ConfigurationError, ExhaustedAttemptsError
from dungeon_forge.evaluation.layout_metrics import compute_layout_metrics
from dungeon_forge.pipeline.generation_pipeline import DungeonGenerationPipeline
from dungeon_forge.utils.ascii_dump import render_ascii

logger = logging.getLogger(__name__)

# CLI flag -> config field
OVERRIDES = {
    'seed': 'seed',
    'max_rooms': 'max_rooms',
    'min_branches': 'min_branches',
    'max_branches': 'max_branches',
    'min_boss_depth': 'minimum_boss_depth',
    'max_attempts': 'max_generation_attempts',
    'loop_chance': 'loop_chance',
    'lock_chance': 'lock_chance',
    'secret_rooms': 'secret_room_count',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate a validated dungeon room graph and layout',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--config', type=str, default=None, help='JSON config file')
    parser.add_argument('--seed', type=int, default=None, help='Base seed')
    parser.add_argument('--random-seed', action='store_true', help='Draw a fresh seed every attempt')
    parser.add_argument('--max-rooms', type=int, default=None)
    parser.add_argument('--min-branches', type=int, default=None)
    parser.add_argument('--max-branches', type=int, default=None)
    parser.add_argument('--min-boss-depth', type=int, default=None)
    parser.add_argument('--max-attempts', type=int, default=None)
    parser.add_argument('--loop-chance', type=float, default=None)
    parser.add_argument('--lock-chance', type=float, default=None)
    parser.add_argument('--secret-rooms', type=int, default=None)
    parser.add_argument('--json', action='store_true', help='Print metrics as JSON only')
    parser.add_argument('--report', action='store_true', help='Print the per-attempt report')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    return parser


def config_from_args(args: argparse.Namespace) -> GenerationConfig:
    config = GenerationConfig.from_json(args.config) if args.config else GenerationConfig()
    for flag, attr in OVERRIDES.items():
        value = getattr(args, flag)
        if value is not None:
            setattr(config, attr, value)
    if args.random_seed:
        config.randomize_seed = True
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%H:%M:%S',
    )

    try:
        config = config_from_args(args)
        pipeline = DungeonGenerationPipeline(config)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2

    try:
        dungeon = pipeline.generate()
    except ExhaustedAttemptsError as e:
        logger.error(str(e))
        if args.report:
            print(pipeline.get_performance_report())
        return 1

    metrics = compute_layout_metrics(dungeon.graph, dungeon.tile_map)

    if args.json:
        print(json.dumps({'seed': dungeon.seed, 'attempts': dungeon.attempts, 'metrics': metrics.to_dict()}, indent=2))
        return 0

    print(f"Seed: {dungeon.seed} ({dungeon.attempts} attempt(s))")
    print(f"Rooms: {metrics.num_rooms} ({metrics.placed_rooms} placed) {metrics.room_types}")
    print(f"Edges: {metrics.num_edges}, locked: {metrics.locked_edges}, loops: {metrics.loops}")
    print(f"Doors: {len(dungeon.boundaries.doors)}, walls: {len(dungeon.boundaries.walls)}")
    print()
    print(render_ascii(dungeon.graph, dungeon.tile_map))

    if args.report:
        print(pipeline.get_performance_report())
    return 0


if __name__ == '__main__':
    sys.exit(main())
