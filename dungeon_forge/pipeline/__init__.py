"""
Dungeon Forge Pipeline Module
=============================

Validate-and-retry driver around the generation stages.

Usage:
    from dungeon_forge.pipeline import DungeonGenerationPipeline

    pipeline = DungeonGenerationPipeline(config)
    dungeon = pipeline.generate()
    print(pipeline.get_performance_report())
"""

from dungeon_forge.pipeline.generation_pipeline import (
    AttemptRecord,
    AttemptResult,
    DungeonGenerationPipeline,
    GeneratedDungeon,
    GenerationState,
    generate_attempt,
    generate_dungeon,
)

__all__ = [
    'AttemptRecord',
    'AttemptResult',
    'DungeonGenerationPipeline',
    'GeneratedDungeon',
    'GenerationState',
    'generate_attempt',
    'generate_dungeon',
]
