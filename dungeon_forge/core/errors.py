"""
Error types raised by dungeon generation.

Only two conditions surface as exceptions: a configuration that can never
work (raised before the first attempt) and running out of attempts. Invalid
attempts and unplaceable rooms are handled inside the pipeline.
"""

from typing import Any, List, Optional


class DungeonForgeError(Exception):
    """Base class for all dungeon_forge errors."""


class ConfigurationError(DungeonForgeError, ValueError):
    """GenerationConfig failed validation."""


class ExhaustedAttemptsError(DungeonForgeError, RuntimeError):
    """
    No attempt produced a valid dungeon within max_generation_attempts.

    ``history`` holds one AttemptRecord per attempt (seed, errors, room
    count, timing); rejected graphs are never attached.
    """

    def __init__(self, attempts: int, history: Optional[List[Any]] = None):
        self.attempts = attempts
        self.history = history or []
        last_errors = self.history[-1].errors if self.history else []
        detail = f" (last errors: {'; '.join(last_errors)})" if last_errors else ""
        super().__init__(f"Failed to generate a valid dungeon after {attempts} attempt(s){detail}")
