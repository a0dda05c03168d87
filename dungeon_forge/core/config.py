"""
Generation Configuration
========================

GenerationConfig holds every tunable knob of the pipeline plus the
footprint database (room type -> grid width x length) that stands in for
the prefab database of the world-building side.

Usage:
    config = GenerationConfig(max_rooms=12, minimum_boss_depth=3, seed=7)
    config.validate()

    # Or from JSON
    config = GenerationConfig.from_json("dungeon.json")
"""

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Set, Tuple, Union

from dungeon_forge.constants.room_constants import (
    DEFAULT_FLOOR_HEIGHT,
    DEFAULT_FOOTPRINT,
    DEFAULT_ROOM_SIZE,
)
from dungeon_forge.core.definitions import Footprint, RoomType
from dungeon_forge.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _default_footprints() -> Dict[RoomType, Footprint]:
    return {
        room_type: DEFAULT_FOOTPRINT
        for room_type in RoomType
        if room_type != RoomType.UNDEFINED
    }


@dataclass
class GenerationConfig:
    """Configuration for one dungeon generation run."""
    seed: int = 12345
    randomize_seed: bool = False
    max_rooms: int = 20
    min_branches: int = 1
    max_branches: int = 3
    minimum_boss_depth: int = 6
    max_generation_attempts: int = 10
    loop_chance: float = 0.15
    lock_chance: float = 0.2
    secret_room_count: int = 1
    footprints: Dict[RoomType, Footprint] = field(default_factory=_default_footprints)
    room_size: float = DEFAULT_ROOM_SIZE
    floor_height: float = DEFAULT_FLOOR_HEIGHT
    seed_source_seed: Optional[int] = None  # Seeds the per-attempt seed draw when randomize_seed is on
    # Types already warned about by footprint(); not a setting
    _missing_reported: Set[RoomType] = field(default_factory=set, init=False, repr=False, compare=False)

    def footprint(self, room_type: RoomType) -> Footprint:
        """Footprint for ``room_type``; falls back to 1x1, warning once per type."""
        size = self.footprints.get(room_type)
        if size is None:
            if room_type in self._missing_reported:
                return DEFAULT_FOOTPRINT
            self._missing_reported.add(room_type)
            logger.warning(f"Missing footprint for room type: {room_type.name}")
            return DEFAULT_FOOTPRINT
        return size

    def validate(self) -> None:
        """Raise ConfigurationError if generation can never run with these values."""
        problems = []

        if self.max_rooms <= 0:
            problems.append(f"max_rooms must be positive, got {self.max_rooms}")
        if self.min_branches < 0:
            problems.append(f"min_branches must be >= 0, got {self.min_branches}")
        if self.max_branches < self.min_branches:
            problems.append(
                f"max_branches ({self.max_branches}) is below min_branches ({self.min_branches})"
            )
        if self.minimum_boss_depth < 0:
            problems.append(f"minimum_boss_depth must be >= 0, got {self.minimum_boss_depth}")
        if self.max_generation_attempts <= 0:
            problems.append(
                f"max_generation_attempts must be positive, got {self.max_generation_attempts}"
            )
        for name in ('loop_chance', 'lock_chance'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                problems.append(f"{name} must be within [0, 1], got {value}")
        if self.secret_room_count < 0:
            problems.append(f"secret_room_count must be >= 0, got {self.secret_room_count}")
        for room_type, size in self.footprints.items():
            if len(size) != 2 or size[0] <= 0 or size[1] <= 0:
                problems.append(f"footprint for {room_type.name} must be two positive ints, got {size}")
        if self.room_size <= 0 or self.floor_height <= 0:
            problems.append("room_size and floor_height must be positive")

        if problems:
            raise ConfigurationError("Invalid generation config: " + "; ".join(problems))

    # ==========================================
    # LOADING
    # ==========================================

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GenerationConfig':
        """
        Build a config from plain data (e.g. parsed JSON).

        Footprint keys are room type names, values are [width, length]:
            {"max_rooms": 15, "footprints": {"boss": [2, 2]}}

        Footprints given here are merged over the 1x1 defaults.
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config must be a JSON object, got {type(data).__name__}")

        known = {f.name for f in fields(cls) if f.init}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")

        kwargs = {k: v for k, v in data.items() if k != 'footprints'}
        config = cls(**kwargs)

        raw_footprints = data.get('footprints') or {}
        for name, size in raw_footprints.items():
            try:
                room_type = name if isinstance(name, RoomType) else RoomType.from_name(name)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
            config.footprints[room_type] = _as_footprint(size)
        return config

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'GenerationConfig':
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {path} is not valid JSON: {e}") from e
        logger.info(f"Loaded generation config from {path}")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.init}
        data['footprints'] = {
            room_type.name.lower(): list(size) for room_type, size in self.footprints.items()
        }
        return data


def _as_footprint(size: Any) -> Tuple[int, int]:
    try:
        width, length = size
        return int(width), int(length)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Footprint must be a [width, length] pair, got {size!r}") from e
