"""
Room Constants
==============

Fixed numbers used by the generation stages. Tunable knobs live on
GenerationConfig; the values here are part of the algorithm itself and
changing them changes every seeded dungeon.

Sources:
- dungeon_forge/generation/*.py (consumers)
- dungeon_forge/core/definitions.py:Cardinal (direction offsets)

"""

from typing import Dict, Tuple

# ==========================================
# SPATIAL LAYOUT
# ==========================================

# A neighbour that cannot be packed is requeued until its counter
# reaches this cap, then left unplaced for the rest of the attempt.
MAX_PLACEMENT_ATTEMPTS: int = 8

# Footprint used when the database has no entry for a room type
DEFAULT_FOOTPRINT: Tuple[int, int] = (1, 1)

# Origin of the start room
GRID_ORIGIN: Tuple[int, int] = (0, 0)

# ==========================================
# ROOM TYPE ASSIGNMENT
# ==========================================

# Treasure cap = max(1, max_rooms // TREASURE_ROOM_DIVISOR)
TREASURE_ROOM_DIVISOR: int = 6

# Normalized depth (depth / max_depth) above which a dead end becomes treasure
TREASURE_DEPTH_THRESHOLD: float = 0.3

# Normalized depth above which a room may become a shop
SHOP_DEPTH_THRESHOLD: float = 0.6

# Probability that a deep room stays a combat room instead of a shop
DEEP_COMBAT_PROBABILITY: float = 0.8

# ==========================================
# DOOR THEMES
# ==========================================

# A door between two rooms takes the material of the higher-priority room.
# Keys are RoomType names so this module stays import-free.
DOOR_THEME_PRIORITY: Dict[str, int] = {
    'BOSS': 100,
    'TREASURE': 80,
    'SHOP': 60,
    'SECRET': 50,
    'NORMAL': 40,
    'COMBAT': 40,
    'START': 10,
}

# ==========================================
# WORLD SPACE
# ==========================================

# World units per grid tile (horizontal) and per floor (vertical)
DEFAULT_ROOM_SIZE: float = 20.0
DEFAULT_FLOOR_HEIGHT: float = 10.0

# Wall yaw in degrees, keyed by Cardinal name
WALL_YAW_DEGREES: Dict[str, float] = {
    'NORTH': 0.0,
    'SOUTH': 180.0,
    'EAST': 90.0,
    'WEST': -90.0,
}
