"""
Dungeon Forge Evaluation Module
===============================

- Acceptance validator (boss present, deep enough, reachable)
- Structural invariant checks
- Layout metrics
"""

from .validator import (
    check_invariants,
    is_boss_reachable,
    reachable_rooms,
    validate_dungeon,
)
from .layout_metrics import (
    LayoutMetrics,
    compute_layout_metrics,
)

__all__ = [
    'check_invariants',
    'is_boss_reachable',
    'reachable_rooms',
    'validate_dungeon',
    'LayoutMetrics',
    'compute_layout_metrics',
]
