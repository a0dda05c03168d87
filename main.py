"""
DUNGEON FORGE - Main Entry Point
================================

Usage:
    python main.py --seed 42
    python main.py --config dungeon.json --random-seed --report
"""

import sys

from dungeon_forge.generate import main

if __name__ == '__main__':
    sys.exit(main())
