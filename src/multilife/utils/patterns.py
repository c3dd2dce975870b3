"""Predefined Game of Life patterns, drawn as text ('O' alive, '.' dead)."""
import numpy as np


def _pattern(picture: str) -> np.ndarray:
    rows = [row.strip() for row in picture.strip().splitlines()]
    width = max(len(row) for row in rows)
    return np.array([[1 if ch == 'O' else 0 for ch in row.ljust(width, '.')] for row in rows],
                    dtype=np.uint8)


# Still lifes (period 1)
BLOCK = _pattern("""
OO
OO
""")

BEEHIVE = _pattern("""
.OO.
O..O
.OO.
""")

BOAT = _pattern("""
OO.
O.O
.O.
""")

LOAF = _pattern("""
.OO.
O..O
.O.O
..O.
""")


# Oscillators (period 2)
BLINKER = _pattern("""
OOO
""")

TOAD = _pattern("""
.OOO
OOO.
""")

BEACON = _pattern("""
OO..
OO..
..OO
..OO
""")


# Oscillators (period 3)
PULSAR = _pattern("""
..OOO...OOO..
.............
O....O.O....O
O....O.O....O
O....O.O....O
..OOO...OOO..
.............
..OOO...OOO..
O....O.O....O
O....O.O....O
O....O.O....O
.............
..OOO...OOO..
""")


# Spaceships (period 4)
GLIDER = _pattern("""
.O.
..O
OOO
""")

LWSS = _pattern("""
.O..O
O....
O...O
OOOO.
""")


# Gosper's glider gun, one glider every 30 generations
GLIDER_GUN = _pattern("""
........................O...........
......................O.O...........
............OO......OO............OO
...........O...O....OO............OO
OO........O.....O...OO..............
OO........O...O.OO....O.O...........
..........O.....O.......O...........
...........O...O....................
............OO......................
""")


PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF,
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON,
    },
    'oscillators_p3': {
        'pulsar': PULSAR,
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS,
    },
    'guns': {
        'glider_gun': GLIDER_GUN,
    },
}


def get_pattern(name: str) -> np.ndarray:
    """Return a copy of the requested pattern array by name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name].copy()

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat]
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def get_all_patterns():
    """Return all available patterns organized by category."""
    return PATTERN_CATEGORIES
