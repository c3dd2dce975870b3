"""Utility functions for pattern placement, grid conversion and visualization"""

from .grid import place_pattern, world_to_array, world_from_array, random_world
from .patterns import get_pattern, get_all_patterns, PATTERN_CATEGORIES
from .visualization import (
    species_colormap,
    visualize_world,
    visualize_generations,
    create_animation,
)

__all__ = [
    'place_pattern',
    'world_to_array',
    'world_from_array',
    'random_world',
    'get_pattern',
    'get_all_patterns',
    'PATTERN_CATEGORIES',
    'species_colormap',
    'visualize_world',
    'visualize_generations',
    'create_animation',
]
