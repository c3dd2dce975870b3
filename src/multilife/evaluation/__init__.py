"""Evaluation metrics and analysis tools."""

from .metrics import (
    species_population,
    population_trajectory,
    dominant_species,
    is_extinct,
    hamming_distance,
    find_period,
)

__all__ = [
    'species_population',
    'population_trajectory',
    'dominant_species',
    'is_extinct',
    'hamming_distance',
    'find_period',
]
