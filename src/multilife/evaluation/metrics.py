"""Population and dynamics metrics over generation histories."""
from collections import Counter
from typing import Dict, Optional, Sequence

import numpy as np

from ..model import SpeciesId, World
from ..utils.grid import world_to_array


def species_population(world: World) -> Dict[int, int]:
    """Return the number of alive cells per species id, zero counts included."""
    counts = Counter(cell.species.value for cell in world.alive_cells())
    population = {species: 0 for species in range(world.species_count)}
    population.update(counts)
    return population


def population_trajectory(generations: Sequence[World]) -> np.ndarray:
    """Return per-species populations as an array of shape (T, species_count)."""
    if not generations:
        return np.zeros((0, 0), dtype=int)
    width = max(world.species_count for world in generations)
    trajectory = np.zeros((len(generations), width), dtype=int)
    for t, world in enumerate(generations):
        for species, count in species_population(world).items():
            trajectory[t, species] = count
    return trajectory


def dominant_species(world: World) -> Optional[SpeciesId]:
    """Return the most populous species (lowest id on ties), or None for an empty world."""
    counts = Counter(cell.species.value for cell in world.alive_cells())
    if not counts:
        return None
    best = max(counts.values())
    return SpeciesId(min(species for species, count in counts.items() if count == best))


def is_extinct(world: World) -> bool:
    return world.population() == 0


def hamming_distance(a: World, b: World) -> float:
    """Return the fraction of grid cells whose state or species differ."""
    if a.size != b.size:
        raise ValueError(f"Worlds differ in size: {a.size.cells} vs {b.size.cells}")
    return float(np.mean(world_to_array(a) != world_to_array(b)))


def find_period(generations: Sequence[World], max_period: Optional[int] = None) -> int:
    """
    Return the smallest period p > 0 such that the last generation equals the
    one p steps earlier, or -1 if the history shows no repetition.
    """
    if len(generations) < 2:
        return -1
    limit = len(generations) - 1
    if max_period is not None:
        limit = min(limit, max_period)

    last = generations[-1]
    for period in range(1, limit + 1):
        if generations[-1 - period] == last:
            return period
    return -1
