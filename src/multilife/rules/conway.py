"""Conway's Game of Life rules extended to several competing species."""
from collections import Counter
from typing import Dict, Iterable, Iterator, Optional, Union

import numpy as np

from ..errors import InvalidValueError
from ..model import Coordinate, GridSize, SpeciesId, World
from .base import EvolutionRule, grid_side

TIE_BREAKS = ('lowest', 'random')

MOORE_OFFSETS = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def majority_species(tally: Dict[int, int],
                     tie_break: str = 'lowest',
                     rng: Optional[np.random.Generator] = None) -> Optional[int]:
    """
    Pick the species with the highest neighbour count.

    Args:
        tally: Mapping of species id to number of alive neighbours of that species
        tie_break: 'lowest' keeps the smallest species id among equal counts,
            'random' draws one of them from ``rng``
        rng: Random generator used by the 'random' strategy

    Returns:
        Winning species id, or None for an empty tally
    """
    if not tally:
        return None
    best = max(tally.values())
    candidates = sorted(species for species, count in tally.items() if count == best)
    if tie_break == 'random' and len(candidates) > 1:
        if rng is None:
            rng = np.random.default_rng()
        return int(candidates[int(rng.integers(len(candidates)))])
    return candidates[0]


class ConwayMultiSpeciesRule(EvolutionRule):
    """
    Life-like rule where every alive cell belongs to a species.

    An alive cell survives with a neighbour count in ``survive`` and a dead
    cell is born with a count in ``birth`` (Conway: survive 2-3, birth 3).
    Surviving and newborn cells take the majority species of their alive
    neighbours.

    Args:
        survive: Neighbour counts that keep an alive cell alive
        birth: Neighbour counts that bring a dead cell to life
        wrap: Use periodic boundaries instead of clipping at the grid edge
        tie_break: 'lowest' or 'random', see :func:`majority_species`
        seed: Seed for the 'random' tie-break generator
    """

    default_survive = (2, 3)
    default_birth = (3,)

    def __init__(self,
                 survive: Optional[Iterable[int]] = None,
                 birth: Optional[Iterable[int]] = None,
                 wrap: bool = False,
                 tie_break: str = 'lowest',
                 seed: Optional[int] = None):
        if tie_break not in TIE_BREAKS:
            raise InvalidValueError(f"Unknown tie-break '{tie_break}'. Available: {list(TIE_BREAKS)}")
        self.survive = frozenset(self.default_survive if survive is None else survive)
        self.birth = frozenset(self.default_birth if birth is None else birth)
        self.wrap = wrap
        self.tie_break = tie_break
        self.rng = np.random.default_rng(seed)

    def neighbors(self, coordinate: Coordinate, size: Union[GridSize, int]) -> Iterator[Coordinate]:
        side = grid_side(size)
        if self.wrap:
            yield from self._wrapped_neighbors(coordinate, side)
            return
        for dx, dy in MOORE_OFFSETS:
            x = coordinate.x + dx
            y = coordinate.y + dy
            if x < 0 or y < 0 or x >= side or y >= side:
                continue
            yield Coordinate(x, y)

    def _wrapped_neighbors(self, coordinate: Coordinate, side: int) -> Iterator[Coordinate]:
        # on grids narrower than 3 several offsets land on the same cell
        seen = {(coordinate.x, coordinate.y)}
        for dx, dy in MOORE_OFFSETS:
            x = (coordinate.x + dx) % side
            y = (coordinate.y + dy) % side
            if (x, y) in seen:
                continue
            seen.add((x, y))
            yield Coordinate(x, y)

    def will_be_alive(self, world: World, coordinate: Coordinate) -> Optional[SpeciesId]:
        alive = 0
        tally = Counter()
        for neighbor in self.neighbors(coordinate, world.size):
            species = world.species_at(neighbor)
            if species is not None:
                alive += 1
                tally[species.value] += 1

        current = world.species_at(coordinate)
        if current is not None:
            if alive not in self.survive:
                return None
            winner = majority_species(tally, self.tie_break, self.rng)
            return SpeciesId(winner) if winner is not None else current

        if alive in self.birth:
            winner = majority_species(tally, self.tie_break, self.rng)
            return SpeciesId(winner if winner is not None else 0)
        return None

    def __repr__(self):
        return (f"{type(self).__name__}(survive={sorted(self.survive)}, birth={sorted(self.birth)}, "
                f"wrap={self.wrap}, tie_break='{self.tie_break}')")


class HighLifeMultiSpeciesRule(ConwayMultiSpeciesRule):
    """HighLife variant: survive with 2-3 neighbours, birth with 3 or 6."""

    default_birth = (3, 6)


RULES = {
    'conway': ConwayMultiSpeciesRule,
    'highlife': HighLifeMultiSpeciesRule,
}


def get_rule(name: str, **kwargs) -> ConwayMultiSpeciesRule:
    """Build a rule by registry name."""
    if name not in RULES:
        raise InvalidValueError(f"Rule '{name}' not found. Available rules: {list(RULES)}")
    return RULES[name](**kwargs)
