"""Steps a whole World forward one generation."""
from typing import Iterator

from ..model import Cell, Coordinate, World
from ..rules import EvolutionRule


class EvolutionService:
    """Applies an :class:`EvolutionRule` to every cell of the grid."""

    def __init__(self, rule: EvolutionRule):
        self.rule = rule

    def next(self, world: World) -> World:
        """Compute the next generation of ``world``, scanning the grid row by row."""
        side = world.size.cells
        new_alive = []
        for y in range(side):
            for x in range(side):
                coordinate = Coordinate(x, y)
                species = self.rule.will_be_alive(world, coordinate)
                if species is not None:
                    new_alive.append(Cell.alive(coordinate, species))
        return World(world.size, world.species_count, new_alive)

    def run(self, world: World, iterations: int) -> Iterator[World]:
        """Yield generations 1..iterations following ``world``."""
        for _ in range(iterations):
            world = self.next(world)
            yield world
