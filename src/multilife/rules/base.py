"""Evolution rule interface."""
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Union

from ..model import Coordinate, GridSize, SpeciesId, World


class EvolutionRule(ABC):
    """Decides the next state of a single cell from the current generation."""

    @abstractmethod
    def neighbors(self, coordinate: Coordinate, size: Union[GridSize, int]) -> Iterator[Coordinate]:
        """Yield the neighbour coordinates of ``coordinate`` on a grid of ``size`` cells."""

    @abstractmethod
    def will_be_alive(self, world: World, coordinate: Coordinate) -> Optional[SpeciesId]:
        """Return the species of the cell next generation, or None if it will be dead."""


def grid_side(size: Union[GridSize, int]) -> int:
    return size.cells if isinstance(size, GridSize) else GridSize(size).cells
