"""Cells and their life state."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import InvalidCellError
from .values import Coordinate, SpeciesId


class CellState(Enum):
    ALIVE = 'alive'
    DEAD = 'dead'


@dataclass(frozen=True)
class Cell:
    """
    A single grid cell.

    Alive cells always carry a species; dead cells never do.
    """
    coordinate: Coordinate
    state: CellState
    species: Optional[SpeciesId] = None

    def __post_init__(self):
        if not isinstance(self.coordinate, Coordinate):
            raise InvalidCellError(f"Cell coordinate must be a Coordinate, got {self.coordinate!r}")
        if self.species is not None and not isinstance(self.species, SpeciesId):
            raise InvalidCellError(f"Cell species must be a SpeciesId, got {self.species!r}")
        if not isinstance(self.state, CellState):
            raise InvalidCellError(f"Unknown cell state {self.state!r}")
        if self.state is CellState.ALIVE and self.species is None:
            raise InvalidCellError('Alive cell must have species')
        if self.state is CellState.DEAD and self.species is not None:
            raise InvalidCellError('Dead cell cannot have species')

    @classmethod
    def dead(cls, coordinate: Coordinate) -> 'Cell':
        return cls(coordinate, CellState.DEAD, None)

    @classmethod
    def alive(cls, coordinate: Coordinate, species: SpeciesId) -> 'Cell':
        return cls(coordinate, CellState.ALIVE, species)

    def is_alive(self) -> bool:
        return self.state is CellState.ALIVE
