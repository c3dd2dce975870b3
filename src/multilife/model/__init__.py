"""Domain model: value objects, cells and worlds."""

from .values import Coordinate, SpeciesId, GridSize
from .cell import Cell, CellState
from .world import World

__all__ = [
    'Coordinate',
    'SpeciesId',
    'GridSize',
    'Cell',
    'CellState',
    'World',
]
