"""Immutable snapshot of one generation."""
import numbers
from typing import Dict, Iterable, Iterator, List, Optional

from ..errors import InvalidWorldError, NotAliveCellError
from .cell import Cell
from .values import Coordinate, GridSize, SpeciesId


class World:
    """
    One generation of the multi-species Game of Life.

    Only alive cells are stored, in a sparse map keyed by ``Coordinate.key()``.
    Every species id must be below ``species_count``. When two input cells
    share a coordinate the later one wins. A World has no mutating methods:
    every step of the simulation builds a new instance.

    Args:
        size: Side length of the square grid
        species_count: Number of species taking part in the simulation
        alive_cells: Alive cells of this generation
    """

    __slots__ = ('_size', '_species_count', '_alive')

    def __init__(self, size: GridSize, species_count: int, alive_cells: Iterable[Cell] = ()):
        if not isinstance(size, GridSize):
            raise InvalidWorldError(f"World size must be a GridSize, got {size!r}")
        if isinstance(species_count, bool) or not isinstance(species_count, numbers.Integral):
            raise InvalidWorldError(f"Species count must be an integer, got {species_count!r}")
        if species_count <= 0:
            raise InvalidWorldError("Value of element 'species' must be positive number")

        alive: Dict[str, Cell] = {}
        for cell in alive_cells:
            if not isinstance(cell, Cell) or not cell.is_alive():
                raise NotAliveCellError('World expects alive cells')
            if not size.contains(cell.coordinate):
                raise InvalidWorldError(
                    f"Cell at ({cell.coordinate.x}, {cell.coordinate.y}) lies outside "
                    f"a grid of {size.cells} cells"
                )
            if cell.species.value >= species_count:
                raise InvalidWorldError(
                    f"Species {cell.species.value} at ({cell.coordinate.x}, {cell.coordinate.y}) "
                    f"out of range for {species_count} species"
                )
            alive[cell.coordinate.key()] = cell

        self._size = size
        self._species_count = int(species_count)
        self._alive = alive

    @property
    def size(self) -> GridSize:
        return self._size

    @property
    def species_count(self) -> int:
        return self._species_count

    def is_alive_at(self, coordinate: Coordinate) -> bool:
        return coordinate.key() in self._alive

    def species_at(self, coordinate: Coordinate) -> Optional[SpeciesId]:
        """Return the species living at ``coordinate``, or None if the cell is dead."""
        cell = self._alive.get(coordinate.key())
        return cell.species if cell is not None else None

    def alive_cells(self) -> Iterator[Cell]:
        """Iterate over the alive cells. Order is unspecified; use sorted_cells() for output."""
        return iter(self._alive.values())

    def sorted_cells(self) -> List[Cell]:
        """Alive cells ordered by ``y``, then ``x``."""
        return sorted(self._alive.values(), key=lambda cell: cell.coordinate.sort_key())

    def population(self) -> int:
        return len(self._alive)

    def __len__(self):
        return len(self._alive)

    def __contains__(self, coordinate):
        return isinstance(coordinate, Coordinate) and self.is_alive_at(coordinate)

    def __eq__(self, other):
        if not isinstance(other, World):
            return NotImplemented
        return (self._size == other._size
                and self._species_count == other._species_count
                and self._alive == other._alive)

    def __hash__(self):
        return hash((self._size, self._species_count, frozenset(self._alive.values())))

    def __repr__(self):
        return (f"World(size={self._size.cells}, species_count={self._species_count}, "
                f"population={len(self._alive)})")
