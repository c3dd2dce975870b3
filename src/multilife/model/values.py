"""Immutable value objects: grid positions, species identifiers and grid size."""
import numbers
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

from ..errors import InvalidValueError


def as_int(value, name: str) -> int:
    """Return ``value`` as a plain int, rejecting bools and non-integers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


@total_ordering
@dataclass(frozen=True)
class Coordinate:
    """
    Non-negative position on the grid.

    Coordinates sort row by row: by ``y`` first, then by ``x``.
    """
    x: int
    y: int

    def __post_init__(self):
        x = as_int(self.x, 'x')
        y = as_int(self.y, 'y')
        if x < 0 or y < 0:
            raise InvalidValueError(f"Coordinates must be non-negative, got ({x}, {y})")
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def key(self) -> str:
        """Return the canonical ``"x:y"`` key used by the alive-cell map."""
        return f"{self.x}:{self.y}"

    @classmethod
    def from_key(cls, key: str) -> 'Coordinate':
        """Rebuild a coordinate from :meth:`key` output."""
        parts = key.split(':')
        if len(parts) != 2:
            raise InvalidValueError(f"Malformed coordinate key {key!r}")
        try:
            x, y = int(parts[0]), int(parts[1])
        except ValueError:
            raise InvalidValueError(f"Malformed coordinate key {key!r}") from None
        coordinate = cls(x, y)
        if coordinate.key() != key:
            raise InvalidValueError(f"Non-canonical coordinate key {key!r}")
        return coordinate

    def sort_key(self) -> Tuple[int, int]:
        return (self.y, self.x)

    def __lt__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@total_ordering
@dataclass(frozen=True)
class SpeciesId:
    """Non-negative species identifier."""
    value: int

    def __post_init__(self):
        value = as_int(self.value, 'SpeciesId')
        if value < 0:
            raise InvalidValueError(f"SpeciesId must be >= 0, got {value}")
        object.__setattr__(self, 'value', value)

    def __lt__(self, other):
        if not isinstance(other, SpeciesId):
            return NotImplemented
        return self.value < other.value

    def __int__(self):
        return self.value


@dataclass(frozen=True)
class GridSize:
    """Side length of the square grid, in cells."""
    cells: int

    def __post_init__(self):
        cells = as_int(self.cells, 'cells')
        if cells <= 0:
            raise InvalidValueError(f"Value of element 'cells' must be positive number, got {cells}")
        object.__setattr__(self, 'cells', cells)

    def contains(self, coordinate: Coordinate) -> bool:
        return coordinate.x < self.cells and coordinate.y < self.cells

    def __int__(self):
        return self.cells
