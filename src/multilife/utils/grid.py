"""Conversions between Worlds, dense numpy grids and placed patterns."""
from typing import List, Optional, Tuple, Union

import numpy as np

from ..errors import InvalidValueError, InvalidWorldError
from ..model import Cell, Coordinate, GridSize, SpeciesId, World

DEAD = -1


def place_pattern(size: Union[GridSize, int],
                  pattern: np.ndarray,
                  species: Union[SpeciesId, int] = 0,
                  position: Optional[Tuple[int, int]] = None) -> List[Cell]:
    """
    Place a pattern on a grid, centered by default or at a given corner.

    Args:
        size: Grid side length
        pattern: 2D array indexed [row, column], non-zero entries alive
        species: Species given to every alive cell of the pattern
        position: (x, y) of the pattern's top-left corner, None to center it

    Returns:
        Alive cells of the pattern that fall inside the grid
    """
    side = size.cells if isinstance(size, GridSize) else GridSize(size).cells
    species = species if isinstance(species, SpeciesId) else SpeciesId(species)
    pattern = np.atleast_2d(np.asarray(pattern))
    ph, pw = pattern.shape
    if position is None:
        start_x = (side - pw) // 2
        start_y = (side - ph) // 2
    else:
        start_x, start_y = position

    cells = []
    for row, col in zip(*np.nonzero(pattern)):
        x = start_x + int(col)
        y = start_y + int(row)
        if 0 <= x < side and 0 <= y < side:
            cells.append(Cell.alive(Coordinate(x, y), species))
    return cells


def world_to_array(world: World) -> np.ndarray:
    """Dense (size, size) grid indexed [y, x]: species id where alive, -1 where dead."""
    side = world.size.cells
    grid = np.full((side, side), DEAD, dtype=np.int16)
    for cell in world.alive_cells():
        grid[cell.coordinate.y, cell.coordinate.x] = cell.species.value
    return grid


def world_from_array(grid: np.ndarray, species_count: int) -> World:
    """Build a World from a dense grid as produced by :func:`world_to_array`."""
    grid = np.asarray(grid)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise InvalidWorldError(f"Grid must be square, got shape {grid.shape}")
    if grid.size and grid.max() >= species_count:
        raise InvalidWorldError(
            f"Species id {int(grid.max())} out of range for {species_count} species"
        )

    cells = [
        Cell.alive(Coordinate(int(x), int(y)), SpeciesId(int(grid[y, x])))
        for y, x in zip(*np.nonzero(grid >= 0))
    ]
    return World(GridSize(grid.shape[0]), species_count, cells)


def random_world(size: int,
                 species_count: int,
                 density: float = 0.3,
                 seed: Optional[int] = None) -> World:
    """
    Generate a random initial World.

    Args:
        size: Grid side length
        species_count: Number of species, assigned uniformly to alive cells
        density: Probability of a cell being alive
        seed: Random seed

    Returns:
        World with roughly ``density * size**2`` alive cells
    """
    if not 0.0 <= density <= 1.0:
        raise InvalidValueError(f"Density must be within [0, 1], got {density}")
    if species_count <= 0:
        raise InvalidWorldError("Value of element 'species' must be positive number")
    rng = np.random.default_rng(seed)
    side = GridSize(size).cells
    alive = rng.random((side, side)) < density
    species = rng.integers(0, species_count, size=(side, side))
    return world_from_array(np.where(alive, species, DEAD), species_count)
