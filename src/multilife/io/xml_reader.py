"""
Read a simulation input document.

Expected layout::

    <life>
      <world>
        <cells>5</cells>
        <species>2</species>
        <iterations>4</iterations>
      </world>
      <organisms>
        <organism><x_pos>1</x_pos><y_pos>2</y_pos><species>0</species></organism>
      </organisms>
    </life>
"""
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import numpy as np

from ..errors import InvalidInputError, InvalidValueError, MultiLifeError
from ..evolution import SimulationConfig
from ..model import Cell, Coordinate, GridSize, SpeciesId, World

DUPLICATE_POLICIES = ('last', 'random')

WORLD_ELEMENTS = ('iterations', 'cells', 'species')
ORGANISM_ELEMENTS = ('x_pos', 'y_pos', 'species')


def read_simulation(path: Union[str, Path],
                    duplicates: str = 'last',
                    seed: Optional[int] = None) -> Tuple[SimulationConfig, World]:
    """
    Read the simulation config and the initial world from an XML file.

    Args:
        path: Path to the input document
        duplicates: How to resolve two organisms at the same position:
            'last' keeps the later record, 'random' picks one of the two
        seed: Seed for the 'random' duplicate policy

    Returns:
        Tuple of (config, initial world)
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidInputError("Unable to read nonexistent file")
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidInputError("Cannot read XML file") from exc
    return parse_simulation(text, duplicates=duplicates, seed=seed)


def parse_simulation(text: str,
                     duplicates: str = 'last',
                     seed: Optional[int] = None) -> Tuple[SimulationConfig, World]:
    """Parse an input document held in memory. See :func:`read_simulation`."""
    if duplicates not in DUPLICATE_POLICIES:
        raise InvalidValueError(f"Unknown duplicate policy '{duplicates}'. Available: {list(DUPLICATE_POLICIES)}")
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise InvalidInputError("Cannot read XML file") from exc

    _validate_document(root)
    world_element = root.find('world')
    size = _read_int(world_element, 'cells')
    species_count = _read_int(world_element, 'species')
    iterations = _read_int(world_element, 'iterations')
    if iterations < 0:
        raise InvalidInputError("Value of element 'iterations' must be zero or positive number")
    if size <= 0:
        raise InvalidInputError("Value of element 'cells' must be positive number")
    if species_count <= 0:
        raise InvalidInputError("Value of element 'species' must be positive number")

    occupants = _read_organisms(root, size, species_count, duplicates, np.random.default_rng(seed))

    try:
        alive = [
            Cell.alive(Coordinate(x, y), SpeciesId(species))
            for (x, y), species in sorted(occupants.items(), key=lambda item: (item[0][1], item[0][0]))
        ]
        config = SimulationConfig(size, iterations)
        world = World(GridSize(size), species_count, alive)
    except MultiLifeError as exc:
        raise InvalidInputError(str(exc)) from exc
    return config, world


def _validate_document(root: ET.Element) -> None:
    world_element = root.find('world')
    if world_element is None:
        raise InvalidInputError("Missing element 'world'")
    for name in WORLD_ELEMENTS:
        if world_element.find(name) is None:
            raise InvalidInputError(f"Missing element '{name}'")
    organisms = root.find('organisms')
    if organisms is None:
        raise InvalidInputError("Missing element 'organisms'")
    for organism in organisms.findall('organism'):
        for name in ORGANISM_ELEMENTS:
            if organism.find(name) is None:
                raise InvalidInputError(f"Missing element '{name}' in some of the element 'organism'")


def _read_int(parent: ET.Element, name: str, owner: Optional[str] = None) -> int:
    text = (parent.find(name).text or '').strip()
    try:
        return int(text)
    except ValueError:
        where = f" of element '{owner}'" if owner else ''
        raise InvalidInputError(f"Value of element '{name}'{where} must be an integer, got '{text}'") from None


def _read_organisms(root: ET.Element,
                    size: int,
                    species_count: int,
                    duplicates: str,
                    rng: np.random.Generator) -> Dict[Tuple[int, int], int]:
    """Map each occupied (x, y) to a single species id."""
    occupants: Dict[Tuple[int, int], int] = {}
    for organism in root.find('organisms').findall('organism'):
        x = _read_int(organism, 'x_pos', 'organism')
        if x < 0 or x >= size:
            raise InvalidInputError(
                "Value of element 'x_pos' of element 'organism' must be between 0 and number of cells"
            )
        y = _read_int(organism, 'y_pos', 'organism')
        if y < 0 or y >= size:
            raise InvalidInputError(
                "Value of element 'y_pos' of element 'organism' must be between 0 and number of cells"
            )
        species = _read_int(organism, 'species', 'organism')
        if species < 0 or species >= species_count:
            raise InvalidInputError(
                "Value of element 'species' of element 'organism' must be between 0 and maximal number of species"
            )

        existing = occupants.get((x, y))
        if existing is not None and duplicates == 'random':
            species = int(rng.choice([existing, species]))
        occupants[(x, y)] = species
    return occupants
