import matplotlib

matplotlib.use("Agg")

import pytest

from multilife.model import Cell, Coordinate, GridSize, SpeciesId, World


def make_world(size, species_count, cells):
    """Build a World from (x, y, species) triples."""
    return World(
        GridSize(size),
        species_count,
        [Cell.alive(Coordinate(x, y), SpeciesId(s)) for x, y, s in cells],
    )


def alive_set(world):
    return {(c.coordinate.x, c.coordinate.y, c.species.value) for c in world.alive_cells()}


@pytest.fixture
def vertical_blinker():
    return make_world(3, 1, [(1, 0, 0), (1, 1, 0), (1, 2, 0)])


INPUT_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<life>
  <world>
    <cells>{cells}</cells>
    <species>{species}</species>
    <iterations>{iterations}</iterations>
  </world>
  <organisms>
{organisms}
  </organisms>
</life>
"""


def input_document(cells, species, iterations, organisms):
    body = "\n".join(
        f"    <organism><x_pos>{x}</x_pos><y_pos>{y}</y_pos><species>{s}</species></organism>"
        for x, y, s in organisms
    )
    return INPUT_TEMPLATE.format(cells=cells, species=species, iterations=iterations, organisms=body)


@pytest.fixture
def write_input(tmp_path):
    def _write(cells, species, iterations, organisms, name="input.xml"):
        path = tmp_path / name
        path.write_text(input_document(cells, species, iterations, organisms), encoding="utf-8")
        return path
    return _write
