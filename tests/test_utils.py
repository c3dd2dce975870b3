"""Tests for patterns, grid conversion and rendering."""
import numpy as np
import pytest

from multilife.errors import InvalidValueError, InvalidWorldError
from multilife.evolution import SimulationConfig, run_simulation
from multilife.model import Coordinate, GridSize, SpeciesId, World
from multilife.utils import (
    PATTERN_CATEGORIES,
    create_animation,
    get_pattern,
    place_pattern,
    random_world,
    species_colormap,
    visualize_generations,
    visualize_world,
    world_from_array,
    world_to_array,
)

from conftest import make_world


def test_get_pattern_returns_copy():
    glider = get_pattern('glider')
    glider[0, 0] = 1
    assert get_pattern('glider')[0, 0] == 0


def test_unknown_pattern():
    with pytest.raises(ValueError, match="Available patterns"):
        get_pattern('spaceship_factory')


@pytest.mark.parametrize("name, shape, alive", [
    ('block', (2, 2), 4),
    ('blinker', (1, 3), 3),
    ('pulsar', (13, 13), 48),
    ('lwss', (4, 5), 9),
    ('glider_gun', (9, 36), 36),
])
def test_pattern_shapes(name, shape, alive):
    pattern = get_pattern(name)
    assert pattern.shape == shape
    assert int(pattern.sum()) == alive


def test_still_lifes_do_not_change():
    for name in PATTERN_CATEGORIES['still_lifes']:
        size = GridSize(8)
        world = World(size, 1, place_pattern(size, get_pattern(name)))
        generations = run_simulation(SimulationConfig(8, 1), world)
        assert generations[1] == world, name


def test_pulsar_has_period_three():
    size = GridSize(17)
    world = World(size, 1, place_pattern(size, get_pattern('pulsar')))
    generations = run_simulation(SimulationConfig(17, 3), world)
    assert generations[3] == world
    assert generations[1] != world


def test_place_pattern_centered():
    cells = place_pattern(5, get_pattern('blinker'), species=2)
    assert {(c.coordinate.x, c.coordinate.y) for c in cells} == {(1, 2), (2, 2), (3, 2)}
    assert all(c.species == SpeciesId(2) for c in cells)


def test_place_pattern_at_position_is_clipped():
    cells = place_pattern(4, get_pattern('block'), position=(3, 3))
    assert [c.coordinate for c in cells] == [Coordinate(3, 3)]


def test_world_array_round_trip():
    world = make_world(4, 3, [(0, 0, 2), (3, 1, 0), (1, 3, 1)])
    grid = world_to_array(world)
    assert grid.shape == (4, 4)
    assert grid[0, 0] == 2
    assert grid[1, 3] == 0
    assert grid[3, 1] == 1
    assert (grid == -1).sum() == 13
    assert world_from_array(grid, 3) == world


def test_world_from_array_validation():
    with pytest.raises(InvalidWorldError):
        world_from_array(np.zeros((2, 3), dtype=int), 1)
    with pytest.raises(InvalidWorldError):
        world_from_array(np.full((2, 2), 4), 2)


def test_random_world_is_seeded():
    a = random_world(10, 3, density=0.4, seed=1)
    b = random_world(10, 3, density=0.4, seed=1)
    assert a == b
    assert 0 < a.population() < 100
    assert all(cell.species.value < 3 for cell in a.alive_cells())


def test_random_world_density_bounds():
    assert random_world(6, 2, density=0.0, seed=0).population() == 0
    assert random_world(6, 2, density=1.0, seed=0).population() == 36
    with pytest.raises(InvalidValueError):
        random_world(6, 2, density=1.5)


def test_species_colormap_has_dead_color():
    cmap, norm = species_colormap(3)
    assert cmap.N == 4
    assert norm(-1) == 0
    assert norm(2) == 3


def test_visualizations_are_saved(tmp_path, vertical_blinker):
    generations = run_simulation(SimulationConfig(3, 3), vertical_blinker)
    visualize_world(vertical_blinker, save_path=tmp_path / "world.png")
    visualize_generations(generations, save_path=tmp_path / "generations.png")
    create_animation(generations, save_path=tmp_path / "animation.gif", fps=4)
    assert (tmp_path / "world.png").stat().st_size > 0
    assert (tmp_path / "generations.png").stat().st_size > 0
    assert (tmp_path / "animation.gif").stat().st_size > 0


def test_rendering_empty_history_fails(tmp_path, vertical_blinker):
    with pytest.raises(InvalidValueError):
        visualize_generations([], save_path=tmp_path / "generations.png")
    with pytest.raises(InvalidValueError):
        create_animation([], save_path=tmp_path / "animation.gif")
    with pytest.raises(InvalidValueError):
        visualize_generations([vertical_blinker], num_frames_to_show=0,
                              save_path=tmp_path / "generations.png")
    assert not (tmp_path / "generations.png").exists()
    assert not (tmp_path / "animation.gif").exists()
