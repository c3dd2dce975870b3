"""Tests for population and dynamics metrics."""
import numpy as np
import pytest

from multilife.evaluation import (
    dominant_species,
    find_period,
    hamming_distance,
    is_extinct,
    population_trajectory,
    species_population,
)
from multilife.evolution import SimulationConfig, run_simulation
from multilife.model import SpeciesId

from conftest import make_world


def test_species_population_includes_absent_species():
    world = make_world(4, 3, [(0, 0, 0), (1, 0, 0), (2, 0, 2)])
    assert species_population(world) == {0: 2, 1: 0, 2: 1}


def test_population_trajectory(vertical_blinker):
    generations = run_simulation(SimulationConfig(3, 2), vertical_blinker)
    trajectory = population_trajectory(generations)
    assert trajectory.shape == (3, 1)
    np.testing.assert_array_equal(trajectory[:, 0], [3, 3, 3])


def test_population_trajectory_empty():
    assert population_trajectory([]).shape == (0, 0)


def test_dominant_species():
    assert dominant_species(make_world(3, 3, [(0, 0, 2), (1, 0, 2), (2, 0, 1)])) == SpeciesId(2)
    assert dominant_species(make_world(3, 3, [(0, 0, 2), (1, 0, 1)])) == SpeciesId(1)
    assert dominant_species(make_world(3, 3, [])) is None


def test_is_extinct():
    assert is_extinct(make_world(3, 1, []))
    assert not is_extinct(make_world(3, 1, [(0, 0, 0)]))


def test_hamming_distance():
    a = make_world(2, 2, [(0, 0, 0), (1, 1, 1)])
    b = make_world(2, 2, [(0, 0, 1), (1, 1, 1)])
    assert hamming_distance(a, a) == 0.0
    assert hamming_distance(a, b) == 0.25
    assert hamming_distance(a, make_world(2, 2, [])) == 0.5
    with pytest.raises(ValueError):
        hamming_distance(a, make_world(3, 2, []))


def test_find_period_of_blinker(vertical_blinker):
    generations = run_simulation(SimulationConfig(3, 6), vertical_blinker)
    assert find_period(generations) == 2
    assert find_period(generations, max_period=1) == -1


def test_find_period_of_still_life_and_extinction():
    block = make_world(4, 1, [(1, 1, 0), (2, 1, 0), (1, 2, 0), (2, 2, 0)])
    assert find_period(run_simulation(SimulationConfig(4, 2), block)) == 1
    lonely = make_world(4, 1, [(1, 1, 0)])
    assert find_period(run_simulation(SimulationConfig(4, 1), lonely)) == -1
    assert find_period(run_simulation(SimulationConfig(4, 2), lonely)) == 1


def test_find_period_needs_history(vertical_blinker):
    assert find_period([vertical_blinker]) == -1
