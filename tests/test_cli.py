"""End-to-end runs of the command-line entry point."""
import json

import pytest

from multilife.cli import main
from multilife.io import read_simulation

from conftest import alive_set


@pytest.fixture
def blinker_input(write_input):
    return write_input(3, 1, 1, [(1, 0, 0), (1, 1, 0), (1, 2, 0)])


def test_blinker_scenario(tmp_path, blinker_input, capsys):
    output = tmp_path / "output.xml"
    assert main(["-i", str(blinker_input), "-o", str(output)]) == 0
    assert "Done." in capsys.readouterr().out

    config, world = read_simulation(output)
    assert config.iterations == 1
    assert alive_set(world) == {(0, 1, 0), (1, 1, 0), (2, 1, 0)}


def test_iterations_override(tmp_path, blinker_input):
    output = tmp_path / "output.xml"
    assert main(["-i", str(blinker_input), "-o", str(output), "--iterations", "2"]) == 0
    _, world = read_simulation(output)
    assert alive_set(world) == {(1, 0, 0), (1, 1, 0), (1, 2, 0)}


def test_zero_iterations_keeps_initial_world(tmp_path, write_input):
    path = write_input(4, 2, 0, [(0, 0, 1), (3, 3, 0)])
    output = tmp_path / "output.xml"
    assert main(["-i", str(path), "-o", str(output)]) == 0
    _, world = read_simulation(output)
    assert alive_set(world) == {(0, 0, 1), (3, 3, 0)}


def test_invalid_input_reports_error(tmp_path, write_input, capsys):
    path = write_input(3, 1, 1, [(5, 0, 0)])
    assert main(["-i", str(path), "-o", str(tmp_path / "output.xml")]) == 1
    assert "Error: Value of element 'x_pos'" in capsys.readouterr().err
    assert not (tmp_path / "output.xml").exists()


def test_missing_input_file(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "nope.xml"), "-o", str(tmp_path / "out.xml")]) == 1
    assert "nonexistent" in capsys.readouterr().err


def test_summary_and_figures(tmp_path, blinker_input):
    summary_path = tmp_path / "runs" / "summary.json"
    figures = tmp_path / "figures"
    assert main([
        "-i", str(blinker_input),
        "-o", str(tmp_path / "output.xml"),
        "--iterations", "4",
        "--rule", "highlife",
        "--summary", str(summary_path),
        "--figures", str(figures),
    ]) == 0

    with open(summary_path) as f:
        summary = json.load(f)
    assert summary["rule"] == "highlife"
    assert summary["iterations"] == 4
    assert summary["final_population"] == {"0": 3}
    assert summary["period"] == 2
    for name in ("initial.png", "final.png", "generations.png"):
        assert (figures / name).exists()
