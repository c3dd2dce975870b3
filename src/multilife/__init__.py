"""Multi-species Conway's Game of Life."""

from .errors import (
    MultiLifeError,
    InvalidValueError,
    InvalidCellError,
    InvalidWorldError,
    InvalidInputError,
    OutputWritingError,
)
from .model import Coordinate, SpeciesId, GridSize, Cell, CellState, World
from .rules import EvolutionRule, ConwayMultiSpeciesRule, HighLifeMultiSpeciesRule, get_rule
from .evolution import EvolutionService, SimulationConfig, run_simulation

__version__ = '0.1.0'

__all__ = [
    'MultiLifeError',
    'InvalidValueError',
    'InvalidCellError',
    'InvalidWorldError',
    'InvalidInputError',
    'OutputWritingError',
    'Coordinate',
    'SpeciesId',
    'GridSize',
    'Cell',
    'CellState',
    'World',
    'EvolutionRule',
    'ConwayMultiSpeciesRule',
    'HighLifeMultiSpeciesRule',
    'get_rule',
    'EvolutionService',
    'SimulationConfig',
    'run_simulation',
]
