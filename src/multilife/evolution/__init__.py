"""Generation stepping and simulation runs."""

from .service import EvolutionService
from .simulation import SimulationConfig, run_simulation

__all__ = [
    'EvolutionService',
    'SimulationConfig',
    'run_simulation',
]
