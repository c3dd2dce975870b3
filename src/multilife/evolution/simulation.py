"""Run a simulation for a configured number of generations."""
from dataclasses import dataclass
from typing import List, Optional

from tqdm import tqdm

from ..errors import InvalidValueError, InvalidWorldError
from ..model import World
from ..model.values import as_int
from ..rules import ConwayMultiSpeciesRule, EvolutionRule
from .service import EvolutionService


@dataclass(frozen=True)
class SimulationConfig:
    """Grid side and number of generations to compute."""
    size: int
    iterations: int

    def __post_init__(self):
        size = as_int(self.size, 'size')
        iterations = as_int(self.iterations, 'iterations')
        if size <= 0:
            raise InvalidValueError("Value of element 'cells' must be positive number")
        if iterations < 0:
            raise InvalidValueError("Value of element 'iterations' must be zero or positive number")
        object.__setattr__(self, 'size', size)
        object.__setattr__(self, 'iterations', iterations)


def run_simulation(config: SimulationConfig,
                   world: World,
                   rule: Optional[EvolutionRule] = None,
                   progress: bool = False) -> List[World]:
    """
    Evolve ``world`` for ``config.iterations`` generations.

    Args:
        config: Simulation parameters; ``config.size`` must match the world
        world: Initial generation
        rule: Evolution rule, Conway's multi-species rule by default
        progress: Show a tqdm progress bar

    Returns:
        Generations 0..iterations, the initial world first
    """
    if config.size != world.size.cells:
        raise InvalidWorldError(
            f"Configured grid size {config.size} does not match world size {world.size.cells}"
        )
    service = EvolutionService(rule if rule is not None else ConwayMultiSpeciesRule())

    generations = [world]
    history = service.run(world, config.iterations)
    generations.extend(tqdm(history, total=config.iterations, desc="Evolving", disable=not progress))
    return generations
