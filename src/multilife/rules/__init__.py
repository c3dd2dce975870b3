"""Evolution rules deciding each cell's next state."""

from .base import EvolutionRule
from .conway import (
    ConwayMultiSpeciesRule,
    HighLifeMultiSpeciesRule,
    RULES,
    TIE_BREAKS,
    get_rule,
    majority_species,
)

__all__ = [
    'EvolutionRule',
    'ConwayMultiSpeciesRule',
    'HighLifeMultiSpeciesRule',
    'RULES',
    'TIE_BREAKS',
    'get_rule',
    'majority_species',
]
