"""
Generation core for cellular automaton simulation.

Grid container, cell contract and toroidal rulesets.
"""

from .cell import Cell, CellState, SimpleCell
from .errors import GridInvariantError, InvalidDimensionError
from .generation import Generation, SimpleGeneration
from .ruleset import RuleParams, RulesetFn, alive_neighbors, apply_conway_ruleset, next_generation, wrap_coord

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'CellState',
    'SimpleCell',
    'GridInvariantError',
    'InvalidDimensionError',
    'Generation',
    'SimpleGeneration',
    'RuleParams',
    'RulesetFn',
    'alive_neighbors',
    'apply_conway_ruleset',
    'next_generation',
    'wrap_coord',
]
