"""
Quine-McCluskey Boolean function minimization.

Finds all prime implicants of a function given as minterms and
don't-cares, selects the essential ones, and completes the cover with a
greedy heuristic. The result is a sum-of-products cover that reproduces the
function; it is small but not guaranteed to be globally minimal.
"""

from quine_mccluskey.config import SolverConfig
from quine_mccluskey.coverage import CoverageColumn, CoverageRow, CoverageTable
from quine_mccluskey.errors import (
    ConfigError,
    IncompleteCoverError,
    InvalidTermError,
    InvalidVariableCountError,
    InvariantError,
    QuineMcCluskeyError,
    TruthTableFormatError,
)
from quine_mccluskey.expression import (
    complement_sum_of_products,
    default_variable_names,
    sum_of_products,
)
from quine_mccluskey.grouping import Column, Group, combine_column
from quine_mccluskey.implicants import deduplicate, find_prime_implicants
from quine_mccluskey.logic_state import LogicState
from quine_mccluskey.loop import Loop
from quine_mccluskey.record import TermRecord
from quine_mccluskey.solver import Solution, minimize, solve, solve_complement
from quine_mccluskey.verify import CoverReport, check_cover

__all__ = [
    'LogicState',
    'TermRecord',
    'Group',
    'Column',
    'combine_column',
    'find_prime_implicants',
    'deduplicate',
    'CoverageRow',
    'CoverageColumn',
    'CoverageTable',
    'Loop',
    'Solution',
    'solve',
    'minimize',
    'solve_complement',
    'sum_of_products',
    'complement_sum_of_products',
    'default_variable_names',
    'check_cover',
    'CoverReport',
    'SolverConfig',
    'QuineMcCluskeyError',
    'InvalidTermError',
    'InvalidVariableCountError',
    'IncompleteCoverError',
    'InvariantError',
    'ConfigError',
    'TruthTableFormatError',
]
