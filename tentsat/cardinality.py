"""Cardinality constraints encoded by forbidding or requiring variable subsets."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from tentsat.cnf import CNFFormula
from tentsat.grid import Grid, Position
from tentsat.satmap import tent_var


def at_most_k(formula: CNFFormula, variables: Sequence[int], k: int) -> None:
    """Forbid every group of k+1 variables from being true together."""
    variables = list(variables)
    if k < 0 or k >= len(variables):
        return
    for group in combinations(variables, k + 1):
        formula.add_clause(-v for v in group)


def at_least_k(formula: CNFFormula, variables: Sequence[int], k: int) -> None:
    """Require a true variable in every group of n-k+1 variables."""
    variables = list(variables)
    n = len(variables)
    if k <= 0:
        return
    if k > n:
        formula.add_clause(())
        return
    for group in combinations(variables, n - k + 1):
        formula.add_clause(group)


def exactly_k(formula: CNFFormula, variables: Sequence[int], k: int) -> None:
    """Exactly k of the variables are true."""
    variables = list(variables)
    at_least_k(formula, variables, k)
    at_most_k(formula, variables, k)


def row_variables(grid: Grid, row: int) -> list[int]:
    """Tent variables of one row, left to right."""
    if not 0 <= row < grid.height:
        raise IndexError(f"row {row} is outside the grid")
    return [tent_var(grid, Position(row, column)) for column in range(grid.width)]


def column_variables(grid: Grid, column: int) -> list[int]:
    """Tent variables of one column, top to bottom."""
    if not 0 <= column < grid.width:
        raise IndexError(f"column {column} is outside the grid")
    return [tent_var(grid, Position(row, column)) for row in range(grid.height)]


def row_constraint(grid: Grid, formula: CNFFormula, row: int) -> None:
    """The row holds exactly its required number of tents."""
    exactly_k(formula, row_variables(grid, row), grid.row_counts[row])


def row_constraints(grid: Grid, formula: CNFFormula) -> None:
    """Apply the tent count of every row."""
    for row in range(grid.height):
        row_constraint(grid, formula, row)


def column_constraint(grid: Grid, formula: CNFFormula, column: int) -> None:
    """The column holds exactly its required number of tents."""
    exactly_k(formula, column_variables(grid, column), grid.column_counts[column])


def column_constraints(grid: Grid, formula: CNFFormula) -> None:
    """Apply the tent count of every column."""
    for column in range(grid.width):
        column_constraint(grid, formula, column)