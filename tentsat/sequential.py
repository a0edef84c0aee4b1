"""Cardinality constraints encoded with a sequential counter and auxiliary variables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tentsat.cardinality import column_variables, row_variables
from tentsat.cnf import CNFFormula
from tentsat.grid import Grid


@dataclass
class SequentialCounter:
    """Issues auxiliary variables and emits sequential-counter encodings.

    ``last_variable`` is the highest variable number handed out or seen so far.
    """

    last_variable: int = 0

    def new_variable(self) -> int:
        """A fresh auxiliary variable."""
        self.last_variable += 1
        return self.last_variable

    def _reserve_above(self, formula: CNFFormula, variables: Sequence[int]) -> None:
        highest = max(
            [formula.max_variable(), *(abs(v) for v in variables)], default=0
        )
        self.last_variable = max(self.last_variable, highest)

    def at_most_k(self, formula: CNFFormula, variables: Sequence[int], k: int) -> None:
        """At most k of the literals are true."""
        variables = list(variables)
        n = len(variables)
        self._reserve_above(formula, variables)
        if k < 0:
            formula.add_clause(())
            return
        if k >= n:
            return
        if k == 0:
            for v in variables:
                formula.add_clause((-v,))
            return

        # s[i][j]: among the first i+1 literals, at least j+1 are true.
        s = [[self.new_variable() for _ in range(k)] for _ in range(n)]

        formula.add_clause((-variables[0], s[0][0]))
        for j in range(1, k):
            formula.add_clause((-s[0][j],))

        for x, prev, cur in zip(variables[1:], s, s[1:]):
            formula.add_clause((-x, cur[0]))
            for j in range(k):
                formula.add_clause((-prev[j], cur[j]))
            for j in range(1, k):
                formula.add_clause((-x, -prev[j - 1], cur[j]))
            formula.add_clause((-x, -prev[k - 1]))

    def at_least_k(self, formula: CNFFormula, variables: Sequence[int], k: int) -> None:
        """At least k of the literals are true: at most n-k of them are false."""
        variables = list(variables)
        n = len(variables)
        if k <= 0:
            return
        if k > n:
            formula.add_clause(())
            return
        self.at_most_k(formula, [-v for v in variables], n - k)

    def exactly_k(self, formula: CNFFormula, variables: Sequence[int], k: int) -> None:
        """Exactly k of the literals are true."""
        variables = list(variables)
        self.at_least_k(formula, variables, k)
        self.at_most_k(formula, variables, k)

    def row_constraint(self, grid: Grid, formula: CNFFormula, row: int) -> None:
        """The row holds exactly its required number of tents."""
        self.exactly_k(formula, row_variables(grid, row), grid.row_counts[row])

    def row_constraints(self, grid: Grid, formula: CNFFormula) -> None:
        """Apply the tent count of every row."""
        for row in range(grid.height):
            self.row_constraint(grid, formula, row)

    def column_constraint(self, grid: Grid, formula: CNFFormula, column: int) -> None:
        """The column holds exactly its required number of tents."""
        self.exactly_k(
            formula, column_variables(grid, column), grid.column_counts[column]
        )

    def column_constraints(self, grid: Grid, formula: CNFFormula) -> None:
        """Apply the tent count of every column."""
        for column in range(grid.width):
            self.column_constraint(grid, formula, column)