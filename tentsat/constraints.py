"""Clauses that encode the rules of the Tents puzzle."""

from __future__ import annotations

from itertools import combinations

from tentsat import cardinality
from tentsat.cnf import CNFFormula
from tentsat.grid import Grid, Position
from tentsat.neighbourhood import adjacent_trees, empty_neighbours, n8_neighbours
from tentsat.satmap import SatMap, tent_var
from tentsat.sequential import SequentialCounter


def no_tent_on_tree(grid: Grid, formula: CNFFormula) -> None:
    """A cell holding a tree holds no tent: one unit clause per tree."""
    for tree in grid.trees:
        formula.add_clause((-tent_var(grid, tree),))


def association_implies_tent(
    grid: Grid, mapping: SatMap, formula: CNFFormula
) -> None:
    """A tree paired with a cell puts a tent on that cell."""
    for assoc in mapping.associations:
        formula.add_clause((-assoc.var, tent_var(grid, assoc.cell)))


def tent_needs_tree(grid: Grid, mapping: SatMap, formula: CNFFormula) -> None:
    """A tent on an empty cell is paired with at least one adjacent tree."""
    for cell in grid.empty_cells:
        clause = [-tent_var(grid, cell)]
        clause.extend(
            mapping.assoc_var(tree, cell) for tree in adjacent_trees(grid, cell)
        )
        formula.add_clause(clause)


def tree_needs_tent(grid: Grid, mapping: SatMap, formula: CNFFormula) -> None:
    """Every tree is paired with at least one empty neighbour."""
    for tree in grid.trees:
        formula.add_clause(
            mapping.assoc_var(tree, cell) for cell in empty_neighbours(grid, tree)
        )


def tree_at_most_one_tent(grid: Grid, mapping: SatMap, formula: CNFFormula) -> None:
    """No tree is paired with two different cells."""
    for tree in grid.trees:
        for first, second in combinations(empty_neighbours(grid, tree), 2):
            formula.add_clause(
                (-mapping.assoc_var(tree, first), -mapping.assoc_var(tree, second))
            )


def tent_at_most_one_tree(grid: Grid, mapping: SatMap, formula: CNFFormula) -> None:
    """No cell is paired with two different trees."""
    for cell in grid.empty_cells:
        for first, second in combinations(adjacent_trees(grid, cell), 2):
            formula.add_clause(
                (-mapping.assoc_var(first, cell), -mapping.assoc_var(second, cell))
            )


def position_before(a: Position, b: Position) -> bool:
    """Whether a comes strictly before b in reading order (row, then column)."""
    return (a.row, a.column) < (b.row, b.column)


def tents_not_touching(grid: Grid, formula: CNFFormula) -> None:
    """No two tents touch, orthogonally or diagonally; each pair is listed once."""
    for cell in grid.empty_cells:
        for other in n8_neighbours(grid, cell):
            if grid.is_empty(other) and position_before(cell, other):
                formula.add_clause((-tent_var(grid, cell), -tent_var(grid, other)))


def build_complete_cnf(
    grid: Grid,
    mapping: SatMap,
    formula: CNFFormula,
    counter: SequentialCounter | None = None,
) -> None:
    """Add every puzzle rule and the row and column tent counts to the formula.

    With a counter, tent counts use the sequential-counter encoding;
    without one, they use the subset encoding.
    """
    no_tent_on_tree(grid, formula)
    association_implies_tent(grid, mapping, formula)
    tent_needs_tree(grid, mapping, formula)
    tree_needs_tent(grid, mapping, formula)
    tree_at_most_one_tent(grid, mapping, formula)
    tent_at_most_one_tree(grid, mapping, formula)
    tents_not_touching(grid, formula)

    if counter is None:
        cardinality.row_constraints(grid, formula)
        cardinality.column_constraints(grid, formula)
    else:
        counter.row_constraints(grid, formula)
        counter.column_constraints(grid, formula)