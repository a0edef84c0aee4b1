from itertools import product

import pytest

from tentsat.cnf import CNFFormula
from tentsat.constraints import (
    association_implies_tent,
    build_complete_cnf,
    position_before,
    tent_at_most_one_tree,
    tent_needs_tree,
    tents_not_touching,
    tree_at_most_one_tent,
    tree_needs_tent,
    no_tent_on_tree,
)
from tentsat.grid import Grid, Position
from tentsat.satmap import SatMap
from tentsat.sequential import SequentialCounter


@pytest.fixture
def grid():
    return Grid.from_rows([1, 1], [1, 0, 1], ["T..", "..T"])


@pytest.fixture
def mapping(grid):
    return SatMap.from_grid(grid)


def _satisfied(formula, true_vars):
    return all(
        any((lit > 0) == (abs(lit) in true_vars) for lit in clause)
        for clause in formula
    )


def _violated(formula, true_vars):
    return [
        clause
        for clause in formula
        if not any((lit > 0) == (abs(lit) in true_vars) for lit in clause)
    ]


def test_no_tent_on_tree(grid):
    f = CNFFormula()
    no_tent_on_tree(grid, f)
    assert f.clauses == [(-1,), (-6,)]


def test_association_implies_tent(grid, mapping):
    f = CNFFormula()
    association_implies_tent(grid, mapping, f)
    assert f.clauses == [(-7, 4), (-8, 2), (-9, 3), (-10, 5)]


def test_tent_needs_tree(grid, mapping):
    f = CNFFormula()
    tent_needs_tree(grid, mapping, f)
    assert f.clauses == [(-2, 8), (-3, 9), (-4, 7), (-5, 10)]


def test_tree_needs_tent(grid, mapping):
    f = CNFFormula()
    tree_needs_tent(grid, mapping, f)
    assert f.clauses == [(7, 8), (9, 10)]


def test_tree_without_empty_neighbour_gives_empty_clause():
    g = Grid.from_rows([0], [0, 0], ["TT"])
    f = CNFFormula()
    tree_needs_tent(g, SatMap.from_grid(g), f)
    assert f.clauses == [(), ()]


def test_tree_at_most_one_tent(grid, mapping):
    f = CNFFormula()
    tree_at_most_one_tent(grid, mapping, f)
    assert f.clauses == [(-7, -8), (-9, -10)]


def test_tent_at_most_one_tree_none_needed(grid, mapping):
    f = CNFFormula()
    tent_at_most_one_tree(grid, mapping, f)
    assert f.clauses == []


def test_tent_at_most_one_tree_between_two_trees():
    g = Grid.from_rows([0], [0, 0, 0], ["T.T"])
    f = CNFFormula()
    tent_at_most_one_tree(g, SatMap.from_grid(g), f)
    assert f.clauses == [(-4, -5)]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Position(0, 1), Position(1, 0), True),
        (Position(1, 1), Position(1, 2), True),
        (Position(1, 1), Position(1, 1), False),
        (Position(1, 0), Position(0, 5), False),
        (Position(2, 3), Position(2, 1), False),
    ],
)
def test_position_before(a, b, expected):
    assert position_before(a, b) is expected


def test_tents_not_touching(grid):
    f = CNFFormula()
    tents_not_touching(grid, f)
    assert f.clauses == [(-2, -5), (-2, -3), (-2, -4), (-3, -5), (-4, -5)]


def test_tents_not_touching_lists_each_pair_once(grid):
    f = CNFFormula()
    tents_not_touching(grid, f)
    pairs = [frozenset(c) for c in f]
    assert len(pairs) == len(set(pairs))


def test_complete_cnf_clause_count(grid, mapping):
    f = CNFFormula()
    build_complete_cnf(grid, mapping, f)
    assert len(f) == 33
    assert f.clauses[:2] == [(-1,), (-6,)]


def test_complete_cnf_accepts_solution(grid, mapping):
    f = CNFFormula()
    build_complete_cnf(grid, mapping, f)
    assert _violated(f.clauses, {3, 4, 7, 9}) == []
    assert (-2, -5) in _violated(f.clauses, {2, 5, 8, 10})


def test_complete_cnf_has_unique_tent_layout(grid, mapping):
    f = CNFFormula()
    build_complete_cnf(grid, mapping, f)
    layouts = set()
    for bits in product((False, True), repeat=mapping.total_vars):
        true_vars = {v for v, bit in enumerate(bits, start=1) if bit}
        if _satisfied(f, true_vars):
            layouts.add(frozenset(v for v in true_vars if v <= 6))
    assert layouts == {frozenset({3, 4})}


def test_complete_cnf_with_counter_uses_aux_variables(grid, mapping):
    plain = CNFFormula()
    build_complete_cnf(grid, mapping, plain)
    counted = CNFFormula()
    counter = SequentialCounter()
    build_complete_cnf(grid, mapping, counted, counter)
    assert counted.clauses[:19] == plain.clauses[:19]
    assert counter.last_variable > mapping.total_vars
    assert counted.max_variable() == counter.last_variable