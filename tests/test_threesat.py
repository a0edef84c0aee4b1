from itertools import product

import pytest

from tentsat.cnf import CNFFormula
from tentsat.threesat import (
    clause_to_3sat,
    formula_to_3sat,
    parse_dimacs,
    read_dimacs,
    write_dimacs_3sat,
)


def _satisfiable(clauses, num_vars):
    for bits in product((False, True), repeat=num_vars):
        if all(any(bits[abs(lit) - 1] == (lit > 0) for lit in c) for c in clauses):
            return True
    return False


def test_parse_dimacs_reads_header_and_clauses():
    formula, num_vars = parse_dimacs("p cnf 5 2\n1 -2 3 0\n4 5 0\n")
    assert num_vars == 5
    assert list(formula) == [(1, -2, 3), (4, 5)]


def test_parse_dimacs_clauses_may_span_lines():
    formula, _ = parse_dimacs("p cnf 3 2\n1\n-2 0 3\n0")
    assert list(formula) == [(1, -2), (3,)]


def test_parse_dimacs_drops_unterminated_clause():
    formula, _ = parse_dimacs("p cnf 3 2\n1 2 0\n3")
    assert list(formula) == [(1, 2)]


def test_parse_dimacs_stops_at_non_integer():
    formula, _ = parse_dimacs("p cnf 3 3\n1 0\nx 2 0\n")
    assert list(formula) == [(1,)]


@pytest.mark.parametrize(
    "text",
    ["", "p cnf 3", "c comment\np cnf 1 1\n1 0", "p dnf 2 1\n1 0", "p cnf a 1\n1 0"],
)
def test_parse_dimacs_rejects_bad_header(text):
    with pytest.raises(ValueError):
        parse_dimacs(text)


def test_read_dimacs_from_file(tmp_path):
    path = tmp_path / "in.cnf"
    path.write_text("p cnf 4 2\n1 2 3 4 0\n-1 0\n")
    formula, num_vars = read_dimacs(path)
    assert num_vars == 4
    assert len(formula) == 2
    assert list(formula)[0] == (1, 2, 3, 4)


def test_read_dimacs_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_dimacs(tmp_path / "absent.cnf")


def test_short_clause_is_copied_without_new_variables():
    out = CNFFormula()
    assert clause_to_3sat((1, -2, 3), out, 10) == 10
    assert list(out) == [(1, -2, 3)]


def test_empty_clause_is_kept():
    out = CNFFormula()
    assert clause_to_3sat((), out, 4) == 4
    assert list(out) == [()]


def test_four_literal_clause_uses_one_link():
    out = CNFFormula()
    assert clause_to_3sat((1, 2, 3, 4), out, 5) == 6
    assert list(out) == [(1, 2, 5), (-5, 3, 4)]


def test_five_literal_clause_chain():
    out = CNFFormula()
    assert clause_to_3sat((1, 2, 3, 4, 5), out, 6) == 8
    assert list(out) == [(1, 2, 6), (-6, 3, 7), (-7, 4, 5)]


def test_formula_to_3sat_updates_variable_count():
    formula = CNFFormula([(1, 2, 3, 4, 5), (-1, 2)])
    result, total = formula_to_3sat(formula, 5)
    assert total == 7
    assert list(result) == [(1, 2, 6), (-6, 3, 7), (-7, 4, 5), (-1, 2)]
    assert all(len(clause) <= 3 for clause in result)


@pytest.mark.parametrize(
    "clauses,num_vars,expected",
    [
        ([(1, 2, 3, 4, 5)], 5, True),
        ([(1, 2, 3, 4, 5), (-1,), (-2,), (-3,), (-4,), (-5,)], 5, False),
        ([(1, 2, 3, 4), (-1,), (-2,), (-3,)], 4, True),
        ([(1, -2, 3, -4, 5, 6), (-1, -3), (2, 4, -6), (-5,)], 6, True),
    ],
)
def test_reduction_preserves_satisfiability(clauses, num_vars, expected):
    result, total = formula_to_3sat(CNFFormula(list(clauses)), num_vars)
    assert _satisfiable(clauses, num_vars) is expected
    assert _satisfiable(list(result), total) is expected


def test_write_dimacs_3sat_round_trip(tmp_path):
    formula, total = formula_to_3sat(CNFFormula([(1, 2, 3, 4, 5)]), 5)
    path = tmp_path / "out.cnf"
    write_dimacs_3sat(path, formula, total)
    assert path.read_text() == "p cnf 7 3\n1 2 6 0\n-6 3 7 0\n-7 4 5 0\n"
    again, num_vars = read_dimacs(path)
    assert num_vars == total
    assert list(again) == list(formula)