"""Reading DIMACS CNF files and reducing clauses to at most three literals."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from tentsat.cnf import CNFFormula
from tentsat.dimacs import write_dimacs


def parse_dimacs(text: str) -> tuple[CNFFormula, int]:
    """Parse DIMACS CNF text that starts with its 'p cnf' header.

    Returns the formula and the variable count from the header. Literals are
    read until the first token that is not an integer; a trailing clause that
    is not closed by 0 is dropped.
    """
    tokens = text.split()
    if len(tokens) < 4 or tokens[0] != "p" or tokens[1] != "cnf":
        raise ValueError("missing 'p cnf <variables> <clauses>' header")
    try:
        num_vars = int(tokens[2])
        int(tokens[3])
    except ValueError:
        raise ValueError("invalid counts in 'p cnf' header") from None

    formula = CNFFormula()
    clause: list[int] = []
    for token in tokens[4:]:
        try:
            literal = int(token)
        except ValueError:
            break
        if literal == 0:
            formula.add_clause(clause)
            clause = []
        else:
            clause.append(literal)
    return formula, num_vars


def read_dimacs(path: str | Path) -> tuple[CNFFormula, int]:
    """Read and parse a DIMACS CNF file."""
    return parse_dimacs(Path(path).read_text())


def write_dimacs_3sat(path: str | Path, formula: CNFFormula, num_vars: int) -> None:
    """Write a formula to a DIMACS CNF file with the given variable count."""
    write_dimacs(path, formula, num_vars)


def clause_to_3sat(clause: Iterable[int], formula: CNFFormula, next_var: int) -> int:
    """Add clauses of at most three literals equivalent to one clause.

    Longer clauses are split into a chain linked by fresh variables numbered
    from next_var. Returns the next unused variable number.
    """
    literals = list(clause)
    n = len(literals)
    if n <= 3:
        formula.add_clause(literals)
        return next_var

    prev = next_var
    next_var += 1
    formula.add_clause((literals[0], literals[1], prev))

    for literal in literals[2 : n - 2]:
        link = next_var
        next_var += 1
        formula.add_clause((-prev, literal, link))
        prev = link

    formula.add_clause((-prev, literals[-2], literals[-1]))
    return next_var


def formula_to_3sat(formula: CNFFormula, total_vars: int) -> tuple[CNFFormula, int]:
    """Reduce every clause of the formula; return the new formula and variable count."""
    result = CNFFormula()
    next_var = total_vars + 1
    for clause in formula:
        next_var = clause_to_3sat(clause, result, next_var)
    return result, next_var - 1