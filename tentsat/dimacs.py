"""DIMACS output, solver result parsing and solution rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from tentsat.cnf import CNFFormula
from tentsat.grid import Grid, Position
from tentsat.satmap import tent_var


class SolutionError(ValueError):
    """Raised when a solver result is missing, unsatisfiable or malformed."""


def format_dimacs(formula: CNFFormula, num_vars: int) -> str:
    """The formula in DIMACS CNF text, each clause ending with 0."""
    lines = [f"p cnf {num_vars} {len(formula)}\n"]
    lines.extend("".join(f"{lit} " for lit in clause) + "0\n" for clause in formula)
    return "".join(lines)


def write_dimacs(path: str | Path, formula: CNFFormula, num_vars: int) -> None:
    """Write the formula to a DIMACS CNF file."""
    Path(path).write_text(format_dimacs(formula, num_vars))


def parse_solution(text: str, num_vars: int) -> dict[int, bool]:
    """Values of the variables up to num_vars from a solver result beginning with SAT."""
    tokens = text.split()
    if not tokens:
        raise SolutionError("empty solver result")
    if tokens[0] != "SAT":
        raise SolutionError(f"solver result is {tokens[0]!r}, not SAT")

    values: dict[int, bool] = {}
    for token in tokens[1:]:
        try:
            literal = int(token)
        except ValueError:
            break
        if literal == 0:
            break
        var = abs(literal)
        if var <= num_vars:
            values[var] = literal > 0
    return values


def read_solution(path: str | Path, num_vars: int) -> dict[int, bool]:
    """Read a solver result file; see parse_solution."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise SolutionError(f"cannot read solver result {path}: {exc}") from exc
    return parse_solution(text, num_vars)


def solution_is_sat(path: str | Path) -> bool:
    """Whether a solver result file starts with SAT or SATISFIABLE."""
    try:
        tokens = Path(path).read_text().split(maxsplit=1)
    except OSError:
        return False
    return bool(tokens) and tokens[0] in ("SAT", "SATISFIABLE")


def _is_tent(grid: Grid, values: Mapping[int, bool], pos: Position) -> bool:
    return bool(values.get(tent_var(grid, pos), False))


def render_solution(grid: Grid, values: Mapping[int, bool]) -> str:
    """Solved grid as text: 'T' tree, 'X' tent, '.' empty, one row per line."""
    rows = []
    for row in range(grid.height):
        cells = []
        for column in range(grid.width):
            pos = Position(row, column)
            if grid.is_tree(pos):
                cells.append("T ")
            elif _is_tent(grid, values, pos):
                cells.append("X ")
            else:
                cells.append(". ")
        rows.append("".join(cells))
    return "\n".join(rows)


def _json_rows(rows: list[list[str]]) -> str:
    body = ",\n".join(
        "    [" + ", ".join(f'"{cell}"' for cell in row) + "]" for row in rows
    )
    return body + "\n"


def solution_json(grid: Grid, values: Mapping[int, bool]) -> str:
    """Counts, initial grid and solved grid as a JSON document."""
    initial = [
        ["A" if grid.is_tree(Position(r, c)) else "." for c in range(grid.width)]
        for r in range(grid.height)
    ]
    solved = [
        [
            "A"
            if grid.is_tree(Position(r, c))
            else "T"
            if _is_tent(grid, values, Position(r, c))
            else "."
            for c in range(grid.width)
        ]
        for r in range(grid.height)
    ]
    row_counts = ", ".join(str(n) for n in grid.row_counts)
    column_counts = ", ".join(str(n) for n in grid.column_counts)
    return (
        "{\n"
        f'  "indicesLignes": [{row_counts}],\n'
        f'  "indicesColonnes": [{column_counts}],\n'
        '  "grilleInitiale": [\n'
        f"{_json_rows(initial)}"
        "  ],\n"
        '  "grilleSolution": [\n'
        f"{_json_rows(solved)}"
        "  ]\n"
        "}\n"
    )


def write_solution_json(
    path: str | Path, grid: Grid, values: Mapping[int, bool]
) -> None:
    """Write solution_json to a file."""
    Path(path).write_text(solution_json(grid, values))