"""Command-line front end: build CNF for a grid, run a solver, show results."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Sequence

from tentsat.cnf import CNFFormula
from tentsat.constraints import build_complete_cnf
from tentsat.dimacs import (
    SolutionError,
    read_solution,
    render_solution,
    solution_is_sat,
    write_dimacs,
    write_solution_json,
)
from tentsat.grid import GridFormatError, read_grid
from tentsat.satmap import SatMap
from tentsat.sequential import SequentialCounter
from tentsat.threesat import formula_to_3sat, read_dimacs, write_dimacs_3sat

CNF_FILE = "temp.cnf"
RESULT_FILE = "temp.out"
JSON_FILE = "donnees_grilles.json"


def _build(grid, sequential: bool) -> tuple[CNFFormula, int]:
    mapping = SatMap.from_grid(grid)
    formula = CNFFormula()
    counter = SequentialCounter() if sequential else None
    build_complete_cnf(grid, mapping, formula, counter)
    num_vars = mapping.total_vars
    if counter is not None:
        num_vars = max(num_vars, counter.last_variable)
    return formula, num_vars


def grid_to_cnf(
    grid_path: str | Path, output_path: str | Path, sequential: bool = False
) -> tuple[CNFFormula, int]:
    """Encode a grid file as CNF and write it in DIMACS; return formula and variable count."""
    grid = read_grid(grid_path)
    formula, num_vars = _build(grid, sequential)
    write_dimacs(output_path, formula, num_vars)
    return formula, num_vars


def show_solution(grid_path: str | Path, result_path: str | Path) -> str:
    """The solved grid described by a solver result file."""
    grid = read_grid(grid_path)
    mapping = SatMap.from_grid(grid)
    values = read_solution(result_path, mapping.total_vars)
    return "Solution :\n" + render_solution(grid, values)


def solve(
    grid_path: str | Path,
    sequential: bool = False,
    solver: str | Sequence[str] = "minisat",
    workdir: str | Path | None = None,
) -> dict[int, bool] | None:
    """Solve a grid with an external SAT solver.

    The solver is called with the CNF file and the result file as its last two
    arguments. On success the solution is also written as JSON in workdir.
    Returns the variable values, or None when the solver finds no solution.
    """
    directory = Path(workdir) if workdir is not None else Path.cwd()
    cnf_path = directory / CNF_FILE
    result_path = directory / RESULT_FILE

    grid = read_grid(grid_path)
    formula, num_vars = _build(grid, sequential)
    write_dimacs(cnf_path, formula, num_vars)

    command = [solver] if isinstance(solver, str) else list(solver)
    result_path.unlink(missing_ok=True)
    subprocess.run([*command, str(cnf_path), str(result_path)], check=False)

    if not solution_is_sat(result_path):
        return None
    values = read_solution(result_path, num_vars)
    write_solution_json(directory / JSON_FILE, grid, values)
    return values


def cnf_to_3sat(
    input_path: str | Path, output_path: str | Path
) -> tuple[CNFFormula, int]:
    """Convert a DIMACS CNF file to 3-SAT; return the new formula and variable count."""
    formula, num_vars = read_dimacs(input_path)
    reduced, total = formula_to_3sat(formula, num_vars)
    write_dimacs_3sat(output_path, reduced, total)
    return reduced, total


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tentsat", description="Solve Tents puzzles through SAT."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("grid-cnf", help="write the CNF of a grid")
    encode.add_argument("grid")
    encode.add_argument("output")
    encode.add_argument("--sequential", action="store_true")

    show = commands.add_parser("show", help="show a grid solved by a SAT solver")
    show.add_argument("grid")
    show.add_argument("result")

    run = commands.add_parser("solve", help="solve a grid with a SAT solver")
    run.add_argument("grid")
    run.add_argument("--sequential", action="store_true")
    run.add_argument("--solver", default="minisat")
    run.add_argument("--workdir", default=None)

    reduce = commands.add_parser("cnf-3sat", help="convert a DIMACS CNF to 3-SAT")
    reduce.add_argument("input")
    reduce.add_argument("output")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.command == "grid-cnf":
            grid_to_cnf(args.grid, args.output, args.sequential)
        elif args.command == "show":
            print(show_solution(args.grid, args.result))
        elif args.command == "solve":
            values = solve(args.grid, args.sequential, args.solver, args.workdir)
            if values is None:
                print("No SAT solution.")
                return 0
            print("Solution :")
            print(render_solution(read_grid(args.grid), values))
            json_path = Path(args.workdir or ".") / JSON_FILE
            print(f"\nFile written: {json_path}")
        else:
            cnf_to_3sat(args.input, args.output)
    except (GridFormatError, SolutionError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0