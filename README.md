# tentsat

Turn a Tents puzzle into a propositional formula in conjunctive normal form,
hand it to an external SAT solver and read the solved grid back.

In Tents, each tree is paired with exactly one tent on an orthogonally
adjacent empty cell. No two tents may touch, diagonals included. The number
given for each row and column is the number of tents it must hold.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The package has no dependencies beyond the standard library.

## What it does not do

tentsat contains no SAT solver. The `solve` command and `tentsat.cli.solve`
run an external solver (by default a `minisat` executable on your `PATH`).
Building the CNF, converting it to 3-SAT and reading result files work
without one.

## Grid files

A grid file is plain text, with items separated by whitespace:

```
3 3
1 0 1
1 0 1
.T.
...
.T.
```

1. The height and the width, both positive.
2. One tent count for each row.
3. One tent count for each column.
4. One line per row. `T` marks a tree and `.` marks an empty cell.

A file that does not match this layout raises `tentsat.grid.GridFormatError`.

## Command line

```
tentsat grid-cnf GRID OUTPUT [--sequential]
tentsat show GRID RESULT
tentsat solve GRID [--sequential] [--solver SOLVER] [--workdir DIR]
tentsat cnf-3sat INPUT OUTPUT
```

- `grid-cnf` writes the CNF of a grid in DIMACS format.
- `show` prints the grid described by a solver result file. The file must
  begin with `SAT` followed by the literals of the assignment, as MiniSat
  writes it.
- `solve` writes `temp.cnf` in the working directory (the current directory
  unless `--workdir` is given), runs `SOLVER temp.cnf temp.out`, and reads
  `temp.out`. If the result is satisfiable it prints the solution and writes
  `donnees_grilles.json` in the same directory; otherwise it prints
  `No SAT solution.`
- `cnf-3sat` rewrites a DIMACS CNF file as an equisatisfiable formula whose
  clauses have at most three literals. The input must start with its
  `p cnf <variables> <clauses>` header; comment lines are not accepted.

Solutions are printed with `T` for a tree, `X` for a tent and `.` for an
empty cell. On a malformed grid, an unreadable file or a result that is not
`SAT`, the command prints `Error: ...` to standard error and exits with
status 1.

The JSON file holds the row counts (`indicesLignes`), the column counts
(`indicesColonnes`), the initial grid (`grilleInitiale`) and the solved grid
(`grilleSolution`). In both grids, `"A"` is a tree and `"."` an empty cell.
In the solved grid, `"T"` is a tent.

## Variables

Cell `(row, column)` has the tent variable `row * width + column + 1`. After
the tent variables come the association variables, one for each tree and
empty orthogonal neighbour of that tree, numbered in reading order of the
trees. The sequential encoding adds auxiliary variables after all of these.

## Two cardinality encodings

The row and column counts can be encoded in two ways:

- **Combinatorial** (`tentsat.cardinality`): one clause for every subset of
  variables that would break the count. It adds no variables, but the number
  of clauses grows quickly with the size of the grid.
- **Sequential counter** (`tentsat.sequential.SequentialCounter`): adds
  auxiliary variables and keeps the clause count roughly linear. It suits
  large grids such as 30×30. Select it with `--sequential`.

## Python API

The command steps are functions in `tentsat.cli`:

```python
from tentsat.cli import cnf_to_3sat, grid_to_cnf, show_solution, solve

formula, num_vars = grid_to_cnf("puzzle.txt", "puzzle.cnf", sequential=False)
print(show_solution("puzzle.txt", "puzzle.out"))
values = solve("puzzle.txt", sequential=True, solver="minisat", workdir=".")
reduced, total = cnf_to_3sat("puzzle.cnf", "puzzle-3sat.cnf")
```

`solve` returns a dict from variable number to truth value, or `None` when
the solver finds no solution. `solver` may be a command name or a list of
arguments. The CNF and result file paths are appended to it.

The building blocks can be used on their own:

```python
from tentsat.cnf import CNFFormula
from tentsat.constraints import build_complete_cnf
from tentsat.dimacs import format_dimacs
from tentsat.grid import parse_grid
from tentsat.satmap import SatMap
from tentsat.sequential import SequentialCounter

grid = parse_grid("3 3  1 0 1  1 0 1  .T. ... .T.")
mapping = SatMap.from_grid(grid)
formula = CNFFormula()
counter = SequentialCounter()
build_complete_cnf(grid, mapping, formula, counter)
print(format_dimacs(formula, max(mapping.total_vars, counter.last_variable)))
```

Pass no counter to `build_complete_cnf` to use the combinatorial encoding.

- `tentsat.grid`: `Grid`, `Position`, `parse_grid`, `read_grid`,
  `GridFormatError`.
- `tentsat.neighbourhood`: `n4_neighbours`, `n8_neighbours`,
  `empty_neighbours`, `adjacent_trees`.
- `tentsat.cnf`: `CNFFormula`.
- `tentsat.satmap`: `tent_var`, `count_associations`, `SatMap`,
  `Association`.
- `tentsat.cardinality`: `at_most_k`, `at_least_k`, `exactly_k`, and row and
  column constraints.
- `tentsat.sequential`: `SequentialCounter`.
- `tentsat.constraints`: one function per puzzle rule, plus
  `build_complete_cnf`.
- `tentsat.dimacs`: `format_dimacs`, `write_dimacs`, `parse_solution`,
  `read_solution`, `solution_is_sat`, `render_solution`, `solution_json`,
  `write_solution_json`, `SolutionError`.
- `tentsat.threesat`: `parse_dimacs`, `read_dimacs`, `write_dimacs_3sat`,
  `clause_to_3sat`, `formula_to_3sat`.