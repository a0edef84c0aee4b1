"""Mapping between puzzle facts and DIMACS variable numbers."""

from __future__ import annotations

from dataclasses import dataclass, field

from tentsat.grid import Grid, Position
from tentsat.neighbourhood import empty_neighbours


def tent_var(grid: Grid, pos: Position) -> int:
    """DIMACS variable meaning "the cell holds a tent", numbered from 1."""
    if not grid.is_valid(pos.row, pos.column):
        raise ValueError(f"position {tuple(pos)} is outside the grid")
    return pos.row * grid.width + pos.column + 1


def count_associations(grid: Grid) -> int:
    """Number of possible tree-to-empty-neighbour associations."""
    return sum(len(empty_neighbours(grid, tree)) for tree in grid.trees)


@dataclass(frozen=True)
class Association:
    """Variable meaning "this tree is paired with the tent on this cell"."""

    tree: Position
    cell: Position
    var: int


@dataclass(frozen=True)
class SatMap:
    """Association variables of a grid, numbered after the tent variables."""

    associations: tuple[Association, ...]
    total_vars: int
    _index: dict[tuple[Position, Position], int] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        index = {(a.tree, a.cell): a.var for a in self.associations}
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_grid(cls, grid: Grid) -> "SatMap":
        """Number every tree/empty-neighbour pair after the grid's tent variables."""
        tent_count = grid.height * grid.width
        pairs = [
            (tree, cell) for tree in grid.trees for cell in empty_neighbours(grid, tree)
        ]
        associations = tuple(
            Association(tree, cell, var)
            for var, (tree, cell) in enumerate(pairs, start=tent_count + 1)
        )
        return cls(associations, tent_count + len(associations))

    @property
    def assoc_count(self) -> int:
        return len(self.associations)

    def assoc_var(self, tree: Position, cell: Position) -> int:
        """Variable of the association between a tree and a cell."""
        try:
            return self._index[(Position(*tree), Position(*cell))]
        except KeyError:
            raise KeyError(
                f"no association between tree {tuple(tree)} and cell {tuple(cell)}"
            ) from None