"""Orthogonal and diagonal neighbourhoods of grid cells."""

from __future__ import annotations

from tentsat.grid import Grid, Position

_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONAL = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _shifted(grid: Grid, pos: Position, offsets) -> list[Position]:
    return [
        Position(pos.row + dr, pos.column + dc)
        for dr, dc in offsets
        if grid.is_valid(pos.row + dr, pos.column + dc)
    ]


def n4_neighbours(grid: Grid, pos: Position) -> list[Position]:
    """Orthogonal neighbours inside the grid: up, down, left, right."""
    if not grid.is_valid(pos.row, pos.column):
        return []
    return _shifted(grid, pos, _ORTHOGONAL)


def n8_neighbours(grid: Grid, pos: Position) -> list[Position]:
    """Orthogonal neighbours followed by diagonal ones, inside the grid."""
    if not grid.is_valid(pos.row, pos.column):
        return []
    return _shifted(grid, pos, _ORTHOGONAL) + _shifted(grid, pos, _DIAGONAL)


def empty_neighbours(grid: Grid, tree: Position) -> list[Position]:
    """Empty orthogonal neighbours of a tree; empty if the cell is not a tree."""
    if not grid.is_tree(tree):
        return []
    return [cell for cell in n4_neighbours(grid, tree) if grid.is_empty(cell)]


def adjacent_trees(grid: Grid, pos: Position) -> list[Position]:
    """Trees among the orthogonal neighbours of a cell."""
    return [cell for cell in n4_neighbours(grid, pos) if grid.is_tree(cell)]