"""Tents puzzle grid: tree layout, row and column tent counts, and file parsing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, NamedTuple, Sequence

TREE = "T"
EMPTY = "."


class GridFormatError(ValueError):
    """Raised when a grid description is malformed."""


class Position(NamedTuple):
    """A cell of the grid, ordered by row then column."""

    row: int
    column: int


@dataclass(frozen=True)
class Grid:
    """A rectangular grid of trees and empty cells with tent counts per line."""

    row_counts: tuple[int, ...]
    column_counts: tuple[int, ...]
    tree_map: tuple[tuple[bool, ...], ...]

    def __post_init__(self) -> None:
        if not self.row_counts or not self.column_counts:
            raise GridFormatError("grid dimensions must be positive")
        if len(self.tree_map) != self.height:
            raise GridFormatError(
                f"expected {self.height} rows, got {len(self.tree_map)}"
            )
        for index, line in enumerate(self.tree_map):
            if len(line) != self.width:
                raise GridFormatError(
                    f"row {index} has {len(line)} cells, expected {self.width}"
                )

    @classmethod
    def from_rows(
        cls,
        row_counts: Iterable[int],
        column_counts: Iterable[int],
        rows: Sequence[str],
    ) -> "Grid":
        """Build a grid from tent counts and rows made of 'T' and '.' characters."""
        tree_map = []
        for index, line in enumerate(rows):
            cells = []
            for char in line:
                if char == TREE:
                    cells.append(True)
                elif char == EMPTY:
                    cells.append(False)
                else:
                    raise GridFormatError(
                        f"unexpected character {char!r} in row {index}"
                    )
            tree_map.append(tuple(cells))
        return cls(tuple(row_counts), tuple(column_counts), tuple(tree_map))

    @property
    def height(self) -> int:
        return len(self.row_counts)

    @property
    def width(self) -> int:
        return len(self.column_counts)

    @property
    def trees(self) -> list[Position]:
        """Tree cells in reading order."""
        return [pos for pos in self._cells() if self.is_tree(pos)]

    @property
    def empty_cells(self) -> list[Position]:
        """Empty cells in reading order."""
        return [pos for pos in self._cells() if not self.is_tree(pos)]

    def _cells(self) -> Iterable[Position]:
        for row in range(self.height):
            for column in range(self.width):
                yield Position(row, column)

    def is_valid(self, row: int, column: int) -> bool:
        """Whether (row, column) lies inside the grid."""
        return 0 <= row < self.height and 0 <= column < self.width

    def is_tree(self, pos: Position) -> bool:
        """Whether the cell holds a tree; False outside the grid."""
        if not self.is_valid(pos.row, pos.column):
            return False
        return self.tree_map[pos.row][pos.column]

    def is_empty(self, pos: Position) -> bool:
        """Whether the cell is free of trees; False outside the grid."""
        if not self.is_valid(pos.row, pos.column):
            return False
        return not self.tree_map[pos.row][pos.column]

    def render(self) -> str:
        """Text picture of the puzzle: 'T' for trees, '.' for empty cells."""
        lines = [f"Grid ({self.height} x {self.width}):"]
        lines.extend(
            "".join(TREE if cell else EMPTY for cell in line) for line in self.tree_map
        )
        return "\n".join(lines)


def _take_int(tokens: list[str], index: int, what: str) -> int:
    if index >= len(tokens):
        raise GridFormatError(f"missing {what}")
    try:
        return int(tokens[index])
    except ValueError:
        raise GridFormatError(f"invalid {what}: {tokens[index]!r}") from None


def parse_grid(text: str) -> Grid:
    """Parse a grid: height and width, row counts, column counts, then the rows."""
    tokens = text.split()
    height = _take_int(tokens, 0, "height")
    width = _take_int(tokens, 1, "width")
    if height <= 0 or width <= 0:
        raise GridFormatError("grid dimensions must be positive")

    pos = 2
    row_counts = [_take_int(tokens, pos + i, f"count of row {i}") for i in range(height)]
    pos += height
    column_counts = [
        _take_int(tokens, pos + j, f"count of column {j}") for j in range(width)
    ]
    pos += width

    rows = tokens[pos : pos + height]
    if len(rows) < height:
        raise GridFormatError(f"expected {height} rows, got {len(rows)}")
    return Grid.from_rows(row_counts, column_counts, rows)


def read_grid(path: str | Path) -> Grid:
    """Read and parse a grid file."""
    return parse_grid(Path(path).read_text())