"""Conjunctive normal form formulas over integer literals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass
class CNFFormula:
    """A list of clauses, each a tuple of non-zero integer literals."""

    clauses: list[tuple[int, ...]] = field(default_factory=list)

    def add_clause(self, literals: Iterable[int]) -> None:
        """Append a clause made of the given literals."""
        self.clauses.append(tuple(literals))

    def max_variable(self) -> int:
        """The largest variable number in the formula, 0 if there is none."""
        return max((abs(lit) for clause in self.clauses for lit in clause), default=0)

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.clauses)