"""Encode Tents puzzles as CNF, convert CNF to 3-SAT and decode SAT solver results."""

__version__ = "0.1.0"