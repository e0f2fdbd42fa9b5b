"""Solvers for a series of grid, parsing and search puzzles, one module per puzzle."""

__version__ = "0.1.0"