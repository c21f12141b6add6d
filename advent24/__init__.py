"""Solvers for days 1 to 14 of the 2024 advent puzzles, with a command line entry point."""

__version__ = "0.1.0"