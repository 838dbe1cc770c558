"""Solvers for daily programming puzzles (days 2-9 and 18-20), with a command-line front end."""

__version__ = "0.1.0"