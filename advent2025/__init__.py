"""Solvers for days 2, 3, 5 and 9 of the 2025 puzzle calendar, with input and graph helpers."""

__version__ = "0.1.0"