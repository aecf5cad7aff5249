"""Propositional CNF formulas: resolution solver, random generator and desktop manager."""

__version__ = "2.0.0"