"""Schocken - rule engine for the three-dice game."""

__version__ = "0.1.0"
