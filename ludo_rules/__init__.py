"""
Ludo Rules.

Rules engine for a four-color race-and-capture board game: turn order,
movement legality, captures, win detection and an automated opponent.
"""

__version__ = "0.1.0"
