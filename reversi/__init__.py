"""Reversi with an alpha-beta computer opponent."""

__version__ = "0.1.0"
