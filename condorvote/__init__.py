"""Ranked-ballot counting by simple majority, Ranked Pairs and the Schulze method."""

__version__ = "0.1.0"