"""Deterministic tidal height prediction from harmonic constants."""

__version__ = '0.1.0'
