"""
Shared pure helpers for the measurement engine.

Modules
-------
labels
    Snake-case normalization and label construction for series and stats
filters
    Dimension filter expression parsing and de-duplication
timestamps
    Epoch-millisecond conversion and fetch window calculation
"""

__all__ = []
