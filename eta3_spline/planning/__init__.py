"""Path planning module."""

from .eta3 import eta_3

__all__ = [
    'eta_3',
]
