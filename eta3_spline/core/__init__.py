"""Core module for polynomials, curves and boundary-condition types."""

from .polynomial import Polynomial, Curve
from .data_structures import MotionState, EtaParam, EtaParamError

__all__ = [
    'Polynomial',
    'Curve',
    'MotionState',
    'EtaParam',
    'EtaParamError',
]
