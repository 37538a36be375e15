"""Eta-3 spline generation for smooth motion planning paths."""

from .core import Polynomial, Curve, MotionState, EtaParam, EtaParamError
from .planning import eta_3

__version__ = "0.1.0"

__all__ = [
    'Polynomial',
    'Curve',
    'MotionState',
    'EtaParam',
    'EtaParamError',
    'eta_3',
]
