"""Core data structures for eta-3 spline fitting.

This module defines the boundary conditions and shape parameters consumed by
``eta3_spline.planning.eta_3``.
"""

from dataclasses import dataclass, astuple
from typing import Any, Iterator
import numpy as np


class EtaParamError(ValueError):
    """Raised when eta1 or eta2 is not strictly positive."""

    def __init__(self, eta1: Any, eta2: Any):
        self.eta1 = eta1
        self.eta2 = eta2
        super().__init__(
            f"Eta-1 and eta-2 must be greater than zero! Got {eta1!r} and {eta2!r}"
        )


@dataclass(frozen=True)
class MotionState:
    """One interpolation state of an eta-3 spline.

    Attributes:
        x: X position
        y: Y position
        t: Heading angle [rad]
        k: Curvature [1/m]
        dk: Derivative of curvature with respect to arc length [1/m²]
    """
    x: float
    y: float
    t: float
    k: float = 0.0
    dk: float = 0.0

    def to_array(self) -> np.ndarray:
        """Convert to numpy array [x, y, t, k, dk]."""
        return np.array([self.x, self.y, self.t, self.k, self.dk])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> 'MotionState':
        """Create from numpy array [x, y, t, (k), (dk)]."""
        k = arr[3] if len(arr) > 3 else 0.0
        dk = arr[4] if len(arr) > 4 else 0.0
        return cls(x=arr[0], y=arr[1], t=arr[2], k=k, dk=dk)


@dataclass(frozen=True)
class EtaParam:
    """Eta vector controlling the shape of an eta-3 spline.

    eta1 and eta2 scale the start and end tangent/curvature terms, eta3 to
    eta6 are higher-order shape controls. They redistribute the curve between
    its endpoints without changing the boundary conditions.

    Attributes:
        eta1: Start-side velocity parameter, must be > 0
        eta2: End-side velocity parameter, must be > 0
        eta3: Start-side acceleration parameter
        eta4: End-side acceleration parameter
        eta5: Start-side jerk parameter
        eta6: End-side jerk parameter

    Raises:
        EtaParamError: If eta1 <= 0 or eta2 <= 0
    """
    eta1: float
    eta2: float
    eta3: float = 0.0
    eta4: float = 0.0
    eta5: float = 0.0
    eta6: float = 0.0

    def __post_init__(self):
        if not (self.eta1 > 0 and self.eta2 > 0):
            raise EtaParamError(self.eta1, self.eta2)

    @classmethod
    def zeroed(cls, i: Any) -> 'EtaParam':
        """Create the eta vector with eta1 = eta2 = i and eta3..eta6 = 0."""
        zero = i * 0
        return cls(i, i, zero, zero, zero, zero)

    def __iter__(self) -> Iterator[Any]:
        return iter(astuple(self))

    def to_array(self) -> np.ndarray:
        """Convert to numpy array [eta1, ..., eta6]."""
        return np.array(astuple(self))
