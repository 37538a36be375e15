"""Eta-3 spline fitting.

Closed-form construction of a degree-7 polynomial curve that matches
position, heading, curvature and curvature rate at both ends, following
Piazzi, Guarino Lo Bianco and Romano, "η³-Splines for the Smooth Path
Generation of Wheeled Mobile Robots" (IEEE Trans. Robotics, 2007):
https://ieeexplore.ieee.org/document/4339545/
"""

import math
from loguru import logger

from ..core.data_structures import EtaParam, MotionState
from ..core.polynomial import Curve, Polynomial


def eta_3(start: MotionState, end: MotionState, eta: EtaParam) -> Curve:
    """Fit an eta-3 spline between two motion states.

    The curve satisfies the start state at t=0 and the end state at t=1;
    the eta vector only changes the shape in between.

    Args:
        start: Start position, heading, curvature and curvature rate
        end: End position, heading, curvature and curvature rate
        eta: Shape parameters

    Returns:
        Curve with one degree-7 polynomial per axis
    """
    eta1, eta2, eta3, eta4, eta5, eta6 = eta

    ca = math.cos(start.t)
    sa = math.sin(start.t)
    cb = math.cos(end.t)
    sb = math.sin(end.t)

    dx = end.x - start.x
    dy = end.y - start.y

    # Start-side brackets, shared by both axes
    k0_3 = eta1 ** 3 * start.dk + 3. * eta1 * eta3 * start.k
    k0_4 = 5. * eta1 ** 2 * start.k + 2. / 3. * eta1 ** 3 * start.dk + 2. * eta1 * eta3 * start.k
    k0_5 = 10. * eta1 ** 2 * start.k + eta1 ** 3 * start.dk + 3. * eta1 * eta3 * start.k
    k0_6 = 15. / 2. * eta1 ** 2 * start.k + 2. / 3. * eta1 ** 3 * start.dk + 2. * eta1 * eta3 * start.k
    k0_7 = 2. * eta1 ** 2 * start.k + 1. / 6. * eta1 ** 3 * start.dk + 1. / 2. * eta1 * eta3 * start.k

    t0_4 = 20. * eta1 + 5. * eta3 + 2. / 3. * eta5
    t0_5 = 45. * eta1 + 10. * eta3 + eta5
    t0_6 = 36. * eta1 + 15. / 2. * eta3 + 2. / 3. * eta5
    t0_7 = 10. * eta1 + 2. * eta3 + 1. / 6. * eta5

    # End-side brackets
    t1_4 = 15. * eta2 - 5. / 2. * eta4 + 1. / 6. * eta6
    t1_5 = 39. * eta2 - 7. * eta4 + 1. / 2. * eta6
    t1_6 = 34. * eta2 - 13. / 2. * eta4 + 1. / 2. * eta6
    t1_7 = 10. * eta2 - 2. * eta4 + 1. / 6. * eta6

    k1_4 = 5. / 2. * eta2 ** 2 * end.k - 1. / 6. * eta2 ** 3 * end.dk - 1. / 2. * eta2 * eta4 * end.k
    k1_5 = 7. * eta2 ** 2 * end.k - 1. / 2. * eta2 ** 3 * end.dk - 3. / 2. * eta2 * eta4 * end.k
    k1_6 = 13. / 2. * eta2 ** 2 * end.k - 1. / 2. * eta2 ** 3 * end.dk - 3. / 2. * eta2 * eta4 * end.k
    k1_7 = 2. * eta2 ** 2 * end.k - 1. / 6. * eta2 ** 3 * end.dk - 1. / 2. * eta2 * eta4 * end.k

    # The y axis swaps cos and sin of both headings and negates every
    # bracket that multiplied a sine on the x axis.
    x_coeffs = [
        start.x,
        eta1 * ca,
        1. / 2. * eta3 * ca - 1. / 2. * eta1 ** 2 * start.k * sa,
        1. / 6. * eta5 * ca - 1. / 6. * k0_3 * sa,
        35. * dx - t0_4 * ca + k0_4 * sa - t1_4 * cb - k1_4 * sb,
        -84. * dx + t0_5 * ca - k0_5 * sa + t1_5 * cb + k1_5 * sb,
        70. * dx - t0_6 * ca + k0_6 * sa - t1_6 * cb - k1_6 * sb,
        -20. * dx + t0_7 * ca - k0_7 * sa + t1_7 * cb + k1_7 * sb,
    ]
    y_coeffs = [
        start.y,
        eta1 * sa,
        1. / 2. * eta3 * sa + 1. / 2. * eta1 ** 2 * start.k * ca,
        1. / 6. * eta5 * sa + 1. / 6. * k0_3 * ca,
        35. * dy - t0_4 * sa - k0_4 * ca - t1_4 * sb + k1_4 * cb,
        -84. * dy + t0_5 * sa + k0_5 * ca + t1_5 * sb - k1_5 * cb,
        70. * dy - t0_6 * sa - k0_6 * ca - t1_6 * sb + k1_6 * cb,
        -20. * dy + t0_7 * sa + k0_7 * ca + t1_7 * sb - k1_7 * cb,
    ]

    logger.debug(
        f"Fitted eta-3 spline from ({start.x:.3f}, {start.y:.3f}) "
        f"to ({end.x:.3f}, {end.y:.3f}) with eta={tuple(eta)}"
    )

    return Curve(Polynomial(x_coeffs), Polynomial(y_coeffs))
