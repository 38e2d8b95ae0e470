"""
===============================================================================
QUATALG - Free-Function Quaternion Operations
===============================================================================
Functional forms of the Quaternion operators and methods, for call sites
that compose operations (e.g. ``functools.reduce(mul, rotations)``) or
prefer ``ln(q)`` over ``q.ln()``.

Every function delegates to the Quaternion method or operator of the same
meaning, so the two spellings always agree bit for bit, including IEEE-754
propagation at zero norm.
===============================================================================
"""

from typing import Union

import numpy as np

from quatalg.core.quaternion import Quaternion, Scalar

Operand = Union[Quaternion, Scalar]


# =============================================================================
# ALGEBRA
# =============================================================================

def add(a: Operand, b: Operand) -> Quaternion:
    """Sum of two quaternions, or of a quaternion and a scalar (either side)."""
    return a + b


def sub(a: Operand, b: Operand) -> Quaternion:
    """
    Difference a - b.

    With a scalar on the left the vector part of b changes sign:
    sub(c, q) == [c - s, -x, -y, -z].
    """
    return a - b


def mul(a: Operand, b: Operand) -> Quaternion:
    """
    Hamilton product a * b, or uniform scaling when one side is a scalar.

    Non-commutative for two quaternions: mul(i, j) == k but mul(j, i) == -k.
    """
    return a * b


def div(q: Quaternion, scalar: Scalar) -> Quaternion:
    """Component-wise division by a scalar."""
    return q / scalar


def neg(q: Quaternion) -> Quaternion:
    return -q


# =============================================================================
# METRIC
# =============================================================================

def conj(q: Quaternion) -> Quaternion:
    return q.conj()


def normsq(q: Quaternion) -> float:
    return q.normsq()


def norm(q: Quaternion) -> float:
    return q.norm()


def dot(a: Quaternion, b: Quaternion) -> float:
    """Four-dimensional inner product; dot(q, q) == normsq(q)."""
    return a.dot(b)


def inv(q: Quaternion) -> Quaternion:
    """Multiplicative inverse; NaN components for the zero quaternion."""
    return q.inv()


# =============================================================================
# TRANSCENDENTAL MAPS
# =============================================================================

def exp(q: Quaternion) -> Quaternion:
    return q.exp()


def ln(q: Quaternion) -> Quaternion:
    """Principal logarithm; ln(0) == [-inf, 0, 0, 0]."""
    return q.ln()


def pow(q: Quaternion, exponent: float) -> Quaternion:
    """Real power |q|^exponent * exp(exponent * v)."""
    return q.pow(exponent)


def slerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    """Spherical linear interpolation along the short arc from q1 to q2."""
    return Quaternion.slerp(q1, q2, t)


def geodesic_distance(q1: Quaternion, q2: Quaternion) -> float:
    """
    Length of the arc between two unit quaternions on S^3.

    Computed as |ln(q1^{-1} * q2)|, the angle the interpolation
    slerp(q1, q2, t) sweeps for t in [0, 1] without the short-arc flip.
    Twice this value is the rotation angle between the two attitudes when
    q1 . q2 >= 0.
    """
    return float(np.linalg.norm((q1.inv() * q2).ln().vector))
