"""
===============================================================================
QUATALG - Free-Function Operations Test Suite
===============================================================================
The functional spellings must agree exactly with the operators and methods
they wrap, and compose with the standard library.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from functools import reduce

import numpy as np
import pytest
from numpy.testing import assert_allclose

import quatalg
from quatalg import Quaternion


@pytest.fixture
def p():
    return Quaternion(-1.3, -2.1, 8.0, -4.0)


@pytest.fixture
def q():
    return Quaternion(1.0, 2.0, 3.0, 4.0)


# =============================================================================
# Test: Algebra functions
# =============================================================================

class TestAlgebraFunctions:
    """add / sub / mul / div / neg."""

    def test_add(self, p, q):
        assert quatalg.add(p, q) == p + q
        assert quatalg.add(3.0, q) == Quaternion(4.0, 2.0, 3.0, 4.0)

    def test_sub(self, p, q):
        assert quatalg.sub(p, q) == p - q
        assert quatalg.sub(3.0, q) == Quaternion(2.0, -2.0, -3.0, -4.0)

    def test_mul(self, p, q):
        assert quatalg.mul(p, q) == p * q
        assert quatalg.mul(q, 2.0) == quatalg.mul(2.0, q)

    def test_mul_reduce(self):
        """reduce(mul, [i, j, k]) == -1."""
        units = [Quaternion(0.0, 1.0, 0.0, 0.0),
                 Quaternion(0.0, 0.0, 1.0, 0.0),
                 Quaternion(0.0, 0.0, 0.0, 1.0)]
        assert reduce(quatalg.mul, units) == Quaternion(-1.0, 0.0, 0.0, 0.0)

    def test_div(self, q):
        assert quatalg.div(q, 4.0) == Quaternion(0.25, 0.5, 0.75, 1.0)

    def test_neg(self, q):
        assert quatalg.neg(q) == -q


# =============================================================================
# Test: Metric and transcendental functions
# =============================================================================

class TestMetricFunctions:
    """conj / normsq / norm / dot / inv."""

    def test_metric(self, p, q):
        assert quatalg.conj(p) == p.conj()
        assert quatalg.normsq(q) == 30.0
        assert quatalg.norm(q) == q.norm()
        assert quatalg.dot(p, q) == p.dot(q)
        assert quatalg.inv(p) == p.inv()


class TestTranscendentalFunctions:
    """exp / ln / pow / slerp / geodesic_distance."""

    def test_transcendental(self, q):
        assert quatalg.exp(q) == q.exp()
        assert quatalg.ln(q) == q.ln()
        assert quatalg.pow(q, 0.5) == q.pow(0.5)

    def test_ln_zero(self):
        assert quatalg.ln(Quaternion.zero()) == Quaternion(-np.inf, 0.0, 0.0, 0.0)

    def test_slerp(self):
        q1 = Quaternion.identity()
        q2 = Quaternion.from_axis_angle([1.0, 0.0, 0.0], 1.0)
        assert quatalg.slerp(q1, q2, 0.4) == Quaternion.slerp(q1, q2, 0.4)

    def test_geodesic_distance(self):
        """Half the rotation angle between the two attitudes."""
        q1 = Quaternion.identity()
        q2 = Quaternion.from_axis_angle([0.0, 0.0, 1.0], np.pi / 2)
        assert_allclose(quatalg.geodesic_distance(q1, q2), np.pi / 4, atol=1e-14)
        assert_allclose(quatalg.geodesic_distance(q2, q2), 0.0, atol=1e-14)


class TestPackage:
    """Package-level metadata and constants."""

    def test_epsilon(self):
        assert quatalg.EPSILON == np.finfo(np.float64).eps

    def test_version(self):
        assert isinstance(quatalg.__version__, str)
