"""
===============================================================================
QUATALG - Quaternion Value Type
===============================================================================

General (not necessarily unit) quaternion over IEEE-754 double precision,
with the full algebra of the normed division algebra H and the
transcendental maps used to compose and interpolate 3D rotations.

Convention
----------
Scalar-first:

    q = [s, x, y, z] = s + x*i + y*j + z*k

with the Hamilton basis relations

    i^2 = j^2 = k^2 = i*j*k = -1

Restricted to unit norm, q represents a rotation (double-covering SO(3)).
Nothing here normalizes implicitly: every operation acts on the raw four
components.

Floating-point behaviour
------------------------
Equality is exact component-wise comparison. Use ``isclose`` for tolerance.

Singularities (inverse of the zero quaternion, logarithm of zero, division
by a zero scalar, overflow in ``exp``) are not errors. They follow IEEE-754
and produce ``inf``/``NaN`` that propagate through later arithmetic. Numpy
is used for the component math because it implements exactly this,
whereas Python floats raise ``ZeroDivisionError`` / ``ValueError``.

Transcendental maps
-------------------
With v = (x, y, z) and ph = |v|:

    exp(q)    = e^s * [cos(ph), sin(ph)/ph * v]
    ln(q)     = [ln|q|, acos(s/|q|)/ph * v]
    q^t       = |q|^t * [cos(t*ph), sin(t*ph)/ph * v]

``exp`` and ``ln`` are the principal branches. In ``exp`` the sinc factor
is evaluated as sin(ph + eps)/(ph + eps) so that ph == 0 never divides 0/0;
the bias is O(eps) relative. The real axis takes a separate branch so that
an overflowing e^s leaves the vector part at zero.

``pow`` scales the norm and turns the vector part through the angle t*ph,
so q^t == |q|^t * exp(t*v). It is not exp(t*ln(q)) unless |v| equals the
polar angle of q; ``slerp`` is therefore built on exp and ln.

References
----------
    [1] Kuipers, "Quaternions and Rotation Sequences", Princeton, 1999.
    [2] Shoemake, "Animating Rotation with Quaternion Curves",
        SIGGRAPH, 1985.
    [3] Dam, Koch & Lillholm, "Quaternions, Interpolation and Animation",
        DIKU-TR-98/5, 1998.

===============================================================================
"""

import logging
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from quatalg.core.constants import (
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    EPSILON,
    IEEE_SILENT,
    SLERP_LINEAR_THRESHOLD,
    UNIT_TOLERANCE,
)
from quatalg.core.formatting import format_positional, format_terms

logger = logging.getLogger(__name__)

Scalar = Union[int, float, np.integer, np.floating]
_SCALAR_TYPES = (int, float, np.integer, np.floating)


def _is_scalar(value) -> bool:
    """Real scalar operand test; bool is an int subclass but not a scalar."""
    return isinstance(value, _SCALAR_TYPES) and not isinstance(value, bool)


class Quaternion:
    """
    Quaternion value q = s + x*i + y*j + z*k.

    Attributes
    ----------
    s : float
        Scalar (real) part.
    x : float
        First imaginary component (i-axis).
    y : float
        Second imaginary component (j-axis).
    z : float
        Third imaginary component (k-axis).

    Examples
    --------
    >>> q = Quaternion(1.0, 2.0, 3.0, 4.0)
    >>> str(q)
    '1 + 2i + 3j + 4k'
    >>> p = Quaternion(1.0, -2.0, 3.0, 4.0)
    >>> p * p.inv() == Quaternion.identity()
    True
    >>> q.pow(0.0)
    Quaternion(s=1.0, x=0.0, y=0.0, z=0.0)
    """

    # =========================================================================
    # Defaults for the explicit approximate helpers. Equality never uses them.
    # =========================================================================
    _COMPARISON_RTOL = DEFAULT_RTOL
    _COMPARISON_ATOL = DEFAULT_ATOL
    _UNIT_TOLERANCE = UNIT_TOLERANCE

    # Keep numpy scalars/arrays from broadcasting over a Quaternion operand;
    # `np.float64(2.0) * q` then dispatches to __rmul__.
    __array_ufunc__ = None

    def __init__(self, s: float, x: float, y: float, z: float) -> None:
        """
        Initialize a quaternion from its four components.

        Parameters
        ----------
        s : float
            Scalar part.
        x, y, z : float
            Imaginary components along i, j, k.
        """
        self._q = np.array([s, x, y, z], dtype=np.float64)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def s(self) -> float:
        """Scalar (real) part."""
        return float(self._q[0])

    @property
    def x(self) -> float:
        """i component."""
        return float(self._q[1])

    @property
    def y(self) -> float:
        """j component."""
        return float(self._q[2])

    @property
    def z(self) -> float:
        """k component."""
        return float(self._q[3])

    @property
    def scalar(self) -> float:
        """Scalar part of the quaternion (alias for s)."""
        return self.s

    @property
    def vector(self) -> np.ndarray:
        """
        Vector (imaginary) part as a 3-element array.

        Returns
        -------
        np.ndarray
            Copy of [x, y, z].
        """
        return self._q[1:4].copy()

    @property
    def components(self) -> np.ndarray:
        """
        Full quaternion as a 4-element array [s, x, y, z].

        Returns
        -------
        np.ndarray
            Copy of the internal component array.
        """
        return self._q.copy()

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @staticmethod
    def identity() -> 'Quaternion':
        """Multiplicative identity [1, 0, 0, 0]."""
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def zero() -> 'Quaternion':
        """Additive identity [0, 0, 0, 0]."""
        return Quaternion(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_array(components: np.ndarray) -> 'Quaternion':
        """
        Create a quaternion from a 4-element sequence [s, x, y, z].

        Raises
        ------
        ValueError
            If the input does not hold exactly four values.
        """
        q = np.asarray(components, dtype=np.float64)
        if q.shape != (4,):
            raise ValueError(
                f"Quaternion components must have shape (4,), got {q.shape}"
            )
        return Quaternion(q[0], q[1], q[2], q[3])

    @staticmethod
    def pure(vector: np.ndarray) -> 'Quaternion':
        """
        Embed a 3-vector as a pure quaternion [0, v_x, v_y, v_z].

        Raises
        ------
        ValueError
            If the input does not hold exactly three values.
        """
        v = np.asarray(vector, dtype=np.float64)
        if v.shape != (3,):
            raise ValueError(f"Vector must have shape (3,), got {v.shape}")
        return Quaternion(0.0, v[0], v[1], v[2])

    @staticmethod
    def from_rotation_vector(rot_vec: np.ndarray) -> 'Quaternion':
        """
        Create a unit quaternion from a rotation vector.

        The rotation vector theta * n (angle times unit axis) maps onto the
        unit quaternion through the exponential map of the half vector:

            q = exp([0, rot_vec / 2]) = [cos(theta/2), sin(theta/2) * n]

        Parameters
        ----------
        rot_vec : np.ndarray
            3-element rotation vector (radians).

        Returns
        -------
        Quaternion
            Unit quaternion. The zero vector gives the identity.

        Raises
        ------
        ValueError
            If rot_vec is not a 3-vector.
        """
        rot_vec = np.asarray(rot_vec, dtype=np.float64)
        if rot_vec.shape != (3,):
            raise ValueError(
                f"Rotation vector must have shape (3,), got {rot_vec.shape}"
            )
        return Quaternion.pure(0.5 * rot_vec).exp()

    @staticmethod
    def from_axis_angle(axis: np.ndarray, angle: float) -> 'Quaternion':
        """
        Create a unit quaternion for a rotation by angle about axis.

        Parameters
        ----------
        axis : np.ndarray
            3-element rotation axis. Normalized internally.
        angle : float
            Rotation angle in radians.

        Returns
        -------
        Quaternion
            [cos(angle/2), sin(angle/2) * axis / |axis|]

        Raises
        ------
        ValueError
            If axis is not a 3-vector or has zero length.
        """
        axis = np.asarray(axis, dtype=np.float64)
        if axis.shape != (3,):
            raise ValueError(f"Rotation axis must have shape (3,), got {axis.shape}")

        axis_norm = np.linalg.norm(axis)
        if axis_norm == 0.0:
            raise ValueError(
                "Rotation axis has zero magnitude. "
                "Cannot define a rotation about a zero vector."
            )
        return Quaternion.from_rotation_vector(angle * axis / axis_norm)

    # =========================================================================
    # ALGEBRA
    # =========================================================================

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other.

        The product is associative and distributes over addition but is
        NOT commutative:

            (a1 + b1*i + c1*j + d1*k) * (a2 + b2*i + c2*j + d2*k) =

            (a1*a2 - b1*b2 - c1*c2 - d1*d2) +
            (a1*b2 + b1*a2 + c1*d2 - d1*c2) i +
            (a1*c2 + c1*a2 + d1*b2 - b1*d2) j +
            (a1*d2 + d1*a2 + b1*c2 - c1*b2) k

        For unit quaternions the product composes rotations: the result
        rotates first by other, then by self.

        Parameters
        ----------
        other : Quaternion
            Right-hand factor.

        Returns
        -------
        Quaternion
            The Hamilton product.
        """
        a1, b1, c1, d1 = self._q
        a2, b2, c2, d2 = other._q

        # Term order is fixed so that exact-rational inputs stay exact.
        s = a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2
        x = a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2
        y = a1 * c2 + c1 * a2 + d1 * b2 - b1 * d2
        z = a1 * d2 + d1 * a2 + b1 * c2 - c1 * b2

        return Quaternion(s, x, y, z)

    def __add__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        """
        Addition operator.

        - Quaternion + Quaternion -> component-wise sum
        - Quaternion + scalar     -> scalar added to the real part only
        """
        if isinstance(other, Quaternion):
            s, x, y, z = self._q + other._q
            return Quaternion(s, x, y, z)
        if _is_scalar(other):
            s, x, y, z = self._q
            return Quaternion(s + other, x, y, z)
        return NotImplemented

    def __radd__(self, other: Scalar) -> 'Quaternion':
        """Left scalar addition: scalar + Quaternion."""
        if _is_scalar(other):
            s, x, y, z = self._q
            return Quaternion(other + s, x, y, z)
        return NotImplemented

    def __sub__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        """
        Subtraction operator.

        - Quaternion - Quaternion -> component-wise difference
        - Quaternion - scalar     -> scalar subtracted from the real part
        """
        if isinstance(other, Quaternion):
            s, x, y, z = self._q - other._q
            return Quaternion(s, x, y, z)
        if _is_scalar(other):
            s, x, y, z = self._q
            return Quaternion(s - other, x, y, z)
        return NotImplemented

    def __rsub__(self, other: Scalar) -> 'Quaternion':
        """
        Left scalar subtraction: scalar - Quaternion.

        The vector part changes sign: c - q = [c - s, -x, -y, -z].
        """
        if _is_scalar(other):
            s, x, y, z = self._q
            return Quaternion(other - s, -x, -y, -z)
        return NotImplemented

    def __mul__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        """
        Multiplication operator.

        - Quaternion * Quaternion -> Hamilton product
        - Quaternion * scalar     -> uniform scaling of all four components

        Parameters
        ----------
        other : Quaternion or scalar
            Right-hand operand.

        Returns
        -------
        Quaternion
            Product quaternion.
        """
        if isinstance(other, Quaternion):
            return self.multiply(other)
        if _is_scalar(other):
            with np.errstate(**IEEE_SILENT):
                s, x, y, z = self._q * other
            return Quaternion(s, x, y, z)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> 'Quaternion':
        """Left scalar multiplication; scaling commutes."""
        if _is_scalar(other):
            with np.errstate(**IEEE_SILENT):
                s, x, y, z = other * self._q
            return Quaternion(s, x, y, z)
        return NotImplemented

    def __truediv__(self, other: Scalar) -> 'Quaternion':
        """
        Division by a scalar, component-wise.

        There is no Quaternion / Quaternion operator; write ``a * b.inv()``
        (or ``b.inv() * a``) to make the side explicit. Division by zero
        yields inf/NaN components.
        """
        if _is_scalar(other):
            with np.errstate(**IEEE_SILENT):
                s, x, y, z = self._q / other
            return Quaternion(s, x, y, z)
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        """Negate all four components."""
        s, x, y, z = self._q
        return Quaternion(-s, -x, -y, -z)

    def __pos__(self) -> 'Quaternion':
        return self.copy()

    # =========================================================================
    # IN-PLACE OPERATORS
    # =========================================================================
    # Each form evaluates the binary operator and replaces the receiver's
    # storage with the result.

    def _assign(self, result: 'Quaternion') -> 'Quaternion':
        if result is NotImplemented:
            return NotImplemented
        self._q = result._q
        return self

    def __iadd__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        return self._assign(self.__add__(other))

    def __isub__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        return self._assign(self.__sub__(other))

    def __imul__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        return self._assign(self.__mul__(other))

    def __itruediv__(self, other: Scalar) -> 'Quaternion':
        return self._assign(self.__truediv__(other))

    # =========================================================================
    # METRIC
    # =========================================================================

    def conj(self) -> 'Quaternion':
        """
        Quaternion conjugate [s, -x, -y, -z].

        An involution and an anti-automorphism of the product:

            conj(conj(q)) = q
            conj(p * q)   = conj(q) * conj(p)
            conj(p + q)   = conj(p) + conj(q)

        and q * conj(q) = conj(q) * q = [normsq(q), 0, 0, 0].
        """
        s, x, y, z = self._q
        return Quaternion(s, -x, -y, -z)

    def normsq(self) -> float:
        """Squared norm s^2 + x^2 + y^2 + z^2."""
        s, x, y, z = self._q
        return float(s * s + x * x + y * y + z * z)

    def norm(self) -> float:
        """
        Euclidean norm sqrt(s^2 + x^2 + y^2 + z^2).

        The norm is multiplicative, |p * q| = |p| * |q|, up to rounding.
        """
        return float(np.sqrt(self.normsq()))

    def dot(self, other: 'Quaternion') -> float:
        """
        Four-dimensional inner product.

        Symmetric and bilinear; q.dot(q) == q.normsq().

        Parameters
        ----------
        other : Quaternion
            Second operand.

        Returns
        -------
        float
            s1*s2 + x1*x2 + y1*y2 + z1*z2
        """
        a1, b1, c1, d1 = self._q
        a2, b2, c2, d2 = other._q
        return float(a1 * a2 + b1 * b2 + c1 * c2 + d1 * d2)

    def inv(self) -> 'Quaternion':
        """
        Multiplicative inverse conj(q) / normsq(q).

        Satisfies q * q.inv() == q.inv() * q == [1, 0, 0, 0] up to rounding
        (exactly for inputs whose arithmetic is exact, such as small
        integers).

        Returns
        -------
        Quaternion
            The inverse. For the zero quaternion every component is NaN;
            no exception is raised.
        """
        n = self.normsq()
        s, x, y, z = self._q
        with np.errstate(**IEEE_SILENT):
            return Quaternion(s / n, -x / n, -y / n, -z / n)

    # =========================================================================
    # TRANSCENDENTAL MAPS
    # =========================================================================

    def exp(self) -> 'Quaternion':
        """
        Quaternion exponential.

            exp(q) = e^s * [cos(ph), sin(ph) / ph * v],   ph = |v|

        The sinc factor is evaluated as sin(ph + eps) / (ph + eps) with eps
        the double-precision machine epsilon, so the sinc never divides
        0/0. This is an approximation of the exact sinc with a relative
        bias of order eps. On the real axis the vector part is exactly
        zero and exp([s, 0, 0, 0]) == [e^s, 0, 0, 0], also when e^s
        overflows.

        Returns
        -------
        Quaternion
            exp(self). Overflow of e^s propagates as inf.
        """
        s, x, y, z = self._q
        ph = np.sqrt(x * x + y * y + z * z)

        with np.errstate(**IEEE_SILENT):
            q0 = np.exp(s)
            if ph <= 0.0:
                # inf * 0 would be NaN
                return Quaternion(q0, 0.0, 0.0, 0.0)

            qs = q0 * np.sin(ph + EPSILON) / (ph + EPSILON)
            return Quaternion(q0 * np.cos(ph), qs * x, qs * y, qs * z)

    def ln(self) -> 'Quaternion':
        """
        Principal quaternion logarithm.

            ln(q) = [ln|q|, acos(s / |q|) / |v| * v]

        On the real axis (|v| == 0) the result is [ln|q|, 0, 0, 0], so
        ln of the zero quaternion is [-inf, 0, 0, 0].

        Rounding can push s / |q| marginally outside [-1, 1] for nearly
        real inputs; the ratio is clamped before acos so that such inputs
        do not produce NaN.

        Returns
        -------
        Quaternion
            ln(self), with vector part of magnitude in [0, pi].
        """
        s, x, y, z = self._q
        phsq = x * x + y * y + z * z
        q0 = np.sqrt(s * s + phsq)

        with np.errstate(**IEEE_SILENT):
            if phsq <= 0.0:
                return Quaternion(np.log(q0), 0.0, 0.0, 0.0)

            qs = np.arccos(np.clip(s / q0, -1.0, 1.0)) / np.sqrt(phsq)
            return Quaternion(np.log(q0), qs * x, qs * y, qs * z)

    def pow(self, exponent: float) -> 'Quaternion':
        """
        Real power q^t.

            q^t = |q|^t * [cos(t*ph), sin(t*ph) / ph * v],   ph = |v|

        The norm is raised to t and the vector part is turned through the
        angle t*ph, i.e. q^t == |q|^t * exp(t*v).

        Parameters
        ----------
        exponent : float
            Real exponent t.

        Returns
        -------
        Quaternion
            q^t. q^0 == [1, 0, 0, 0] for any nonzero q. On the real axis
            the result is [|q|^t, 0, 0, 0], so the sign of s is dropped:
            [-2, 0, 0, 0]^1 == [2, 0, 0, 0].

        Notes
        -----
        This equals exp(t * ln(q)) only when ph equals the polar angle
        acos(s / |q|). Interpolation is written with ``exp`` and ``ln``.
        """
        s, x, y, z = self._q
        phsq = x * x + y * y + z * z
        ph = np.sqrt(phsq)

        with np.errstate(**IEEE_SILENT):
            qx = np.power(np.sqrt(s * s + phsq), exponent)
            if phsq <= 0.0:
                return Quaternion(qx * np.cos(exponent * ph), 0.0, 0.0, 0.0)

            qs = qx * np.sin(exponent * ph) / ph
            return Quaternion(qx * np.cos(exponent * ph), qs * x, qs * y, qs * z)

    def __pow__(self, exponent: Scalar, modulo=None) -> 'Quaternion':
        """``q ** t`` is ``q.pow(t)`` for a real exponent."""
        if modulo is None and _is_scalar(exponent):
            return self.pow(exponent)
        return NotImplemented

    # =========================================================================
    # ROTATION SUPPORT
    # =========================================================================

    def normalized(self) -> 'Quaternion':
        """
        Return q / |q|.

        The zero quaternion has no direction; its normalization is NaN in
        every component.
        """
        n = self.norm()
        if n == 0.0:
            logger.debug("Normalizing a zero-norm quaternion; result is NaN")
        return self / n

    def is_unit(self, tolerance: Optional[float] = None) -> bool:
        """
        Check if this quaternion has unit norm.

        Parameters
        ----------
        tolerance : float, optional
            Acceptable deviation from 1.0. Defaults to UNIT_TOLERANCE.
        """
        if tolerance is None:
            tolerance = self._UNIT_TOLERANCE
        return abs(self.norm() - 1.0) < tolerance

    def rotate_vector(self, v: np.ndarray) -> np.ndarray:
        """
        Rotate a 3D vector by this quaternion.

        Uses the sandwich product with the inverse,

            v' = q * [0, v] * q^{-1}

        so any nonzero q acts as the rotation of q / |q|.

        Parameters
        ----------
        v : np.ndarray
            3-element vector.

        Returns
        -------
        np.ndarray
            Rotated 3-element vector.
        """
        return (self * Quaternion.pure(v) * self.inv()).vector

    def to_rotation_vector(self) -> np.ndarray:
        """
        Rotation vector theta * n of the rotation represented by q.

        This is the logarithmic map of the normalized quaternion, doubled:
            rot_vec = 2 * ln(q / |q|).vector
        """
        return 2.0 * self.normalized().ln().vector

    def polar(self) -> Tuple[float, float, np.ndarray]:
        """
        Polar decomposition q = |q| * exp(angle * axis).

        Returns
        -------
        tuple of (float, float, np.ndarray)
            (norm, angle, axis) with angle = acos(s / |q|) in [0, pi] and
            axis the unit vector part. When the vector part is zero the
            axis is undefined and [0, 0, 1] is returned by convention.
        """
        n = self.norm()
        vec = self.vector
        vec_norm = np.linalg.norm(vec)

        with np.errstate(**IEEE_SILENT):
            angle = float(np.arccos(np.clip(self._q[0] / n, -1.0, 1.0)))

        if vec_norm == 0.0:
            axis = np.array([0.0, 0.0, 1.0])
        else:
            axis = vec / vec_norm
        return n, angle, axis

    # =========================================================================
    # INTERPOLATION
    # =========================================================================

    @staticmethod
    def slerp(q1: 'Quaternion', q2: 'Quaternion', t: float) -> 'Quaternion':
        """
        Spherical Linear Interpolation between two unit quaternions.

        Written with the exponential and logarithm maps:

            slerp(q1, q2, t) = q1 * exp(t * ln(q1^{-1} * q2))

        which traces the great arc from q1 (t = 0) to q2 (t = 1) at constant
        angular velocity. Values of t outside [0, 1] extrapolate along the
        same arc.

        Parameters
        ----------
        q1 : Quaternion
            Start of the arc.
        q2 : Quaternion
            End of the arc.
        t : float
            Interpolation parameter.

        Returns
        -------
        Quaternion
            Interpolated quaternion.

        Notes
        -----
        - The SHORT arc is used: if q1 . q2 < 0, q2 is negated first
          (q and -q are the same rotation).
        - When the inputs are nearly parallel the arc is numerically flat
          and normalized linear interpolation (NLERP) is returned instead.
        """
        with np.errstate(**IEEE_SILENT):
            cos_omega = np.float64(q1.dot(q2)) / (q1.norm() * q2.norm())

        if cos_omega < 0.0:
            q2 = -q2
            cos_omega = -cos_omega

        if cos_omega > SLERP_LINEAR_THRESHOLD:
            logger.debug(
                "SLERP inputs nearly parallel (cos=%.6f); using NLERP", cos_omega
            )
            return (q1 + (q2 - q1) * t).normalized()

        return q1 * ((q1.inv() * q2).ln() * t).exp()

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """
        Exact component-wise equality.

        No tolerance is applied: -0.0 equals 0.0 and NaN equals nothing,
        as for plain floats. Use ``isclose`` for approximate comparison.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    # In-place operators mutate the receiver.
    __hash__ = None

    def isclose(self, other: 'Quaternion', rtol: Optional[float] = None,
                atol: Optional[float] = None) -> bool:
        """
        Approximate component-wise equality.

        Parameters
        ----------
        other : Quaternion
            Quaternion to compare against.
        rtol, atol : float, optional
            Relative and absolute tolerances, as in ``numpy.allclose``.
            Default to the class comparison tolerances.

        Returns
        -------
        bool
            True if every component matches within tolerance.
        """
        if rtol is None:
            rtol = self._COMPARISON_RTOL
        if atol is None:
            atol = self._COMPARISON_ATOL
        return bool(np.allclose(self._q, other._q, rtol=rtol, atol=atol))

    # =========================================================================
    # REPRESENTATION
    # =========================================================================

    def __iter__(self) -> Iterator[float]:
        return iter(self._q.tolist())

    def __repr__(self) -> str:
        return f"Quaternion(s={self.s!r}, x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def __str__(self) -> str:
        """
        Render as ``"<s> + <x>i + <y>j + <z>k"``.

        Components use their shortest round-trip form without a trailing
        ``.0``: Quaternion(1, 2, 3, 4) renders as ``"1 + 2i + 3j + 4k"``.
        """
        return format_terms(self._q)

    def __format__(self, spec: str) -> str:
        """
        Format each component with spec.

        ``''`` gives the display form, ``'e'`` the shortest scientific form
        (``"1e0 + 2e0i + 3e0j + 4e0k"``), and any other float format spec is
        applied per component.
        """
        return format_terms(self._q, spec)

    def as_polar_string(self) -> str:
        """
        Format the polar decomposition, e.g. for logging.

        Returns
        -------
        str
            ``"|<norm>|, phi: <angle>, n: <nx>i <ny>j <nz>k"``
        """
        n, angle, axis = self.polar()
        nx, ny, nz = (format_positional(c) for c in axis)
        return (f"|{format_positional(n)}|, phi: {format_positional(angle)}, "
                f"n: {nx}i {ny}j {nz}k")

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def copy(self) -> 'Quaternion':
        """Return an independent copy of this quaternion."""
        s, x, y, z = self._q
        return Quaternion(s, x, y, z)
