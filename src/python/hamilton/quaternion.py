"""
===============================================================================
HAMILTON - Quaternion Algebra Engine
===============================================================================

Hamilton quaternions built with the Cayley-Dickson doubling construction over
pairs of complex numbers.

Representation
--------------
A quaternion is stored as an ordered pair (P, Q) of complex numbers:

    z = P + Q*j,    P = a + b*i,    Q = c + d*i

so that the four real components (a, b, c, d) are the coefficients of the
basis {1, i, j, k}. P is called the Cayley-Dickson "real part" (Re) and Q the
Cayley-Dickson "imaginary part" (Im). The grouping matters: the product and
conjugation rules below operate on the pair, not on the four reals.

Multiplication
--------------
The Cayley-Dickson product on pairs is:

    Re(x*y) = Re(x)*Re(y) - conj(Im(y))*Im(x)
    Im(x*y) = Im(y)*Re(x) + Im(x)*conj(Re(y))

which reproduces Hamilton's table:

    i*i = j*j = k*k = -1
    i*j = -j*i = k,   j*k = -k*j = i,   k*i = -i*k = j

The product is associative and bilinear but NOT commutative.

Special values
--------------
Components may be any IEEE-754 double, including +/-Inf and NaN. Nothing is
normalized or validated. Arithmetic is evaluated under
``numpy.errstate(all="ignore")`` so special values propagate silently.

Value semantics
---------------
Hamilton values are immutable. Every operation returns a new value, so an
operation can never clobber one of its own operands, and the canonical
constants ZERO, ONE, I, J, K cannot be modified.

References
----------
    [1] Baez, "The Octonions", Bull. AMS 39, 2002, Sec. 2.2.
    [2] Kuipers, "Quaternions and Rotation Sequences", Princeton, 1999.
===============================================================================
"""

import logging
import numbers
from typing import Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

Number = Union[int, float, complex]


class DivideByZeroError(ZeroDivisionError):
    """Raised when a Hamilton value is inverted or divided by exact zero."""


class Hamilton:
    """
    Hamilton quaternion a + b*i + c*j + d*k as a pair of complex numbers.

    Parameters
    ----------
    a, b, c, d : float
        Coefficients of 1, i, j and k. (a, b) are packed into the first
        complex part and (c, d) into the second.

    Examples
    --------
    >>> z = Hamilton(1, 2, 3, 4)
    >>> z.cartesian()
    (1.0, 2.0, 3.0, 4.0)
    >>> I * J == K
    True
    >>> J * I == -K
    True
    """

    __slots__ = ('_z',)

    def __init__(self, a: float = 0.0, b: float = 0.0,
                 c: float = 0.0, d: float = 0.0) -> None:
        z = np.array([complex(float(a), float(b)),
                      complex(float(c), float(d))], dtype=np.complex128)
        # Backed by an immutable bytes buffer so WRITEABLE cannot be re-enabled.
        z = np.frombuffer(z.tobytes(), dtype=np.complex128)
        object.__setattr__(self, '_z', z)

    @classmethod
    def from_pair(cls, p: complex, q: complex) -> 'Hamilton':
        """
        Build a value from its Cayley-Dickson pair (P, Q).

        Parameters
        ----------
        p : complex
            Carries the 1 and i components.
        q : complex
            Carries the j and k components.
        """
        p, q = complex(p), complex(q)
        return cls(p.real, p.imag, q.real, q.imag)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __reduce__(self):
        return type(self), self.cartesian()

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def re(self) -> complex:
        """Cayley-Dickson real part P = a + b*i."""
        return complex(self._z[0])

    @property
    def im(self) -> complex:
        """Cayley-Dickson imaginary part Q = c + d*i."""
        return complex(self._z[1])

    @property
    def components(self) -> np.ndarray:
        """
        The four real components as a float64 array [a, b, c, d].

        Returns
        -------
        np.ndarray
            A fresh (writable) array; modifying it does not affect the value.
        """
        return np.array([self._z[0].real, self._z[0].imag,
                         self._z[1].real, self._z[1].imag], dtype=np.float64)

    def with_re(self, p: complex) -> 'Hamilton':
        """Return a copy of this value with its real part replaced by p."""
        return Hamilton.from_pair(p, self._z[1])

    def with_im(self, q: complex) -> 'Hamilton':
        """Return a copy of this value with its imaginary part replaced by q."""
        return Hamilton.from_pair(self._z[0], q)

    def to_pair(self) -> Tuple[complex, complex]:
        """Return the Cayley-Dickson pair (P, Q)."""
        return self.re, self.im

    def cartesian(self) -> Tuple[float, float, float, float]:
        """Return the four real components (a, b, c, d)."""
        p, q = self._z
        return float(p.real), float(p.imag), float(q.real), float(q.imag)

    def equals(self, other: 'Hamilton') -> bool:
        """
        Exact componentwise equality of both complex parts.

        There is no tolerance. NaN components never compare equal, and
        signed zeros compare equal to unsigned ones, exactly as for floats.
        """
        return bool(self._z[0] == other._z[0] and self._z[1] == other._z[1])

    def copy(self) -> 'Hamilton':
        """Return a new value equal to this one."""
        return Hamilton.from_pair(self._z[0], self._z[1])

    # =========================================================================
    # SPECIAL VALUES
    # =========================================================================

    def is_inf(self) -> bool:
        """
        True if either complex part is complex-infinite.

        A complex part is infinite when its real or imaginary component is
        +/-Inf, whatever the other component holds (NaN included).
        """
        return bool(np.isinf(self._z.real).any() or np.isinf(self._z.imag).any())

    def is_nan(self) -> bool:
        """
        True if some component is NaN and the value is not infinite.

        Infinity takes priority, so is_inf() and is_nan() are never both true.
        """
        if self.is_inf():
            return False
        return bool(np.isnan(self._z.real).any() or np.isnan(self._z.imag).any())

    @classmethod
    def inf(cls, sa: int = 1, sb: int = 1, sc: int = 1, sd: int = 1) -> 'Hamilton':
        """
        Build a quaternionic infinity.

        Each component is +Inf when its selector is >= 0 and -Inf otherwise.
        """
        return cls(*(np.inf if s >= 0 else -np.inf for s in (sa, sb, sc, sd)))

    @classmethod
    def nan(cls) -> 'Hamilton':
        """Build a value whose four components are all NaN."""
        return cls(np.nan, np.nan, np.nan, np.nan)

    # =========================================================================
    # LINEAR OPERATIONS
    # =========================================================================

    @np.errstate(all='ignore')
    def scal(self, a: complex) -> 'Hamilton':
        """
        Scale both complex parts by the complex number a.

        This acts on the pair directly: (P, Q) -> (P*a, Q*a). For a
        non-real a it is not the same as dilation, since it mixes the 1/i
        components and the j/k components with the same complex factor.
        """
        return Hamilton.from_pair(*(self._z * np.complex128(a)))

    @np.errstate(all='ignore')
    def dil(self, a: float) -> 'Hamilton':
        """Dilate by the real number a: (P, Q) -> (P*a, Q*a)."""
        return Hamilton.from_pair(*(self._z * np.complex128(complex(float(a), 0.0))))

    def neg(self) -> 'Hamilton':
        """Return the additive inverse, i.e. dil(-1)."""
        return self.dil(-1)

    @np.errstate(all='ignore')
    def conj(self) -> 'Hamilton':
        """
        Quaternion conjugate.

        P is complex-conjugated and Q is negated outright, taking
        (a, b, c, d) to (a, -b, -c, -d).
        """
        p, q = self._z
        return Hamilton.from_pair(np.conj(p), q * -1)

    @np.errstate(all='ignore')
    def add(self, other: 'Hamilton') -> 'Hamilton':
        """Componentwise sum self + other."""
        return Hamilton.from_pair(*(self._z + other._z))

    @np.errstate(all='ignore')
    def sub(self, other: 'Hamilton') -> 'Hamilton':
        """Componentwise difference self - other."""
        return Hamilton.from_pair(*(self._z - other._z))

    # =========================================================================
    # MULTIPLICATIVE ALGEBRA
    # =========================================================================

    @np.errstate(all='ignore')
    def mul(self, other: 'Hamilton') -> 'Hamilton':
        """
        Cayley-Dickson product self * other.

        Quaternion multiplication is NOT commutative: x.mul(y) differs from
        y.mul(x) in general (I.mul(J) is K, J.mul(I) is -K).

        Parameters
        ----------
        other : Hamilton
            Right-hand factor.

        Returns
        -------
        Hamilton
            The product, with

                Re = Re(x)*Re(y) - conj(Im(y))*Im(x)
                Im = Im(y)*Re(x) + Im(x)*conj(Re(y))
        """
        # Both operands are read in full before anything is built.
        p1, q1 = self._z
        p2, q2 = other._z
        return Hamilton.from_pair(
            p1 * p2 - np.conj(q2) * q1,
            q2 * p1 + q1 * np.conj(p2),
        )

    def commutator(self, other: 'Hamilton') -> 'Hamilton':
        """
        Commutator self*other - other*self.

        Zero when the two values commute (e.g. both real, or one a real
        multiple of the other), generally nonzero otherwise.
        """
        return self.mul(other).sub(other.mul(self))

    # =========================================================================
    # METRIC AND DIVISION
    # =========================================================================

    @np.errstate(all='ignore')
    def quad(self) -> float:
        """
        Quadrance |P|^2 + |Q|^2, i.e. a^2 + b^2 + c^2 + d^2.

        Never negative. An infinite value has quadrance +Inf; a NaN value
        has quadrance NaN.

        Notes
        -----
        Squaring can underflow: a nonzero value whose components are all
        below about 1e-154 in magnitude has quadrance 0.0, so quad(z) == 0
        implies z == ZERO only when no underflow occurs.
        """
        p, q = np.abs(self._z)
        return float(p * p + q * q)

    @np.errstate(all='ignore')
    def inv(self) -> 'Hamilton':
        """
        Multiplicative inverse conj(self) / quad(self).

        Raises
        ------
        DivideByZeroError
            If this value is exactly zero (componentwise, no tolerance).

        Notes
        -----
        Only exact zero is rejected. A nonzero value whose quadrance
        underflows to 0.0 is inverted with a reciprocal of +Inf, giving
        Inf and NaN components instead of an error.
        """
        if self == ZERO:
            logger.debug("Rejected inverse of zero quaternion %r", self)
            raise DivideByZeroError("inverse of zero")
        return self.conj().dil(np.float64(1.0) / np.float64(self.quad()))

    @np.errstate(all='ignore')
    def quo(self, other: 'Hamilton') -> 'Hamilton':
        """
        Right quotient self * other^-1.

        Computed as self * conj(other) / quad(other) without building the
        inverse. Because multiplication does not commute, this is NOT
        other^-1 * self.

        Raises
        ------
        DivideByZeroError
            If other is exactly zero (componentwise, no tolerance).
        """
        if other == ZERO:
            logger.debug("Rejected division of %r by zero quaternion", self)
            raise DivideByZeroError("denominator is zero")
        return self.mul(other.conj()).dil(np.float64(1.0) / np.float64(other.quad()))

    # =========================================================================
    # HYPERSPHERICAL COORDINATES
    # =========================================================================

    @staticmethod
    @np.errstate(all='ignore')
    def from_hyperspherical(r: float, theta1: float, theta2: float,
                            theta3: float) -> 'Hamilton':
        """
        Build a value from 4-D hyperspherical coordinates.

            a = r*cos(t1)
            b = r*sin(t1)*cos(t2)
            c = r*sin(t1)*sin(t2)*cos(t3)
            d = r*sin(t1)*sin(t2)*sin(t3)

        Parameters
        ----------
        r : float
            Radius. When exactly zero, ZERO is returned without evaluating
            any trigonometry.
        theta1, theta2, theta3 : float
            Angles in radians. They are used as given, without range
            reduction or clamping.
        """
        if r == 0:
            return ZERO
        s1 = np.sin(theta1)
        s2 = np.sin(theta2)
        return Hamilton(
            r * np.cos(theta1),
            r * s1 * np.cos(theta2),
            r * s1 * s2 * np.cos(theta3),
            r * s1 * s2 * np.sin(theta3),
        )

    @np.errstate(all='ignore')
    def to_hyperspherical(self) -> Tuple[float, float, float, float]:
        """
        Convert to hyperspherical coordinates (r, theta1, theta2, theta3).

        Returns
        -------
        tuple of float
            With h = |Q|:

                r      = sqrt(quad)
                theta1 = atan(hypot(b, h) / a)
                theta2 = atan(h / b)
                theta3 = atan2(d, c)

            At the origin the angles are undefined and (0, NaN, NaN, NaN) is
            returned.

        Notes
        -----
        theta1 and theta2 use the one-argument arctangent, so they only
        cover (-pi/2, pi/2): a negative a or b folds the angle, and a zero
        a or b yields +/-pi/2 or NaN (0/0). Only theta3 is quadrant-correct.
        """
        if self == ZERO:
            logger.debug("Hyperspherical angles are undefined at the origin")
            return 0.0, float('nan'), float('nan'), float('nan')
        p, q = self._z
        h = np.abs(q)
        r = np.sqrt(np.float64(self.quad()))
        theta1 = np.arctan(np.hypot(p.imag, h) / p.real)
        theta2 = np.arctan(h / p.imag)
        theta3 = np.arctan2(q.imag, q.real)
        return float(r), float(theta1), float(theta2), float(theta3)

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    @staticmethod
    def _coerce(other):
        if isinstance(other, Hamilton):
            return other
        if isinstance(other, numbers.Complex):
            return Hamilton.from_pair(other, 0)
        return NotImplemented

    def __add__(self, other: 'Hamilton') -> 'Hamilton':
        if isinstance(other, Hamilton):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: 'Hamilton') -> 'Hamilton':
        if isinstance(other, Hamilton):
            return self.sub(other)
        return NotImplemented

    def __neg__(self) -> 'Hamilton':
        return self.neg()

    def __mul__(self, other: Union['Hamilton', Number]) -> 'Hamilton':
        """
        Multiplication operator.

        - Hamilton * Hamilton -> Cayley-Dickson product
        - Hamilton * real     -> dilation
        - Hamilton * complex  -> product with Hamilton.from_pair(c, 0)
        """
        if isinstance(other, numbers.Real):
            return self.dil(other)
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.mul(other)

    def __rmul__(self, other: Number) -> 'Hamilton':
        """Left multiplication; for a complex c this is scal(c)."""
        if isinstance(other, numbers.Real):
            return self.dil(other)
        if isinstance(other, numbers.Complex):
            return self.scal(other)
        return NotImplemented

    def __truediv__(self, other: Union['Hamilton', Number]) -> 'Hamilton':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.quo(other)

    def __rtruediv__(self, other: Number) -> 'Hamilton':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.quo(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hamilton):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.to_pair())

    def __repr__(self) -> str:
        return "Hamilton({!r}, {!r}, {!r}, {!r})".format(*self.cartesian())


# =============================================================================
# CANONICAL CONSTANTS
# =============================================================================
ZERO = Hamilton(0, 0, 0, 0)
ONE = Hamilton(1, 0, 0, 0)
I = Hamilton(0, 1, 0, 0)
J = Hamilton(0, 0, 1, 0)
K = Hamilton(0, 0, 0, 1)
