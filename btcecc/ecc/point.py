#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points and the group law.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
together with a point at infinity.

A curve point is either:

* Identity: the point at infinity of the curve (a, b),
  i.e. the neutral element of the group, with no coordinates
* AffinePoint: a point (x, y) satisfying the Weierstrass equation

so that a point with just one coordinate cannot exist.

Coordinates and curve constants are either all FieldElements
of the same prime field (curves over Fp, e.g. secp256k1)
or all rationals (unreduced test curves over Q,
e.g. y^2 = x^3 + 5x + 7).

Points are immutable: the group operations return new validated points.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Union

from btcecc.alias import Integer, Rational
from btcecc.ecc.field import FieldElement
from btcecc.exceptions import (
    BTCeccTypeError,
    BTCeccValueError,
    CurveMismatchError,
    ModulusMismatchError,
    PointNotOnCurveError,
)
from btcecc.utils import int_from_integer, int_repr

Coordinate = Union[FieldElement, Rational]


def _is_rational(c: Any) -> bool:
    return isinstance(c, (int, Fraction)) and not isinstance(c, bool)


def _require_same_kind(*values: Any) -> None:
    "Require all FieldElements of the same field or all rationals."

    if all(_is_rational(v) for v in values):
        return
    if not all(isinstance(v, FieldElement) for v in values):
        kinds = ", ".join(type(v).__name__ for v in values)
        raise BTCeccTypeError(f"mixed or invalid coordinate types: {kinds}")
    moduli = {v.modulus for v in values}
    if len(moduli) != 1:
        err_msg = "coordinates from different fields: "
        err_msg += ", ".join(int_repr(m) for m in sorted(moduli))
        raise ModulusMismatchError(err_msg)


def _is_zero(c: Coordinate) -> bool:
    if isinstance(c, FieldElement):
        return c.is_zero()
    return c == 0


def _div(num: Coordinate, den: Coordinate) -> Coordinate:
    # Fp division is multiplication by the inverse,
    # Q division is exact: no truncation towards zero
    if isinstance(num, FieldElement):
        return num / den
    if den == 0:
        raise BTCeccValueError("division by zero")
    q = Fraction(num) / Fraction(den)
    return q.numerator if q.denominator == 1 else q


class _GroupLaw:
    """Group operations shared by Identity and AffinePoint."""

    a: Coordinate
    b: Coordinate
    x: Optional[Coordinate]
    y: Optional[Coordinate]

    @property
    def is_identity(self) -> bool:
        return self.x is None

    @property
    def curve(self) -> tuple:
        "Return the curve constants (a, b)."
        return self.a, self.b

    def identity(self) -> "Identity":
        "Return the point at infinity of the same curve."
        return Identity(self.a, self.b)

    def is_valid(self) -> bool:
        "Return True if the point satisfies the curve equation."

        if self.x is None or self.y is None:
            return True
        x, y = self.x, self.y
        return y * y == x * x * x + self.a * x + self.b

    def slope(self, other: "CurvePoint") -> Optional[Coordinate]:
        """Return the slope of the line through the two points.

        There is no slope if a point is the identity;
        points with the same x-coordinate have a vertical line.
        """

        if self.x is None or other.x is None:
            return None
        if self.x == other.x:
            raise BTCeccValueError("vertical line: points have the same x-coordinate")
        return _div(other.y - self.y, other.x - self.x)

    def tangent_slope(self) -> Optional[Coordinate]:
        "Return the slope of the tangent line, (3x^2 + a) / 2y."

        if self.x is None or self.y is None:
            return None
        if _is_zero(self.y):
            raise BTCeccValueError("vertical tangent: y-coordinate is zero")
        return _div(3 * self.x * self.x + self.a, 2 * self.y)

    def add(self, other: "CurvePoint") -> "CurvePoint":
        """Return the sum of two points on the same curve.

        The cases are evaluated in this order:

        * different curves: CurveMismatchError
        * one of the points is the identity: return the other one
        * same x, different y: opposite points, return the identity
        * same point: doubling, using the tangent slope
          (identity if the tangent is vertical, i.e. y == 0)
        * different x: using the slope of the chord
        """

        if not isinstance(other, (Identity, AffinePoint)):
            raise BTCeccTypeError(f"not a curve point: {type(other).__name__}")
        if self.a != other.a or self.b != other.b:
            err_msg = "points are not on the same curve: "
            err_msg += f"a={self.a!r}, b={self.b!r} vs a={other.a!r}, b={other.b!r}"
            raise CurveMismatchError(err_msg)

        if other.x is None:
            return self  # type: ignore
        if self.x is None:
            return other

        x1, y1, x2, y2 = self.x, self.y, other.x, other.y
        if x1 == x2 and y1 != y2:
            return self.identity()

        if x1 == x2:  # same point: doubling
            if _is_zero(y1):
                return self.identity()
            s = self.tangent_slope()
            x3 = s * s - 2 * x1
        else:
            s = self.slope(other)
            x3 = s * s - x1 - x2
        y3 = s * (x1 - x3) - y1
        return AffinePoint(x3, y3, self.a, self.b)

    def double(self) -> "CurvePoint":
        return self.add(self)  # type: ignore

    def scalar_mul(self, k: Integer) -> "CurvePoint":
        """Return k * self using 'double & add'.

        This implementation uses the
        'right-to-left' binary decomposition of the k coefficient:
        O(log k) additions and doublings.
        """

        k = int_from_integer(k)
        if k < 0:
            raise BTCeccValueError(f"negative scalar: {int_repr(k)}")

        result: CurvePoint = self.identity()
        current: CurvePoint = self  # type: ignore
        while k > 0:
            if k & 1:
                result = result.add(current)
            current = current.add(current)
            k >>= 1
        return result

    def __add__(self, other: "CurvePoint") -> "CurvePoint":
        return self.add(other)

    def __mul__(self, k: int) -> "CurvePoint":
        if isinstance(k, bool) or not isinstance(k, int):
            return NotImplemented
        return self.scalar_mul(k)

    __rmul__ = __mul__

    def sec(self, compressed: bool = True) -> str:
        "Return the SEC serialization as lowercase hex-string."
        # imported here as sec_point depends on this module
        from btcecc.ecc.sec_point import sec

        return sec(self, compressed)  # type: ignore


@dataclass(frozen=True)
class Identity(_GroupLaw):
    """The point at infinity of the curve y^2 = x^3 + a*x + b."""

    a: Coordinate
    b: Coordinate

    def __post_init__(self) -> None:
        _require_same_kind(self.a, self.b)

    @property
    def x(self) -> None:  # type: ignore
        return None

    @property
    def y(self) -> None:  # type: ignore
        return None

    def __neg__(self) -> "Identity":
        return self


@dataclass(frozen=True)
class AffinePoint(_GroupLaw):
    """Point (x, y) of the curve y^2 = x^3 + a*x + b.

    Construction fails with PointNotOnCurveError
    if the Weierstrass equation is not satisfied.
    """

    x: Coordinate
    y: Coordinate
    a: Coordinate
    b: Coordinate

    def __post_init__(self) -> None:
        _require_same_kind(self.x, self.y, self.a, self.b)
        if not self.is_valid():
            raise PointNotOnCurveError(f"point not on curve: ({self.x!r}, {self.y!r})")

    def __neg__(self) -> "AffinePoint":
        return AffinePoint(self.x, -self.y, self.a, self.b)


CurvePoint = Union[Identity, AffinePoint]


def new_point(
    x: Optional[Coordinate],
    y: Optional[Coordinate],
    a: Coordinate,
    b: Coordinate,
) -> CurvePoint:
    """Return a curve point, the identity if both coordinates are None.

    A single missing coordinate is an error.
    """

    if x is None and y is None:
        return Identity(a, b)
    if x is None or y is None:
        raise BTCeccValueError("only one coordinate provided: both or none are needed")
    return AffinePoint(x, y, a, b)
