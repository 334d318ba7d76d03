#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""The secp256k1 elliptic curve.

SEC 2 v.2 curve parameters, see
http://www.secg.org/sec2-v2.pdf

y^2 = x^3 + 7 over Fp, with p = 2^256 - 2^32 - 977
"""

from typing import Any, Optional

from btcecc.alias import Integer
from btcecc.ecc.field import FieldElement
from btcecc.ecc.point import AffinePoint, CurvePoint, Identity, new_point

# field prime
P = 2**256 - 2**32 - 977
# curve constants
A = 0
B = 7
# generator affine coordinates
GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
# order of the generator, i.e. number of points of the curve
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
# byte size of coordinates and scalars
P_SIZE = 32


def s256_field(value: Integer) -> FieldElement:
    "Return an element of the secp256k1 coordinate field Fp."
    return FieldElement(value, P)


def scalar_field(value: Integer) -> FieldElement:
    "Return an element of the secp256k1 scalar field Fn."
    return FieldElement(value, N)


_A = s256_field(A)
_B = s256_field(B)

INF = Identity(_A, _B)


def secp_point(x: Optional[Integer], y: Optional[Integer]) -> CurvePoint:
    """Return a secp256k1 point from integer (or hex-string) coordinates.

    (None, None) is the point at infinity.
    """
    x_ = None if x is None else s256_field(x)
    y_ = None if y is None else s256_field(y)
    return new_point(x_, y_, _A, _B)


def secp_generator() -> AffinePoint:
    "Return the secp256k1 generator point."
    return G


def is_secp_point(Q: Any) -> bool:
    "Return True if Q is a point (or the identity) of secp256k1."
    return isinstance(Q, (Identity, AffinePoint)) and Q.a == _A and Q.b == _B


G = AffinePoint(s256_field(GX), s256_field(GY), _A, _B)
