#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed/uncompressed point representation.

SEC 1 v.2, sections 2.3.3 and 2.3.4:

* uncompressed: 0x04 + x + y
* compressed: 0x02 (even y) or 0x03 (odd y) + x

with x and y as 32 bytes big-endian integers.
"""

from btcecc.alias import Octets
from btcecc.ecc.curve import B, P, P_SIZE, secp_point
from btcecc.ecc.field import FieldElement
from btcecc.ecc.number_theory import mod_sqrt
from btcecc.ecc.point import AffinePoint, CurvePoint
from btcecc.exceptions import BTCeccTypeError, BTCeccValueError
from btcecc.utils import bytes_from_octets, fixed_width_hex, int_repr


def sec(Q: CurvePoint, compressed: bool = True) -> str:
    """Return a point as compressed/uncompressed lowercase hex-string.

    Coordinates are 32 bytes zero-padded fields:
    a coordinate not fitting in 32 bytes is an error.
    """

    if Q.x is None or Q.y is None:
        raise BTCeccValueError("no SEC representation for infinity point")
    if not isinstance(Q.x, FieldElement) or not isinstance(Q.y, FieldElement):
        raise BTCeccTypeError("no SEC representation for points over the rationals")

    x_hex = fixed_width_hex(Q.x.value, P_SIZE)
    if compressed:
        return ("02" if Q.y.is_even() else "03") + x_hex
    return "04" + x_hex + fixed_width_hex(Q.y.value, P_SIZE)


def bytes_from_point(Q: CurvePoint, compressed: bool = True) -> bytes:
    "Return a point as compressed/uncompressed octet sequence."
    return bytes.fromhex(sec(Q, compressed))


def point_from_octets(pub_key: Octets) -> AffinePoint:
    """Return the secp256k1 point from its SEC representation.

    For compressed points, the y-coordinate is recovered from x
    solving the curve equation; its parity is set by the prefix.
    """

    pub_key = bytes_from_octets(pub_key, (P_SIZE + 1, 2 * P_SIZE + 1))

    bsize = len(pub_key)
    if pub_key[0] in (0x02, 0x03):
        if bsize != P_SIZE + 1:
            err_msg = "invalid size for compressed point: "
            err_msg += f"{bsize} instead of {P_SIZE + 1}"
            raise BTCeccValueError(err_msg)
        x = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
        if x >= P:
            raise BTCeccValueError(f"x-coordinate not in 0..p-1: {int_repr(x)}")
        try:
            y = mod_sqrt(x * x * x + B, P)
        except BTCeccValueError as e:
            raise BTCeccValueError(f"invalid x-coordinate: {int_repr(x)}") from e
        # 0x02 for even y, 0x03 for odd y
        if y & 1 != pub_key[0] & 1:
            y = P - y
        return secp_point(x, y)  # type: ignore

    if pub_key[0] == 0x04:
        if bsize != 2 * P_SIZE + 1:
            err_msg = "invalid size for uncompressed point: "
            err_msg += f"{bsize} instead of {2 * P_SIZE + 1}"
            raise BTCeccValueError(err_msg)
        x_Q = int.from_bytes(pub_key[1 : P_SIZE + 1], byteorder="big", signed=False)
        y_Q = int.from_bytes(pub_key[P_SIZE + 1 :], byteorder="big", signed=False)
        if x_Q >= P or y_Q >= P:
            raise BTCeccValueError("coordinate not in 0..p-1")
        return secp_point(x_Q, y_Q)  # type: ignore

    raise BTCeccValueError(f"not a point: {pub_key.hex()}")
