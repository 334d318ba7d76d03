#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcecc.ecc.sec_point` module."

import pytest

from btcecc.ecc.curve import INF, N, G, secp_generator
from btcecc.ecc.field import FieldElement
from btcecc.ecc.point import AffinePoint
from btcecc.ecc.sec_point import bytes_from_point, point_from_octets, sec
from btcecc.exceptions import BTCeccTypeError, BTCeccValueError, PointNotOnCurveError

uncompressed_vectors = (
    (
        5000,
        "04ffe558e388852f0120e46af2d1b370f85854a8eb0841811ece0e3e03d282d57c"
        "315dc72890a4f10a1481c031b03b351b0dc79901ca18a00cf009dbdb157a1d10",
    ),
    (
        2018**5,
        "04027f3da1918455e03c46f659266a1bb5204e959db7364d2f473bdf8f0a13cc9d"
        "ff87647fd023c13b4a4994f17691895806e1b40b57f4fd22581a4f46851f3b06",
    ),
    (
        0xDEADBEEF12345,
        "04d90cd625ee87dd38656dd95cf79f65f60f7273b67d3096e68bd81e4f5342691f"
        "842efa762fd59961d0e99803c61edba8b3e3f7dc3a341836f97733aebf987121",
    ),
)

compressed_vectors = (
    (5001, "0357a4f368868a8a6d572991e484e664810ff14c05c0fa023275251151fe0e53d1"),
    (2019**5, "02933ec2d2b111b92737ec12f1c5d20f3233a0ad21cd8b36d0bca7a0cfa5cb8701"),
    (
        0xDEADBEEF54321,
        "0296be5b1292f6c856b3c5654e886fc13511462059089cdf9c479623bfcbe77690",
    ),
)


def test_uncompressed_sec() -> None:
    for k, expected in uncompressed_vectors:
        Q = secp_generator().scalar_mul(k)
        assert Q.sec(False) == expected
        assert sec(Q, compressed=False) == expected
        assert bytes_from_point(Q, False) == bytes.fromhex(expected)
        assert point_from_octets(expected) == Q
        assert point_from_octets(bytes.fromhex(expected)) == Q


def test_compressed_sec() -> None:
    for k, expected in compressed_vectors:
        Q = secp_generator().scalar_mul(k)
        assert Q.sec(True) == expected
        assert Q.sec() == expected
        assert bytes_from_point(Q) == bytes.fromhex(expected)
        assert point_from_octets(expected) == Q
        # the opposite point has the other parity prefix
        neg_expected = ("02" if expected[:2] == "03" else "03") + expected[2:]
        assert (-Q).sec() == neg_expected
        assert point_from_octets(neg_expected) == -Q


def test_hex_string_scalar() -> None:
    # odd-length hex-string scalars are valid
    Q = secp_generator().scalar_mul("deadbeef12345")
    assert Q == secp_generator().scalar_mul(0xDEADBEEF12345)
    assert Q.sec(False) == uncompressed_vectors[2][1]


def test_generator_sec() -> None:
    assert G.sec() == (
        "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )
    assert G.sec(False) == (
        "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
        "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
    )
    assert G.scalar_mul(N - 1).sec() == (
        "0379be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )


def test_infinity_point_sec() -> None:
    with pytest.raises(BTCeccValueError, match="no SEC representation for infinity point"):
        INF.sec()
    with pytest.raises(BTCeccValueError, match="no SEC representation for infinity point"):
        bytes_from_point(INF, False)


def test_rational_point_sec() -> None:
    with pytest.raises(BTCeccTypeError, match="no SEC representation for points over the rationals"):
        AffinePoint(2, 5, 5, 7).sec()


def test_oversize_coordinates() -> None:
    # (2^300, 2^450) is on y^2 = x^3 over any field:
    # its coordinates do not fit in 32 bytes
    p = 2**521 - 1
    x = FieldElement(2**300, p)
    y = FieldElement(2**450, p)
    zero = FieldElement(0, p)
    Q = AffinePoint(x, y, zero, zero)
    with pytest.raises(BTCeccValueError, match="integer too large for 32 bytes: "):
        Q.sec()
    with pytest.raises(BTCeccValueError, match="integer too large for 32 bytes: "):
        Q.sec(False)


def test_point_from_octets_errors() -> None:
    size = 32
    Q_bytes = b"\x01" + b"\x01" * size
    with pytest.raises(BTCeccValueError, match="not a point: "):
        point_from_octets(Q_bytes)

    Q_bytes = b"\x01" + b"\x01" * 2 * size
    with pytest.raises(BTCeccValueError, match="not a point: "):
        point_from_octets(Q_bytes)

    Q_bytes = b"\x04" + b"\x01" * size
    with pytest.raises(BTCeccValueError, match="invalid size for uncompressed point: "):
        point_from_octets(Q_bytes)

    Q_bytes = b"\x02" + b"\x01" * 2 * size
    with pytest.raises(BTCeccValueError, match="invalid size for compressed point: "):
        point_from_octets(Q_bytes)

    Q_bytes = b"\x03" + b"\x01" * 2 * size
    with pytest.raises(BTCeccValueError, match="invalid size for compressed point: "):
        point_from_octets(Q_bytes)

    with pytest.raises(BTCeccValueError, match="invalid size: "):
        point_from_octets(b"\x02" + b"\x01" * (size - 1))

    # invalid x_Q coordinate
    x_Q = 0xEEFDEA4CDB677750A420FEE807EACF21EB9898AE79B9768766E4FAA04A2D4A34
    xstr = format(x_Q, "064x")
    with pytest.raises(BTCeccValueError, match="invalid x-coordinate: "):
        point_from_octets("03" + xstr)
    with pytest.raises(PointNotOnCurveError, match="point not on curve: "):
        point_from_octets("04" + 2 * xstr)

    # coordinates out of field
    with pytest.raises(BTCeccValueError, match="x-coordinate not in 0..p-1: "):
        point_from_octets("02" + "ff" * size)
    with pytest.raises(BTCeccValueError, match="coordinate not in 0..p-1"):
        point_from_octets("04" + "ff" * 2 * size)
