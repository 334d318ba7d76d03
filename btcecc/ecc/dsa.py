#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA) over secp256k1.

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

Scalars (message hash z, signature r and s, private keys)
live in the scalar field Fn, n being the curve order,
while point coordinates live in the coordinate field Fp.
"""

import logging
from dataclasses import InitVar, dataclass
from typing import Union

from btcecc.alias import Integer, Octets
from btcecc.ecc.curve import G, N, P_SIZE, is_secp_point, scalar_field
from btcecc.ecc.point import AffinePoint, CurvePoint, Identity
from btcecc.ecc.rfc6979 import rfc6979
from btcecc.ecc.sec_point import point_from_octets, sec
from btcecc.exceptions import BTCeccRuntimeError, BTCeccValueError
from btcecc.hashes import int_from_hash256
from btcecc.utils import int_from_integer, int_repr

logger = logging.getLogger(__name__)

PubKey = Union[CurvePoint, Octets]


@dataclass(frozen=True)
class Sig:
    """ECDSA signature (r, s).

    r and s are scalars in 1..n-1, n being the curve order.
    """

    r: int
    s: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        object.__setattr__(self, "r", int_from_integer(self.r))
        object.__setattr__(self, "s", int_from_integer(self.s))
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < N:
            raise BTCeccValueError(f"scalar r not in 1..n-1: {int_repr(self.r)}")
        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < N:
            raise BTCeccValueError(f"scalar s not in 1..n-1: {int_repr(self.s)}")


def _point_from_pub_key(pub_key: PubKey) -> AffinePoint:
    if isinstance(pub_key, (bytes, str)):
        return point_from_octets(pub_key)
    if not is_secp_point(pub_key):
        raise BTCeccValueError("public key is not a secp256k1 point")
    if isinstance(pub_key, Identity):
        raise BTCeccValueError("public key is the infinity point")
    return pub_key


def assert_as_valid(
    z: Integer, sig: Sig, pub_key: PubKey, generator: AffinePoint = G
) -> None:
    """Raise an Error if the signature is not valid.

    Steps numbering follows SEC 1 v.2 section 4.1.4
    """

    sig.assert_valid()  # 1
    P = _point_from_pub_key(pub_key)

    # scalar field arithmetic, i.e. mod n
    z_n = scalar_field(z)  # 2, 3
    s_n = scalar_field(sig.s)
    u = z_n / s_n  # 4
    v = scalar_field(sig.r) / s_n

    # R = u*G + v*P
    R = generator.scalar_mul(u.value) + P.scalar_mul(v.value)  # 5

    # the identity has no x-coordinate: this is not x == 0
    if R.x is None:
        raise BTCeccRuntimeError("invalid (INF) key")

    # fail if r ≠ x_R % n
    if R.x.value % N != sig.r:  # 6, 7, 8
        raise BTCeccRuntimeError("signature verification failed")


def verify(z: Integer, sig: Sig, pub_key: PubKey, generator: AffinePoint = G) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4).

    Return True if sig is a valid signature of the message hash z
    for the public key, False otherwise.
    """
    try:
        assert_as_valid(z, sig, pub_key, generator)
    except (BTCeccValueError, BTCeccRuntimeError) as e:
        logger.debug("invalid signature %s: %s", sig, e)
        return False

    return True


def verify_message(msg: Octets, sig: Sig, pub_key: PubKey) -> bool:
    "Verify a signature of the double SHA256 of msg."
    return verify(int_from_hash256(msg), sig, pub_key)


class PrivateKey:
    """secp256k1 private key, i.e. a scalar in 1..n-1.

    The corresponding public key is secret * G.
    """

    def __init__(self, secret: Integer) -> None:
        secret = int_from_integer(secret)
        if not 0 < secret < N:
            raise BTCeccValueError(f"private key not in 1..n-1: {int_repr(secret)}")
        self.secret = secret
        self.point = G.scalar_mul(secret)

    def __repr__(self) -> str:
        # do not leak the secret in logs and tracebacks
        return f"PrivateKey(point={sec(self.point)})"

    def hex(self) -> str:
        return format(self.secret, f"0{2 * P_SIZE}x")

    def sign(self, z: Integer, lower_s: bool = True) -> Sig:
        """Sign the message hash z (SEC 1 v.2 section 4.1.3).

        The nonce is deterministic, following RFC6979.
        """

        z = int_from_integer(z)
        k = rfc6979(z, self.secret)  # 1

        K = G.scalar_mul(k)
        # mod n makes the x-coordinate a scalar
        r = K.x.value % N  # type: ignore # 2, 3
        if r == 0:  # r≠0 required as it multiplies the public key
            raise BTCeccRuntimeError("failed to sign: r = 0")

        s = (scalar_field(z) + scalar_field(r) * self.secret) / scalar_field(k)  # 6
        if s.is_zero():  # s≠0 required as verify will need the inverse of s
            raise BTCeccRuntimeError("failed to sign: s = 0")

        # bitcoin canonical 'low-s' encoding for ECDSA signatures
        # see https://github.com/bitcoin/bitcoin/pull/6769
        if lower_s and s.value > N // 2:
            s = -s

        return Sig(r, s.value)

    def sign_message(self, msg: Octets) -> Sig:
        "Sign the double SHA256 of msg."
        return self.sign(int_from_hash256(msg))
