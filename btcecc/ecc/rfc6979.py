#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Deterministic generation of the ephemeral key following RFC6979.

https://tools.ietf.org/html/rfc6979:

ECDSA needs to produce, for each signature generation,
a fresh random value (ephemeral key, hereafter designated as nonce).
Reusing the same ephemeral key for a different message
signed with the same private key reveals the private key!

RFC6979 turns ECDSA into a deterministic scheme by using a
deterministic process for generating the nonce,
making signatures reproducible (and testable).
"""

import hmac
from hashlib import sha256

from btcecc.alias import Integer
from btcecc.ecc.curve import N, P_SIZE
from btcecc.exceptions import BTCeccValueError
from btcecc.utils import int_from_bits, int_from_integer

NLEN = N.bit_length()


def _rfc6979_(c: int, q: int) -> int:
    # https://tools.ietf.org/html/rfc6979 section 3.2

    # convert the private key q to an octet sequence of size P_SIZE
    q_bytes = q.to_bytes(P_SIZE, byteorder="big", signed=False)
    # c has already been reduced mod n
    c_bytes = c.to_bytes(P_SIZE, byteorder="big", signed=False)
    bprvbm = q_bytes + c_bytes

    hf_size = sha256().digest_size
    v = b"\x01" * hf_size  # 3.2.b
    k = b"\x00" * hf_size  # 3.2.c

    k = hmac.new(k, v + b"\x00" + bprvbm, sha256).digest()  # 3.2.d
    v = hmac.new(k, v, sha256).digest()  # 3.2.e
    k = hmac.new(k, v + b"\x01" + bprvbm, sha256).digest()  # 3.2.f
    v = hmac.new(k, v, sha256).digest()  # 3.2.g

    while True:  # 3.2.h
        t = b""  # 3.2.h.1
        while len(t) < P_SIZE:  # 3.2.h.2
            v = hmac.new(k, v, sha256).digest()
            t += v
        # for secp256k1 and sha256 the bias of
        # int.from_bytes(t, 'big') % N would not be observable,
        # but the candidate is rejected instead of being reduced
        det_nonce = int_from_bits(t, NLEN)  # 3.2.h.3
        if 0 < det_nonce < N:
            return det_nonce
        k = hmac.new(k, v + b"\x00", sha256).digest()
        v = hmac.new(k, v, sha256).digest()


def rfc6979(z: Integer, secret: Integer) -> int:
    """Return a deterministic ephemeral key following RFC 6979.

    z is the message hash (as integer), secret the private key.

    see https://tools.ietf.org/html/rfc6979 section 3.2
    """

    z = int_from_integer(z)
    q = int_from_integer(secret)
    if not 0 < q < N:
        raise BTCeccValueError("private key not in 1..n-1")
    if z < 0:
        raise BTCeccValueError("negative message hash")

    return _rfc6979_(z % N, q)
