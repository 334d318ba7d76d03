#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from fractions import Fraction
from typing import Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "04 ffe558e388852f0120e46af2d1b370f85854a8eb0841811ece0e3e03d282d57c 315dc72890a4f10a1481c031b03b351b0dc79901ca18a00cf009dbdb157a1d10"
# "0357a4f368868a8a6d572991e484e664810ff14c05c0fa023275251151fe0e53d1"
#
# use btcecc.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for SEC serialized points, messages to be hashed, etc.
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
#
# e.g. curve coordinates, scalars, signature components:
# 0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798
# "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
# "0x79be667e f9dcbbac"
#
# use btcecc.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Plain coordinates of points on curves over the rationals,
# i.e. the unreduced test curves (e.g. y^2 = x^3 + 5x + 7).
# Division between ints results in a Fraction unless it is exact.
Rational = Union[int, Fraction]
