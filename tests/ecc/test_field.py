#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcecc.ecc.field` module."

from dataclasses import FrozenInstanceError

import pytest

from btcecc.ecc.field import FieldElement
from btcecc.exceptions import (
    BTCeccTypeError,
    ModularInverseError,
    ModulusMismatchError,
    NotPrimeError,
)

P = 2**256 - 2**32 - 977


def test_not_prime_modulus() -> None:
    for modulus in (20, 1, 0, -7, 561, P * 3):
        with pytest.raises(NotPrimeError, match="modulus is not prime: "):
            FieldElement(3, modulus)
    # the ValueError hierarchy is preserved
    with pytest.raises(ValueError):
        FieldElement(3, 20)


def test_normalization() -> None:
    assert FieldElement(33, 31).value == 2
    assert FieldElement(-1, 7).value == 6
    assert FieldElement(-15, 31).value == 16
    assert FieldElement(0, 31).value == 0
    assert FieldElement("ff", 257).value == 255
    assert FieldElement("0x1f", 31).value == 0
    assert FieldElement("5", 7).value == 5
    assert FieldElement("abc", 2**255 - 19).value == 0xABC
    assert FieldElement(b"\x01\x00", 257).value == 256
    assert FieldElement(5, hex(P)).modulus == P


def test_equality() -> None:
    a = FieldElement(2, 31)
    b = FieldElement(2, 31)
    c = FieldElement(19, 31)
    assert a == b
    assert a != c
    assert FieldElement(2, 29) != a
    assert a != 2
    assert hash(a) == hash(b)
    assert len({a, b, c}) == 2


def test_immutability() -> None:
    a = FieldElement(2, 31)
    with pytest.raises(FrozenInstanceError):
        a.value = 3  # type: ignore
    b = a + a
    assert a == FieldElement(2, 31)
    assert b == FieldElement(4, 31)


def test_repr() -> None:
    a = FieldElement(2, 31)
    assert repr(a) == "FieldElement_31(2)"
    assert str(a) == "2"
    assert int(a) == 2
    assert a.prime == 31
    assert FieldElement(255, 257).hex() == "00ff"
    assert FieldElement(1, P).hex() == "00" * 31 + "01"


def test_add() -> None:
    assert FieldElement(2, 31) + FieldElement(15, 31) == FieldElement(17, 31)
    assert FieldElement(17, 31) + FieldElement(21, 31) == FieldElement(7, 31)
    assert FieldElement(2, 31).add(FieldElement(15, 31)) == FieldElement(17, 31)
    with pytest.raises(ModulusMismatchError, match="cannot add elements of different fields: "):
        FieldElement(17, 31) + FieldElement(21, 29)
    with pytest.raises(BTCeccTypeError, match="cannot add FieldElement and int"):
        FieldElement(17, 31) + 1  # type: ignore


def test_sub() -> None:
    assert FieldElement(29, 31) - FieldElement(4, 31) == FieldElement(25, 31)
    assert FieldElement(15, 31) - FieldElement(30, 31) == FieldElement(16, 31)
    assert FieldElement(15, 31).sub(FieldElement(30, 31)) == FieldElement(16, 31)
    assert -FieldElement(15, 31) == FieldElement(16, 31)
    assert -FieldElement(0, 31) == FieldElement(0, 31)
    with pytest.raises(ModulusMismatchError):
        FieldElement(17, 31) - FieldElement(21, 29)


def test_mul() -> None:
    assert FieldElement(24, 31) * FieldElement(19, 31) == FieldElement(22, 31)
    assert FieldElement(24, 31).mul(FieldElement(19, 31)) == FieldElement(22, 31)
    # integer coefficients
    assert 3 * FieldElement(10, 31) == FieldElement(30, 31)
    assert FieldElement(10, 31) * 4 == FieldElement(9, 31)
    assert -2 * FieldElement(1, 31) == FieldElement(29, 31)
    with pytest.raises(ModulusMismatchError):
        FieldElement(17, 31) * FieldElement(21, 29)
    with pytest.raises(BTCeccTypeError):
        FieldElement(17, 31) * 1.5  # type: ignore


def test_pow() -> None:
    assert FieldElement(17, 7) ** 6 == FieldElement(1, 7)
    assert FieldElement(17, 31) ** 3 == FieldElement(15, 31)
    assert FieldElement(5, 31) ** 5 * FieldElement(18, 31) == FieldElement(16, 31)
    assert FieldElement(5, 31).pow(0) == FieldElement(1, 31)
    # negative exponents
    assert FieldElement(17, 31) ** -3 == FieldElement(29, 31)
    assert FieldElement(4, 31) ** -4 * FieldElement(11, 31) == FieldElement(13, 31)
    assert FieldElement(17, 11).pow(-3) == FieldElement(8, 11)
    assert FieldElement(4, 17).pow(-4) * FieldElement(11, 17) == FieldElement(11, 17)
    # zero base
    assert FieldElement(0, 31) ** 0 == FieldElement(1, 31)
    assert FieldElement(0, 31) ** 30 == FieldElement(0, 31)
    assert FieldElement(0, 31) ** 5 == FieldElement(0, 31)
    with pytest.raises(ModularInverseError, match="zero has no inverse mod 31"):
        FieldElement(0, 31) ** -1
    with pytest.raises(BTCeccTypeError, match="exponent is not an int: "):
        FieldElement(5, 31) ** 1.5  # type: ignore


def test_div() -> None:
    assert FieldElement(3, 31) / FieldElement(24, 31) == FieldElement(4, 31)
    assert FieldElement(3, 7) / FieldElement(24, 7) == FieldElement(1, 7)
    assert FieldElement(3, 7).div(FieldElement(24, 7)) == FieldElement(1, 7)
    with pytest.raises(ModularInverseError, match="zero has no inverse mod 7"):
        FieldElement(3, 7) / FieldElement(0, 7)
    with pytest.raises(ModularInverseError):
        FieldElement(0, 7).inverse()
    with pytest.raises(ModulusMismatchError, match="cannot divide elements of different fields: "):
        FieldElement(3, 7) / FieldElement(3, 11)


def test_closure() -> None:
    for p in (2, 3, 7, 31, 223):
        elements = [FieldElement(i, p) for i in range(p)]
        for a in elements:
            for b in elements:
                results = [a + b, a - b, a * b]
                if not b.is_zero():
                    results.append(a / b)
                for c in results:
                    assert 0 <= c.value < p
                    assert c.modulus == p


def test_fermat_inverse() -> None:
    for p in (2, 3, 7, 31, 223):
        one = FieldElement(1, p)
        for i in range(1, p):
            a = FieldElement(i, p)
            assert a.pow(p - 2) * a == one
            assert a.inverse() * a == one
            assert a / a == one

    # large prime field
    a = FieldElement(0xDEADBEEF, P)
    assert a.pow(P - 2) * a == FieldElement(1, P)


def test_negative_exponent_law() -> None:
    p = 31
    for i in range(1, p):
        a = FieldElement(i, p)
        for k in range(1, p - 1):
            assert a.pow(-k) == a.pow(p - 1 - k)
        # exponents larger than p-1 wrap around
        assert a.pow(p - 1) == FieldElement(1, p)
        assert a.pow(3 * (p - 1) + 2) == a.pow(2)
        assert a.pow(-(p - 1) - 2) == a.pow(-2)


def test_helpers() -> None:
    a = FieldElement(4, 31)
    assert a.same_field(35) == a
    assert a.is_even()
    assert not FieldElement(5, 31).is_even()
    assert not a.is_zero()
    assert FieldElement(31, 31).is_zero()
    assert a.size == 1
    assert FieldElement(1, P).size == 32
