#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field Fp.

A FieldElement is an immutable element of the prime field Fp,
i.e. an integer in [0, p-1] with modular arithmetic.

Division is multiplication by the modular inverse, obtained
through Fermat's little theorem:

    a^(p-1) = 1 (mod p)  =>  a^(p-2) = a^(-1) (mod p)

this is the reason why the modulus must be a prime.
"""

import functools
from dataclasses import dataclass
from math import ceil
from typing import Any, Union

from btcecc.alias import Integer
from btcecc.ecc.number_theory import is_prime
from btcecc.exceptions import (
    BTCeccTypeError,
    ModularInverseError,
    ModulusMismatchError,
    NotPrimeError,
)
from btcecc.utils import int_from_integer, int_repr


@functools.lru_cache()
def _is_prime_modulus(modulus: int) -> bool:
    # every field operation builds a new element with the same modulus
    return is_prime(modulus)


@dataclass(frozen=True, repr=False)
class FieldElement:
    """Element of the prime field Fp.

    value is always reduced into [0, modulus-1] (Euclidean remainder),
    even if the input is negative or larger than the modulus.
    Construction fails with NotPrimeError if the modulus is not prime.

    Elements are equal if both value and modulus are equal.
    """

    value: int
    modulus: int

    def __post_init__(self) -> None:
        modulus = int_from_integer(self.modulus)
        if not _is_prime_modulus(modulus):
            raise NotPrimeError(f"modulus is not prime: {int_repr(modulus)}")
        value = int_from_integer(self.value) % modulus
        # frozen dataclass: the normalized values must bypass __setattr__
        object.__setattr__(self, "modulus", modulus)
        object.__setattr__(self, "value", value)

    @property
    def prime(self) -> int:
        return self.modulus

    @property
    def size(self) -> int:
        "Byte size of the field elements."
        return ceil(self.modulus.bit_length() / 8)

    def __repr__(self) -> str:
        return f"FieldElement_{self.modulus}({self.value})"

    def __str__(self) -> str:
        return f"{self.value}"

    def __int__(self) -> int:
        return self.value

    def hex(self) -> str:
        "Return the zero-padded, lowercase, big-endian hex-string."
        return format(self.value, f"0{2 * self.size}x")

    def same_field(self, value: Integer) -> "FieldElement":
        "Return a new element of the same field."
        return FieldElement(value, self.modulus)

    def is_zero(self) -> bool:
        return self.value == 0

    def is_even(self) -> bool:
        return self.value % 2 == 0

    def _require_same_field(self, other: Any, op: str) -> None:
        if not isinstance(other, FieldElement):
            raise BTCeccTypeError(f"cannot {op} FieldElement and {type(other).__name__}")
        if self.modulus != other.modulus:
            err_msg = f"cannot {op} elements of different fields: "
            err_msg += f"{int_repr(self.modulus)} vs {int_repr(other.modulus)}"
            raise ModulusMismatchError(err_msg)

    def add(self, other: "FieldElement") -> "FieldElement":
        self._require_same_field(other, "add")
        return self.same_field(self.value + other.value)

    def sub(self, other: "FieldElement") -> "FieldElement":
        self._require_same_field(other, "subtract")
        return self.same_field(self.value - other.value)

    def mul(self, other: Union["FieldElement", int]) -> "FieldElement":
        """Return the product with another element or with an integer.

        Multiplication by an integer k is the repeated addition
        of the element k times.
        """
        if isinstance(other, int) and not isinstance(other, bool):
            return self.same_field(self.value * other)
        self._require_same_field(other, "multiply")
        return self.same_field(self.value * other.value)

    def pow(self, exponent: int) -> "FieldElement":
        """Return the element raised to the (possibly negative) exponent.

        The exponent is reduced mod p-1 (Fermat's little theorem),
        so that a negative exponent becomes a non-negative one.
        Zero has no negative powers: ModularInverseError.
        """

        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise BTCeccTypeError(f"exponent is not an int: {exponent!r}")

        if self.value == 0:
            if exponent < 0:
                raise ModularInverseError(f"zero has no inverse mod {int_repr(self.modulus)}")
            return self.same_field(1 if exponent == 0 else 0)

        # Python's % always gives a result in [0, p-2]
        exponent %= self.modulus - 1
        return self.same_field(pow(self.value, exponent, self.modulus))

    def inverse(self) -> "FieldElement":
        "Return the multiplicative inverse, i.e. self^(p-2)."
        if self.value == 0:
            raise ModularInverseError(f"zero has no inverse mod {int_repr(self.modulus)}")
        return self.pow(self.modulus - 2)

    def div(self, other: "FieldElement") -> "FieldElement":
        "Return self * other^(p-2)."
        self._require_same_field(other, "divide")
        return self.mul(other.inverse())

    def __add__(self, other: "FieldElement") -> "FieldElement":
        return self.add(other)

    def __sub__(self, other: "FieldElement") -> "FieldElement":
        return self.sub(other)

    def __mul__(self, other: Union["FieldElement", int]) -> "FieldElement":
        return self.mul(other)

    def __rmul__(self, other: int) -> "FieldElement":
        return self.mul(other)

    def __truediv__(self, other: "FieldElement") -> "FieldElement":
        return self.div(other)

    def __pow__(self, exponent: int) -> "FieldElement":
        return self.pow(exponent)

    def __neg__(self) -> "FieldElement":
        return self.same_field(-self.value)
