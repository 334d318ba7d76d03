#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions raised
by btcecc from those raised by other codebase.
The domain specific ones are subclasses of BTCeccValueError,
so users can deal with either the specific error or with the
regular ValueError.
"""


class BTCeccValueError(ValueError):
    pass


class BTCeccTypeError(TypeError):
    pass


class BTCeccRuntimeError(RuntimeError):
    pass


class NotPrimeError(BTCeccValueError):
    "The modulus of a prime field is not prime."


class ModulusMismatchError(BTCeccValueError):
    "Binary operation between elements of different prime fields."


class PointNotOnCurveError(BTCeccValueError):
    "The coordinates do not satisfy the Weierstrass equation."


class CurveMismatchError(BTCeccValueError):
    "Group operation between points of different curves."


class ModularInverseError(BTCeccValueError):
    "No modular inverse exists (e.g. inverse of zero)."
