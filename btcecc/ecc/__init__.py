#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field and elliptic curve arithmetic.

The modules are layered bottom-up:

* number_theory: primality and modular square roots
* field: FieldElement, an element of Fp
* point: Identity and AffinePoint, the elliptic curve group law
* curve: secp256k1 parameters and constructors
* sec_point: SEC 1 v.2 point serialization
* rfc6979, dsa: ECDSA
"""
