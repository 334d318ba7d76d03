#!/usr/bin/env python3

# Copyright (C) 2024 The btcecc developers
#
# This file is part of btcecc. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcecc including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the btcecc package."

import logging

name = "btcecc"
__version__ = "2024.10.0"
__author__ = "The btcecc developers"
__author_email__ = "devs@btcecc.org"
__copyright__ = "Copyright (C) 2024 The btcecc developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
