"""Shared fixtures for the license segmentation tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from licparse import registry

BSD_LICENSE = """\
Copyright (c) 2013 The Project Authors. All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are
met:

    1. Redistributions of source code must retain the above copyright
    notice, this list of conditions and the following disclaimer.

    2. Redistributions in binary form must reproduce the above
    copyright notice in the documentation.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
"AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES ARE DISCLAIMED.
"""

LGPL_PREAMBLE = """\
                  GNU LESSER GENERAL PUBLIC LICENSE
                       Version 2.1, February 1999

 Copyright (C) 1991, 1999 Free Software Foundation, Inc.
 Everyone is permitted to copy and distribute verbatim copies
 of this license document, but changing it is not allowed.

[This is the first released version of the Lesser GPL.  It also counts
 as the successor of the GNU Library Public License, version 2, hence
 the version number 2.1.]

                            Preamble
"""


@pytest.fixture(autouse=True)
def clean_registry() -> Iterator[None]:
    """Start and finish every test with an empty license registry."""
    registry.reset()
    yield
    registry.reset()


@pytest.fixture
def bsd_license() -> str:
    """Return a short BSD-style license text."""
    return BSD_LICENSE


@pytest.fixture
def lgpl_preamble() -> str:
    """Return the opening lines of the LGPL 2.1."""
    return LGPL_PREAMBLE
