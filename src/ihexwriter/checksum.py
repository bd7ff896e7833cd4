# Copyright (c) 2013-2025, Andrea Zoppi
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

r"""Intel HEX checksum.

See Also:
    `<https://en.wikipedia.org/wiki/Intel_HEX#Checksum_calculation>`_
"""

from typing import Iterable
from typing import Union

from .utils import AnyBytes


def checksum(data: Union[AnyBytes, Iterable[int]]) -> int:
    r"""Computes the Intel HEX checksum of a byte sequence.

    The checksum is the two's complement of the least significant byte of the
    sum of all the bytes.
    Adding it to the summed bytes yields zero, modulo 256.

    Args:
        data (bytes):
            Bytes to sum; any iterable of integers in ``0..255`` is accepted.

    Returns:
        int: Checksum byte value.

    Examples:
        >>> from ihexwriter.checksum import checksum
        >>> checksum(b'')
        0
        >>> checksum(b'\x00\x00\x00\x01')
        255
        >>> checksum(b'\x03\x00\x30\x00\x02\x33\x7A')
        30
    """

    total = sum(iter(data))
    return (0x100 - (total & 0xFF)) & 0xFF
