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

r"""Intel HEX record encoder and object file assembler.

Each record is serialized as a single text line::

    :LLAAAATT[DD...]CC

where ``LL`` is the data length, ``AAAA`` the 16-bit address, ``TT`` the
record tag, ``DD`` the data bytes and ``CC`` the checksum, all of them as
uppercase hexadecimal digits, big-endian.

See Also:
    `<https://en.wikipedia.org/wiki/Intel_HEX>`_
"""

from typing import Iterable
from typing import List
from typing import Mapping
from typing import MutableMapping
from typing import Sequence

import colorama

from .checksum import checksum
from .errors import DataExceedsMaximumLength
from .errors import MissingEndOfFileRecord
from .errors import MultipleEndOfFileRecords
from .utils import AnyBytes
from .utils import hexlify

MAX_DATA_LENGTH: int = 0xFF
r"""Maximum number of data bytes held by a single record."""

TOKEN_COLOR_CODES: Mapping[str, str] = {
    '':         colorama.Style.RESET_ALL,
    '<':        colorama.Style.RESET_ALL,
    '>':        colorama.Style.RESET_ALL,
    'address':  colorama.Fore.RED,
    'begin':    colorama.Fore.YELLOW,
    'checksum': colorama.Fore.MAGENTA,
    'count':    colorama.Fore.BLUE,
    'data':     colorama.Fore.CYAN,
    'dataalt':  colorama.Fore.LIGHTCYAN_EX,
    'tag':      colorama.Fore.GREEN,
}
r"""ANSI color codes for each possible token type."""


def build_layout(tag: int, address: int, data: AnyBytes) -> bytes:
    r"""Builds the binary layout of a record.

    The layout is made of the data length byte, the big-endian address, the
    tag byte, the data bytes, and the checksum of all of the previous bytes.

    Args:
        tag (int):
            Record tag (type code).

        address (int):
            16-bit address field value.

        data (bytes):
            Data field, up to :data:`MAX_DATA_LENGTH` bytes.

    Returns:
        bytes: Record layout, checksum included.

    Raises:
        :class:`DataExceedsMaximumLength`: `data` is too long.

    Examples:
        >>> from ihexwriter.writer import build_layout
        >>> build_layout(1, 0x0000, b'').hex().upper()
        '00000001FF'
    """

    size = len(data)
    if size > MAX_DATA_LENGTH:
        raise DataExceedsMaximumLength(size)

    layout = bytearray()
    layout.append(size)
    layout.append((address >> 8) & 0xFF)
    layout.append(address & 0xFF)
    layout.append(tag & 0xFF)
    layout.extend(data)
    layout.append(checksum(layout))
    return bytes(layout)


def format_record(tag: int, address: int, data: AnyBytes) -> str:
    r"""Formats a record line.

    Args:
        tag (int):
            Record tag (type code).

        address (int):
            16-bit address field value.

        data (bytes):
            Data field, up to :data:`MAX_DATA_LENGTH` bytes.

    Returns:
        str: Record line, without line terminator.

    Raises:
        :class:`DataExceedsMaximumLength`: `data` is too long.

    Examples:
        >>> from ihexwriter.writer import format_record
        >>> format_record(0, 0x0010, b'Hello')
        ':0500100048656C6C6FF7'
        >>> format_record(2, 0x0000, b'\x01\x00')
        ':020000020100FB'
    """

    layout = build_layout(tag, address, data)
    return ':' + hexlify(layout).decode('ascii')


def format_tokens(tag: int, address: int, data: AnyBytes) -> MutableMapping[str, str]:
    r"""Formats a record line, split into tokens.

    Joining the tokens in order yields the same text as :func:`format_record`.

    Args:
        tag (int):
            Record tag (type code).

        address (int):
            16-bit address field value.

        data (bytes):
            Data field, up to :data:`MAX_DATA_LENGTH` bytes.

    Returns:
        dict: Token name to token text.

    Raises:
        :class:`DataExceedsMaximumLength`: `data` is too long.

    Examples:
        >>> from ihexwriter.writer import format_tokens
        >>> format_tokens(1, 0x0000, b'')  # doctest: +NORMALIZE_WHITESPACE
        {'begin': ':', 'count': '00', 'address': '0000', 'tag': '01',
         'data': '', 'checksum': 'FF'}
    """

    layout = build_layout(tag, address, data)
    text = hexlify(layout).decode('ascii')
    return {
        'begin': ':',
        'count': text[0:2],
        'address': text[2:6],
        'tag': text[6:8],
        'data': text[8:-2],
        'checksum': text[-2:],
    }


def colorize_tokens(
    tokens: Mapping[str, str],
    altdata: bool = True,
) -> MutableMapping[str, str]:
    r"""Prepends ANSI color codes to record field tokens.

    For each token within `tokens`, its key is used to look up the ANSI color
    code from :data:`TOKEN_COLOR_CODES`.
    The retrieved code is prepended to the token.
    Empty tokens are dropped.

    Args:
        tokens (dict):
            A mapping of each token key name to token text.

        altdata (bool):
            If true, it alternates each byte (two hex digits) between the ANSI
            color codes mapped with keys ``data`` (even byte index) and
            ``dataalt`` (odd byte index).
            If false, only the ``data`` code is prepended.

    Returns:
        dict: `tokens` with prepended ANSI color codes, wrapped by reset
        codes under the keys ``'<'`` and ``'>'``.
    """

    codes = TOKEN_COLOR_CODES
    colorized = {'<': codes['<']}

    for key, value in tokens.items():
        if key not in codes:
            key = ''
        if not value:
            continue

        code = codes[key]
        if key == 'data' and altdata:
            altcode = codes['dataalt']
            chunks = []
            for index in range(0, len(value), 2):
                chunks.append(altcode if index & 2 else code)
                chunks.append(value[index:(index + 2)])
            colorized[key] = ''.join(chunks)
        else:
            colorized[key] = code + value

    colorized['>'] = codes['>']
    return colorized


def join_tokens(tokens: Mapping[str, str]) -> str:
    r"""Joins tokens into a single text line.

    Examples:
        >>> from ihexwriter.writer import format_tokens, join_tokens
        >>> join_tokens(format_tokens(1, 0x0000, b''))
        ':00000001FF'
    """

    return ''.join(tokens.values())


def validate_object(records: Sequence) -> None:
    r"""Validates the structure of an object file record sequence.

    The last record must be an *End Of File* record, checked first; then
    there must be exactly one *End Of File* record in the whole sequence.

    Overlapping *data* records are not detected; that is up to the caller.

    Args:
        records (list of :class:`ihexwriter.records.IhexRecord`):
            Record sequence.

    Raises:
        :class:`MissingEndOfFileRecord`: Empty sequence, or the last record
            is not an *End Of File* record.

        :class:`MultipleEndOfFileRecords`: More than one *End Of File*
            record.
    """

    if not records or not records[-1].tag.is_eof():
        raise MissingEndOfFileRecord()

    eof_count = sum(1 for record in records if record.tag.is_eof())
    if eof_count > 1:
        raise MultipleEndOfFileRecords(eof_count)


def create_object_tokens(records: Iterable) -> List[MutableMapping[str, str]]:
    r"""Validates records and splits each of them into tokens.

    Args:
        records (list of :class:`ihexwriter.records.IhexRecord`):
            Record sequence.

    Returns:
        list of dict: Tokens of each record, in order.

    Raises:
        :class:`MissingEndOfFileRecord`: See :func:`validate_object`.

        :class:`MultipleEndOfFileRecords`: See :func:`validate_object`.

        :class:`DataExceedsMaximumLength`: A record holds too much data.

    See Also:
        :func:`create_object_file`
    """

    records = list(records)
    validate_object(records)
    return [record.to_tokens() for record in records]


def create_object_file(records: Iterable) -> str:
    r"""Generates an Intel HEX object file.

    Records are validated (see :func:`validate_object`), then serialized in
    order, one per line.
    Lines are separated by a single ``'\n'``, without a trailing one.

    The first record failing serialization aborts the whole operation;
    no partial output is returned.

    Args:
        records (list of :class:`ihexwriter.records.IhexRecord`):
            Record sequence.
            It is up to the caller to avoid overlapping data records.

    Returns:
        str: Object file text.

    Raises:
        :class:`MissingEndOfFileRecord`: See :func:`validate_object`.

        :class:`MultipleEndOfFileRecords`: See :func:`validate_object`.

        :class:`DataExceedsMaximumLength`: A record holds too much data.

    Examples:
        >>> from ihexwriter import DataRecord, EndOfFileRecord
        >>> from ihexwriter import create_object_file
        >>> records = [DataRecord(0x0010, b'Hello'), EndOfFileRecord()]
        >>> print(create_object_file(records))
        :0500100048656C6C6FF7
        :00000001FF
    """

    records = list(records)
    validate_object(records)
    lines = [record.to_string() for record in records]
    return '\n'.join(lines)
