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

r"""Intel HEX records.

The record set is closed: there is one class for each record tag defined by
the Intel HEX format, and records are immutable once created.

See Also:
    `<https://en.wikipedia.org/wiki/Intel_HEX#Record_types>`_
"""

import abc
import enum
import operator
from typing import Any
from typing import Iterable
from typing import Mapping
from typing import MutableMapping
from typing import Type
from typing import Union

from .utils import AnyBytes
from .writer import build_layout
from .writer import format_record
from .writer import format_tokens


class IhexTag(enum.IntEnum):
    r"""Intel HEX tag."""

    DATA = 0
    r"""Binary data."""

    END_OF_FILE = 1
    r"""End Of File."""

    EXTENDED_SEGMENT_ADDRESS = 2
    r"""Extended Segment Address."""

    START_SEGMENT_ADDRESS = 3
    r"""Start Segment Address."""

    EXTENDED_LINEAR_ADDRESS = 4
    r"""Extended Linear Address."""

    START_LINEAR_ADDRESS = 5
    r"""Start Linear Address."""

    def is_eof(self) -> bool:
        r"""Tells whether this is an End Of File record tag.

        Returns:
            bool: This is an End Of File record tag.

        Examples:
            >>> from ihexwriter import IhexTag
            >>> IhexTag.END_OF_FILE.is_eof()
            True
            >>> IhexTag.DATA.is_eof()
            False
        """

        return self == self.END_OF_FILE


def _check_range(value: int, maximum: int, name: str) -> int:

    value = operator.index(value)
    if not 0 <= value <= maximum:
        raise ValueError(f'{name} overflow')
    return value


class IhexRecord(abc.ABC):
    r"""Intel HEX record.

    Base class of all the record kinds.
    Each subclass is bound to a fixed :attr:`tag`, and carries its own fields,
    exposed as read-only attributes.

    The serialized form is computed on demand by :meth:`to_string`, from the
    *address field* (:meth:`get_address_field`) and the *data field*
    (:meth:`get_data_field`) of the record.

    Attributes:
        tag (:class:`IhexTag`):
            Record tag, fixed by the record class.
    """

    __slots__ = ()

    tag: IhexTag = None  # override

    FIELDS: Iterable[str] = ()
    r"""Names of the record fields, in constructor order."""

    def __delattr__(self, key: str) -> None:

        raise AttributeError(f'{type(self).__name__} is immutable')

    def __eq__(self, other: Any) -> bool:

        return not self != other

    def __hash__(self) -> int:

        return hash((type(self), tuple(self.get_meta().values())))

    def __ne__(self, other: Any) -> bool:

        if type(self) is not type(other):
            return True
        return self.get_meta() != other.get_meta()

    def __repr__(self) -> str:
        r"""String representation.

        Examples:
            >>> from ihexwriter import ExtendedLinearAddressRecord
            >>> ExtendedLinearAddressRecord(0x0800)
            <ExtendedLinearAddressRecord tag:=<IhexTag.EXTENDED_LINEAR_ADDRESS: 4> address:=2048>
        """

        text = f'<{type(self).__name__} tag:={self.tag!r}'
        for key, value in self.get_meta().items():
            text += f' {key!s}:={value!r}'
        text += '>'
        return text

    def __setattr__(self, key: str, value: Any) -> None:

        raise AttributeError(f'{type(self).__name__} is immutable')

    def __str__(self) -> str:

        return self.to_string()

    def _init_field(self, key: str, value: Any) -> None:

        object.__setattr__(self, key, value)

    def compute_checksum(self) -> int:
        r"""Computes the checksum field value.

        Returns:
            int: Checksum of the serialized record.

        Raises:
            :class:`ihexwriter.errors.DataExceedsMaximumLength`: The data
                field is too long.

        Examples:
            >>> from ihexwriter import DataRecord
            >>> DataRecord(0x0010, b'Hello').compute_checksum()
            247
        """

        layout = build_layout(self.tag, self.get_address_field(), self.get_data_field())
        return layout[-1]

    def compute_count(self) -> int:

        return len(self.get_data_field())

    def get_address_field(self) -> int:
        r"""Address field value.

        Only *data* records store a meaningful address there; any other
        record kind carries its address-like values within the data field.

        Returns:
            int: 16-bit address field value.
        """

        return 0x0000

    @abc.abstractmethod
    def get_data_field(self) -> bytes:
        r"""Data field value.

        Multi-byte values are packed big-endian.

        Returns:
            bytes: Serialized data field.
        """
        ...

    def get_meta(self) -> MutableMapping[str, Any]:
        r"""Record fields.

        Returns:
            dict: Field name to field value, in constructor order.

        Examples:
            >>> from ihexwriter import StartSegmentAddressRecord
            >>> StartSegmentAddressRecord(0x1234, 0x5678).get_meta()
            {'cs': 4660, 'ip': 22136}
        """

        return {key: getattr(self, key) for key in self.FIELDS}

    def to_string(self) -> str:
        r"""Serializes the record into a text line.

        Returns:
            str: Record line, without line terminator.

        Raises:
            :class:`ihexwriter.errors.DataExceedsMaximumLength`: The data
                field is too long.

        Examples:
            >>> from ihexwriter import EndOfFileRecord
            >>> EndOfFileRecord().to_string()
            ':00000001FF'
        """

        return format_record(self.tag, self.get_address_field(), self.get_data_field())

    def to_tokens(self) -> MutableMapping[str, str]:
        r"""Serializes the record into text tokens.

        Returns:
            dict: Token name to token text.

        See Also:
            :func:`ihexwriter.writer.format_tokens`
        """

        return format_tokens(self.tag, self.get_address_field(), self.get_data_field())


class DataRecord(IhexRecord):
    r"""Data record.

    Args:
        offset (int):
            16-bit address of the first data byte.

        value (bytes):
            Data bytes, or an iterable of byte values; integers are rejected.
            Any length is accepted here; serialization fails beyond 255 bytes.

    Examples:
        >>> from ihexwriter import DataRecord
        >>> str(DataRecord(0x0010, b'Hello'))
        ':0500100048656C6C6FF7'
    """

    __slots__ = ('offset', 'value')

    tag = IhexTag.DATA

    FIELDS = ('offset', 'value')

    def __init__(self, offset: int, value: Union[AnyBytes, Iterable[int]] = b''):

        if isinstance(value, int):
            raise TypeError('value must be a byte sequence')

        self._init_field('offset', _check_range(offset, 0xFFFF, 'offset'))
        self._init_field('value', bytes(value))

    def get_address_field(self) -> int:

        return self.offset

    def get_data_field(self) -> bytes:

        return self.value


class EndOfFileRecord(IhexRecord):
    r"""End Of File record.

    Examples:
        >>> from ihexwriter import EndOfFileRecord
        >>> str(EndOfFileRecord())
        ':00000001FF'
    """

    __slots__ = ()

    tag = IhexTag.END_OF_FILE

    def get_data_field(self) -> bytes:

        return b''


class ExtendedSegmentAddressRecord(IhexRecord):
    r"""Extended Segment Address record.

    Args:
        address (int):
            16-bit segment base, as bits 19:4 of following data addresses.

    Examples:
        >>> from ihexwriter import ExtendedSegmentAddressRecord
        >>> str(ExtendedSegmentAddressRecord(0x0100))
        ':020000020100FB'
    """

    __slots__ = ('address',)

    tag = IhexTag.EXTENDED_SEGMENT_ADDRESS

    FIELDS = ('address',)

    def __init__(self, address: int):

        self._init_field('address', _check_range(address, 0xFFFF, 'address'))

    def get_data_field(self) -> bytes:

        return self.address.to_bytes(2, byteorder='big')


class StartSegmentAddressRecord(IhexRecord):
    r"""Start Segment Address record.

    Args:
        cs (int):
            16-bit code segment.

        ip (int):
            16-bit instruction pointer.

    Examples:
        >>> from ihexwriter import StartSegmentAddressRecord
        >>> str(StartSegmentAddressRecord(0x0000, 0x3800))
        ':0400000300003800C1'
    """

    __slots__ = ('cs', 'ip')

    tag = IhexTag.START_SEGMENT_ADDRESS

    FIELDS = ('cs', 'ip')

    def __init__(self, cs: int, ip: int):

        self._init_field('cs', _check_range(cs, 0xFFFF, 'cs'))
        self._init_field('ip', _check_range(ip, 0xFFFF, 'ip'))

    def get_data_field(self) -> bytes:

        return (self.cs.to_bytes(2, byteorder='big') +
                self.ip.to_bytes(2, byteorder='big'))


class ExtendedLinearAddressRecord(IhexRecord):
    r"""Extended Linear Address record.

    Args:
        address (int):
            Upper 16 bits of following data addresses.

    Examples:
        >>> from ihexwriter import ExtendedLinearAddressRecord
        >>> str(ExtendedLinearAddressRecord(0x0800))
        ':020000040800F2'
    """

    __slots__ = ('address',)

    tag = IhexTag.EXTENDED_LINEAR_ADDRESS

    FIELDS = ('address',)

    def __init__(self, address: int):

        self._init_field('address', _check_range(address, 0xFFFF, 'address'))

    def get_data_field(self) -> bytes:

        return self.address.to_bytes(2, byteorder='big')


class StartLinearAddressRecord(IhexRecord):
    r"""Start Linear Address record.

    Args:
        address (int):
            32-bit start address.

    Examples:
        >>> from ihexwriter import StartLinearAddressRecord
        >>> str(StartLinearAddressRecord(0x000000CD))
        ':04000005000000CD2A'
    """

    __slots__ = ('address',)

    tag = IhexTag.START_LINEAR_ADDRESS

    FIELDS = ('address',)

    def __init__(self, address: int):

        self._init_field('address', _check_range(address, 0xFFFFFFFF, 'address'))

    def get_data_field(self) -> bytes:

        return self.address.to_bytes(4, byteorder='big')


RECORD_TYPES: Mapping[IhexTag, Type[IhexRecord]] = {
    record_type.tag: record_type
    for record_type in (
        DataRecord,
        EndOfFileRecord,
        ExtendedSegmentAddressRecord,
        StartSegmentAddressRecord,
        ExtendedLinearAddressRecord,
        StartLinearAddressRecord,
    )
}
r"""Record class bound to each tag."""
