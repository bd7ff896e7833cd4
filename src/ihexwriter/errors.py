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

r"""Writer errors.

Every error is raised straight to the caller: they are all caused by invalid
input, so there is nothing to recover or retry.
"""


class WriterError(ValueError):
    r"""Failed to generate an Intel HEX record or object file.

    Errors compare equal when they have the same class and the same
    :attr:`args`, so that they can be checked as plain values.
    """

    DESCRIPTION: str = ''
    r"""Human readable description of the failure."""

    def __eq__(self, other: object) -> bool:

        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:

        return hash((type(self), self.args))

    def __str__(self) -> str:

        return f'Failed to generate IHEX record: {self.DESCRIPTION}.'


class DataExceedsMaximumLength(WriterError):
    r"""A record contains data too large to represent.

    Args:
        length (int):
            Actual data length, in bytes.

    Examples:
        >>> from ihexwriter.errors import DataExceedsMaximumLength
        >>> error = DataExceedsMaximumLength(256)
        >>> error.length
        256
        >>> str(error)
        'Failed to generate IHEX record: Record contains data exceeding 255 bytes.'
    """

    DESCRIPTION = 'Record contains data exceeding 255 bytes'

    def __init__(self, length: int):

        super().__init__(length)
        self.length: int = length


class MissingEndOfFileRecord(WriterError):
    r"""Object does not end with an End Of File record."""

    DESCRIPTION = 'Object files must end with an End Of File record'


class MultipleEndOfFileRecords(WriterError):
    r"""Object contains multiple End Of File records.

    Args:
        count (int):
            Total number of End Of File records found.
    """

    DESCRIPTION = 'Object files must contain exactly one End Of File record'

    def __init__(self, count: int):

        super().__init__(count)
        self.count: int = count
