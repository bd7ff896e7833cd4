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

"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -m ihexwriter` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``ihexwriter.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``ihexwriter.__main__`` in ``sys.modules``.

  Also see (1) from https://click.palletsprojects.com/en/stable/setuptools/#setuptools-integration
"""

from typing import Callable
from typing import Mapping
from typing import Sequence

import click

from . import __version__
from .checksum import checksum as _checksum
from .errors import WriterError
from .records import DataRecord
from .records import EndOfFileRecord
from .records import ExtendedLinearAddressRecord
from .records import ExtendedSegmentAddressRecord
from .records import IhexRecord
from .records import StartLinearAddressRecord
from .records import StartSegmentAddressRecord
from .utils import parse_int
from .utils import unhexlify
from .writer import colorize_tokens
from .writer import create_object_file
from .writer import create_object_tokens
from .writer import join_tokens

RECORD_FACTORIES: Mapping[str, Callable[..., IhexRecord]] = {
    'data': lambda offset, value: DataRecord(parse_int(offset), unhexlify(value, delete=...)),
    'eof': lambda: EndOfFileRecord(),
    'esa': lambda address: ExtendedSegmentAddressRecord(parse_int(address)),
    'ssa': lambda cs, ip: StartSegmentAddressRecord(parse_int(cs), parse_int(ip)),
    'ela': lambda address: ExtendedLinearAddressRecord(parse_int(address)),
    'sla': lambda address: StartLinearAddressRecord(parse_int(address)),
}


class RecordParamType(click.ParamType):
    name = 'record'

    def convert(self, value, param, ctx):
        if isinstance(value, IhexRecord):
            return value

        kind, *args = value.split(':', 2)
        factory = RECORD_FACTORIES.get(kind.strip().lower())
        if factory is None:
            self.fail(f'invalid record kind: {kind!r}', param, ctx)
        try:
            return factory(*args)
        except (TypeError, ValueError):
            self.fail(f'invalid record: {value!r}', param, ctx)


RECORD = RecordParamType()


def print_version(ctx, _, value):

    if not value or ctx.resilient_parsing:
        return

    click.echo(str(__version__))
    ctx.exit()


# ============================================================================

@click.group()
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="""
    Prints the package version and exits.
""")
def main() -> None:
    """
    Command line utilities to generate Intel HEX records and object files.

    Records are written as ``KIND[:ARG...]`` with the following kinds:

    \b
      data:OFFSET:HEXBYTES   Data
      eof                    End Of File
      esa:ADDRESS            Extended Segment Address
      ssa:CS:IP              Start Segment Address
      ela:ADDRESS            Extended Linear Address
      sla:ADDRESS            Start Linear Address

    Integers accept ``0x``, ``0b``, ``0o`` prefixes or an ``h`` suffix;
    a bare leading ``0`` means octal, so ``0010`` is 8. The data bytes of a
    ``data`` record may be separated by ``:`` too.
    """


# ----------------------------------------------------------------------------

@main.command()
@click.argument('hexbytes')
def checksum(
    hexbytes: str,
) -> None:
    r"""Computes the checksum of some bytes.

    ``HEXBYTES`` is the hexadecimal representation of the bytes to sum;
    spaces, tabs, and ``.-:`` separators are ignored.
    """

    try:
        data = unhexlify(hexbytes, delete=...)
    except ValueError:
        raise click.BadParameter(f'invalid hex bytes: {hexbytes!r}', param_hint='HEXBYTES')

    click.echo(f'{_checksum(data):02X}')


# ----------------------------------------------------------------------------

@main.command()
@click.option('--color/--no-color', default=False, help="""
    Prints colorized tokens with ANSI escape codes.
""")
@click.argument('record', type=RECORD)
def record(
    color: bool,
    record: IhexRecord,
) -> None:
    r"""Prints a single record line.

    ``RECORD`` is the record to serialize.
    """

    try:
        if color:
            line = join_tokens(colorize_tokens(record.to_tokens()))
        else:
            line = record.to_string()
    except WriterError as exc:
        raise click.ClickException(str(exc))

    click.echo(line, color=color)


# ----------------------------------------------------------------------------

@main.command(name='object')
@click.option('--color/--no-color', default=False, help="""
    Prints colorized tokens with ANSI escape codes.
""")
@click.argument('records', type=RECORD, nargs=-1)
def object_(
    color: bool,
    records: Sequence[IhexRecord],
) -> None:
    r"""Prints a whole object file.

    ``RECORDS`` is the sequence of records to serialize, in order.
    It must end with the only ``eof`` record.
    """

    try:
        if color:
            tokens_list = create_object_tokens(records)
            text = '\n'.join(join_tokens(colorize_tokens(tokens))
                             for tokens in tokens_list)
        else:
            text = create_object_file(records)
    except WriterError as exc:
        raise click.ClickException(str(exc))

    click.echo(text, color=color)
