# -*- coding: utf-8 -*-
from click.testing import CliRunner

import ihexwriter
from ihexwriter.cli import main


def test_main():
    runner = CliRunner()
    result = runner.invoke(main, ['--help'])

    assert result.exit_code == 0
    assert 'Intel HEX' in result.output


def test_exports():
    records = [ihexwriter.DataRecord(0x0010, b'Hello'), ihexwriter.EndOfFileRecord()]
    text = ihexwriter.create_object_file(records)
    assert text == ':0500100048656C6C6FF7\n:00000001FF'
    assert ihexwriter.format_record(ihexwriter.IhexTag.END_OF_FILE, 0, b'') == ':00000001FF'
    assert ihexwriter.checksum(b'\x00\x00\x00\x01') == 0xFF
    assert issubclass(ihexwriter.MissingEndOfFileRecord, ihexwriter.WriterError)
