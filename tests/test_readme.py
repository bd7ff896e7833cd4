# isort: skip_file
from click.testing import CliRunner


def test_examples_library():
    from ihexwriter import DataRecord, EndOfFileRecord, create_object_file

    records = [DataRecord(0x0010, b'Hello'), EndOfFileRecord()]
    text = create_object_file(records)
    assert text == (':0500100048656C6C6FF7\n'
                    ':00000001FF')


def test_examples_cli():
    from ihexwriter.cli import main

    runner = CliRunner()
    result = runner.invoke(main, 'object data:0x0010:48656C6C6F eof'.split())
    assert result.exit_code == 0
    assert result.output == (':0500100048656C6C6FF7\n'
                             ':00000001FF\n')
