from typing import Any
from typing import Mapping
from typing import Type

import pytest

from ihexwriter.utils import hexlify
from ihexwriter.utils import parse_int
from ihexwriter.utils import unhexlify

PARSE_INT_PASS: Mapping[Any, int] = {
    None: None,

    '123': 123,
    ' 123 ': 123,
    '\t123\t': 123,
    '+123': 123,
    '-123': -123,
    ' - 123 ': -123,

    '0xDEADBEEF': 0xDEADBEEF,
    '0XDEADBEEF': 0xDEADBEEF,
    'DEADBEEFh': 0xDEADBEEF,
    'DEADBEEFH': 0xDEADBEEF,
    '0x0010': 0x0010,

    '0b101100111000': 0b101100111000,

    '01234567': 0o1234567,
    '0o1234567': 0o1234567,
    '0O1234567': 0o1234567,

    '0': 0,
    b'456': 456,
    123: 123,
    135.7: 135,
}

PARSE_INT_FAIL: Mapping[Any, Type[BaseException]] = {
    Ellipsis: TypeError,
    'x': ValueError,
    '': ValueError,
    '0b1h': ValueError,
    '0o1h': ValueError,
    '1k': ValueError,
    (1,): TypeError,
}


def test_hexlify_doctest():
    assert hexlify(b'Hello') == b'48656C6C6F'
    assert hexlify(b'\xAA\xBB\xCC', sep=b' ') == b'AA BB CC'
    assert hexlify(b'\xAA\xBB\xCC', sep=b'-') == b'AA-BB-CC'
    assert hexlify(b'\xAA\xBB\xCC', upper=False) == b'aabbcc'


def test_hexlify_empty():
    assert hexlify(b'') == b''


def test_parse_int_doctest():
    assert parse_int('0x0010') == 16
    assert parse_int('FFh') == 255
    assert parse_int(None) is None


def test_parse_int_fail():
    for value_in, raised_exception in PARSE_INT_FAIL.items():
        with pytest.raises(raised_exception):
            parse_int(value_in)


def test_parse_int_pass():
    for value_in, value_out in PARSE_INT_PASS.items():
        assert parse_int(value_in) == value_out


def test_unhexlify_doctest():
    assert unhexlify(b'48656C6C6F') == b'Hello'
    assert unhexlify('AA BB CC', delete=...) == b'\xaa\xbb\xcc'
    assert unhexlify(b'AA-BB-CC', delete=...) == b'\xaa\xbb\xcc'
    assert unhexlify(b'AA/BB/CC', delete=b'/') == b'\xaa\xbb\xcc'


def test_unhexlify_str():
    assert unhexlify('aabbcc') == b'\xaa\xbb\xcc'
    assert unhexlify('') == b''


def test_unhexlify_raises():
    with pytest.raises(ValueError):
        unhexlify('ABC')
    with pytest.raises(ValueError):
        unhexlify('XY')
