import random

import pytest

from ihexwriter.checksum import checksum


# https://en.wikipedia.org/wiki/Intel_HEX#Record_types
@pytest.mark.parametrize('expected, layout', [
    (0xA7, b'\x0B\x00\x10\x00address gap'),
    (0xFF, b'\x00\x00\x00\x01'),
    (0xEA, b'\x02\x00\x00\x02\x12\x00'),
    (0xC1, b'\x04\x00\x00\x03\x00\x00\x38\x00'),
    (0xF2, b'\x02\x00\x00\x04\x08\x00'),
    (0x2A, b'\x04\x00\x00\x05\x00\x00\x00\xCD'),
])
def test_checksum_wikipedia_records(expected, layout):
    assert checksum(layout) == expected


# https://en.wikipedia.org/wiki/Intel_HEX#Checksum_calculation
def test_checksum_wikipedia():
    assert checksum(b'\x03\x00\x30\x00\x02\x33\x7A') == 0x1E


def test_checksum_empty():
    assert checksum(b'') == 0x00


def test_checksum_zero_sum():
    assert checksum(b'\x00\x00\x00') == 0x00
    assert checksum(b'\x80\x80') == 0x00
    assert checksum(b'\xFF\x01') == 0x00


def test_checksum_iterables():
    assert checksum([0x00, 0x00, 0x00, 0x01]) == 0xFF
    assert checksum(bytearray(b'\x01')) == 0xFF
    assert checksum(memoryview(b'\x01\x01')) == 0xFE
    assert checksum(iter([0x10, 0x20])) == 0xD0


def test_checksum_sums_to_zero():
    rng = random.Random(0x1234)
    for size in (0, 1, 2, 5, 255, 256, 1000):
        data = bytes(rng.randrange(0x100) for _ in range(size))
        result = checksum(data)
        assert 0x00 <= result <= 0xFF
        assert (sum(data) + result) & 0xFF == 0
