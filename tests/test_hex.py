import pytest

from prettydoc import DisplayHex, pformat, to_hex, to_hex_with_prefix


def test_to_hex():
    assert to_hex(b'\x00\x0f\xab') == '000fab'
    assert to_hex(bytearray([1, 255])) == '01ff'
    assert to_hex(b'') == ''


def test_to_hex_with_prefix():
    assert to_hex_with_prefix(b'\xde\xad') == '0xdead'


def test_to_hex_rejects_non_bytes():
    with pytest.raises(TypeError):
        to_hex('abc')


def test_display_hex_formatting():
    value = DisplayHex(b'\x01\x02')
    assert str(value) == '0102'
    assert f'{value}' == '0102'
    assert f'{value:x}' == '0102'
    assert f'{value:#x}' == '0x0102'


def test_display_hex_rejects_unknown_format():
    with pytest.raises(ValueError):
        format(DisplayHex(b'\x01'), 'd')


def test_display_hex_pretty_prints_with_prefix():
    assert pformat([DisplayHex(b'\xca\xfe'), DisplayHex(b'')]) == '[0xcafe, 0x]'
