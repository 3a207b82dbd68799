"""Helpers for displaying raw bytes as hexadecimal digits."""

from .api import text


def to_hex(data):
    """Returns the lowercase hexadecimal digits of the bytes-like
    ``data``, two per byte, without a ``0x`` prefix."""
    return memoryview(data).tobytes().hex()


def to_hex_with_prefix(data):
    return '0x' + to_hex(data)


class DisplayHex:
    """Displays a bytes-like value as hexadecimal digits.

    Supports ``str()`` (digits only) and the format specs ``'x'``
    and ``'#x'``, the latter adding a ``0x`` prefix. As a pretty
    printed value it always carries the prefix.
    """
    __slots__ = ('data', )

    def __init__(self, data):
        self.data = memoryview(data).tobytes()

    def __str__(self):
        return to_hex(self.data)

    def __format__(self, format_spec):
        if format_spec in ('', 'x'):
            return to_hex(self.data)
        elif format_spec in ('#', '#x'):
            return to_hex_with_prefix(self.data)
        raise ValueError(
            f"Unknown format code {repr(format_spec)} "
            f"for object of type '{type(self).__name__}'"
        )

    def __eq__(self, other):
        return isinstance(other, DisplayHex) and other.data == self.data

    def __hash__(self):
        return hash(self.data)

    def __repr__(self):
        return f'DisplayHex({repr(self.data)})'

    def __pretty__(self, ctx):
        return text(to_hex_with_prefix(self.data))
