# -*- coding: utf-8 -*-

"""Top-level package for prettydoc."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

import sys

from .pretty import (
    PrettyContext,
    comma_separated,
    pretty_python_value,
    python_to_doc,
    python_to_sdocs,
    register_pretty,
    prettycall,
)
from .render import (
    DEFAULT_WIDTH,
    default_render_to_stream,
    default_render_to_str,
    render,
)
from .layout import DEFAULT_MAX_DEPTH, layout
from .api import (
    DEFAULT_INDENT,
    align,
    always_break,
    cast_doc,
    concat,
    contextual,
    display,
    flat_choice,
    flatten,
    group,
    hang,
    hsep,
    join,
    line_break,
    nest,
    text,
    vsep,
    NIL,
    LINE,
    SOFTLINE,
    HARDLINE,
)
from .doc import Doc
from .errors import (
    InvalidWidthError,
    PrettyDocError,
    RecursionLimitExceeded,
    SinkWriteError,
)
from .hex import DisplayHex, to_hex, to_hex_with_prefix
from .utils import intersperse


__all__ = [
    'PrettyPrinter',
    'pformat',
    'pprint',
    'render',
    'layout',
    'default_render_to_stream',
    'default_render_to_str',
    'python_to_doc',
    'python_to_sdocs',
    'pretty_python_value',
    'register_pretty',
    'prettycall',
    'comma_separated',
    'PrettyContext',
    'Doc',
    'align',
    'always_break',
    'cast_doc',
    'concat',
    'contextual',
    'display',
    'flat_choice',
    'flatten',
    'group',
    'hang',
    'hsep',
    'join',
    'line_break',
    'nest',
    'text',
    'vsep',
    'NIL',
    'HARDLINE',
    'SOFTLINE',
    'LINE',
    'intersperse',
    'DEFAULT_INDENT',
    'DEFAULT_MAX_DEPTH',
    'DEFAULT_WIDTH',
    'PrettyDocError',
    'InvalidWidthError',
    'RecursionLimitExceeded',
    'SinkWriteError',
    'DisplayHex',
    'to_hex',
    'to_hex_with_prefix',
]


class PrettyPrinter:
    def __init__(
        self,
        indent=DEFAULT_INDENT,
        width=DEFAULT_WIDTH,
        depth=None,
        stream=None,
        *,
        max_depth=DEFAULT_MAX_DEPTH
    ):
        self._stream = stream
        self._kwargs = {
            'indent': indent,
            'width': width,
            'depth': depth,
            'max_depth': max_depth,
        }

    def pprint(self, object):
        pprint(object, stream=self._stream, **self._kwargs)

    def pformat(self, object):
        return pformat(object, **self._kwargs)


def pformat(
    object,
    indent=DEFAULT_INDENT,
    width=DEFAULT_WIDTH,
    depth=None,
    *,
    max_depth=DEFAULT_MAX_DEPTH
):
    sdocs = python_to_sdocs(
        object,
        indent=indent,
        width=width,
        depth=depth,
        max_depth=max_depth,
    )
    return default_render_to_str(sdocs)


def pprint(
    object,
    stream=None,
    indent=DEFAULT_INDENT,
    width=DEFAULT_WIDTH,
    depth=None,
    *,
    max_depth=DEFAULT_MAX_DEPTH,
    end='\n'
):
    sdocs = python_to_sdocs(
        object,
        indent=indent,
        width=width,
        depth=depth,
        max_depth=max_depth,
    )
    if stream is None:
        stream = sys.stdout
    default_render_to_stream(stream, sdocs)
    if end:
        default_render_to_stream(stream, [end])
