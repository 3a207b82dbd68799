import logging
from io import StringIO

from .errors import SinkWriteError
from .layout import DEFAULT_MAX_DEPTH, layout
from .sdoc import SLine

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80


def default_render_to_stream(stream, sdocs, newline='\n', separator=' '):
    """Writes the output of ``layout`` to ``stream``.

    ``sdocs`` is consumed lazily, so a failing write stops the
    layout where it is. Any exception raised by ``stream.write``
    is re-raised as ``SinkWriteError``."""
    for sdoc in sdocs:
        if isinstance(sdoc, str):
            chunk = sdoc
        elif isinstance(sdoc, SLine):
            chunk = newline + separator * sdoc.indent
        else:
            raise TypeError(f'Unexpected sdoc {repr(sdoc)}')

        try:
            stream.write(chunk)
        except Exception as exc:
            logger.debug("Aborting render, write to %r failed: %s", stream, exc)
            raise SinkWriteError(stream) from exc


def default_render_to_str(sdocs, newline='\n', separator=' '):
    stream = StringIO()
    default_render_to_stream(stream, sdocs, newline, separator)
    return stream.getvalue()


def render(
    doc,
    width=DEFAULT_WIDTH,
    stream=None,
    *,
    indent=0,
    max_depth=DEFAULT_MAX_DEPTH
):
    """Lays out ``doc`` within ``width`` columns and writes it.

    If ``stream`` is None, the rendered text is returned as a str.
    Otherwise it is written to ``stream`` with ``stream.write``
    and None is returned.
    """
    sdocs = layout(doc, width=width, indent=indent, max_depth=max_depth)
    logger.debug("Rendering document at width=%d indent=%d", width, indent)

    if stream is None:
        return default_render_to_str(sdocs)
    default_render_to_stream(stream, sdocs)
