"""Layout engine for documents.

Documents are laid out greedily: at every ``Group`` the engine asks
whether the group's content, printed flat, fits on the rest of the
current line together with whatever follows the group up to the next
line break. If it does, the whole group is printed flat and every group
nested inside it is flat as well. Otherwise its breaks become newlines
and nested groups make their own decisions.

Both the engine and the fits evaluator walk the document with an
explicit stack of ``(indent, mode, doc, depth)`` entries, so deeply
nested documents never exhaust the Python call stack. The evaluator
reads the engine's pending entries in place and stops at the first
line break, which keeps the total cost linear in the document size.
"""

import logging

from .doc import (
    NIL,
    AlwaysBreak,
    Break,
    Concat,
    Contextual,
    Flat,
    FlatChoice,
    Group,
    HardLine,
    Nest,
    Text,
    cast_doc,
)
from .errors import InvalidWidthError, RecursionLimitExceeded
from .sdoc import SLine

logger = logging.getLogger(__name__)

MODE_BREAK = 0
MODE_FLAT = 1

DEFAULT_MAX_DEPTH = 1000


def validate_width(width):
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise InvalidWidthError(width)


def _depth_exceeded(max_depth):
    logger.debug("Document nesting exceeded max_depth=%d", max_depth)
    raise RecursionLimitExceeded(max_depth)


def _evaluate_contextual(doc, indent, column, page_width):
    return cast_doc(doc.fn(indent, column, page_width))


def fits(
    doc,
    indent,
    chars_left,
    page_width,
    rest=(),
    depth=0,
    max_depth=DEFAULT_MAX_DEPTH
):
    """Returns True if ``doc`` printed flat, followed by the pending
    entries in ``rest`` up to the next line break, takes at most
    ``chars_left`` columns.

    ``rest`` is the layout engine's stack, top of the stack last.
    It is read from the top down and never modified. Entries taken
    from it keep their own mode: a ``Break`` in an already broken
    context ends the line, and groups that are still undecided are
    measured flat unless they always break."""
    stack = [(indent, MODE_FLAT, doc, depth)]
    rest_idx = len(rest)

    while chars_left >= 0:
        if not stack:
            if rest_idx == 0:
                return True
            rest_idx -= 1
            stack.append(rest[rest_idx])
            continue

        indent, mode, doc, depth = stack.pop()

        if depth > max_depth:
            _depth_exceeded(max_depth)

        if doc is NIL:
            continue
        elif isinstance(doc, Text):
            chars_left -= doc.width
        elif isinstance(doc, Break):
            if mode == MODE_BREAK:
                return True
            chars_left -= doc.width
        elif isinstance(doc, HardLine):
            # Everything after a newline belongs to the next line.
            return True
        elif isinstance(doc, Concat):
            stack.extend(
                (indent, mode, child, depth + 1)
                for child in reversed(doc.docs)
            )
        elif isinstance(doc, Nest):
            stack.append((indent + doc.indent, mode, doc.doc, depth + 1))
        elif isinstance(doc, Group):
            group_mode = (
                MODE_BREAK
                if mode == MODE_BREAK and doc.forced_break
                else MODE_FLAT
            )
            stack.append((indent, group_mode, doc.doc, depth + 1))
        elif isinstance(doc, FlatChoice):
            branch = doc.when_flat if mode == MODE_FLAT else doc.when_broken
            stack.append((indent, mode, branch, depth + 1))
        elif isinstance(doc, Flat):
            stack.append((indent, MODE_FLAT, doc.doc, depth + 1))
        elif isinstance(doc, AlwaysBreak):
            stack.append((indent, mode, doc.doc, depth + 1))
        elif isinstance(doc, Contextual):
            evaluated = _evaluate_contextual(
                doc,
                indent,
                page_width - chars_left,
                page_width
            )
            stack.append((indent, mode, evaluated, depth + 1))
        else:
            raise TypeError(f'Unexpected doc {repr(doc)}')

    return False


def _layout(doc, width, indent, max_depth):
    column = indent
    stack = [(indent, MODE_BREAK, doc, 0)]

    while stack:
        indent, mode, doc, depth = stack.pop()

        if depth > max_depth:
            _depth_exceeded(max_depth)

        if doc is NIL:
            continue
        elif isinstance(doc, Text):
            if doc.value:
                yield doc.value
            column += doc.width
        elif isinstance(doc, Break):
            if mode == MODE_FLAT:
                if doc.flat:
                    yield doc.flat
                column += doc.width
            else:
                yield SLine(indent)
                column = indent
        elif isinstance(doc, HardLine):
            yield SLine(indent)
            column = indent
        elif isinstance(doc, Concat):
            stack.extend(
                (indent, mode, child, depth + 1)
                for child in reversed(doc.docs)
            )
        elif isinstance(doc, Nest):
            stack.append((indent + doc.indent, mode, doc.doc, depth + 1))
        elif isinstance(doc, Group):
            if mode == MODE_FLAT:
                # Groups inside a flat group are flat without asking.
                group_mode = MODE_FLAT
            elif doc.forced_break:
                group_mode = MODE_BREAK
            elif fits(
                doc.doc,
                indent,
                width - column,
                width,
                rest=stack,
                depth=depth + 1,
                max_depth=max_depth,
            ):
                group_mode = MODE_FLAT
            else:
                group_mode = MODE_BREAK
            stack.append((indent, group_mode, doc.doc, depth + 1))
        elif isinstance(doc, FlatChoice):
            branch = doc.when_flat if mode == MODE_FLAT else doc.when_broken
            stack.append((indent, mode, branch, depth + 1))
        elif isinstance(doc, Flat):
            stack.append((indent, MODE_FLAT, doc.doc, depth + 1))
        elif isinstance(doc, AlwaysBreak):
            stack.append((indent, mode, doc.doc, depth + 1))
        elif isinstance(doc, Contextual):
            evaluated = _evaluate_contextual(doc, indent, column, width)
            stack.append((indent, mode, evaluated, depth + 1))
        else:
            raise TypeError(f'Unexpected doc {repr(doc)}')


def layout(doc, width, indent=0, max_depth=DEFAULT_MAX_DEPTH):
    """Lays out ``doc`` to fit within ``width`` columns.

    Returns an iterator of ``str`` fragments and ``SLine`` elements.
    The iterator is lazy: the document is traversed as the caller
    consumes it.

    ``indent`` is both the base indentation of the document and the
    column the output starts on; no leading whitespace is emitted for
    the first line.

    Raises ``InvalidWidthError`` immediately if ``width`` is not a
    positive integer. Iterating raises ``RecursionLimitExceeded`` if
    the document nests deeper than ``max_depth``.
    """
    validate_width(width)
    if not isinstance(indent, int) or indent < 0:
        raise ValueError(
            f"Indent must be a non-negative integer, got {repr(indent)}"
        )
    return _layout(cast_doc(doc), width, indent, max_depth)
