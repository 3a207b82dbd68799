"""Layout descriptions for Python values.

A value is described by ``pretty_python_value``, which dispatches on the
value's type. Types without a registered description fall back to their
``__pretty__(ctx)`` method and, failing that, to ``repr``. Containers
offer two layouts, all elements on one line or one element per line,
and let the enclosing group choose between them with ``flat_choice``.
"""
import math
from collections import Counter, OrderedDict
from functools import singledispatch

from .api import (
    DEFAULT_INDENT,
    HARDLINE,
    cast_doc,
    concat,
    flat_choice,
    group,
    join,
    nest,
    text,
)
from .doc import Doc
from .errors import RecursionLimitExceeded
from .layout import DEFAULT_MAX_DEPTH, layout

ELLIPSIS = '...'


class PrettyContext:
    """State handed to every layout description.

    Attributes:
        indent: columns added per nesting level of a multi-line layout.
        depth_left: container levels still shown before they are
            elided with ``...``.
        max_depth: how many values may be described inside one another
            before ``RecursionLimitExceeded`` is raised.
        level: how many values enclose the one being described.
        visiting: ids of the values currently being described, shared by
            every context derived from the same root.
    """
    __slots__ = ('indent', 'depth_left', 'max_depth', 'level', 'visiting')

    def __init__(
        self,
        indent=DEFAULT_INDENT,
        depth_left=float('inf'),
        max_depth=DEFAULT_MAX_DEPTH,
        level=0,
        visiting=None,
    ):
        self.indent = indent
        self.depth_left = depth_left
        self.max_depth = max_depth
        self.level = level
        self.visiting = set() if visiting is None else visiting

    def derive(self, **changes):
        fields = {name: getattr(self, name) for name in self.__slots__}
        fields.update(changes)
        return PrettyContext(**fields)

    def nested_call(self):
        """Context for the elements of a container."""
        return self.derive(depth_left=self.depth_left - 1)


def _describe(describe, value, ctx):
    if id(value) in ctx.visiting:
        return text(
            f'<Recursion on {type(value).__name__} with id={id(value)}>'
        )
    if ctx.level > ctx.max_depth:
        raise RecursionLimitExceeded(ctx.max_depth)

    ctx.visiting.add(id(value))
    try:
        return cast_doc(describe(value, ctx.derive(level=ctx.level + 1)))
    finally:
        ctx.visiting.discard(id(value))


def _describe_fallback(value, ctx):
    describe = getattr(type(value), '__pretty__', None)
    if describe is None:
        return repr(value)
    return describe(value, ctx)


@singledispatch
def pretty_python_value(value, ctx):
    """Returns a Doc describing ``value`` under ``ctx``."""
    return _describe(_describe_fallback, value, ctx)


def register_pretty(_type):
    """Registers the decorated function as the layout description
    for instances of ``_type``. The function receives the value and
    a ``PrettyContext`` and returns a Doc or str."""
    def decorator(fn):
        @pretty_python_value.register(_type)
        def dispatch(value, ctx):
            return _describe(fn, value, ctx)
        return fn
    return decorator


def comma_separated(ctx, left, docs, right, trailer=''):
    """Lays ``docs`` out between ``left`` and ``right``.

    Flat, they are joined with ``', '``. Broken, every doc gets its own
    line, indented by ``ctx.indent``. ``trailer`` follows the last doc in
    both layouts.
    """
    docs = list(docs)
    if not docs:
        return concat([left, right])

    single_line = concat([left, join(', ', docs), trailer, right])
    multi_line = concat([
        left,
        nest(ctx.indent, concat([
            HARDLINE,
            join(concat([',', HARDLINE]), docs),
            trailer,
        ])),
        HARDLINE,
        right,
    ])
    return group(flat_choice(when_broken=multi_line, when_flat=single_line))


def _callable_name(fn):
    if not callable(fn):
        return fn
    if fn.__module__ == 'builtins':
        return fn.__qualname__
    return f'{fn.__module__}.{fn.__qualname__}'


def prettycall(ctx, fn, *args, **kwargs):
    """Returns a Doc that looks like a call of ``fn`` with
    the given arguments, each described with ``pretty_python_value``.
    ``fn`` may be a callable or the name to print.

    A sole list, tuple or dict argument is written right inside the
    parentheses, so ``name([`` opens a broken layout on one line.
    """
    name = _callable_name(fn)
    if ctx.depth_left <= 0:
        return concat([name, '(', ELLIPSIS, ')'])

    if len(args) == 1 and not kwargs and isinstance(args[0], (list, tuple, dict)):
        return concat([name, '(', pretty_python_value(args[0], ctx), ')'])

    arg_ctx = ctx.nested_call()
    argdocs = [pretty_python_value(arg, arg_ctx) for arg in args]
    argdocs.extend(
        concat([keyword, '=', pretty_python_value(arg, arg_ctx)])
        for keyword, arg in kwargs.items()
    )
    return comma_separated(ctx, concat([name, '(']), argdocs, ')')


def _elements(value, ctx):
    element_ctx = ctx.nested_call()
    return [pretty_python_value(element, element_ctx) for element in value]


def _in_stable_order(elements):
    try:
        return sorted(elements)
    except TypeError:
        return list(elements)


@register_pretty(Doc)
def pretty_doc(value, ctx):
    return value


@register_pretty(list)
def pretty_list(value, ctx):
    if value and ctx.depth_left <= 0:
        return f'[{ELLIPSIS}]'
    return comma_separated(ctx, '[', _elements(value, ctx), ']')


@register_pretty(tuple)
def pretty_tuple(value, ctx):
    if value and ctx.depth_left <= 0:
        return f'({ELLIPSIS})'
    trailer = ',' if len(value) == 1 else ''
    return comma_separated(ctx, '(', _elements(value, ctx), ')', trailer)


@register_pretty(set)
def pretty_set(value, ctx):
    if not value:
        return 'set()'
    if ctx.depth_left <= 0:
        return f'{{{ELLIPSIS}}}'
    return comma_separated(ctx, '{', _elements(_in_stable_order(value), ctx), '}')


@register_pretty(frozenset)
def pretty_frozenset(value, ctx):
    if not value:
        return 'frozenset()'
    return prettycall(ctx, frozenset, _in_stable_order(value))


@register_pretty(dict)
def pretty_dict(value, ctx):
    if value and ctx.depth_left <= 0:
        return f'{{{ELLIPSIS}}}'
    item_ctx = ctx.nested_call()
    items = (
        concat([
            pretty_python_value(key, item_ctx),
            ': ',
            pretty_python_value(item, item_ctx),
        ])
        for key, item in value.items()
    )
    return comma_separated(ctx, '{', items, '}')


@register_pretty(Counter)
def pretty_counter(value, ctx):
    return prettycall(ctx, Counter, dict(value))


@register_pretty(OrderedDict)
def pretty_ordered_dict(value, ctx):
    return prettycall(ctx, OrderedDict, list(value.items()))


@register_pretty(float)
def pretty_float(value, ctx):
    # inf and nan have no literal form.
    if math.isinf(value) or math.isnan(value):
        return prettycall(ctx, float, repr(value))
    return repr(value)


@register_pretty(type(...))
def pretty_ellipsis(value, ctx):
    return ELLIPSIS


def python_to_doc(
    value,
    indent=DEFAULT_INDENT,
    depth=None,
    max_depth=DEFAULT_MAX_DEPTH,
):
    """Describes ``value`` as a Doc.

    Descriptions call each other recursively, so a value can run out of
    Python call stack before it is ``max_depth`` levels deep. That case
    raises ``RecursionLimitExceeded`` as well.
    """
    ctx = PrettyContext(
        indent=indent,
        depth_left=float('inf') if depth is None else depth,
        max_depth=max_depth,
    )
    try:
        return pretty_python_value(value, ctx)
    except RecursionLimitExceeded:
        raise
    except RecursionError as exc:
        raise RecursionLimitExceeded(max_depth) from exc


def python_to_sdocs(
    value,
    indent,
    width,
    depth,
    max_depth=DEFAULT_MAX_DEPTH
):
    doc = python_to_doc(value, indent=indent, depth=depth, max_depth=max_depth)
    return layout(doc, width=width, max_depth=max_depth)
