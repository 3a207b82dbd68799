from .doc import (
    AlwaysBreak,
    Break,
    Contextual,
    Flat,
    FlatChoice,
    Group,
    Nest,
    NIL,
    LINE,
    SOFTLINE,
    HARDLINE,
    cast_doc,
    concat_docs,
)
from .utils import intersperse

# Spaces per nesting level used by the builtin value layouts.
DEFAULT_INDENT = 4


def text(x):
    """Returns a Doc that prints the str ``x`` as is.

    Line breaks in ``x`` become ``HARDLINE`` s, so the result
    never contains a ``Text`` with a newline in it."""
    if not isinstance(x, str):
        raise TypeError("Argument to text function must be a str")
    return cast_doc(x)


def display(value):
    """Returns a Doc that prints ``str(value)``."""
    return text(str(value))


def line_break(flat):
    """Returns a line break that prints as ``flat`` when its
    group is laid out on a single line. ``LINE`` and ``SOFTLINE``
    are the common cases."""
    return Break(flat)


def group(doc):
    """Annotates doc with special meaning to the layout algorithm, so that the
    document is attempted to output on a single line if it is possible within
    the layout constraints. To lay out the doc on a single line, the `when_flat`
    branch of ``FlatChoice`` is used."""
    return Group(cast_doc(doc))


def concat(docs):
    """Returns a concatenation of the documents in the iterable argument"""
    return concat_docs(docs)


def nest(i, doc):
    """Indents every line break inside ``doc`` by ``i`` more columns."""
    return Nest(i, cast_doc(doc))


def contextual(fn):
    """Returns a Doc that is lazily evaluated when deciding layout.

    ``fn`` must be a pure function that accepts three arguments
    and returns a Doc or str:

    - ``indent`` (``int``): the current indentation level, 0 or more
    - ``column`` (``int``) the current output column in the output line
    - ``page_width`` (``int``) the requested page width (character count)
    """
    return Contextual(fn)


def align(doc):
    """Aligns each new line in ``doc`` with the first new line.
    """
    def evaluator(indent, column, page_width):
        return Nest(column - indent, cast_doc(doc))
    return contextual(evaluator)


def hang(i, doc):
    return align(nest(i, doc))


def join(sep, docs):
    return concat(intersperse(sep, docs))


def hsep(docs):
    return join(' ', docs)


def vsep(docs):
    return join(LINE, docs)


def always_break(doc):
    """Instructs the layout algorithm that ``doc`` must be
    broken to multiple lines. This instruction propagates
    to all higher levels in the layout, but nested Docs
    may still be laid out flat."""
    return AlwaysBreak(cast_doc(doc))


def flat_choice(when_broken, when_flat):
    """Gives the layout algorithm two options. ``when_flat`` Doc will be
    used when the document fit onto a single line, and ``when_broken`` is used
    when the Doc had to be broken into multiple lines."""
    return FlatChoice(cast_doc(when_broken), cast_doc(when_flat))


def flatten(doc):
    """Lays out ``doc`` on a single line regardless of the available
    width. ``HARDLINE`` s inside it still produce newlines."""
    return Flat(cast_doc(doc))

