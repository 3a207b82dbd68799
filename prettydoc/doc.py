import re

from wcwidth import wcswidth, wcwidth

_LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')


def text_width(s):
    """Returns the number of terminal columns ``s`` occupies.

    East Asian wide characters take two columns and combining marks
    take none. Non-printable characters count as zero columns rather
    than making the whole string unmeasurable. Both the layout engine
    and the fits evaluator measure text with this function.
    """
    width = wcswidth(s)
    if width < 0:
        return sum(max(wcwidth(c), 0) for c in s)
    return width


def cast_doc(doc):
    """Casts value to doc, if possible.

    Strings containing line breaks are split into lines joined
    with ``HARDLINE``."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if not doc:
            return NIL
        lines = _LINE_BREAK_PATTERN.split(doc)
        if len(lines) == 1:
            return Text(doc)
        docs = []
        for idx, line in enumerate(lines):
            if idx:
                docs.append(HARDLINE)
            if line:
                docs.append(Text(line))
        return concat_docs(docs)

    raise TypeError(
        f"Got {repr(doc)} of type {type(doc).__name__}, "
        "expected 'str' or 'Doc'"
    )


def concat_docs(docs):
    spliced = []
    for doc in docs:
        doc = cast_doc(doc)
        if isinstance(doc, Concat):
            spliced.extend(doc.docs)
        elif doc is not NIL:
            spliced.append(doc)

    if not spliced:
        return NIL
    elif len(spliced) == 1:
        return spliced[0]
    return Concat(spliced)


class Doc:
    """Base class of document nodes.

    ``repr()`` of a document recurses once per child node, so it is
    meant for debugging only. For documents nested close to the render
    ``max_depth`` it can exceed the Python call stack even though
    ``render`` lays the same document out without recursion.
    """
    __slots__ = ()

    # True when rendering the doc emits a newline no matter
    # which layout its groups choose.
    forced_break = False

    def __add__(self, other):
        return concat_docs([self, other])

    def __radd__(self, other):
        return concat_docs([other, self])


class Text(Doc):
    __slots__ = ('value', 'width')

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        if '\n' in value or '\r' in value:
            raise ValueError(
                f"Text can't contain line breaks, got {repr(value)}"
            )
        self.value = value
        self.width = text_width(value)

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Nil(Doc):
    __slots__ = ()

    def __repr__(self):
        return 'NIL'


NIL = Nil()


class Concat(Doc):
    __slots__ = ('docs', 'forced_break')

    def __init__(self, docs):
        self.docs = tuple(docs)
        assert all(isinstance(doc, Doc) for doc in self.docs)
        self.forced_break = any(doc.forced_break for doc in self.docs)

    def __repr__(self):
        return f"Concat({', '.join(repr(doc) for doc in self.docs)})"


class Nest(Doc):
    __slots__ = ('indent', 'doc', 'forced_break')

    def __init__(self, indent, doc):
        assert isinstance(indent, int)
        assert isinstance(doc, Doc)

        self.indent = indent
        self.doc = doc
        self.forced_break = doc.forced_break

    def __repr__(self):
        return f'Nest({repr(self.indent)}, {repr(self.doc)})'


class Break(Doc):
    """A line break that renders as ``flat`` when its
    enclosing group is laid out on a single line."""
    __slots__ = ('flat', 'width')

    def __init__(self, flat):
        if not isinstance(flat, str):
            raise TypeError(
                f"Got {repr(flat)} of type {type(flat).__name__}, "
                "expected 'str'"
            )
        if '\n' in flat or '\r' in flat:
            raise ValueError(
                f"Flat substitute can't contain line breaks, got {repr(flat)}"
            )
        self.flat = flat
        self.width = text_width(flat)

    def __repr__(self):
        return f'Break({repr(self.flat)})'


class HardLine(Doc):
    __slots__ = ()

    forced_break = True

    def __repr__(self):
        return 'HARDLINE'


HARDLINE = HardLine()
LINE = Break(' ')
SOFTLINE = Break('')


class FlatChoice(Doc):
    __slots__ = ('when_broken', 'when_flat', 'forced_break')

    def __init__(self, when_broken, when_flat):
        assert isinstance(when_broken, Doc)
        assert isinstance(when_flat, Doc)
        self.when_broken = when_broken
        self.when_flat = when_flat
        # Only the flat branch decides whether the enclosing
        # group can be laid out on one line.
        self.forced_break = when_flat.forced_break

    def __repr__(self):
        return (
            f'FlatChoice(when_broken={repr(self.when_broken)}, '
            f'when_flat={repr(self.when_flat)})'
        )


class Contextual(Doc):
    __slots__ = ('fn', )

    def __init__(self, fn):
        assert callable(fn)
        self.fn = fn

    def __repr__(self):
        return f'Contextual({repr(self.fn)})'


class Group(Doc):
    __slots__ = ('doc', 'forced_break')

    def __init__(self, doc):
        assert isinstance(doc, Doc)
        self.doc = doc
        self.forced_break = doc.forced_break

    def __repr__(self):
        return f'Group({repr(self.doc)})'


class Flat(Doc):
    __slots__ = ('doc', 'forced_break')

    def __init__(self, doc):
        assert isinstance(doc, Doc)
        self.doc = doc
        self.forced_break = doc.forced_break

    def __repr__(self):
        return f'Flat({repr(self.doc)})'


class AlwaysBreak(Doc):
    __slots__ = ('doc', )

    forced_break = True

    def __init__(self, doc):
        assert isinstance(doc, Doc)
        self.doc = doc

    def __repr__(self):
        return f'AlwaysBreak({repr(self.doc)})'
