import io
from collections import Counter, OrderedDict

import pytest

from prettydoc import (
    DEFAULT_INDENT,
    HARDLINE,
    LINE,
    SOFTLINE,
    InvalidWidthError,
    RecursionLimitExceeded,
    PrettyContext,
    PrettyPrinter,
    concat,
    display,
    flat_choice,
    group,
    join,
    nest,
    pformat,
    pprint,
    pretty_python_value,
    prettycall,
    python_to_doc,
    register_pretty,
    render,
    text,
)


def test_flat_containers():
    assert pformat([1, 2, 3]) == '[1, 2, 3]'
    assert pformat((1, 'a')) == "(1, 'a')"
    assert pformat({'b': 2, 'a': [1, 2]}) == "{'b': 2, 'a': [1, 2]}"
    assert pformat({1}) == '{1}'


def test_empty_containers():
    assert pformat([]) == '[]'
    assert pformat(()) == '()'
    assert pformat({}) == '{}'
    assert pformat(set()) == 'set()'
    assert pformat(frozenset()) == 'frozenset()'


def test_single_element_tuple_keeps_comma():
    assert pformat((1,)) == '(1,)'


def test_broken_list():
    assert pformat(list(range(4)), width=5) == '[\n    0,\n    1,\n    2,\n    3\n]'


def test_nested_dict_breaks_outer_first():
    expected = (
        "{\n"
        "    'key': [\n"
        "        1,\n"
        "        2,\n"
        "        3\n"
        "    ]\n"
        "}"
    )
    assert pformat({'key': [1, 2, 3]}, width=12) == expected


def test_custom_indent():
    assert pformat([1, 2], width=3, indent=2) == '[\n  1,\n  2\n]'


def test_depth_elides_nested_containers():
    assert pformat([[1, [2]]], depth=1) == '[[...]]'
    assert pformat({'a': {'b': 1}}, depth=1) == "{'a': {...}}"


def test_recursive_list():
    value = [1]
    value.append(value)
    assert pformat(value) == f'[1, <Recursion on list with id={id(value)}>]'


def test_collections():
    assert pformat(frozenset([1])) == 'frozenset([1])'
    assert pformat(Counter('aa')) == "collections.Counter({'a': 2})"
    assert (
        pformat(OrderedDict([('a', 1)])) ==
        "collections.OrderedDict([('a', 1)])"
    )


def test_special_floats():
    assert pformat(float('inf')) == "float('inf')"
    assert pformat(float('-inf')) == "float('-inf')"
    assert pformat(float('nan')) == "float('nan')"
    assert pformat(1.5) == '1.5'


def test_scalars_use_repr():
    assert pformat('a\nb') == "'a\\nb'"
    assert pformat(None) == 'None'
    assert pformat(True) == 'True'
    assert pformat(...) == '...'


def test_multiline_repr_is_split_into_lines():
    class Multiline:
        def __repr__(self):
            return 'first\nsecond'

    assert pformat(Multiline()) == 'first\nsecond'


def test_docs_describe_themselves():
    doc = group(concat(['a', LINE, 'b']))
    assert pformat(doc, width=2) == 'a\nb'


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __pretty__(self, ctx):
        return prettycall(ctx, 'Point', x=self.x, y=self.y)


def test_pretty_method():
    assert pformat(Point(1, 2)) == 'Point(x=1, y=2)'
    assert pformat([Point(1, 2)], width=12) == (
        '[\n'
        '    Point(\n'
        '        x=1,\n'
        '        y=2\n'
        '    )\n'
        ']'
    )


class Temperature:
    def __init__(self, degrees):
        self.degrees = degrees


@register_pretty(Temperature)
def pretty_temperature(value, ctx):
    return f'{value.degrees}°C'


def test_register_pretty():
    assert pformat(Temperature(21)) == '21°C'
    assert pformat([Temperature(21)]) == '[21°C]'


def test_context_indent_reaches_nested_descriptions():
    ctx = PrettyContext(indent=2)
    doc = pretty_python_value([Point(1, 2)], ctx)
    assert render(doc, 12) == '[\n  Point(\n    x=1,\n    y=2\n  )\n]'
    assert ctx.visiting == set()


def test_broken_single_element_tuple_keeps_comma():
    assert pformat(('abcdef',), width=6) == "(\n    'abcdef',\n)"


def test_multiline_element_breaks_container():
    class Multiline:
        def __repr__(self):
            return 'first\nsecond'

    assert pformat([1, Multiline()]) == '[\n    1,\n    first\n    second\n]'


def test_sets_are_ordered_when_comparable():
    assert pformat({3, 1, 2}) == '{1, 2, 3}'
    assert pformat(frozenset([2, 1])) == 'frozenset([1, 2])'


def nested_lists(levels):
    value = []
    for _ in range(levels):
        value = [value]
    return value


def test_nesting_within_max_depth_is_printed():
    assert pformat(nested_lists(3), max_depth=20) == '[[[[]]]]'


def test_nesting_over_max_depth_raises():
    with pytest.raises(RecursionLimitExceeded) as excinfo:
        pformat(nested_lists(30), max_depth=20)
    assert excinfo.value.max_depth == 20


def test_deeply_nested_value_raises_limit_error_not_python_error():
    with pytest.raises(RecursionLimitExceeded):
        pformat(nested_lists(200))
    with pytest.raises(RecursionLimitExceeded):
        python_to_doc(nested_lists(5000))


def test_python_to_doc_uses_default_indent():
    doc = python_to_doc(['aaaa', 'bbbb'])
    assert render(doc, 8) == "[\n" + " " * DEFAULT_INDENT + "'aaaa',\n" + " " * DEFAULT_INDENT + "'bbbb'\n]"


def test_pprint_writes_with_end():
    stream = io.StringIO()
    pprint([1, 2], stream=stream)
    assert stream.getvalue() == '[1, 2]\n'


def test_pretty_printer():
    stream = io.StringIO()
    printer = PrettyPrinter(width=5, stream=stream)
    printer.pprint([1, 2])
    assert stream.getvalue() == '[\n    1,\n    2\n]\n'
    assert printer.pformat((1, 2)) == '(\n    1,\n    2\n)'


def test_pformat_rejects_invalid_width():
    with pytest.raises(InvalidWidthError):
        pformat([1], width=0)


# A small expression language, laid out with the combinators directly.

class Ident:
    def __init__(self, name):
        self.name = name

    def is_block_like(self):
        return False

    def __pretty__(self, ctx):
        return display(self.name)


class TypedIdent:
    def __init__(self, name, ty):
        self.name = name
        self.ty = ty

    def __pretty__(self, ctx):
        return concat([self.name, ': ', self.ty])


class BinaryExpr:
    def __init__(self, op, lhs, rhs):
        self.op = op
        self.lhs = lhs
        self.rhs = rhs

    def is_block_like(self):
        return self.lhs.is_block_like() or self.rhs.is_block_like()

    def __pretty__(self, ctx):
        return concat([
            pretty_python_value(self.lhs, ctx),
            ' ',
            self.op,
            ' ',
            pretty_python_value(self.rhs, ctx),
        ])


class Block:
    def __init__(self, body):
        self.body = body

    def __pretty__(self, ctx):
        body = pretty_python_value(self.body, ctx)
        multi_line = concat([
            '{',
            nest(ctx.indent, concat([HARDLINE, body])),
            HARDLINE,
            '}',
        ])
        if self.body.is_block_like():
            return multi_line
        return group(flat_choice(when_broken=multi_line, when_flat=body))


class LetExpr:
    def __init__(self, bound, expr, body):
        self.bound = bound
        self.expr = expr
        self.body = Block(body)

    def is_block_like(self):
        return True

    def __pretty__(self, ctx):
        return concat([
            'let ',
            self.bound,
            ' = ',
            pretty_python_value(self.expr, ctx),
            ' in ',
            pretty_python_value(self.body, ctx),
        ])


class Function:
    def __init__(self, name, args, ret, body):
        self.name = name
        self.args = args
        self.ret = ret
        self.body = Block(body)

    def __pretty__(self, ctx):
        params = group(concat([
            '(',
            nest(ctx.indent, concat([
                SOFTLINE,
                join(
                    concat([',', LINE]),
                    (pretty_python_value(arg, ctx) for arg in self.args),
                ),
            ])),
            SOFTLINE,
            ')',
        ]))
        return_ty = concat([' -> ', self.ret]) if self.ret else ''
        return concat([
            'fn ',
            text(self.name),
            params,
            return_ty,
            ' = ',
            pretty_python_value(self.body, ctx),
        ])


@pytest.fixture
def square_plus_1():
    return Function(
        'square_plus_1',
        [TypedIdent('a', 'number'), TypedIdent('b', 'number')],
        'number',
        LetExpr(
            'c',
            BinaryExpr('*', Ident('a'), Ident('b')),
            BinaryExpr('+', Ident('c'), Ident('1')),
        ),
    )


def test_function_layout(square_plus_1):
    expected = (
        'fn square_plus_1(a: number, b: number) -> number = {\n'
        '    let c = a * b in c + 1\n'
        '}'
    )
    assert pformat(square_plus_1) == expected


def test_function_layout_narrow(square_plus_1):
    expected = (
        'fn square_plus_1(\n'
        '    a: number,\n'
        '    b: number\n'
        ') -> number = {\n'
        '    let c = a * b in c + 1\n'
        '}'
    )
    assert pformat(square_plus_1, width=30) == expected
