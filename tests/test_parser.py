import pytest
from hypothesis import given, settings, strategies as st

from lamb.debug_utils.pprint import program_source, to_source
from lamb.errors import LambSyntaxError
from lamb.reader.parser import parse
from lamb.reader.tokenizer import KEYWORDS, Token, TokenKind
from lamb.types.ast import (
    FALSE, Assign, Binary, Bool, Call, Function, If, Inc, Loop, Num, Prog, Str,
    Var, Zero,
)


def parse_one(source):
    """Parse a single top-level expression."""
    program = parse(source)
    assert len(program.body) == 1
    return program.body[0]


a, b, c, f, x = Var("a"), Var("b"), Var("c"), Var("f"), Var("x")


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1", Num(1.0)),
        ('"s"', Str("s")),
        ("true", Bool(True)),
        ("false", Bool(False)),
        ("a", a),
        ("1 + 2 * 3", Binary("+", Num(1.0), Binary("*", Num(2.0), Num(3.0)))),
        ("(1 + 2) * 3", Binary("*", Binary("+", Num(1.0), Num(2.0)), Num(3.0))),
        ("10 - 3 - 2", Binary("-", Binary("-", Num(10.0), Num(3.0)), Num(2.0))),
        ("a < b == c", Binary("==", Binary("<", a, b), c)),
        ("a || b && c", Binary("||", a, Binary("&&", b, c))),
        ("a = 1 + 2", Assign(a, Binary("+", Num(1.0), Num(2.0)))),
        ("a = b = c", Assign(Assign(a, b), c)),
        ("f(1, a)", Call(f, (Num(1.0), a))),
        ("f()", Call(f, ())),
        ("f(1,)", Call(f, (Num(1.0),))),
        ("f()()", Call(Call(f, ()), ())),
        ("f(1)(2)(3)", Call(Call(Call(f, (Num(1.0),)), (Num(2.0),)), (Num(3.0),))),
        ("(function(x){x})(5)", Call(Function(("x",), x), (Num(5.0),))),
        ("λ(x) x", Function(("x",), x)),
        ("function f(a, b) a + b", Assign(f, Function(("a", "b"), Binary("+", a, b)))),
        ("function f() {}", Assign(f, Function((), FALSE))),
        ("{}", FALSE),
        ("{ a }", a),
        ("{ a; b; }", Prog((a, b))),
        ("(a; b)", Prog((a, b))),
        ("(a)", a),
        ("if a then b", If(a, b)),
        ("if a then b else c", If(a, b, c)),
        ("if a { b } else c", If(a, b, c)),
        ("if a then if b then 1 else 2", If(a, If(b, Num(1.0), Num(2.0)))),
        ("zero(a, b)", Zero(("a", "b"))),
        ("inc(a)", Inc(("a",))),
        ("zero()", Zero(())),
        ("loop 3 (inc(x))", Loop(Num(3.0), Inc(("x",)))),
        ("loop 3 { inc(x); x }", Loop(Num(3.0), Prog((Inc(("x",)), x)))),
        ("a + b(1)", Binary("+", a, Call(b, (Num(1.0),)))),
        ("a + b (1)", Binary("+", a, Call(b, (Num(1.0),)))),
        ("(a + b)(1)", Call(Binary("+", a, b), (Num(1.0),))),
    ],
)
def test_parse_expression(source, expected):
    assert parse_one(source) == expected


def test_toplevel_program():
    program = parse("a = 1; b = 2;\n a + b")
    assert program == Prog((Assign(a, Num(1.0)), Assign(b, Num(2.0)), Binary("+", a, b)))


def test_toplevel_single_expression_stays_a_program():
    assert parse("1") == Prog((Num(1.0),))
    assert parse("") == Prog(())
    assert parse("# only a comment") == Prog(())


def test_named_function_name_is_not_validated():
    node = parse_one("function 5 (x) x")
    assert node == Assign(Num(5.0), Function(("x",), x))
    node = parse_one("function if (x) x")
    assert node.left == Token(TokenKind.KW, "if")


def test_literals_are_not_call_targets():
    program = parse('loop "s" (1)')
    assert program.body[0] == Loop(Str("s"), Num(1.0))


@pytest.mark.parametrize(
    "source, message",
    [
        ("a b", 'Expecting punctuation: ";"'),
        ("f(a b)", 'Expecting punctuation: ","'),
        ("(a", 'Expecting punctuation: ")"'),
        ("if a b", 'Expecting keyword: "then"'),
        ("zero(1)", "Expecting variable name"),
        ("function f(a, 2) a", "Expecting variable name"),
        ("then", "Unexpected token"),
        (")", "Unexpected token"),
        ("()", "Unexpected token"),
        ("(a; b;)", "Unexpected token"),
        ("a +", "Unexpected end of input"),
        ("function", "Expecting function name"),
    ],
)
def test_syntax_errors(source, message):
    with pytest.raises(LambSyntaxError, match=message.replace("(", r"\(").replace(")", r"\)")):
        parse(source)


def test_syntax_error_position():
    with pytest.raises(LambSyntaxError) as exc:
        parse("a = 1;\nb c")
    assert exc.value.line == 2


def test_ast_is_immutable():
    node = parse_one("a + b")
    with pytest.raises(AttributeError):
        node.operator = "-"


# --- Round trip: to_source output re-parses to the same tree ---

names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=6).filter(
    lambda s: s not in KEYWORDS
)
numbers = st.floats(min_value=0, allow_nan=False).map(abs)
strings = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=8)
binary_ops = st.sampled_from(["||", "&&", "<", ">", "<=", ">=", "==", "!=", "+", "-", "*", "/", "%"])

leaves = st.one_of(
    numbers.map(Num),
    strings.map(Str),
    st.booleans().map(Bool),
    names.map(Var),
)


def _compound(children):
    callees = children.filter(lambda n: not isinstance(n, (Num, Str, Bool)))
    name_lists = st.lists(names, max_size=3).map(tuple)
    return st.one_of(
        st.builds(Assign, names.map(Var), children),
        st.builds(Binary, binary_ops, children, children),
        st.builds(Function, name_lists, children),
        st.builds(If, children, children, st.none() | children),
        st.lists(children, min_size=2, max_size=4).map(lambda xs: Prog(tuple(xs))),
        st.builds(Call, callees, st.lists(children, max_size=3).map(tuple)),
        name_lists.map(Zero),
        name_lists.map(Inc),
        st.builds(Loop, children, children),
    )


expressions = st.recursive(leaves, _compound, max_leaves=12)


@settings(max_examples=200, deadline=None)
@given(expressions)
def test_round_trip_expression(node):
    assert parse_one(to_source(node)) == node


@settings(max_examples=50, deadline=None)
@given(st.lists(expressions, max_size=4))
def test_round_trip_program(body):
    program = Prog(tuple(body))
    assert parse(program_source(program)) == program


def test_round_trip_fixed_program():
    source = """
    function make(n) { function() { n } };
    counter = 0;
    loop 3 { inc(counter) };
    if counter >= 3 { "done" } else "more";
    (function(x){ x * 2 })(21)
    """
    program = parse(source)
    assert parse(program_source(program)) == program


@pytest.mark.parametrize(
    "source",
    ["0.00001", "123456789.125", "0.1", "1" * 400, "9" * 20, "0.000000000000000000000000000001"],
)
def test_round_trip_number_literals(source):
    program = parse(source)
    rendered = program_source(program)
    assert "e" not in rendered
    assert parse(rendered) == program


@pytest.mark.parametrize("value", [float("nan"), -1.0])
def test_numbers_without_literal_form_are_rejected(value):
    with pytest.raises(ValueError, match="no literal form"):
        to_source(Num(value))
