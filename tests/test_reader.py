import pytest
from hypothesis import given, strategies as st

from yisp.types.nil import Nil
from yisp.types.pair import Pair, from_iterable
from yisp.types.symbol import Symbol
from yisp.reader.parser import read, read_all, Reader
from yisp.printer import to_str


def L(*items):
    return from_iterable(items)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("", Nil),
        ("   \n\t", Nil),
        ("()", Nil),
        ("(   )", Nil),
        ("123", 123.0),
        ("-45", -45.0),
        ("+7", 7.0),
        ("3.14", 3.14),
        ("-456.78", -456.78),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        ("-.5", -0.5),
        ("7.", 7.0),
        ('"hello"', "hello"),
        ('""', ""),
        ("abc", Symbol("abc")),
        ("nil", Symbol("nil")),
        ("nil?", Symbol("nil?")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("-x", Symbol("-x")),
        (".5", Symbol(".5")),
        ("'a", L(Symbol("quote"), Symbol("a"))),
        ("'()", L(Symbol("quote"), Nil)),
        ("(a b c)", L(Symbol("a"), Symbol("b"), Symbol("c"))),
        ("(+ 1 2)", L(Symbol("+"), 1.0, 2.0)),
        ("(- 5 3)", L(Symbol("-"), 5.0, 3.0)),
    ]
)
def test_parser(source, expected):
    assert read(source) == expected


def test_nested_lists():
    result = read("((a b) (c d))")
    assert result == L(L(Symbol("a"), Symbol("b")), L(Symbol("c"), Symbol("d")))


def test_quote_desugars_inside_lists():
    assert read("(cons 'a '(b))") == L(
        Symbol("cons"),
        L(Symbol("quote"), Symbol("a")),
        L(Symbol("quote"), L(Symbol("b"))),
    )


def test_quote_char_ends_a_symbol():
    assert read("(a'b)") == L(Symbol("a"), L(Symbol("quote"), Symbol("b")))


def test_no_dotted_pair_syntax():
    # The dot is just a symbol; the printer happens to render it the same way
    result = read("(a . b)")
    assert result == L(Symbol("a"), Symbol("."), Symbol("b"))
    assert to_str(result) == "(a . b)"


# -------------------------------
# Malformed input never raises
# -------------------------------
def test_unmatched_paren_closes_at_end_of_input():
    assert read("(a (b c") == L(Symbol("a"), L(Symbol("b"), Symbol("c")))


def test_unterminated_string_closes_at_end_of_input():
    assert read('"abc def') == "abc def"
    assert read('(f "x y') == L(Symbol("f"), "x y")


def test_strings_have_no_escapes():
    assert read(r'"a\"') == "a\\"


def test_stray_close_paren_reads_as_empty_symbol():
    assert read(")") == Symbol("")


def test_numeric_prefix_is_split_from_the_rest():
    # `1a` is the number 1 followed by the symbol a
    assert read("1a") == 1.0
    assert read("(1a 2)") == L(1.0, Symbol("a"), 2.0)
    assert read("(1.5.2)") == L(1.5, Symbol(".2"))
    assert read("(1e)") == L(1.0, Symbol("e"))


def test_hex_and_inf_are_not_numbers():
    assert read("(0x10)") == L(0.0, Symbol("x10"))
    assert read("-inf") == Symbol("-inf")


def test_reader_position_advances():
    r = Reader("  foo bar")
    assert r.parse_expr() == Symbol("foo")
    assert r.pos == 5


def test_read_all():
    exprs = list(read_all("(define x 1) x 'y"))
    assert exprs == [
        L(Symbol("define"), Symbol("x"), 1.0),
        Symbol("x"),
        L(Symbol("quote"), Symbol("y")),
    ]


def test_read_all_skips_stray_close_parens():
    assert list(read_all(") a ) b")) == [Symbol("a"), Symbol("b")]


def test_read_all_empty():
    assert list(read_all("   ")) == []


def test_deep_nesting_reads_without_recursion():
    value = read("(" * 3000)
    depth = 0
    while isinstance(value, Pair):
        depth += 1
        value = value.first
    assert depth == 2999
    assert value is Nil


def test_deep_quotes_read_without_recursion():
    value = read("'" * 3000 + "x")
    for _ in range(3000):
        assert value.first == Symbol("quote")
        value = value.rest.first
    assert value == Symbol("x")


def test_quote_before_close_paren():
    assert read("(a ')") == L(Symbol("a"), L(Symbol("quote"), Symbol("")))
    assert read("(a '") == L(Symbol("a"), L(Symbol("quote"), Nil))


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu")),
    min_size=1, max_size=1
).flatmap(lambda head: st.text(
    st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters="-_?!*<>="),
    max_size=8,
).map(lambda tail: Symbol(head + tail)))

string_strat = st.text(
    st.characters(blacklist_characters='"', blacklist_categories=("Cs",)),
    max_size=20,
)

number_strat = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6).map(float),
    st.floats(allow_infinity=False, allow_nan=False),
)

atom_strat = st.one_of(symbol_strat, string_strat, number_strat)

value_strat = st.recursive(
    st.one_of(atom_strat, st.just(Nil)),
    lambda children: st.lists(children, max_size=5).map(from_iterable),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(value_strat)
def test_print_then_read_roundtrip(value):
    assert read(to_str(value)) == value


@given(st.text(max_size=60))
def test_reader_never_raises(source):
    list(read_all(source))
    read(source)


@given(st.text(alphabet="()'\" ab1-.", max_size=40))
def test_reader_terminates_on_bracket_soup(source):
    result = read(source)
    assert isinstance(result, (float, str, Symbol, Pair)) or result is Nil


@given(st.integers(min_value=1000, max_value=5000), st.sampled_from(["(", "'(", "('"]))
def test_reader_handles_any_nesting_depth(depth, opener):
    source = opener * depth
    read(source)
    list(read_all(source + ")" * depth))
