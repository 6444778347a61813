import pytest

from yisp.printer import to_str, format_number
from yisp.types.nil import Nil
from yisp.types.pair import Pair, from_iterable
from yisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "value, expected",
    [
        (120.0, "120"),
        (-456.78, "-456.78"),
        (0.5, "0.5"),
        (1e16, "1e+16"),
        (1e-5, "1e-05"),
        (-0.0, "-0"),
        (float("inf"), "inf"),
        (0.1 + 0.2, "0.30000000000000004"),
    ]
)
def test_numbers(value, expected):
    assert format_number(value) == expected
    assert to_str(value) == expected


def test_atoms():
    assert to_str("hello world") == '"hello world"'
    # no escaping of embedded quotes
    assert to_str('say "hi"') == '"say "hi""'
    assert to_str(Symbol("foo")) == "foo"
    assert to_str(Nil) == "()"


def test_lists():
    assert to_str(from_iterable([Symbol("a"), 1.0, "s"])) == '(a 1 "s")'
    assert to_str(from_iterable([Nil, from_iterable([Symbol("b")])])) == "(() (b))"


def test_dotted_pairs():
    assert to_str(Pair(1.0, 2.0)) == "(1 . 2)"
    assert to_str(from_iterable([1.0, 2.0], tail=Symbol("c"))) == "(1 2 . c)"
    assert to_str(Pair(Pair(1.0, 2.0), "x")) == '((1 . 2) . "x")'


def test_unknown_objects():
    assert to_str(object()) == "<unknown>"


def test_pair_str_and_repr():
    p = from_iterable([Symbol("a"), Symbol("b")])
    assert str(p) == "(a b)"
    assert repr(p) == "Pair<(a b)>"


def test_deeply_nested_lists():
    value = Nil
    for _ in range(5000):
        value = Pair(value, Nil)
    assert to_str(value) == "(" * 5001 + ")" * 5001


def test_long_dotted_chain_in_first_position():
    value = 0.0
    for i in range(3000):
        value = Pair(value, float(i))
    text = to_str(value)
    assert text.startswith("(" * 3000 + "0 . 0)")
    assert text.endswith(" . 2999)")
