from yisp.types.environment import Environment
from yisp.types.nil import Nil
from yisp.types.symbol import Symbol


def test_unbound_symbol_is_its_own_value(env):
    assert env.lookup(Symbol("unknown")) == Symbol("unknown")


def test_unbound_nil_resolves_to_nil(env):
    assert env.lookup(Symbol("nil")) is Nil


def test_bound_nil_wins(env):
    env.bind(Symbol("nil"), 5.0)
    assert env.lookup(Symbol("nil")) == 5.0


def test_bind_and_lookup(env):
    env.bind(Symbol("x"), 42.0)
    assert env.lookup(Symbol("x")) == 42.0


def test_rebinding_shadows_without_removing(env):
    env.bind(Symbol("x"), 1.0)
    env.bind(Symbol("x"), 2.0)
    assert env.lookup(Symbol("x")) == 2.0
    # The stale entry is still in the frame
    assert list(env.bindings()) == [(Symbol("x"), 2.0), (Symbol("x"), 1.0)]


def test_lookup_walks_outer_frames(env):
    env.bind(Symbol("x"), 1.0)
    inner = Environment(outer=env)
    inner.bind(Symbol("y"), 2.0)
    assert inner.lookup(Symbol("x")) == 1.0
    assert inner.lookup(Symbol("y")) == 2.0
    assert env.lookup(Symbol("y")) == Symbol("y")


def test_inner_binding_shadows_outer(env):
    env.bind(Symbol("x"), 1.0)
    inner = Environment(outer=env)
    inner.bind(Symbol("x"), 2.0)
    assert inner.lookup(Symbol("x")) == 2.0
    assert env.lookup(Symbol("x")) == 1.0


def test_find(env):
    env.bind(Symbol("x"), 1.0)
    inner = Environment(outer=env)
    assert inner.find(Symbol("x")) is env
    assert inner.find(Symbol("nope")) is None
    assert inner.depth() == 1


def test_non_symbol_keys_are_unreachable(env):
    env.bind(5.0, 1.0)
    env.bind("x", 1.0)
    assert env.lookup(Symbol("x")) == Symbol("x")


def test_str_and_repr(env):
    env.bind(Symbol("x"), 1.0)
    inner = Environment(outer=env)
    inner.bind(Symbol("s"), "hi")
    assert str(env) == "{x: 1}"
    assert str(inner) == '{s: "hi"} -> ...'
    assert repr(inner) == '<Environment chain: {s: "hi"} -> {x: 1}>'
