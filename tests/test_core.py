import logging

import pytest

from profunctor.core import (CapabilityError, Left, Right, compose, dimap, first, identity, left,
                             lmap, require, right, rmap, second)
from profunctor.functors import Identity, Just, ListF, Maybe, Nothing, Pair
from profunctor.instances import Cokleisli, Down, Fn, Forget, Kleisli, Tagged, Up

DOMAIN = [-2, -1, 0, 1, 3]


def f1(x):
    return x + 1


def f2(x):
    return x * 2


def g1(y):
    return y - 3


def g2(y):
    return y * y


INSTANCES = {
    "fn": (lambda: Fn(lambda a: a * 3), lambda p: [p(a) for a in DOMAIN]),
    "forget": (lambda: Forget(str), lambda p: [p.run(a) for a in DOMAIN]),
    "tagged": (lambda: Tagged(5), lambda p: p.value),
    "up": (lambda: Up(lambda fa: sum(fa.items)), lambda p: [p.run(ListF((a, a + 1))) for a in DOMAIN]),
    "cokleisli": (lambda: Cokleisli(lambda w: w.fst - w.snd), lambda p: [p.run(Pair(a, a * a)) for a in DOMAIN]),
    "down": (lambda: Down(lambda a: Pair(a, -a), Pair), lambda p: [p.run(a) for a in DOMAIN]),
    "kleisli": (
        lambda: Kleisli(lambda a: Just(a) if a >= 0 else Nothing(), Maybe),
        lambda p: [p.run(a) for a in DOMAIN],
    ),
}


@pytest.mark.parametrize("name", sorted(INSTANCES))
def test_dimap_identity(name):
    make, observe = INSTANCES[name]
    p = make()
    assert observe(p.dimap(identity, identity)) == observe(p)


@pytest.mark.parametrize("name", sorted(INSTANCES))
def test_dimap_composition(name):
    make, observe = INSTANCES[name]
    p = make()
    sequential = p.dimap(f1, g1).dimap(f2, g2)
    fused = p.dimap(compose(f1, f2), compose(g2, g1))
    assert observe(sequential) == observe(fused)


@pytest.mark.parametrize("name", sorted(INSTANCES))
def test_lmap_rmap_agree_with_dimap(name):
    make, observe = INSTANCES[name]
    p = make()
    assert observe(lmap(f1, rmap(g1, p))) == observe(dimap(f1, g1, p))


def test_strong_fn():
    assert first(Fn(f2))((3, "x")) == (6, "x")
    assert second(Fn(f2))(("x", 3)) == ("x", 6)


def test_strong_forget_ignores_passenger():
    assert Forget(str).first().run((4, "x")) == "4"


def test_strong_down_and_kleisli():
    d = Down(lambda a: Pair(a, -a), Pair)
    assert d.first().run((2, "c")) == Pair((2, "c"), (-2, "c"))
    k = Kleisli(lambda a: ListF((a, a + 1)), ListF)
    assert k.first().run((1, "c")) == ListF(((1, "c"), (2, "c")))


def test_choice_fn():
    p = left(Fn(f2))
    assert p(Left(3)) == Left(6)
    assert p(Right("x")) == Right("x")
    q = right(Fn(f2))
    assert q(Right(3)) == Right(6)
    assert q(Left("x")) == Left("x")


def test_choice_tagged():
    assert Tagged(5).left() == Tagged(Left(5))
    assert Tagged(5).right() == Tagged(Right(5))


def test_choice_down_uses_pure():
    d = Down(lambda a: Just(a + 1), Maybe).left()
    assert d.run(Left(1)) == Just(Left(2))
    assert d.run(Right("r")) == Just(Right("r"))


def test_arrow_fn():
    assert Fn(f1).fanout(Fn(f2))(3) == (4, 6)
    assert Fn(f1).split(Fn(f2))((1, 2)) == (2, 4)
    assert Fn(f1).then(Fn(f2))(3) == 8
    assert Fn(f1).identity()(9) == 9


def test_kleisli_category():
    k1 = Kleisli(lambda a: ListF((a, a + 10)), ListF)
    k2 = Kleisli(lambda a: ListF((a * 2,)), ListF)
    assert k2.compose(k1).run(1) == ListF((2, 22))
    assert k1.identity().run(5) == ListF((5,))
    assert k1.arr(f1).run(5) == ListF((6,))


def test_kleisli_identity_needs_monad():
    with pytest.raises(CapabilityError) as err:
        Kleisli(lambda a: Identity(a)).identity()
    assert err.value.capability == "Monad"


def test_missing_capability_is_reported():
    with pytest.raises(CapabilityError) as err:
        left(Forget(str))
    assert err.value.capability == "Choice"
    assert "Forget has no Choice instance" in str(err.value)

    with pytest.raises(CapabilityError):
        first(Tagged(1))

    with pytest.raises(CapabilityError):
        dimap(identity, identity, 42)


def test_capability_error_is_a_type_error():
    with pytest.raises(TypeError):
        require("plain", Fn)


def test_missing_capability_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="profunctor.core"):
        with pytest.raises(CapabilityError):
            right(Forget(str))
    assert any("Choice" in r.getMessage() for r in caplog.records)
