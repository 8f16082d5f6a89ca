from itertools import product

import pytest

from profunctor.composition import Procompose, procomposed
from profunctor.core import CapabilityError, identity
from profunctor.instances import Fn, Forget
from profunctor.kan.rift import Rift, decompose_rift, rift_counit, rift_unit

TWO = (0, 1)
THREE = (0, 1, 2)


def tables(domain, codomain):
    """Every function ``domain -> codomain`` as an ``Fn``."""
    for image in product(codomain, repeat=len(domain)):
        table = dict(zip(domain, image))
        yield Fn(lambda a, table=table: table[a])


def observe(p, domain):
    return tuple(p(a) for a in domain)


def precompose_with(h):
    return Rift(lambda p: p.lmap(h))


def test_counit_after_unit_reproduces_the_composite():
    for p in tables(THREE, TWO):
        for r in tables(TWO, THREE):
            collapsed = decompose_rift(Procompose(p, rift_unit(r)))
            assert collapsed.p is p and collapsed.q is r
            assert observe(procomposed(collapsed), TWO) == observe(procomposed(Procompose(p, r)), TWO)


def test_rift_side_triangle_identity():
    for h in tables(TWO, THREE):
        rift = precompose_with(h)
        back = rift_unit(rift).promap(rift_counit)
        for p in tables(THREE, TWO):
            assert observe(back(p), TWO) == observe(rift(p), TWO)


def test_transpose_round_trip():
    def transpose(nat):
        return lambda r: rift_unit(r).promap(nat)

    to_rift = transpose(procomposed)
    for p in tables(THREE, TWO):
        for r in tables(TWO, THREE):
            via_rift = decompose_rift(Procompose(p, to_rift(r)))
            assert observe(via_rift, TWO) == observe(procomposed(Procompose(p, r)), TWO)


def test_rift_dimap_laws():
    h = Fn(lambda a: a + 1)
    rift = precompose_with(h)
    p = Fn(lambda b: b * 3)
    domain = range(-2, 3)
    assert observe(rift.dimap(identity, identity)(p), domain) == observe(rift(p), domain)
    moved = rift.dimap(lambda c: c * 2, lambda b: b - 1)
    assert observe(moved(p), domain) == tuple((c * 2 + 1 - 1) * 3 for c in domain)
    assert observe(rift.lmap(abs).rmap(abs)(p), domain) == observe(rift.dimap(abs, abs)(p), domain)
    assert observe(rift.fmap(abs)(p), domain) == observe(rift.rmap(abs)(p), domain)


def test_rift_promap():
    rift = precompose_with(Fn(lambda a: a + 1)).promap(lambda q: q.rmap(str))
    assert rift(Fn(lambda b: b * 3))(2) == "9"


def test_rift_comonad():
    h = Fn(lambda a: a * 2)
    rift = precompose_with(h)
    assert observe(rift.proextract(Fn(identity)), THREE) == observe(h, THREE)
    duplicated = rift.produplicate().proextract(Fn(identity))
    for p in tables(THREE, TWO):
        assert observe(duplicated(p), TWO) == observe(rift(p), TWO)


def test_rift_category():
    r1 = precompose_with(Fn(lambda a: a + 1))
    r2 = precompose_with(Fn(lambda a: a * 10))
    p = Fn(lambda b: b - 4)
    assert r1.compose(r2)(p)(2) == r2(r1(p))(2) == 17
    assert observe(r1.identity()(p), THREE) == observe(p, THREE)
    assert observe(r1.compose(r1.identity())(p), THREE) == observe(r1(p), THREE)


def test_decompose_needs_a_rift():
    with pytest.raises(CapabilityError):
        decompose_rift(Procompose(Fn(identity), Fn(identity)))


def test_produplicate_needs_category():
    duplicated = precompose_with(Fn(identity)).produplicate()
    with pytest.raises(CapabilityError):
        duplicated(Fn(identity))(Forget(str))
