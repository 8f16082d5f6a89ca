import pytest

from profunctor.functors import Compose, Identity, Just, ListF, Maybe, Nothing, Pair, Reader


def inc(x):
    return x + 1


@pytest.mark.parametrize(
    "value, expected",
    [
        (Identity(1), Identity(2)),
        (Just(1), Just(2)),
        (Nothing(), Nothing()),
        (ListF((1, 2, 3)), ListF((2, 3, 4))),
        (Pair(1, 5), Pair(2, 6)),
    ],
)
def test_fmap(value, expected):
    assert value.fmap(inc) == expected


def test_monad_bind():
    assert ListF((1, 2)).bind(lambda a: ListF((a, a * 10))) == ListF((1, 10, 2, 20))
    assert Just(3).bind(lambda a: Nothing()) == Nothing()
    assert Nothing().bind(lambda a: Just(a)) == Nothing()
    assert Pair(1, 2).bind(lambda a: Pair(a, -a)) == Pair(1, -2)
    assert Maybe.pure(4) == Just(4)


def test_monad_left_identity():
    def k(a):
        return ListF((a, a + 1))

    assert ListF.pure(3).bind(k) == k(3)
    assert Identity.pure(3).bind(lambda a: Identity(a * 2)) == Identity(6)


def test_reader_monad():
    r = Reader(lambda e: e * 2).bind(lambda a: Reader(lambda e: a + e))
    assert r(5) == 15
    assert Reader.pure("k")(99) == "k"
    assert Reader(inc).fmap(inc)(1) == 3


def test_distribute_identity():
    d = Identity.distribute(lambda x: Identity(x + 1))
    assert d.value(4) == 5


def test_distribute_pair():
    d = Pair.distribute(lambda x: Pair(x, -x))
    assert (d.fst(3), d.snd(3)) == (3, -3)


def test_distribute_reader():
    d = Reader.distribute(lambda x: Reader(lambda e: e + x))
    assert d(10)(5) == 15


def test_compose_fmap_reaches_inner_layer():
    c = Compose(ListF((Just(1), Nothing())))
    assert c.fmap(inc) == Compose(ListF((Just(2), Nothing())))
    assert c.get_compose() == ListF((Just(1), Nothing()))
