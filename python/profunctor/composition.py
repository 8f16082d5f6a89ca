"""Profunctor composition.

``Procompose(p, q)`` pairs ``p: P x c`` with ``q: Q d x`` and hides the
shared ``x``; the result is a profunctor from ``d`` to ``c``. Plain
functions are a lax identity on either side and composition is
associative only up to isomorphism, so profunctors form a bicategory.
"""
from typing import Callable, Generic, Optional, TypeVar

from profunctor.closed import Closed, closed
from profunctor.core import (Category, Choice, Corepresentable, Profunctor, Representable, Strong,
                             identity, require)
from profunctor.functors import Compose
from profunctor.instances import Cokleisli, Down, Fn, Kleisli, Up

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')
S = TypeVar('S')
T = TypeVar('T')
X = TypeVar('X')
Y = TypeVar('Y')

class Procompose(Strong[D, C], Choice[D, C], Closed[D, C], Representable[D, C], Corepresentable[D, C]):
    def __init__(self, p: Profunctor[X, C], q: Profunctor[D, X]):
        self.p = p
        self.q = q

    def __repr__(self):
        return f"Procompose({self.p!r}, {self.q!r})"

    def dimap(self, l: Callable[[A], D], r: Callable[[C], B]) -> 'Procompose[A, B]':
        return Procompose(self.p.rmap(r), self.q.lmap(l))

    def lmap(self, l: Callable[[A], D]) -> 'Procompose[A, C]':
        return Procompose(self.p, self.q.lmap(l))

    def rmap(self, r: Callable[[C], B]) -> 'Procompose[D, B]':
        return Procompose(self.p.rmap(r), self.q)

    def fmap(self, r: Callable[[C], B]) -> 'Procompose[D, B]':
        return self.rmap(r)

    def promap(self, nat: Callable[[Profunctor], Profunctor]) -> 'Procompose[D, C]':
        return Procompose(self.p, nat(self.q))

    @staticmethod
    def proreturn(q: Profunctor[D, C], unit: Category) -> 'Procompose[D, C]':
        """Pair ``q`` with ``unit``, the identity arrow of the outer category."""
        return Procompose(unit, q)

    def projoin(self) -> 'Procompose[D, C]':
        inner = require(self.q, Procompose)
        return Procompose(require(self.p, Category).compose(inner.p), inner.q)

    def first(self) -> 'Procompose':
        return Procompose(require(self.p, Strong).first(), require(self.q, Strong).first())

    def second(self) -> 'Procompose':
        return Procompose(require(self.p, Strong).second(), require(self.q, Strong).second())

    def left(self) -> 'Procompose':
        return Procompose(require(self.p, Choice).left(), require(self.q, Choice).left())

    def right(self) -> 'Procompose':
        return Procompose(require(self.p, Choice).right(), require(self.q, Choice).right())

    def closed(self) -> 'Procompose':
        return Procompose(closed(self.p), closed(self.q))

    def sieve(self, d: D) -> Compose:
        g = require(self.p, Representable)
        return Compose(require(self.q, Representable).sieve(d).fmap(g.sieve))

    def cosieve(self, fd: Compose) -> C:
        f = require(self.q, Corepresentable)
        return require(self.p, Corepresentable).cosieve(fd.get_compose().fmap(f.cosieve))

    @staticmethod
    def tabulate(f: Callable[[D], Compose], outer: Optional[type] = None,
                 inner: Optional[type] = None) -> 'Procompose':
        return Procompose(Down(identity, inner), Down(lambda d: f(d).get_compose(), outer))

    @staticmethod
    def cotabulate(f: Callable[[Compose], C]) -> 'Procompose':
        return Procompose(Up(lambda d: f(Compose(d))), Up(identity))

def procomposed(pc: Procompose[A, B]) -> Profunctor[A, B]:
    return require(pc.p, Category).compose(pc.q)

class Iso(Generic[S, T, A, B]):
    """An isomorphism used as a profunctor optic: ``iso(p)`` turns ``p a b`` into ``p s t``."""

    def __init__(self, hither: Callable[[S], A], yon: Callable[[B], T]):
        self.hither = hither
        self.yon = yon

    def __call__(self, p: Profunctor[A, B]) -> Profunctor[S, T]:
        return require(p, Profunctor).dimap(self.hither, self.yon)

    def view(self, s: S) -> A:
        return self.hither(s)

    def review(self, b: B) -> T:
        return self.yon(b)

    def inverse(self) -> 'Iso[B, A, T, S]':
        return Iso(self.yon, self.hither)

idl = Iso(lambda pc: pc.q.rmap(pc.p), lambda q: Procompose(Fn(identity), q))

idr = Iso(lambda pc: pc.p.lmap(pc.q), lambda q: Procompose(q, Fn(identity)))

assoc = Iso(lambda pc: Procompose(Procompose(pc.p, pc.q.p), pc.q.q),
            lambda pc: Procompose(pc.p.p, Procompose(pc.p.q, pc.q)))

def _downs_hither(pc: Procompose) -> Down:
    xgc, dfx = pc.p, pc.q
    return Down(lambda d: Compose(dfx.run(d).fmap(xgc.run)), Compose.over(dfx.functor, xgc.functor))

def _downs_yon(down: Down) -> Procompose:
    composite = down.functor
    return Procompose(Down(identity, getattr(composite, 'inner', None)),
                      Down(lambda d: down.run(d).get_compose(), getattr(composite, 'outer', None)))

downs = Iso(_downs_hither, _downs_yon)

def _ups_hither(pc: Procompose) -> Up:
    gxc, fdx = pc.p, pc.q
    return Up(lambda c: gxc.run(c.get_compose().fmap(fdx.run)))

def _ups_yon(up: Up) -> Procompose:
    return Procompose(Up(lambda gx: up.run(Compose(gx))), Up(identity))

ups = Iso(_ups_hither, _ups_yon)

def _kleislis_hither(pc: Procompose) -> Kleisli:
    xgc, dfx = pc.p, pc.q
    return Kleisli(lambda d: Compose(dfx.run(d).fmap(xgc.run)), Compose.over(dfx.monad, xgc.monad))

def _kleislis_yon(k: Kleisli) -> Procompose:
    composite = k.monad
    return Procompose(Kleisli(identity, getattr(composite, 'inner', None)),
                      Kleisli(lambda d: k.run(d).get_compose(), getattr(composite, 'outer', None)))

kleislis = Iso(_kleislis_hither, _kleislis_yon)

def _cokleislis_hither(pc: Procompose) -> Cokleisli:
    gxc, fdx = pc.p, pc.q
    return Cokleisli(lambda c: gxc.run(c.get_compose().fmap(fdx.run)))

def _cokleislis_yon(ck: Cokleisli) -> Procompose:
    return Procompose(Cokleisli(lambda gx: ck.run(Compose(gx))), Cokleisli(identity))

cokleislis = Iso(_cokleislis_hither, _cokleislis_yon)
