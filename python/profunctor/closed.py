"""Closed profunctors, the Closure comonad and the Environment monad.

A strong profunctor lets products pass through it; a closed one lets
function spaces pass through it:

    closed :: p a b -> p (x -> a) (x -> b)

``Closure`` adjoins a closed structure to any profunctor and
``Environment`` is its left adjoint.
"""
import logging
from typing import Callable, Tuple, TypeVar

from profunctor.core import (Arrow, Category, CapabilityError, Profunctor, compose, const,
                             curry, first, require, uncurry)

logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
S = TypeVar('S')
X = TypeVar('X')
Y = TypeVar('Y')
Z = TypeVar('Z')

class Closed(Profunctor[A, B]):
    def closed(self) -> 'Closed[Callable[[X], A], Callable[[X], B]]':
        raise NotImplementedError

def closed(p: Closed[A, B]) -> Closed[Callable[[X], A], Callable[[X], B]]:
    return require(p, Closed).closed()

def hither(h: Callable[[S], Tuple[A, B]]) -> Tuple[Callable[[S], A], Callable[[S], B]]:
    return (lambda s: h(s)[0]), (lambda s: h(s)[1])

def yon(h: Tuple[Callable[[S], A], Callable[[S], B]]) -> Callable[[S], Tuple[A, B]]:
    return lambda s: (h[0](s), h[1](s))

class Closure(Closed[A, B], Arrow[A, B]):
    """Holds a ``p (x -> a) (x -> b)`` that must work for every ``x``."""

    def __init__(self, run_closure: Profunctor):
        self.run_closure = run_closure

    def dimap(self, f: Callable[[C], A], g: Callable[[B], Y]) -> 'Closure[C, Y]':
        return Closure(self.run_closure.dimap(lambda xc: compose(f, xc), lambda xb: compose(g, xb)))

    def lmap(self, f: Callable[[C], A]) -> 'Closure[C, B]':
        return Closure(self.run_closure.lmap(lambda xc: compose(f, xc)))

    def rmap(self, g: Callable[[B], Y]) -> 'Closure[A, Y]':
        return Closure(self.run_closure.rmap(lambda xb: compose(g, xb)))

    def fmap(self, g: Callable[[B], Y]) -> 'Closure[A, Y]':
        return self.rmap(g)

    def promap(self, nat: Callable[[Profunctor], Profunctor]) -> 'Closure[A, B]':
        return Closure(nat(self.run_closure))

    def proextract(self) -> Profunctor:
        return self.run_closure.dimap(const, lambda xb: xb(()))

    def produplicate(self) -> 'Closure':
        return Closure(Closure(self.run_closure.dimap(uncurry, curry)))

    def closed(self) -> 'Closure':
        return self.produplicate().run_closure

    def first(self) -> 'Closure':
        return Closure(first(self.run_closure).dimap(hither, yon))

    def compose(self, other: 'Closure[C, A]') -> 'Closure[C, B]':
        return Closure(require(self.run_closure, Category).compose(require(other, Closure).run_closure))

    def identity(self) -> 'Closure[B, B]':
        return Closure(require(self.run_closure, Category).identity())

    def arr(self, f: Callable[[C], Y]) -> 'Closure[C, Y]':
        return Closure(require(self.run_closure, Arrow).arr(lambda xc: compose(f, xc)))

    def pure(self, b: Y) -> 'Closure[A, Y]':
        return self.arr(const(b))

    def ap(self, other: 'Closure[A, C]') -> 'Closure[A, Y]':
        return self.fanout(other).then(self.arr(lambda fa: fa[0](fa[1])))

def close(f: Callable[[Profunctor], Profunctor]) -> Callable[[Closed], Closure]:
    """Turn ``p :-> q`` into ``p :-> Closure q``; inverse to ``unclose``."""
    return lambda p: Closure(f(closed(p)))

def unclose(f: Callable[[Profunctor], Closure]) -> Callable[[Profunctor], Profunctor]:
    """Turn ``p :-> Closure q`` into ``p :-> q``; inverse to ``close``."""
    return lambda p: require(f(p), Closure).proextract()

class Environment(Closed[A, B]):
    """``Environment(out, mid, inp)`` with ``out: (z -> y) -> b``,
    ``mid: p x y`` and ``inp: a -> z -> x`` for hidden ``x``, ``y``, ``z``.
    """

    def __init__(self, out: Callable[[Callable[[Z], Y]], B], mid: Profunctor[X, Y],
                 inp: Callable[[A], Callable[[Z], X]]):
        self.out = out
        self.mid = mid
        self.inp = inp

    def dimap(self, f: Callable[[C], A], g: Callable[[B], Y]) -> 'Environment[C, Y]':
        return Environment(compose(g, self.out), self.mid, compose(self.inp, f))

    def lmap(self, f: Callable[[C], A]) -> 'Environment[C, B]':
        return Environment(self.out, self.mid, compose(self.inp, f))

    def rmap(self, g: Callable[[B], Y]) -> 'Environment[A, Y]':
        return Environment(compose(g, self.out), self.mid, self.inp)

    def promap(self, nat: Callable[[Profunctor], Profunctor]) -> 'Environment[A, B]':
        return Environment(self.out, nat(self.mid), self.inp)

    @staticmethod
    def proreturn(p: Profunctor[A, B]) -> 'Environment[A, B]':
        return Environment(lambda zb: zb(()), p, const)

    def projoin(self) -> 'Environment[A, B]':
        inner = require(self.mid, Environment)
        def out(zr):
            return self.out(compose(inner.out, curry(zr)))
        def inp(a):
            return lambda zz: inner.inp(self.inp(a)(zz[0]))(zz[1])
        return Environment(out, inner.mid, inp)

    def closed(self) -> 'Environment':
        def out(zwy):
            return lambda w: self.out(lambda z: zwy((z, w)))
        def inp(wa):
            return lambda zw: self.inp(wa(zw[1]))(zw[0])
        return Environment(out, self.mid, inp)

def lower_environment(env: Environment[A, B]) -> Callable[[A], B]:
    """Run an environment whose middle is an ordinary function."""
    if not callable(env.mid):
        logger.debug("environment middle %r is not callable", env.mid)
        raise CapabilityError('Callable', env.mid, 'lower_environment needs a function-valued middle')
    return lambda a: env.out(lambda z: env.mid(env.inp(a)(z)))

def environment_counit(env: Environment[A, B]) -> Profunctor[A, B]:
    p = require(env.mid, Closure).run_closure
    return p.dimap(env.inp, env.out)

def closure_unit(p: Profunctor[A, B]) -> Closure[A, B]:
    return Closure(Environment(lambda xb: xb, p, lambda xa: xa))
