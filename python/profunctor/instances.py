import logging
from typing import Callable, Optional, Tuple, TypeVar

from profunctor.closed import Closed
from profunctor.core import (Arrow, CapabilityError, Choice, Corepresentable, Left, Representable,
                             Right, Strong, compose, const, identity)
from profunctor.functors import Distributive, Functor, Monad

logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
R = TypeVar('R')
X = TypeVar('X')
Y = TypeVar('Y')

class Fn(Arrow[A, B], Choice[A, B], Closed[A, B]):
    def __init__(self, run: Callable[[A], B]):
        self.run = run

    def __call__(self, a: A) -> B:
        return self.run(a)

    def dimap(self, f: Callable[[X], A], g: Callable[[B], Y]) -> 'Fn[X, Y]':
        return Fn(lambda x: g(self.run(f(x))))

    def closed(self) -> 'Fn[Callable[[X], A], Callable[[X], B]]':
        return Fn(lambda xa: compose(self.run, xa))

    def first(self) -> 'Fn[Tuple[A, C], Tuple[B, C]]':
        return Fn(lambda ac: (self.run(ac[0]), ac[1]))

    def left(self) -> 'Fn':
        return Fn(lambda e: Left(self.run(e.value)) if isinstance(e, Left) else e)

    def compose(self, other: 'Fn[C, A]') -> 'Fn[C, B]':
        return Fn(compose(self.run, other.run))

    def identity(self) -> 'Fn[B, B]':
        return Fn(identity)

    def arr(self, f: Callable[[C], Y]) -> 'Fn[C, Y]':
        return Fn(f)

class Tagged(Choice[A, B], Closed[A, B]):
    """A profunctor that ignores its input entirely."""

    def __init__(self, value: B):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Tagged) and self.value == other.value

    def __repr__(self):
        return f"Tagged({self.value!r})"

    def dimap(self, f: Callable[[X], A], g: Callable[[B], Y]) -> 'Tagged[X, Y]':
        return Tagged(g(self.value))

    def closed(self) -> 'Tagged':
        return Tagged(const(self.value))

    def left(self) -> 'Tagged':
        return Tagged(Left(self.value))

    def right(self) -> 'Tagged':
        return Tagged(Right(self.value))

class Forget(Strong[A, B]):
    def __init__(self, run: Callable[[A], R]):
        self.run = run

    def dimap(self, f: Callable[[X], A], g: Callable[[B], Y]) -> 'Forget[X, Y]':
        return Forget(compose(self.run, f))

    def first(self) -> 'Forget':
        return Forget(lambda ac: self.run(ac[0]))

class Up(Closed[A, B], Corepresentable[A, B]):
    """``f a -> b`` for a functor ``f``."""

    def __init__(self, run: Callable[[Functor], B]):
        self.run = run

    def dimap(self, f: Callable[[X], A], g: Callable[[B], Y]) -> 'Up[X, Y]':
        return Up(lambda fx: g(self.run(fx.fmap(f))))

    def closed(self) -> 'Up':
        return Up(lambda fxa: lambda x: self.run(fxa.fmap(lambda xa: xa(x))))

    def cosieve(self, fa: Functor) -> B:
        return self.run(fa)

    @staticmethod
    def cotabulate(f: Callable[[Functor], B]) -> 'Up':
        return Up(f)

class Cokleisli(Closed[A, B], Corepresentable[A, B]):
    """``w a -> b`` for a functor ``w``."""

    def __init__(self, run: Callable[[Functor], B]):
        self.run = run

    def dimap(self, f: Callable[[X], A], g: Callable[[B], Y]) -> 'Cokleisli[X, Y]':
        return Cokleisli(lambda wx: g(self.run(wx.fmap(f))))

    def closed(self) -> 'Cokleisli':
        return Cokleisli(lambda wxa: lambda x: self.run(wxa.fmap(lambda xa: xa(x))))

    def cosieve(self, wa: Functor) -> B:
        return self.run(wa)

    @staticmethod
    def cotabulate(f: Callable[[Functor], B]) -> 'Cokleisli':
        return Cokleisli(f)

def functor_class(p, functor: Optional[type], capability: type) -> type:
    if not (isinstance(functor, type) and issubclass(functor, capability)):
        name = getattr(functor, '__name__', repr(functor))
        logger.debug("%s carries %s, which is not %s", type(p).__name__, name, capability.__name__)
        raise CapabilityError(capability.__name__, p, f"functor {name} is not {capability.__name__}")
    return functor

class Down(Strong[A, B], Choice[A, B], Closed[A, B], Representable[A, B]):
    """``a -> f b``; ``functor`` is the class of ``f`` for the instances that need it."""

    def __init__(self, run: Callable[[A], Functor], functor: Optional[type] = None):
        self.run = run
        self.functor = functor

    def dimap(self, f: Callable[[X], A], g: Callable[[B], Y]) -> 'Down[X, Y]':
        return Down(lambda x: self.run(f(x)).fmap(g), self.functor)

    def closed(self) -> 'Down':
        f = functor_class(self, self.functor, Distributive)
        return Down(lambda xa: f.distribute(lambda x: self.run(xa(x))), self.functor)

    def first(self) -> 'Down':
        return Down(lambda ac: self.run(ac[0]).fmap(lambda b: (b, ac[1])), self.functor)

    def left(self) -> 'Down':
        m = functor_class(self, self.functor, Monad)
        def run(e):
            if isinstance(e, Left):
                return self.run(e.value).fmap(Left)
            return m.pure(e)
        return Down(run, self.functor)

    def sieve(self, a: A) -> Functor:
        return self.run(a)

    @staticmethod
    def tabulate(f: Callable[[A], Functor], functor: Optional[type] = None) -> 'Down':
        return Down(f, functor)

class Kleisli(Arrow[A, B], Choice[A, B], Closed[A, B], Representable[A, B]):
    """``a -> m b`` for a monad ``m``; ``monad`` is the class of ``m``."""

    def __init__(self, run: Callable[[A], Monad], monad: Optional[type] = None):
        self.run = run
        self.monad = monad

    def dimap(self, f: Callable[[X], A], g: Callable[[B], Y]) -> 'Kleisli[X, Y]':
        return Kleisli(lambda x: self.run(f(x)).fmap(g), self.monad)

    def closed(self) -> 'Kleisli':
        functor_class(self, self.monad, Monad)
        f = functor_class(self, self.monad, Distributive)
        return Kleisli(lambda xa: f.distribute(lambda x: self.run(xa(x))), self.monad)

    def first(self) -> 'Kleisli':
        return Kleisli(lambda ac: self.run(ac[0]).fmap(lambda b: (b, ac[1])), self.monad)

    def left(self) -> 'Kleisli':
        m = functor_class(self, self.monad, Monad)
        def run(e):
            if isinstance(e, Left):
                return self.run(e.value).fmap(Left)
            return m.pure(e)
        return Kleisli(run, self.monad)

    def compose(self, other: 'Kleisli[C, A]') -> 'Kleisli[C, B]':
        return Kleisli(lambda c: other.run(c).bind(self.run), self.monad or other.monad)

    def identity(self) -> 'Kleisli[B, B]':
        return Kleisli(functor_class(self, self.monad, Monad).pure, self.monad)

    def arr(self, f: Callable[[C], Y]) -> 'Kleisli[C, Y]':
        return Kleisli(compose(functor_class(self, self.monad, Monad).pure, f), self.monad)

    def sieve(self, a: A) -> Monad:
        return self.run(a)
