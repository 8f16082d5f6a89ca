from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, Optional, Tuple, TypeVar

A = TypeVar('A')
B = TypeVar('B')
E = TypeVar('E')
X = TypeVar('X')

class Functor(Generic[A]):
    def fmap(self, f: Callable[[A], B]) -> 'Functor[B]':
        raise NotImplementedError

class Monad(Functor[A]):
    @classmethod
    def pure(cls, a: A) -> 'Monad[A]':
        raise NotImplementedError

    def bind(self, f: Callable[[A], 'Monad[B]']) -> 'Monad[B]':
        raise NotImplementedError

    def fmap(self, f: Callable[[A], B]) -> 'Monad[B]':
        return self.bind(lambda a: self.pure(f(a)))

class Distributive(Functor[A]):
    @classmethod
    def distribute(cls, g: Callable[[X], 'Distributive[A]']) -> 'Distributive[Callable[[X], A]]':
        """Push the reader functor ``X ->`` inside: ``(X -> f a) -> f (X -> a)``."""
        raise NotImplementedError

@dataclass(frozen=True)
class Identity(Monad[A], Distributive[A]):
    value: A

    def fmap(self, f: Callable[[A], B]) -> 'Identity[B]':
        return Identity(f(self.value))

    @classmethod
    def pure(cls, a: A) -> 'Identity[A]':
        return Identity(a)

    def bind(self, f: Callable[[A], 'Identity[B]']) -> 'Identity[B]':
        return f(self.value)

    @classmethod
    def distribute(cls, g: Callable[[X], 'Identity[A]']) -> 'Identity[Callable[[X], A]]':
        return Identity(lambda x: g(x).value)

class Maybe(Monad[A]):
    @classmethod
    def pure(cls, a: A) -> 'Maybe[A]':
        return Just(a)

@dataclass(frozen=True)
class Just(Maybe[A]):
    value: A

    def bind(self, f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return f(self.value)

@dataclass(frozen=True)
class Nothing(Maybe[A]):
    def bind(self, f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return self

@dataclass(frozen=True)
class ListF(Monad[A]):
    items: Tuple[A, ...] = ()

    def fmap(self, f: Callable[[A], B]) -> 'ListF[B]':
        return ListF(tuple(f(a) for a in self.items))

    @classmethod
    def pure(cls, a: A) -> 'ListF[A]':
        return ListF((a,))

    def bind(self, f: Callable[[A], 'ListF[B]']) -> 'ListF[B]':
        return ListF(tuple(b for a in self.items for b in f(a).items))

@dataclass(frozen=True)
class Pair(Monad[A], Distributive[A]):
    """Two-slot container; its monad takes the diagonal."""
    fst: A
    snd: A

    def fmap(self, f: Callable[[A], B]) -> 'Pair[B]':
        return Pair(f(self.fst), f(self.snd))

    @classmethod
    def pure(cls, a: A) -> 'Pair[A]':
        return Pair(a, a)

    def bind(self, f: Callable[[A], 'Pair[B]']) -> 'Pair[B]':
        return Pair(f(self.fst).fst, f(self.snd).snd)

    @classmethod
    def distribute(cls, g: Callable[[X], 'Pair[A]']) -> 'Pair[Callable[[X], A]]':
        return Pair(lambda x: g(x).fst, lambda x: g(x).snd)

class Reader(Monad[A], Distributive[A]):
    def __init__(self, run: Callable[[E], A]):
        self.run = run

    def __call__(self, e: E) -> A:
        return self.run(e)

    def fmap(self, f: Callable[[A], B]) -> 'Reader[B]':
        return Reader(lambda e: f(self.run(e)))

    @classmethod
    def pure(cls, a: A) -> 'Reader[A]':
        return Reader(lambda _: a)

    def bind(self, f: Callable[[A], 'Reader[B]']) -> 'Reader[B]':
        return Reader(lambda e: f(self.run(e)).run(e))

    @classmethod
    def distribute(cls, g: Callable[[X], 'Reader[A]']) -> 'Reader[Callable[[X], A]]':
        return Reader(lambda e: lambda x: g(x).run(e))

@dataclass(frozen=True)
class Compose(Functor[A]):
    """An ``f (g a)`` value seen as a single functor.

    Values are plain ``Compose`` instances. ``Compose.over(f, g)`` names
    the class of ``f (g a)`` for ``Down``/``Kleisli`` values that need
    to know it; ``outer`` and ``inner`` are only set on such classes.
    """
    value: Any
    outer: ClassVar[Optional[type]] = None
    inner: ClassVar[Optional[type]] = None

    def fmap(self, f: Callable[[A], B]) -> 'Compose[B]':
        return Compose(self.value.fmap(lambda ga: ga.fmap(f)))

    def get_compose(self):
        return self.value

    @classmethod
    def over(cls, outer: Optional[type], inner: Optional[type]) -> type:
        distributive = all(isinstance(t, type) and issubclass(t, Distributive) for t in (outer, inner))
        base = DistributiveCompose if distributive else Compose
        name = f"Compose[{getattr(outer, '__name__', outer)}, {getattr(inner, '__name__', inner)}]"
        return type(name, (base,), {'outer': outer, 'inner': inner})

class DistributiveCompose(Compose[A], Distributive[A]):
    @classmethod
    def distribute(cls, g: Callable[[X], Compose]) -> Compose:
        return Compose(cls.outer.distribute(lambda x: g(x).get_compose()).fmap(cls.inner.distribute))
