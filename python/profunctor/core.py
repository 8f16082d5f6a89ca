import logging
from typing import Any, Callable, Generic, Tuple, TypeVar

logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')
X = TypeVar('X')
Y = TypeVar('Y')

class CapabilityError(TypeError):
    def __init__(self, capability: str, value: Any, detail: str = ''):
        self.capability = capability
        self.value = value
        message = f"{type(value).__name__} has no {capability} instance"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

def require(value, capability: type, detail: str = ''):
    if not isinstance(value, capability):
        logger.debug("capability %s missing on %r", capability.__name__, value)
        raise CapabilityError(capability.__name__, value, detail)
    return value

def identity(x: A) -> A:
    return x

def compose(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    return lambda x: f(g(x))

def const(a: A) -> Callable[[Any], A]:
    return lambda _: a

def curry(f: Callable[[Tuple[A, B]], C]) -> Callable[[A], Callable[[B], C]]:
    return lambda a: lambda b: f((a, b))

def uncurry(f: Callable[[A], Callable[[B], C]]) -> Callable[[Tuple[A, B]], C]:
    return lambda ab: f(ab[0])(ab[1])

def swap(ab: Tuple[A, B]) -> Tuple[B, A]:
    return ab[1], ab[0]

def dup(a: A) -> Tuple[A, A]:
    return a, a

class Left(Generic[A]):
    def __init__(self, value: A):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Left) and self.value == other.value

    def __repr__(self):
        return f"Left({self.value!r})"

class Right(Generic[B]):
    def __init__(self, value: B):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Right) and self.value == other.value

    def __repr__(self):
        return f"Right({self.value!r})"

class Profunctor(Generic[A, B]):
    """Contravariant in the input, covariant in the output.

    Subclasses override ``dimap`` or both ``lmap`` and ``rmap``:

        p.dimap(identity, identity) == p
        p.dimap(f1, g1).dimap(f2, g2) == p.dimap(compose(f1, f2), compose(g2, g1))
    """

    def dimap(self, f: Callable[[X], A], g: Callable[[B], Y]) -> 'Profunctor[X, Y]':
        return self.lmap(f).rmap(g)

    def lmap(self, f: Callable[[X], A]) -> 'Profunctor[X, B]':
        return self.dimap(f, identity)

    def rmap(self, g: Callable[[B], Y]) -> 'Profunctor[A, Y]':
        return self.dimap(identity, g)

class Strong(Profunctor[A, B]):
    def first(self) -> 'Strong[Tuple[A, C], Tuple[B, C]]':
        raise NotImplementedError

    def second(self) -> 'Strong[Tuple[C, A], Tuple[C, B]]':
        return self.first().dimap(swap, swap)

class Choice(Profunctor[A, B]):
    def left(self) -> 'Choice':
        raise NotImplementedError

    def right(self) -> 'Choice':
        return self.left().dimap(mirror, mirror)

def mirror(e):
    return Right(e.value) if isinstance(e, Left) else Left(e.value)

class Category(Generic[A, B]):
    def compose(self, other: 'Category[C, A]') -> 'Category[C, B]':
        raise NotImplementedError

    def then(self, other: 'Category[B, C]') -> 'Category[A, C]':
        return other.compose(self)

    def identity(self) -> 'Category[B, B]':
        """An identity arrow of the same category as ``self``."""
        raise NotImplementedError

class Arrow(Category[A, B], Strong[A, B]):
    def arr(self, f: Callable[[C], D]) -> 'Arrow[C, D]':
        raise NotImplementedError

    def split(self, other: 'Arrow[C, D]') -> 'Arrow[Tuple[A, C], Tuple[B, D]]':
        return self.first().then(other.second())

    def fanout(self, other: 'Arrow[A, C]') -> 'Arrow[A, Tuple[B, C]]':
        return self.arr(dup).then(self.split(other))

class Representable(Profunctor[A, B]):
    def sieve(self, a: A):
        raise NotImplementedError

class Corepresentable(Profunctor[A, B]):
    def cosieve(self, fa):
        raise NotImplementedError

def dimap(f: Callable[[X], A], g: Callable[[B], Y], p: Profunctor[A, B]) -> Profunctor[X, Y]:
    return require(p, Profunctor).dimap(f, g)

def lmap(f: Callable[[X], A], p: Profunctor[A, B]) -> Profunctor[X, B]:
    return require(p, Profunctor).lmap(f)

def rmap(g: Callable[[B], Y], p: Profunctor[A, B]) -> Profunctor[A, Y]:
    return require(p, Profunctor).rmap(g)

def first(p: Strong[A, B]) -> Strong:
    return require(p, Strong).first()

def second(p: Strong[A, B]) -> Strong:
    return require(p, Strong).second()

def left(p: Choice[A, B]) -> Choice:
    return require(p, Choice).left()

def right(p: Choice[A, B]) -> Choice:
    return require(p, Choice).right()
