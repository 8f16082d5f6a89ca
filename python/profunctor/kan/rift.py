"""Right Kan lift of a profunctor ``q`` along a profunctor ``p``.

Lives in the bicategory whose 1-morphisms are profunctors (composed with
``Procompose``) and whose 2-morphisms are natural transformations.
``Procompose(p, _)`` is left adjoint to ``Rift(p, _)``.
"""
from typing import Callable, TypeVar

from profunctor.composition import Procompose
from profunctor.core import Category, Profunctor, compose, require

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')
X = TypeVar('X')

class Rift(Category[A, B], Profunctor[A, B]):
    def __init__(self, run_rift: Callable[[Profunctor], Profunctor]):
        self.run_rift = run_rift

    def __call__(self, p: Profunctor[B, X]) -> Profunctor[A, X]:
        return self.run_rift(p)

    def dimap(self, ca: Callable[[C], A], bd: Callable[[B], D]) -> 'Rift[C, D]':
        return Rift(lambda p: self.run_rift(p.lmap(bd)).lmap(ca))

    def lmap(self, ca: Callable[[C], A]) -> 'Rift[C, B]':
        return Rift(lambda p: self.run_rift(p).lmap(ca))

    def rmap(self, bd: Callable[[B], D]) -> 'Rift[A, D]':
        return Rift(lambda p: self.run_rift(p.lmap(bd)))

    def fmap(self, bd: Callable[[B], D]) -> 'Rift[A, D]':
        return self.rmap(bd)

    def promap(self, nat: Callable[[Profunctor], Profunctor]) -> 'Rift[A, B]':
        return Rift(compose(nat, self.run_rift))

    def proextract(self, unit: Category) -> Profunctor[A, B]:
        """Feed ``unit``, the identity arrow of ``p``'s category."""
        return self.run_rift(unit)

    def produplicate(self) -> 'Rift':
        return Rift(lambda p: Rift(lambda q: self.run_rift(require(q, Category).compose(p))))

    def compose(self, other: 'Rift[C, A]') -> 'Rift[C, B]':
        """``Rift(p, p)`` is a category; ``other`` runs after ``self``."""
        return Rift(lambda p: other.run_rift(self.run_rift(p)))

    def identity(self) -> 'Rift[B, B]':
        return Rift(lambda p: p)

def decompose_rift(pc: Procompose[A, B]) -> Profunctor[A, B]:
    return require(pc.q, Rift).run_rift(pc.p)

rift_counit = decompose_rift

def rift_unit(q: Profunctor[A, B]) -> Rift:
    return Rift(lambda p: Procompose(p, q))
