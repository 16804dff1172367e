"""Capability abstractions (type classes).

Python has no higher-kinded types, so a type class is an object that
carries the operations for one container family. Containers themselves
stay plain values: a pair is a ``tuple``, a reader is a ``callable``.
Instances are passed explicitly wherever they are needed.

Each class documents the minimal set of methods an instance must define.
Everything else is derived here in terms of that minimal set.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from . import either

M = TypeVar("M")

Fn = Callable[[Any], Any]


def identity(a: Any) -> Any:
    return a


# ---------------------------------------------------------------------------
# Functor family
# ---------------------------------------------------------------------------


class Functor(ABC):
    """Minimal: ``map``."""

    @abstractmethod
    def map(self, fa: Any, f: Fn) -> Any: ...

    def compose(self, inner: Functor) -> Functor:
        """Functor for ``F[G[_]]``, mapping through both layers."""
        return ComposedFunctor(self, inner)


class ComposedFunctor(Functor):
    def __init__(self, outer: Functor, inner: Functor) -> None:
        self.outer = outer
        self.inner = inner

    def map(self, fga: Any, f: Fn) -> Any:
        return self.outer.map(fga, lambda ga: self.inner.map(ga, f))

    def __repr__(self) -> str:
        return f"ComposedFunctor({self.outer!r}, {self.inner!r})"


class Monad(Functor):
    """Minimal: ``pure``, ``flat_map``, ``tail_rec_m``.

    ``tail_rec_m(a, f)`` repeatedly applies ``f : A -> F[Either[A, B]]``
    until it produces a ``Right``. Instances must run it in constant stack.
    """

    @abstractmethod
    def pure(self, a: Any) -> Any: ...

    @abstractmethod
    def flat_map(self, fa: Any, f: Fn) -> Any: ...

    @abstractmethod
    def tail_rec_m(self, a: Any, f: Fn) -> Any: ...

    def map(self, fa: Any, f: Fn) -> Any:
        return self.flat_map(fa, lambda a: self.pure(f(a)))

    def flatten(self, ffa: Any) -> Any:
        return self.flat_map(ffa, identity)


class Comonad(Functor):
    """Minimal: ``extract``, ``coflat_map``, ``map``."""

    @abstractmethod
    def extract(self, fa: Any) -> Any: ...

    @abstractmethod
    def coflat_map(self, fa: Any, f: Fn) -> Any: ...

    def coflatten(self, fa: Any) -> Any:
        return self.coflat_map(fa, identity)


class Bimonad(Monad, Comonad):
    """Both a Monad and a Comonad over the same container."""


class Distributive(Functor):
    """Minimal: ``distribute``, ``map``.

    ``distribute(ga, f, G)`` turns ``G[A]`` and ``f : A -> F[B]`` into
    ``F[G[B]]``, where ``G`` is the Functor for the outer container.
    """

    @abstractmethod
    def distribute(self, ga: Any, f: Fn, G: Functor) -> Any: ...

    def cosequence(self, gfa: Any, G: Functor) -> Any:
        return self.distribute(gfa, identity, G)


class Monoid(ABC, Generic[M]):
    """An identity element and an associative binary operation."""

    @property
    @abstractmethod
    def empty(self) -> M: ...

    @abstractmethod
    def combine(self, x: M, y: M) -> M: ...


class ProductMonoid(Monoid[tuple[Any, Any]]):
    """Monoid on pairs, combining each component with its own monoid."""

    def __init__(self, first: Monoid[Any], second: Monoid[Any]) -> None:
        self.first = first
        self.second = second

    @property
    def empty(self) -> tuple[Any, Any]:
        return (self.first.empty, self.second.empty)

    def combine(self, x: tuple[Any, Any], y: tuple[Any, Any]) -> tuple[Any, Any]:
        return (self.first.combine(x[0], y[0]), self.second.combine(x[1], y[1]))

    def __repr__(self) -> str:
        return f"ProductMonoid({self.first!r}, {self.second!r})"


# ---------------------------------------------------------------------------
# Arrow family (two-parameter containers F[A, B])
# ---------------------------------------------------------------------------


class Compose(ABC):
    """Minimal: ``compose``. ``compose(f, g)`` runs g first, then f."""

    @abstractmethod
    def compose(self, f: Any, g: Any) -> Any: ...

    def and_then(self, f: Any, g: Any) -> Any:
        """``f >>> g``: run f first, then g."""
        return self.compose(g, f)


class Category(Compose):
    """Minimal: ``compose``, ``id``."""

    @abstractmethod
    def id(self) -> Any: ...


class Profunctor(ABC):
    """Minimal: ``dimap``."""

    @abstractmethod
    def dimap(self, fab: Any, f: Fn, g: Fn) -> Any: ...

    def lmap(self, fab: Any, f: Fn) -> Any:
        return self.dimap(fab, f, identity)

    def rmap(self, fab: Any, g: Fn) -> Any:
        return self.dimap(fab, identity, g)


def _swap_pair(p: tuple[Any, Any]) -> tuple[Any, Any]:
    return (p[1], p[0])


class Strong(Profunctor):
    """Minimal: ``dimap``, ``first``.

    ``first(fab)`` : ``F[(A, C), (B, C)]``, ``second(fab)`` : ``F[(C, A), (C, B)]``.
    """

    @abstractmethod
    def first(self, fab: Any) -> Any: ...

    def second(self, fab: Any) -> Any:
        return self.dimap(self.first(fab), _swap_pair, _swap_pair)


class Arrow(Category, Strong):
    """Minimal: ``lift``, ``compose``, ``first``.

    ``id`` and ``dimap`` come from lifting plain functions.
    """

    @abstractmethod
    def lift(self, f: Fn) -> Any: ...

    def id(self) -> Any:
        return self.lift(identity)

    def dimap(self, fab: Any, f: Fn, g: Fn) -> Any:
        return self.and_then(self.and_then(self.lift(f), fab), self.lift(g))

    def split(self, f: Any, g: Any) -> Any:
        """``f *** g`` : ``F[(A, C), (B, D)]``."""
        return self.and_then(self.first(f), self.second(g))

    def merge(self, f: Any, g: Any) -> Any:
        """``f &&& g`` : ``F[A, (B, C)]``."""
        return self.and_then(self.lift(lambda a: (a, a)), self.split(f, g))


class Choice(Category):
    """Minimal: ``choice``, ``compose``, ``id``.

    ``choice(f, g)`` : ``F[Either[A, B], C]`` given ``F[A, C]`` and ``F[B, C]``.
    """

    @abstractmethod
    def choice(self, f: Any, g: Any) -> Any: ...

    def codiagonal(self) -> Any:
        return self.choice(self.id(), self.id())


class ArrowChoice(Arrow, Choice):
    """Minimal: ``lift``, ``compose``, ``first``, ``choose``.

    ``choose(f, g)`` : ``F[Either[A, C], Either[B, D]]`` given ``F[A, B]``
    and ``F[C, D]``.
    """

    @abstractmethod
    def choose(self, f: Any, g: Any) -> Any: ...

    def left(self, fab: Any) -> Any:
        return self.choose(fab, self.id())

    def right(self, fab: Any) -> Any:
        return self.choose(self.id(), fab)

    def choice(self, f: Any, g: Any) -> Any:
        return self.and_then(self.choose(f, g), self.lift(either.merge))

