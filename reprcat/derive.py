"""Capabilities derived from a Representable witness.

Each derived instance is a thin object closing over the witness (and,
for Bimonad, a Monoid on the representation). No validation happens
here: a witness that breaks the representable laws yields instances that
break their own laws, and only the law suites will notice.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .either import Left, Right
from .representable import Representable
from .typeclasses import Bimonad, Distributive, Functor, Monad, Monoid

logger = logging.getLogger(__name__)

R = TypeVar("R")

Fn = Callable[[Any], Any]


class RepresentableMonad(Monad, Generic[R]):
    """``pure`` is the constant function; ``flat_map`` reads both layers at the same point."""

    def __init__(self, rep: Representable[R]) -> None:
        self.rep = rep

    def pure(self, a: Any) -> Any:
        return self.rep.tabulate(lambda _: a)

    def flat_map(self, fa: Any, f: Fn) -> Any:
        index = self.rep.index
        fa_at = index(fa)
        return self.rep.tabulate(lambda r: index(f(fa_at(r)))(r))

    def tail_rec_m(self, a: Any, f: Fn) -> Any:
        index = self.rep.index

        def loop(r: R) -> Any:
            current = a
            while True:
                match index(f(current))(r):
                    case Right(value):
                        return value
                    case Left(value):
                        current = value
                    case other:
                        raise TypeError(
                            f"tail_rec_m step must return Left or Right, got {other!r}"
                        )

        return self.rep.tabulate(loop)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rep!r})"


class RepresentableBimonad(RepresentableMonad[R], Bimonad):
    """Adds the comonad side, read off the monoid's identity point."""

    def __init__(self, rep: Representable[R], monoid: Monoid[R]) -> None:
        super().__init__(rep)
        self.monoid = monoid

    def extract(self, fa: Any) -> Any:
        return self.rep.index(fa)(self.monoid.empty)

    def coflat_map(self, w: Any, f: Fn) -> Any:
        index = self.rep.index
        tabulate = self.rep.tabulate
        combine = self.monoid.combine
        w_at = index(w)

        def shifted(m: R) -> Any:
            return tabulate(lambda x: w_at(combine(m, x)))

        return tabulate(lambda m: f(shifted(m)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rep!r}, {self.monoid!r})"


class RepresentableDistributive(Distributive, Generic[R]):
    def __init__(self, rep: Representable[R]) -> None:
        self.rep = rep

    def distribute(self, ga: Any, f: Fn, G: Functor) -> Any:
        index = self.rep.index
        return self.rep.tabulate(lambda r: G.map(ga, lambda a: index(f(a))(r)))

    def map(self, fa: Any, f: Fn) -> Any:
        return self.rep.functor.map(fa, f)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rep!r})"


def monad(rep: Representable[R]) -> Monad:
    """Derive a Monad for any Representable functor."""
    logger.debug("Deriving Monad from %r", rep)
    return RepresentableMonad(rep)


def bimonad(rep: Representable[R], monoid: Monoid[R]) -> Bimonad:
    """Derive a Bimonad for a Representable functor whose representation is a Monoid."""
    logger.debug("Deriving Bimonad from %r with %r", rep, monoid)
    return RepresentableBimonad(rep, monoid)


def distributive(rep: Representable[R]) -> Distributive:
    """Derive a Distributive for any Representable functor."""
    logger.debug("Deriving Distributive from %r", rep)
    return RepresentableDistributive(rep)
