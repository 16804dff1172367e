"""Functor laws.

    map(fa, id) == fa
    map(map(fa, f), g) == map(fa, g ∘ f)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..typeclasses import Functor, identity
from .ruleset import Evidence, IsEq, RuleSet, forall

Fn = Callable[[Any], Any]

FUNCTOR_GENS = ("F[A]", "B", "C")
FUNCTOR_EQS = ("F[A]", "F[C]")


class FunctorLaws:
    def __init__(self, F: Functor) -> None:
        self.F = F

    def covariant_identity(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.F.map(fa, identity), fa)

    def covariant_composition(self, fa: Any, f: Fn, g: Fn) -> IsEq[Any]:
        return IsEq(self.F.map(self.F.map(fa, f), g), self.F.map(fa, lambda a: g(f(a))))


def functor_tests(F: Functor, ev: Evidence) -> RuleSet:
    """Requires gens ``F[A]``, ``B``, ``C``; eqs ``F[A]``, ``F[C]``."""
    ev.require("functor", gens=FUNCTOR_GENS, eqs=FUNCTOR_EQS)
    laws = FunctorLaws(F)
    return RuleSet(
        name="functor",
        props=(
            forall("covariant identity", laws.covariant_identity, ev.gen("F[A]"), eq=ev.eq("F[A]")),
            forall(
                "covariant composition",
                laws.covariant_composition,
                ev.gen("F[A]"),
                ev.fn("B"),
                ev.fn("C"),
                eq=ev.eq("F[C]"),
            ),
        ),
    )
