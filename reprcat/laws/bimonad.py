"""Comonad and Bimonad laws.

Comonad:
    coflat_map(fa, extract) == fa
    extract(coflat_map(fa, f)) == f(fa)
    coflat_map(coflat_map(fa, f), g) == coflat_map(fa, x -> g(coflat_map(x, f)))

Bimonad (monad and comonad agree):
    extract(pure(a)) == a
    extract(flatten(ffa)) == extract(map(ffa, extract))
    coflatten(pure(a)) == map(pure(a), pure)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..typeclasses import Bimonad, Comonad
from .functor import FUNCTOR_EQS, FUNCTOR_GENS, functor_tests
from .monad import MONAD_EQS, MONAD_GENS, monad_tests
from .ruleset import Evidence, IsEq, RuleSet, forall

Fn = Callable[[Any], Any]

COMONAD_GENS = FUNCTOR_GENS
COMONAD_EQS = FUNCTOR_EQS + ("B",)
BIMONAD_GENS = tuple(dict.fromkeys(MONAD_GENS + COMONAD_GENS + ("F[F[A]]",)))
BIMONAD_EQS = tuple(dict.fromkeys(MONAD_EQS + COMONAD_EQS + ("A", "F[F[A]]")))


class ComonadLaws:
    def __init__(self, F: Comonad) -> None:
        self.F = F

    def comonad_left_identity(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.F.coflat_map(fa, self.F.extract), fa)

    def comonad_right_identity(self, fa: Any, f: Fn) -> IsEq[Any]:
        return IsEq(self.F.extract(self.F.coflat_map(fa, f)), f(fa))

    def coflat_map_associativity(self, fa: Any, f: Fn, g: Fn) -> IsEq[Any]:
        F = self.F
        return IsEq(
            F.coflat_map(F.coflat_map(fa, f), g),
            F.coflat_map(fa, lambda x: g(F.coflat_map(x, f))),
        )


class BimonadLaws(ComonadLaws):
    F: Bimonad

    def __init__(self, F: Bimonad) -> None:
        super().__init__(F)

    def pure_extract_is_id(self, a: Any) -> IsEq[Any]:
        return IsEq(self.F.extract(self.F.pure(a)), a)

    def extract_flat_map_entwining(self, ffa: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.extract(F.flatten(ffa)), F.extract(F.map(ffa, F.extract)))

    def pure_coflat_map_entwining(self, a: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.coflatten(F.pure(a)), F.map(F.pure(a), F.pure))


def comonad_tests(F: Comonad, ev: Evidence) -> RuleSet:
    """Requires gens ``COMONAD_GENS`` and eqs ``COMONAD_EQS``.

    The generated functions take whole ``F[A]`` values as arguments, so
    those values must be hashable.
    """
    ev.require("comonad", gens=COMONAD_GENS, eqs=COMONAD_EQS)
    laws = ComonadLaws(F)
    return RuleSet(
        name="comonad",
        props=(
            forall("comonad left identity", laws.comonad_left_identity, ev.gen("F[A]"), eq=ev.eq("F[A]")),
            forall(
                "comonad right identity",
                laws.comonad_right_identity,
                ev.gen("F[A]"),
                ev.fn("B"),
                eq=ev.eq("B"),
            ),
            forall(
                "coflatMap associativity",
                laws.coflat_map_associativity,
                ev.gen("F[A]"),
                ev.fn("B"),
                ev.fn("C"),
                eq=ev.eq("F[C]"),
            ),
        ),
        parents=(functor_tests(F, ev),),
    )


def bimonad_tests(F: Bimonad, ev: Evidence) -> RuleSet:
    """Requires gens ``BIMONAD_GENS`` and eqs ``BIMONAD_EQS``."""
    ev.require("bimonad", gens=BIMONAD_GENS, eqs=BIMONAD_EQS)
    laws = BimonadLaws(F)
    return RuleSet(
        name="bimonad",
        props=(
            forall("pure andThen extract = id", laws.pure_extract_is_id, ev.gen("A"), eq=ev.eq("A")),
            forall(
                "extract/flatMap entwining",
                laws.extract_flat_map_entwining,
                ev.gen("F[F[A]]"),
                eq=ev.eq("A"),
            ),
            forall(
                "pure/coflatMap entwining",
                laws.pure_coflat_map_entwining,
                ev.gen("A"),
                eq=ev.eq("F[F[A]]"),
            ),
        ),
        parents=(monad_tests(F, ev), comonad_tests(F, ev)),
    )
