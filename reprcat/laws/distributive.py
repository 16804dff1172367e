"""Distributive laws.

    distribute(a, f, IDENTITY) == f(a)
    cosequence(fa, IDENTITY) == fa
    cosequence(cosequence(ffa, F), F) == ffa
    map(fa, f) == reference.map(fa, f)          (when a reference functor is given)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..instances import IDENTITY
from ..typeclasses import Distributive, Functor
from .functor import FUNCTOR_EQS, FUNCTOR_GENS, functor_tests
from .ruleset import Evidence, IsEq, Property, RuleSet, forall

Fn = Callable[[Any], Any]

DISTRIBUTIVE_GENS = tuple(dict.fromkeys(FUNCTOR_GENS + ("A", "F[F[A]]")))
DISTRIBUTIVE_EQS = tuple(dict.fromkeys(FUNCTOR_EQS + ("F[B]", "F[F[A]]")))


class DistributiveLaws:
    def __init__(self, F: Distributive) -> None:
        self.F = F

    def distribute_identity(self, a: Any, f: Fn) -> IsEq[Any]:
        return IsEq(self.F.distribute(a, f, IDENTITY), f(a))

    def cosequence_identity(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.F.cosequence(fa, IDENTITY), fa)

    def cosequence_twice_is_id(self, ffa: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.cosequence(F.cosequence(ffa, F), F), ffa)

    def map_agrees_with(self, reference: Functor) -> Callable[[Any, Fn], IsEq[Any]]:
        def law(fa: Any, f: Fn) -> IsEq[Any]:
            return IsEq(self.F.map(fa, f), reference.map(fa, f))

        return law


def distributive_tests(F: Distributive, ev: Evidence, reference: Functor | None = None) -> RuleSet:
    """Requires gens ``DISTRIBUTIVE_GENS`` and eqs ``DISTRIBUTIVE_EQS``.

    With ``reference``, also checks that ``F.map`` agrees with it; pass the
    witness functor when ``F`` was derived from a Representable.
    """
    ev.require("distributive", gens=DISTRIBUTIVE_GENS, eqs=DISTRIBUTIVE_EQS)
    laws = DistributiveLaws(F)
    props: tuple[Property, ...] = (
        forall(
            "distribute over identity is application",
            laws.distribute_identity,
            ev.gen("A"),
            ev.fn("F[B]"),
            eq=ev.eq("F[B]"),
        ),
        forall("cosequence identity", laws.cosequence_identity, ev.gen("F[A]"), eq=ev.eq("F[A]")),
        forall(
            "cosequence twice is id",
            laws.cosequence_twice_is_id,
            ev.gen("F[F[A]]"),
            eq=ev.eq("F[F[A]]"),
        ),
    )
    if reference is not None:
        props += (
            forall(
                "map agrees with underlying functor",
                laws.map_agrees_with(reference),
                ev.gen("F[A]"),
                ev.fn("B"),
                eq=ev.eq("F[B]"),
            ),
        )
    return RuleSet(name="distributive", props=props, parents=(functor_tests(F, ev),))
