"""Monad laws.

    flat_map(pure(a), f) == f(a)                               left identity
    flat_map(fa, pure) == fa                                   right identity
    flat_map(flat_map(fa, f), g) == flat_map(fa, a -> flat_map(f(a), g))
    tail_rec_m agrees with flat_map                            consistency
    tail_rec_m runs STACK_SAFETY_STEPS steps without recursion stack safety
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..either import Left, Right
from ..typeclasses import Monad
from .functor import FUNCTOR_EQS, FUNCTOR_GENS, functor_tests
from .ruleset import Evidence, IsEq, RuleSet, forall

Fn = Callable[[Any], Any]

STACK_SAFETY_STEPS = 50_000

MONAD_GENS = FUNCTOR_GENS + ("A", "F[B]", "F[C]")
MONAD_EQS = FUNCTOR_EQS + ("F[B]", "F[int]")


class MonadLaws:
    def __init__(self, F: Monad) -> None:
        self.F = F

    def monad_left_identity(self, a: Any, f: Fn) -> IsEq[Any]:
        return IsEq(self.F.flat_map(self.F.pure(a), f), f(a))

    def monad_right_identity(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.F.flat_map(fa, self.F.pure), fa)

    def flat_map_associativity(self, fa: Any, f: Fn, g: Fn) -> IsEq[Any]:
        F = self.F
        return IsEq(
            F.flat_map(F.flat_map(fa, f), g),
            F.flat_map(fa, lambda a: F.flat_map(f(a), g)),
        )

    def tail_rec_m_consistent_flat_map(self, a: Any, f: Fn) -> IsEq[Any]:
        F = self.F

        def bounce(n: int) -> Any:
            def step(state: tuple[Any, int]) -> Any:
                a0, i = state
                if i > 0:
                    return F.map(f(a0), lambda a1: Left((a1, i - 1)))
                return F.map(f(a0), Right)

            return F.tail_rec_m((a, n), step)

        return IsEq(bounce(1), F.flat_map(bounce(0), f))

    def tail_rec_m_stack_safety(self) -> IsEq[Any]:
        F = self.F
        n = STACK_SAFETY_STEPS
        result = F.tail_rec_m(0, lambda i: F.pure(Left(i + 1) if i < n else Right(i)))
        return IsEq(result, F.pure(n))


def monad_tests(F: Monad, ev: Evidence) -> RuleSet:
    """Requires gens ``MONAD_GENS`` and eqs ``MONAD_EQS``."""
    ev.require("monad", gens=MONAD_GENS, eqs=MONAD_EQS)
    laws = MonadLaws(F)
    return RuleSet(
        name="monad",
        props=(
            forall(
                "monad left identity",
                laws.monad_left_identity,
                ev.gen("A"),
                ev.fn("F[B]"),
                eq=ev.eq("F[B]"),
            ),
            forall("monad right identity", laws.monad_right_identity, ev.gen("F[A]"), eq=ev.eq("F[A]")),
            forall(
                "flatMap associativity",
                laws.flat_map_associativity,
                ev.gen("F[A]"),
                ev.fn("F[B]"),
                ev.fn("F[C]"),
                eq=ev.eq("F[C]"),
            ),
            forall(
                "tailRecM consistent flatMap",
                laws.tail_rec_m_consistent_flat_map,
                ev.gen("A"),
                ev.fn("F[A]"),
                eq=ev.eq("F[A]"),
            ),
            forall("tailRecM stack safety", laws.tail_rec_m_stack_safety, eq=ev.eq("F[int]")),
        ),
        parents=(functor_tests(F, ev),),
    )
