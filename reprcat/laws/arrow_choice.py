"""Choice and ArrowChoice laws.

``Left``/``Right`` values inside evidence keys are written
``Either[X, Y]``, e.g. ``F[Either[A, C], Either[B, C]]``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .. import either
from ..either import Left
from ..typeclasses import ArrowChoice, Choice, identity
from .arrow import ARROW_EQS, ARROW_GENS, CATEGORY_EQS, CATEGORY_GENS, arrow_tests, category_tests
from .ruleset import Evidence, IsEq, RuleSet, forall

Fn = Callable[[Any], Any]

CHOICE_GENS = tuple(dict.fromkeys(CATEGORY_GENS + ("F[A, C]", "F[B, C]", "F[C, D]")))
CHOICE_EQS = CATEGORY_EQS + ("F[Either[A, B], D]",)
ARROW_CHOICE_GENS = tuple(dict.fromkeys(ARROW_GENS + CHOICE_GENS + ("F[A, D]",)))
ARROW_CHOICE_EQS = tuple(
    dict.fromkeys(
        ARROW_EQS
        + CHOICE_EQS
        + (
            "F[Either[A, C], Either[B, C]]",
            "F[Either[A, D], Either[C, D]]",
            "F[Either[C, A], Either[C, B]]",
            "F[A, Either[B, C]]",
            "F[Either[A, C], Either[B, D]]",
            "F[Either[Either[A, B], C], Either[D, Either[B, C]]]",
        )
    )
)


class ChoiceLaws:
    def __init__(self, F: Choice) -> None:
        self.F = F

    def choice_composition_distributivity(self, fac: Any, fbc: Any, fcd: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(
            F.and_then(F.choice(fac, fbc), fcd),
            F.choice(F.and_then(fac, fcd), F.and_then(fbc, fcd)),
        )


class ArrowChoiceLaws(ChoiceLaws):
    F: ArrowChoice

    def __init__(self, F: ArrowChoice) -> None:
        super().__init__(F)

    def left_lift_commute(self, f: Fn) -> IsEq[Any]:
        F = self.F
        return IsEq(F.left(F.lift(f)), F.lift(either.bimap(f, identity)))

    def left_compose_commute(self, f: Any, g: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.left(F.and_then(f, g)), F.and_then(F.left(f), F.left(g)))

    def left_right_consistent(self, f: Fn) -> IsEq[Any]:
        F = self.F
        swapped = F.and_then(F.and_then(F.lift(either.swap), F.left(F.lift(f))), F.lift(either.swap))
        return IsEq(F.right(F.lift(f)), swapped)

    def left_and_then_lift_left_commutes(self, f: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.and_then(f, F.lift(Left)), F.and_then(F.lift(Left), F.left(f)))

    def left_and_then_right_identity_commutes(self, f: Any, g: Fn) -> IsEq[Any]:
        F = self.F
        plus = F.lift(either.bimap(identity, g))
        return IsEq(F.and_then(F.left(f), plus), F.and_then(plus, F.left(f)))

    def left_twice_commutes_with_sum_association(self, f: Any) -> IsEq[Any]:
        F = self.F
        reassoc = F.lift(either.sum_assoc)
        return IsEq(F.and_then(F.left(F.left(f)), reassoc), F.and_then(reassoc, F.left(f)))


def choice_tests(F: Choice, ev: Evidence) -> RuleSet:
    ev.require("choice", gens=CHOICE_GENS, eqs=CHOICE_EQS)
    laws = ChoiceLaws(F)
    return RuleSet(
        name="choice",
        props=(
            forall(
                "choice composition distributivity",
                laws.choice_composition_distributivity,
                ev.gen("F[A, C]"),
                ev.gen("F[B, C]"),
                ev.gen("F[C, D]"),
                eq=ev.eq("F[Either[A, B], D]"),
            ),
        ),
        parents=(category_tests(F, ev),),
    )


def arrow_choice_tests(F: ArrowChoice, ev: Evidence) -> RuleSet:
    """Requires gens ``ARROW_CHOICE_GENS`` and eqs ``ARROW_CHOICE_EQS``.

    Parents are ``arrow`` and ``choice``, so the category and compose
    properties appear once under each.
    """
    ev.require("arrowChoice", gens=ARROW_CHOICE_GENS, eqs=ARROW_CHOICE_EQS)
    laws = ArrowChoiceLaws(F)
    fab = ev.gen("F[A, B]")
    return RuleSet(
        name="arrowChoice",
        props=(
            forall(
                "left and lift commute",
                laws.left_lift_commute,
                ev.fn("B"),
                eq=ev.eq("F[Either[A, C], Either[B, C]]"),
            ),
            forall(
                "left and compose commute",
                laws.left_compose_commute,
                fab,
                ev.gen("F[B, C]"),
                eq=ev.eq("F[Either[A, D], Either[C, D]]"),
            ),
            forall(
                "left and right consistent",
                laws.left_right_consistent,
                ev.fn("B"),
                eq=ev.eq("F[Either[C, A], Either[C, B]]"),
            ),
            forall(
                "left and then lift (Left.apply) commutes",
                laws.left_and_then_lift_left_commutes,
                fab,
                eq=ev.eq("F[A, Either[B, C]]"),
            ),
            forall(
                "left and then identity +++ _ commutes",
                laws.left_and_then_right_identity_commutes,
                fab,
                ev.fn("D"),
                eq=ev.eq("F[Either[A, C], Either[B, D]]"),
            ),
            forall(
                "left commutes with sum association",
                laws.left_twice_commutes_with_sum_association,
                ev.gen("F[A, D]"),
                eq=ev.eq("F[Either[Either[A, B], C], Either[D, Either[B, C]]]"),
            ),
        ),
        parents=(arrow_tests(F, ev), choice_tests(F, ev)),
    )
