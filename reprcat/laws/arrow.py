"""Laws for two-parameter containers ``F[A, B]``: Compose, Category,
Profunctor, Strong and Arrow.

Evidence keys for arrows are written ``F[X, Y]``; tuples inside them as
``(X, Y)``, e.g. ``F[(A, C), (B, D)]``. Plain functions ``X => Y`` are
generated from the gen for ``Y``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..typeclasses import Arrow, Category, Compose, Profunctor, Strong, identity
from .ruleset import Evidence, IsEq, RuleSet, forall

Fn = Callable[[Any], Any]


def fst(p: tuple[Any, Any]) -> Any:
    return p[0]


def snd(p: tuple[Any, Any]) -> Any:
    return p[1]


def swap(p: tuple[Any, Any]) -> tuple[Any, Any]:
    return (p[1], p[0])


def assoc(p: tuple[tuple[Any, Any], Any]) -> tuple[Any, tuple[Any, Any]]:
    """((a, b), c) ↦ (a, (b, c))"""
    (a, b), c = p
    return (a, (b, c))


def unassoc(p: tuple[Any, tuple[Any, Any]]) -> tuple[tuple[Any, Any], Any]:
    """(a, (b, c)) ↦ ((a, b), c)"""
    a, (b, c) = p
    return ((a, b), c)


def cross(f: Fn, g: Fn) -> Fn:
    """``f *** g`` on plain functions."""
    return lambda p: (f(p[0]), g(p[1]))


COMPOSE_GENS = ("F[A, B]", "F[B, C]", "F[C, D]")
COMPOSE_EQS = ("F[A, D]",)
CATEGORY_GENS = COMPOSE_GENS
CATEGORY_EQS = COMPOSE_EQS + ("F[A, B]",)
PROFUNCTOR_GENS = ("F[A, B]", "A", "C", "E", "G")
PROFUNCTOR_EQS = ("F[A, B]", "F[D, G]")
STRONG_GENS = PROFUNCTOR_GENS + ("D",)
STRONG_EQS = PROFUNCTOR_EQS + (
    "F[(A, C), (B, C)]",
    "F[(C, A), (C, B)]",
    "F[(A, C), B]",
    "F[(C, A), B]",
    "F[(A, C), (B, D)]",
    "F[(C, A), (D, B)]",
    "F[((A, C), D), ((B, C), D)]",
    "F[(D, (C, A)), (D, (C, B))]",
)
ARROW_GENS = tuple(dict.fromkeys(CATEGORY_GENS + STRONG_GENS + ("B", "F[A, C]")))
ARROW_EQS = tuple(
    dict.fromkeys(
        CATEGORY_EQS
        + STRONG_EQS
        + (
            "F[A, A]",
            "F[A, C]",
            "F[(A, D), (C, D)]",
            "F[((A, C), D), (B, (C, D))]",
            "F[A, (B, C)]",
        )
    )
)


# ---------------------------------------------------------------------------
# Compose / Category
# ---------------------------------------------------------------------------


class ComposeLaws:
    def __init__(self, F: Compose) -> None:
        self.F = F

    def compose_associativity(self, fab: Any, fbc: Any, fcd: Any) -> IsEq[Any]:
        then = self.F.and_then
        return IsEq(then(then(fab, fbc), fcd), then(fab, then(fbc, fcd)))


class CategoryLaws(ComposeLaws):
    F: Category

    def category_left_identity(self, fab: Any) -> IsEq[Any]:
        return IsEq(self.F.and_then(self.F.id(), fab), fab)

    def category_right_identity(self, fab: Any) -> IsEq[Any]:
        return IsEq(self.F.and_then(fab, self.F.id()), fab)


def compose_tests(F: Compose, ev: Evidence) -> RuleSet:
    ev.require("compose", gens=COMPOSE_GENS, eqs=COMPOSE_EQS)
    laws = ComposeLaws(F)
    return RuleSet(
        name="compose",
        props=(
            forall(
                "compose associativity",
                laws.compose_associativity,
                ev.gen("F[A, B]"),
                ev.gen("F[B, C]"),
                ev.gen("F[C, D]"),
                eq=ev.eq("F[A, D]"),
            ),
        ),
    )


def category_tests(F: Category, ev: Evidence) -> RuleSet:
    ev.require("category", gens=CATEGORY_GENS, eqs=CATEGORY_EQS)
    laws = CategoryLaws(F)
    fab, eq = ev.gen("F[A, B]"), ev.eq("F[A, B]")
    return RuleSet(
        name="category",
        props=(
            forall("category left identity", laws.category_left_identity, fab, eq=eq),
            forall("category right identity", laws.category_right_identity, fab, eq=eq),
        ),
        parents=(compose_tests(F, ev),),
    )


# ---------------------------------------------------------------------------
# Profunctor / Strong
# ---------------------------------------------------------------------------


class ProfunctorLaws:
    def __init__(self, F: Profunctor) -> None:
        self.F = F

    def profunctor_identity(self, fab: Any) -> IsEq[Any]:
        return IsEq(self.F.dimap(fab, identity, identity), fab)

    def profunctor_composition(self, fab: Any, f1: Fn, f2: Fn, g1: Fn, g2: Fn) -> IsEq[Any]:
        """f1 : C => A, f2 : D => C, g1 : B => E, g2 : E => G"""
        F = self.F
        return IsEq(
            F.dimap(F.dimap(fab, f1, g1), f2, g2),
            F.dimap(fab, lambda d: f1(f2(d)), lambda b: g2(g1(b))),
        )

    def profunctor_lmap_identity(self, fab: Any) -> IsEq[Any]:
        return IsEq(self.F.lmap(fab, identity), fab)

    def profunctor_rmap_identity(self, fab: Any) -> IsEq[Any]:
        return IsEq(self.F.rmap(fab, identity), fab)


class StrongLaws(ProfunctorLaws):
    F: Strong

    def first_is_swapped_second(self, fab: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.first(fab), F.dimap(F.second(fab), swap, swap))

    def second_is_swapped_first(self, fab: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.second(fab), F.dimap(F.first(fab), swap, swap))

    def lmap_equals_first_and_then_rmap(self, fab: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.lmap(fab, fst), F.rmap(F.first(fab), fst))

    def lmap_equals_second_and_then_rmap(self, fab: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.lmap(fab, snd), F.rmap(F.second(fab), snd))

    def dinaturality_first(self, fab: Any, f: Fn) -> IsEq[Any]:
        F = self.F
        return IsEq(
            F.rmap(F.first(fab), cross(identity, f)),
            F.lmap(F.first(fab), cross(identity, f)),
        )

    def dinaturality_second(self, fab: Any, f: Fn) -> IsEq[Any]:
        F = self.F
        return IsEq(
            F.rmap(F.second(fab), cross(f, identity)),
            F.lmap(F.second(fab), cross(f, identity)),
        )

    def first_first_is_dimap(self, fab: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.first(F.first(fab)), F.dimap(F.first(fab), assoc, unassoc))

    def second_second_is_dimap(self, fab: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.second(F.second(fab)), F.dimap(F.second(fab), unassoc, assoc))


def profunctor_tests(F: Profunctor, ev: Evidence) -> RuleSet:
    ev.require("profunctor", gens=PROFUNCTOR_GENS, eqs=PROFUNCTOR_EQS)
    laws = ProfunctorLaws(F)
    fab, eq = ev.gen("F[A, B]"), ev.eq("F[A, B]")
    return RuleSet(
        name="profunctor",
        props=(
            forall("profunctor identity", laws.profunctor_identity, fab, eq=eq),
            forall(
                "profunctor composition",
                laws.profunctor_composition,
                fab,
                ev.fn("A"),
                ev.fn("C"),
                ev.fn("E"),
                ev.fn("G"),
                eq=ev.eq("F[D, G]"),
            ),
            forall("profunctor lmap identity", laws.profunctor_lmap_identity, fab, eq=eq),
            forall("profunctor rmap identity", laws.profunctor_rmap_identity, fab, eq=eq),
        ),
    )


def strong_tests(F: Strong, ev: Evidence) -> RuleSet:
    ev.require("strong", gens=STRONG_GENS, eqs=STRONG_EQS)
    laws = StrongLaws(F)
    fab = ev.gen("F[A, B]")
    return RuleSet(
        name="strong",
        props=(
            forall(
                "first is swapped second",
                laws.first_is_swapped_second,
                fab,
                eq=ev.eq("F[(A, C), (B, C)]"),
            ),
            forall(
                "second is swapped first",
                laws.second_is_swapped_first,
                fab,
                eq=ev.eq("F[(C, A), (C, B)]"),
            ),
            forall(
                "lmap equals first and then rmap",
                laws.lmap_equals_first_and_then_rmap,
                fab,
                eq=ev.eq("F[(A, C), B]"),
            ),
            forall(
                "lmap equals second and then rmap",
                laws.lmap_equals_second_and_then_rmap,
                fab,
                eq=ev.eq("F[(C, A), B]"),
            ),
            forall(
                "dinaturality of first",
                laws.dinaturality_first,
                fab,
                ev.fn("D"),
                eq=ev.eq("F[(A, C), (B, D)]"),
            ),
            forall(
                "dinaturality of second",
                laws.dinaturality_second,
                fab,
                ev.fn("D"),
                eq=ev.eq("F[(C, A), (D, B)]"),
            ),
            forall(
                "first first is dimap",
                laws.first_first_is_dimap,
                fab,
                eq=ev.eq("F[((A, C), D), ((B, C), D)]"),
            ),
            forall(
                "second second is dimap",
                laws.second_second_is_dimap,
                fab,
                eq=ev.eq("F[(D, (C, A)), (D, (C, B))]"),
            ),
        ),
        parents=(profunctor_tests(F, ev),),
    )


# ---------------------------------------------------------------------------
# Arrow
# ---------------------------------------------------------------------------


class ArrowLaws(CategoryLaws, StrongLaws):
    F: Arrow

    def __init__(self, F: Arrow) -> None:
        self.F = F

    def arrow_identity(self) -> IsEq[Any]:
        return IsEq(self.F.lift(identity), self.F.id())

    def arrow_composition(self, f: Fn, g: Fn) -> IsEq[Any]:
        F = self.F
        return IsEq(F.lift(lambda a: g(f(a))), F.and_then(F.lift(f), F.lift(g)))

    def arrow_extension(self, g: Fn) -> IsEq[Any]:
        F = self.F
        return IsEq(F.first(F.lift(g)), F.lift(cross(g, identity)))

    def arrow_functor(self, f: Any, g: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.and_then(F.first(f), F.first(g)), F.first(F.and_then(f, g)))

    def arrow_exchange(self, f: Any, g: Fn) -> IsEq[Any]:
        F = self.F
        return IsEq(
            F.and_then(F.first(f), F.lift(cross(identity, g))),
            F.and_then(F.lift(cross(identity, g)), F.first(f)),
        )

    def arrow_unit(self, f: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.and_then(F.first(f), F.lift(fst)), F.and_then(F.lift(fst), f))

    def arrow_association(self, f: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(
            F.and_then(F.first(F.first(f)), F.lift(assoc)),
            F.and_then(F.lift(assoc), F.first(f)),
        )

    def split_consistent_with_and_then(self, f: Any, g: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.split(f, g), F.and_then(F.first(f), F.second(g)))

    def merge_consistent_with_and_then(self, f: Any, g: Any) -> IsEq[Any]:
        F = self.F
        return IsEq(F.merge(f, g), F.and_then(F.lift(lambda a: (a, a)), F.split(f, g)))


def arrow_tests(F: Arrow, ev: Evidence) -> RuleSet:
    """Requires gens ``ARROW_GENS`` and eqs ``ARROW_EQS``."""
    ev.require("arrow", gens=ARROW_GENS, eqs=ARROW_EQS)
    laws = ArrowLaws(F)
    fab = ev.gen("F[A, B]")
    return RuleSet(
        name="arrow",
        props=(
            forall("arrow identity", laws.arrow_identity, eq=ev.eq("F[A, A]")),
            forall(
                "arrow composition",
                laws.arrow_composition,
                ev.fn("B"),
                ev.fn("C"),
                eq=ev.eq("F[A, C]"),
            ),
            forall(
                "arrow extension",
                laws.arrow_extension,
                ev.fn("B"),
                eq=ev.eq("F[(A, C), (B, C)]"),
            ),
            forall(
                "arrow functor",
                laws.arrow_functor,
                fab,
                ev.gen("F[B, C]"),
                eq=ev.eq("F[(A, D), (C, D)]"),
            ),
            forall(
                "arrow exchange",
                laws.arrow_exchange,
                fab,
                ev.fn("D"),
                eq=ev.eq("F[(A, C), (B, D)]"),
            ),
            forall("arrow unit", laws.arrow_unit, fab, eq=ev.eq("F[(A, C), B]")),
            forall(
                "arrow association",
                laws.arrow_association,
                fab,
                eq=ev.eq("F[((A, C), D), (B, (C, D))]"),
            ),
            forall(
                "split consistent with andThen",
                laws.split_consistent_with_and_then,
                fab,
                ev.gen("F[C, D]"),
                eq=ev.eq("F[(A, C), (B, D)]"),
            ),
            forall(
                "merge consistent with andThen",
                laws.merge_consistent_with_and_then,
                fab,
                ev.gen("F[A, C]"),
                eq=ev.eq("F[A, (B, C)]"),
            ),
        ),
        parents=(category_tests(F, ev), strong_tests(F, ev)),
    )
