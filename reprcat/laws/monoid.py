"""Monoid laws over the carrier ``M``."""

from __future__ import annotations

from typing import Any

from ..typeclasses import Monoid
from .ruleset import Evidence, IsEq, RuleSet, forall


class MonoidLaws:
    def __init__(self, M: Monoid[Any]) -> None:
        self.M = M

    def semigroup_associative(self, x: Any, y: Any, z: Any) -> IsEq[Any]:
        c = self.M.combine
        return IsEq(c(c(x, y), z), c(x, c(y, z)))

    def left_identity(self, x: Any) -> IsEq[Any]:
        return IsEq(self.M.combine(self.M.empty, x), x)

    def right_identity(self, x: Any) -> IsEq[Any]:
        return IsEq(self.M.combine(x, self.M.empty), x)


def monoid_tests(M: Monoid[Any], ev: Evidence) -> RuleSet:
    """Requires gen ``M`` and eq ``M``."""
    ev.require("monoid", gens=["M"], eqs=["M"])
    laws = MonoidLaws(M)
    m, eq = ev.gen("M"), ev.eq("M")
    return RuleSet(
        name="monoid",
        props=(
            forall("semigroup associative", laws.semigroup_associative, m, m, m, eq=eq),
            forall("left identity", laws.left_identity, m, eq=eq),
            forall("right identity", laws.right_identity, m, eq=eq),
        ),
    )
