"""Representable laws.

    tabulate(index(fa)) == fa
    index(tabulate(f))(r) == f(r)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..representable import Representable
from .ruleset import Evidence, IsEq, RuleSet, forall

REPRESENTABLE_GENS = ("F[A]", "R", "A")
REPRESENTABLE_EQS = ("F[A]", "A")


class RepresentableLaws:
    def __init__(self, rep: Representable[Any]) -> None:
        self.rep = rep

    def index_tabulate_is_id(self, fa: Any) -> IsEq[Any]:
        return IsEq(self.rep.tabulate(self.rep.index(fa)), fa)

    def tabulate_index_is_id(self, f: Callable[[Any], Any], r: Any) -> IsEq[Any]:
        return IsEq(self.rep.index(self.rep.tabulate(f))(r), f(r))


def representable_tests(rep: Representable[Any], ev: Evidence) -> RuleSet:
    """Requires gens ``F[A]``, ``R``, ``A``; eqs ``F[A]``, ``A``.

    ``R`` values are passed to generated functions, so must be hashable.
    """
    ev.require("representable", gens=REPRESENTABLE_GENS, eqs=REPRESENTABLE_EQS)
    laws = RepresentableLaws(rep)
    return RuleSet(
        name="representable",
        props=(
            forall(
                "index andThen tabulate = id",
                laws.index_tabulate_is_id,
                ev.gen("F[A]"),
                eq=ev.eq("F[A]"),
            ),
            forall(
                "tabulate andThen index = id",
                laws.tabulate_index_is_id,
                ev.fn("A"),
                ev.gen("R"),
                eq=ev.eq("A"),
            ),
        ),
    )
