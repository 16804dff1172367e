"""Rule sets: named, composable collections of properties.

A property is a law plus the hypothesis strategies that feed it. A rule
set holds its own properties and a tuple of parent rule sets; its
effective properties are its own followed by every parent's, recursively.

    arrowChoice
    ├── arrow
    │   ├── category ── compose
    │   └── strong ──── profunctor
    └── choice
        └── category ── compose

Properties reached through two different parents (``category`` above)
are kept twice, each tagged with the path it was reached by.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from ..eq import Eq, default_eq
from ..errors import DuplicateNameError, MissingCapabilityError

T = TypeVar("T")


@dataclass(frozen=True)
class IsEq(Generic[T]):
    """The two sides of an equation a law claims."""

    lhs: T
    rhs: T


type LawOutcome = IsEq[Any] | bool


@dataclass(frozen=True)
class Property:
    """A universally quantified law.

    ``law`` takes one sample per strategy and returns either ``IsEq``
    (compared with ``eq``) or a plain ``bool``.
    """

    name: str
    law: Callable[..., LawOutcome]
    strategies: tuple[SearchStrategy[Any], ...] = ()
    eq: Eq = default_eq

    def judge(self, outcome: LawOutcome) -> bool:
        match outcome:
            case IsEq(lhs, rhs):
                return bool(self.eq(lhs, rhs))
            case bool():
                return outcome
        raise TypeError(
            f"Law '{self.name}' returned {type(outcome).__name__}, expected IsEq or bool"
        )

    def holds(self, *samples: Any) -> bool:
        """Evaluate the law on concrete samples."""
        return self.judge(self.law(*samples))


def forall(
    name: str,
    law: Callable[..., LawOutcome],
    *strategies: SearchStrategy[Any],
    eq: Eq = default_eq,
) -> Property:
    return Property(name=name, law=law, strategies=tuple(strategies), eq=eq)


@dataclass(frozen=True)
class QualifiedProperty:
    """A property together with the rule-set path it was reached through."""

    path: tuple[str, ...]
    prop: Property

    @property
    def name(self) -> str:
        return self.prop.name

    @property
    def suite(self) -> str:
        return ".".join(self.path)

    @property
    def qualified_name(self) -> str:
        return f"{self.suite}: {self.name}"


@dataclass(frozen=True)
class RuleSet:
    name: str
    props: tuple[Property, ...] = ()
    parents: tuple[RuleSet, ...] = ()

    def __post_init__(self) -> None:
        for kind, names in (
            ("property", [p.name for p in self.props]),
            ("parent rule set", [p.name for p in self.parents]),
        ):
            dupes = sorted(n for n, c in Counter(names).items() if c > 1)
            if dupes:
                raise DuplicateNameError(
                    f"Rule set '{self.name}' declares {kind} name(s) more than once: {dupes}"
                )

    def all_properties(self) -> tuple[QualifiedProperty, ...]:
        return self._collect(())

    def _collect(self, prefix: tuple[str, ...]) -> tuple[QualifiedProperty, ...]:
        path = prefix + (self.name,)
        own = tuple(QualifiedProperty(path, p) for p in self.props)
        inherited = tuple(q for parent in self.parents for q in parent._collect(path))
        return own + inherited

    @property
    def property_names(self) -> tuple[str, ...]:
        return tuple(q.name for q in self.all_properties())

    def get(self, name: str) -> Property | None:
        """First effective property with this name, searching own properties first."""
        for q in self.all_properties():
            if q.name == name:
                return q.prop
        return None


# ---------------------------------------------------------------------------
# Evidence: sample generators and equality predicates, keyed by type
# ---------------------------------------------------------------------------


def _unary(x: Any) -> Any:
    """Signature template for generated one-argument functions."""


@dataclass(frozen=True)
class Evidence:
    """Explicit stand-in for implicit ``Arbitrary``/``Eq`` instances.

    Keys are type expressions as they appear in law signatures, e.g.
    ``"A"``, ``"F[A]"``, ``"F[(A, C), (B, D)]"``. Spell them exactly as the
    suite factories do; ``MissingCapabilityError`` lists the keys a suite
    wanted but did not get.
    """

    gens: Mapping[str, SearchStrategy[Any]] = field(default_factory=dict)
    eqs: Mapping[str, Eq] = field(default_factory=dict)

    def require(
        self,
        suite: str,
        *,
        gens: Iterable[str] = (),
        eqs: Iterable[str] = (),
    ) -> None:
        missing_gens = [k for k in gens if k not in self.gens]
        missing_eqs = [k for k in eqs if k not in self.eqs]
        if missing_gens or missing_eqs:
            raise MissingCapabilityError(suite, gens=missing_gens, eqs=missing_eqs)

    def gen(self, key: str) -> SearchStrategy[Any]:
        try:
            return self.gens[key]
        except KeyError:
            raise MissingCapabilityError("evidence", gens=[key]) from None

    def eq(self, key: str) -> Eq:
        try:
            return self.eqs[key]
        except KeyError:
            raise MissingCapabilityError("evidence", eqs=[key]) from None

    def fn(self, returns: str) -> SearchStrategy[Callable[[Any], Any]]:
        """Pure one-argument functions whose results are drawn from ``gens[returns]``.

        Arguments must be hashable; equal arguments give equal results.
        """
        return st.functions(like=_unary, returns=self.gen(returns), pure=True)

    def extend(
        self,
        gens: Mapping[str, SearchStrategy[Any]] | None = None,
        eqs: Mapping[str, Eq] | None = None,
    ) -> Evidence:
        """New evidence with extra entries; later entries win."""
        return Evidence(
            gens={**self.gens, **(gens or {})},
            eqs={**self.eqs, **(eqs or {})},
        )
