"""Representable functors.

A Representable witness certifies the isomorphism

    forall A.  F[A]  <->  (R -> A)

through a pair of functions:

    index    : F[A] -> (R -> A)
    tabulate : (R -> A) -> F[A]

that must satisfy

    tabulate(index(fa)) == fa
    index(tabulate(g))(r) == g(r)

Nothing here checks those laws; run ``reprcat.laws.representable_tests``.

Example (a pair indexed by booleans):

    >>> from reprcat.instances import PAIR
    >>> PAIR.index(("foo", "bar"))(False)
    'bar'
    >>> PAIR.tabulate(lambda b: "foo" if b else "bar")
    ('foo', 'bar')
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .errors import MissingCapabilityError, WitnessConflictError
from .typeclasses import Functor

logger = logging.getLogger(__name__)

R = TypeVar("R")
R2 = TypeVar("R2")


class Representable(ABC, Generic[R]):
    """Witness that ``F[A]`` is isomorphic to ``R -> A``.

    ``representation`` describes ``R``: a Python type for simple witnesses,
    a tuple of descriptions for composed ones.
    """

    representation: Any = object

    @property
    @abstractmethod
    def functor(self) -> Functor: ...

    @abstractmethod
    def index(self, fa: Any) -> Callable[[R], Any]: ...

    @abstractmethod
    def tabulate(self, f: Callable[[R], Any]) -> Any: ...

    def compose(self, inner: Representable[R2]) -> Representable[tuple[R, R2]]:
        """Witness for ``F[G[_]]`` represented by ``(R, R2)``.

        Representations are not re-associated: composing three witnesses
        two different ways gives ``(R1, (R2, R3))`` or ``((R1, R2), R3)``,
        and those are different representation types.
        """
        return ComposedRepresentable(self, inner)


class ComposedRepresentable(Representable[tuple[Any, Any]]):
    def __init__(self, outer: Representable[Any], inner: Representable[Any]) -> None:
        self.outer = outer
        self.inner = inner
        self.representation = (outer.representation, inner.representation)
        self._functor = outer.functor.compose(inner.functor)

    @property
    def functor(self) -> Functor:
        return self._functor

    def index(self, fga: Any) -> Callable[[tuple[Any, Any]], Any]:
        outer_at = self.outer.index(fga)

        def at(rep: tuple[Any, Any]) -> Any:
            r1, r2 = rep
            return self.inner.index(outer_at(r1))(r2)

        return at

    def tabulate(self, f: Callable[[tuple[Any, Any]], Any]) -> Any:
        def curried(r1: Any) -> Callable[[Any], Any]:
            return lambda r2: f((r1, r2))

        return self.outer.functor.map(self.outer.tabulate(curried), self.inner.tabulate)

    def __repr__(self) -> str:
        return f"{self.outer!r}.compose({self.inner!r})"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class Registry:
    """One witness per container name.

    Re-registering the same witness object is a no-op; registering a
    different one under a taken name raises ``WitnessConflictError``.
    """

    def __init__(self) -> None:
        self._witnesses: dict[str, Representable[Any]] = {}

    def register(self, container: str, witness: Representable[Any]) -> Representable[Any]:
        existing = self._witnesses.get(container)
        if existing is not None and existing is not witness:
            raise WitnessConflictError(
                f"Container '{container}' already has witness {existing!r}"
            )
        self._witnesses[container] = witness
        logger.debug(
            "Registered %r for %s (representation %r)",
            witness,
            container,
            witness.representation,
        )
        return witness

    def lookup(self, container: str, representation: Any = None) -> Representable[Any]:
        """Return the witness for ``container``.

        When ``representation`` is given, the witness must be represented
        by exactly that type.
        """
        witness = self._witnesses.get(container)
        match witness:
            case None:
                raise MissingCapabilityError(container, witnesses=[container])
            case w if representation is not None and w.representation != representation:
                raise MissingCapabilityError(
                    container, witnesses=[f"{container} represented by {representation!r}"]
                )
            case w:
                return w

    def __contains__(self, container: object) -> bool:
        return container in self._witnesses

    @property
    def containers(self) -> frozenset[str]:
        return frozenset(self._witnesses.keys())
