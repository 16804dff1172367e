"""Equality predicates.

An ``Eq`` is any ``(x, y) -> bool``. Plain data (ints, strings, tuples,
``Left``/``Right``) compares with ``==``. Functions cannot be compared
directly, so ``function_eq`` compares them on a fixed list of sample inputs;
``pairs`` and ``eithers`` build sample lists for composite domains.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .either import Left, Right

type Eq = Callable[[Any, Any], bool]


def default_eq(x: Any, y: Any) -> bool:
    return bool(x == y)


def tuple_eq(*component_eqs: Eq) -> Eq:
    """Componentwise equality for fixed-length tuples."""

    def eq(x: tuple[Any, ...], y: tuple[Any, ...]) -> bool:
        if len(x) != len(component_eqs) or len(y) != len(component_eqs):
            return False
        return all(e(a, b) for e, a, b in zip(component_eqs, x, y, strict=True))

    return eq


def either_eq(left: Eq = default_eq, right: Eq = default_eq) -> Eq:
    def eq(x: Any, y: Any) -> bool:
        match (x, y):
            case (Left(a), Left(b)):
                return left(a, b)
            case (Right(a), Right(b)):
                return right(a, b)
            case _:
                return False

    return eq


def function_eq(inputs: Iterable[Any], codomain: Eq = default_eq) -> Eq:
    """Two functions are equal if they agree on every sample input."""
    points = tuple(inputs)
    if not points:
        raise ValueError("function_eq needs at least one sample input")

    def eq(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> bool:
        return all(codomain(f(p), g(p)) for p in points)

    return eq


def pairs(firsts: Sequence[Any], seconds: Sequence[Any]) -> tuple[tuple[Any, Any], ...]:
    """Probe inputs for a product domain ``(X, Y)``."""
    return tuple(itertools.product(firsts, seconds))


def eithers(lefts: Sequence[Any], rights: Sequence[Any]) -> tuple[Any, ...]:
    """Probe inputs for a sum domain ``Either[X, Y]``."""
    return tuple(Left(x) for x in lefts) + tuple(Right(y) for y in rights)

