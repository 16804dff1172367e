"""Sum types.

Either: a value that is one of two alternatives, ``Left`` or ``Right``.
Used by ``tail_rec_m`` (Left = keep looping, Right = done) and by the
ArrowChoice family.

Result: ``Ok``/``Err`` for harness operations that can fail without that
failure being a programming error.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")
E = TypeVar("E", bound=Exception)

# ---------------------------------------------------------------------------
# Either
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Left(Generic[A]):
    value: A


@dataclass(frozen=True)
class Right(Generic[B]):
    value: B


type Either[A, B] = Left[A] | Right[B]


def fold(e: Either[Any, Any], if_left: Callable[[Any], T], if_right: Callable[[Any], T]) -> T:
    match e:
        case Left(value):
            return if_left(value)
        case Right(value):
            return if_right(value)
    raise TypeError(f"Expected Left or Right, got {type(e).__name__}")


def swap(e: Either[A, B]) -> Either[B, A]:
    """Left(a) ↦ Right(a), Right(b) ↦ Left(b)."""
    return fold(e, Right, Left)


def merge(e: Either[A, A]) -> A:
    """Collapse an Either whose sides share a type (the codiagonal)."""
    return fold(e, lambda a: a, lambda a: a)


def bimap(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Either[Any, Any]], Either[Any, Any]]:
    """``f +++ g``: map the left side with f and the right side with g."""

    def both(e: Either[Any, Any]) -> Either[Any, Any]:
        return fold(e, lambda a: Left(f(a)), lambda b: Right(g(b)))

    return both


def sum_assoc(e: Either[Either[Any, Any], Any]) -> Either[Any, Either[Any, Any]]:
    """Re-associate ``(A + B) + C`` as ``A + (B + C)``."""
    match e:
        case Left(Left(a)):
            return Left(a)
        case Left(Right(b)):
            return Right(Left(b))
        case Right(c):
            return Right(Right(c))
    raise TypeError(f"Expected a nested Either, got {e!r}")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


type Result[T, E] = Ok[T] | Err[E]
