"""Bundled instances.

Containers:
    Pair[A]      = tuple (A, A), represented by bool (True → first slot)
    Reader[E, A] = callable E -> A, represented by E itself
    Id[A]        = A

Arrows:
    plain Python callables form an ArrowChoice.

``WITNESSES`` is the registry of the bundled Representable witnesses.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .either import Left, Right, fold
from .representable import Registry, Representable
from .typeclasses import ArrowChoice, Functor, Monoid

Fn = Callable[[Any], Any]

# ---------------------------------------------------------------------------
# Functors
# ---------------------------------------------------------------------------


class IdentityFunctor(Functor):
    def map(self, a: Any, f: Fn) -> Any:
        return f(a)

    def __repr__(self) -> str:
        return "IDENTITY"


class PairFunctor(Functor):
    def map(self, fa: tuple[Any, Any], f: Fn) -> tuple[Any, Any]:
        first, second = fa
        return (f(first), f(second))

    def __repr__(self) -> str:
        return "PAIR_FUNCTOR"


class ReaderFunctor(Functor):
    """Post-composition: ``map(fa, f) = f ∘ fa``."""

    def map(self, fa: Fn, f: Fn) -> Fn:
        return lambda e: f(fa(e))

    def __repr__(self) -> str:
        return "READER_FUNCTOR"


class TupleFunctor(Functor):
    """Fixed-length tuples of any size, mapped elementwise."""

    def map(self, fa: tuple[Any, ...], f: Fn) -> tuple[Any, ...]:
        return tuple(f(a) for a in fa)

    def __repr__(self) -> str:
        return "TUPLE_FUNCTOR"


IDENTITY = IdentityFunctor()
PAIR_FUNCTOR = PairFunctor()
READER_FUNCTOR = ReaderFunctor()
TUPLE_FUNCTOR = TupleFunctor()

# ---------------------------------------------------------------------------
# Representable witnesses
# ---------------------------------------------------------------------------


class PairRepresentable(Representable[bool]):
    representation = bool

    @property
    def functor(self) -> Functor:
        return PAIR_FUNCTOR

    def index(self, fa: tuple[Any, Any]) -> Callable[[bool], Any]:
        first, second = fa
        return lambda r: first if r else second

    def tabulate(self, f: Callable[[bool], Any]) -> tuple[Any, Any]:
        return (f(True), f(False))

    def __repr__(self) -> str:
        return "PAIR"


class ReaderRepresentable(Representable[Any]):
    """A function already is its own index."""

    def __init__(self, representation: Any = object) -> None:
        self.representation = representation

    @property
    def functor(self) -> Functor:
        return READER_FUNCTOR

    def index(self, fa: Fn) -> Fn:
        return fa

    def tabulate(self, f: Fn) -> Fn:
        return f

    def __repr__(self) -> str:
        name = getattr(self.representation, "__name__", repr(self.representation))
        return f"READER[{name}]"


PAIR = PairRepresentable()
READER = ReaderRepresentable()

WITNESSES = Registry()
WITNESSES.register("Pair", PAIR)
WITNESSES.register("Reader", READER)

# ---------------------------------------------------------------------------
# Monoids
# ---------------------------------------------------------------------------


class AllMonoid(Monoid[bool]):
    """Conjunction; identity ``True``."""

    @property
    def empty(self) -> bool:
        return True

    def combine(self, x: bool, y: bool) -> bool:
        return x and y

    def __repr__(self) -> str:
        return "ALL"


class AnyMonoid(Monoid[bool]):
    """Disjunction; identity ``False``."""

    @property
    def empty(self) -> bool:
        return False

    def combine(self, x: bool, y: bool) -> bool:
        return x or y

    def __repr__(self) -> str:
        return "ANY"


class SumMonoid(Monoid[int]):
    @property
    def empty(self) -> int:
        return 0

    def combine(self, x: int, y: int) -> int:
        return x + y

    def __repr__(self) -> str:
        return "SUM"


class StrMonoid(Monoid[str]):
    @property
    def empty(self) -> str:
        return ""

    def combine(self, x: str, y: str) -> str:
        return x + y

    def __repr__(self) -> str:
        return "STR"


ALL = AllMonoid()
ANY = AnyMonoid()
SUM = SumMonoid()
STR = StrMonoid()

# ---------------------------------------------------------------------------
# Arrows
# ---------------------------------------------------------------------------


class FunctionArrowChoice(ArrowChoice):
    """Plain callables. Only the minimal operations are defined here;
    ``second``, ``split``, ``merge``, ``left``, ``right`` and ``choice``
    come from the class hierarchy."""

    def lift(self, f: Fn) -> Fn:
        return f

    def compose(self, f: Fn, g: Fn) -> Fn:
        return lambda a: f(g(a))

    def first(self, fab: Fn) -> Fn:
        return lambda ac: (fab(ac[0]), ac[1])

    def choose(self, f: Fn, g: Fn) -> Fn:
        return lambda e: fold(e, lambda a: Left(f(a)), lambda c: Right(g(c)))

    def __repr__(self) -> str:
        return "FUNCTION_ARROW"


FUNCTION_ARROW = FunctionArrowChoice()
