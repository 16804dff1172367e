"""reprcat: Representable functors, derived instances, and law suites."""

from .either import Either, Err, Left, Ok, Result, Right
from .errors import DuplicateNameError, MissingCapabilityError, WitnessConflictError
from .typeclasses import (
    Arrow,
    ArrowChoice,
    Bimonad,
    Category,
    Choice,
    Comonad,
    Compose,
    Distributive,
    Functor,
    Monad,
    Monoid,
    ProductMonoid,
    Profunctor,
    Strong,
    identity,
)
from .representable import Registry, Representable
from .derive import bimonad, distributive, monad
from .instances import (
    ALL,
    ANY,
    FUNCTION_ARROW,
    IDENTITY,
    PAIR,
    READER,
    STR,
    SUM,
    WITNESSES,
    ReaderRepresentable,
)

__all__ = [
    # Sum types
    "Either", "Left", "Right", "Ok", "Err", "Result",
    # Errors
    "DuplicateNameError", "MissingCapabilityError", "WitnessConflictError",
    # Type classes
    "Functor", "Monad", "Comonad", "Bimonad", "Distributive", "Monoid",
    "ProductMonoid", "Compose", "Category", "Profunctor", "Strong", "Arrow",
    "Choice", "ArrowChoice", "identity",
    # Representable
    "Representable", "Registry",
    # Derivation
    "monad", "bimonad", "distributive",
    # Instances
    "PAIR", "READER", "ReaderRepresentable", "WITNESSES", "IDENTITY",
    "FUNCTION_ARROW", "ALL", "ANY", "SUM", "STR",
]
