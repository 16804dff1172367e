"""Exceptions shared across the witness registry and the law harness."""

from __future__ import annotations

from collections.abc import Sequence


class MissingCapabilityError(LookupError):
    """A required witness, sample generator or equality predicate is absent.

    Raised at construction time, never deferred to check time: a suite
    that cannot build every one of its properties must not be built at all.
    """

    def __init__(
        self,
        owner: str,
        *,
        gens: Sequence[str] = (),
        eqs: Sequence[str] = (),
        witnesses: Sequence[str] = (),
    ) -> None:
        self.owner = owner
        self.gens = tuple(gens)
        self.eqs = tuple(eqs)
        self.witnesses = tuple(witnesses)
        parts = []
        if self.witnesses:
            parts.append(f"witnesses {list(self.witnesses)}")
        if self.gens:
            parts.append(f"generators {list(self.gens)}")
        if self.eqs:
            parts.append(f"equality predicates {list(self.eqs)}")
        super().__init__(f"'{owner}' is missing {', '.join(parts)}")


class DuplicateNameError(ValueError):
    """Two properties, or two parent rule sets, share a name within one rule set."""


class WitnessConflictError(ValueError):
    """A second, different witness was registered for the same container."""
