"""Laws for the pair container ``(A, A)`` and everything derived from it.

Run with:

    reprcat check examples/pair_laws.py

All type variables are instantiated at small ints; pairs compare with ``==``.
"""

from hypothesis import strategies as st

from reprcat import ALL, PAIR, bimonad, distributive
from reprcat.eq import default_eq
from reprcat.laws import (
    Evidence,
    bimonad_tests,
    distributive_tests,
    monoid_tests,
    representable_tests,
)

INTS = st.integers(min_value=-50, max_value=50)
PAIRS = st.tuples(INTS, INTS)


def pair_evidence() -> Evidence:
    gens = {
        "A": INTS,
        "B": INTS,
        "C": INTS,
        "F[A]": PAIRS,
        "F[B]": PAIRS,
        "F[C]": PAIRS,
        "F[F[A]]": st.tuples(PAIRS, PAIRS),
        "R": st.booleans(),
        "M": st.booleans(),
    }
    keys = ("A", "B", "F[A]", "F[B]", "F[C]", "F[F[A]]", "F[int]", "M")
    return Evidence(gens=gens, eqs={k: default_eq for k in keys})


def pair_representable_laws():
    return representable_tests(PAIR, pair_evidence())


def pair_bimonad_laws():
    return bimonad_tests(bimonad(PAIR, ALL), pair_evidence())


def pair_distributive_laws():
    return distributive_tests(distributive(PAIR), pair_evidence(), reference=PAIR.functor)


def conjunction_monoid_laws():
    return monoid_tests(ALL, pair_evidence())
