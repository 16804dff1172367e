"""Laws for the reader container ``int -> A``.

Functions cannot be compared directly, so equality is checked on a fixed
set of sample inputs.
"""

from hypothesis import strategies as st

from reprcat import ReaderRepresentable, distributive, monad
from reprcat.eq import default_eq, function_eq
from reprcat.laws import Evidence, distributive_tests, monad_tests, representable_tests

PROBES = range(-3, 4)
INTS = st.integers(min_value=-50, max_value=50)

READER_INT = ReaderRepresentable(int)


def reader_evidence() -> Evidence:
    base = Evidence(gens={"A": INTS})
    readers = base.fn("A")
    nested = Evidence(gens={"F[A]": readers}).fn("F[A]")
    same = function_eq(PROBES)
    gens = {
        "A": INTS,
        "B": INTS,
        "C": INTS,
        "R": INTS,
        "F[A]": readers,
        "F[B]": readers,
        "F[C]": readers,
        "F[F[A]]": nested,
    }
    eqs = {
        "A": default_eq,
        "F[A]": same,
        "F[B]": same,
        "F[C]": same,
        "F[int]": same,
        "F[F[A]]": function_eq(PROBES, codomain=same),
    }
    return Evidence(gens=gens, eqs=eqs)


def reader_monad_laws():
    return monad_tests(monad(READER_INT), reader_evidence())


def reader_distributive_laws():
    return distributive_tests(
        distributive(READER_INT), reader_evidence(), reference=READER_INT.functor
    )


def reader_representable_laws():
    return representable_tests(READER_INT, reader_evidence())
