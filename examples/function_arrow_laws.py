"""ArrowChoice laws for plain Python callables.

Every arrow ``F[X, Y]`` is an ``int -> int`` function at the outermost
level; composite domains (pairs, ``Left``/``Right``) are compared on the
values built by ``pairs`` and ``eithers``.
"""

from hypothesis import strategies as st

from reprcat import FUNCTION_ARROW
from reprcat.eq import eithers, function_eq, pairs
from reprcat.laws import Evidence, arrow_choice_tests

XS = range(-2, 3)
INTS = st.integers(min_value=-20, max_value=20)


def function_arrow_evidence() -> Evidence:
    plain = Evidence(gens={"X": INTS}).fn("X")
    gens = {v: INTS for v in "ABCDEG"}
    gens.update(
        {k: plain for k in ("F[A, B]", "F[B, C]", "F[C, D]", "F[A, C]", "F[A, D]")}
    )

    on_x = function_eq(XS)
    on_pairs = function_eq(pairs(XS, XS))
    on_eithers = function_eq(eithers(XS, XS))
    eqs = {
        k: on_x
        for k in ("F[A, A]", "F[A, B]", "F[A, C]", "F[A, D]", "F[D, G]", "F[A, (B, C)]", "F[A, Either[B, C]]")
    }
    eqs.update(
        {
            k: on_pairs
            for k in (
                "F[(A, C), (B, C)]",
                "F[(C, A), (C, B)]",
                "F[(A, C), B]",
                "F[(C, A), B]",
                "F[(A, C), (B, D)]",
                "F[(C, A), (D, B)]",
                "F[(A, D), (C, D)]",
            )
        }
    )
    eqs.update(
        {
            k: on_eithers
            for k in (
                "F[Either[A, B], D]",
                "F[Either[A, C], Either[B, C]]",
                "F[Either[A, D], Either[C, D]]",
                "F[Either[C, A], Either[C, B]]",
                "F[Either[A, C], Either[B, D]]",
            )
        }
    )
    eqs["F[((A, C), D), ((B, C), D)]"] = function_eq(pairs(pairs(XS, XS), XS))
    eqs["F[((A, C), D), (B, (C, D))]"] = function_eq(pairs(pairs(XS, XS), XS))
    eqs["F[(D, (C, A)), (D, (C, B))]"] = function_eq(pairs(XS, pairs(XS, XS)))
    eqs["F[Either[Either[A, B], C], Either[D, Either[B, C]]]"] = function_eq(
        eithers(eithers(XS, XS), XS)
    )
    return Evidence(gens=gens, eqs=eqs)


def function_arrow_choice_laws():
    return arrow_choice_tests(FUNCTION_ARROW, function_arrow_evidence())
