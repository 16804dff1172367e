import pytest

from reprcat.either import Left, Right, sum_assoc
from reprcat.errors import MissingCapabilityError
from reprcat.instances import FUNCTION_ARROW, FunctionArrowChoice
from reprcat.laws import CheckConfig, Evidence, arrow_choice_tests, arrow_tests, check_suite
from reprcat.laws.arrow import ArrowLaws, assoc, unassoc
from reprcat.laws.arrow_choice import ArrowChoiceLaws


def _inc(x: int) -> int:
    return x + 1


def _double(x: int) -> int:
    return x * 2


class TestFunctionArrow:
    def test_derived_combinators(self) -> None:
        F = FUNCTION_ARROW
        assert F.id()(3) == 3
        assert F.and_then(_inc, _double)(3) == 8
        assert F.compose(_inc, _double)(3) == 7
        assert F.first(_inc)((1, "c")) == (2, "c")
        assert F.second(_inc)(("c", 1)) == ("c", 2)
        assert F.split(_inc, _double)((1, 5)) == (2, 10)
        assert F.merge(_inc, _double)(5) == (6, 10)
        assert F.dimap(_inc, _double, str)(4) == "9"

    def test_choice_combinators(self) -> None:
        F = FUNCTION_ARROW
        assert F.left(_inc)(Left(1)) == Left(2)
        assert F.left(_inc)(Right(1)) == Right(1)
        assert F.right(_inc)(Right(1)) == Right(2)
        assert F.choose(_inc, _double)(Right(4)) == Right(8)
        assert F.choice(_inc, _double)(Left(4)) == 5
        assert F.codiagonal()(Right("x")) == "x"


class TestStandaloneLaws:
    @pytest.fixture(autouse=True)
    def setup(self) -> None:
        self.laws = ArrowChoiceLaws(FUNCTION_ARROW)

    def test_left_lift_commute(self) -> None:
        outcome = self.laws.left_lift_commute(_inc)
        for x in (Left(1), Right(1)):
            assert outcome.lhs(x) == outcome.rhs(x)

    def test_left_right_consistent(self) -> None:
        outcome = self.laws.left_right_consistent(_inc)
        assert outcome.lhs(Right(1)) == outcome.rhs(Right(1)) == Right(2)
        assert outcome.lhs(Left(1)) == outcome.rhs(Left(1)) == Left(1)

    def test_sum_association(self) -> None:
        outcome = self.laws.left_twice_commutes_with_sum_association(_inc)
        for x in (Left(Left(1)), Left(Right(1)), Right(1)):
            assert outcome.lhs(x) == outcome.rhs(x)
        assert outcome.lhs(Left(Left(1))) == Left(2)

    def test_arrow_association(self) -> None:
        outcome = ArrowLaws(FUNCTION_ARROW).arrow_association(_inc)
        assert outcome.lhs(((1, 2), 3)) == outcome.rhs(((1, 2), 3)) == (2, (2, 3))


def test_tuple_and_sum_reassociation() -> None:
    assert assoc(((1, 2), 3)) == (1, (2, 3))
    assert unassoc((1, (2, 3))) == ((1, 2), 3)
    assert sum_assoc(Left(Left(1))) == Left(1)
    assert sum_assoc(Left(Right(2))) == Right(Left(2))
    assert sum_assoc(Right(3)) == Right(Right(3))
    with pytest.raises(TypeError):
        sum_assoc(Left(3))


def test_function_arrow_satisfies_arrow_choice_laws(arrow_evidence: Evidence, config: CheckConfig) -> None:
    report = check_suite(arrow_choice_tests(FUNCTION_ARROW, arrow_evidence), config)
    assert report.ok, [str(r.violation) for r in report.failures]
    assert len(report.reports) == len(arrow_choice_tests(FUNCTION_ARROW, arrow_evidence).property_names)


class RightIgnoringArrow(FunctionArrowChoice):
    """``choose`` drops the right-hand arrow."""

    def choose(self, f, g):
        return lambda e: Left(f(e.value)) if isinstance(e, Left) else e


def test_broken_arrow_choice_is_caught(arrow_evidence: Evidence, config: CheckConfig) -> None:
    report = check_suite(arrow_choice_tests(RightIgnoringArrow(), arrow_evidence), config)
    assert not report.ok
    failed = {r.name for r in report.failures}
    assert "left and right consistent" in failed
    assert "left and lift commute" not in failed


def test_arrow_suite_requires_evidence() -> None:
    with pytest.raises(MissingCapabilityError) as exc_info:
        arrow_tests(FUNCTION_ARROW, Evidence())
    err = exc_info.value
    assert err.owner == "arrow"
    assert "F[A, B]" in err.gens
    assert "F[((A, C), D), (B, (C, D))]" in err.eqs
