import pytest
from hypothesis import strategies as st

from reprcat.errors import DuplicateNameError, MissingCapabilityError
from reprcat.instances import FUNCTION_ARROW, PAIR_FUNCTOR
from reprcat.laws import Evidence, IsEq, Property, RuleSet, arrow_choice_tests, forall, functor_tests


def _prop(name: str) -> Property:
    return forall(name, lambda n: IsEq(n, n), st.integers())


class TestFlattening:
    def test_own_properties_come_first(self) -> None:
        parent = RuleSet("parent", props=(_prop("p1"), _prop("p2")))
        child = RuleSet("child", props=(_prop("c1"),), parents=(parent,))

        assert child.property_names == ("c1", "p1", "p2")
        assert [q.suite for q in child.all_properties()] == ["child", "child.parent", "child.parent"]

    def test_shared_ancestor_is_kept_per_path(self) -> None:
        base = RuleSet("base", props=(_prop("b"),))
        left = RuleSet("left", parents=(base,))
        right = RuleSet("right", parents=(base,))
        top = RuleSet("top", parents=(left, right))

        qualified = [q.qualified_name for q in top.all_properties()]
        assert qualified == ["top.left.base: b", "top.right.base: b"]

    def test_get_prefers_own_property(self) -> None:
        own = _prop("same")
        parent = RuleSet("parent", props=(_prop("same"),))
        child = RuleSet("child", props=(own,), parents=(parent,))

        assert child.get("same") is own
        assert child.get("missing") is None

    def test_arrow_choice_hierarchy(self, arrow_evidence: Evidence) -> None:
        ruleset = arrow_choice_tests(FUNCTION_ARROW, arrow_evidence)
        names = ruleset.property_names

        assert names[:6] == (
            "left and lift commute",
            "left and compose commute",
            "left and right consistent",
            "left and then lift (Left.apply) commutes",
            "left and then identity +++ _ commutes",
            "left commutes with sum association",
        )
        assert names.count("category left identity") == 2
        assert names.count("compose associativity") == 2
        suites = {q.suite for q in ruleset.all_properties()}
        assert "arrowChoice.arrow.category.compose" in suites
        assert "arrowChoice.choice.category.compose" in suites
        assert "arrowChoice.arrow.strong.profunctor" in suites


class TestDuplicates:
    def test_duplicate_property_names(self) -> None:
        with pytest.raises(DuplicateNameError, match="'dup'"):
            RuleSet("broken", props=(_prop("dup"), _prop("dup")))

    def test_duplicate_parent_names(self) -> None:
        parent = RuleSet("parent", props=(_prop("p"),))
        with pytest.raises(DuplicateNameError, match="parent rule set"):
            RuleSet("broken", parents=(parent, parent))

    def test_same_name_in_self_and_parent_is_allowed(self) -> None:
        parent = RuleSet("parent", props=(_prop("p"),))
        child = RuleSet("child", props=(_prop("p"),), parents=(parent,))
        assert child.property_names == ("p", "p")


class TestEvidence:
    def test_missing_everything_is_reported_at_once(self) -> None:
        with pytest.raises(MissingCapabilityError) as exc_info:
            functor_tests(PAIR_FUNCTOR, Evidence())
        err = exc_info.value
        assert err.owner == "functor"
        assert err.gens == ("F[A]", "B", "C")
        assert err.eqs == ("F[A]", "F[C]")
        assert "'functor' is missing" in str(err)

    def test_only_missing_keys_are_listed(self) -> None:
        ints = st.integers()
        ev = Evidence(gens={"F[A]": st.tuples(ints, ints), "B": ints, "C": ints}, eqs={"F[A]": lambda x, y: x == y})
        with pytest.raises(MissingCapabilityError) as exc_info:
            functor_tests(PAIR_FUNCTOR, ev)
        assert exc_info.value.gens == ()
        assert exc_info.value.eqs == ("F[C]",)

    def test_lookup_of_unknown_key(self) -> None:
        with pytest.raises(MissingCapabilityError):
            Evidence().gen("A")
        with pytest.raises(MissingCapabilityError):
            Evidence().eq("A")

    def test_extend_overrides(self) -> None:
        first = Evidence(gens={"A": st.just(1)})
        second = first.extend(gens={"A": st.just(2), "B": st.just(3)})
        assert set(second.gens) == {"A", "B"}
        assert first.gens["A"] is not second.gens["A"]


class TestProperty:
    def test_holds_on_equation(self) -> None:
        prop = forall("add zero", lambda n: IsEq(n + 0, n), st.integers())
        assert prop.holds(5)

    def test_holds_on_bool(self) -> None:
        prop = forall("positive", lambda n: n > 0, st.integers())
        assert prop.holds(1)
        assert not prop.holds(-1)

    def test_custom_equality(self) -> None:
        prop = forall("same parity", lambda n: IsEq(n, n + 2), st.integers(), eq=lambda x, y: x % 2 == y % 2)
        assert prop.holds(3)

    def test_rejects_other_outcomes(self) -> None:
        prop = Property("weird", lambda: 3)
        with pytest.raises(TypeError, match="expected IsEq or bool"):
            prop.holds()
