import pytest
from hypothesis import strategies as st

from reprcat.eq import default_eq
from reprcat.errors import MissingCapabilityError, WitnessConflictError
from reprcat.instances import PAIR, READER, WITNESSES, PairRepresentable, ReaderRepresentable
from reprcat.laws import CheckConfig, Evidence, Status, check_suite, representable_tests
from reprcat.representable import Registry


class TestPairWitness:
    def test_index_reads_slots(self) -> None:
        at = PAIR.index(("foo", "bar"))
        assert at(True) == "foo"
        assert at(False) == "bar"

    def test_tabulate_fills_slots(self) -> None:
        assert PAIR.tabulate(lambda b: "foo" if b else "bar") == ("foo", "bar")

    def test_round_trips(self) -> None:
        assert PAIR.tabulate(PAIR.index((1, 2))) == (1, 2)
        g = lambda b: int(b) * 7  # noqa: E731
        assert PAIR.index(PAIR.tabulate(g))(True) == 7
        assert PAIR.index(PAIR.tabulate(g))(False) == 0

    def test_representation_is_bool(self) -> None:
        assert PAIR.representation is bool


class TestReaderWitness:
    def test_index_and_tabulate_are_identity(self) -> None:
        f = lambda e: e + 1  # noqa: E731
        assert READER.index(f) is f
        assert READER.tabulate(f) is f

    def test_repr_names_representation(self) -> None:
        assert repr(ReaderRepresentable(int)) == "READER[int]"
        assert ReaderRepresentable(str).representation is str


class TestCompose:
    def test_pair_of_pairs(self) -> None:
        pp = PAIR.compose(PAIR)
        fga = ((1, 2), (3, 4))

        assert pp.representation == (bool, bool)
        assert pp.index(fga)((True, False)) == 2
        assert pp.index(fga)((False, True)) == 3
        assert pp.tabulate(lambda rr: rr) == (
            ((True, True), (True, False)),
            ((False, True), (False, False)),
        )
        assert pp.tabulate(pp.index(fga)) == fga

    def test_composed_functor_maps_both_layers(self) -> None:
        pp = PAIR.compose(PAIR)
        assert pp.functor.map(((1, 2), (3, 4)), lambda x: x * 10) == ((10, 20), (30, 40))

    def test_reader_of_pairs(self) -> None:
        rp = ReaderRepresentable(int).compose(PAIR)
        fga = lambda e: (e, -e)  # noqa: E731

        assert rp.representation == (int, bool)
        assert rp.index(fga)((3, True)) == 3
        assert rp.index(fga)((3, False)) == -3
        assert rp.tabulate(lambda p: p)(5) == ((5, True), (5, False))

    def test_representations_are_not_reassociated(self) -> None:
        right = PAIR.compose(PAIR.compose(PAIR))
        left = PAIR.compose(PAIR).compose(PAIR)
        assert right.representation == (bool, (bool, bool))
        assert left.representation == ((bool, bool), bool)
        assert right.representation != left.representation

    def test_repr(self) -> None:
        assert repr(PAIR.compose(PAIR)) == "PAIR.compose(PAIR)"


class TestRegistry:
    def test_bundled_witnesses(self) -> None:
        assert WITNESSES.lookup("Pair") is PAIR
        assert WITNESSES.lookup("Reader") is READER
        assert WITNESSES.lookup("Pair", bool) is PAIR
        assert "Pair" in WITNESSES
        assert WITNESSES.containers == frozenset({"Pair", "Reader"})

    def test_unknown_container(self) -> None:
        with pytest.raises(MissingCapabilityError) as exc_info:
            WITNESSES.lookup("Stream")
        assert exc_info.value.witnesses == ("Stream",)

    def test_representation_mismatch(self) -> None:
        with pytest.raises(MissingCapabilityError, match="represented by"):
            WITNESSES.lookup("Pair", int)

    def test_reregistering_same_witness_is_noop(self) -> None:
        registry = Registry()
        registry.register("Pair", PAIR)
        registry.register("Pair", PAIR)
        assert registry.lookup("Pair") is PAIR

    def test_conflicting_witness(self) -> None:
        registry = Registry()
        registry.register("Pair", PAIR)
        with pytest.raises(WitnessConflictError, match="Pair"):
            registry.register("Pair", PairRepresentable())
        assert registry.lookup("Pair") is PAIR


class SwappedPair(PairRepresentable):
    """Reads slots in one order and fills them in the other."""

    def tabulate(self, f):
        return (f(False), f(True))


class DriftingPair(PairRepresentable):
    """Swaps the first pair it builds from distinct slots, then behaves."""

    def __init__(self) -> None:
        super().__init__()
        self.drifted = False

    def tabulate(self, f):
        first, second = f(True), f(False)
        if first != second and not self.drifted:
            self.drifted = True
            return (second, first)
        return (first, second)


def test_pair_satisfies_representable_laws(pair_evidence: Evidence, config: CheckConfig) -> None:
    report = check_suite(representable_tests(PAIR, pair_evidence), config)
    assert report.ok
    assert [r.name for r in report.reports] == [
        "index andThen tabulate = id",
        "tabulate andThen index = id",
    ]


def test_reader_satisfies_representable_laws(reader_evidence: Evidence, config: CheckConfig) -> None:
    report = check_suite(representable_tests(ReaderRepresentable(int), reader_evidence), config)
    assert report.ok


def test_composed_witness_satisfies_representable_laws(config: CheckConfig) -> None:
    ints = st.integers(min_value=-5, max_value=5)
    pair = st.tuples(ints, ints)
    ev = Evidence(
        gens={"F[A]": st.tuples(pair, pair), "R": st.tuples(st.booleans(), st.booleans()), "A": ints},
        eqs={"F[A]": default_eq, "A": default_eq},
    )
    assert check_suite(representable_tests(PAIR.compose(PAIR), ev), config).ok


def test_broken_witness_is_falsified(pair_evidence: Evidence, config: CheckConfig) -> None:
    report = check_suite(representable_tests(SwappedPair(), pair_evidence), config)
    assert not report.ok
    failed = {r.name for r in report.failures}
    assert "index andThen tabulate = id" in failed
    violation = report.failures[0].violation
    assert violation is not None
    assert violation.inputs


def test_drifting_witness_is_reported_not_raised(pair_evidence: Evidence) -> None:
    report = check_suite(representable_tests(DriftingPair(), pair_evidence), CheckConfig(30, seed=1))
    assert [(r.name, r.status) for r in report.reports] == [
        ("index andThen tabulate = id", Status.FALSIFIED),
        ("tabulate andThen index = id", Status.PASSED),
    ]
    violation = report.failures[0].violation
    assert violation is not None
    assert violation.property_name == "index andThen tabulate = id"
    assert violation.inputs
