"""Law suites: rule sets of hypothesis properties for each type class."""

from .ruleset import Evidence, IsEq, Property, QualifiedProperty, RuleSet, forall
from .config import CheckConfig
from .check import (
    LawViolation,
    PropertyReport,
    Status,
    SuiteReport,
    check_property,
    check_suite,
)
from .functor import functor_tests
from .monad import monad_tests
from .bimonad import bimonad_tests, comonad_tests
from .distributive import distributive_tests
from .representable import representable_tests
from .monoid import monoid_tests
from .arrow import arrow_tests, category_tests, compose_tests, profunctor_tests, strong_tests
from .arrow_choice import arrow_choice_tests, choice_tests

__all__ = [
    # Rule sets
    "Evidence", "IsEq", "Property", "QualifiedProperty", "RuleSet", "forall",
    # Running
    "CheckConfig", "LawViolation", "PropertyReport", "Status", "SuiteReport",
    "check_property", "check_suite",
    # Suites
    "functor_tests", "monad_tests", "comonad_tests", "bimonad_tests",
    "distributive_tests", "representable_tests", "monoid_tests",
    "compose_tests", "category_tests", "profunctor_tests", "strong_tests",
    "arrow_tests", "choice_tests", "arrow_choice_tests",
]
