"""Configuration for property checks.

Values come from keyword arguments, or from the environment (and a
``.env`` file) via ``CheckConfig.from_env``:

    REPRCAT_MAX_EXAMPLES   examples per property (default 100)
    REPRCAT_SEED           fixed seed; unset means a fresh random run
    REPRCAT_DERANDOMIZE    "1"/"true" to derive the seed from the test itself
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from hypothesis import HealthCheck, Verbosity, settings

from ..either import Err, Ok, Result

DEFAULT_MAX_EXAMPLES = 100

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class CheckConfig:
    max_examples: int = DEFAULT_MAX_EXAMPLES
    seed: int | None = None
    derandomize: bool = False

    def __post_init__(self) -> None:
        if self.max_examples < 1:
            raise ValueError(f"max_examples must be positive, got {self.max_examples}")

    def hypothesis_settings(self) -> settings:
        """Hypothesis settings for one property run.

        No example database; a failing run is reproduced through ``seed``.
        """
        return settings(
            max_examples=self.max_examples,
            derandomize=self.derandomize,
            database=None,
            deadline=None,
            verbosity=Verbosity.quiet,
            report_multiple_bugs=False,
            print_blob=False,
            suppress_health_check=[HealthCheck.too_slow, HealthCheck.filter_too_much],
        )

    @classmethod
    def from_env(cls) -> Result[CheckConfig, ValueError]:
        """Build a config from REPRCAT_* variables, loading ``.env`` first."""
        load_dotenv()
        try:
            max_examples = int(os.getenv("REPRCAT_MAX_EXAMPLES") or DEFAULT_MAX_EXAMPLES)
            raw_seed = os.getenv("REPRCAT_SEED")
            seed = int(raw_seed) if raw_seed and raw_seed.strip() else None
            derandomize = _parse_flag("REPRCAT_DERANDOMIZE", os.getenv("REPRCAT_DERANDOMIZE", ""))
            return Ok(cls(max_examples=max_examples, seed=seed, derandomize=derandomize))
        except ValueError as e:
            return Err(e)


def _parse_flag(name: str, raw: str) -> bool:
    match raw.strip().lower():
        case value if value in _TRUE:
            return True
        case value if value in _FALSE:
            return False
        case value:
            raise ValueError(f"{name} must be a boolean flag, got {value!r}")
