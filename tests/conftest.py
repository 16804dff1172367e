import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from reprcat.laws import CheckConfig, Evidence

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def load_example(stem: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"reprcat_example_{stem}", EXAMPLES_DIR / f"{stem}.py")
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def config() -> CheckConfig:
    return CheckConfig(max_examples=25, seed=20240611)


@pytest.fixture
def pair_evidence() -> Evidence:
    return load_example("pair_laws").pair_evidence()


@pytest.fixture
def reader_evidence() -> Evidence:
    return load_example("reader_laws").reader_evidence()


@pytest.fixture
def arrow_evidence() -> Evidence:
    return load_example("function_arrow_laws").function_arrow_evidence()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("REPRCAT_MAX_EXAMPLES", "REPRCAT_SEED", "REPRCAT_DERANDOMIZE"):
        monkeypatch.delenv(name, raising=False)
