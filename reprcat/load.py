from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from reprcat.laws.ruleset import RuleSet

logger = logging.getLogger(__name__)


def load_suites_from_file(path: str) -> list[RuleSet] | str:
    """Load a .py file, call every ``*_laws()`` entry-point, and return the rule sets.

    An entry-point is any public callable in the executed module whose name
    ends in ``_laws``. It is called with no arguments and may return a
    :class:`~reprcat.laws.ruleset.RuleSet` or an iterable of them.

    Returns the rule sets in definition order on success, or an error string
    on any failure. One failing entry-point fails the whole file.
    """
    try:
        with open(path) as f:
            source = f.read()
    except OSError as e:
        return f"Could not read file: {e}"

    namespace: dict[str, Any] = {"__name__": "__reprcat_suite__", "__file__": path}
    try:
        exec("from reprcat import *", namespace)
        exec("from reprcat.laws import *", namespace)
    except Exception as e:
        return f"Failed to import reprcat builtins: {e}"

    try:
        exec(compile(source, path, "exec"), namespace)
    except Exception as e:
        return f"Code execution failed: {e}"

    candidates = [
        (name, obj)
        for name, obj in namespace.items()
        if callable(obj) and re.search(r"_laws$", name) and not name.startswith("_")
    ]
    if not candidates:
        return "No callable *_laws entry-point found in file"

    suites: list[RuleSet] = []
    for name, fn in candidates:
        try:
            result = fn()
        except Exception as e:
            return f"'{name}()' raised {type(e).__name__}: {e}"
        match result:
            case RuleSet():
                suites.append(result)
            case Iterable() if not isinstance(result, (str, bytes)):
                items = list(result)
                bad = [type(x).__name__ for x in items if not isinstance(x, RuleSet)]
                if bad:
                    return f"'{name}()' returned non-RuleSet items: {bad}"
                suites.extend(items)
            case _:
                return f"'{name}()' returned {type(result).__name__}, expected RuleSet"
        logger.debug("Loaded %s() from %s", name, path)

    return suites
