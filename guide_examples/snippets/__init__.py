"""
Standalone examples.

Each module prints its own output from ``main()`` and can be run directly
(``python -m guide_examples.snippets.control_flow``) or by name through
``run_examples.py``.
"""

from typing import Callable, Dict

from . import (
    advanced_async,
    advanced_queries,
    control_flow,
    exception_handling,
    interfaces,
    middleware_and_di,
    variables,
)

SNIPPETS: Dict[str, Callable[[], None]] = {
    "variables": variables.main,
    "control-flow": control_flow.main,
    "exceptions": exception_handling.main,
    "interfaces": interfaces.main,
    "queries": advanced_queries.main,
    "async": advanced_async.main,
    "middleware": middleware_and_di.main,
}
