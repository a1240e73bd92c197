"""Global pytest configuration.

Conditionally registers the fixture plugin `tests.algorithms.sample_graphs`.
Avoid importing the plugin directly to let pytest apply assertion rewriting.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("tests.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.algorithms.sample_graphs"]
