"""
Root conftest.py — registers custom markers.

Markers:
  @pytest.mark.interactive — drives the real stdin TTY; skipped unless
                             --interactive or INTERACTIVE_TESTS=1
"""
from __future__ import annotations

import os

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "interactive: mark test as needing the real terminal on stdin (run with --interactive or INTERACTIVE_TESTS=1)",
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--interactive",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.interactive (requires a TTY on stdin)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.interactive tests unless --interactive or INTERACTIVE_TESTS=1 is set."""
    run_interactive = config.getoption("--interactive") or os.environ.get(
        "INTERACTIVE_TESTS", ""
    ).lower() in ("1", "true", "yes")
    skip = pytest.mark.skip(reason="Interactive test — run with --interactive or INTERACTIVE_TESTS=1")
    for item in items:
        if "interactive" in item.keywords and not run_interactive:
            item.add_marker(skip)
