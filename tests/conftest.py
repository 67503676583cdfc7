"""Global pytest configuration.

Sample graphs live in ``tests/algorithms/conftest.py`` next to the tests that
use them. This module keeps test runs isolated from each other's logging and
configuration changes.
"""

from __future__ import annotations

from dataclasses import fields

import pytest

from graphsearch.config import SEARCH_CONFIG, SearchConfig


@pytest.fixture(autouse=True)
def _restore_search_config():
    """Undo changes a test makes to the global SEARCH_CONFIG."""
    saved = {f.name: getattr(SEARCH_CONFIG, f.name) for f in fields(SearchConfig)}
    yield
    for name, value in saved.items():
        setattr(SEARCH_CONFIG, name, value)
