# tests/conftest.py
from __future__ import annotations

import pytest

from numkernel import runtime


@pytest.fixture(autouse=True)
def fresh_runtime():
    """Every test starts (and leaves) with an empty context-local runtime."""
    runtime.reset()
    yield
    runtime.reset()
