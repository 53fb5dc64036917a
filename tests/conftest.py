"""
Pytest configuration for the voice note services.

Service packages are importable through ``pythonpath = ["services"]`` in
pyproject.toml. Shared fakes and payload builders live in ``fakes.py``.
"""

import pytest
from fakes import FakeMediaStorage


@pytest.fixture
def storage():
    return FakeMediaStorage()
