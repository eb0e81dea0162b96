"""
Shared test fixtures: API test client and sample calculation fields.
"""

import pytest
from fastapi.testclient import TestClient

from estructura.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def slab_fields():
    """A common 6m x 4m slab."""
    return {"length": "6", "width": "4"}


@pytest.fixture
def wall_fields():
    """A 3m high, 10m long wall with out-of-range density."""
    return {"height": 3, "length": 10, "thickness": 4, "density": 30}
