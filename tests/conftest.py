"""
Pytest configuration and shared fixtures for the skills matrix tests.

Provides:
- A small hand-built catalog / position / person set
- An API client backed by the bundled sample dataset
"""

import pytest
from typing import Generator

from skills_matrix.models.entities import Person, Position, Skill
from skills_matrix.utils.storage import Dataset, sample_dataset


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def catalog() -> list[Skill]:
    return [
        Skill(id="a", name="Analysis"),
        Skill(id="b", name="Budgeting"),
        Skill(id="c", name="Coaching"),
    ]


@pytest.fixture
def position() -> Position:
    return Position(id="p1", name="Lead", requirements={"a": 3, "c": 1})


@pytest.fixture
def person() -> Person:
    return Person(id="e1", name="Jane Roe", position_id="p1", acquired={"a": 2, "b": 3})


@pytest.fixture
def sample() -> Dataset:
    return sample_dataset()


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture
def client(sample) -> Generator:
    """FastAPI test client with the dataset pinned to the bundled sample."""
    from fastapi.testclient import TestClient
    from skills_matrix.api.routes import get_dataset
    from skills_matrix.main import app

    app.dependency_overrides[get_dataset] = lambda: sample
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
