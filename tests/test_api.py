"""
API Tests for the skills matrix service.

Tests for the REST API endpoints:
- GET /health
- GET /skills, /positions, /people
- GET /people/{id}/skill-gaps
- GET /people/{id}/target/{position_id}
- GET /people/{id}/career-readiness
- GET /supply
- GET /summary

Run with:
    pytest tests/test_api.py -v
"""

import pytest
from fastapi import HTTPException

from skills_matrix.api import routes
from skills_matrix.main import app
from skills_matrix.models.entities import Person
from skills_matrix.utils.storage import Dataset, DatasetError, DatasetStore


@pytest.fixture
def orphaned(sample) -> Dataset:
    """Sample catalog and positions plus one person whose position no longer exists."""
    ghost = Person(id="e_ghost", name="Gary Ghost", position_id="p_retired", acquired={"s_comm": 3})
    return Dataset(skills=sample.skills, positions=sample.positions, people=(ghost,))


# ============================================================================
# Listings
# ============================================================================

class TestListings:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_list_skills_and_positions(self, client):
        skills = client.get("/skills").json()
        positions = client.get("/positions").json()

        assert len(skills) == 12
        assert positions[0] == {
            "id": "p_analyst",
            "name": "Data Analyst",
            "requirements": {
                "s_data_analysis": 3,
                "s_sql": 3,
                "s_excel": 2,
                "s_comm": 2,
                "s_technical_writing": 2,
                "s_problem_solving": 2,
            },
        }

    def test_search_people(self, client):
        response = client.get("/people", params={"q": "coordinator"})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["e_bjones", "e_ebrown"]

    def test_people_listing_carries_deficit_counts(self, client):
        response = client.get("/people")

        assert [(p["id"], p["deficit_count"]) for p in response.json()] == [
            ("e_jdoe", 3),
            ("e_asmith", 0),
            ("e_bjones", 0),
            ("e_cwilson", 1),
            ("e_dlee", 1),
            ("e_ebrown", 0),
        ]

    def test_people_listing_without_known_position(self, client, orphaned):
        app.dependency_overrides[routes.get_dataset] = lambda: orphaned

        response = client.get("/people")

        assert [(p["id"], p["deficit_count"]) for p in response.json()] == [("e_ghost", None)]


# ============================================================================
# Gap analysis
# ============================================================================

class TestSkillGaps:
    def test_current_role_gaps(self, client):
        response = client.get("/people/e_jdoe/skill-gaps")

        assert response.status_code == 200
        data = response.json()
        assert data["position"]["id"] == "p_analyst"
        assert [g["skill"]["name"] for g in data["gaps"]] == [
            "Communication",
            "Data Analysis",
            "Excel/Spreadsheets",
            "Presentation Skills",
            "Problem Solving",
            "SQL",
            "Technical Writing",
        ]
        assert data["summary"] == {"deficit": 3, "ready": 3, "extra": 1}

        comm = data["gaps"][0]
        assert comm["required"] == 2
        assert comm["acquired"] == 1
        assert comm["gap"] == -1
        assert comm["status"] == "deficit"
        assert comm["required_label"] == "Intermediate"
        assert comm["acquired_label"] == "Beginner"

    def test_unknown_person(self, client):
        response = client.get("/people/nobody/skill-gaps")

        assert response.status_code == 404

    def test_person_with_unknown_position(self, client, orphaned):
        app.dependency_overrides[routes.get_dataset] = lambda: orphaned

        gaps = client.get("/people/e_ghost/skill-gaps")
        readiness = client.get("/people/e_ghost/career-readiness")

        assert gaps.status_code == 404
        assert gaps.json() == {"detail": "Position not found"}
        assert readiness.status_code == 200
        assert readiness.json()["current_position"] is None
        assert len(readiness.json()["rankings"]) == 5

    def test_target_role(self, client):
        response = client.get("/people/e_cwilson/target/p_analyst")

        assert response.status_code == 200
        data = response.json()
        assert data["is_ready"] is False
        assert [(g["skill"]["id"], g["gap"]) for g in data["needed_skills"]] == [("s_sql", -1)]

    def test_target_role_ready(self, client):
        response = client.get("/people/e_asmith/target/p_cust_success")

        assert response.json()["is_ready"] is True
        assert response.json()["needed_skills"] == []

    def test_unknown_target_position(self, client):
        response = client.get("/people/e_jdoe/target/p_astronaut")

        assert response.status_code == 404


# ============================================================================
# Career readiness, supply, summary
# ============================================================================

class TestAggregates:
    def test_career_readiness(self, client):
        response = client.get("/people/e_asmith/career-readiness")

        assert response.status_code == 200
        data = response.json()
        assert data["current_position"]["id"] == "p_cust_success"
        assert len(data["rankings"]) == 5
        assert [r["position"]["id"] for r in data["ready_positions"]] == ["p_cust_success"]
        assert data["potential_positions"][0]["position"]["id"] == "p_coordinator"
        assert data["potential_gap_threshold"] == 3

    def test_supply(self, client):
        response = client.get("/supply")

        assert response.status_code == 200
        coordinator = response.json()["positions"][-1]
        assert coordinator["position"]["id"] == "p_coordinator"
        assert coordinator["total_supply"] == 4
        assert coordinator["status"] == "medium"
        assert [p["id"] for p in coordinator["ready_people"]] == ["e_bjones", "e_ebrown"]

    def test_summary(self, client):
        response = client.get("/summary")

        assert response.json() == {
            "total_employees": 6,
            "positions_filled": 4,
            "total_skills": 12,
            "readiness_percentage": 85,
        }


def test_get_dataset_failure_becomes_http_500(monkeypatch):
    def _broken():
        raise DatasetError("Invalid dataset")

    monkeypatch.setattr(routes, "_load_dataset", _broken)

    with pytest.raises(HTTPException) as exc:
        routes.get_dataset()

    assert exc.value.status_code == 500
    assert "Invalid dataset" in exc.value.detail


def test_undecodable_dataset_file_becomes_http_500(monkeypatch, tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"skills": [{"id": "s", "name": "\xff\xfe"}]}')
    monkeypatch.setattr(routes, "store", DatasetStore(dataset_path=path))
    routes._load_dataset.cache_clear()

    with pytest.raises(HTTPException) as exc:
        routes.get_dataset()

    routes._load_dataset.cache_clear()
    assert exc.value.status_code == 500
