"""
Tests: HTTP API — catalog browsing, validation and evaluation endpoints.

Run with:
    pytest hipaa_compliance/tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from hipaa_compliance.api import create_app


@pytest.fixture(scope="module")
def client():
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["requirements_catalog"].startswith("2025.1+")


class TestCatalogRoutes:
    def test_list_requirements(self, client):
        resp = client.get("/api/catalog/requirements")
        assert resp.status_code == 200
        assert len(resp.json()) == 32

    def test_filter_by_category(self, client):
        resp = client.get("/api/catalog/requirements", params={"category": "breach"})
        assert [c["code"] for c in resp.json()] == ["164.402", "164.404", "164.406", "164.408"]

    def test_get_requirement(self, client):
        resp = client.get("/api/catalog/requirements/164.316")
        assert resp.status_code == 200
        assert resp.json()["category"] == "administrative"

    def test_unknown_requirement_404(self, client):
        resp = client.get("/api/catalog/requirements/000.000")
        assert resp.status_code == 404

    def test_categories(self, client):
        assert client.get("/api/catalog/categories").json()[0] == "administrative"

    def test_questionnaire_grouped(self, client):
        body = client.get("/api/catalog/questions").json()
        assert [g["category"] for g in body["categories"]][-1] == "Incident History"
        assert sum(len(g["questions"]) for g in body["categories"]) == 20


class TestAssessmentRoutes:
    def test_validate_reports_issues(self, client):
        resp = client.post("/api/assessment/validate", json={"answers": {"had_breach": "yes"}})
        body = resp.json()
        assert resp.status_code == 200
        assert body["valid"] is False
        assert any(i["question_id"] == "had_breach" and i["problem"] == "wrong_type" for i in body["issues"])

    def test_evaluate_rejects_incomplete(self, client):
        resp = client.post("/api/assessment/evaluate", json={"answers": {}})
        assert resp.status_code == 422

    def test_evaluate_compliant(self, client, compliant_answers):
        resp = client.post("/api/assessment/evaluate", json={"answers": compliant_answers})
        assert resp.status_code == 200
        body = resp.json()
        assert body["initial_score"] == 95
        assert body["risk_level"] == "low"
        assert body["compliance_gaps"] == []

    def test_task_plan(self, client, noncompliant_answers):
        resp = client.post(
            "/api/assessment/tasks",
            json={"answers": noncompliant_answers, "start_date": "2026-01-01"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["risk_level"] == "critical"
        assert body["tasks"][0]["due_date"] == "2026-01-08"
