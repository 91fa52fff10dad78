"""
Shared fixtures for catalog, engine and API tests.
"""

from __future__ import annotations

import pytest

from hipaa_compliance.catalog import load_question_catalog, load_requirement_catalog
from hipaa_compliance.models.enums import Priority, RequirementCategory
from hipaa_compliance.models.schemas import RecurringTask, RequirementClause


# Answer keys that feed the score factors and gap rules
PRACTICE_KEYS = (
    "has_security_officer",
    "has_privacy_officer",
    "risk_assessment",
    "staff_training",
    "has_policies",
    "has_incident_plan",
)


def _profile() -> dict:
    """Organization profile answers that every complete AnswerSet carries."""
    return {
        "org_type": "dental",
        "employee_count": "6-15",
        "has_electronic_phi": True,
        "has_paper_records": False,
        "phi_transmission": ["email", "portal"],
        "uses_ehr": True,
        "has_patient_portal": True,
        "remote_access": False,
        "processes_payments": True,
        "files_insurance": True,
    }


@pytest.fixture
def compliant_answers() -> dict:
    """Every positive factor true, no breach, no cloud vendors."""
    answers = _profile()
    answers.update({key: True for key in PRACTICE_KEYS})
    answers.update({
        "uses_cloud_services": False,
        "has_business_associates": False,
        "had_breach": False,
    })
    return answers


@pytest.fixture
def noncompliant_answers() -> dict:
    """Every positive factor false: prior breach, cloud use without vendor coverage."""
    answers = _profile()
    answers.update({key: False for key in PRACTICE_KEYS})
    answers.update({
        "uses_cloud_services": True,
        "has_business_associates": False,
        "had_breach": True,
    })
    return answers


@pytest.fixture(scope="session")
def requirement_catalog():
    return load_requirement_catalog()


@pytest.fixture(scope="session")
def question_catalog():
    return load_question_catalog(strict=True)


def make_clause(
    code: str,
    category: RequirementCategory = RequirementCategory.ADMINISTRATIVE,
    priority: Priority = Priority.MEDIUM,
    tasks: tuple[RecurringTask, ...] = (),
) -> RequirementClause:
    return RequirementClause(
        code=code,
        title=f"Clause {code}",
        category=category,
        base_priority=priority,
        recurring_tasks=tasks,
    )


@pytest.fixture
def clause_factory():
    return make_clause
