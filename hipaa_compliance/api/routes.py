"""
API routes — thin HTTP layer that delegates to the assessment engine.

Routes:
  GET  /health                     → API health check + loaded catalog versions
  POST /api/assessment/validate    → caller-side answer validation issues
  POST /api/assessment/evaluate    → AssessmentResult (422 on invalid answers)
  POST /api/assessment/tasks       → remediation tasks for the resulting gaps
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from hipaa_compliance.catalog import get_question_catalog, get_requirement_catalog
from hipaa_compliance.config import get_settings
from hipaa_compliance.engine import get_engine
from hipaa_compliance.models.schemas import AnswerIssue, AssessmentResult, RemediationTask
from hipaa_compliance.rules.answers import validate_answers
from hipaa_compliance.tasks import generate_remediation_tasks

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
assessment_router = APIRouter()


# ── Request / response schemas ───────────────────────────
class AssessmentRequest(BaseModel):
    answers: dict[str, Any] = {}


class TaskPlanRequest(BaseModel):
    answers: dict[str, Any] = {}
    start_date: Optional[date] = None


class ValidationResponse(BaseModel):
    valid: bool
    issues: list[AnswerIssue] = []


class TaskPlanResponse(BaseModel):
    risk_level: str
    initial_score: int
    tasks: list[RemediationTask] = []


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.app_name,
        "requirements_catalog": get_requirement_catalog().version,
        "questions_catalog": get_question_catalog().version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Assessment ───────────────────────────────────────────

def _validated_result(answers: dict[str, Any]) -> AssessmentResult:
    """Reject incomplete / invalid answers with 422, otherwise evaluate."""
    issues = validate_answers(answers, get_question_catalog())
    if issues:
        logger.info(f"Rejected assessment: {len(issues)} answer issue(s)")
        raise HTTPException(
            status_code=422,
            detail=[i.model_dump(mode="json") for i in issues],
        )
    return get_engine().evaluate(answers)


@assessment_router.post("/validate", response_model=ValidationResponse)
async def validate_assessment(body: AssessmentRequest):
    issues = validate_answers(body.answers, get_question_catalog())
    return ValidationResponse(valid=not issues, issues=issues)


@assessment_router.post("/evaluate", response_model=AssessmentResult)
async def evaluate_assessment(body: AssessmentRequest):
    return _validated_result(body.answers)


@assessment_router.post("/tasks", response_model=TaskPlanResponse)
async def plan_remediation_tasks(body: TaskPlanRequest):
    result = _validated_result(body.answers)
    tasks = generate_remediation_tasks(result, start=body.start_date)
    return TaskPlanResponse(
        risk_level=result.risk_level.value,
        initial_score=result.initial_score,
        tasks=tasks,
    )
