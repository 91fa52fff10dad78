"""
Value objects shared by the catalogs, the assessment engine and its consumers.
Every model is frozen: catalog entries are reference data and engine output
is recomputed per call, so nothing here is ever mutated in place.
"""

from __future__ import annotations

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .enums import (
    AnswerProblem,
    AnswerType,
    Priority,
    RecurrenceFrequency,
    RequirementCategory,
    RiskLevel,
)


# ── Requirement Catalog ──────────────────────────────────


class RecurringTask(BaseModel):
    """A remediation activity attached to a clause."""
    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    frequency: RecurrenceFrequency = RecurrenceFrequency.ONE_TIME


class RequirementClause(BaseModel):
    """One regulatory obligation, e.g. 164.308(a)(2) Assigned Security Responsibility."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    title: str
    description: str = ""
    category: RequirementCategory
    subcategory: str = ""
    base_priority: Priority = Priority.MEDIUM
    applicable_to: tuple[str, ...] = ("all",)
    evidence_required: str = ""
    recurring_tasks: tuple[RecurringTask, ...] = ()


# ── Question Catalog ─────────────────────────────────────


class QuestionOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class QuestionDefinition(BaseModel):
    """A single questionnaire item rendered by the assessment wizard."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    category: str
    prompt: str
    help_text: Optional[str] = None
    answer_type: AnswerType = AnswerType.BOOLEAN
    options: tuple[QuestionOption, ...] = ()
    required: bool = True
    triggered_clause_codes: tuple[str, ...] = ()  # informational only

    @property
    def option_values(self) -> frozenset[str]:
        return frozenset(o.value for o in self.options)


class AnswerIssue(BaseModel):
    """A caller-side validation failure for one answer."""
    model_config = ConfigDict(frozen=True)

    question_id: str
    problem: AnswerProblem
    detail: str = ""


# ── Assessment Engine output ─────────────────────────────


class ApplicableRequirement(BaseModel):
    """Evaluation view over a catalog clause; the clause itself is untouched."""
    model_config = ConfigDict(frozen=True)

    clause: RequirementClause
    effective_priority: Priority

    @property
    def escalated(self) -> bool:
        return self.effective_priority < self.clause.base_priority


class ComplianceGap(BaseModel):
    model_config = ConfigDict(frozen=True)

    clause: RequirementClause
    gap_description: str
    effective_priority: Priority = Priority.HIGH


class AssessmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    applicable_requirements: tuple[ApplicableRequirement, ...] = ()
    compliance_gaps: tuple[ComplianceGap, ...] = ()
    initial_score: int = Field(0, ge=0, le=100)
    risk_level: RiskLevel = RiskLevel.LOW
    recommended_actions: tuple[str, ...] = ()
    catalog_version: str = ""

    @property
    def gap_count(self) -> int:
        return len(self.compliance_gaps)


# ── Remediation tasks ────────────────────────────────────


class RemediationTask(BaseModel):
    """A tracked task derived from a gap clause's recurring tasks."""
    model_config = ConfigDict(frozen=True)

    requirement_code: str
    title: str
    description: str = ""
    frequency: RecurrenceFrequency = RecurrenceFrequency.ONE_TIME
    priority: Priority = Priority.HIGH
    due_date: date
    next_due_date: Optional[date] = None
