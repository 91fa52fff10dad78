"""
Rules Config — the assessment rule set expressed as data.

Priority escalation, gap detection, score factors and risk tiers are all
declared here as ordered lists. The engine evaluates them in list order, so
the order of gaps and recommended actions is part of this config.

The built-in defaults reproduce the reference HIPAA rule set. An override
can be supplied as JSON via Settings.rules_config_path.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hipaa_compliance.catalog.errors import CatalogLoadError
from hipaa_compliance.config import get_settings
from hipaa_compliance.models.enums import Priority, RequirementCategory, RiskLevel

if TYPE_CHECKING:
    from hipaa_compliance.rules.answers import Answers

logger = logging.getLogger(__name__)


# ── Conditions ───────────────────────────────────────────

class Condition(BaseModel):
    """
    Disjunction of conjunctions over answer truthiness.

    any_of=[{"a": True, "b": True}, {"c": False}] holds when
    (a and b) or (not c).  Missing answers count as False.
    """
    model_config = ConfigDict(frozen=True)

    any_of: tuple[dict[str, bool], ...]

    @classmethod
    def all_of(cls, **expected: bool) -> "Condition":
        return cls(any_of=(expected,))

    def holds(self, answers: "Answers") -> bool:
        return any(
            all(answers.flag(key) == want for key, want in clause.items())
            for clause in self.any_of
        )

    def answer_keys(self) -> set[str]:
        return {key for clause in self.any_of for key in clause}


# ── Rule models ──────────────────────────────────────────

class EscalationRule(BaseModel):
    """
    Raise a clause's effective priority when an answer is truthy.
    Matches on category and/or code; "step" escalates one level from the
    base priority, "force" sets the given priority.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    when: Condition
    category: Optional[RequirementCategory] = None
    clause_code: Optional[str] = None
    mode: Literal["step", "force"] = "force"
    priority: Priority = Priority.HIGH


class GapRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    when: Condition
    clause_code: str
    gap_description: str
    action: str
    priority: Priority = Priority.HIGH


class UrgentActionRule(BaseModel):
    """Action prepended ahead of every other recommended action."""
    model_config = ConfigDict(frozen=True)

    name: str
    when: Condition
    action: str


class ScoreFactor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    when: Condition
    weight: int = Field(ge=0)


class ScoreBonus(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    when: Condition
    points: int = Field(ge=0)


class RiskThreshold(BaseModel):
    """Tier applies when gap_count >= min_gaps or score < score_below."""
    model_config = ConfigDict(frozen=True)

    level: RiskLevel
    min_gaps: int = Field(ge=1)
    score_below: int = Field(ge=0, le=101)


# ── Default HIPAA rule set ───────────────────────────────

BUSINESS_ASSOCIATE_CLAUSE = "164.308(b)"
TRANSMISSION_SECURITY_CLAUSE = "164.312(e)"


def _default_escalation_rules() -> tuple[EscalationRule, ...]:
    return (
        EscalationRule(
            name="electronic_phi_technical",
            when=Condition.all_of(has_electronic_phi=True),
            category=RequirementCategory.TECHNICAL,
            mode="step",
        ),
        EscalationRule(
            name="cloud_business_associates",
            when=Condition.all_of(uses_cloud_services=True),
            clause_code=BUSINESS_ASSOCIATE_CLAUSE,
        ),
        EscalationRule(
            name="phi_transmission_security",
            when=Condition.all_of(phi_transmission=True),
            clause_code=TRANSMISSION_SECURITY_CLAUSE,
        ),
    )


def _default_gap_rules() -> tuple[GapRule, ...]:
    return (
        GapRule(
            name="no_security_officer",
            when=Condition.all_of(has_security_officer=False),
            clause_code="164.308(a)(2)",
            gap_description="No Security Officer has been designated",
            action="Designate a HIPAA Security Officer immediately",
        ),
        GapRule(
            name="no_privacy_officer",
            when=Condition.all_of(has_privacy_officer=False),
            clause_code="164.530(a)",
            gap_description="No Privacy Officer has been designated",
            action="Designate a HIPAA Privacy Officer immediately",
        ),
        GapRule(
            name="no_risk_assessment",
            when=Condition.all_of(risk_assessment=False),
            clause_code="164.308(a)(1)(ii)(A)",
            gap_description="No risk assessment conducted in the past year",
            action="Conduct a comprehensive HIPAA risk assessment",
        ),
        GapRule(
            name="no_staff_training",
            when=Condition.all_of(staff_training=False),
            clause_code="164.308(a)(5)",
            gap_description="Staff have not received regular HIPAA training",
            action="Implement HIPAA training program for all staff",
        ),
        GapRule(
            name="no_written_policies",
            when=Condition.all_of(has_policies=False),
            clause_code="164.316",
            gap_description="No written HIPAA policies and procedures",
            action="Develop comprehensive HIPAA policies and procedures",
        ),
        GapRule(
            name="no_incident_plan",
            when=Condition.all_of(has_incident_plan=False),
            clause_code="164.308(a)(6)",
            gap_description="No incident response plan in place",
            action="Develop and document an incident response plan",
        ),
        GapRule(
            name="cloud_vendor_agreements",
            when=Condition.all_of(uses_cloud_services=True, has_business_associates=True),
            clause_code=BUSINESS_ASSOCIATE_CLAUSE,
            gap_description="Business Associate Agreements may be needed for cloud vendors",
            action="Review and obtain BAAs from all business associates",
        ),
    )


def _default_urgent_actions() -> tuple[UrgentActionRule, ...]:
    return (
        UrgentActionRule(
            name="breach_without_incident_plan",
            when=Condition.all_of(had_breach=True, has_incident_plan=False),
            action=(
                "URGENT: Previous breach detected without incident plan - "
                "prioritize breach notification compliance"
            ),
        ),
    )


def _default_score_factors() -> tuple[ScoreFactor, ...]:
    # Weights sum to 95, not 100; kept as observed.
    return (
        ScoreFactor(name="security_officer", when=Condition.all_of(has_security_officer=True), weight=10),
        ScoreFactor(name="privacy_officer", when=Condition.all_of(has_privacy_officer=True), weight=10),
        ScoreFactor(name="risk_assessment", when=Condition.all_of(risk_assessment=True), weight=15),
        ScoreFactor(name="staff_training", when=Condition.all_of(staff_training=True), weight=15),
        ScoreFactor(name="written_policies", when=Condition.all_of(has_policies=True), weight=15),
        ScoreFactor(name="incident_plan", when=Condition.all_of(has_incident_plan=True), weight=10),
        ScoreFactor(name="no_prior_breach", when=Condition.all_of(had_breach=False), weight=10),
        ScoreFactor(
            name="vendor_agreements",
            when=Condition(any_of=(
                {"uses_cloud_services": False},
                {"uses_cloud_services": True, "has_business_associates": True},
            )),
            weight=10,
        ),
    )


def _default_score_bonuses() -> tuple[ScoreBonus, ...]:
    return (
        ScoreBonus(
            name="breach_with_incident_plan",
            when=Condition.all_of(had_breach=True, has_incident_plan=True),
            points=5,
        ),
    )


def _default_risk_thresholds() -> tuple[RiskThreshold, ...]:
    return (
        RiskThreshold(level=RiskLevel.CRITICAL, min_gaps=5, score_below=30),
        RiskThreshold(level=RiskLevel.HIGH, min_gaps=3, score_below=50),
        RiskThreshold(level=RiskLevel.MEDIUM, min_gaps=1, score_below=70),
    )


class AssessmentRulesConfig(BaseModel):
    """Complete rule set consumed by the assessment engine."""
    model_config = ConfigDict(frozen=True)

    escalation_rules: tuple[EscalationRule, ...] = Field(default_factory=_default_escalation_rules)
    gap_rules: tuple[GapRule, ...] = Field(default_factory=_default_gap_rules)
    urgent_actions: tuple[UrgentActionRule, ...] = Field(default_factory=_default_urgent_actions)
    score_factors: tuple[ScoreFactor, ...] = Field(default_factory=_default_score_factors)
    score_bonuses: tuple[ScoreBonus, ...] = Field(default_factory=_default_score_bonuses)
    max_score: int = 100
    risk_thresholds: tuple[RiskThreshold, ...] = Field(default_factory=_default_risk_thresholds)
    default_risk: RiskLevel = RiskLevel.LOW

    def referenced_codes(self) -> set[str]:
        codes = {r.clause_code for r in self.gap_rules}
        codes.update(r.clause_code for r in self.escalation_rules if r.clause_code)
        return codes


# ── Loading ──────────────────────────────────────────────

def load_rules_config(path: str | Path | None = None) -> AssessmentRulesConfig:
    """Built-in defaults, or a JSON override when a path is given."""
    if not path:
        return AssessmentRulesConfig()

    path = Path(path)
    if not path.exists():
        raise CatalogLoadError(f"Rules config file not found: {path}")
    try:
        config = AssessmentRulesConfig.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValidationError) as e:
        raise CatalogLoadError(f"Invalid rules config {path}: {e}") from e

    logger.info(
        f"Loaded rules config from {path.name}: {len(config.gap_rules)} gap rules, "
        f"{len(config.score_factors)} score factors"
    )
    return config


@lru_cache()
def get_rules_config() -> AssessmentRulesConfig:
    """Return the configured rule set (loaded once per process)."""
    return load_rules_config(get_settings().rules_config_path or None)
