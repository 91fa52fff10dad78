"""
Assessment Engine — maps a questionnaire AnswerSet onto the requirement
catalog and produces an AssessmentResult.

Passes, in order:
  1. Applicability  — every clause applies; escalation rules may raise its
                      effective priority (always the more urgent value wins).
  2. Gap detection  — ordered gap rules emit gaps + recommended actions;
                      urgent actions are prepended ahead of all others.
  3. Scoring        — weighted factors give the base score.
  4. Risk tier      — first matching threshold on gap count / base score;
                      bonuses are added to the reported score afterwards.
  5. Assembly       — stable sorts by priority.

The engine holds only immutable references (catalog + rule set), so a
single instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Optional

from hipaa_compliance.catalog import RequirementCatalog, get_requirement_catalog
from hipaa_compliance.models.enums import Priority
from hipaa_compliance.models.schemas import (
    ApplicableRequirement,
    AssessmentResult,
    ComplianceGap,
    RequirementClause,
)
from hipaa_compliance.rules.answers import Answers
from hipaa_compliance.rules.rules_config import (
    AssessmentRulesConfig,
    EscalationRule,
    get_rules_config,
)
from hipaa_compliance.rules.scoring import apply_bonuses, compute_base_score, derive_risk_level

logger = logging.getLogger(__name__)


class AssessmentEngine:
    """Stateless evaluator bound to one requirement catalog and one rule set."""

    def __init__(
        self,
        catalog: Optional[RequirementCatalog] = None,
        rules: Optional[AssessmentRulesConfig] = None,
    ):
        self.catalog = catalog if catalog is not None else get_requirement_catalog()
        self.rules = rules if rules is not None else get_rules_config()

        # Rules pointing at clauses the catalog no longer has are skipped at
        # evaluation time, which under-reports gaps. Flag the drift once here.
        missing = sorted(c for c in self.rules.referenced_codes() if c not in self.catalog)
        if missing:
            logger.warning(
                f"Assessment rules reference {len(missing)} clause code(s) absent from "
                f"catalog {self.catalog.version}: {', '.join(missing)}; those rules will be skipped"
            )

    # ── Public entry point ───────────────────────────────

    def evaluate(self, answers: Mapping[str, Any] | Answers | None) -> AssessmentResult:
        """Evaluate an AnswerSet. Never raises for missing or odd answers."""
        view = answers if isinstance(answers, Answers) else Answers(answers)

        applicable = self._applicability_pass(view)
        gaps, actions = self._gap_pass(view)
        base_score = compute_base_score(view, self.rules)
        # Tier is judged before bonuses
        risk = derive_risk_level(len(gaps), base_score, self.rules)
        score = apply_bonuses(base_score, view, self.rules)

        result = AssessmentResult(
            applicable_requirements=tuple(sorted(applicable, key=lambda r: r.effective_priority)),
            compliance_gaps=tuple(sorted(gaps, key=lambda g: g.effective_priority)),
            initial_score=score,
            risk_level=risk,
            recommended_actions=tuple(actions),
            catalog_version=self.catalog.version,
        )

        logger.info(
            f"Assessment evaluated: score={score} risk={risk.value} "
            f"gaps={len(gaps)} actions={len(actions)}"
        )
        return result

    # ── Pass 1: applicability + priority escalation ──────

    def _applicability_pass(self, answers: Answers) -> list[ApplicableRequirement]:
        active = [r for r in self.rules.escalation_rules if r.when.holds(answers)]
        views: list[ApplicableRequirement] = []
        for clause in self.catalog:
            effective = self._effective_priority(clause, active)
            if effective != clause.base_priority:
                logger.debug(f"Escalated {clause.code}: {clause.base_priority.value} → {effective.value}")
            views.append(ApplicableRequirement(clause=clause, effective_priority=effective))
        return views

    @staticmethod
    def _effective_priority(clause: RequirementClause, active: list[EscalationRule]) -> Priority:
        effective = int(clause.base_priority)
        for rule in active:
            if rule.category is not None and clause.category != rule.category:
                continue
            if rule.clause_code is not None and clause.code != rule.clause_code:
                continue
            if rule.mode == "step":
                candidate = max(int(Priority.HIGH), int(clause.base_priority) - 1)
            else:
                candidate = int(rule.priority)
            effective = min(effective, candidate)
        return Priority(effective)

    # ── Pass 2: gap detection ────────────────────────────

    def _gap_pass(self, answers: Answers) -> tuple[list[ComplianceGap], list[str]]:
        gaps: list[ComplianceGap] = []
        actions: list[str] = []

        for rule in self.rules.gap_rules:
            if not rule.when.holds(answers):
                continue
            clause = self.catalog.lookup(rule.clause_code)
            if clause is None:
                logger.debug(f"Gap rule '{rule.name}' skipped: {rule.clause_code} not in catalog")
                continue
            gaps.append(ComplianceGap(
                clause=clause,
                gap_description=rule.gap_description,
                effective_priority=rule.priority,
            ))
            actions.append(rule.action)

        urgent = [r.action for r in self.rules.urgent_actions if r.when.holds(answers)]
        return gaps, urgent + actions


# ── Module-level convenience ─────────────────────────────

@lru_cache()
def get_engine() -> AssessmentEngine:
    """Engine over the configured catalog and rule set (built once per process)."""
    return AssessmentEngine()


def evaluate(
    answers: Mapping[str, Any] | None,
    catalog: Optional[RequirementCatalog] = None,
    rules: Optional[AssessmentRulesConfig] = None,
) -> AssessmentResult:
    """
    Evaluate an AnswerSet against the requirement catalog.

    Usage:
        from hipaa_compliance.engine import evaluate
        result = evaluate({"has_security_officer": True, "had_breach": False})
    """
    if catalog is None and rules is None:
        return get_engine().evaluate(answers)
    return AssessmentEngine(catalog, rules).evaluate(answers)
