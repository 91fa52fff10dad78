"""
Scoring — weighted compliance score, risk tier derivation, and the
requirement-progress percentage shown on the dashboard.

The risk tier is judged on the base score (factors only). Bonuses are
applied afterwards and only affect the reported score.
"""

from __future__ import annotations

import logging
import math

from hipaa_compliance.models.enums import RiskLevel
from hipaa_compliance.rules.answers import Answers
from hipaa_compliance.rules.rules_config import AssessmentRulesConfig

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_base_score(answers: Answers, rules: AssessmentRulesConfig) -> int:
    """Sum the weights of every factor whose condition holds, clamped to 0..max_score."""
    score = 0
    for factor in rules.score_factors:
        if factor.when.holds(answers):
            score += factor.weight
            logger.debug(f"Score factor '{factor.name}' +{factor.weight}")
    return max(0, min(score, rules.max_score))


def apply_bonuses(base_score: int, answers: Answers, rules: AssessmentRulesConfig) -> int:
    """Add every bonus whose condition holds, capped at rules.max_score."""
    score = base_score
    for bonus in rules.score_bonuses:
        if bonus.when.holds(answers):
            score = min(rules.max_score, score + bonus.points)
            logger.debug(f"Score bonus '{bonus.name}' +{bonus.points}")
    return max(0, min(score, rules.max_score))


def compute_score(answers: Answers, rules: AssessmentRulesConfig) -> int:
    """Reported score: base score plus bonuses. Returns an int in 0..max_score."""
    return apply_bonuses(compute_base_score(answers, rules), answers, rules)


def derive_risk_level(gap_count: int, score: int, rules: AssessmentRulesConfig) -> RiskLevel:
    """First threshold whose gap count or score bound matches wins. Pass the base score."""
    for threshold in rules.risk_thresholds:
        if gap_count >= threshold.min_gaps or score < threshold.score_below:
            return threshold.level
    return rules.default_risk


def compliance_progress(total_requirements: int, completed_requirements: int) -> int:
    """Percentage of tracked requirements marked complete (0 when none are tracked).
    Halves round up: 1 of 8 is 13%."""
    if total_requirements <= 0:
        return 0
    pct = _round_half_up(completed_requirements / total_requirements * 100)
    return max(0, min(pct, 100))
