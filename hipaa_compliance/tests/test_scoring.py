"""
Tests: Score computation, risk tiers and compliance progress.

Run with:
    pytest hipaa_compliance/tests/test_scoring.py -v
"""

import pytest

from hipaa_compliance.models.enums import RiskLevel
from hipaa_compliance.rules.answers import Answers
from hipaa_compliance.rules.rules_config import (
    AssessmentRulesConfig,
    Condition,
    ScoreBonus,
    ScoreFactor,
)
from hipaa_compliance.rules.scoring import (
    apply_bonuses,
    compliance_progress,
    compute_base_score,
    compute_score,
    derive_risk_level,
)

RULES = AssessmentRulesConfig()


class TestRiskLevel:
    @pytest.mark.parametrize("score, expected", [
        (0, RiskLevel.CRITICAL),
        (29, RiskLevel.CRITICAL),
        (30, RiskLevel.HIGH),
        (49, RiskLevel.HIGH),
        (50, RiskLevel.MEDIUM),
        (69, RiskLevel.MEDIUM),
        (70, RiskLevel.LOW),
        (100, RiskLevel.LOW),
    ])
    def test_score_boundaries_without_gaps(self, score, expected):
        assert derive_risk_level(0, score, RULES) == expected

    @pytest.mark.parametrize("gaps, expected", [
        (1, RiskLevel.MEDIUM),
        (2, RiskLevel.MEDIUM),
        (3, RiskLevel.HIGH),
        (4, RiskLevel.HIGH),
        (5, RiskLevel.CRITICAL),
        (7, RiskLevel.CRITICAL),
    ])
    def test_gap_boundaries_with_high_score(self, gaps, expected):
        assert derive_risk_level(gaps, 95, RULES) == expected

    def test_gap_count_overrides_good_score(self):
        assert derive_risk_level(5, 80, RULES) == RiskLevel.CRITICAL


class TestComputeScore:
    def test_default_maximum_is_95(self, compliant_answers):
        assert compute_score(Answers(compliant_answers), RULES) == 95

    def test_bonus_capped_at_max(self):
        rules = AssessmentRulesConfig(
            score_factors=(ScoreFactor(name="a", when=Condition.all_of(a=True), weight=98),),
            score_bonuses=(ScoreBonus(name="b", when=Condition.all_of(a=True), points=5),),
        )
        assert compute_score(Answers({"a": True}), rules) == 100

    def test_base_score_excludes_bonus(self):
        answers = Answers({"had_breach": True, "has_incident_plan": True})
        # incident plan only; no cloud use keeps vendor points
        assert compute_base_score(answers, RULES) == 20
        assert apply_bonuses(20, answers, RULES) == 25
        assert compute_score(answers, RULES) == 25

    def test_no_bonus_without_breach(self, compliant_answers):
        answers = Answers(compliant_answers)
        assert apply_bonuses(compute_base_score(answers, RULES), answers, RULES) == 95

    def test_string_answers_read_as_truthy(self):
        answers = Answers({"has_security_officer": "yes", "had_breach": "no"})
        # security officer + no prior breach + no cloud vendors
        assert compute_score(answers, RULES) == 30

    def test_non_boolean_answers_do_not_raise(self):
        answers = Answers({"has_security_officer": {"odd": 1}, "staff_training": 3.0})
        assert 0 <= compute_score(answers, RULES) <= 100


class TestComplianceProgress:
    @pytest.mark.parametrize("total, done, expected", [
        (0, 0, 0),
        (10, 0, 0),
        (10, 5, 50),
        (3, 1, 33),
        (3, 2, 67),
        (8, 1, 13),
        (8, 3, 38),
        (4, 4, 100),
    ])
    def test_progress(self, total, done, expected):
        assert compliance_progress(total, done) == expected
