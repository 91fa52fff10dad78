from .answers import Answers, validate_answers
from .rules_config import AssessmentRulesConfig, Condition, get_rules_config, load_rules_config
from .scoring import (
    apply_bonuses,
    compliance_progress,
    compute_base_score,
    compute_score,
    derive_risk_level,
)

__all__ = [
    "Answers",
    "validate_answers",
    "AssessmentRulesConfig",
    "Condition",
    "get_rules_config",
    "load_rules_config",
    "compliance_progress",
    "apply_bonuses",
    "compute_base_score",
    "compute_score",
    "derive_risk_level",
]
