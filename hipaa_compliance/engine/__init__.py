"""
Engine — the single entry point the integration layer calls:

    from hipaa_compliance.engine import evaluate
    result = evaluate(answers)
"""

from .assessment_engine import AssessmentEngine, evaluate, get_engine

__all__ = ["AssessmentEngine", "evaluate", "get_engine"]
