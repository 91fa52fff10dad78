"""
Answer handling — a read-only view over a questionnaire AnswerSet, plus the
caller-side validation that runs before an assessment is evaluated.

The view never raises: absent or unusable answers read as False / empty so
that evaluation stays total for any input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from hipaa_compliance.models.enums import AnswerProblem, AnswerType
from hipaa_compliance.models.schemas import AnswerIssue, QuestionDefinition

_FALSE_STRINGS = {"", "false", "no", "n", "0", "off", "none"}


class Answers:
    """Immutable snapshot of an AnswerSet; the caller's mapping is copied, never touched."""

    def __init__(self, raw: Mapping[str, Any] | None = None):
        self._raw: Mapping[str, Any] = MappingProxyType(dict(raw or {}))

    def flag(self, question_id: str) -> bool:
        """Truthiness of an answer. Multi-selects are true when anything is selected."""
        value = self._raw.get(question_id)
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() not in _FALSE_STRINGS
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, Iterable):
            return any(True for _ in value)
        return False

    def selections(self, question_id: str) -> frozenset[str]:
        value = self._raw.get(question_id)
        if value is None or isinstance(value, bool):
            return frozenset()
        if isinstance(value, str):
            return frozenset([value]) if value else frozenset()
        if isinstance(value, Iterable) and not isinstance(value, Mapping):
            return frozenset(str(v) for v in value)
        return frozenset()


def _is_answered(value: Any, question: QuestionDefinition) -> bool:
    if value is None:
        return False
    if question.answer_type == AnswerType.SINGLE_SELECT:
        return value != ""
    return True


def validate_answers(
    answers: Mapping[str, Any],
    questions: Iterable[QuestionDefinition],
) -> list[AnswerIssue]:
    """
    Check an AnswerSet against the questionnaire.
    Returns a list of issues: {question_id, problem, detail} (empty = valid).
    Unknown answer keys are ignored.
    """
    issues: list[AnswerIssue] = []

    for q in questions:
        value = answers.get(q.id)

        # ── Presence ─────────────────────────────────────
        if not _is_answered(value, q):
            if q.required:
                issues.append(AnswerIssue(
                    question_id=q.id,
                    problem=AnswerProblem.MISSING_REQUIRED,
                    detail=f"Required question '{q.id}' has no answer",
                ))
            continue

        # ── Shape per answer type ────────────────────────
        if q.answer_type == AnswerType.BOOLEAN:
            if not isinstance(value, bool):
                issues.append(AnswerIssue(
                    question_id=q.id,
                    problem=AnswerProblem.WRONG_TYPE,
                    detail=f"Expected true/false, got {type(value).__name__}",
                ))
            continue

        if q.answer_type == AnswerType.SINGLE_SELECT:
            if not isinstance(value, str):
                issues.append(AnswerIssue(
                    question_id=q.id,
                    problem=AnswerProblem.WRONG_TYPE,
                    detail=f"Expected a single option value, got {type(value).__name__}",
                ))
            elif value not in q.option_values:
                issues.append(AnswerIssue(
                    question_id=q.id,
                    problem=AnswerProblem.INVALID_OPTION,
                    detail=f"'{value}' is not an option for '{q.id}'",
                ))
            continue

        # multi-select
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            issues.append(AnswerIssue(
                question_id=q.id,
                problem=AnswerProblem.WRONG_TYPE,
                detail=f"Expected a list of option values, got {type(value).__name__}",
            ))
            continue
        unknown = sorted(
            str(v) for v in value if not isinstance(v, str) or v not in q.option_values
        )
        if unknown:
            issues.append(AnswerIssue(
                question_id=q.id,
                problem=AnswerProblem.INVALID_OPTION,
                detail=f"Not options for '{q.id}': {', '.join(unknown)}",
            ))

    return issues
