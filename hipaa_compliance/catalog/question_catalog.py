"""
Question Catalog — the assessment wizard's questionnaire, grouped into a
fixed, ordered list of categories.

Strict mode rejects bad entries at load time. Lenient mode logs and drops
them so the remaining questionnaire can still be served.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from hipaa_compliance.catalog.errors import CatalogLoadError
from hipaa_compliance.models.enums import AnswerType
from hipaa_compliance.models.schemas import QuestionDefinition

logger = logging.getLogger(__name__)


class QuestionCatalog:
    """Questionnaire items in declaration order plus the ordered category list."""

    def __init__(
        self,
        categories: Iterable[str],
        questions: Iterable[QuestionDefinition],
        version: str = "",
        strict: bool = True,
    ):
        self._categories: tuple[str, ...] = tuple(categories)
        if len(set(self._categories)) != len(self._categories):
            raise CatalogLoadError("Duplicate entries in question category list")

        self._questions: list[QuestionDefinition] = []
        self._by_id: dict[str, QuestionDefinition] = {}
        for question in questions:
            problem = self._check(question)
            if problem:
                if strict:
                    raise CatalogLoadError(problem)
                logger.warning(f"Dropping question '{question.id}': {problem}")
                continue
            self._questions.append(question)
            self._by_id[question.id] = question

        self.version = version

    def _check(self, question: QuestionDefinition) -> str:
        if question.id in self._by_id:
            return f"Duplicate question id: {question.id}"
        if question.category not in self._categories:
            return f"Question '{question.id}' has unknown category '{question.category}'"
        if question.answer_type == AnswerType.BOOLEAN and question.options:
            return f"Boolean question '{question.id}' must not declare options"
        if question.answer_type != AnswerType.BOOLEAN and not question.options:
            return f"Select question '{question.id}' has no options"
        values = [o.value for o in question.options]
        if len(set(values)) != len(values):
            return f"Question '{question.id}' has duplicate option values"
        return ""

    def list_categories(self) -> list[str]:
        return list(self._categories)

    def list_questions_by_category(self, category: str) -> list[QuestionDefinition]:
        return [q for q in self._questions if q.category == category]

    def get(self, question_id: str) -> Optional[QuestionDefinition]:
        return self._by_id.get(question_id)

    def required_ids(self) -> list[str]:
        return [q.id for q in self._questions if q.required]

    def __iter__(self) -> Iterator[QuestionDefinition]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __repr__(self) -> str:
        return f"QuestionCatalog(version={self.version!r}, questions={len(self)})"
