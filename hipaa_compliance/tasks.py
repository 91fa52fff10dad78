"""
Remediation task generation — turns each compliance gap's clause into a set
of tracked tasks with due dates, using the clause's recurring tasks.

Due date = start + lead time for the gap's priority.
Next due date = due date + the task's recurrence interval (None for one-time).
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from hipaa_compliance.config import get_settings
from hipaa_compliance.models.enums import Priority, RecurrenceFrequency
from hipaa_compliance.models.schemas import AssessmentResult, RemediationTask

logger = logging.getLogger(__name__)

RECURRENCE_INTERVAL_DAYS: dict[RecurrenceFrequency, Optional[int]] = {
    RecurrenceFrequency.ONE_TIME: None,
    RecurrenceFrequency.DAILY: 1,
    RecurrenceFrequency.WEEKLY: 7,
    RecurrenceFrequency.MONTHLY: 30,
    RecurrenceFrequency.QUARTERLY: 90,
    RecurrenceFrequency.ANNUALLY: 365,
}


def default_lead_days() -> dict[Priority, int]:
    settings = get_settings()
    return {
        Priority.HIGH: settings.task_lead_days_high,
        Priority.MEDIUM: settings.task_lead_days_medium,
        Priority.LOW: settings.task_lead_days_low,
    }


def next_occurrence(due: date, frequency: RecurrenceFrequency) -> Optional[date]:
    interval = RECURRENCE_INTERVAL_DAYS[frequency]
    if interval is None:
        return None
    return due + timedelta(days=interval)


def generate_remediation_tasks(
    result: AssessmentResult,
    start: Optional[date] = None,
    lead_days: Optional[dict[Priority, int]] = None,
) -> list[RemediationTask]:
    """
    One task per (gap clause, recurring task), in gap order then declared
    task order.  A clause hit by several gaps contributes its tasks once.
    """
    start = start or date.today()
    lead_days = lead_days or default_lead_days()
    tasks: list[RemediationTask] = []
    seen: set[tuple[str, str]] = set()

    for gap in result.compliance_gaps:
        due = start + timedelta(days=lead_days[gap.effective_priority])
        for recurring in gap.clause.recurring_tasks:
            key = (gap.clause.code, recurring.title)
            if key in seen:
                continue
            seen.add(key)
            tasks.append(RemediationTask(
                requirement_code=gap.clause.code,
                title=recurring.title,
                description=recurring.description,
                frequency=recurring.frequency,
                priority=gap.effective_priority,
                due_date=due,
                next_due_date=next_occurrence(due, recurring.frequency),
            ))

    logger.info(f"Generated {len(tasks)} remediation tasks from {result.gap_count} gaps")
    return tasks
