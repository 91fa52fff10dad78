"""
Tests: Remediation task generation from compliance gaps.

Run with:
    pytest hipaa_compliance/tests/test_tasks.py -v
"""

from datetime import date

from hipaa_compliance.catalog import RequirementCatalog
from hipaa_compliance.engine import evaluate
from hipaa_compliance.models.enums import Priority, RecurrenceFrequency
from hipaa_compliance.models.schemas import RecurringTask
from hipaa_compliance.rules.rules_config import AssessmentRulesConfig, Condition, GapRule
from hipaa_compliance.tasks import generate_remediation_tasks, next_occurrence

START = date(2026, 1, 1)


class TestNextOccurrence:
    def test_intervals(self):
        assert next_occurrence(START, RecurrenceFrequency.DAILY) == date(2026, 1, 2)
        assert next_occurrence(START, RecurrenceFrequency.WEEKLY) == date(2026, 1, 8)
        assert next_occurrence(START, RecurrenceFrequency.MONTHLY) == date(2026, 1, 31)
        assert next_occurrence(START, RecurrenceFrequency.QUARTERLY) == date(2026, 4, 1)
        assert next_occurrence(START, RecurrenceFrequency.ANNUALLY) == date(2027, 1, 1)

    def test_one_time_has_no_next(self):
        assert next_occurrence(START, RecurrenceFrequency.ONE_TIME) is None


class TestGenerateTasks:
    def test_no_gaps_no_tasks(self, compliant_answers):
        assert generate_remediation_tasks(evaluate(compliant_answers), start=START) == []

    def test_tasks_follow_gap_order(self, noncompliant_answers):
        tasks = generate_remediation_tasks(evaluate(noncompliant_answers), start=START)
        first = tasks[0]
        assert first.requirement_code == "164.308(a)(2)"
        assert first.title == "Designate Security Officer"
        assert first.frequency == RecurrenceFrequency.ONE_TIME
        assert first.due_date == date(2026, 1, 8)
        assert first.next_due_date is None

        codes = []
        for task in tasks:
            if task.requirement_code not in codes:
                codes.append(task.requirement_code)
        assert codes == [g.clause.code for g in evaluate(noncompliant_answers).compliance_gaps]

    def test_recurring_task_next_due(self, noncompliant_answers):
        tasks = generate_remediation_tasks(evaluate(noncompliant_answers), start=START)
        training = next(t for t in tasks if t.title == "Conduct HIPAA Training")
        assert training.due_date == date(2026, 1, 8)
        assert training.next_due_date == date(2027, 1, 8)

    def test_lead_days_by_priority(self, clause_factory):
        task = RecurringTask(title="Fix", frequency=RecurrenceFrequency.QUARTERLY)
        catalog = RequirementCatalog([clause_factory("L", tasks=(task,))])
        rules = AssessmentRulesConfig(
            escalation_rules=(),
            gap_rules=(
                GapRule(name="l", when=Condition.all_of(x=False), clause_code="L",
                        gap_description="l", action="fix l", priority=Priority.LOW),
            ),
        )
        result = evaluate({}, catalog=catalog, rules=rules)
        [planned] = generate_remediation_tasks(result, start=START)
        assert planned.priority == Priority.LOW
        assert planned.due_date == date(2026, 4, 1)
        assert planned.next_due_date == date(2026, 6, 30)

    def test_custom_lead_days(self, noncompliant_answers):
        lead = {Priority.HIGH: 1, Priority.MEDIUM: 2, Priority.LOW: 3}
        tasks = generate_remediation_tasks(evaluate(noncompliant_answers), start=START, lead_days=lead)
        assert all(t.due_date == date(2026, 1, 2) for t in tasks)

    def test_clause_hit_twice_yields_tasks_once(self, clause_factory):
        task = RecurringTask(title="Fix")
        catalog = RequirementCatalog([clause_factory("D", tasks=(task,))])
        rules = AssessmentRulesConfig(
            escalation_rules=(),
            gap_rules=(
                GapRule(name="one", when=Condition.all_of(a=False), clause_code="D",
                        gap_description="one", action="act one"),
                GapRule(name="two", when=Condition.all_of(b=False), clause_code="D",
                        gap_description="two", action="act two"),
            ),
        )
        result = evaluate({}, catalog=catalog, rules=rules)
        assert result.gap_count == 2
        assert len(generate_remediation_tasks(result, start=START)) == 1
