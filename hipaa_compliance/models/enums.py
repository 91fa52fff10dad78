from enum import Enum, IntEnum

class RequirementCategory(str, Enum):
    ADMINISTRATIVE = "administrative"
    PHYSICAL = "physical"
    TECHNICAL = "technical"
    PRIVACY = "privacy"
    BREACH = "breach"

class Priority(IntEnum):
    """1 is the most urgent."""
    HIGH = 1
    MEDIUM = 2
    LOW = 3

class RecurrenceFrequency(str, Enum):
    ONE_TIME = "one_time"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"

class AnswerType(str, Enum):
    BOOLEAN = "boolean"
    SINGLE_SELECT = "single-select"
    MULTI_SELECT = "multi-select"

class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class AnswerProblem(str, Enum):
    MISSING_REQUIRED = "missing_required"
    WRONG_TYPE = "wrong_type"
    INVALID_OPTION = "invalid_option"
