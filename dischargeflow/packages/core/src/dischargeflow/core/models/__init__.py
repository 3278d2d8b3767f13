"""dischargeflow Core Domain Models -- public type exports

All public model types are imported from here.
"""

from .enums import (
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    DischargeDisposition,
    ErrorCode,
    RiskLevel,
    TaskStatus,
    TaskType,
    validate_transition,
)
from .patient import Patient
from .results import DashboardStats, TransitionResult
from .rule import RuleTable, TaskRule
from .task import Task, TimeRemaining

__all__ = [
    # Enums
    "TaskStatus",
    "TaskType",
    "DischargeDisposition",
    "RiskLevel",
    "ErrorCode",
    # State machine
    "VALID_TRANSITIONS",
    "TERMINAL_STATES",
    "validate_transition",
    # Patient
    "Patient",
    # Rules
    "TaskRule",
    "RuleTable",
    # Task
    "Task",
    "TimeRemaining",
    # Results
    "TransitionResult",
    "DashboardStats",
]
