"""Enumerations -- task status state machine, task kinds, patient classifications

Contains the TaskStatus state machine, TaskType, DischargeDisposition,
RiskLevel and ErrorCode enums, plus the VALID_TRANSITIONS table and the
TERMINAL_STATES set.
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Follow-up task lifecycle status"""

    UPCOMING = "upcoming"
    PENDING = "pending"
    OVERDUE = "overdue"
    COMPLETED = "completed"


# upcoming -> pending/overdue happens with the passage of time only;
# explicit completion is accepted from pending and overdue.
VALID_TRANSITIONS: dict[TaskStatus, set[TaskStatus]] = {
    TaskStatus.UPCOMING: {TaskStatus.PENDING, TaskStatus.OVERDUE},
    TaskStatus.PENDING: {TaskStatus.COMPLETED, TaskStatus.OVERDUE},
    TaskStatus.OVERDUE: {TaskStatus.COMPLETED},
    TaskStatus.COMPLETED: set(),
}

TERMINAL_STATES: set[TaskStatus] = {
    TaskStatus.COMPLETED,
}


class TaskType(StrEnum):
    """Follow-up task kinds produced by the rule table"""

    CONTACT_PATIENT = "contact_patient"
    MEDICATION_RECONCILIATION = "medication_reconciliation"
    FOLLOWUP_SCHEDULING = "followup_scheduling"
    FACILITY_HANDOFF = "facility_handoff"
    CHECKIN_CALL = "checkin_call"


class DischargeDisposition(StrEnum):
    """Where the patient went after discharge"""

    HOME = "Home"
    HOME_WITH_HOME_HEALTH = "Home with home health"
    SKILLED_NURSING_FACILITY = "Skilled nursing facility"


class RiskLevel(StrEnum):
    """Readmission risk tier (ordinal)"""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"

    @property
    def rank(self) -> int:
        """Position of the tier in the ordering, LOW == 0"""
        return list(RiskLevel).index(self)


class ErrorCode(StrEnum):
    """Recoverable failure kinds reported to callers"""

    INVALID_INPUT = "INVALID_INPUT"
    ALREADY_COMPLETED = "ALREADY_COMPLETED"
    WINDOW_NOT_OPEN_YET = "WINDOW_NOT_OPEN_YET"
    NOT_FOUND = "NOT_FOUND"


def validate_transition(from_status: TaskStatus, to_status: TaskStatus) -> bool:
    """Check whether a status transition is legal

    Args:
        from_status: current status
        to_status: target status

    Returns:
        True if the transition is legal, otherwise False
    """
    allowed = VALID_TRANSITIONS.get(from_status, set())
    return to_status in allowed
