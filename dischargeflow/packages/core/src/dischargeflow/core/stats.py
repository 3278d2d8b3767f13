"""Dashboard statistics over a task collection"""

from collections.abc import Sequence
from datetime import datetime

from .collection import completed_today, overdue_only, pending_only, urgent_only
from .config import DEFAULT_URGENT_WINDOW_HOURS
from .models.results import DashboardStats
from .models.task import Task


def dashboard_stats(
    tasks: Sequence[Task],
    now: datetime,
    *,
    total_patients: int | None = None,
    urgent_within_hours: float = DEFAULT_URGENT_WINDOW_HOURS,
) -> DashboardStats:
    """Counters for the dashboard header

    Args:
        tasks: task collection
        now: reference time for status derivation
        total_patients: patient count from the patient source; defaults to
            the number of distinct patients referenced by the tasks
        urgent_within_hours: urgency threshold

    Returns:
        DashboardStats
    """
    if total_patients is None:
        total_patients = len({task.patient_id for task in tasks})

    return DashboardStats(
        total_patients=total_patients,
        pending_tasks=len(pending_only(tasks, now)),
        overdue_tasks=len(overdue_only(tasks, now)),
        completed_today=len(completed_today(tasks, now)),
        urgent_tasks=len(urgent_only(tasks, now, urgent_within_hours)),
    )
