"""Dashboard statistics tests"""

from datetime import datetime, timedelta

from dischargeflow.core.models import DashboardStats, TaskStatus
from dischargeflow.core.stats import dashboard_stats

NOW = datetime(2026, 1, 15, 8, 0)


class TestDashboardStats:
    def test_counts(self, make_task):
        tasks = [
            # pending, deadline in 2h -> also urgent
            make_task(task_id="A", patient_id="MRN0001"),
            # pending, deadline tomorrow
            make_task(task_id="B", patient_id="MRN0001", window_end=NOW + timedelta(days=1)),
            # overdue
            make_task(task_id="C", patient_id="MRN0002", window_end=NOW - timedelta(hours=1)),
            # completed today
            make_task(
                task_id="D",
                patient_id="MRN0003",
                status=TaskStatus.COMPLETED,
                completed_at=NOW - timedelta(hours=2),
            ),
            # completed yesterday
            make_task(
                task_id="E",
                patient_id="MRN0003",
                status=TaskStatus.COMPLETED,
                completed_at=NOW - timedelta(days=1),
            ),
        ]

        assert dashboard_stats(tasks, NOW) == DashboardStats(
            total_patients=3,
            pending_tasks=2,
            overdue_tasks=1,
            completed_today=1,
            urgent_tasks=1,
        )

    def test_explicit_patient_count_and_threshold(self, make_task):
        tasks = [make_task(window_end=NOW + timedelta(hours=6))]
        stats = dashboard_stats(tasks, NOW, total_patients=10, urgent_within_hours=8)
        assert stats.total_patients == 10
        assert stats.urgent_tasks == 1

    def test_empty(self):
        stats = dashboard_stats([], NOW)
        assert stats.model_dump() == {
            "total_patients": 0,
            "pending_tasks": 0,
            "overdue_tasks": 0,
            "completed_today": 0,
            "urgent_tasks": 0,
        }
