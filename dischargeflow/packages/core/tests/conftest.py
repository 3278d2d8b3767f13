"""packages/core test configuration -- shared patient/task fixtures"""

import itertools
from collections.abc import Callable
from datetime import datetime

import pytest
from dischargeflow.core.generator import TaskGenerator
from dischargeflow.core.models import (
    DischargeDisposition,
    Patient,
    RiskLevel,
    RuleTable,
    Task,
    TaskStatus,
    TaskType,
)
from dischargeflow.core.rules import build_default_rule_table


@pytest.fixture
def make_patient() -> Callable[..., Patient]:
    """Factory for patients discharged 2026-01-14 10:00, Home, Low risk"""

    def _make(**overrides) -> Patient:
        data = {
            "patient_id": "MRN0001",
            "patient_name": "Test Patient",
            "discharge_date": "2026-01-14",
            "discharge_time": "10:00",
            "discharge_disposition": DischargeDisposition.HOME,
            "readmission_risk": RiskLevel.LOW,
        }
        data.update(overrides)
        return Patient(**data)

    return _make


@pytest.fixture
def rule_table() -> RuleTable:
    return build_default_rule_table()


@pytest.fixture
def generator(rule_table: RuleTable) -> TaskGenerator:
    """Generator with predictable ids: task_0001, task_0002, ..."""
    counter = itertools.count(1)
    return TaskGenerator(rule_table, id_factory=lambda: f"task_{next(counter):04d}")


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Factory for a contact_patient task with window Jan 14 10:00 - Jan 15 10:00"""

    def _make(**overrides) -> Task:
        data = {
            "task_id": "TSK001",
            "patient_id": "MRN0001",
            "type": TaskType.CONTACT_PATIENT,
            "status": TaskStatus.PENDING,
            "window_start": datetime(2026, 1, 14, 10, 0),
            "window_end": datetime(2026, 1, 15, 10, 0),
        }
        data.update(overrides)
        return Task(**data)

    return _make
