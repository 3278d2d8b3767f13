"""Task generator -- turns a patient record into follow-up tasks

For every rule whose condition holds, a task is created whose window is the
rule's hour offsets applied to the discharge date/time. Times are naive
local wall-clock values; no timezone conversion happens here.
"""

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

import structlog
from ulid import ULID

from .exceptions import InvalidInputError
from .models.enums import TaskStatus
from .models.patient import Patient
from .models.rule import RuleTable
from .models.task import Task
from .rules import DEFAULT_RULE_TABLE

log = structlog.get_logger()

DEFAULT_DISCHARGE_TIME = "00:00"
_DATE_FORMAT = "%Y-%m-%d"
_TIME_FORMAT = "%H:%M"


def new_task_id() -> str:
    """Generate a unique task id (millisecond timestamp + 80 random bits)"""
    return f"task_{ULID()}"


def reference_datetime(patient: Patient) -> datetime:
    """Combine discharge date and time into the reference event time

    Args:
        patient: patient record

    Returns:
        naive datetime, exact to the minute

    Raises:
        InvalidInputError: date or time does not parse
    """
    try:
        day = datetime.strptime(patient.discharge_date.strip(), _DATE_FORMAT)
    except ValueError as exc:
        raise InvalidInputError(
            patient.patient_id, "discharge_date", patient.discharge_date
        ) from exc

    raw_time = (patient.discharge_time or "").strip() or DEFAULT_DISCHARGE_TIME
    try:
        clock = datetime.strptime(raw_time, _TIME_FORMAT)
    except ValueError as exc:
        raise InvalidInputError(
            patient.patient_id, "discharge_time", patient.discharge_time
        ) from exc

    return day.replace(hour=clock.hour, minute=clock.minute)


class TaskGenerator:
    """Applies a rule table to patient records"""

    def __init__(
        self,
        rule_table: RuleTable,
        id_factory: Callable[[], str] = new_task_id,
    ) -> None:
        self._rules = rule_table
        self._id_factory = id_factory

    @property
    def rule_table(self) -> RuleTable:
        return self._rules

    def generate(self, patient: Patient) -> list[Task]:
        """Generate tasks for one patient, in rule-table order

        Every task starts as PENDING; the status oracle corrects it to
        UPCOMING/OVERDUE on read.

        Raises:
            InvalidInputError: malformed discharge date/time
        """
        try:
            reference = reference_datetime(patient)
        except InvalidInputError as exc:
            log.warning(
                "task_generation_failed",
                patient_id=patient.patient_id,
                field=exc.field,
                value=exc.value,
            )
            raise

        tasks: list[Task] = []
        for rule in self._rules.rules:
            if not rule.applies_to(patient):
                continue
            tasks.append(
                Task(
                    task_id=self._id_factory(),
                    patient_id=patient.patient_id,
                    type=rule.type,
                    status=TaskStatus.PENDING,
                    window_start=reference + timedelta(hours=rule.window_start_hours),
                    window_end=reference + timedelta(hours=rule.window_end_hours),
                )
            )

        log.debug(
            "tasks_generated",
            patient_id=patient.patient_id,
            count=len(tasks),
        )
        return tasks

    def generate_for_many(self, patients: Iterable[Patient]) -> list[Task]:
        """Generate tasks for several patients, concatenated in input order

        A malformed patient fails the whole batch; the raised
        InvalidInputError names that patient.
        """
        all_tasks: list[Task] = []
        for patient in patients:
            all_tasks.extend(self.generate(patient))
        return all_tasks


def generate_tasks(patient: Patient) -> list[Task]:
    """Generate tasks for a patient with the default rule table"""
    return TaskGenerator(DEFAULT_RULE_TABLE).generate(patient)


def generate_tasks_for_many(patients: Iterable[Patient]) -> list[Task]:
    """Generate tasks for several patients with the default rule table"""
    return TaskGenerator(DEFAULT_RULE_TABLE).generate_for_many(patients)
