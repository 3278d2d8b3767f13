"""CLI entry point -- python -m dischargeflow.core <command>

Supported commands:
  generate-tasks <patients.json>  generate tasks and append them to the task file
  summary                         print dashboard counters for the task file
"""

import sys
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .config import CoreConfig, load_core_config
from .exceptions import DischargeFlowError, InvalidInputError
from .generator import TaskGenerator
from .logging_config import setup_logging
from .models.patient import Patient
from .rules import build_default_rule_table
from .stats import dashboard_stats
from .store.json_store import JsonFileTaskStore
from .store.protocols import TaskStore

USAGE = """Usage: python -m dischargeflow.core <command>
Commands:
  generate-tasks <patients.json>  generate tasks and append them to the task file
  summary                         print dashboard counters for the task file"""


def main(argv: list[str] | None = None) -> int:
    """CLI main entry"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE)
        return 1

    config = load_core_config()
    setup_logging(config)
    command = args[0]

    try:
        if command == "generate-tasks" and len(args) == 2:
            return generate_tasks_command(config, Path(args[1]))
        if command == "summary" and len(args) == 1:
            return summary_command(config)
    except InvalidInputError as exc:
        print(f"Patient {exc.patient_id}: {exc}", file=sys.stderr)
        return 1
    except DischargeFlowError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Unknown command: {' '.join(args)}")
    print(USAGE)
    return 1


def generate_tasks_command(config: CoreConfig, patients_file: Path) -> int:
    """Generate tasks for every patient in a JSON array file"""
    try:
        patients = TypeAdapter(list[Patient]).validate_json(patients_file.read_bytes())
    except (OSError, ValidationError) as exc:
        print(f"Cannot read patients from {patients_file}: {exc}", file=sys.stderr)
        return 1

    generator = TaskGenerator(build_default_rule_table())
    new_tasks = generator.generate_for_many(patients)

    store: TaskStore = JsonFileTaskStore(config.tasks_path)
    store.save([*store.load(), *new_tasks])

    print(f"Generated {len(new_tasks)} tasks for {len(patients)} patients -> {config.tasks_path}")
    return 0


def summary_command(config: CoreConfig) -> int:
    """Print dashboard counters for the configured task file"""
    tasks = JsonFileTaskStore(config.tasks_path).load()
    stats = dashboard_stats(
        tasks,
        datetime.now(),
        urgent_within_hours=config.urgent_window_hours,
    )
    print(f"Task file:       {config.tasks_path}")
    print(f"Patients:        {stats.total_patients}")
    print(f"Pending:         {stats.pending_tasks}")
    print(f"Overdue:         {stats.overdue_tasks}")
    print(f"Completed today: {stats.completed_today}")
    print(f"Urgent:          {stats.urgent_tasks}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
