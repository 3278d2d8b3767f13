"""Default task rule table

Task generation rules (hours after discharge):
- contact_patient: 0-24 (all patients)
- medication_reconciliation: 0-48 (all patients)
- followup_scheduling: 0-48 (all patients)
- facility_handoff: 0-24 (discharged to a skilled nursing facility)
- checkin_call: 48-72 (readmission risk High or Very High)
"""

from .models.enums import DischargeDisposition, RiskLevel, TaskType
from .models.patient import Patient
from .models.rule import RuleTable, TaskRule


def applies_to_all(patient: Patient) -> bool:
    return True


def discharged_to_facility(patient: Patient) -> bool:
    return patient.discharge_disposition == DischargeDisposition.SKILLED_NURSING_FACILITY


def high_readmission_risk(patient: Patient) -> bool:
    return patient.readmission_risk.rank >= RiskLevel.HIGH.rank


def build_default_rule_table() -> RuleTable:
    """Construct the standard discharge follow-up rule table"""
    return RuleTable(
        rules=(
            TaskRule(
                type=TaskType.CONTACT_PATIENT,
                label="Contact Patient",
                window_start_hours=0,
                window_end_hours=24,
                condition=applies_to_all,
            ),
            TaskRule(
                type=TaskType.MEDICATION_RECONCILIATION,
                label="Medication Reconciliation",
                window_start_hours=0,
                window_end_hours=48,
                condition=applies_to_all,
            ),
            TaskRule(
                type=TaskType.FOLLOWUP_SCHEDULING,
                label="Confirm Followup Scheduling",
                window_start_hours=0,
                window_end_hours=48,
                condition=applies_to_all,
            ),
            TaskRule(
                type=TaskType.FACILITY_HANDOFF,
                label="Facility Handoff Confirmation",
                window_start_hours=0,
                window_end_hours=24,
                condition=discharged_to_facility,
            ),
            TaskRule(
                type=TaskType.CHECKIN_CALL,
                label="48hr Check-in Call",
                window_start_hours=48,
                window_end_hours=72,
                condition=high_readmission_risk,
            ),
        )
    )


DEFAULT_RULE_TABLE: RuleTable = build_default_rule_table()
