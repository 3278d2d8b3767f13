"""Patient Domain Model -- the discharge record tasks are generated from

The core only reads the reference date/time and the classification
attributes tested by rule conditions; everything else is carried along
for consumers.
"""

from pydantic import BaseModel, Field

from .enums import DischargeDisposition, RiskLevel


class Patient(BaseModel):
    """Discharged patient record"""

    patient_id: str = Field(description="Unique identifier (MRN)")
    discharge_date: str = Field(description="Discharge date, YYYY-MM-DD")
    discharge_time: str | None = Field(
        default=None, description="Discharge time, HH:MM; midnight when absent"
    )
    discharge_disposition: DischargeDisposition = Field(description="Discharge disposition")
    readmission_risk: RiskLevel = Field(description="Readmission risk tier")

    patient_name: str = Field(default="", description="Display name")
    primary_diagnosis: str | None = Field(default=None, description="Primary diagnosis")
    attending_physician: str | None = Field(default=None, description="Attending physician")
    pcp_name: str | None = Field(default=None, description="Primary care physician")
    phone: str | None = Field(default=None, description="Contact phone")
    notes: str | None = Field(default=None, description="Free text notes")
