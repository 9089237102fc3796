from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from deptboard.utils.helpers import coerce_number

# CIE assessments are marked out of 50 unless the entry says otherwise
DEFAULT_MAX_MARKS = 50.0

GRADE_LABELS = ["A (80%+)", "B (60-79%)", "C (40-59%)", "D (20-39%)", "F (<20%)"]


class CamelModel(BaseModel):
    """Response models serialize with the camelCase keys the dashboard reads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MarkStatus(str, Enum):
    PENDING = "PENDING"
    SUBMITTED = "SUBMITTED"
    FINALIZED = "FINALIZED"


class MarkRecord(BaseModel):
    """
    One CIE mark entry joined with its subject and student.

    Store values are loosely typed, so every default is applied here:
    missing/garbage marks become 0, a missing or zero ceiling becomes 50,
    unknown statuses become None. Status must match exactly, "pending" is
    not PENDING. Non-string names are stringified or dropped.
    """

    model_config = ConfigDict(frozen=True)

    student_id: str
    subject_id: Optional[str] = None
    subject_name: Optional[str] = None
    department: Optional[str] = None
    marks_obtained: float = 0.0
    max_marks: float = DEFAULT_MAX_MARKS
    status: Optional[MarkStatus] = None
    student_name: Optional[str] = None

    @field_validator("student_id", "subject_id", mode="before")
    @classmethod
    def _stringify_id(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("subject_name", "student_name", "department", mode="before")
    @classmethod
    def _clean_name(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str):
            return None
        return v.strip() or None

    @field_validator("marks_obtained", mode="before")
    @classmethod
    def _default_marks(cls, v):
        number = coerce_number(v)
        return number if number is not None else 0.0

    @field_validator("max_marks", mode="before")
    @classmethod
    def _default_max_marks(cls, v):
        return coerce_number(v) or DEFAULT_MAX_MARKS

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, v):
        if isinstance(v, MarkStatus):
            return v
        if isinstance(v, str):
            try:
                return MarkStatus(v)
            except ValueError:
                return None
        return None

    @property
    def percent(self) -> float:
        return self.marks_obtained / self.max_marks * 100


class GradeDistribution(BaseModel):
    labels: List[str] = GRADE_LABELS
    data: List[int] = [0, 0, 0, 0, 0]


class AlertSeverity(str, Enum):
    info = "info"
    warning = "warning"
    critical = "critical"


class Alert(BaseModel):
    id: int
    severity: AlertSeverity
    message: str
    timestamp: datetime


class OverviewResponse(CamelModel):
    grade_distribution: GradeDistribution
    alerts: List[Alert]
    faculty_count: int


class DepartmentStats(CamelModel):
    average: float = 0
    pass_percentage: float = 0
    at_risk_count: int = 0
    total_students: int = 0


class DepartmentInfo(BaseModel):
    department: str
    status: str = "active"
    message: str = "Department analytics ready"
