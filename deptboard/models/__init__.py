# deptboard/models/__init__.py

from .marks_schemas import (
    Alert,
    AlertSeverity,
    DepartmentInfo,
    DepartmentStats,
    GradeDistribution,
    MarkRecord,
    MarkStatus,
    OverviewResponse,
)
from .user_schemas import FacultyCreate, FacultyCreated, FacultyResponse, RoleEnum

__all__ = [
    "Alert",
    "AlertSeverity",
    "DepartmentInfo",
    "DepartmentStats",
    "GradeDistribution",
    "MarkRecord",
    "MarkStatus",
    "OverviewResponse",
    "FacultyCreate",
    "FacultyCreated",
    "FacultyResponse",
    "RoleEnum",
]
