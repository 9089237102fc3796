from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from deptboard.analysis.grade_alerts import compute_overview
from deptboard.analysis.thresholds import Thresholds
from deptboard.core.config import CONFIG
from deptboard.core.errors import internal_error_response
from deptboard.core.logger import get_logger
from deptboard.core.security import require_role
from deptboard.models.marks_schemas import OverviewResponse
from deptboard.models.user_schemas import (
    FacultyCreate,
    FacultyCreated,
    FacultyResponse,
    RoleEnum,
    UserResponse,
)
from deptboard.services.faculty_directory import create_faculty, list_faculty
from deptboard.services.repository import DepartmentRepository, get_repository

router = APIRouter(prefix="/hod", tags=["HOD"])
logger = get_logger("hod")

HOD_OR_PRINCIPAL = [RoleEnum.HOD, RoleEnum.PRINCIPAL]


@router.get("/dashboard")
def hod_dashboard(current_user: dict = Depends(require_role([RoleEnum.HOD]))):
    return {
        "message": "HOD dashboard",
        "user": UserResponse.from_user(current_user),
    }


@router.get(
    "/overview",
    response_model=OverviewResponse,
    dependencies=[Depends(require_role(HOD_OR_PRINCIPAL))],
)
def hod_overview(
    department: Optional[str] = Query(None, description="Department code"),
    repository: DepartmentRepository = Depends(get_repository),
):
    """
    Overview tab: grade distribution, generated alerts and faculty headcount
    for one department.
    """
    dept = department or CONFIG.DEFAULT_DEPARTMENT
    try:
        records = repository.list_marks(dept)
        faculty_count = repository.count_faculty(dept)
        return compute_overview(records, faculty_count, Thresholds.from_settings())
    except HTTPException:
        raise
    except Exception:
        logger.exception("HOD overview failed for department %s", dept)
        return internal_error_response()


@router.get(
    "/faculty",
    response_model=List[FacultyResponse],
    dependencies=[Depends(require_role(HOD_OR_PRINCIPAL))],
)
def get_faculty(
    department: Optional[str] = Query(None, description="Department code (optional)"),
    repository: DepartmentRepository = Depends(get_repository),
):
    try:
        return list_faculty(repository, department)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Listing faculty failed")
        return internal_error_response()


@router.post(
    "/faculty",
    status_code=201,
    response_model=FacultyCreated,
    dependencies=[Depends(require_role([RoleEnum.HOD]))],
)
def add_faculty(
    payload: FacultyCreate,
    repository: DepartmentRepository = Depends(get_repository),
):
    """Create a faculty login. Repeated calls create repeated users."""
    try:
        new_id = create_faculty(repository, payload)
        return FacultyCreated(message="Faculty created successfully", id=new_id)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Adding faculty %s failed", payload.username)
        return internal_error_response()
