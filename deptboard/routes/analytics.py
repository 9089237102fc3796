from fastapi import APIRouter, Depends, HTTPException

from deptboard.analysis.department_stats import compute_department_stats
from deptboard.analysis.thresholds import Thresholds
from deptboard.core.errors import internal_error_response
from deptboard.core.logger import get_logger
from deptboard.core.security import get_current_active_user
from deptboard.models.marks_schemas import DepartmentInfo, DepartmentStats
from deptboard.services.repository import DepartmentRepository, get_repository

router = APIRouter(
    prefix="/analytics",
    tags=["analytics"],
    dependencies=[Depends(get_current_active_user)],
)
logger = get_logger("analytics")


@router.get("/department/{dept}/stats", response_model=DepartmentStats)
def department_stats(
    dept: str,
    repository: DepartmentRepository = Depends(get_repository),
):
    """Per-student average, pass percentage and at-risk count for a department."""
    try:
        records = repository.list_marks(dept)
        return compute_department_stats(records, Thresholds.from_settings())
    except HTTPException:
        raise
    except Exception:
        logger.exception("Department stats failed for %s", dept)
        return internal_error_response()


@router.get("/department/{dept}", response_model=DepartmentInfo)
def department_info(dept: str):
    # Readiness stub consumed by the HOD dashboard; real numbers live under /stats
    return DepartmentInfo(department=dept)
