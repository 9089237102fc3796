from typing import Callable, List, Optional

from deptboard.core.config import CONFIG
from deptboard.core.logger import get_logger
from deptboard.core.security import get_password_hash
from deptboard.models.user_schemas import FacultyCreate, FacultyResponse, RoleEnum
from deptboard.services.repository import DepartmentRepository

logger = get_logger("faculty")


def list_faculty(
    repository: DepartmentRepository, department: Optional[str] = None
) -> List[FacultyResponse]:
    """
    Faculty members with the names of the subjects they teach.
    One subject lookup per faculty member.
    """
    result = []
    for user in repository.list_faculty(department):
        username = user.get("username") or ""
        result.append(FacultyResponse(
            id=user["id"],
            username=username,
            full_name=user.get("full_name") or username,
            department=user.get("department") or "General",
            designation=user.get("designation") or "Faculty",
            subjects=repository.list_subject_names(user["id"]),
        ))
    return result


def create_faculty(
    repository: DepartmentRepository,
    payload: FacultyCreate,
    hasher: Callable[[str], str] = get_password_hash,
) -> str:
    """Hash the (possibly defaulted) password and store a new FACULTY user."""
    password = payload.password or CONFIG.DEFAULT_FACULTY_PASSWORD
    user = {
        "username": payload.username,
        "full_name": payload.full_name,
        "email": payload.email,
        "hashed_password": hasher(password),
        "role": RoleEnum.FACULTY.value,
        "department": payload.department,
        "designation": payload.designation,
        "associated_id": payload.username,
        "is_active": True,
    }
    new_id = repository.create_user(user)
    logger.info("Created faculty %s in %s", payload.username, payload.department)
    return new_id
