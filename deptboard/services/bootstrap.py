from typing import Optional

from deptboard.core.logger import get_logger
from deptboard.core.security import get_password_hash
from deptboard.models.user_schemas import RoleEnum
from deptboard.services.repository import DepartmentRepository

logger = get_logger("bootstrap")


def ensure_user(
    repository: DepartmentRepository,
    username: str,
    password: str,
    role: RoleEnum,
    department: Optional[str] = None,
    full_name: Optional[str] = None,
) -> str:
    """
    Create a login account unless one already exists.
    Returns the id of the existing or newly created user.
    """
    existing = repository.get_user(username)
    if existing:
        logger.info("User %s already exists, leaving it untouched", username)
        return existing["id"]

    new_id = repository.create_user({
        "username": username,
        "full_name": full_name,
        "hashed_password": get_password_hash(password),
        "role": role.value,
        "department": department,
        "associated_id": username,
        "is_active": True,
    })
    logger.info("Created %s account %s", role.value, username)
    return new_id
