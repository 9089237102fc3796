# deptboard/core/security.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from deptboard.core.config import CONFIG, DEFAULT_JWT_SECRET_KEY, Settings
from deptboard.core.logger import get_logger
from deptboard.models.user_schemas import RoleEnum, TokenData
from deptboard.services.repository import DepartmentRepository, get_repository

ACCESS_TOKEN_EXPIRE_MINUTES = CONFIG.ACCESS_TOKEN_EXPIRE_MINUTES

logger = get_logger("security")

logging.getLogger("passlib").setLevel(logging.ERROR)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, CONFIG.JWT_SECRET_KEY, algorithm=CONFIG.JWT_ALGORITHM)


def authenticate_user(
    repository: DepartmentRepository, username: str, password: str
) -> Optional[dict]:
    user = repository.get_user(username)
    if not user or not user.get("hashed_password"):
        return None
    if not verify_password(password, user["hashed_password"]):
        return None
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    repository: DepartmentRepository = Depends(get_repository),
) -> dict:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, CONFIG.JWT_SECRET_KEY, algorithms=[CONFIG.JWT_ALGORITHM])
        token_data = TokenData(username=payload.get("sub"), role=payload.get("role"))
    except JWTError:
        raise credentials_exception
    if token_data.username is None:
        raise credentials_exception

    user = repository.get_user(token_data.username)
    if user is None:
        raise credentials_exception
    return user


def get_current_active_user(current_user: dict = Depends(get_current_user)) -> dict:
    if not current_user.get("is_active", True):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")
    return current_user


def require_role(roles: Iterable[RoleEnum | str]):
    """Dependency factory: only let users whose role is in `roles` through."""
    allowed = {r.value if isinstance(r, RoleEnum) else r for r in roles}

    def role_checker(current_user: dict = Depends(get_current_active_user)) -> dict:
        if current_user.get("role") not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied for this role",
            )
        return current_user

    return role_checker


def check_secret_key(settings: Settings = CONFIG) -> bool:
    """Warn when tokens are being signed with the shipped placeholder secret."""
    if not settings.JWT_SECRET_KEY or settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET_KEY:
        logger.warning(
            "DEPTBOARD_JWT_SECRET_KEY is not set; tokens are signed with the default key"
        )
        return False
    return True
