# deptboard/core/config.py

from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

DEFAULT_JWT_SECRET_KEY = "change-me"


class Settings(BaseSettings):
    # Mongo
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "deptboard"

    # Auth
    JWT_SECRET_KEY: str = DEFAULT_JWT_SECRET_KEY
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 120

    # Comma separated, "*" allows any origin
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    # Dashboard defaults
    DEFAULT_DEPARTMENT: str = "CS"
    DEFAULT_FACULTY_PASSWORD: str = "password123"

    # Marks are on a 50-point CIE scale
    MARKS_SCALE: float = 50
    PASS_THRESHOLD: float = 20
    RISK_THRESHOLD: float = 18
    SUBJECT_THRESHOLD: float = 25
    STUDENT_ALERT_CAP: int = 5
    COHORT_ALERT_THRESHOLD: int = 5

    model_config = SettingsConfigDict(
        env_prefix="DEPTBOARD_",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [s.strip() for s in self.CORS_ORIGINS.split(",") if s.strip()]


CONFIG = Settings()
