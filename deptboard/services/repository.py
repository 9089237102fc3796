"""Data access for the department dashboard.

Route handlers depend on the abstract DepartmentRepository so the
aggregations only ever see in-memory MarkRecord lists. MongoRepository is
the production implementation over the pymongo collections in
deptboard.core.database.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from deptboard.core.logger import get_logger
from deptboard.models.marks_schemas import MarkRecord
from deptboard.models.user_schemas import RoleEnum

logger = get_logger("repository")


class RepositoryError(Exception):
    """Raised when the backing store cannot serve a request."""
    pass


class DepartmentRepository(ABC):
    """Read/write contract the routes and services rely on."""

    @abstractmethod
    def list_marks(self, department: str) -> List[MarkRecord]:
        """Mark entries for subjects of `department`, joined with subject and student."""

    @abstractmethod
    def count_faculty(self, department: str) -> int:
        pass

    @abstractmethod
    def list_faculty(self, department: Optional[str] = None) -> List[Dict[str, Any]]:
        """Faculty user documents, optionally limited to one department."""

    @abstractmethod
    def list_subject_names(self, instructor_id: str) -> List[str]:
        pass

    @abstractmethod
    def get_user(self, username: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def create_user(self, user: Dict[str, Any]) -> str:
        """Insert a user document and return its new id."""


def _user_from_doc(doc: Dict[str, Any]) -> Dict[str, Any]:
    user = {k: v for k, v in doc.items() if k != "_id"}
    user["id"] = str(doc["_id"])
    return user


def _record_from_doc(doc: Dict[str, Any]) -> Optional[MarkRecord]:
    subject = doc.get("subject") or {}
    student = doc.get("student") or {}
    try:
        return MarkRecord(
            student_id=doc.get("student_id"),
            subject_id=doc.get("subject_id"),
            subject_name=subject.get("name"),
            department=subject.get("department"),
            marks_obtained=doc.get("marks"),
            max_marks=doc.get("max_marks"),
            status=doc.get("status"),
            student_name=student.get("student_name"),
        )
    except ValidationError:
        logger.warning("Skipping mark entry %s: missing student id", doc.get("_id"))
        return None


class MongoRepository(DepartmentRepository):

    def __init__(self, database=None):
        if database is None:
            from deptboard.core.database import db as database
        self.db = database
        self.users = database["users"]
        self.subjects = database["subjects"]
        self.cie_marks = database["cie_marks"]

    def list_marks(self, department: str) -> List[MarkRecord]:
        pipeline = [
            {
                "$lookup": {
                    "from": "subjects",
                    "localField": "subject_id",
                    "foreignField": "subject_id",
                    "as": "subject",
                }
            },
            {"$unwind": "$subject"},
            {"$match": {"subject.department": department}},
            {
                "$lookup": {
                    "from": "students",
                    "localField": "student_id",
                    "foreignField": "student_id",
                    "as": "student",
                }
            },
            {"$unwind": {"path": "$student", "preserveNullAndEmptyArrays": True}},
        ]
        try:
            raw = list(self.cie_marks.aggregate(pipeline))
        except PyMongoError as e:
            raise RepositoryError(f"Failed to load marks for {department}") from e

        records = [_record_from_doc(doc) for doc in raw]
        return [r for r in records if r is not None]

    def count_faculty(self, department: str) -> int:
        try:
            return self.users.count_documents(
                {"role": RoleEnum.FACULTY.value, "department": department}
            )
        except PyMongoError as e:
            raise RepositoryError(f"Failed to count faculty for {department}") from e

    def list_faculty(self, department: Optional[str] = None) -> List[Dict[str, Any]]:
        query: Dict[str, Any] = {"role": RoleEnum.FACULTY.value}
        if department:
            query["department"] = department
        projection = {
            "username": 1,
            "full_name": 1,
            "email": 1,
            "department": 1,
            "designation": 1,
        }
        try:
            return [_user_from_doc(doc) for doc in self.users.find(query, projection)]
        except PyMongoError as e:
            raise RepositoryError("Failed to list faculty") from e

    def list_subject_names(self, instructor_id: str) -> List[str]:
        try:
            cursor = self.subjects.find({"instructor_id": instructor_id}, {"name": 1})
            return [str(doc["name"]) for doc in cursor if doc.get("name")]
        except PyMongoError as e:
            raise RepositoryError(f"Failed to load subjects for {instructor_id}") from e

    def get_user(self, username: str) -> Optional[Dict[str, Any]]:
        try:
            doc = self.users.find_one({"username": username})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to load user {username}") from e
        return _user_from_doc(doc) if doc else None

    def create_user(self, user: Dict[str, Any]) -> str:
        try:
            result = self.users.insert_one(dict(user))
        except PyMongoError as e:
            raise RepositoryError(f"Failed to create user {user.get('username')}") from e
        return str(result.inserted_id)


def get_repository() -> DepartmentRepository:
    """FastAPI dependency; tests swap it through app.dependency_overrides."""
    return MongoRepository()
