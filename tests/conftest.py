"""Shared fixtures: an in-memory repository and an authenticated test client."""
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from deptboard.core.security import create_access_token
from deptboard.main import app
from deptboard.models.marks_schemas import MarkRecord
from deptboard.services.repository import (
    DepartmentRepository,
    RepositoryError,
    get_repository,
)


class InMemoryRepository(DepartmentRepository):
    """Dict-backed repository standing in for Mongo in tests."""

    def __init__(
        self,
        marks: Optional[Dict[str, List[MarkRecord]]] = None,
        users: Optional[List[Dict[str, Any]]] = None,
        subjects: Optional[Dict[str, List[str]]] = None,
    ):
        self.marks = marks or {}
        self.users = list(users or [])
        self.subjects = subjects or {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise RepositoryError("store unreachable")

    def list_marks(self, department):
        self._check()
        return list(self.marks.get(department, []))

    def count_faculty(self, department):
        self._check()
        return sum(
            1 for u in self.users
            if u["role"] == "FACULTY" and u.get("department") == department
        )

    def list_faculty(self, department=None):
        self._check()
        return [
            u for u in self.users
            if u["role"] == "FACULTY" and (not department or u.get("department") == department)
        ]

    def list_subject_names(self, instructor_id):
        self._check()
        return list(self.subjects.get(instructor_id, []))

    def get_user(self, username):
        return next((u for u in self.users if u.get("username") == username), None)

    def create_user(self, user):
        self._check()
        new_user = dict(user)
        new_user["id"] = f"u{len(self.users) + 1}"
        self.users.append(new_user)
        return new_user["id"]


def make_user(user_id, username, role, department="CS", **extra):
    user = {"id": user_id, "username": username, "role": role, "department": department}
    user.update(extra)
    return user


@pytest.fixture
def repository():
    return InMemoryRepository(
        marks={
            "CS": [
                MarkRecord(student_id="S1", student_name="Asha", subject_name="DSA", marks_obtained=40),
                MarkRecord(student_id="S2", student_name="Ravi", subject_name="DSA", marks_obtained=10),
                MarkRecord(student_id="S2", student_name="Ravi", subject_name="DBMS", marks_obtained=12, status="PENDING"),
            ],
        },
        users=[
            make_user("h1", "hod_cs", "HOD", full_name="Dr. Hod"),
            make_user("p1", "principal", "PRINCIPAL", department=None),
            make_user("f1", "fac_one", "FACULTY", full_name="Faculty One", designation="Professor"),
            make_user("f2", "fac_two", "FACULTY"),
            make_user("f3", "fac_mech", "FACULTY", department="MECH"),
            make_user("x1", "retired", "HOD", is_active=False),
        ],
        subjects={"f1": ["DSA", "DBMS"]},
    )


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build a bearer header for a username/role pair."""
    def _headers(username, role):
        token = create_access_token({"sub": username, "role": role})
        return {"Authorization": f"Bearer {token}"}
    return _headers
