"""Tests for password hashing, tokens and role checks."""
import logging
from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from deptboard.core.config import CONFIG, DEFAULT_JWT_SECRET_KEY, Settings
from deptboard.core.security import (
    authenticate_user,
    check_secret_key,
    create_access_token,
    get_current_active_user,
    get_password_hash,
    require_role,
    verify_password,
)
from deptboard.models.user_schemas import RoleEnum


def test_password_round_trip():
    hashed = get_password_hash("s3cret")

    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_access_token_carries_subject_and_role():
    token = create_access_token({"sub": "hod_cs", "role": "HOD"}, timedelta(minutes=5))

    payload = jwt.decode(token, CONFIG.JWT_SECRET_KEY, algorithms=[CONFIG.JWT_ALGORITHM])

    assert payload["sub"] == "hod_cs"
    assert payload["role"] == "HOD"
    assert "exp" in payload


class TestAuthenticateUser:

    def test_valid_credentials(self, repository):
        repository.users.append(
            {"id": "u9", "username": "login", "role": "HOD", "hashed_password": get_password_hash("pw")}
        )

        assert authenticate_user(repository, "login", "pw")["id"] == "u9"
        assert authenticate_user(repository, "login", "nope") is None

    def test_unknown_user_or_no_password(self, repository):
        assert authenticate_user(repository, "nobody", "pw") is None
        assert authenticate_user(repository, "hod_cs", "pw") is None


class TestRoleChecks:

    def test_inactive_user_rejected(self):
        with pytest.raises(HTTPException) as exc:
            get_current_active_user({"username": "x", "is_active": False})
        assert exc.value.status_code == 403

    def test_allowed_role_passes(self):
        checker = require_role([RoleEnum.HOD, "PRINCIPAL"])
        user = {"username": "p", "role": "PRINCIPAL"}

        assert checker(user) is user

    def test_other_role_forbidden(self):
        checker = require_role([RoleEnum.HOD])

        with pytest.raises(HTTPException) as exc:
            checker({"username": "f", "role": "FACULTY"})
        assert exc.value.status_code == 403


class TestSecretKeyCheck:

    def test_default_secret_warns(self, caplog):
        settings = Settings(JWT_SECRET_KEY=DEFAULT_JWT_SECRET_KEY)

        with caplog.at_level(logging.WARNING, logger="deptboard"):
            assert check_secret_key(settings) is False

        assert "JWT_SECRET_KEY" in caplog.text

    def test_configured_secret_passes_quietly(self, caplog):
        settings = Settings(JWT_SECRET_KEY="a-real-deployment-secret")

        with caplog.at_level(logging.WARNING, logger="deptboard"):
            assert check_secret_key(settings) is True

        assert caplog.text == ""
