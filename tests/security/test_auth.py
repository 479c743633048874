"""
Session token and role guard tests
"""
import pytest
from datetime import datetime, timedelta, UTC
from fastapi import HTTPException
from jose import jwt

from hotel_booking.config import settings
from hotel_booking.models.ontology import StaffRole
from hotel_booking.security.auth import (
    get_password_hash, verify_password, create_access_token, decode_token,
    get_current_user, require_role, NOT_AUTHENTICATED
)


class TestPasswordHashing:

    def test_hash_and_verify(self):
        hashed = get_password_hash("secret123")

        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong", hashed)

    def test_hashes_are_salted(self):
        assert get_password_hash("secret123") != get_password_hash("secret123")


class TestSessionToken:

    def test_payload(self):
        token = create_access_token(7, StaffRole.MANAGER, "boss")
        payload = decode_token(token)

        assert payload["sub"] == "7"
        assert payload["username"] == "boss"
        assert payload["role"] == "Manager"
        assert "exp" in payload

    def test_tampered_token(self):
        token = create_access_token(7, StaffRole.ADMIN, "root")
        assert decode_token(token[:-2] + "xx") is None

    def test_garbage_token(self):
        assert decode_token("not-a-token") is None

    def test_wrong_key(self):
        token = jwt.encode({"sub": "1"}, "another-key", algorithm=settings.ALGORITHM)
        assert decode_token(token) is None

    def test_expired_token(self):
        token = jwt.encode(
            {"sub": "1", "exp": datetime.now(UTC) - timedelta(minutes=1)},
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM
        )
        assert decode_token(token) is None


class TestGuards:

    def test_current_user_requires_login(self):
        with pytest.raises(HTTPException) as exc_info:
            get_current_user(None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == NOT_AUTHENTICATED

    def test_current_user_passes_through(self, receptionist):
        assert get_current_user(receptionist) is receptionist

    def test_role_allowed(self, manager):
        checker = require_role([StaffRole.ADMIN, StaffRole.MANAGER])
        assert checker(manager) is manager

    def test_role_denied(self, receptionist):
        checker = require_role([StaffRole.ADMIN, StaffRole.MANAGER])

        with pytest.raises(HTTPException) as exc_info:
            checker(receptionist)

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Access denied. Allowed roles: Admin, Manager."

    def test_empty_role_list_allows_everyone(self, receptionist, admin):
        checker = require_role([])

        assert checker(receptionist) is receptionist
        assert checker(admin) is admin
