"""
Authentication and authorization
The session is a signed JWT carried in an HttpOnly cookie
"""
import bcrypt
import logging
from datetime import datetime, timedelta, UTC
from typing import Optional, List
from fastapi import Depends, HTTPException, Request, Response, status
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from hotel_booking.config import settings
from hotel_booking.database import get_db
from hotel_booking.models.ontology import Staff, StaffRole

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED = "You must be logged in to access this resource."


def get_password_hash(password: str) -> str:
    """Hash a password"""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its hash"""
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))


def create_access_token(staff_id: int, role: StaffRole, username: str) -> str:
    """Create the session token"""
    expire = datetime.now(UTC) + timedelta(hours=settings.SESSION_EXPIRE_HOURS)
    to_encode = {
        "sub": str(staff_id),
        "username": username,
        "role": role.value if isinstance(role, StaffRole) else str(role),
        "exp": expire
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """Decode a session token, None when it is invalid or expired"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_HOURS * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure
    )


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[Staff]:
    """Staff member behind the session cookie, or None"""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None

    payload = decode_token(token)
    if not payload:
        return None

    try:
        staff_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        return None

    return db.query(Staff).filter(Staff.id == staff_id).first()


def get_current_user(current_user: Optional[Staff] = Depends(get_optional_user)) -> Staff:
    """Guard: must be logged in"""
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHENTICATED
        )
    return current_user


def require_role(allowed_roles: List[StaffRole]):
    """Guard: must be logged in with one of allowed_roles (any role when empty)"""
    def role_checker(current_user: Staff = Depends(get_current_user)) -> Staff:
        if allowed_roles and current_user.role not in allowed_roles:
            logger.debug(
                f"Staff {current_user.username} ({current_user.role.value}) refused, "
                f"allowed: {[r.value for r in allowed_roles]}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Allowed roles: {', '.join(r.value for r in allowed_roles)}."
            )
        return current_user
    return role_checker


require_admin = require_role([StaffRole.ADMIN])
require_admin_or_manager = require_role([StaffRole.ADMIN, StaffRole.MANAGER])
require_manager_or_receptionist = require_role([StaffRole.MANAGER, StaffRole.RECEPTIONIST])
