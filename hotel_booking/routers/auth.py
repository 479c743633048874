"""
Authentication routes: login, logout, account registration and the current user
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.ontology import Staff, StaffRole
from hotel_booking.models.schemas import LoginRequest, StaffRegister, UserInfo
from hotel_booking.services.staff_service import StaffService
from hotel_booking.security.auth import (
    create_access_token, set_session_cookie, clear_session_cookie,
    get_current_user, get_optional_user
)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login")
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """Log in and set the session cookie"""
    staff = StaffService(db).authenticate(data.username, data.password)
    if not staff:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password."
        )

    set_session_cookie(response, create_access_token(staff.id, staff.role, staff.username))
    return {"message": "Login successful.", "role": staff.role.value}


@router.post("/logout")
def logout(response: Response):
    """Drop the session cookie"""
    clear_session_cookie(response)
    return {"message": "Logged out successfully."}


@router.get("/user", response_model=UserInfo)
def get_user(current_user: Optional[Staff] = Depends(get_optional_user)):
    """Current user"""
    if current_user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return current_user


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    data: StaffRegister,
    db: Session = Depends(get_db),
    current_user: Staff = Depends(get_current_user)
):
    """Create a Manager or Receptionist account (Admin and Manager only)"""
    if current_user.role == StaffRole.RECEPTIONIST:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Receptionists are not allowed to create staff accounts."
        )

    service = StaffService(db)
    try:
        staff = service.register(data, creator=current_user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "Account created successfully.", "staffId": staff.id}
