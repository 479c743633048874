"""
Staff listing routes
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.ontology import Staff
from hotel_booking.models.schemas import StaffResponse
from hotel_booking.services.staff_service import StaffService
from hotel_booking.security.auth import require_admin, require_admin_or_manager

router = APIRouter(prefix="/api", tags=["staff"])


@router.get("/staff", response_model=List[StaffResponse])
def list_staff(
    db: Session = Depends(get_db),
    current_user: Staff = Depends(require_admin)
):
    """All staff accounts"""
    return StaffService(db).get_staff_list()


@router.get("/managers", response_model=List[StaffResponse])
def list_managers(
    db: Session = Depends(get_db),
    current_user: Staff = Depends(require_admin_or_manager)
):
    """Managers, for assigning receptionists"""
    return StaffService(db).get_managers()


@router.get("/receptionists", response_model=List[StaffResponse])
def list_receptionists(
    db: Session = Depends(get_db),
    current_user: Staff = Depends(require_admin_or_manager)
):
    """Receptionists: all for an Admin, the own team for a Manager"""
    return StaffService(db).get_receptionists(current_user)
