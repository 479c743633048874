"""
Room routes
"""
from typing import List
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.ontology import Staff
from hotel_booking.models.schemas import AvailableRoomResponse
from hotel_booking.services.room_service import RoomService
from hotel_booking.security.auth import get_current_user

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.get("/available", response_model=List[AvailableRoomResponse])
def list_available_rooms(
    check_in_date: date = Query(..., alias="checkInDate"),
    check_out_date: date = Query(..., alias="checkOutDate"),
    db: Session = Depends(get_db),
    current_user: Staff = Depends(get_current_user)
):
    """Rooms free for the whole date range"""
    service = RoomService(db)
    try:
        rooms = service.get_available_rooms(check_in_date, check_out_date)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return [AvailableRoomResponse(**r) for r in rooms]
