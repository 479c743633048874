"""
Booking routes
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.exceptions import NotFoundError
from hotel_booking.models.ontology import Staff, BookingStatus
from hotel_booking.models.schemas import BookingCreate, BookingStatusUpdate, BookingResponse
from hotel_booking.services.booking_service import BookingService
from hotel_booking.security.auth import get_current_user, require_manager_or_receptionist

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.get("", response_model=List[BookingResponse])
def list_bookings(
    status: Optional[BookingStatus] = None,
    db: Session = Depends(get_db),
    current_user: Staff = Depends(get_current_user)
):
    """Bookings visible to the current user"""
    service = BookingService(db)
    bookings = service.get_bookings(current_user, status)
    return [BookingResponse(**service.get_booking_detail(b)) for b in bookings]


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: Staff = Depends(get_current_user)
):
    """Booking detail"""
    service = BookingService(db)
    booking = service.get_visible_booking(current_user, booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found.")
    return BookingResponse(**service.get_booking_detail(booking))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_booking(
    data: BookingCreate,
    db: Session = Depends(get_db),
    current_user: Staff = Depends(require_manager_or_receptionist)
):
    """Create a booking"""
    service = BookingService(db)
    try:
        booking = service.create_booking(data, current_user.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {
        "message": "Booking created successfully.",
        "bookingId": booking.id,
        "totalPrice": str(booking.total_price)
    }


@router.put("/{booking_id}")
def update_booking_status(
    booking_id: int,
    data: BookingStatusUpdate,
    db: Session = Depends(get_db),
    current_user: Staff = Depends(get_current_user)
):
    """Change a booking's status"""
    service = BookingService(db)
    try:
        service.update_status(booking_id, data.status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "Booking status updated."}
