"""
Booking service
Creates bookings and applies status transitions, keeping room status in step
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session, Query
from hotel_booking.exceptions import ValidationError, RoomUnavailableError, NotFoundError
from hotel_booking.models.ontology import (
    Booking, BookingStatus, RoomStatus, Staff, StaffRole,
    TERMINAL_BOOKING_STATUSES
)
from hotel_booking.models.schemas import BookingCreate
from hotel_booking.services.customer_service import CustomerService
from hotel_booking.services.room_service import RoomService, validate_date_range

logger = logging.getLogger(__name__)


def calculate_total_price(price_per_night: Decimal, check_in_date: date,
                          check_out_date: date) -> Decimal:
    """Nightly price times the number of nights"""
    nights = (check_out_date - check_in_date).days
    return Decimal(price_per_night) * nights


class BookingService:
    """Booking service"""

    def __init__(self, db: Session):
        self.db = db
        self.room_service = RoomService(db)
        self.customer_service = CustomerService(db)

    def _scoped_query(self, viewer: Staff) -> Query:
        """
        Bookings visible to viewer.

        Admin: everything. Manager: bookings made by themselves or their
        receptionists. Receptionist: their own bookings.
        """
        query = self.db.query(Booking).join(Staff, Booking.staff_id == Staff.id)
        if viewer.role == StaffRole.MANAGER:
            query = query.filter(
                or_(Staff.manager_id == viewer.id, Booking.staff_id == viewer.id)
            )
        elif viewer.role == StaffRole.RECEPTIONIST:
            query = query.filter(Booking.staff_id == viewer.id)
        return query

    def get_bookings(self, viewer: Staff, status: Optional[BookingStatus] = None) -> List[Booking]:
        query = self._scoped_query(viewer)
        if status:
            query = query.filter(Booking.status == status)
        return query.order_by(Booking.check_in_date.desc(), Booking.id.desc()).all()

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self.db.query(Booking).filter(Booking.id == booking_id).first()

    def get_visible_booking(self, viewer: Staff, booking_id: int) -> Optional[Booking]:
        return self._scoped_query(viewer).filter(Booking.id == booking_id).first()

    def create_booking(self, data: BookingCreate, staff_id: int) -> Booking:
        """Book a room: Confirmed status, price from the room type, room marked Occupied"""
        validate_date_range(data.check_in_date, data.check_out_date)

        customer = self.customer_service.get_customer(data.customer_id)
        if not customer:
            raise ValidationError("Customer not found.")

        room = self.room_service.get_room(data.room_id)
        if not room:
            raise ValidationError("Room not found.")

        if not self.room_service.is_room_available(room.id, data.check_in_date, data.check_out_date):
            raise RoomUnavailableError()

        booking = Booking(
            customer_id=customer.id,
            room_id=room.id,
            staff_id=staff_id,
            check_in_date=data.check_in_date,
            check_out_date=data.check_out_date,
            total_price=calculate_total_price(
                room.room_type.price_per_night, data.check_in_date, data.check_out_date
            ),
            status=BookingStatus.CONFIRMED
        )
        self.db.add(booking)
        room.status = RoomStatus.OCCUPIED

        self.db.commit()
        self.db.refresh(booking)

        logger.info(
            f"Booking {booking.id} created: room {room.room_number}, "
            f"{booking.check_in_date} to {booking.check_out_date} "
            f"({booking.nights} nights), total {booking.total_price}"
        )
        return booking

    def update_status(self, booking_id: int, status: str) -> Booking:
        """
        Move a booking to any of the five statuses.

        Leaving the booking in CheckedOut/Cancelled releases its room;
        bringing it back from there requires the room to still be free.
        """
        try:
            new_status = BookingStatus(status)
        except ValueError:
            raise ValidationError("Invalid status.")

        booking = self.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking not found.")

        old_status = booking.status
        reactivating = old_status in TERMINAL_BOOKING_STATUSES and new_status not in TERMINAL_BOOKING_STATUSES
        if reactivating and not self.room_service.is_room_available(
            booking.room_id, booking.check_in_date, booking.check_out_date,
            exclude_booking_id=booking.id
        ):
            raise RoomUnavailableError()

        booking.status = new_status
        self.db.flush()
        self.room_service.sync_room_status(booking.room)

        self.db.commit()
        self.db.refresh(booking)

        logger.info(f"Booking {booking.id}: {old_status.value} -> {new_status.value}")
        return booking

    def get_booking_detail(self, booking: Booking) -> dict:
        """Booking joined with customer, room, room type and staff"""
        return {
            'booking_id': booking.id,
            'customer_id': booking.customer_id,
            'first_name': booking.customer.first_name,
            'last_name': booking.customer.last_name,
            'room_id': booking.room_id,
            'room_number': booking.room.room_number,
            'type_name': booking.room.room_type.name,
            'check_in_date': booking.check_in_date,
            'check_out_date': booking.check_out_date,
            'total_price': booking.total_price,
            'status': booking.status,
            'staff_id': booking.staff_id,
            'receptionist': booking.staff.username
        }
