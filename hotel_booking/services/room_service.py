"""
Room service - availability checks
A booking holds its room for check_in_date..check_out_date inclusive
unless it is Cancelled or CheckedOut
"""
from typing import List, Optional
from datetime import date
import logging
from sqlalchemy import select
from sqlalchemy.orm import Session
from hotel_booking.exceptions import ValidationError
from hotel_booking.models.ontology import (
    Room, RoomType, RoomStatus, Booking, TERMINAL_BOOKING_STATUSES
)

logger = logging.getLogger(__name__)


def validate_date_range(check_in_date: date, check_out_date: date) -> None:
    if check_out_date <= check_in_date:
        raise ValidationError("Check-out date must be after check-in date.")


def _holding_bookings(check_in_date: date, check_out_date: date) -> list:
    """Filter criteria for bookings that overlap the range and still hold their room"""
    return [
        Booking.check_in_date <= check_out_date,
        Booking.check_out_date >= check_in_date,
        Booking.status.notin_(TERMINAL_BOOKING_STATUSES),
    ]


class RoomService:
    """Room service"""

    def __init__(self, db: Session):
        self.db = db

    def get_room(self, room_id: int) -> Optional[Room]:
        return self.db.query(Room).filter(Room.id == room_id).first()

    def is_room_available(self, room_id: int, check_in_date: date, check_out_date: date,
                          exclude_booking_id: Optional[int] = None) -> bool:
        """True when no other booking holds the room for any day of the range"""
        validate_date_range(check_in_date, check_out_date)

        query = self.db.query(Booking).filter(
            Booking.room_id == room_id,
            *_holding_bookings(check_in_date, check_out_date)
        )
        if exclude_booking_id is not None:
            query = query.filter(Booking.id != exclude_booking_id)

        return query.count() == 0

    def get_available_rooms(self, check_in_date: date, check_out_date: date) -> List[dict]:
        """Rooms marked Available with no conflicting booking in the range"""
        validate_date_range(check_in_date, check_out_date)

        booked_rooms = select(Booking.room_id).where(
            *_holding_bookings(check_in_date, check_out_date)
        )

        # Occupied rooms are left out even when free for these dates; booking
        # creation checks dates only (DESIGN.md, decision 2)
        rooms = self.db.query(Room).join(RoomType).filter(
            Room.status == RoomStatus.AVAILABLE,
            ~Room.id.in_(booked_rooms)
        ).order_by(Room.room_number).all()

        return [
            {
                'room_id': room.id,
                'room_number': room.room_number,
                'type_name': room.room_type.name,
                'price_per_night': room.room_type.price_per_night
            }
            for room in rooms
        ]

    def has_active_bookings(self, room_id: int) -> bool:
        """True when any booking outside the terminal states references the room"""
        return self.db.query(Booking).filter(
            Booking.room_id == room_id,
            Booking.status.notin_(TERMINAL_BOOKING_STATUSES)
        ).count() > 0

    def sync_room_status(self, room: Room) -> RoomStatus:
        """
        Set the room Occupied iff it still has an active booking.

        Pending changes must be flushed first; the caller commits.
        """
        new_status = RoomStatus.OCCUPIED if self.has_active_bookings(room.id) else RoomStatus.AVAILABLE
        if room.status != new_status:
            logger.info(f"Room {room.room_number}: {room.status.value} -> {new_status.value}")
            room.status = new_status
        return new_status
