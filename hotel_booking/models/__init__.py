# Domain models
from hotel_booking.models.ontology import (
    Staff, Customer, RoomType, Room, Booking,
    StaffRole, RoomStatus, BookingStatus, TERMINAL_BOOKING_STATUSES
)

__all__ = [
    'Staff', 'Customer', 'RoomType', 'Room', 'Booking',
    'StaffRole', 'RoomStatus', 'BookingStatus', 'TERMINAL_BOOKING_STATUSES'
]
