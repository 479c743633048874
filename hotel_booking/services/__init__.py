# Business services
from hotel_booking.services.staff_service import StaffService
from hotel_booking.services.customer_service import CustomerService
from hotel_booking.services.room_service import RoomService
from hotel_booking.services.booking_service import BookingService

__all__ = ['StaffService', 'CustomerService', 'RoomService', 'BookingService']
