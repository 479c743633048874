# API Routers
from hotel_booking.routers import auth, staff, customers, rooms, bookings

__all__ = ['auth', 'staff', 'customers', 'rooms', 'bookings']
