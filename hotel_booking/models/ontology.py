"""
Domain objects
Staff, customers, the room inventory and bookings held in the relational store
"""
from datetime import datetime
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, DateTime, Date,
    ForeignKey, Enum as SQLEnum, Numeric
)
from sqlalchemy.orm import relationship
from hotel_booking.database import Base


# ============== Enums ==============

class StaffRole(str, Enum):
    """Staff role"""
    ADMIN = "Admin"
    MANAGER = "Manager"
    RECEPTIONIST = "Receptionist"


class RoomStatus(str, Enum):
    """Room status"""
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"


class BookingStatus(str, Enum):
    """Booking status"""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CHECKED_IN = "CheckedIn"
    CHECKED_OUT = "CheckedOut"
    CANCELLED = "Cancelled"


# Bookings in these states no longer hold their room
TERMINAL_BOOKING_STATUSES = (BookingStatus.CHECKED_OUT, BookingStatus.CANCELLED)


# ============== Objects ==============

class Staff(Base):
    """
    Staff account
    Receptionists report to a Manager through manager_id
    """
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(SQLEnum(StaffRole), nullable=False)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    manager_id = Column(Integer, ForeignKey("staff.id"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    manager = relationship("Staff", remote_side="Staff.id", back_populates="receptionists")
    receptionists = relationship("Staff", back_populates="manager")
    bookings = relationship("Booking", back_populates="staff")


class Customer(Base):
    """Hotel customer"""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    phone = Column(String(20))
    created_at = Column(DateTime, default=datetime.utcnow)

    bookings = relationship("Booking", back_populates="customer")


class RoomType(Base):
    """Room type with its nightly price"""
    __tablename__ = "room_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)
    price_per_night = Column(Numeric(10, 2), nullable=False)

    rooms = relationship("Room", back_populates="room_type")


class Room(Base):
    """Room in the inventory"""
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    room_number = Column(String(10), unique=True, nullable=False)
    room_type_id = Column(Integer, ForeignKey("room_types.id"), nullable=False)
    status = Column(SQLEnum(RoomStatus), nullable=False, default=RoomStatus.AVAILABLE)

    room_type = relationship("RoomType", back_populates="rooms")
    bookings = relationship("Booking", back_populates="room")


class Booking(Base):
    """
    Booking of one room for a date range
    A room never has two overlapping bookings outside TERMINAL_BOOKING_STATUSES
    """
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    staff_id = Column(Integer, ForeignKey("staff.id"), nullable=False)
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    status = Column(SQLEnum(BookingStatus), nullable=False, default=BookingStatus.CONFIRMED)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    customer = relationship("Customer", back_populates="bookings")
    room = relationship("Room", back_populates="bookings")
    staff = relationship("Staff", back_populates="bookings")

    @property
    def nights(self) -> int:
        """Number of nights covered by the booking"""
        return (self.check_out_date - self.check_in_date).days
