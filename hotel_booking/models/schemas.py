"""
Pydantic schemas
Request bodies accept the front end's camelCase names; response rows use its column names
"""
import re
from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict
from hotel_booking.models.ontology import StaffRole, BookingStatus

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email format.")
    return value


# ============== Auth Schemas ==============

class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserInfo(BaseModel):
    id: int
    username: str
    role: StaffRole
    model_config = ConfigDict(from_attributes=True)


# ============== Staff Schemas ==============

class StaffRegister(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., max_length=100)
    role: StaffRole
    manager_id: Optional[int] = Field(None, alias="managerId")
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


class StaffResponse(BaseModel):
    id: int = Field(serialization_alias="StaffID")
    username: str = Field(serialization_alias="Username")
    first_name: str = Field(serialization_alias="FirstName")
    last_name: str = Field(serialization_alias="LastName")
    email: str = Field(serialization_alias="Email")
    role: StaffRole = Field(serialization_alias="Role")
    manager_id: Optional[int] = Field(None, serialization_alias="ManagerID")
    model_config = ConfigDict(from_attributes=True)


# ============== Customer Schemas ==============

class CustomerCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50, alias="firstName")
    last_name: str = Field(..., min_length=1, max_length=50, alias="lastName")
    email: str = Field(..., max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("phone")
    @classmethod
    def blank_phone_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class CustomerResponse(BaseModel):
    id: int = Field(serialization_alias="CustomerID")
    first_name: str = Field(serialization_alias="FirstName")
    last_name: str = Field(serialization_alias="LastName")
    email: str = Field(serialization_alias="Email")
    phone: Optional[str] = Field(None, serialization_alias="Phone")
    model_config = ConfigDict(from_attributes=True)


# ============== Room Schemas ==============

class AvailableRoomResponse(BaseModel):
    room_id: int = Field(serialization_alias="RoomID")
    room_number: str = Field(serialization_alias="RoomNumber")
    type_name: str = Field(serialization_alias="TypeName")
    price_per_night: Decimal = Field(serialization_alias="PricePerNight")


# ============== Booking Schemas ==============

class BookingCreate(BaseModel):
    customer_id: int = Field(..., alias="customerId")
    room_id: int = Field(..., alias="roomId")
    check_in_date: date = Field(..., alias="checkInDate")
    check_out_date: date = Field(..., alias="checkOutDate")
    model_config = ConfigDict(populate_by_name=True)


class BookingStatusUpdate(BaseModel):
    # Kept as a plain string; BookingService rejects unknown values
    status: str


class BookingResponse(BaseModel):
    booking_id: int = Field(serialization_alias="BookingID")
    customer_id: int = Field(serialization_alias="CustomerID")
    first_name: str = Field(serialization_alias="FirstName")
    last_name: str = Field(serialization_alias="LastName")
    room_id: int = Field(serialization_alias="RoomID")
    room_number: str = Field(serialization_alias="RoomNumber")
    type_name: str = Field(serialization_alias="TypeName")
    check_in_date: date = Field(serialization_alias="CheckInDate")
    check_out_date: date = Field(serialization_alias="CheckOutDate")
    total_price: Decimal = Field(serialization_alias="TotalPrice")
    status: BookingStatus = Field(serialization_alias="Status")
    staff_id: int = Field(serialization_alias="StaffID")
    receptionist: str = Field(serialization_alias="Receptionist")
