"""
Pytest configuration and shared fixtures
"""
import os

# Keep the application engine off the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from hotel_booking.config import settings
from hotel_booking.database import Base, get_db
from hotel_booking.models.ontology import (
    Staff, StaffRole, RoomType, Room, RoomStatus, Customer, Booking, BookingStatus
)
from hotel_booking.security.auth import get_password_hash, create_access_token
from hotel_booking.main import app

PASSWORD = "password123"
PASSWORD_HASH = get_password_hash(PASSWORD)


@pytest.fixture(scope="function")
def db_engine():
    """In-memory database engine"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Database session"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Test client sharing the test session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(client):
    """Put a session token into the client's cookie jar"""
    def _login(token: str) -> TestClient:
        client.cookies.set(settings.SESSION_COOKIE_NAME, token)
        return client
    return _login


# ============== Staff ==============

def _make_staff(db, username, role, manager_id=None, email=None):
    staff = Staff(
        username=username,
        password_hash=PASSWORD_HASH,
        role=role,
        first_name=username.capitalize(),
        last_name="Tester",
        email=email or f"{username}@hotel.test",
        manager_id=manager_id
    )
    db.add(staff)
    db.commit()
    db.refresh(staff)
    return staff


def _token_for(staff: Staff) -> str:
    return create_access_token(staff.id, staff.role, staff.username)


@pytest.fixture
def staff_factory(db_session):
    def _factory(username, role, manager_id=None, email=None):
        return _make_staff(db_session, username, role, manager_id, email)
    return _factory


@pytest.fixture
def token_factory():
    return _token_for


@pytest.fixture
def admin(db_session):
    return _make_staff(db_session, "admin", StaffRole.ADMIN)


@pytest.fixture
def manager(db_session):
    return _make_staff(db_session, "manager", StaffRole.MANAGER)


@pytest.fixture
def other_manager(db_session):
    return _make_staff(db_session, "manager2", StaffRole.MANAGER)


@pytest.fixture
def receptionist(db_session, manager):
    return _make_staff(db_session, "front1", StaffRole.RECEPTIONIST, manager_id=manager.id)


@pytest.fixture
def other_receptionist(db_session, other_manager):
    return _make_staff(db_session, "front2", StaffRole.RECEPTIONIST, manager_id=other_manager.id)


@pytest.fixture
def admin_token(admin):
    return _token_for(admin)


@pytest.fixture
def manager_token(manager):
    return _token_for(manager)


@pytest.fixture
def receptionist_token(receptionist):
    return _token_for(receptionist)


# ============== Rooms and customers ==============

@pytest.fixture
def sample_room_type(db_session):
    room_type = RoomType(name="Double", price_per_night=Decimal("100.00"))
    db_session.add(room_type)
    db_session.commit()
    db_session.refresh(room_type)
    return room_type


@pytest.fixture
def sample_room(db_session, sample_room_type):
    room = Room(room_number="101", room_type_id=sample_room_type.id, status=RoomStatus.AVAILABLE)
    db_session.add(room)
    db_session.commit()
    db_session.refresh(room)
    return room


@pytest.fixture
def sample_room_102(db_session, sample_room_type):
    room = Room(room_number="102", room_type_id=sample_room_type.id, status=RoomStatus.AVAILABLE)
    db_session.add(room)
    db_session.commit()
    db_session.refresh(room)
    return room


@pytest.fixture
def sample_customer(db_session):
    customer = Customer(first_name="Jane", last_name="Doe", email="jane@example.com", phone="555-0100")
    db_session.add(customer)
    db_session.commit()
    db_session.refresh(customer)
    return customer


def _make_booking(db, room, customer, staff, check_in, check_out, status=BookingStatus.CONFIRMED):
    """Insert a booking directly, bypassing availability checks"""
    booking = Booking(
        customer_id=customer.id,
        room_id=room.id,
        staff_id=staff.id,
        check_in_date=check_in,
        check_out_date=check_out,
        total_price=room.room_type.price_per_night * (check_out - check_in).days,
        status=status
    )
    db.add(booking)
    if status not in (BookingStatus.CHECKED_OUT, BookingStatus.CANCELLED):
        room.status = RoomStatus.OCCUPIED
    db.commit()
    db.refresh(booking)
    return booking


@pytest.fixture
def booking_factory(db_session, sample_customer, receptionist):
    """Bookings by the receptionist for sample_customer unless told otherwise"""
    def _factory(room, check_in, check_out, status=BookingStatus.CONFIRMED,
                 staff=None, customer=None):
        return _make_booking(
            db_session, room, customer or sample_customer, staff or receptionist,
            check_in, check_out, status
        )
    return _factory


@pytest.fixture
def june_booking(booking_factory, sample_room):
    """Room 101 booked 2024-06-01 to 2024-06-03 by the receptionist"""
    return booking_factory(sample_room, date(2024, 6, 1), date(2024, 6, 3))
