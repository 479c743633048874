"""
Seed data
Creates the first Admin account, room types and rooms; safe to run repeatedly
"""
import logging
from decimal import Decimal
from typing import Dict
from sqlalchemy.orm import Session
from hotel_booking.models.ontology import Room, RoomType, RoomStatus, Staff, StaffRole
from hotel_booking.security.auth import get_password_hash

logger = logging.getLogger(__name__)

ROOM_TYPE_DEFS = [
    {'name': 'Single', 'price_per_night': Decimal('80.00')},
    {'name': 'Double', 'price_per_night': Decimal('100.00')},
    {'name': 'Suite', 'price_per_night': Decimal('220.00')},
]

# room number -> room type name
ROOM_DEFS = {
    '101': 'Single', '102': 'Single', '103': 'Double', '104': 'Double',
    '201': 'Double', '202': 'Double', '203': 'Suite', '204': 'Suite',
}


def init_admin(db: Session, username: str, password: str, email: str) -> Staff:
    """Create the Admin account unless the username is taken"""
    admin = db.query(Staff).filter(Staff.username == username).first()
    if admin:
        return admin

    admin = Staff(
        username=username,
        password_hash=get_password_hash(password),
        role=StaffRole.ADMIN,
        first_name='System',
        last_name='Administrator',
        email=email
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Admin account '{username}' created")
    return admin


def init_room_types(db: Session) -> Dict[str, RoomType]:
    created = 0
    for rt_data in ROOM_TYPE_DEFS:
        if not db.query(RoomType).filter(RoomType.name == rt_data['name']).first():
            db.add(RoomType(**rt_data))
            created += 1
    db.commit()
    logger.info(f"Room types: {created} created")
    return {rt.name: rt for rt in db.query(RoomType).all()}


def init_rooms(db: Session, room_types: Dict[str, RoomType]) -> int:
    created = 0
    for number, type_name in ROOM_DEFS.items():
        if db.query(Room).filter(Room.room_number == number).first():
            continue
        db.add(Room(
            room_number=number,
            room_type_id=room_types[type_name].id,
            status=RoomStatus.AVAILABLE
        ))
        created += 1
    db.commit()
    logger.info(f"Rooms: {created} created")
    return created


def seed(db: Session, admin_username: str, admin_password: str, admin_email: str) -> None:
    init_admin(db, admin_username, admin_password, admin_email)
    init_rooms(db, init_room_types(db))
