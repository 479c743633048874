"""
Staff service
Account registration, login and the staff listings
"""
import logging
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from hotel_booking.exceptions import ValidationError
from hotel_booking.models.ontology import Staff, StaffRole
from hotel_booking.models.schemas import StaffRegister
from hotel_booking.security.auth import get_password_hash, verify_password

logger = logging.getLogger(__name__)

REGISTRABLE_ROLES = (StaffRole.MANAGER, StaffRole.RECEPTIONIST)


class StaffService:
    """Staff service"""

    def __init__(self, db: Session):
        self.db = db

    def get_staff_list(self) -> List[Staff]:
        """All staff accounts"""
        return self.db.query(Staff).order_by(Staff.id).all()

    def get_staff(self, staff_id: int) -> Optional[Staff]:
        return self.db.query(Staff).filter(Staff.id == staff_id).first()

    def get_staff_by_username(self, username: str) -> Optional[Staff]:
        return self.db.query(Staff).filter(Staff.username == username).first()

    def get_managers(self) -> List[Staff]:
        """All managers"""
        return self.db.query(Staff).filter(
            Staff.role == StaffRole.MANAGER
        ).order_by(Staff.id).all()

    def get_receptionists(self, viewer: Staff) -> List[Staff]:
        """Receptionists visible to viewer: all for an Admin, the own team for a Manager"""
        query = self.db.query(Staff).filter(Staff.role == StaffRole.RECEPTIONIST)
        if viewer.role != StaffRole.ADMIN:
            query = query.filter(Staff.manager_id == viewer.id)
        return query.order_by(Staff.id).all()

    def register(self, data: StaffRegister, creator: Staff) -> Staff:
        """
        Create a Manager or Receptionist account.

        A Receptionist always reports to a Manager: the creator when the
        creator is a Manager, otherwise the Manager named by data.manager_id.
        """
        if data.role not in REGISTRABLE_ROLES:
            raise ValidationError("Invalid role selected. Allowed: Manager, Receptionist.")

        existing = self.db.query(Staff).filter(
            or_(Staff.username == data.username, Staff.email == data.email)
        ).count()
        if existing > 0:
            raise ValidationError("Username or email already exists.")

        manager_id = None
        if data.role == StaffRole.RECEPTIONIST:
            if creator.role == StaffRole.MANAGER:
                manager_id = creator.id
            else:
                if not data.manager_id:
                    raise ValidationError("Manager selection is required for Receptionists.")
                manager = self.get_staff(data.manager_id)
                if not manager or manager.role != StaffRole.MANAGER:
                    raise ValidationError("Invalid Manager ID.")
                manager_id = manager.id

        staff = Staff(
            username=data.username,
            password_hash=get_password_hash(data.password),
            role=data.role,
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            manager_id=manager_id
        )
        self.db.add(staff)
        self.db.commit()
        self.db.refresh(staff)

        logger.info(f"Staff {staff.username} ({staff.role.value}) created by {creator.username}")
        return staff

    def authenticate(self, username: str, password: str) -> Optional[Staff]:
        """Staff member matching the credentials, or None"""
        staff = self.get_staff_by_username(username)
        if not staff or not verify_password(password, staff.password_hash):
            logger.warning(f"Failed login for username '{username}'")
            return None

        logger.info(f"Staff {staff.username} logged in")
        return staff
