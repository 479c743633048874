"""
Customer service
"""
import logging
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from hotel_booking.exceptions import ValidationError
from hotel_booking.models.ontology import Customer
from hotel_booking.models.schemas import CustomerCreate

logger = logging.getLogger(__name__)


class CustomerService:
    """Customer service"""

    def __init__(self, db: Session):
        self.db = db

    def search_customers(self, keyword: Optional[str] = None) -> List[Customer]:
        """Customers whose first or last name contains keyword (all when empty)"""
        query = self.db.query(Customer)
        if keyword:
            pattern = f"%{keyword}%"
            query = query.filter(
                or_(
                    Customer.first_name.ilike(pattern),
                    Customer.last_name.ilike(pattern)
                )
            )
        return query.order_by(Customer.last_name, Customer.first_name).all()

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def create_customer(self, data: CustomerCreate) -> Customer:
        """Create a customer; email addresses are unique"""
        if self.db.query(Customer).filter(Customer.email == data.email).count() > 0:
            raise ValidationError("Email already exists.")

        customer = Customer(**data.model_dump())
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)

        logger.info(f"Customer {customer.id} created")
        return customer
