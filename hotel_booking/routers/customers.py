"""
Customer routes
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.database import get_db
from hotel_booking.models.ontology import Staff
from hotel_booking.models.schemas import CustomerCreate, CustomerResponse
from hotel_booking.services.customer_service import CustomerService
from hotel_booking.security.auth import get_current_user, require_manager_or_receptionist

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=List[CustomerResponse])
def list_customers(
    q: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: Staff = Depends(get_current_user)
):
    """Search customers by first or last name"""
    return CustomerService(db).search_customers(q)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_customer(
    data: CustomerCreate,
    db: Session = Depends(get_db),
    current_user: Staff = Depends(require_manager_or_receptionist)
):
    """Create a customer"""
    service = CustomerService(db)
    try:
        customer = service.create_customer(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "Customer created successfully.", "customerId": customer.id}
