from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vidly.core.security import Identity, get_current_identity, require_admin
from vidly.dependencies import get_db, valid_object_id
from vidly.schemas import CustomerIn, CustomerResponse
from vidly.services import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    service = CustomerService(db)
    return service.list_customers()


@router.get("/{id}", response_model=CustomerResponse)
def get_customer(customer_id: str = Depends(valid_object_id), db: Session = Depends(get_db)):
    service = CustomerService(db)
    return service.get_customer(customer_id)


@router.post("", response_model=CustomerResponse)
def create_customer(
    customer_in: CustomerIn,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    service = CustomerService(db)
    return service.create_customer(customer_in)


@router.put("/{id}", response_model=CustomerResponse)
def update_customer(
    customer_in: CustomerIn,
    identity: Identity = Depends(get_current_identity),
    customer_id: str = Depends(valid_object_id),
    db: Session = Depends(get_db),
):
    service = CustomerService(db)
    return service.update_customer(customer_id, customer_in)


@router.delete("/{id}", response_model=CustomerResponse)
def delete_customer(
    identity: Identity = Depends(require_admin),
    customer_id: str = Depends(valid_object_id),
    db: Session = Depends(get_db),
):
    service = CustomerService(db)
    return service.delete_customer(customer_id)
