from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vidly.models import Customer
from vidly.repository import customer_repository
from vidly.schemas import CustomerIn, CustomerResponse


class CustomerService:
    def __init__(self, db: Session):
        self.db = db

    def list_customers(self) -> list[Customer]:
        try:
            return customer_repository.list_customers(self.db)
        except SQLAlchemyError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to list customers",
            ) from exc

    def get_customer(self, customer_id: str) -> Customer:
        customer = customer_repository.get_customer(self.db, customer_id)
        if not customer:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="The customer with the given ID was not found.",
            )
        return customer

    def create_customer(self, customer_in: CustomerIn) -> Customer:
        try:
            customer = customer_repository.create_customer(
                self.db, Customer(**customer_in.model_dump())
            )
            self.db.commit()
            self.db.refresh(customer)
            return customer
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create customer",
            ) from exc

    def update_customer(self, customer_id: str, customer_in: CustomerIn) -> Customer:
        customer = self.get_customer(customer_id)
        for field, value in customer_in.model_dump().items():
            setattr(customer, field, value)

        try:
            self.db.flush()
            self.db.commit()
            self.db.refresh(customer)
            return customer
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update customer",
            ) from exc

    def delete_customer(self, customer_id: str) -> CustomerResponse:
        customer = self.get_customer(customer_id)
        deleted = CustomerResponse.model_validate(customer)
        try:
            customer_repository.delete_customer(self.db, customer)
            self.db.commit()
            return deleted
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete customer",
            ) from exc
