from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from vidly.models import Customer


def list_customers(db: Session) -> List[Customer]:
    return db.query(Customer).order_by(Customer.name).all()


def get_customer(db: Session, customer_id: str) -> Optional[Customer]:
    return db.query(Customer).filter(Customer.id == customer_id).first()


def create_customer(db: Session, customer: Customer) -> Customer:
    db.add(customer)
    db.flush()
    return customer


def delete_customer(db: Session, customer: Customer) -> None:
    db.delete(customer)
