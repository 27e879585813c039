from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from vidly.core.database import Base
from vidly.core.ids import new_object_id


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    is_gold: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
