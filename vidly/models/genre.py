from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from vidly.core.database import Base
from vidly.core.ids import new_object_id


class Genre(Base):
    __tablename__ = "genres"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name={self.name})>"
