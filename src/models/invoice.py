import datetime
import uuid

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base, UUIDMixin


class Invoice(UUIDMixin, Base):
    __tablename__ = "invoices"

    # Plain reference by value; the customers table is not constrained.
    customer_id: Mapped[uuid.UUID] = mapped_column(nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)  # minor units (cents)
    status: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<Invoice id={self.id!r} customer_id={self.customer_id!r} amount={self.amount}>"
