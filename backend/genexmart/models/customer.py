"""
GenexMart Backend: Customer Model
====================================

What:  ORM mapping of the `customers` table.

Columns the API does not collect (DATE_OF_BIRTH, PLACE_OF_BIRTH and, when
absent, GENDER_ID) are written with the placeholders from settings.
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from genexmart.database import Base


class Customer(Base):
    """A registered shop customer, keyed by a random eight-character code."""

    __tablename__ = "customers"

    CUST_ID: Mapped[str] = mapped_column(String(8), primary_key=True)
    CUST_NAME: Mapped[str | None] = mapped_column(String(100), nullable=True)
    ADDRESS: Mapped[str | None] = mapped_column(Text, nullable=True)
    PLACE_OF_BIRTH: Mapped[str | None] = mapped_column(String(50), nullable=True)
    DATE_OF_BIRTH: Mapped[date | None] = mapped_column(Date, nullable=True)
    CONTACT_NUMBER: Mapped[str | None] = mapped_column(String(20), nullable=True)
    EMAIL: Mapped[str | None] = mapped_column(String(100), nullable=True)
    GENDER_ID: Mapped[str | None] = mapped_column(String(1), nullable=True)
    CREATED_AT: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    UPDATED_AT: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Customer(id={self.CUST_ID}, name={self.CUST_NAME!r})>"
