"""
GenexMart Backend: Product Category Model
============================================

What:  ORM mapping of the `product_categories` table.

Attribute names follow the store's upper-case column names, so rows
selected through these attributes serialize with the same keys a plain
SELECT * returns.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from genexmart.database import Base


class Category(Base):
    """
    A product category, keyed by a random two-character code.

    The code is generated in the application with no collision check;
    the primary key is the only guard against duplicates.
    """

    __tablename__ = "product_categories"

    CATEGORY_ID: Mapped[str] = mapped_column(String(2), primary_key=True)
    CATEGORY: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<Category(id={self.CATEGORY_ID}, name={self.CATEGORY!r})>"
