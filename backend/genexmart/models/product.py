"""
GenexMart Backend: Product Model
===================================

What:  ORM mapping of the `products` table.
How:   Auto-increment PRODUCT_ID; CATEGORY_ID references product_categories.
       The audit columns (CREATED_AT/BY, UPDATED_AT/BY) are filled by the
       product service, not by server defaults.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from genexmart.database import Base


class Product(Base):
    """A sellable item belonging to one category."""

    __tablename__ = "products"

    PRODUCT_ID: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    PRODUCT_NAME: Mapped[str | None] = mapped_column(String(100), nullable=True)
    PRICE: Mapped[float | None] = mapped_column(Numeric(15, 2, asdecimal=False), nullable=True)
    CATEGORY_ID: Mapped[str | None] = mapped_column(
        String(2), ForeignKey("product_categories.CATEGORY_ID"), nullable=True
    )
    CREATED_AT: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    CREATED_BY: Mapped[str | None] = mapped_column(String(50), nullable=True)
    UPDATED_AT: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    UPDATED_BY: Mapped[str | None] = mapped_column(String(50), nullable=True)
    STOCK: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Product(id={self.PRODUCT_ID}, name={self.PRODUCT_NAME!r})>"
