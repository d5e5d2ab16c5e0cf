"""
GenexMart Backend: Order and Order Detail Models
===================================================

What:  ORM mappings of the `orders` (header) and `order_details` (line item)
       tables.

Lifecycle:
    1. Header inserted and committed (ORDER_DATE = NOW())
    2. Lines bulk-inserted in a second statement
    Neither table is ever updated or deleted through the API.

TOTAL and the line PRICE values are taken from the client as sent; nothing
recomputes them from the products table.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from genexmart.database import Base


class Order(Base):
    """An order header: who bought, who rang it up, and the stated total."""

    __tablename__ = "orders"

    ORDER_ID: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ORDER_DATE: Mapped[datetime | None] = mapped_column(DateTime, nullable=True, index=True)
    CUST_ID: Mapped[str | None] = mapped_column(
        String(8), ForeignKey("customers.CUST_ID"), nullable=True
    )
    USER_ID: Mapped[str | None] = mapped_column(String(10), nullable=True)
    TOTAL: Mapped[float | None] = mapped_column(Numeric(15, 2, asdecimal=False), nullable=True)

    def __repr__(self) -> str:
        return f"<Order(id={self.ORDER_ID}, total={self.TOTAL})>"


class OrderDetail(Base):
    """One product line of an order."""

    __tablename__ = "order_details"

    ORDER_ID: Mapped[int] = mapped_column(
        Integer, ForeignKey("orders.ORDER_ID"), primary_key=True
    )
    PRODUCT_ID: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.PRODUCT_ID"), primary_key=True
    )
    QTY: Mapped[int | None] = mapped_column(Integer, nullable=True)
    PRICE: Mapped[float | None] = mapped_column(Numeric(15, 2, asdecimal=False), nullable=True)
