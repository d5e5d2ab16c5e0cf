"""
GenexMart Backend: Order (Penjualan) Service
===============================================

What:  Lists orders, reads one order with its lines, and records new orders.
Who:   Called by the /api/penjualan route handlers.

Creation Flow (POST /api/penjualan):
    ┌──────────────┐    ┌──────────┐    ┌──────────────────┐    ┌──────────┐
    │ INSERT order │───▶│  COMMIT  │───▶│ INSERT all lines │───▶│  COMMIT  │
    │ header       │    │          │    │ (one executemany)│    │          │
    └──────────────┘    └──────────┘    └──────────────────┘    └──────────┘

    The two writes are separate transactions. If the line insert fails, the
    header is already committed and stays: the order exists with no lines,
    and the caller only sees a 500 whose message starts with
    "Error inserting details: ". Nothing compensates for it.

Detail Read (GET /api/penjualan/{id}):
    1. Header joined with the customer's name and contact fields
       (no header row → NotFoundError → 404)
    2. Lines joined with product names
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from genexmart.config import settings
from genexmart.exceptions import DatabaseError, NotFoundError
from genexmart.models.customer import Customer
from genexmart.models.order import Order, OrderDetail
from genexmart.models.product import Product
from genexmart.schemas.order import OrderCreated, OrderIn

logger = logging.getLogger(__name__)

DETAILS_ERROR_PREFIX = "Error inserting details: "


def _line_row(order_id: int, item: Any) -> Dict[str, Any]:
    """
    Map one client line item onto an order_details row.

    Anything that is not an object becomes a row with no product, quantity
    or price, which the store then rejects.
    """
    line = item if isinstance(item, dict) else {}
    return {
        "ORDER_ID": order_id,
        "PRODUCT_ID": line.get("product_id"),
        "QTY": line.get("quantity"),
        "PRICE": line.get("price"),
    }


class OrderService:
    """
    Order operations.

    Orders are write-once: there is no update or delete. TOTAL and line
    prices are stored exactly as the client sent them.
    """

    async def list_orders(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """
        Order summaries, newest first.

        Left join: an order whose customer no longer exists is still listed,
        with customer_name = null.
        """
        query = (
            select(
                Order.ORDER_ID.label("id"),
                Order.ORDER_DATE.label("transaction_date"),
                Order.TOTAL.label("total_amount"),
                Customer.CUST_NAME.label("customer_name"),
            )
            .select_from(Order)
            .outerjoin(Customer, Order.CUST_ID == Customer.CUST_ID)
            .order_by(Order.ORDER_DATE.desc())
        )
        try:
            result = await db.execute(query)
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing orders: %s", str(e))
            raise DatabaseError.from_exception(e)

    async def get_order(self, db: AsyncSession, order_id: str) -> Dict[str, Any]:
        """
        One order header merged with its line items.

        Returns:
            {id, ORDER_DATE, TOTAL, CUST_NAME, EMAIL, CONTACT_NUMBER,
             items: [{PRODUCT_ID, QTY, PRICE, PRODUCT_NAME}, ...]}

        order_id is the raw path segment; the store does the comparison, so
        a non-numeric id simply matches no header.

        Raises:
            NotFoundError: No order header with this id (→ 404)
            DatabaseError: Either query failed (→ 500)
        """
        header_query = (
            select(
                Order.ORDER_ID.label("id"),
                Order.ORDER_DATE,
                Order.TOTAL,
                Customer.CUST_NAME,
                Customer.EMAIL,
                Customer.CONTACT_NUMBER,
            )
            .select_from(Order)
            .outerjoin(Customer, Order.CUST_ID == Customer.CUST_ID)
            .where(Order.ORDER_ID == order_id)
        )
        # Inner join: lines whose product was deleted drop out of the read
        details_query = (
            select(
                OrderDetail.PRODUCT_ID,
                OrderDetail.QTY,
                OrderDetail.PRICE,
                Product.PRODUCT_NAME,
            )
            .join(Product, OrderDetail.PRODUCT_ID == Product.PRODUCT_ID)
            .where(OrderDetail.ORDER_ID == order_id)
        )

        try:
            header = (await db.execute(header_query)).mappings().first()
        except SQLAlchemyError as e:
            logger.error("Database error fetching order %s: %s", order_id, str(e))
            raise DatabaseError.from_exception(e, context={"order_id": order_id})

        if header is None:
            raise NotFoundError(
                message="Transaction not found",
                resource="order",
                resource_id=order_id,
            )

        try:
            details = (await db.execute(details_query)).mappings().all()
        except SQLAlchemyError as e:
            logger.error("Database error fetching lines of order %s: %s", order_id, str(e))
            raise DatabaseError.from_exception(e, context={"order_id": order_id})

        return {**dict(header), "items": [dict(row) for row in details]}

    async def create_order(self, db: AsyncSession, payload: OrderIn) -> OrderCreated:
        """
        Insert the order header, commit it, then bulk-insert its lines.

        Args:
            db: Async database session
            payload: customer, stated total, optional cashier and line items

        Returns:
            OrderCreated with the new ORDER_ID

        Raises:
            DatabaseError: Header insert failed (nothing written), or line
                insert failed (header remains committed; message carries the
                "Error inserting details: " prefix)
        """
        items = payload.items or []

        # ── Step 1: Header ────────────────────────────────────────────────
        order = Order(
            CUST_ID=payload.customer_id,
            TOTAL=payload.total_amount,
            USER_ID=payload.user_id or settings.default_cashier_id,
            ORDER_DATE=func.now(),
        )
        try:
            db.add(order)
            await db.flush()  # assigns ORDER_ID
            order_id = order.ORDER_ID
            # Why commit here: the lines below are a separate transaction, and
            # a failed line insert must not take the header with it
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating order header: %s", str(e))
            raise DatabaseError.from_exception(e)

        logger.info("Order header created: %s (%d lines pending)", order_id, len(items))

        # ── Step 2: Lines ─────────────────────────────────────────────────
        if items:
            # Why one executemany: every line goes to the store in a single
            # round trip, so the lines succeed or fail together
            rows = [_line_row(order_id, item) for item in items]
            try:
                await db.execute(insert(OrderDetail), rows)
                await db.commit()
            except SQLAlchemyError as e:
                logger.error(
                    "Order %s committed without lines; line insert failed: %s",
                    order_id,
                    str(e),
                )
                raise DatabaseError.from_exception(
                    e,
                    prefix=DETAILS_ERROR_PREFIX,
                    context={"order_id": order_id},
                )

        return OrderCreated(message="Transaction created", id=order_id)


order_service = OrderService()
