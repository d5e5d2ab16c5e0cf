"""
GenexMart Backend: Order (Penjualan) Schemas
===============================================

What:  Request body for creating an order and the creation acknowledgement.
How:   Line items carry the client's own price; nothing is looked up.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderIn(BaseModel):
    """
    Body of POST /api/penjualan.

    user_id is the cashier; when omitted the configured default cashier is
    recorded. A missing or null items list is an order with no lines.

    Each item is expected to be {product_id, quantity, price}.
    """
    customer_id: Any = None
    total_amount: Any = None
    # Why List[Any]: a malformed line (null, a number, missing keys) must
    # reach the store and fail there, after the header is committed
    items: Optional[List[Any]] = None
    user_id: Any = None

    model_config = ConfigDict(extra="allow")


class OrderCreated(BaseModel):
    """Returned by POST /api/penjualan with HTTP 201."""
    message: str = Field(default="Transaction created")
    id: int = Field(description="Auto-increment ORDER_ID of the new header")
