"""
GenexMart Backend: Order (Penjualan) Route Handlers
======================================================

What:  GET /api/penjualan (list), GET /api/penjualan/{id} (header + lines)
       and POST /api/penjualan (create).
Who:   Called by the point-of-sale checkout and sales history screens.

Orders have no update or delete route.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from genexmart.database import get_db_session
from genexmart.schemas.common import ErrorResponse
from genexmart.schemas.order import OrderCreated, OrderIn
from genexmart.services.order_service import order_service


router = APIRouter(
    prefix="/api/penjualan",
    tags=["Orders"],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
)


@router.get("", summary="List orders, newest first")
async def list_orders(
    db: AsyncSession = Depends(get_db_session),
) -> List[Dict[str, Any]]:
    return await order_service.list_orders(db)


@router.get(
    "/{order_id}",
    summary="Get one order with its line items",
    responses={404: {"description": "Order not found", "model": ErrorResponse}},
)
async def get_order(
    order_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    return await order_service.get_order(db, order_id)


@router.post(
    "",
    status_code=201,
    response_model=OrderCreated,
    summary="Record a sale",
    description=(
        "Inserts the order header, then all line items in one bulk insert. "
        "The two writes are not atomic: if the lines fail, the header remains."
    ),
)
async def create_order(
    payload: Optional[OrderIn] = None,
    db: AsyncSession = Depends(get_db_session),
) -> OrderCreated:
    return await order_service.create_order(db, payload or OrderIn())
