"""
GenexMart Backend: Customer Route Handlers
=============================================

What:  /api/customers list, create, update and delete.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from genexmart.database import get_db_session
from genexmart.schemas.common import ErrorResponse, MessageResponse
from genexmart.schemas.customer import CustomerIn
from genexmart.services.customer_service import customer_service


router = APIRouter(
    prefix="/api/customers",
    tags=["Customers"],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
)


@router.get("", summary="List all customers")
async def list_customers(
    db: AsyncSession = Depends(get_db_session),
) -> List[Dict[str, Any]]:
    return await customer_service.list_customers(db)


@router.post(
    "",
    status_code=201,
    summary="Register a customer",
    description=(
        "Stores the customer under a random eight-character code. "
        "gender_id is optional; birth date and place are filled with placeholders."
    ),
)
async def create_customer(
    payload: Optional[CustomerIn] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    return await customer_service.create_customer(db, payload or CustomerIn())


@router.put("/{customer_id}", response_model=MessageResponse, summary="Update a customer")
async def update_customer(
    customer_id: str,
    payload: Optional[CustomerIn] = None,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await customer_service.update_customer(db, customer_id, payload or CustomerIn())
    return MessageResponse(message="Customer updated")


@router.delete("/{customer_id}", response_model=MessageResponse, summary="Delete a customer")
async def delete_customer(
    customer_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await customer_service.delete_customer(db, customer_id)
    return MessageResponse(message="Customer deleted")
