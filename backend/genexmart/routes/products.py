"""
GenexMart Backend: Product Route Handlers
============================================

What:  /api/products list, create, update and delete.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from genexmart.database import get_db_session
from genexmart.schemas.common import ErrorResponse, MessageResponse
from genexmart.schemas.product import ProductIn
from genexmart.services.product_service import product_service


router = APIRouter(
    prefix="/api/products",
    tags=["Products"],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
)


@router.get(
    "",
    summary="List products",
    description="Every product row plus its category's name as `category_name`.",
)
async def list_products(
    db: AsyncSession = Depends(get_db_session),
) -> List[Dict[str, Any]]:
    return await product_service.list_products(db)


@router.post(
    "",
    status_code=201,
    summary="Create a product",
    description="Returns the submitted body with the auto-increment `id` added.",
)
async def create_product(
    payload: Optional[ProductIn] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    return await product_service.create_product(db, payload or ProductIn())


@router.put("/{product_id}", response_model=MessageResponse, summary="Update a product")
async def update_product(
    product_id: str,
    payload: Optional[ProductIn] = None,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await product_service.update_product(db, product_id, payload or ProductIn())
    return MessageResponse(message="Product updated")


@router.delete("/{product_id}", response_model=MessageResponse, summary="Delete a product")
async def delete_product(
    product_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await product_service.delete_product(db, product_id)
    return MessageResponse(message="Product deleted")
