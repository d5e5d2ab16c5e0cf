"""
GenexMart Backend: Category Route Handlers
=============================================

What:  /api/categories list, create, update and delete.
How:   Thin handlers: pull path/body fields, delegate to CategoryService.
       A request with no body is treated as an empty object, so every field
       goes to the store as NULL.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from genexmart.database import get_db_session
from genexmart.schemas.category import CategoryCreated, CategoryIn
from genexmart.schemas.common import ErrorResponse, MessageResponse
from genexmart.services.category_service import category_service


router = APIRouter(
    prefix="/api/categories",
    tags=["Categories"],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
)


@router.get("", summary="List all product categories")
async def list_categories(
    db: AsyncSession = Depends(get_db_session),
) -> List[Dict[str, Any]]:
    return await category_service.list_categories(db)


@router.post(
    "",
    status_code=201,
    response_model=CategoryCreated,
    summary="Create a category",
    description="Stores the category under a random two-character code and returns it.",
)
async def create_category(
    payload: Optional[CategoryIn] = None,
    db: AsyncSession = Depends(get_db_session),
) -> CategoryCreated:
    return await category_service.create_category(db, payload or CategoryIn())


@router.put("/{category_id}", response_model=MessageResponse, summary="Rename a category")
async def update_category(
    category_id: str,
    payload: Optional[CategoryIn] = None,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await category_service.update_category(db, category_id, payload or CategoryIn())
    return MessageResponse(message="Category updated")


@router.delete("/{category_id}", response_model=MessageResponse, summary="Delete a category")
async def delete_category(
    category_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await category_service.delete_category(db, category_id)
    return MessageResponse(message="Category deleted")
