"""
GenexMart Backend: Category Service
======================================

What:  List, create, rename and delete rows of `product_categories`.
How:   One statement per operation, committed immediately.
Who:   Called by the /api/categories route handlers.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from genexmart.exceptions import DatabaseError
from genexmart.models.category import Category
from genexmart.schemas.category import CategoryCreated, CategoryIn
from genexmart.services.identifiers import CATEGORY_ID_LENGTH, generate_id

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Category operations.

    Every store failure is re-raised as DatabaseError carrying the driver's
    message; nothing is retried.
    """

    async def list_categories(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """SELECT * FROM product_categories."""
        try:
            result = await db.execute(select(Category.__table__))
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing categories: %s", str(e))
            raise DatabaseError.from_exception(e)

    async def create_category(self, db: AsyncSession, payload: CategoryIn) -> CategoryCreated:
        """
        Insert a category under a freshly generated two-character code.

        Returns:
            The generated code and the submitted name.

        Raises:
            DatabaseError: The insert failed (including a code collision).
        """
        # Why no retry on collision: the primary key rejects a repeated code and
        # the caller sees the store's error
        category_id = generate_id(CATEGORY_ID_LENGTH)
        try:
            db.add(Category(CATEGORY_ID=category_id, CATEGORY=payload.name))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating category %s: %s", category_id, str(e))
            raise DatabaseError.from_exception(e, context={"category_id": category_id})

        logger.info("Category created: %s", category_id)
        return CategoryCreated(id=category_id, name=payload.name)

    async def update_category(self, db: AsyncSession, category_id: str, payload: CategoryIn) -> None:
        """Rename a category. Succeeds even when no row matches."""
        try:
            await db.execute(
                update(Category)
                .where(Category.CATEGORY_ID == category_id)
                .values(CATEGORY=payload.name)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating category %s: %s", category_id, str(e))
            raise DatabaseError.from_exception(e, context={"category_id": category_id})
        logger.info("Category updated: %s", category_id)

    async def delete_category(self, db: AsyncSession, category_id: str) -> None:
        """Delete a category. Products still referencing it are the store's concern."""
        try:
            await db.execute(delete(Category).where(Category.CATEGORY_ID == category_id))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting category %s: %s", category_id, str(e))
            raise DatabaseError.from_exception(e, context={"category_id": category_id})
        logger.info("Category deleted: %s", category_id)


category_service = CategoryService()
