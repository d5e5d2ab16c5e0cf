"""
GenexMart Backend: Product Service
=====================================

What:  List (joined with category name), create, update and delete products.
How:   One statement per operation, committed immediately. Creation stamps
       CREATED_AT/UPDATED_AT with the store's NOW() and the configured audit
       actor; updates refresh UPDATED_AT only.
Who:   Called by the /api/products route handlers.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from genexmart.config import settings
from genexmart.exceptions import DatabaseError
from genexmart.models.category import Category
from genexmart.models.product import Product
from genexmart.schemas.product import ProductIn

logger = logging.getLogger(__name__)


class ProductService:
    """Product operations. Store failures become DatabaseError."""

    async def list_products(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """
        Every product column plus the category's name as `category_name`.

        Inner join: products whose CATEGORY_ID matches no category are left
        out of the listing.
        """
        query = (
            select(Product.__table__, Category.CATEGORY.label("category_name"))
            .join(Category, Product.CATEGORY_ID == Category.CATEGORY_ID)
        )
        try:
            result = await db.execute(query)
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing products: %s", str(e))
            raise DatabaseError.from_exception(e)

    async def create_product(self, db: AsyncSession, payload: ProductIn) -> Dict[str, Any]:
        """
        Insert a product and return the submitted body with its new id.

        Returns:
            {"id": PRODUCT_ID, **body}; keys in the body win over "id".
        """
        product = Product(
            CATEGORY_ID=payload.category_id,
            PRODUCT_NAME=payload.name,
            PRICE=payload.price,
            STOCK=payload.stock,
            CREATED_AT=func.now(),
            CREATED_BY=settings.audit_actor,
            UPDATED_AT=func.now(),
            UPDATED_BY=settings.audit_actor,
        )
        try:
            db.add(product)
            await db.flush()  # assigns PRODUCT_ID
            product_id = product.PRODUCT_ID
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating product: %s", str(e))
            raise DatabaseError.from_exception(e)

        logger.info("Product created: %s", product_id)
        return {"id": product_id, **payload.model_dump(exclude_unset=True)}

    async def update_product(self, db: AsyncSession, product_id: str, payload: ProductIn) -> None:
        """Overwrite category, name, price and stock. Succeeds even when no row matches."""
        try:
            await db.execute(
                update(Product)
                .where(Product.PRODUCT_ID == product_id)
                .values(
                    CATEGORY_ID=payload.category_id,
                    PRODUCT_NAME=payload.name,
                    PRICE=payload.price,
                    STOCK=payload.stock,
                    UPDATED_AT=func.now(),
                )
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating product %s: %s", product_id, str(e))
            raise DatabaseError.from_exception(e, context={"product_id": product_id})
        logger.info("Product updated: %s", product_id)

    async def delete_product(self, db: AsyncSession, product_id: str) -> None:
        try:
            await db.execute(delete(Product).where(Product.PRODUCT_ID == product_id))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting product %s: %s", product_id, str(e))
            raise DatabaseError.from_exception(e, context={"product_id": product_id})
        logger.info("Product deleted: %s", product_id)


product_service = ProductService()
