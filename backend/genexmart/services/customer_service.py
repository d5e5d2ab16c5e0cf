"""
GenexMart Backend: Customer Service
======================================

What:  List, create, update and delete rows of `customers`.
How:   One statement per operation, committed immediately.

Placeholders:
    The API never collects birth date or place, so creation writes
    settings.default_birth_date / default_birth_place. GENDER_ID falls back
    to settings.default_gender_id when the body leaves it out (or sends an
    empty value).
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from genexmart.config import settings
from genexmart.exceptions import DatabaseError
from genexmart.models.customer import Customer
from genexmart.schemas.customer import CustomerIn
from genexmart.services.identifiers import CUSTOMER_ID_LENGTH, generate_id

logger = logging.getLogger(__name__)


class CustomerService:
    """Customer operations. Store failures become DatabaseError."""

    async def list_customers(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """SELECT * FROM customers."""
        try:
            result = await db.execute(select(Customer.__table__))
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing customers: %s", str(e))
            raise DatabaseError.from_exception(e)

    async def create_customer(self, db: AsyncSession, payload: CustomerIn) -> Dict[str, Any]:
        """
        Insert a customer under a freshly generated eight-character code.

        Returns:
            {"id": CUST_ID, **body}. The echoed body is what the client sent,
            not the defaults that were stored.
        """
        customer_id = generate_id(CUSTOMER_ID_LENGTH)
        # Why placeholders: registration collects no birth data, yet every
        # customer row carries a birth date and place
        customer = Customer(
            CUST_ID=customer_id,
            CUST_NAME=payload.name,
            EMAIL=payload.email,
            CONTACT_NUMBER=payload.phone,
            ADDRESS=payload.address,
            GENDER_ID=payload.gender_id or settings.default_gender_id,
            DATE_OF_BIRTH=settings.default_birth_date,
            PLACE_OF_BIRTH=settings.default_birth_place,
            CREATED_AT=func.now(),
        )
        try:
            db.add(customer)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating customer %s: %s", customer_id, str(e))
            raise DatabaseError.from_exception(e, context={"customer_id": customer_id})

        logger.info("Customer created: %s", customer_id)
        return {"id": customer_id, **payload.model_dump(exclude_unset=True)}

    async def update_customer(self, db: AsyncSession, customer_id: str, payload: CustomerIn) -> None:
        """Overwrite name, email, phone and address; gender and birth data stay."""
        try:
            await db.execute(
                update(Customer)
                .where(Customer.CUST_ID == customer_id)
                .values(
                    CUST_NAME=payload.name,
                    EMAIL=payload.email,
                    CONTACT_NUMBER=payload.phone,
                    ADDRESS=payload.address,
                    UPDATED_AT=func.now(),
                )
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating customer %s: %s", customer_id, str(e))
            raise DatabaseError.from_exception(e, context={"customer_id": customer_id})
        logger.info("Customer updated: %s", customer_id)

    async def delete_customer(self, db: AsyncSession, customer_id: str) -> None:
        try:
            await db.execute(delete(Customer).where(Customer.CUST_ID == customer_id))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting customer %s: %s", customer_id, str(e))
            raise DatabaseError.from_exception(e, context={"customer_id": customer_id})
        logger.info("Customer deleted: %s", customer_id)


customer_service = CustomerService()
