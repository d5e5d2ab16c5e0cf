"""
GenexMart Backend: Order Service Unit Tests
==============================================

What:  OrderService create/read flows against a mocked session.
How:   The mock session records which statements ran and how many commits
       happened, so the header-then-lines sequencing can be checked without
       a database.

What we test:
    ✅ Header committed before the lines are written
    ✅ Line failure leaves the header committed and reports the prefix
    ✅ Header failure writes nothing else
    ✅ Missing cashier falls back to the configured default
    ✅ Missing order header raises NotFoundError
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from genexmart.exceptions import DatabaseError, NotFoundError
from genexmart.models.order import Order
from genexmart.schemas.order import OrderIn
from genexmart.services.order_service import OrderService


def _assign_order_id(added, order_id=42):
    """session.add side effect: remember the object, give orders an id."""
    def _add(obj):
        added.append(obj)
        if isinstance(obj, Order):
            obj.ORDER_ID = order_id
    return _add


class TestOrderServiceCreate:
    """Tests for the two-step create_order flow."""

    def setup_method(self):
        self.service = OrderService()

    @pytest.mark.asyncio
    async def test_create_without_items_writes_header_only(self, mock_db_session):
        added = []
        mock_db_session.add = MagicMock(side_effect=_assign_order_id(added))

        result = await self.service.create_order(
            mock_db_session,
            OrderIn(customer_id="CUST0001", total_amount=50000, items=[]),
        )

        assert result.id == 42
        assert result.message == "Transaction created"
        assert len(added) == 1
        mock_db_session.commit.assert_awaited_once()
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_with_items_bulk_inserts_lines(self, mock_db_session):
        added = []
        mock_db_session.add = MagicMock(side_effect=_assign_order_id(added, order_id=7))
        payload = OrderIn(
            customer_id="CUST0001",
            total_amount=32000,
            items=[
                {"product_id": 1, "quantity": 2, "price": 10000},
                {"product_id": 2, "quantity": 1, "price": 12000},
            ],
        )

        await self.service.create_order(mock_db_session, payload)

        mock_db_session.execute.assert_awaited_once()
        rows = mock_db_session.execute.await_args.args[1]
        assert rows == [
            {"ORDER_ID": 7, "PRODUCT_ID": 1, "QTY": 2, "PRICE": 10000},
            {"ORDER_ID": 7, "PRODUCT_ID": 2, "QTY": 1, "PRICE": 12000},
        ]
        assert mock_db_session.commit.await_count == 2

    @pytest.mark.asyncio
    async def test_non_object_lines_become_empty_rows(self, mock_db_session):
        mock_db_session.add = MagicMock(side_effect=_assign_order_id([], order_id=9))
        payload = OrderIn(
            customer_id="CUST0001",
            total_amount=1000,
            items=[None, 5, {"product_id": 3}],
        )

        await self.service.create_order(mock_db_session, payload)

        rows = mock_db_session.execute.await_args.args[1]
        assert rows == [
            {"ORDER_ID": 9, "PRODUCT_ID": None, "QTY": None, "PRICE": None},
            {"ORDER_ID": 9, "PRODUCT_ID": None, "QTY": None, "PRICE": None},
            {"ORDER_ID": 9, "PRODUCT_ID": 3, "QTY": None, "PRICE": None},
        ]

    @pytest.mark.asyncio
    async def test_line_failure_keeps_committed_header(self, mock_db_session):
        mock_db_session.add = MagicMock(side_effect=_assign_order_id([]))
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError(
                "INSERT INTO order_details", {}, Exception("lines rejected")
            )
        )
        payload = OrderIn(
            customer_id="CUST0001",
            total_amount=10000,
            items=[{"product_id": 99, "quantity": 1, "price": 10000}],
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_order(mock_db_session, payload)

        assert exc_info.value.message == "Error inserting details: lines rejected"
        assert exc_info.value.context["order_id"] == 42
        # Only the header's commit happened; nothing undoes it
        mock_db_session.commit.assert_awaited_once()
        mock_db_session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_header_failure_skips_lines(self, mock_db_session):
        mock_db_session.flush = AsyncMock(
            side_effect=IntegrityError("INSERT INTO orders", {}, Exception("bad customer"))
        )
        payload = OrderIn(
            customer_id="NOPE",
            total_amount=1,
            items=[{"product_id": 1, "quantity": 1, "price": 1}],
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_order(mock_db_session, payload)

        assert exc_info.value.message == "bad customer"
        mock_db_session.commit.assert_not_awaited()
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_default_cashier_when_user_id_missing(self, mock_db_session):
        added = []
        mock_db_session.add = MagicMock(side_effect=_assign_order_id(added))

        await self.service.create_order(
            mock_db_session, OrderIn(customer_id="CUST0001", total_amount=5)
        )

        assert added[0].USER_ID == "C001"

    @pytest.mark.asyncio
    async def test_given_cashier_is_kept(self, mock_db_session):
        added = []
        mock_db_session.add = MagicMock(side_effect=_assign_order_id(added))

        await self.service.create_order(
            mock_db_session,
            OrderIn(customer_id="CUST0001", total_amount=5, user_id="K002"),
        )

        assert added[0].USER_ID == "K002"
        assert added[0].TOTAL == 5


class TestOrderServiceGet:
    """Tests for the header + lines read."""

    def setup_method(self):
        self.service = OrderService()

    @pytest.mark.asyncio
    async def test_missing_header_raises_not_found(self, mock_db_session):
        header_result = MagicMock()
        header_result.mappings.return_value.first.return_value = None
        mock_db_session.execute = AsyncMock(return_value=header_result)

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_order(mock_db_session, 404)

        assert exc_info.value.message == "Transaction not found"
        # The lines query is never issued
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_header_merged_with_items(self, mock_db_session):
        header_result = MagicMock()
        header_result.mappings.return_value.first.return_value = {
            "id": 3,
            "ORDER_DATE": "2026-01-02 10:00:00",
            "TOTAL": 20000.0,
            "CUST_NAME": "Budi",
            "EMAIL": "budi@example.com",
            "CONTACT_NUMBER": "0812",
        }
        details_result = MagicMock()
        details_result.mappings.return_value.all.return_value = [
            {"PRODUCT_ID": 1, "QTY": 2, "PRICE": 10000.0, "PRODUCT_NAME": "Teh Botol"},
        ]
        mock_db_session.execute = AsyncMock(side_effect=[header_result, details_result])

        order = await self.service.get_order(mock_db_session, 3)

        assert order["id"] == 3
        assert order["CUST_NAME"] == "Budi"
        assert order["items"] == [
            {"PRODUCT_ID": 1, "QTY": 2, "PRICE": 10000.0, "PRODUCT_NAME": "Teh Botol"},
        ]

    @pytest.mark.asyncio
    async def test_header_query_failure_is_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("server has gone away"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_order(mock_db_session, 1)

        assert exc_info.value.message == "server has gone away"
