"""
GenexMart Backend: Customer Endpoint Tests
=============================================

What:  /api/customers end to end, including the placeholder columns
       written on create.
"""

import pytest

CUSTOMER = {
    "name": "Siti Aminah",
    "email": "siti@example.com",
    "phone": "081234567890",
    "address": "Jl. Merdeka 10, Bandung",
}


async def _list(client):
    response = await client.get("/api/customers")
    assert response.status_code == 200
    return response.json()


class TestCustomerRoutes:

    @pytest.mark.asyncio
    async def test_create_fills_placeholders(self, test_client):
        response = await test_client.post("/api/customers", json=CUSTOMER)

        assert response.status_code == 201
        created = response.json()
        assert len(created["id"]) == 8
        # Echo is the request body, not the stored defaults
        assert created == {"id": created["id"], **CUSTOMER}

        rows = await _list(test_client)
        assert len(rows) == 1
        row = rows[0]
        assert row["CUST_ID"] == created["id"]
        assert row["CUST_NAME"] == "Siti Aminah"
        assert row["EMAIL"] == "siti@example.com"
        assert row["CONTACT_NUMBER"] == "081234567890"
        assert row["ADDRESS"] == "Jl. Merdeka 10, Bandung"
        assert row["GENDER_ID"] == "L"
        assert row["DATE_OF_BIRTH"] == "2000-01-01"
        assert row["PLACE_OF_BIRTH"] == "City"
        assert row["CREATED_AT"] is not None
        assert row["UPDATED_AT"] is None

    @pytest.mark.asyncio
    async def test_create_keeps_given_gender(self, test_client):
        await test_client.post("/api/customers", json={**CUSTOMER, "gender_id": "P"})

        assert (await _list(test_client))[0]["GENDER_ID"] == "P"

    @pytest.mark.asyncio
    async def test_update_leaves_gender_and_birth_data(self, test_client):
        created = (
            await test_client.post("/api/customers", json={**CUSTOMER, "gender_id": "P"})
        ).json()

        response = await test_client.put(
            f"/api/customers/{created['id']}",
            json={
                "name": "Siti A.",
                "email": "siti.a@example.com",
                "phone": "0899",
                "address": "Jl. Asia Afrika 1",
                "gender_id": "L",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Customer updated"}
        row = (await _list(test_client))[0]
        assert row["CUST_NAME"] == "Siti A."
        assert row["EMAIL"] == "siti.a@example.com"
        assert row["CONTACT_NUMBER"] == "0899"
        assert row["ADDRESS"] == "Jl. Asia Afrika 1"
        assert row["GENDER_ID"] == "P"
        assert row["DATE_OF_BIRTH"] == "2000-01-01"
        assert row["UPDATED_AT"] is not None

    @pytest.mark.asyncio
    async def test_delete_removes_customer(self, test_client):
        created = (await test_client.post("/api/customers", json=CUSTOMER)).json()

        response = await test_client.delete(f"/api/customers/{created['id']}")
        again = await test_client.delete(f"/api/customers/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Customer deleted"}
        assert again.status_code == 200
        assert again.json() == {"message": "Customer deleted"}
        assert await _list(test_client) == []
