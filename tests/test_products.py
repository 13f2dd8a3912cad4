"""
Integration tests for the product catalogue endpoints
"""

import pytest
from uuid import uuid4

PRODUCTS = "/api/v1/products"


def product_payload(**overrides) -> dict:
    payload = {
        "name": "Espresso Machine",
        "description": "15 bar pump",
        "price": 249.9,
        "stock": 12,
        "category": "kitchen",
        "brand": "Brewline",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
class TestProducts:
    async def test_create_requires_token(self, async_client):
        response = await async_client.post(f"{PRODUCTS}/", json=product_payload())

        assert response.status_code == 401

    async def test_create_requires_admin(self, async_client, customer_headers):
        response = await async_client.post(f"{PRODUCTS}/", json=product_payload(), headers=customer_headers)

        assert response.status_code == 403

    async def test_create_and_read_publicly(self, async_client, admin_headers):
        response = await async_client.post(f"{PRODUCTS}/", json=product_payload(), headers=admin_headers)

        assert response.status_code == 201
        created = response.json()
        assert created["price"] == 249.9
        assert created["image_url"] is None

        response = await async_client.get(f"{PRODUCTS}/{created['uid']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Espresso Machine"

        response = await async_client.get(f"{PRODUCTS}/")
        assert [p["uid"] for p in response.json()] == [created["uid"]]

    async def test_negative_price(self, async_client, admin_headers):
        response = await async_client.post(f"{PRODUCTS}/", json=product_payload(price=-1), headers=admin_headers)

        assert response.status_code == 400

    async def test_partial_update(self, async_client, admin_headers):
        created = (await async_client.post(f"{PRODUCTS}/", json=product_payload(), headers=admin_headers)).json()

        response = await async_client.put(
            f"{PRODUCTS}/{created['uid']}",
            json={"stock": 3, "name": None, "brand": None},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["stock"] == 3
        assert data["name"] == "Espresso Machine"
        assert data["brand"] is None
        assert data["category"] == "kitchen"

    async def test_get_missing(self, async_client):
        response = await async_client.get(f"{PRODUCTS}/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Product not found", "error_code": "not_found"}

    async def test_delete(self, async_client, admin_headers):
        created = (await async_client.post(f"{PRODUCTS}/", json=product_payload(), headers=admin_headers)).json()

        response = await async_client.delete(f"{PRODUCTS}/{created['uid']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Product deleted successfully"}

        response = await async_client.delete(f"{PRODUCTS}/{created['uid']}", headers=admin_headers)
        assert response.status_code == 404
