"""
Integration tests for the coupon endpoints
"""

import pytest
from uuid import uuid4

from shop_admin.coupons.repository import CouponRepository

COUPONS = "/api/v1/coupons"


def coupon_payload(**overrides) -> dict:
    payload = {
        "code": "save10",
        "discount_type": "percentage",
        "discount_value": 10,
        "max_uses": 2,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
class TestCouponAdminRoutes:
    async def test_create_requires_token(self, async_client):
        response = await async_client.post(f"{COUPONS}/", json=coupon_payload())

        assert response.status_code == 401
        assert response.json()["error_code"] == "access_token_required"

    async def test_create_requires_admin_role(self, async_client, customer_headers):
        response = await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=customer_headers)

        assert response.status_code == 403
        assert response.json()["error_code"] == "insufficient_permission"

    async def test_create_and_read(self, async_client, admin_headers):
        response = await async_client.post(f"{COUPONS}/", json=coupon_payload(current_uses=7), headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["code"] == "SAVE10"
        assert data["current_uses"] == 0
        assert data["max_uses"] == 2
        assert data["is_active"] is True

        response = await async_client.get(f"{COUPONS}/{data['uid']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["code"] == "SAVE10"

        response = await async_client.get(f"{COUPONS}/", headers=admin_headers)
        assert response.status_code == 200
        assert [c["code"] for c in response.json()] == ["SAVE10"]

    async def test_create_duplicate(self, async_client, admin_headers):
        await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=admin_headers)

        response = await async_client.post(f"{COUPONS}/", json=coupon_payload(code="SAVE10"), headers=admin_headers)

        assert response.status_code == 409
        assert response.json() == {"message": "Coupon code already exists", "error_code": "conflict"}

    async def test_create_invalid_discount_type(self, async_client, admin_headers):
        response = await async_client.post(
            f"{COUPONS}/", json=coupon_payload(discount_type="bogo"), headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "validation_error"

    async def test_create_blank_code(self, async_client, admin_headers, db_session):
        response = await async_client.post(f"{COUPONS}/", json=coupon_payload(code="   "), headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error_code"] == "validation_error"
        assert await CouponRepository(db_session).get_all() == []

    async def test_update_blank_code(self, async_client, admin_headers):
        created = (await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=admin_headers)).json()

        response = await async_client.put(
            f"{COUPONS}/{created['uid']}", json={"code": " \t "}, headers=admin_headers
        )
        assert response.status_code == 400

        response = await async_client.get(f"{COUPONS}/{created['uid']}", headers=admin_headers)
        assert response.json()["code"] == "SAVE10"

    async def test_update(self, async_client, admin_headers):
        created = (await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=admin_headers)).json()

        response = await async_client.put(
            f"{COUPONS}/{created['uid']}",
            json={"is_active": False, "max_uses": None},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_active"] is False
        assert data["max_uses"] is None
        assert data["discount_value"] == 10

    async def test_update_missing(self, async_client, admin_headers):
        response = await async_client.put(f"{COUPONS}/{uuid4()}", json={"discount_value": 5}, headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Coupon not found"

    async def test_delete(self, async_client, admin_headers):
        created = (await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=admin_headers)).json()

        response = await async_client.delete(f"{COUPONS}/{created['uid']}", headers=admin_headers)
        assert response.status_code == 204
        assert response.content == b""

        response = await async_client.delete(f"{COUPONS}/{created['uid']}", headers=admin_headers)
        assert response.status_code == 404


@pytest.mark.asyncio
class TestCouponPublicRoutes:
    async def test_read_by_code_is_public(self, async_client, admin_headers):
        await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=admin_headers)

        response = await async_client.get(f"{COUPONS}/code/Save10")

        assert response.status_code == 200
        assert response.json()["code"] == "SAVE10"

    async def test_read_by_unknown_code(self, async_client):
        response = await async_client.get(f"{COUPONS}/code/NOPE")

        assert response.status_code == 404
        assert response.json() == {"message": "Coupon not found", "error_code": "not_found"}

    async def test_validate(self, async_client, admin_headers):
        await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=admin_headers)

        response = await async_client.post(f"{COUPONS}/validate/save10")

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["message"] == "Coupon is valid"
        assert data["coupon"]["code"] == "SAVE10"

    async def test_validate_expired(self, async_client, admin_headers):
        await async_client.post(
            f"{COUPONS}/",
            json=coupon_payload(expiration_date="2020-01-01T00:00:00Z"),
            headers=admin_headers,
        )

        response = await async_client.post(f"{COUPONS}/validate/SAVE10")

        assert response.status_code == 400
        assert response.json() == {"message": "Coupon has expired", "error_code": "bad_request"}

    async def test_apply_requires_token(self, async_client, admin_headers):
        await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=admin_headers)

        response = await async_client.post(f"{COUPONS}/apply/SAVE10")

        assert response.status_code == 401

    async def test_apply_until_exhausted(self, async_client, admin_headers, customer_headers):
        await async_client.post(f"{COUPONS}/", json=coupon_payload(), headers=admin_headers)

        first = await async_client.post(f"{COUPONS}/apply/SAVE10", headers=customer_headers)
        second = await async_client.post(f"{COUPONS}/apply/save10", headers=customer_headers)
        third = await async_client.post(f"{COUPONS}/apply/SAVE10", headers=customer_headers)

        assert first.status_code == 200
        assert first.json()["applied"] is True
        assert first.json()["coupon"]["current_uses"] == 1
        assert second.json()["coupon"]["current_uses"] == 2
        assert third.status_code == 400
        assert third.json()["message"] == "Coupon maximum uses reached"

        response = await async_client.get(f"{COUPONS}/code/SAVE10")
        assert response.json()["current_uses"] == 2
