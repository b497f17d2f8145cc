"""End-to-end tests for cart, checkout and orders over the HTTP API."""

import pytest

ADDRESS = {
    "street": "1 Main St",
    "city": "Springfield",
    "state": "IL",
    "zip": "62701",
    "country": "US",
}


def _add(client, headers, product_id, price, quantity, variant_size="10ml"):
    resp = client.post(
        "/cart/add",
        json={
            "product_id": product_id,
            "name": f"Product {product_id}",
            "variant_size": variant_size,
            "quantity": quantity,
            "price": price,
        },
        headers=headers,
    )
    assert resp.status_code == 200
    return resp.json()


def _fill_scenario_cart(client, headers):
    _add(client, headers, "p1", 10, 3)
    _add(client, headers, "p2", 5, 2)


class TestCart:
    def test_requires_user_header(self, client):
        assert client.get("/cart/").status_code == 401

    def test_adding_same_variant_merges(self, client, user_headers):
        _add(client, user_headers, "p1", 10, 1)
        body = _add(client, user_headers, "p1", 10, 2)

        assert body["message"] == "Cart updated"
        assert body["item"]["quantity"] == 3

    def test_cart_summary_uses_pricing_engine(self, client, user_headers):
        _fill_scenario_cart(client, user_headers)

        summary = client.get("/cart/", headers=user_headers).json()["summary"]
        assert summary["subtotal"] == 40
        assert summary["promotion_discount"] == 5
        assert summary["shipping_fee"] == 10
        assert summary["total"] == 45

    def test_update_to_zero_removes(self, client, user_headers):
        item = _add(client, user_headers, "p1", 10, 1)["item"]

        resp = client.put(f"/cart/update/{item['id']}", json={"quantity": 0}, headers=user_headers)
        assert resp.json()["message"] == "Item removed"
        assert client.get("/cart/", headers=user_headers).json()["items"] == []

    def test_other_users_items_are_hidden(self, client, user_headers):
        item = _add(client, user_headers, "p1", 10, 1)["item"]

        resp = client.delete(f"/cart/remove/{item['id']}", headers={"X-User-Id": "7"})
        assert resp.status_code == 404


class TestCheckout:
    def test_empty_cart_rejected(self, client, user_headers):
        resp = client.post("/checkout/summary", json={}, headers=user_headers)
        assert resp.status_code == 400

    def test_summary_with_store_settings_and_code(self, client, user_headers, admin_headers):
        client.put(
            "/admin/settings/pricing",
            json={"delivery_fee": 8, "tax_rate": 0.06},
            headers=admin_headers,
        )
        client.post(
            "/admin/discount-codes",
            json={"code": "tenoff", "discount_type": "flat", "discount_value": 2},
            headers=admin_headers,
        )
        _add(client, user_headers, "p1", 30, 5)

        resp = client.post("/checkout/summary", json={"discount_code": "TENOFF"}, headers=user_headers)
        assert resp.status_code == 200
        totals = resp.json()["totals"]

        assert totals["subtotal"] == 150
        assert totals["promotion_discount"] == 30
        assert totals["coupon_discount"] == 10
        assert totals["subtotal_after_discounts"] == 110
        assert totals["shipping_fee"] == 8
        assert totals["tax"] == pytest.approx(6.6)
        assert totals["total"] == pytest.approx(124.6)

    def test_invalid_code(self, client, user_headers):
        _add(client, user_headers, "p1", 10, 1)
        resp = client.post("/checkout/summary", json={"discount_code": "BOGUS"}, headers=user_headers)
        assert resp.status_code == 404

    def test_place_order(self, client, user_headers, admin_headers):
        client.post(
            "/admin/discount-codes",
            json={"code": "FIVE", "discount_type": "percentage", "discount_value": 5, "max_usage": 1},
            headers=admin_headers,
        )
        _fill_scenario_cart(client, user_headers)

        resp = client.post(
            "/checkout/place-order",
            json={"phone": "555-0100", "address": ADDRESS, "discount_code": "five"},
            headers=user_headers,
        )
        assert resp.status_code == 201
        order = resp.json()["order"]

        assert order["status"] == "Pending"
        assert order["discount_code"] == "FIVE"
        assert order["discount_amount"] == pytest.approx(2.0)
        assert order["promotion_discount"] == 5
        assert order["total"] == pytest.approx(43.0)
        assert len(order["items"]) == 2

        assert client.get("/cart/", headers=user_headers).json()["items"] == []

        codes = client.get("/admin/discount-codes", headers=admin_headers).json()["discount_codes"]
        assert codes[0]["usage_count"] == 1

        detail = client.get(f"/orders/{order['order_id']}", headers=user_headers).json()
        assert [e["event"] for e in detail["timeline"]] == ["order_placed"]

    def test_unknown_payment_method_rejected(self, client, user_headers):
        _add(client, user_headers, "p1", 10, 1)
        resp = client.post(
            "/checkout/place-order",
            json={"phone": "555-0100", "address": ADDRESS, "payment_method": "Bitcoin"},
            headers=user_headers,
        )
        assert resp.status_code == 422

    def test_place_order_needs_cart(self, client, user_headers):
        resp = client.post(
            "/checkout/place-order",
            json={"phone": "555-0100", "address": ADDRESS},
            headers=user_headers,
        )
        assert resp.status_code == 400


class TestOrders:
    def _place(self, client, headers):
        _add(client, headers, "p1", 10, 1)
        resp = client.post(
            "/checkout/place-order",
            json={"phone": "555-0100", "address": ADDRESS},
            headers=headers,
        )
        return resp.json()["order"]["order_id"]

    def test_my_orders(self, client, user_headers):
        order_id = self._place(client, user_headers)
        orders = client.get("/orders/my", headers=user_headers).json()["orders"]
        assert [o["order_id"] for o in orders] == [order_id]

        assert client.get("/orders/my", headers={"X-User-Id": "7"}).json()["orders"] == []

    def test_user_cancel(self, client, user_headers):
        order_id = self._place(client, user_headers)

        resp = client.post(f"/orders/{order_id}/cancel", headers=user_headers)
        assert resp.status_code == 200
        assert resp.json()["order"]["status"] == "Cancelled"

        again = client.post(f"/orders/{order_id}/cancel", headers=user_headers)
        assert again.status_code == 400

    def test_admin_status_transitions(self, client, user_headers, admin_headers):
        order_id = self._place(client, user_headers)

        ok = client.put(f"/admin/orders/{order_id}/status", json={"status": "Shipped"}, headers=admin_headers)
        assert ok.status_code == 200

        back = client.put(f"/admin/orders/{order_id}/status", json={"status": "Pending"}, headers=admin_headers)
        assert back.status_code == 400

        listing = client.get("/admin/orders?status=Shipped", headers=admin_headers).json()
        assert listing["total_items"] == 1

    def test_admin_list_is_paginated(self, client, user_headers, admin_headers):
        placed = [self._place(client, user_headers) for _ in range(3)]

        page_two = client.get("/admin/orders?page=2&limit=2", headers=admin_headers).json()
        assert page_two["total_items"] == 3
        assert page_two["total_pages"] == 2
        assert page_two["current_page"] == 2
        assert [o["order_id"] for o in page_two["results"]] == [placed[0]]

        clamped = client.get("/admin/orders?page=0&limit=0", headers=admin_headers).json()
        assert clamped["current_page"] == 1
        assert clamped["limit"] == 10
        assert len(clamped["results"]) == 3

    def test_admin_key_required(self, client):
        assert client.get("/admin/orders").status_code == 403
        assert client.get("/admin/orders", headers={"X-Admin-Key": "wrong"}).status_code == 403


def test_public_pricing_settings(client, admin_headers):
    body = client.get("/settings/pricing").json()
    assert body["delivery_fee"] is None
    assert body["effective_delivery_fee"] == 10
    assert body["free_shipping_threshold"] == 125

    client.put("/admin/settings/pricing", json={"delivery_fee": 6}, headers=admin_headers)
    assert client.get("/settings/pricing").json()["effective_delivery_fee"] == 6

    client.put("/admin/settings/pricing", json={"clear_delivery_fee": True}, headers=admin_headers)
    assert client.get("/settings/pricing").json()["delivery_fee"] is None


def test_health(client):
    body = client.get("/health/check").json()
    assert body["database"] == "ok"
