"""Contract tests for the cart and order endpoints."""

import pytest

API = "/api/v1"


@pytest.fixture
def book(book_factory):
    return book_factory(title="Rebecca", price=11.0)


@pytest.fixture
def placed_order(client, customer_headers, book) -> dict:
    client.post(
        f"{API}/cart/items",
        json={"book_id": book.id, "quantity": 2},
        headers=customer_headers,
    )
    response = client.post(
        f"{API}/orders/",
        json={"shipping_address": "Manderley"},
        headers=customer_headers,
    )
    assert response.status_code == 201
    return response.json()


class TestCartApi:
    def test_requires_authentication(self, client):
        assert client.get(f"{API}/cart/").status_code == 401

    def test_add_update_remove(self, client, customer_headers, book):
        added = client.post(
            f"{API}/cart/items", json={"book_id": book.id}, headers=customer_headers
        )
        assert added.status_code == 200
        line = added.json()["items"][0]
        assert line["quantity"] == 1
        assert line["book_title"] == "Rebecca"

        updated = client.put(
            f"{API}/cart/items/{line['id']}",
            json={"quantity": 3},
            headers=customer_headers,
        )
        assert updated.json()["total"] == 33.0

        removed = client.delete(f"{API}/cart/items/{line['id']}", headers=customer_headers)
        assert removed.json()["items"] == []

    def test_add_unknown_book(self, client, customer_headers):
        response = client.post(
            f"{API}/cart/items", json={"book_id": "missing"}, headers=customer_headers
        )

        assert response.status_code == 404

    def test_invalid_quantity(self, client, customer_headers, book):
        response = client.post(
            f"{API}/cart/items",
            json={"book_id": book.id, "quantity": 0},
            headers=customer_headers,
        )

        assert response.status_code == 422

    def test_clear(self, client, customer_headers, book):
        client.post(f"{API}/cart/items", json={"book_id": book.id}, headers=customer_headers)

        response = client.delete(f"{API}/cart/", headers=customer_headers)

        assert response.status_code == 200
        assert client.get(f"{API}/cart/", headers=customer_headers).json()["items"] == []


class TestOrderApi:
    def test_checkout(self, client, customer_headers, placed_order, email_fake, customer):
        assert placed_order["status"] == "pending"
        assert placed_order["total"] == 22.0
        assert placed_order["items"][0]["book_title"] == "Rebecca"
        assert client.get(f"{API}/cart/", headers=customer_headers).json()["items"] == []
        assert email_fake.sent == [
            (customer.email, f"Order confirmation {placed_order['id']}")
        ]

    def test_empty_cart_checkout(self, client, customer_headers):
        response = client.post(
            f"{API}/orders/", json={"shipping_address": "x"}, headers=customer_headers
        )

        assert response.status_code == 400

    def test_listing_scoped_to_customer(
        self, client, customer_headers, admin_headers, placed_order, user_factory, auth_headers
    ):
        stranger_headers = auth_headers(user_factory())

        assert len(client.get(f"{API}/orders/", headers=customer_headers).json()) == 1
        assert len(client.get(f"{API}/orders/", headers=admin_headers).json()) == 1
        assert client.get(f"{API}/orders/", headers=stranger_headers).json() == []
        assert (
            client.get(
                f"{API}/orders/{placed_order['id']}", headers=stranger_headers
            ).status_code
            == 404
        )

    def test_admin_moves_status(self, client, admin_headers, customer_headers, placed_order):
        url = f"{API}/orders/{placed_order['id']}/status"

        assert (
            client.put(url, json={"status": "confirmed"}, headers=customer_headers).status_code
            == 403
        )
        response = client.put(url, json={"status": "confirmed"}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["status"] == "confirmed"

        response = client.put(url, json={"status": "delivered"}, headers=admin_headers)
        assert response.status_code == 400

    def test_customer_cancels(self, client, customer_headers, placed_order):
        response = client.post(
            f"{API}/orders/{placed_order['id']}/cancel", headers=customer_headers
        )

        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"

    def test_stranger_cannot_cancel(self, client, placed_order, user_factory, auth_headers):
        response = client.post(
            f"{API}/orders/{placed_order['id']}/cancel",
            headers=auth_headers(user_factory()),
        )

        assert response.status_code == 404

    def test_user_with_orders_cannot_be_deleted(
        self, client, admin_headers, customer, placed_order
    ):
        response = client.delete(f"{API}/users/{customer.id}", headers=admin_headers)

        assert response.status_code == 409
