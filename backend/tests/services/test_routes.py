"""HTTP adapter — status codes, error envelope and wire formats over the services.

Invariants:
    - Domain errors map to their HTTP status with the structured error envelope
    - Prices serialize as two-decimal strings, timestamps without fraction or zone
    - Request validation failures answer 400
"""

import re

TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$")


async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    ready = await client.get("/api/v1/health/ready")
    assert ready.status_code == 200
    assert ready.json()["checks"]["database"] == "healthy"


async def test_list_items_with_price_strings(client, catalog):
    res = await client.get("/api/v1/items")
    assert res.status_code == 200
    body = res.json()
    assert [i["id"] for i in body] == sorted(i["id"] for i in body)
    book = next(i for i in body if i["id"] == catalog.book_id)
    assert book["price"] == "10.00"
    assert book["authors"] == ["George Orwell"]


async def test_age_filter_and_conflicting_filters(client, catalog):
    res = await client.get("/api/v1/items", params={"age": 10})
    assert catalog.newspaper_id not in [i["id"] for i in res.json()]

    bad = await client.get("/api/v1/items", params={"age": -1})
    assert bad.status_code == 400
    assert bad.json()["error"]["code"] == "INVALID_ARGUMENT"

    both = await client.get("/api/v1/items", params={"age": 10, "genre_id": 1})
    assert both.status_code == 400


async def test_missing_item_is_404_envelope(client, catalog):
    res = await client.get("/api/v1/items/9999")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["category"] == "resource_not_found"


async def test_create_item(client, catalog):
    payload = {
        "name": "Brave New World",
        "publishing_date": "1932-01-01",
        "language": "English",
        "price": "8.99",
        "stock_quantity": 2,
        "publisher_id": catalog.publisher_id,
        "age_category_id": catalog.all_ages_id,
        "condition": {"kind": "Used", "grade": "Fair", "has_annotations": False},
        "content": {
            "type": "Book", "pages": 288, "cover": "SpiralBound",
            "author_ids": [catalog.author_id], "genre_ids": [catalog.genre_id],
        },
    }
    res = await client.post("/api/v1/items", json=payload)
    assert res.status_code == 201
    body = res.json()
    assert body["content_type"] == "Book"
    assert body["cover"] == "SpiralBound"
    assert body["grade"] == "Fair"
    assert body["is_used"] is True
    assert body["price"] == "8.99"


async def test_create_item_with_unknown_publisher(client, catalog):
    payload = {
        "name": "Orphan", "publishing_date": "2000-01-01", "language": "English",
        "price": "1.00", "publisher_id": 9999, "age_category_id": catalog.all_ages_id,
        "condition": {"kind": "New"},
    }
    res = await client.post("/api/v1/items", json=payload)
    assert res.status_code == 404


async def test_create_item_validation_error(client, catalog):
    payload = {
        "name": "Bad", "publishing_date": "2000-01-01", "language": "English",
        "price": "-1", "publisher_id": catalog.publisher_id,
        "age_category_id": catalog.all_ages_id, "condition": {"kind": "New"},
    }
    res = await client.post("/api/v1/items", json=payload)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_stock_endpoints(client, catalog):
    res = await client.post(
        f"/api/v1/items/{catalog.magazine_id}/stock/decrease", json={"amount": 3},
    )
    assert res.json() == {"item_id": catalog.magazine_id, "stock_quantity": 0}

    over = await client.post(
        f"/api/v1/items/{catalog.magazine_id}/stock/decrease", json={"amount": 1},
    )
    assert over.status_code == 409
    assert over.json()["error"]["code"] == "INSUFFICIENT_STOCK"


async def test_cart_to_confirmed_order(client, catalog, adult):
    base = f"/api/v1/customers/{adult}/cart"
    await client.post(f"{base}/items", json={"item_id": catalog.book_id, "quantity": 2})
    cart = (await client.post(f"{base}/items", json={"item_id": catalog.magazine_id})).json()
    assert cart["total_price"] == "25.50"

    pending = await client.post(f"/api/v1/orders/{cart['id']}/checkout")
    assert pending.json()["status"] == "Pending"

    confirmed = await client.post(
        f"/api/v1/orders/{cart['id']}/confirm", json={"payment_type": "ApplePay"},
    )
    body = confirmed.json()
    assert confirmed.status_code == 200
    assert body["status"] == "Confirmed"
    assert body["payment"]["amount"] == "25.50"
    assert TIMESTAMP.match(body["confirmed_at"])
    assert body["last_updated_at"] == body["confirmed_at"]

    mine = await client.get(f"/api/v1/customers/{adult}/orders")
    assert [o["id"] for o in mine.json()] == [cart["id"]]


async def test_illegal_status_change_is_409(client, catalog, adult):
    cart = (await client.post(
        f"/api/v1/customers/{adult}/cart/items", json={"item_id": catalog.book_id},
    )).json()
    res = await client.put(
        f"/api/v1/orders/{cart['id']}/status", json={"status": "Shipped"},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "INVALID_TRANSITION"


async def test_review_round(client, catalog, adult):
    res = await client.post(
        f"/api/v1/items/{catalog.book_id}/reviews",
        json={"customer_id": adult, "rating": 4, "text": "Solid"},
    )
    assert res.status_code == 201
    assert TIMESTAMP.match(res.json()["created_at"])

    item = (await client.get(f"/api/v1/items/{catalog.book_id}")).json()
    assert item["average_rating"] == 4.0

    gone = await client.delete(f"/api/v1/reviews/{res.json()['id']}")
    assert gone.status_code == 204


async def test_reference_data_creation(client):
    res = await client.post("/api/v1/genres", json={"name": "  Satire "})
    assert res.status_code == 201
    assert res.json()["name"] == "Satire"


async def test_assign_orders_to_deleted_customer_route(client, catalog, adult, deleted_customer):
    await client.post(
        f"/api/v1/customers/{adult}/cart/items",
        json={"item_id": catalog.book_id, "quantity": 1},
    )
    res = await client.post(f"/api/v1/customers/{adult}/orders/assign-to-deleted")
    assert res.status_code == 200
    assert res.json() == {"customer_id": adult, "orders_moved": 0}
    cart = await client.get(f"/api/v1/customers/{adult}/cart")
    assert cart.status_code == 404
