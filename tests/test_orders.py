from datetime import datetime, timedelta, timezone

from restaurant.data.models import OrderModel, OrderItemModel
from restaurant.repos.cart_repo import CartRepo

PIZZA_ORDER = {"items": [{"name": "Pizza", "price": 200, "quantity": 2}], "totalAmount": 400}


def test_order_is_created_pending_with_items_and_cart_cleared(client, user):
    client.post("/api/cart", json={"userId": user["id"], "items": PIZZA_ORDER["items"]})

    r = client.post("/api/orders", json={"userId": user["id"], **PIZZA_ORDER})

    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Order created successfully"
    order_id = body["orderId"]

    orders = client.get(f"/api/orders/{user['id']}").json()["orders"]
    assert len(orders) == 1
    order = orders[0]
    assert order["id"] == order_id
    assert order["status"] == "Pending"
    assert order["totalAmount"] == 400.0
    assert order["items"] == [{"name": "Pizza", "price": 200.0, "quantity": 2, "subtotal": 400.0}]

    assert client.get(f"/api/cart/{user['id']}").json() == {"items": []}


def test_orders_are_listed_newest_first(client, user, db_session):
    first = client.post("/api/orders", json={"userId": user["id"], **PIZZA_ORDER}).json()["orderId"]
    second = client.post(
        "/api/orders",
        json={"userId": user["id"], "items": [{"name": "Burger", "price": 120, "quantity": 1}], "totalAmount": 120},
    ).json()["orderId"]

    # pierwsze zamowienie wyraznie starsze
    db_session.get(OrderModel, first).created_at = datetime.now(timezone.utc) - timedelta(hours=1)
    db_session.commit()

    ids = [o["id"] for o in client.get(f"/api/orders/{user['id']}").json()["orders"]]
    assert ids == [second, first]


def test_totals_are_recomputed_from_menu(client, user, db_session):
    r = client.post(
        "/api/orders",
        json={
            "userId": user["id"],
            "items": [
                {"name": "Pizza", "price": 1, "quantity": 1},
                {"name": "Gulab Jamun", "price": 1, "quantity": 3},
            ],
            "totalAmount": 2,
        },
    )
    assert r.status_code == 201

    order = db_session.get(OrderModel, r.json()["orderId"])
    assert float(order.total_amount) == 350.0
    subtotals = sorted(float(i.subtotal) for i in order.items)
    assert subtotals == [150.0, 200.0]


def test_order_requires_items_and_total(client, user):
    for payload in (
        {"userId": user["id"], "items": [], "totalAmount": 100},
        {"userId": user["id"], "items": PIZZA_ORDER["items"]},
        {"items": PIZZA_ORDER["items"], "totalAmount": 400},
    ):
        r = client.post("/api/orders", json=payload)
        assert r.status_code == 400
        assert r.json()["message"] == "User ID, items array, and total amount are required."


def test_failure_inside_order_rolls_everything_back(unsafe_client, user, db_session, monkeypatch):
    client = unsafe_client
    client.post("/api/cart", json={"userId": user["id"], "items": PIZZA_ORDER["items"]})

    def broken_clear(self, user_id):
        raise RuntimeError("lock timeout")

    monkeypatch.setattr(CartRepo, "clear_cart", broken_clear)

    r = client.post("/api/orders", json={"userId": user["id"], **PIZZA_ORDER})
    assert r.status_code == 500

    monkeypatch.undo()
    assert db_session.query(OrderModel).count() == 0
    assert db_session.query(OrderItemModel).count() == 0
    assert client.get(f"/api/cart/{user['id']}").json()["items"] == [{"name": "Pizza", "price": 200.0, "quantity": 2}]


def test_list_orders_rejects_bad_user_id(client):
    assert client.get("/api/orders/0").status_code == 400
