from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import update

from restaurant.data.models import ContactMessageModel, OrderModel, UserModel
from restaurant.repos.order_repo import OrderRepo
from restaurant.services.admin_service import CONTACTS_LIMIT

from conftest import register_and_login

ADMIN_PATHS = ["/api/admin/users", "/api/admin/orders", "/api/admin/contacts", "/api/admin/summary"]


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def _place_order(client, user_id):
    r = client.post(
        "/api/orders",
        json={"userId": user_id, "items": [{"name": "Pizza", "price": 200, "quantity": 1}], "totalAmount": 200},
    )
    return r.json()["orderId"]


@pytest.mark.parametrize("path", ADMIN_PATHS)
def test_admin_endpoints_require_token(client, path):
    r = client.get(path)
    assert r.status_code == 401
    assert r.json() == {"message": "Not authenticated"}


@pytest.mark.parametrize("path", ADMIN_PATHS)
def test_admin_endpoints_reject_regular_users(client, path):
    _, token = register_and_login(client, "diner@example.com")
    r = client.get(path, headers=_auth(token))
    assert r.status_code == 403
    assert r.json() == {"message": "Admin access required"}


def test_logout_invalidates_admin_token(client, admin):
    client.post("/api/logout", json={"userId": admin["user"]["id"]})
    assert client.get("/api/admin/summary", headers=_auth(admin["token"])).status_code == 401


def test_admin_lists_users_with_totals(client, admin, user):
    _place_order(client, user["id"])

    users = client.get("/api/admin/users", headers=_auth(admin["token"])).json()["users"]

    by_email = {u["email"]: u for u in users}
    assert by_email["diner@example.com"]["totalOrders"] == 1
    assert by_email["diner@example.com"]["totalSpent"] == 200.0
    assert by_email[admin["user"]["email"]]["totalOrders"] == 0


def test_admin_lists_orders_with_email(client, admin, user):
    order_id = _place_order(client, user["id"])

    orders = client.get("/api/admin/orders", headers=_auth(admin["token"])).json()["orders"]

    assert len(orders) == 1
    assert orders[0]["id"] == order_id
    assert orders[0]["userId"] == user["id"]
    assert orders[0]["email"] == "diner@example.com"
    assert orders[0]["status"] == "Pending"


def test_admin_lists_contacts_and_summary(client, admin, user):
    client.post(
        "/api/contact",
        json={"name": "Ravi", "email": "ravi@example.com", "phone": "7012345678", "message": "Great biryani, thanks!"},
    )
    _place_order(client, user["id"])

    contacts = client.get("/api/admin/contacts", headers=_auth(admin["token"])).json()["contacts"]
    assert [c["name"] for c in contacts] == ["Ravi"]

    summary = client.get("/api/admin/summary", headers=_auth(admin["token"])).json()
    assert summary == {"totalUsers": 2, "totalOrders": 1, "totalRevenue": 200.0, "totalContacts": 1}


def test_status_moves_forward(client, admin, user):
    order_id = _place_order(client, user["id"])
    path = f"/api/admin/orders/{order_id}/status"

    for status in ("Accepted", "Completed"):
        r = client.patch(path, json={"status": status}, headers=_auth(admin["token"]))
        assert r.status_code == 200
        assert r.json() == {"message": "Order status updated successfully."}

    assert client.get(f"/api/orders/{user['id']}").json()["orders"][0]["status"] == "Completed"


def test_failed_status_commit_keeps_old_status(unsafe_client, admin, user, monkeypatch):
    client = unsafe_client
    order_id = _place_order(client, user["id"])

    def broken_commit(self):
        raise RuntimeError("commit failed")

    monkeypatch.setattr(OrderRepo, "commit", broken_commit)

    r = client.patch(f"/api/admin/orders/{order_id}/status", json={"status": "Accepted"}, headers=_auth(admin["token"]))
    assert r.status_code == 500

    monkeypatch.undo()
    assert client.get(f"/api/orders/{user['id']}").json()["orders"][0]["status"] == "Pending"


def test_status_cannot_move_backwards(client, admin, user):
    order_id = _place_order(client, user["id"])
    path = f"/api/admin/orders/{order_id}/status"
    client.patch(path, json={"status": "Completed"}, headers=_auth(admin["token"]))

    r = client.patch(path, json={"status": "Pending"}, headers=_auth(admin["token"]))

    assert r.status_code == 400
    assert r.json() == {"message": "Invalid status transition."}


def test_invalid_status_value(client, admin, user):
    order_id = _place_order(client, user["id"])
    r = client.patch(f"/api/admin/orders/{order_id}/status", json={"status": "Shipped"}, headers=_auth(admin["token"]))
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid status value."}


def test_status_update_for_unknown_order(client, admin):
    r = client.patch("/api/admin/orders/404/status", json={"status": "Accepted"}, headers=_auth(admin["token"]))
    assert r.status_code == 404


def _backdate(db_session, model, ids, start):
    # pierwsze id dostaje najnowsza date, odwrotnie niz kolejnosc wstawiania
    for offset, row_id in enumerate(reversed(ids)):
        db_session.execute(update(model).where(model.id == row_id).values(created_at=start + timedelta(minutes=offset)))
    db_session.commit()


def test_admin_contacts_are_newest_first_and_capped(client, admin, db_session):
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    # wstawiane od najnowszego, zeby kolejnosc id nie pokrywala sie z data
    for n in reversed(range(105)):
        db_session.add(
            ContactMessageModel(
                name=f"Guest {n:03d}",
                email=f"guest{n}@example.com",
                phone="7012345678",
                message="Table for two on Friday please",
                created_at=start + timedelta(minutes=n),
            )
        )
    db_session.commit()

    contacts = client.get("/api/admin/contacts", headers=_auth(admin["token"])).json()["contacts"]

    assert len(contacts) == CONTACTS_LIMIT
    assert [c["name"] for c in contacts] == [f"Guest {n:03d}" for n in range(104, 4, -1)]


def test_admin_users_are_newest_first(client, admin, user, db_session):
    late, _ = register_and_login(client, "late@example.com")
    ids = [admin["user"]["id"], user["id"], late["id"]]
    _backdate(db_session, UserModel, ids, datetime(2024, 3, 1, tzinfo=timezone.utc))

    users = client.get("/api/admin/users", headers=_auth(admin["token"])).json()["users"]

    assert [u["id"] for u in users] == ids


def test_admin_orders_are_newest_first(client, admin, user, db_session):
    ids = [_place_order(client, user["id"]) for _ in range(3)]
    _backdate(db_session, OrderModel, ids, datetime(2024, 3, 1, tzinfo=timezone.utc))

    orders = client.get("/api/admin/orders", headers=_auth(admin["token"])).json()["orders"]

    assert [o["id"] for o in orders] == ids
