import pytest

from restaurant.data.models import ContactMessageModel

VALID = {
    "name": "Asha",
    "email": "asha@example.com",
    "phone": "9876543210",
    "message": "Do you cater for parties of twenty?",
}


def test_contact_message_is_stored_trimmed(client, db_session):
    r = client.post("/api/contact", json={**VALID, "name": "  Asha  ", "message": "  Do you cater for parties?  "})

    assert r.status_code == 201
    assert r.json() == {"message": "Message submitted successfully"}

    row = db_session.query(ContactMessageModel).one()
    assert row.name == "Asha"
    assert row.message == "Do you cater for parties?"


def test_invalid_phone_is_rejected_without_insert(client, db_session):
    r = client.post("/api/contact", json={**VALID, "phone": "12345"})

    assert r.status_code == 400
    assert r.json()["message"] == "Phone number must be 10 digits starting with 6-9."
    assert db_session.query(ContactMessageModel).count() == 0


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("name", "Al", "Name must be at least 3 characters."),
        ("email", "asha@", "Valid email is required."),
        ("phone", "5876543210", "Phone number must be 10 digits starting with 6-9."),
        ("message", "Too short", "Message must be at least 10 characters."),
    ],
)
def test_contact_validation(client, field, value, message):
    r = client.post("/api/contact", json={**VALID, field: value})
    assert r.status_code == 400
    assert r.json()["message"] == message
