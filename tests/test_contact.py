import pytest

from studybuddy.models.contact import ContactMessage


def test_contact_message_is_stored(client, db_session):
    r = client.post(
        "/api/v1/contact",
        json={"name": " Ada ", "email": "ada@example.com", "subject": "Hello", "message": " Great app "},
    )

    assert r.status_code == 201
    assert r.json() == {"message": "Thank you! Your message has been sent successfully."}
    stored = db_session.query(ContactMessage).one()
    assert stored.name == "Ada"
    assert stored.message == "Great app"


@pytest.mark.parametrize("payload, detail", [
    ({"email": "ada@example.com", "message": "Hi"}, "Name is required."),
    ({"name": "Ada", "message": "Hi"}, "Email is required."),
    ({"name": "Ada", "email": "not-an-email", "message": "Hi"}, "Please enter a valid email address."),
    ({"name": "Ada", "email": "ada..lovelace@example.com", "message": "Hi"}, "Please enter a valid email address."),
    ({"name": "Ada", "email": "ada@example", "message": "Hi"}, "Please enter a valid email address."),
    ({"name": "Ada", "email": "ada@example.com", "message": "   "}, "Message is required."),
])
def test_contact_validation(client, db_session, payload, detail):
    r = client.post("/api/v1/contact", json=payload)

    assert r.status_code == 400
    assert r.json()["detail"] == detail
    assert db_session.query(ContactMessage).count() == 0
