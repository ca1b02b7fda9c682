import os

# szybsze hashowanie w testach, musi byc przed importem restaurant
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from restaurant.api import create_app
from restaurant.data.database import Database
from restaurant.data.seed import init_db

ADMIN_EMAIL = "owner@restaurant.test"
PASSWORD = "secret-pass-1"


@pytest.fixture
def database(tmp_path):
    db = Database(url=f"sqlite:///{tmp_path / 'test.db'}", on_connect=init_db)
    yield db
    db.dispose()


@pytest.fixture
def app(database):
    return create_app(database=database, admin_email=ADMIN_EMAIL)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def unsafe_client(app):
    # nieobsluzone wyjatki jako 500 zamiast rzucania w tescie
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


def register_and_login(client, email, password=PASSWORD):
    r = client.post("/api/register", json={"email": email, "password": password})
    assert r.status_code == 201, r.text
    r = client.post("/api/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    body = r.json()
    return body["user"], body["token"]


@pytest.fixture
def user(client):
    user, _ = register_and_login(client, "diner@example.com")
    return user


@pytest.fixture
def admin(client):
    user, token = register_and_login(client, ADMIN_EMAIL)
    return {"user": user, "token": token}
