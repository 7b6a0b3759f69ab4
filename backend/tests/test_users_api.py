# 사용자 API 테스트 (메모리 컬렉션 사용)
from datetime import datetime

import pytest
from bson import ObjectId

from passlib.hash import argon2

from tat_api.core.security import get_password_hash


def _create(client, **overrides):
    body = {"name": "Test User", "email": "test@example.com", "password": "password123"}
    body.update(overrides)
    return client.post("/api/users/create-user", json=body)


def _seed_user(fake_db, **fields):
    stamp = datetime(2024, 1, 1, 12, 0, 0)
    doc = {
        "_id": ObjectId(),
        "name": "Seeded",
        "email": "seeded@example.com",
        "phone": None,
        "role": "user",
        "password": get_password_hash("password123"),
        "createdAt": stamp,
        "updatedAt": stamp,
    }
    doc.update(fields)
    fake_db.collection("users").docs.append(doc)
    return doc


def test_create_user(client, fake_db):
    res = _create(client, phone="0812345678", role="admin")
    data = res.json()
    assert res.status_code == 201
    assert data["message"] == "User created successfully"
    user = data["data"]["user"]
    assert user["name"] == "Test User"
    assert user["phone"] == "0812345678"
    assert user["role"] == "admin"
    assert "password" not in user
    assert data["data"]["insertedId"] == user["_id"]
    assert user["createdAt"] == user["updatedAt"]

    stored = fake_db.collection("users").docs[0]
    assert stored["password"] != "password123"
    assert len(stored["password"]) > 20


def test_create_user_minimal_defaults(client):
    user = _create(client).json()["data"]["user"]
    assert user["phone"] is None
    assert user["role"] == "user"


@pytest.mark.parametrize("missing", ["name", "email", "password"])
def test_create_user_missing_field(client, fake_db, missing):
    res = _create(client, **{missing: None})
    assert res.status_code == 400
    assert res.json() == {"error": "Name, email, and password are required"}
    assert fake_db.collection("users").docs == []


def test_create_user_duplicate_email(client, fake_db):
    first = _create(client).json()["data"]["user"]
    res = _create(client, name="Other")
    assert res.status_code == 409
    assert res.json() == {"error": "Email already exists"}
    users = fake_db.collection("users").docs
    assert len(users) == 1
    assert users[0]["name"] == first["name"]


def test_create_user_not_acknowledged(client, fake_db):
    fake_db.collection("users").acknowledge = False
    res = _create(client)
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to create user"}


def test_get_user(client, fake_db):
    seeded = _seed_user(fake_db, phone="0899999999")
    res = client.get(f"/api/users/user/{seeded['_id']}")
    data = res.json()
    assert res.status_code == 200
    assert data["message"] == "User found"
    assert data["data"]["_id"] == str(seeded["_id"])
    assert data["data"]["phone"] == "0899999999"
    assert data["data"]["createdAt"] == "2024-01-01T12:00:00.000Z"
    assert "password" not in data["data"]


def test_get_user_not_found(client):
    res = client.get(f"/api/users/user/{ObjectId()}")
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


def test_get_user_malformed_id_is_server_error(client):
    res = client.get("/api/users/user/invalid-id")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}


def test_update_user_name(client, fake_db):
    seeded = _seed_user(fake_db)
    res = client.put(f"/api/users/update/{seeded['_id']}", json={"name": "Updated Name"})
    assert res.status_code == 200
    assert res.json() == {"message": "User updated successfully", "modifiedCount": 1}
    fetched = client.get(f"/api/users/user/{seeded['_id']}").json()["data"]
    assert fetched["name"] == "Updated Name"
    assert fetched["email"] == "seeded@example.com"


def test_update_user_empty_body_touches_updated_at(client, fake_db):
    seeded = _seed_user(fake_db)
    res = client.put(f"/api/users/update/{seeded['_id']}", json={})
    assert res.status_code == 200
    assert res.json()["modifiedCount"] == 1
    stored = fake_db.collection("users").docs[0]
    assert stored["updatedAt"] > seeded["createdAt"]
    assert stored["createdAt"] == seeded["createdAt"]


def test_update_user_phone_can_be_cleared(client, fake_db):
    seeded = _seed_user(fake_db, phone="0812345678")
    client.put(f"/api/users/update/{seeded['_id']}", json={"phone": None})
    assert fake_db.collection("users").docs[0]["phone"] is None


def test_update_user_short_password(client, fake_db):
    seeded = _seed_user(fake_db)
    res = client.put(f"/api/users/update/{seeded['_id']}", json={"password": "123"})
    assert res.status_code == 400
    assert res.json() == {"error": "Password must be at least 6 characters long"}


def test_update_user_not_found(client):
    res = client.put(f"/api/users/update/{ObjectId()}", json={"name": "x"})
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


def test_update_user_malformed_id(client):
    res = client.put("/api/users/update/invalid-id", json={"name": "x"})
    assert res.status_code == 500
    assert "error" in res.json()


def test_update_password_then_login(client, fake_db):
    seeded = _seed_user(fake_db)
    res = client.put(f"/api/users/update/{seeded['_id']}", json={"password": "newpassword123"})
    assert res.status_code == 200

    ok = client.post("/api/users/login", json={"email": "seeded@example.com", "password": "newpassword123"})
    assert ok.status_code == 200
    old = client.post("/api/users/login", json={"email": "seeded@example.com", "password": "password123"})
    assert old.status_code == 401


def test_login_success(client, fake_db):
    seeded = _seed_user(fake_db)
    res = client.post("/api/users/login", json={"email": "seeded@example.com", "password": "password123"})
    data = res.json()
    assert res.status_code == 200
    assert data["message"] == "Login successful"
    assert data["data"]["_id"] == str(seeded["_id"])
    assert "password" not in data["data"]


def test_login_failures_are_indistinguishable(client, fake_db):
    _seed_user(fake_db)
    wrong_pw = client.post("/api/users/login", json={"email": "seeded@example.com", "password": "nope123"})
    no_user = client.post("/api/users/login", json={"email": "ghost@example.com", "password": "password123"})
    assert wrong_pw.status_code == no_user.status_code == 401
    assert wrong_pw.json() == no_user.json() == {"error": "Invalid email or password"}


def test_login_with_argon2id_hash(client, fake_db):
    # 이전 서버가 저장한 argon2id 해시도 로그인 가능해야 함
    hashed = argon2.using(type="ID").hash("password123")
    assert hashed.startswith("$argon2id$")
    _seed_user(fake_db, password=hashed)

    ok = client.post("/api/users/login", json={"email": "seeded@example.com", "password": "password123"})
    assert ok.status_code == 200
    wrong = client.post("/api/users/login", json={"email": "seeded@example.com", "password": "nope123"})
    assert wrong.status_code == 401
    assert wrong.json() == {"error": "Invalid email or password"}


@pytest.mark.parametrize("stored", [None, "", "not-a-hash", "$argon2id$broken"])
def test_login_with_unusable_stored_hash_is_unauthorized(client, fake_db, stored):
    _seed_user(fake_db, password=stored)
    res = client.post("/api/users/login", json={"email": "seeded@example.com", "password": "password123"})
    assert res.status_code == 401
    assert res.json() == {"error": "Invalid email or password"}


def test_login_with_missing_password_field_is_unauthorized(client, fake_db):
    seeded = _seed_user(fake_db)
    del seeded["password"]
    res = client.post("/api/users/login", json={"email": "seeded@example.com", "password": "password123"})
    assert res.status_code == 401


@pytest.mark.parametrize("body", [{"email": "a@x.com"}, {"password": "secret1"}, {}])
def test_login_missing_fields(client, body):
    res = client.post("/api/users/login", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": "Email and password are required"}
