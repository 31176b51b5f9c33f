"""
Registration, login and bearer token resolution.
"""

from app.core.security import create_access_token, decode_token
from app.models.user import User


def test_register_returns_token_and_profile(client):
    r = client.post("/api/auth/register", json={
        "name": "Ada Lovelace", "email": "Ada@Example.com", "password": "engine1",
        "phone": "+44 20 0000 0000",
    })
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["id"].startswith("U") and len(body["user"]["id"]) == 7
    claims = decode_token(body["token"])
    assert claims["sub"] == body["user"]["id"]
    assert set(claims) == {"sub", "exp"}


def test_register_duplicate_email_conflicts_without_token(client, user):
    r = client.post("/api/auth/register", json={
        "name": "Someone Else", "email": "GRACE@example.com", "password": "whatever",
    })
    assert r.status_code == 409
    assert r.json() == {"message": "User with this email already exists"}


def test_register_requires_name_email_password(client):
    r = client.post("/api/auth/register", json={"email": "x@example.com"})
    assert r.status_code == 400
    assert r.json()["message"] == "Name, email, and password are required"


def test_register_rejects_oversized_fields(client):
    r = client.post("/api/auth/register", json={
        "name": "N" * 201, "email": "long@example.com", "password": "pw123456",
    })
    assert r.status_code == 400
    assert r.json()["message"].startswith("name")


def test_password_is_not_stored_in_clear(client, db):
    client.post("/api/auth/register", json={"name": "N", "email": "n@example.com", "password": "plain-pw"})
    u = db.query(User).filter(User.email == "n@example.com").one()
    assert u.password_hash != "plain-pw"
    assert u.password_hash.startswith("$pbkdf2-sha256$")


def test_login(client, user):
    r = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "secret123"})
    assert r.status_code == 200
    assert r.json()["user"] == {"id": "U000001", "name": "Grace Hopper", "email": "grace@example.com"}

    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {r.json()['token']}"})
    assert r.status_code == 200
    assert r.json()["user"]["id"] == "U000001"


def test_login_rejects_bad_credentials(client, user):
    r = client.post("/api/auth/login", json={"email": "grace@example.com", "password": "wrong"})
    assert r.status_code == 401
    assert r.json() == {"message": "Invalid credentials"}

    r = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert r.status_code == 401


def test_login_requires_fields(client):
    r = client.post("/api/auth/login", json={"email": "grace@example.com"})
    assert r.status_code == 400


def test_me_requires_token(client):
    r = client.get("/api/auth/me")
    assert r.status_code == 401
    assert r.json() == {"message": "Authentication required"}


def test_me_rejects_garbage_and_expired_tokens(client, user):
    r = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401

    expired = create_access_token(user.id, expires_minutes=-5)
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json() == {"message": "Invalid or expired token"}


def test_token_for_deleted_user_is_rejected(client, db, user):
    token = create_access_token(user.id)
    db.delete(user)
    db.commit()

    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json() == {"message": "User not found"}
