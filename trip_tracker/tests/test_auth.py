"""
Tests for authentication endpoints.
"""
from datetime import timedelta
from trip_tracker.core.security import create_access_token


def test_signup(client):
    """Test user signup."""
    response = client.post(
        "/auth/signup",
        json={
            "username": "testuser",
            "email": "test@example.com",
            "password": "testpassword123"
        }
    )
    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "testuser"
    assert "password" not in body
    assert "hashed_password" not in body


def test_signup_duplicate_username(client, alice):
    """Test signup with a taken username."""
    response = client.post(
        "/auth/signup",
        json={
            "username": "alice",
            "email": "other@example.com",
            "password": "testpassword123"
        }
    )
    assert response.status_code == 400


def test_login_then_use_token(client):
    """Test login and use of the returned bearer token."""
    client.post(
        "/auth/signup",
        json={
            "username": "testuser2",
            "email": "test2@example.com",
            "password": "testpassword123"
        }
    )

    response = client.post(
        "/auth/login",
        json={
            "username": "testuser2",
            "password": "testpassword123"
        }
    )
    assert response.status_code == 200
    token = response.json()["access_token"]
    assert response.json()["token_type"] == "bearer"

    me = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["username"] == "testuser2"


def test_login_invalid_credentials(client):
    """Test login with invalid credentials."""
    response = client.post(
        "/auth/login",
        json={
            "username": "nonexistent",
            "password": "wrongpassword"
        }
    )
    assert response.status_code == 401


def test_login_inactive_user(client, user_factory):
    """Test login for a deactivated account."""
    user_factory("dormant", is_active=False)
    response = client.post(
        "/auth/login",
        json={"username": "dormant", "password": "testpassword123"}
    )
    assert response.status_code == 403


def test_expired_token_is_rejected(client, alice):
    """Test that an expired bearer token yields 401."""
    token = create_access_token(
        data={"sub": alice.username, "user_id": alice.id},
        expires_delta=timedelta(seconds=-1)
    )
    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
