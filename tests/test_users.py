"""User profile API tests."""

from src.models.user import User


def test_get_profile(client, auth_headers):
    """Test getting current user profile."""
    response = client.get("/users/profile", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == auth_headers.user_id
    assert data["email"] == auth_headers.email
    assert data["name"] is None


def test_get_profile_hides_password_hash(client, auth_headers):
    """Test the password hash is never serialized."""
    data = client.get("/users/profile", headers=auth_headers).json()
    assert "password_hash" not in data
    assert "hash" not in data


def test_get_profile_requires_auth(client):
    response = client.get("/users/profile")
    assert response.status_code == 401


def test_get_profile_for_deleted_user(client, db, auth_headers):
    """Test a token whose account no longer exists is rejected."""
    db.query(User).filter(User.id == auth_headers.user_id).delete()
    db.commit()

    response = client.get("/users/profile", headers=auth_headers)
    assert response.status_code == 401


def test_create_bookmark_for_deleted_user(client, db, auth_headers):
    """Test a token whose account no longer exists cannot create bookmarks."""
    from src.models.bookmark import Bookmark

    db.query(User).filter(User.id == auth_headers.user_id).delete()
    db.commit()

    response = client.post(
        "/bookmarks",
        headers=auth_headers,
        json={"title": "Orphan", "link": "https://example.com"},
    )
    assert response.status_code == 401
    assert db.query(Bookmark).count() == 0


def test_update_user(client, auth_headers):
    """Test updating the current user's name."""
    response = client.put("/users", headers=auth_headers, json={"name": "Test User"})
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Test User"
    assert data["email"] == auth_headers.email
    assert "password_hash" not in data

    profile = client.get("/users/profile", headers=auth_headers).json()
    assert profile["name"] == "Test User"


def test_update_user_email(client, auth_headers):
    """Test changing email lets the user sign in with the new one."""
    response = client.put("/users", headers=auth_headers, json={"email": "renamed@example.com"})
    assert response.status_code == 200
    assert response.json()["email"] == "renamed@example.com"

    signin = client.post(
        "/auth/signin", json={"email": "renamed@example.com", "password": "testpass123"}
    )
    assert signin.status_code == 200


def test_update_user_duplicate_email(client, auth_headers, other_auth_headers):
    """Test taking another user's email fails."""
    response = client.put(
        "/users", headers=auth_headers, json={"email": other_auth_headers.email}
    )
    assert response.status_code == 400
    assert "already been taken" in response.json()["detail"]


def test_update_user_invalid_email(client, auth_headers):
    response = client.put("/users", headers=auth_headers, json={"email": "not-an-email"})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "email"


def test_update_user_cannot_set_password_hash(client, db, auth_headers):
    """Test unknown fields such as the hash are ignored."""
    before = db.query(User).filter(User.id == auth_headers.user_id).first().password_hash

    response = client.put("/users", headers=auth_headers, json={"password_hash": "x"})
    assert response.status_code == 200

    db.expire_all()
    after = db.query(User).filter(User.id == auth_headers.user_id).first().password_hash
    assert after == before


def test_update_user_requires_auth(client):
    response = client.put("/users", json={"name": "Nobody"})
    assert response.status_code == 401
