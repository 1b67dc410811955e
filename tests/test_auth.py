"""
Session tests: mock login, logout and role guards.
"""
import pytest
from fastapi import status


# =============================================================================
# TEST: Health Check
# =============================================================================
class TestHealthCheck:
    """Test health check endpoint."""

    def test_health_check(self, client):
        response = client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "Campus Spaces API"
        assert "version" in data


# =============================================================================
# TEST: Login (POST /api/auth/login)
# =============================================================================
class TestLogin:
    """Test the mock login flow."""

    def test_login_as_admin(self, client, store):
        response = client.post("/api/auth/login", json={"role": "admin"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["user"]["email"] == "admin@university.edu"
        assert data["user"]["role"] == "admin"
        assert data["user"]["universityId"] == "ADMIN001"
        assert store.is_admin() is True

    def test_login_as_user(self, client, store):
        response = client.post("/api/auth/login", json={"role": "user"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["universityId"] == "STU001"
        assert store.get_current_user().email == "student@university.edu"
        assert store.is_admin() is False

    def test_login_defaults_to_user(self, client):
        response = client.post("/api/auth/login", json={})
        assert response.json()["user"]["role"] == "user"

    def test_login_invalid_role(self, client):
        response = client.post("/api/auth/login", json={"role": "superuser"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_login_replaces_session(self, client, store, admin_session):
        client.post("/api/auth/login", json={"role": "user"})
        assert store.get_current_user().id == "2"


# =============================================================================
# TEST: Current user and logout
# =============================================================================
class TestSession:

    def test_me_requires_login(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_me_returns_current_user(self, client, admin_session):
        response = client.get("/api/auth/me")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["id"] == admin_session.id

    def test_logout_clears_session(self, client, store, admin_session):
        response = client.post("/api/auth/logout")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Logged out successfully"
        assert store.get_current_user() is None
        assert client.get("/api/auth/me").status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# TEST: Role guards
# =============================================================================
class TestRoleGuards:

    def test_admin_routes_require_login(self, client):
        response = client.get("/api/admin/spaces")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_admin_routes_reject_regular_user(self, client, user_session):
        response = client.get("/api/admin/spaces")
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Admin role required"

    def test_scan_requires_login(self, client, sample_space):
        response = client.get(f"/api/spaces/{sample_space.id}")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_admin_can_use_user_routes(self, client, admin_session, sample_space):
        response = client.get(f"/api/spaces/{sample_space.id}")
        assert response.status_code == status.HTTP_200_OK
