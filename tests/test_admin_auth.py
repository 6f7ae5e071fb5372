import pytest
from datetime import timedelta
from jose import jwt

from clinic_admin.core.errors import InvalidCredentials, MissingInput, NotAuthorized
from clinic_admin.core.security import AdminCredentials, create_admin_token, get_password_hash, pwd_context
from clinic_admin.services.auth_service import AdminAuthService

credentials = AdminCredentials(email="admin@x.com", password="right", secret="unit-secret")


class TestAdminAuthService:

    def test_login_returns_token_with_email(self):
        """Test a matching login mints a token carrying the email."""
        token = AdminAuthService(credentials).login("admin@x.com", "right")

        payload = jwt.decode(token, "unit-secret", algorithms=["HS256"])
        assert payload["email"] == "admin@x.com"
        assert "exp" in payload

    def test_login_wrong_password(self):
        with pytest.raises(InvalidCredentials):
            AdminAuthService(credentials).login("admin@x.com", "wrong")

    def test_login_wrong_email(self):
        with pytest.raises(InvalidCredentials):
            AdminAuthService(credentials).login("someone@x.com", "right")

    @pytest.mark.parametrize("email,password", [(None, "right"), ("admin@x.com", None), ("", "")])
    def test_login_missing_input(self, email, password):
        with pytest.raises(MissingInput):
            AdminAuthService(credentials).login(email, password)

    def test_token_expires_after_one_day(self):
        token = create_admin_token("admin@x.com", credentials)
        payload = jwt.decode(token, "unit-secret", algorithms=["HS256"], options={"verify_exp": False})
        issued = jwt.decode(
            create_admin_token("admin@x.com", credentials.model_copy(update={"expires_delta": timedelta(0)})),
            "unit-secret", algorithms=["HS256"], options={"verify_exp": False}
        )
        assert abs(payload["exp"] - issued["exp"] - 86400) <= 2

    def test_verify_accepts_own_token(self):
        service = AdminAuthService(credentials)
        assert service.verify(service.login("admin@x.com", "right")) == "admin@x.com"

    def test_verify_rejects_foreign_secret(self):
        other = AdminCredentials(email="admin@x.com", password="right", secret="other-secret")
        token = AdminAuthService(other).login("admin@x.com", "right")

        with pytest.raises(NotAuthorized):
            AdminAuthService(credentials).verify(token)

    def test_verify_rejects_other_email(self):
        token = create_admin_token("intruder@x.com", credentials)

        with pytest.raises(NotAuthorized):
            AdminAuthService(credentials).verify(token)

    def test_verify_rejects_expired_token(self):
        expired = credentials.model_copy(update={"expires_delta": timedelta(seconds=-10)})
        token = create_admin_token("admin@x.com", expired)

        with pytest.raises(NotAuthorized):
            AdminAuthService(credentials).verify(token)

    def test_password_hash_uses_cost_ten(self):
        hashed = get_password_hash("SecurePass1")
        assert hashed.startswith("$2b$10$")
        assert pwd_context.verify("SecurePass1", hashed)
        assert not pwd_context.verify("SecurePass2", hashed)


class TestAdminLoginEndpoint:

    def test_login_success(self, client):
        response = client.post(
            "/api/v1/admin/login",
            json={"email": "admin@clinic.example.com", "password": "AdminPassword123"}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["token"]
        assert data["message"] == "Admin login successful"

    def test_login_invalid_credentials(self, client):
        response = client.post(
            "/api/v1/admin/login",
            json={"email": "admin@clinic.example.com", "password": "wrong"}
        )
        assert response.status_code == 401

        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Invalid Credentials"
        assert "token" not in data

    def test_login_missing_fields(self, client):
        response = client.post("/api/v1/admin/login", json={"email": "admin@clinic.example.com"})
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Email and password are required"}

    def test_login_malformed_body(self, client):
        response = client.post(
            "/api/v1/admin/login",
            content="not json",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_protected_route_requires_token(self, client):
        response = client.get("/api/v1/admin/all-doctors")
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Not Authorized Login Again"}

    def test_protected_route_rejects_invalid_token(self, client):
        response = client.get("/api/v1/admin/dashboard", headers={"atoken": "invalid_token"})
        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_protected_route_accepts_login_token(self, client, admin_headers):
        response = client.get("/api/v1/admin/all-doctors", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}


class TestServiceRoutes:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Process-Time" in response.headers

    @pytest.mark.parametrize("path", ["/", "/api/v1/info"])
    def test_only_admin_routes_exposed(self, client, path):
        response = client.get(path)
        assert response.status_code == 404
        assert response.json()["success"] is False
