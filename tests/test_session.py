"""
Operator login and cookie session gating.
"""

from conftest import OPERATOR_EMAIL, OPERATOR_PASSWORD

from gloverse_hq.core.security import create_access_token, is_valid_session


class TestLogin:

    def test_login_sets_session_cookie(self, client):
        response = client.post(
            "/api/v1/auth/login",
            data={"email": OPERATOR_EMAIL, "password": OPERATOR_PASSWORD},
        )
        assert response.status_code == 200
        assert response.json()["redirect"] == "/dashboard"
        assert is_valid_session(response.cookies.get("session"))
        assert "httponly" in response.headers["set-cookie"].lower()

    def test_login_accepts_json(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": OPERATOR_EMAIL.upper(), "password": OPERATOR_PASSWORD},
        )
        assert response.status_code == 200

    def test_wrong_password(self, client):
        response = client.post(
            "/api/v1/auth/login",
            data={"email": OPERATOR_EMAIL, "password": "nope"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password."
        assert "session" not in response.cookies

    def test_missing_fields(self, client):
        response = client.post("/api/v1/auth/login", data={})
        assert response.status_code == 401

    def test_logout_clears_cookie(self, operator):
        assert operator.get("/api/v1/auth/session").json() == {"authenticated": True}
        response = operator.post("/api/v1/auth/logout")
        assert response.json()["redirect"] == "/login"
        assert operator.get("/api/v1/auth/session").json() == {"authenticated": False}


class TestSessionGate:

    def test_pages_redirect_to_login_without_session(self, client):
        for path in ("/", "/dashboard", "/dashboard/users"):
            response = client.get(path, follow_redirects=False)
            assert response.status_code == 307
            assert response.headers["location"] == "/login"

    def test_login_page_is_public(self, client):
        response = client.get("/login", follow_redirects=False)
        assert response.status_code == 200
        assert response.json()["title"] == "GloVerse HQ"

    def test_login_page_redirects_with_session(self, operator):
        response = operator.get("/login", follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/dashboard"

    def test_dashboard_with_session(self, operator):
        response = operator.get("/dashboard", follow_redirects=False)
        assert response.status_code == 200
        labels = [item["label"] for item in response.json()["sections"]]
        assert "Advertisers" in labels

    def test_static_assets_pass_through(self, client):
        response = client.get("/favicon.ico", follow_redirects=False)
        assert response.status_code == 404

    def test_api_requires_session(self, client):
        response = client.get("/api/v1/channels/", follow_redirects=False)
        assert response.status_code == 401

    def test_forged_cookie_is_ignored(self, client):
        client.cookies.set("session", "true")
        response = client.get("/dashboard", follow_redirects=False)
        assert response.status_code == 307

    def test_token_for_other_subject_is_rejected(self):
        token = create_access_token({"sub": "someone@else.test", "scope": "session"})
        assert not is_valid_session(token)
