"""Tests for the bearer-token gate.

Covers extract_bearer_token, authenticate_request through the notes
blueprint, and the @auth_required decorator on /deleteUser.
"""

import jwt as pyjwt
import pytest
from flask import g

from notekeeper.auth.decorators import auth_required, extract_bearer_token
from notekeeper.auth.schemas import UserResponse
from notekeeper.auth.token import generate_access_token
from notekeeper.config import settings
from notekeeper.exceptions import AuthInvalid, AuthMissing
from notekeeper.main import app
from notekeeper.utils import isodatetime


class TestExtractBearerToken:
    """Tests for Authorization header parsing."""

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer ", "Basic abc", "Bearer a b"])
    def test_rejects_non_bearer_values(self, header):
        assert extract_bearer_token(header) is None

    def test_extracts_token(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_scheme_is_case_insensitive(self):
        assert extract_bearer_token("bearer abc") == "abc"


class TestAuthRequiredDecorator:
    """Tests for @auth_required outside of a blueprint."""

    def _call(self, headers):
        @auth_required
        def view():
            return g.user_id, g.username

        with app.test_request_context("/", headers=headers):
            return view()

    def test_binds_identity(self):
        token = generate_access_token(UserResponse(id=5, username="bob"))
        assert self._call({"Authorization": f"Bearer {token}"}) == (5, "bob")

    def test_missing_header_raises_auth_missing(self):
        with pytest.raises(AuthMissing):
            self._call({})

    def test_bad_token_raises_auth_invalid(self):
        with pytest.raises(AuthInvalid):
            self._call({"Authorization": "Bearer not-a-token"})

    def test_view_not_called_when_rejected(self):
        called = []

        @auth_required
        def view():
            called.append(True)

        with app.test_request_context("/"):
            with pytest.raises(AuthMissing):
                view()
        assert called == []


class TestGateOverHttp:
    """The gate as seen by clients of protected routes."""

    def test_no_authorization_header_is_401(self, client):
        response = client.post("/addNote", json={"note": {"note_title": "t", "note_content": "c"}})

        assert response.status_code == 401
        data = response.get_json()
        assert data["message"] == "Unauthorized"
        assert data["error"]["type"] == "AuthMissing"

    def test_malformed_bearer_token_is_403(self, client):
        response = client.post(
            "/addNote",
            json={"note": {"note_title": "t", "note_content": "c"}},
            headers={"Authorization": "Bearer malformed"}
        )

        assert response.status_code == 403
        data = response.get_json()
        assert data["message"] == "Forbidden"
        assert data["error"]["type"] == "AuthInvalid"

    def test_tampered_token_is_403(self, client, jwt_token):
        header, body, signature = jwt_token.split(".")
        flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

        response = client.post(
            "/getUserData",
            headers={"Authorization": f"Bearer {header}.{body}.{flipped}"}
        )
        assert response.status_code == 403

    def test_expired_token_is_403(self, client):
        past = isodatetime.now_unix() - 1
        expired = pyjwt.encode(
            {"id": 1, "username": "alice", "iat": past - 10, "exp": past},
            settings.jwt_secret_key,
            algorithm="HS256",
        )

        response = client.post("/getUserData", headers={"Authorization": f"Bearer {expired}"})
        assert response.status_code == 403
        assert response.get_json()["error"]["details"]["code"] == "token_expired"

    def test_token_signed_with_other_secret_is_403(self, client):
        now = isodatetime.now_unix()
        forged = pyjwt.encode(
            {"id": 1, "username": "alice", "iat": now, "exp": now + 60},
            "attacker-secret",
            algorithm="HS256",
        )

        response = client.delete("/deleteUser", headers={"Authorization": f"Bearer {forged}"})
        assert response.status_code == 403

    def test_valid_token_reaches_handler(self, authenticated_client):
        client, headers = authenticated_client

        response = client.post("/getUserData", headers=headers)
        assert response.status_code == 200

    def test_register_and_login_bypass_gate(self, client):
        response = client.post(
            "/register",
            json={"username": "carol", "password": "pw", "fullname": "Carol"}
        )
        assert response.status_code == 200

        response = client.post("/login", json={"username": "carol", "password": "pw"})
        assert response.status_code == 200

    def test_cors_preflight_is_not_gated(self, client):
        response = client.options(
            "/addNote",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST"
            }
        )
        assert response.status_code in (200, 204)
