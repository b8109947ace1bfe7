"""Integration tests for the authentication endpoints."""

import sqlite3
from contextlib import closing
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient

from todolist.presentation.api.app import create_app
from todolist_auth import JWTService

pytestmark = pytest.mark.integration

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


class TestRegister:
    def test_register_returns_token_and_expiry(self, test_client, api_prefix):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Mario", "email": "mario@test.it", "password": "pw123"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert set(body["data"]) == {"token", "expiresAt"}

        claims = jwt.decode(body["data"]["token"], TEST_JWT_SECRET, algorithms=["HS256"])
        assert claims["email"] == "mario@test.it"
        expires_at = datetime.fromisoformat(body["data"]["expiresAt"])
        assert expires_at == datetime.fromtimestamp(claims["exp"], tz=timezone.utc)

    def test_token_expires_after_configured_ttl(self, test_client, api_prefix):
        before = datetime.now(tz=timezone.utc)
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Mario", "email": "mario@test.it", "password": "pw123"},
        )

        expires_at = datetime.fromisoformat(response.json()["data"]["expiresAt"])
        remaining = expires_at - before
        assert timedelta(seconds=3590) < remaining <= timedelta(seconds=3601)

    def test_duplicate_email_conflicts(self, test_client, api_prefix, register_user):
        register_user("Mario", "mario@test.it", "pw123")

        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Other", "email": "mario@test.it", "password": "other"},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "EMAIL_ALREADY_REGISTERED"

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "mario@test.it", "password": "pw123"},
            {"name": "Mario", "password": "pw123"},
            {"name": "Mario", "email": "mario@test.it"},
            {"name": "Mario", "email": "not-an-email", "password": "pw123"},
            {"name": "", "email": "mario@test.it", "password": "pw123"},
        ],
    )
    def test_invalid_body_is_rejected(self, test_client, api_prefix, payload):
        response = test_client.post(f"{api_prefix}/auth/register", json=payload)

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"

    def test_password_too_long_for_bcrypt(self, test_client, api_prefix):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Mario", "email": "mario@test.it", "password": "x" * 73},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "WEAK_PASSWORD"

    def test_response_never_contains_password_or_digest(self, test_client, api_prefix):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Mario", "email": "mario@test.it", "password": "pw123"},
        )

        assert "pw123" not in response.text
        assert "$2b$" not in response.text


class TestLogin:
    def test_login_with_valid_credentials(
        self,
        test_client,
        api_prefix,
        register_user,
        registered_user_data,
    ):
        register_user(**registered_user_data)

        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "mario@test.it", "password": "pw123"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User logged in successfully"
        token = body["data"]["token"]
        payload = JWTService(TEST_JWT_SECRET).verify_token(token)
        assert payload.email == "mario@test.it"

    def test_wrong_password_and_unknown_email_look_the_same(
        self,
        test_client,
        api_prefix,
        register_user,
        registered_user_data,
    ):
        register_user(**registered_user_data)

        wrong_password = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "mario@test.it", "password": "wrong"},
        )
        unknown_email = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "nobody@test.it", "password": "pw123"},
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["error"]["code"] == "INVALID_CREDENTIALS"

    def test_login_tokens_are_distinct(
        self,
        test_client,
        api_prefix,
        register_user,
        registered_user_data,
    ):
        register_user(**registered_user_data)
        credentials = {"email": "mario@test.it", "password": "pw123"}

        first = test_client.post(f"{api_prefix}/auth/login", json=credentials)
        second = test_client.post(f"{api_prefix}/auth/login", json=credentials)

        assert first.json()["data"]["token"] != second.json()["data"]["token"]

    def test_login_upgrades_digest_to_configured_cost(
        self,
        api_settings,
        api_prefix,
        register_user,
        registered_user_data,
    ):
        register_user(**registered_user_data)
        stronger = api_settings.model_copy(update={"bcrypt_rounds": 5})

        with TestClient(create_app(settings=stronger)) as client:
            response = client.post(
                f"{api_prefix}/auth/login",
                json={"email": "mario@test.it", "password": "pw123"},
            )

        assert response.status_code == 200
        db_path = api_settings.database_url.split(":///", 1)[1]
        with closing(sqlite3.connect(db_path)) as conn:
            (digest,) = conn.execute(
                "SELECT password FROM users WHERE email = ?",
                ("mario@test.it",),
            ).fetchone()
        assert digest.startswith("$2b$05$")

    def test_email_domain_is_case_insensitive(
        self,
        test_client,
        api_prefix,
        register_user,
    ):
        register_user("Mario", "Mario@Test.IT", "pw123")

        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "Mario@test.it", "password": "pw123"},
        )
        duplicate = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Other", "email": "Mario@TEST.it", "password": "pw456"},
        )

        assert response.status_code == 200
        assert duplicate.status_code == 409

    def test_email_local_part_is_case_sensitive(
        self,
        test_client,
        api_prefix,
        register_user,
    ):
        register_user("Mario", "Mario@test.it", "pw123")

        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "mario@test.it", "password": "pw123"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


class TestAuthorizationGate:
    def test_missing_header_is_rejected(self, test_client, api_prefix):
        response = test_client.get(f"{api_prefix}/lists")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "UNAUTHORIZED"

    def test_non_bearer_scheme_is_rejected(self, test_client, api_prefix):
        response = test_client.get(
            f"{api_prefix}/lists",
            headers={"Authorization": "Basic bWFyaW86cHcxMjM="},
        )

        assert response.status_code == 401

    def test_garbage_token_is_rejected(self, test_client, api_prefix):
        response = test_client.get(
            f"{api_prefix}/lists",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    def test_expired_token_is_rejected_with_debug_reason(self, test_client, api_prefix):
        issued = JWTService(TEST_JWT_SECRET).create_access_token(
            1,
            "mario@test.it",
            expires_delta=timedelta(seconds=-10),
        )

        response = test_client.get(
            f"{api_prefix}/lists",
            headers={"Authorization": f"Bearer {issued.token}"},
        )

        assert response.status_code == 401
        detail = response.json()["error"]["detail"]
        assert detail["reason"] == "Token has expired"
        assert detail["ttl_seconds"] == 3600

    def test_token_signed_with_other_secret_is_rejected(self, test_client, api_prefix):
        issued = JWTService("some-other-secret").create_access_token(1, "x@test.it")

        response = test_client.get(
            f"{api_prefix}/lists",
            headers={"Authorization": f"Bearer {issued.token}"},
        )

        assert response.status_code == 401


PROTECTED_ROUTES = [
    ("GET", "/lists", None),
    ("POST", "/lists", {"name": "Groceries"}),
    ("GET", "/lists/1", None),
    ("PUT", "/lists/1", {"name": "Renamed"}),
    ("PATCH", "/lists/1", {"name": "Renamed"}),
    ("DELETE", "/lists/1", None),
    ("GET", "/todos?listId=1", None),
    ("POST", "/todos/list", {"listId": 1}),
    ("POST", "/todos", {"name": "Milk", "listId": 1}),
    ("GET", "/todos/1", None),
    ("PUT", "/todos/1", {"completed": True}),
    ("PATCH", "/todos/1", {"completed": True}),
    ("DELETE", "/todos/1", None),
]


class TestEveryOwnedRouteRequiresToken:
    @pytest.mark.parametrize(("method", "path", "body"), PROTECTED_ROUTES)
    def test_request_without_token_is_rejected(
        self,
        test_client,
        api_prefix,
        method,
        path,
        body,
    ):
        response = test_client.request(method, f"{api_prefix}{path}", json=body)

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    @pytest.mark.parametrize(("method", "path", "body"), PROTECTED_ROUTES)
    def test_request_with_invalid_token_is_rejected(
        self,
        test_client,
        api_prefix,
        method,
        path,
        body,
    ):
        response = test_client.request(
            method,
            f"{api_prefix}{path}",
            json=body,
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    def test_rejected_create_leaves_no_list_behind(
        self,
        test_client,
        api_prefix,
        auth_headers,
    ):
        rejected = test_client.post(f"{api_prefix}/lists", json={"name": "Sneaky"})
        assert rejected.status_code == 401

        response = test_client.get(f"{api_prefix}/lists", headers=auth_headers)

        assert response.json()["data"] == []

    def test_rejected_mutations_leave_owned_data_untouched(
        self,
        test_client,
        api_prefix,
        auth_headers,
    ):
        created = test_client.post(
            f"{api_prefix}/lists",
            json={"name": "Groceries"},
            headers=auth_headers,
        ).json()["data"]
        list_id = created["id"]

        test_client.put(f"{api_prefix}/lists/{list_id}", json={"name": "Hacked"})
        test_client.delete(f"{api_prefix}/lists/{list_id}")
        test_client.post(
            f"{api_prefix}/todos",
            json={"name": "Injected", "listId": list_id},
        )

        fetched = test_client.get(
            f"{api_prefix}/lists/{list_id}",
            headers=auth_headers,
        ).json()["data"]
        todos = test_client.get(
            f"{api_prefix}/todos",
            params={"listId": list_id},
            headers=auth_headers,
        ).json()["data"]
        assert fetched["name"] == "Groceries"
        assert todos == []
