"""
Unit tests for the Firebase identity adapter.

Identity Toolkit REST calls go through an httpx.MockTransport; Firebase Admin
calls are patched. No network access or credentials are needed.

Usage:
    pytest tests/test_identity.py -v
"""
import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from wellness_companion.errors import AuthError, auth_error_message
from wellness_companion.identity import (
    IDENTITY_TOOLKIT_URL,
    FirebaseAuthClient,
    Identity,
    IdentityProvider,
    map_rest_error,
)


def _toolkit(responses):
    """
    MockTransport answering Identity Toolkit endpoints.

    ``responses`` maps an endpoint name (e.g. "signInWithPassword") to a
    ``(status_code, body)`` pair. Requests are recorded on ``transport.requests``.
    """
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        endpoint = request.url.path.rsplit("accounts:", 1)[-1]
        status_code, body = responses[endpoint]
        return httpx.Response(status_code, json=body)

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


def _client(transport, api_key="test-key"):
    http = httpx.AsyncClient(base_url=IDENTITY_TOOLKIT_URL, transport=transport)
    return FirebaseAuthClient(api_key, http_client=http)


ALICE = {
    "localId": "alice-uid",
    "email": "alice@example.com",
    "displayName": "",
    "idToken": "id-token",
    "refreshToken": "refresh-token",
}


def _error(message):
    return (400, {"error": {"code": 400, "message": message}})


class TestRestErrorMapping:
    """Identity Toolkit error strings become reason codes."""

    def test_known_codes(self):
        assert map_rest_error("EMAIL_NOT_FOUND") == "auth/user-not-found"
        assert map_rest_error("INVALID_PASSWORD") == "auth/wrong-password"
        assert map_rest_error("EMAIL_EXISTS") == "auth/email-already-in-use"

    def test_detail_suffix_is_ignored(self):
        message = "WEAK_PASSWORD : Password should be at least 6 characters"
        assert map_rest_error(message) == "auth/weak-password"

    def test_unknown_code_is_kebab_cased(self):
        assert map_rest_error("MISSING_REQ_TYPE") == "auth/missing-req-type"

    def test_user_messages(self):
        assert auth_error_message("auth/user-not-found") == "No account found with this email address."
        assert auth_error_message("auth/unheard-of") == "An error occurred. Please try again."


class TestFirebaseAuthClient:
    """REST calls and their failure modes."""

    @pytest.mark.asyncio
    async def test_sign_in_with_password(self):
        transport = _toolkit({"signInWithPassword": (200, ALICE)})
        client = _client(transport)

        identity = await client.sign_in_with_password("alice@example.com", "secret1")

        assert identity.uid == "alice-uid"
        assert identity.display_name is None
        assert identity.provider_id == "password"
        request = transport.requests[0]
        assert request.url.params["key"] == "test-key"
        assert json.loads(request.content) == {
            "email": "alice@example.com",
            "password": "secret1",
            "returnSecureToken": True,
        }

    @pytest.mark.asyncio
    async def test_rejected_credentials(self):
        client = _client(_toolkit({"signInWithPassword": _error("INVALID_PASSWORD")}))

        with pytest.raises(AuthError) as exc_info:
            await client.sign_in_with_password("alice@example.com", "wrong")

        assert exc_info.value.code == "auth/wrong-password"
        assert exc_info.value.user_message == "Incorrect password."

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        client = _client(_toolkit({}), api_key=None)

        with pytest.raises(AuthError) as exc_info:
            await client.sign_up("bob@example.com", "secret1")

        assert exc_info.value.code == "auth/configuration-not-found"

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(httpx.MockTransport(handler))

        with pytest.raises(AuthError) as exc_info:
            await client.sign_in_with_password("alice@example.com", "secret1")

        assert exc_info.value.code == "auth/network-request-failed"

    @pytest.mark.asyncio
    async def test_html_gateway_error(self):
        """A proxy error page is a network failure, not a decode error."""
        client = _client(
            httpx.MockTransport(lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"))
        )

        with pytest.raises(AuthError) as exc_info:
            await client.sign_in_with_password("alice@example.com", "secret1")

        assert exc_info.value.code == "auth/network-request-failed"

    @pytest.mark.asyncio
    async def test_rejection_without_error_body(self):
        client = _client(httpx.MockTransport(lambda request: httpx.Response(400)))

        with pytest.raises(AuthError) as exc_info:
            await client.sign_up("bob@example.com", "secret1")

        assert exc_info.value.code == "auth/internal-error"
        assert exc_info.value.user_message == "An error occurred. Please try again."

    @pytest.mark.asyncio
    async def test_federated_sign_in_posts_provider_token(self):
        transport = _toolkit({"signInWithIdp": (200, {**ALICE, "providerId": "google.com"})})
        client = _client(transport)

        identity = await client.sign_in_with_idp("google-token", "google.com")

        assert identity.provider_id == "google.com"
        body = json.loads(transport.requests[0].content)
        assert body["postBody"] == "id_token=google-token&providerId=google.com"

    @pytest.mark.asyncio
    async def test_verify_id_token(self):
        claims = {
            "uid": "alice-uid",
            "email": "alice@example.com",
            "name": "Alice",
            "firebase": {"sign_in_provider": "google.com"},
        }
        client = _client(_toolkit({}))

        with patch("wellness_companion.identity.firebase_auth.verify_id_token", return_value=claims):
            identity = await client.verify_id_token("id-token")

        assert identity == Identity(
            uid="alice-uid",
            email="alice@example.com",
            display_name="Alice",
            id_token="id-token",
            provider_id="google.com",
        )

    @pytest.mark.asyncio
    async def test_verify_invalid_token(self):
        client = _client(_toolkit({}))

        with patch(
            "wellness_companion.identity.firebase_auth.verify_id_token",
            side_effect=ValueError("malformed"),
        ):
            with pytest.raises(AuthError) as exc_info:
                await client.verify_id_token("garbage")

        assert exc_info.value.code == "auth/invalid-id-token"

    @pytest.mark.asyncio
    async def test_revoke_without_admin_app(self):
        client = _client(_toolkit({}))

        with patch(
            "wellness_companion.identity.firebase_auth.revoke_refresh_tokens",
            side_effect=ValueError("The default Firebase app does not exist."),
        ):
            with pytest.raises(AuthError) as exc_info:
                await client.revoke_refresh_tokens("alice-uid")

        assert exc_info.value.code == "auth/configuration-not-found"


class TestIdentityProvider:
    """Publishing identity changes."""

    @pytest.mark.asyncio
    async def test_start_publishes_absence(self):
        provider = IdentityProvider(_client(_toolkit({})))
        seen = []
        provider.subscribe(seen.append)

        await provider.start()

        assert provider.ready is True
        assert seen == [None]

    @pytest.mark.asyncio
    async def test_listeners_called_in_order_and_awaited(self):
        provider = IdentityProvider(_client(_toolkit({"signInWithPassword": (200, ALICE)})))
        calls = []

        async def first(identity):
            calls.append(("first", identity.uid))

        def second(identity):
            calls.append(("second", identity.uid))

        provider.subscribe(first)
        provider.subscribe(second)

        await provider.sign_in("alice@example.com", "secret1")

        assert calls == [("first", "alice-uid"), ("second", "alice-uid")]
        assert provider.current.uid == "alice-uid"

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_block_others(self):
        provider = IdentityProvider(_client(_toolkit({"signInWithPassword": (200, ALICE)})))
        seen = []

        def broken(identity):
            raise RuntimeError("listener bug")

        provider.subscribe(broken)
        provider.subscribe(seen.append)

        await provider.sign_in("alice@example.com", "secret1")

        assert [i.uid for i in seen] == ["alice-uid"]

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        provider = IdentityProvider(_client(_toolkit({})))
        seen = []
        unsubscribe = provider.subscribe(seen.append)

        unsubscribe()
        await provider.start()

        assert seen == []

    @pytest.mark.asyncio
    async def test_failed_sign_in_keeps_state(self):
        provider = IdentityProvider(_client(_toolkit({"signInWithPassword": _error("EMAIL_NOT_FOUND")})))
        seen = []
        provider.subscribe(seen.append)

        with pytest.raises(AuthError):
            await provider.sign_in("nobody@example.com", "secret1")

        assert provider.current is None
        assert seen == []

    @pytest.mark.asyncio
    async def test_sign_up_sets_display_name(self):
        transport = _toolkit({"signUp": (200, ALICE), "update": (200, {})})
        provider = IdentityProvider(_client(transport))

        await provider.sign_up("alice@example.com", "secret1", "Alice")

        assert provider.current.display_name == "Alice"
        update_body = json.loads(transport.requests[1].content)
        assert update_body["displayName"] == "Alice"

    @pytest.mark.asyncio
    async def test_sign_up_survives_profile_failure(self):
        transport = _toolkit({"signUp": (200, ALICE), "update": _error("INVALID_ID_TOKEN")})
        provider = IdentityProvider(_client(transport))

        await provider.sign_up("alice@example.com", "secret1", "Alice")

        assert provider.current.uid == "alice-uid"
        assert provider.current.display_name is None


class TestSignOut:
    """Sign-out always clears the local identity."""

    @pytest.mark.asyncio
    async def test_successful_sign_out(self):
        provider = IdentityProvider(_client(_toolkit({"signInWithPassword": (200, ALICE)})))
        await provider.sign_in("alice@example.com", "secret1")
        seen = []
        provider.subscribe(seen.append)

        with patch.object(provider.client, "revoke_refresh_tokens", new_callable=AsyncMock) as revoke:
            await provider.sign_out()

        revoke.assert_awaited_once_with("alice-uid")
        assert provider.current is None
        assert seen == [None]

    @pytest.mark.asyncio
    async def test_network_failure_still_clears_locally(self):
        provider = IdentityProvider(_client(_toolkit({"signInWithPassword": (200, ALICE)})))
        await provider.sign_in("alice@example.com", "secret1")
        seen = []
        provider.subscribe(seen.append)

        with patch.object(
            provider.client,
            "revoke_refresh_tokens",
            new_callable=AsyncMock,
            side_effect=AuthError("auth/network-request-failed"),
        ):
            with pytest.raises(AuthError) as exc_info:
                await provider.sign_out()

        assert exc_info.value.user_message == (
            "Network error during logout. You have been logged out locally."
        )
        assert provider.current is None
        assert seen == [None]

    @pytest.mark.asyncio
    async def test_sign_out_when_signed_out(self):
        provider = IdentityProvider(_client(_toolkit({})))
        seen = []
        provider.subscribe(seen.append)

        with patch.object(provider.client, "revoke_refresh_tokens", new_callable=AsyncMock) as revoke:
            await provider.sign_out()

        revoke.assert_not_awaited()
        assert seen == [None]
