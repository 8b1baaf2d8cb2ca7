"""
Identity provider adapter for Firebase Authentication.

FirebaseAuthClient talks to the Identity Toolkit REST API for password and
federated sign-in, and to firebase_admin for token verification and
refresh-token revocation. IdentityProvider turns those calls into a single
observable value: the current identity, or None.
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

import httpx
from firebase_admin import auth as firebase_auth

from .errors import AuthError

logger = logging.getLogger(__name__)

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"

# Identity Toolkit error strings -> client reason codes
REST_ERROR_CODES = {
    "EMAIL_NOT_FOUND": "auth/user-not-found",
    "INVALID_PASSWORD": "auth/wrong-password",
    "INVALID_LOGIN_CREDENTIALS": "auth/invalid-credential",
    "INVALID_IDP_RESPONSE": "auth/invalid-credential",
    "INVALID_EMAIL": "auth/invalid-email",
    "USER_DISABLED": "auth/user-disabled",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "auth/too-many-requests",
    "EMAIL_EXISTS": "auth/email-already-in-use",
    "WEAK_PASSWORD": "auth/weak-password",
    "OPERATION_NOT_ALLOWED": "auth/operation-not-allowed",
    "INVALID_ID_TOKEN": "auth/invalid-id-token",
    "CONFIGURATION_NOT_FOUND": "auth/configuration-not-found",
}


def map_rest_error(message: str) -> str:
    """Map an Identity Toolkit error message to a reason code.

    Messages look like ``"WEAK_PASSWORD : Password should be at least 6 characters"``.
    """
    key = message.split(":", 1)[0].strip()
    return REST_ERROR_CODES.get(key, f"auth/{key.lower().replace('_', '-')}")


@dataclass(frozen=True)
class Identity:
    """A signed-in user."""

    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None
    provider_id: str = "password"

    def to_dict(self) -> dict:
        return {
            "uid": self.uid,
            "email": self.email,
            "display_name": self.display_name,
            "provider_id": self.provider_id,
        }


class FirebaseAuthClient:
    """Firebase Authentication calls used by the identity provider."""

    def __init__(
        self,
        api_key: Optional[str],
        app=None,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
        request_uri: str = "http://localhost",
    ):
        self.api_key = api_key
        self.app = app
        self.timeout = timeout
        self.request_uri = request_uri
        self._http = http_client

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(base_url=IDENTITY_TOOLKIT_URL, timeout=self.timeout)
        return self._http

    async def close(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            logger.error("[AUTH] Firebase web API key is not configured")
            raise AuthError("auth/configuration-not-found")

        try:
            response = await self._client().post(
                f"/accounts:{endpoint}",
                params={"key": self.api_key},
                json=payload,
            )
        except httpx.TransportError as e:
            logger.error(f"[AUTH] {endpoint} request failed: {e}")
            raise AuthError("auth/network-request-failed") from e

        try:
            body = response.json() if response.content else {}
        except ValueError:
            # Proxies and gateways answer with HTML
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code != 200:
            message = (body.get("error") or {}).get("message", "")
            if message:
                code = map_rest_error(message)
            elif response.status_code >= 500:
                code = "auth/network-request-failed"
            else:
                code = "auth/internal-error"
            logger.info(f"[AUTH] {endpoint} rejected: {message or response.status_code}")
            raise AuthError(code)
        return body

    @staticmethod
    def _identity_from(body: Dict[str, Any], provider_id: str = "password") -> Identity:
        return Identity(
            uid=body["localId"],
            email=body.get("email"),
            display_name=body.get("displayName") or None,
            id_token=body.get("idToken"),
            refresh_token=body.get("refreshToken"),
            provider_id=body.get("providerId") or provider_id,
        )

    async def sign_in_with_password(self, email: str, password: str) -> Identity:
        body = await self._post(
            "signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return self._identity_from(body)

    async def sign_up(self, email: str, password: str) -> Identity:
        body = await self._post(
            "signUp",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return self._identity_from(body)

    async def update_profile(self, id_token: str, display_name: str) -> None:
        await self._post(
            "update",
            {"idToken": id_token, "displayName": display_name, "returnSecureToken": False},
        )

    async def sign_in_with_idp(self, id_token: str, provider_id: str) -> Identity:
        body = await self._post(
            "signInWithIdp",
            {
                "postBody": f"id_token={id_token}&providerId={provider_id}",
                "requestUri": self.request_uri,
                "returnSecureToken": True,
                "returnIdpCredential": True,
            },
        )
        return self._identity_from(body, provider_id)

    async def verify_id_token(self, id_token: str) -> Identity:
        try:
            claims = await asyncio.to_thread(firebase_auth.verify_id_token, id_token, self.app)
        except (ValueError, firebase_auth.InvalidIdTokenError) as e:
            raise AuthError("auth/invalid-id-token") from e
        except firebase_auth.UserDisabledError as e:
            raise AuthError("auth/user-disabled") from e
        except firebase_auth.CertificateFetchError as e:
            raise AuthError("auth/network-request-failed") from e

        firebase_claims = claims.get("firebase") or {}
        return Identity(
            uid=claims["uid"],
            email=claims.get("email"),
            display_name=claims.get("name"),
            id_token=id_token,
            provider_id=firebase_claims.get("sign_in_provider", "password"),
        )

    async def revoke_refresh_tokens(self, uid: str) -> None:
        try:
            await asyncio.to_thread(firebase_auth.revoke_refresh_tokens, uid, self.app)
        except ValueError as e:
            logger.error(f"[AUTH] Firebase Admin is not initialized: {e}")
            raise AuthError("auth/configuration-not-found") from e
        except firebase_auth.UserNotFoundError as e:
            raise AuthError("auth/user-not-found") from e
        except Exception as e:
            raise AuthError("auth/network-request-failed", f"Logout failed: {e}") from e


IdentityListener = Callable[[Optional[Identity]], Union[None, Awaitable[None]]]


class IdentityProvider:
    """
    Publishes the current identity to subscribers.

    Listeners are called in registration order, inline with the operation
    that changed the identity. Awaitable results are awaited before the next
    listener runs.
    """

    def __init__(self, client: FirebaseAuthClient):
        self.client = client
        self._current: Optional[Identity] = None
        self._listeners: List[IdentityListener] = []
        self.ready = False

    @property
    def current(self) -> Optional[Identity]:
        return self._current

    def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _publish(self, identity: Optional[Identity]) -> None:
        self._current = identity
        for listener in list(self._listeners):
            try:
                result = listener(identity)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("[AUTH] Identity listener failed")

    async def start(self) -> None:
        """Mark auth state as known; nobody is signed in at process start."""
        self.ready = True
        logger.info("[AUTH] Identity provider started")
        await self._publish(None)

    async def sign_in(self, email: str, password: str) -> None:
        try:
            identity = await self.client.sign_in_with_password(email, password)
        except AuthError as e:
            logger.error(f"[AUTH] Sign in error: {e.code}")
            raise
        logger.info(f"[AUTH] Signed in {identity.uid}")
        await self._publish(identity)

    async def sign_up(self, email: str, password: str, display_name: str) -> None:
        try:
            identity = await self.client.sign_up(email, password)
        except AuthError as e:
            logger.error(f"[AUTH] Sign up error: {e.code}")
            raise

        if display_name and identity.id_token:
            try:
                await self.client.update_profile(identity.id_token, display_name)
                identity = Identity(
                    uid=identity.uid,
                    email=identity.email,
                    display_name=display_name,
                    id_token=identity.id_token,
                    refresh_token=identity.refresh_token,
                    provider_id=identity.provider_id,
                )
            except AuthError as e:
                # account already created at this point
                logger.warning(f"[AUTH] Could not set display name: {e.code}")

        logger.info(f"[AUTH] Registered {identity.uid}")
        await self._publish(identity)

    async def sign_in_with_federated_provider(
        self,
        id_token: str,
        provider_id: str = "google.com",
    ) -> None:
        try:
            identity = await self.client.sign_in_with_idp(id_token, provider_id)
        except AuthError as e:
            logger.error(f"[AUTH] {provider_id} sign in error: {e.code}")
            raise
        logger.info(f"[AUTH] Signed in {identity.uid} via {provider_id}")
        await self._publish(identity)

    async def restore_session(self, id_token: str) -> None:
        """Adopt the identity named by a previously issued ID token."""
        identity = await self.client.verify_id_token(id_token)
        logger.info(f"[AUTH] Restored session for {identity.uid}")
        await self._publish(identity)

    async def sign_out(self) -> None:
        """
        Sign out, best-effort remotely and always locally.

        Raises:
            AuthError: if the remote sign-out failed; the local identity has
                already been cleared when this is raised.
        """
        identity = self._current
        if identity is None:
            logger.info("[AUTH] No user to logout, clearing local state")
            await self._publish(None)
            return

        try:
            await self.client.revoke_refresh_tokens(identity.uid)
        except AuthError as e:
            logger.error(f"[AUTH] Logout error: {e}")
            if e.code == "auth/network-request-failed":
                message = "Network error during logout. You have been logged out locally."
            else:
                message = f"Logout failed: {e.user_message} You have been logged out locally."
            raise AuthError(e.code, message) from e
        finally:
            await self._publish(None)

        logger.info("[AUTH] Logout successful")
