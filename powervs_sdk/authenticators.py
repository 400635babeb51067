"""Authenticators for the PowerVS API.

Each authenticator is an :class:`httpx.Auth`, so it is applied by the HTTP
client to every outgoing request, including retried attempts.

Example:
    >>> auth = BearerTokenAuthenticator("eyJraWQiOi...")
    >>> service = PowervsV1(authenticator=auth)
"""

from __future__ import annotations

import base64
import time
from collections.abc import Generator, Mapping

import httpx

from .exceptions import AuthenticationError, ConfigurationError, DecodeError
from .logging_config import get_logger
from .response import DetailedResponse

logger = get_logger(__name__)

DEFAULT_IAM_URL = "https://iam.cloud.ibm.com"
IAM_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"

# Refresh this many seconds before the token actually expires.
_IAM_EXPIRY_MARGIN = 60


class Authenticator(httpx.Auth):
    """Base class; subclasses add credentials in :meth:`authenticate`."""

    auth_type = ""

    def authenticate(self, request: httpx.Request) -> None:
        raise NotImplementedError

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        self.authenticate(request)
        yield request


class NoAuthAuthenticator(Authenticator):
    auth_type = "noauth"

    def authenticate(self, request: httpx.Request) -> None:
        return None


class BasicAuthenticator(Authenticator):
    auth_type = "basic"

    def __init__(self, username: str, password: str) -> None:
        if not username:
            raise ConfigurationError("username is required")
        if not password:
            raise ConfigurationError("password is required")
        credentials = f"{username}:{password}"
        self._auth_header = "Basic " + base64.b64encode(credentials.encode()).decode()

    def authenticate(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = self._auth_header


class BearerTokenAuthenticator(Authenticator):
    auth_type = "bearertoken"

    def __init__(self, bearer_token: str) -> None:
        if not bearer_token:
            raise ConfigurationError("bearer_token is required")
        self.bearer_token = bearer_token

    def set_bearer_token(self, bearer_token: str) -> None:
        self.bearer_token = bearer_token

    def authenticate(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = f"Bearer {self.bearer_token}"


class IamAuthenticator(Authenticator):
    """Exchange an IBM Cloud API key for an IAM access token.

    The token is fetched on first use and cached until shortly before it
    expires. The token request is sent through the same HTTP client as the
    API call.
    """

    auth_type = "iam"
    requires_response_body = True

    def __init__(self, apikey: str, url: str | None = None) -> None:
        if not apikey:
            raise ConfigurationError("apikey is required")
        self.apikey = apikey
        self.url = (url or DEFAULT_IAM_URL).rstrip("/")
        self._access_token: str | None = None
        self._expires_at = 0.0

    @property
    def token_url(self) -> str:
        return f"{self.url}/identity/token"

    def _token_valid(self) -> bool:
        return self._access_token is not None and time.time() < self._expires_at - _IAM_EXPIRY_MARGIN

    def _token_request(self) -> httpx.Request:
        return httpx.Request(
            "POST",
            self.token_url,
            data={"grant_type": IAM_GRANT_TYPE, "apikey": self.apikey, "response_type": "cloud_iam"},
            headers={"Accept": "application/json"},
        )

    def _store_token(self, response: httpx.Response) -> None:
        """Cache the token from an IAM token response.

        Raises:
            AuthenticationError: If IAM rejected the request.
            DecodeError: If the token response cannot be read.
        """
        envelope = DetailedResponse.from_httpx(response)
        if response.status_code != 200:
            try:
                envelope.result = response.json()
            except ValueError:
                pass
            raise AuthenticationError(
                f"IAM token request failed with status {response.status_code}",
                status_code=response.status_code,
                response=envelope,
            )
        try:
            data = response.json()
            envelope.result = data
            access_token = data["access_token"]
            if "expiration" in data:
                expires_at = float(data["expiration"])
            else:
                expires_at = time.time() + float(data.get("expires_in", 3600))
        except (ValueError, KeyError, TypeError) as e:
            raise DecodeError(f"Unusable IAM token response: {e!r}", envelope, e) from e
        if not isinstance(access_token, str) or not access_token:
            raise DecodeError("IAM token response has no access_token", envelope)
        self._access_token = access_token
        self._expires_at = expires_at
        logger.debug("Obtained IAM access token", extra={"expires_at": self._expires_at})

    def authenticate(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = f"Bearer {self._access_token}"

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if not self._token_valid():
            token_response = yield self._token_request()
            self._store_token(token_response)
        self.authenticate(request)
        yield request


def get_authenticator_from_properties(props: Mapping[str, str]) -> Authenticator:
    """Build an authenticator from external configuration properties.

    ``AUTH_TYPE`` selects the kind; without it, an ``APIKEY`` implies IAM.

    Raises:
        ConfigurationError: If the type is unknown or material is missing.
    """
    auth_type = (props.get("AUTH_TYPE") or "").lower().replace("_", "")
    if not auth_type:
        auth_type = "iam" if props.get("APIKEY") else "noauth"

    if auth_type == "iam":
        return IamAuthenticator(props.get("APIKEY", ""), url=props.get("AUTH_URL"))
    if auth_type == "bearertoken":
        return BearerTokenAuthenticator(props.get("BEARER_TOKEN", ""))
    if auth_type == "basic":
        return BasicAuthenticator(props.get("USERNAME", ""), props.get("PASSWORD", ""))
    if auth_type == "noauth":
        return NoAuthAuthenticator()
    raise ConfigurationError(f"Unsupported authentication type: {props.get('AUTH_TYPE')}")
