"""Generic service client: request dispatch, retries and decoding.

:class:`BaseService` owns the connection settings shared by every operation
of a service: URL, authenticator, default headers, retry policy. Service
classes call :meth:`BaseService.invoke` with an
:class:`~powervs_sdk.operations.Operation` and the caller's options.

Note:
    ``invoke`` never raises for validation, network, API or decode
    failures. They come back in the ``error`` slot of the
    :class:`~powervs_sdk.response.CallResult`, with the response envelope
    whenever the server answered.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

import httpx

from .authenticators import Authenticator
from .exceptions import (
    APIError,
    DecodeError,
    NetworkError,
    PowervsSDKError,
    RateLimitError,
    ValidationError,
    api_error_class,
)
from .headers import get_sdk_headers
from .logging_config import LoggerAdapter, get_logger
from .operations import Operation, ResultKind
from .response import CallResult, DetailedResponse

logger = get_logger(__name__)

DEFAULT_MAX_RETRIES = 4
DEFAULT_MAX_RETRY_INTERVAL = 30.0
DEFAULT_RETRY_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def parse_retry_after(value: str | None) -> float | None:
    """Return the wait in seconds from a Retry-After header.

    Both forms are accepted: delay seconds (``120``) and an HTTP date
    (``Wed, 21 Oct 2026 07:28:00 GMT``). A date in the past gives 0.
    Returns None when the value is missing or unparseable.
    """
    if not value:
        return None
    try:
        return max(0.0, float(value))
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())


class BaseService:
    """Connection settings and the shared call path for one REST service.

    Attributes:
        service_url: Base URL all operation paths are appended to.
        authenticator: Applied to every request.
        default_headers: Sent with every request.
        retries_enabled: Whether failed attempts are retried.
        max_retries: Retries allowed per call when enabled.
        max_retry_interval: Upper bound in seconds on the wait between attempts.
        retry_status_codes: Status codes that are retried.

    Example:
        >>> service = BaseService("powervs", "V1", "https://example.com", auth)
        >>> service.enable_retries(max_retries=3, max_interval=10)
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        service_url: str,
        authenticator: Authenticator,
        timeout: float = 60.0,
        tls_verify: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            service_name: Service name used in SDK headers.
            service_version: Service version used in SDK headers.
            service_url: Base service URL.
            authenticator: Credentials provider.
            timeout: Request timeout in seconds.
            tls_verify: Whether to verify TLS certificates.
            transport: Optional httpx transport, mainly for tests.

        Raises:
            ValueError: If service_url or authenticator is missing.
        """
        if not service_url:
            raise ValueError("service_url is required")
        if authenticator is None:
            raise ValueError("authenticator is required")

        self.service_name = service_name
        self.service_version = service_version
        self.service_url = service_url.rstrip("/")
        self.authenticator = authenticator
        self.timeout = timeout
        self.tls_verify = tls_verify
        self.default_headers: dict[str, str] = {}

        self.retries_enabled = False
        self.max_retries = 0
        self.max_retry_interval = DEFAULT_MAX_RETRY_INTERVAL
        self.retry_status_codes = DEFAULT_RETRY_STATUS_CODES

        self._transport = transport
        self._logger = LoggerAdapter(logger, {"service": service_name})

        # HTTP client (created lazily)
        self.client: httpx.AsyncClient | None = None

    def set_service_url(self, service_url: str) -> None:
        if not service_url:
            raise ValueError("service_url is required")
        self.service_url = service_url.rstrip("/")

    def set_default_headers(self, headers: Mapping[str, str]) -> None:
        self.default_headers = dict(headers)

    def enable_retries(
        self,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_interval: float = DEFAULT_MAX_RETRY_INTERVAL,
        retry_status_codes: Iterable[int] | None = None,
    ) -> None:
        """Turn on automatic retries.

        Args:
            max_retries: Retries after the first attempt.
            max_interval: Upper bound in seconds on the wait between attempts.
            retry_status_codes: Status codes to retry; defaults to 429 and
                500/502/503/504.
        """
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")
        if max_interval <= 0:
            raise ValueError("max_interval must be positive")
        self.retries_enabled = True
        self.max_retries = max_retries
        self.max_retry_interval = max_interval
        if retry_status_codes is not None:
            self.retry_status_codes = frozenset(retry_status_codes)

    def disable_retries(self) -> None:
        self.retries_enabled = False
        self.max_retries = 0

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized.

        Returns:
            The initialized HTTP client.
        """
        if self.client is None:
            self.client = httpx.AsyncClient(
                verify=self.tls_verify,
                timeout=self.timeout,
                follow_redirects=True,
                auth=self.authenticator,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self.client

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        if self.client:
            await self.client.aclose()
            self.client = None
            self._logger.debug("HTTP client closed")

    async def __aenter__(self) -> BaseService:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def invoke(
        self,
        operation: Operation,
        headers: Mapping[str, str] | None = None,
        extra_properties: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> CallResult:
        """Run one operation.

        Args:
            operation: The operation descriptor.
            headers: Caller headers; these override every other header.
            extra_properties: Additional JSON body members.
            **options: Operation options keyed by Python parameter name.

        Returns:
            ``CallResult(result, response, error)``.
        """
        try:
            prepared = operation.build_request(options, extra_properties)
        except ValidationError as e:
            self._logger.debug("Validation failed", extra={"operation": operation.operation_id, "error": str(e)})
            return CallResult(None, None, e)

        request_headers = httpx.Headers()
        request_headers.update(self.default_headers)
        request_headers.update(get_sdk_headers(self.service_name, self.service_version, operation.operation_id))
        request_headers.update(prepared.headers)
        if headers:
            request_headers.update(headers)

        url = self.service_url + prepared.path
        log = LoggerAdapter(logger, {"service": self.service_name, "operation": operation.operation_id})
        log.debug(
            f"Executing {prepared.method} {prepared.path}",
            extra={"params": prepared.params, "has_body": prepared.json is not None},
        )

        try:
            response = await self._send_with_retries(log, prepared.method, url, prepared.params,
                                                     request_headers, prepared.json)
        except PowervsSDKError as e:
            # NetworkError, or a failure inside the auth flow such as the IAM token exchange.
            log.error(f"{prepared.method} {prepared.path} failed: {e}")
            return CallResult(None, None, e)

        return self._decode(log, operation, response)

    async def _send_with_retries(
        self,
        log: LoggerAdapter,
        method: str,
        url: str,
        params: dict[str, str],
        headers: httpx.Headers,
        body: Any,
    ) -> httpx.Response:
        """Send the request, retrying retryable failures.

        Returns:
            The last HTTP response received.

        Raises:
            NetworkError: If no response was received on the final attempt.
        """
        client = await self._ensure_client()
        max_retries = self.max_retries if self.retries_enabled else 0
        content = None if body is None else json.dumps(body, default=str).encode()
        if content is not None and "Content-Type" not in headers:
            headers = headers.copy()
            headers["Content-Type"] = "application/json"

        attempt = 0
        while True:
            attempt += 1
            try:
                response = await client.request(method, url, params=params, headers=headers, content=content)
            except httpx.TransportError as e:
                if attempt <= max_retries:
                    wait_time = self._backoff(attempt)
                    log.warning(
                        f"Request failed, retrying in {wait_time}s (attempt {attempt}/{max_retries})",
                        extra={"error": str(e)},
                    )
                    await asyncio.sleep(wait_time)
                    continue
                raise NetworkError(f"{method} {url}: {e}", cause=e, attempts=attempt) from e
            except httpx.RequestError as e:
                # TooManyRedirects, DecodingError: terminal.
                raise NetworkError(f"{method} {url}: {e}", cause=e, attempts=attempt) from e

            if response.status_code in self.retry_status_codes and attempt <= max_retries:
                wait_time = self._backoff(attempt, response.headers.get("Retry-After"))
                log.warning(
                    f"Received {response.status_code}, retrying in {wait_time}s "
                    f"(attempt {attempt}/{max_retries})",
                )
                await asyncio.sleep(wait_time)
                continue

            log.debug("Response received", extra={"status_code": response.status_code, "attempts": attempt})
            return response

    def _backoff(self, attempt: int, retry_after: str | None = None) -> float:
        """Seconds to wait before the next attempt."""
        delay = parse_retry_after(retry_after)
        if delay is not None:
            return min(self.max_retry_interval, delay)
        return min(self.max_retry_interval, float(2 ** (attempt - 1)))

    def _decode(self, log: LoggerAdapter, operation: Operation, response: httpx.Response) -> CallResult:
        if not response.is_success:
            error = self._api_error(response)
            log.warning(f"Non-2XX response ({response.status_code}): {error.message}")
            return CallResult(None, error.response, error)

        if response.status_code != operation.status:
            log.debug(f"Expected status {operation.status}, got {response.status_code}")

        if operation.result is ResultKind.NONE or response.status_code == 204 or not response.content:
            return CallResult(None, DetailedResponse.from_httpx(response), None)

        envelope = DetailedResponse.from_httpx(response)
        try:
            result = response.json()
        except ValueError as e:
            log.warning(f"Response is not JSON: {e}", extra={"content_type": response.headers.get("content-type")})
            return CallResult(None, envelope, DecodeError(f"{operation.operation_id}: response is not JSON", envelope, e))

        expected = dict if operation.result is ResultKind.OBJECT else list
        if not isinstance(result, expected):
            message = (
                f"{operation.operation_id}: expected a JSON {operation.result.value}, "
                f"got {type(result).__name__}"
            )
            envelope.result = result
            return CallResult(None, envelope, DecodeError(message, envelope))

        envelope.result = result
        return CallResult(result, envelope, None)

    @staticmethod
    def _api_error(response: httpx.Response) -> APIError:
        """Decode a non-success response into a typed APIError."""
        payload: Any = None
        try:
            payload = response.json()
        except ValueError:
            pass

        message = None
        code = None
        errors: list[dict[str, Any]] = []
        if isinstance(payload, dict):
            raw_errors = payload.get("errors")
            if isinstance(raw_errors, list):
                errors = [e for e in raw_errors if isinstance(e, dict)]
            if errors:
                message = errors[0].get("message")
                code = errors[0].get("code")
            for key in ("message", "description", "error", "errorMessage"):
                if message:
                    break
                value = payload.get(key)
                if isinstance(value, str):
                    message = value
            if code is None:
                code = payload.get("code")

        if not message:
            message = response.text or response.reason_phrase or f"HTTP {response.status_code}"

        envelope = DetailedResponse.from_httpx(response, result=payload)
        error_class = api_error_class(response.status_code)
        kwargs: dict[str, Any] = {}
        if error_class is RateLimitError:
            kwargs["retry_after"] = parse_retry_after(response.headers.get("Retry-After"))
        return error_class(
            message,
            status_code=response.status_code,
            code=code,
            errors=errors,
            response=envelope,
            **kwargs,
        )
