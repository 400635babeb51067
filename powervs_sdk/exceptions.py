"""Exception hierarchy for the PowerVS SDK.

Service methods never raise these across the API boundary: they are
returned in the ``error`` slot of a :class:`~powervs_sdk.response.CallResult`.
Configuration helpers and constructors raise them directly.

Example:
    >>> result, response, error = await service.pcloud_networks_get(
    ...     cloud_instance_id="abc", network_id="net-1"
    ... )
    >>> if isinstance(error, ResourceNotFoundError):
    ...     print(f"Not found: {error.message}")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .response import DetailedResponse


class PowervsSDKError(Exception):
    """Base class for all SDK errors.

    Attributes:
        message: Human readable description.
        details: Optional structured context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PowervsSDKError):
    """Raised when client configuration is missing or invalid."""


class EnvironmentVariableError(ConfigurationError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, variable: str, message: str | None = None) -> None:
        self.variable = variable
        super().__init__(
            message or f"Environment variable {variable} is not usable",
            details={"variable": variable},
        )


class ValidationError(PowervsSDKError, ValueError):
    """Raised when request options fail validation before any network I/O.

    Attributes:
        fields: Names of the offending option fields.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        self.fields = fields or []
        super().__init__(message, details={"fields": self.fields})


class NetworkError(PowervsSDKError):
    """No usable HTTP response was received.

    Attributes:
        cause: The underlying transport exception.
        attempts: Number of attempts made before giving up.
    """

    def __init__(self, message: str, cause: Exception | None = None, attempts: int = 1) -> None:
        self.cause = cause
        self.attempts = attempts
        super().__init__(message, details={"attempts": attempts})


class APIError(PowervsSDKError):
    """The server answered with a non-success status code.

    Attributes:
        status_code: HTTP status code.
        code: Error code from the payload, if any.
        errors: The list of error entries from the payload, if any.
        response: The response envelope.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Any = None,
        errors: list[dict[str, Any]] | None = None,
        response: DetailedResponse | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.errors = errors or []
        self.response = response
        super().__init__(message, details={"status_code": status_code, "code": code})

    def __str__(self) -> str:
        return f"Error: {self.message}, Status code: {self.status_code}"


class AuthenticationError(APIError):
    """Credentials were rejected (401)."""


class AuthorizationError(APIError):
    """Credentials lack permission for the operation (403)."""


class ResourceNotFoundError(APIError):
    """The addressed resource does not exist (404)."""


class RateLimitError(APIError):
    """Too many requests (429).

    Attributes:
        retry_after: Seconds the server asked to wait, if given.
    """

    def __init__(self, *args: Any, retry_after: float | None = None, **kwargs: Any) -> None:
        self.retry_after = retry_after
        super().__init__(*args, **kwargs)


class DecodeError(PowervsSDKError):
    """A success status was returned but the body had an unexpected shape."""

    def __init__(
        self,
        message: str,
        response: DetailedResponse | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.response = response
        self.cause = cause
        super().__init__(message)


_STATUS_ERRORS: dict[int, type[APIError]] = {
    401: AuthenticationError,
    403: AuthorizationError,
    404: ResourceNotFoundError,
    429: RateLimitError,
}


def api_error_class(status_code: int) -> type[APIError]:
    """Return the APIError subclass used for ``status_code``."""
    return _STATUS_ERRORS.get(status_code, APIError)
