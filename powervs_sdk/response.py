"""Response envelope and call result types."""

from __future__ import annotations

from typing import Any, NamedTuple

import httpx


class DetailedResponse:
    """Status code, headers and body of one HTTP response.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers.
        result: Decoded JSON body, or None when there was none.
        text: Raw response text.
    """

    def __init__(
        self,
        status_code: int,
        headers: httpx.Headers | dict[str, str] | None = None,
        result: Any = None,
        text: str = "",
    ) -> None:
        self.status_code = status_code
        self.headers = httpx.Headers(headers or {})
        self.result = result
        self.text = text

    @classmethod
    def from_httpx(cls, response: httpx.Response, result: Any = None) -> DetailedResponse:
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            result=result,
            text=response.text,
        )

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name)

    def __repr__(self) -> str:
        return f"DetailedResponse(status_code={self.status_code}, result={self.result!r})"


class CallResult(NamedTuple):
    """Outcome of one service call.

    Unpacks like a tuple::

        result, response, error = await service.pcloud_cloudinstances_get(...)

    ``response`` is None only when no HTTP response was received.
    """

    result: Any
    response: DetailedResponse | None
    error: Exception | None

    @property
    def ok(self) -> bool:
        return self.error is None
