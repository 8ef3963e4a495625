"""Error hierarchy and failure classification for etcd requests.

Every failed attempt against a cluster member ends up as exactly one of four
error kinds, all extending EtcdError:

- TransportError: no HTTP response was obtained (DNS, connect, TLS, timeout).
- ApiError: a non-success status with a store error payload.
- DecodeError: a body that could not be parsed into the expected schema.
- InvalidUriError: a malformed endpoint/path, detected before any network I/O.

The classifier functions below are pure: they only look at what they are given.
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class EtcdError(Exception):
    """Base error for all etcd client errors."""

    kind: str = "etcd"
    message: str = "etcd request failed"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(EtcdError):
    """No HTTP response was received from the endpoint."""

    kind = "transport"
    message = "Endpoint unreachable"

    def __init__(self, message: str | None = None, *, url: str | None = None, **kwargs: object) -> None:
        self.url = url
        super().__init__(message, url=url, **kwargs)


class ApiError(EtcdError):
    """The store answered with a non-success status and a structured error."""

    kind = "api"
    message = "etcd API error"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: int,
        status_code: int,
        cause: str | None = None,
        index: int | None = None,
    ) -> None:
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.index = index
        super().__init__(
            message, code=code, status_code=status_code, cause=cause, index=index
        )

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} ({self.cause}) [code {self.code}]"
        return f"{self.message} [code {self.code}]"


class DecodeError(EtcdError):
    """A response body did not match the expected schema."""

    kind = "decode"
    message = "Unable to decode response body"

    def __init__(
        self,
        message: str | None = None,
        *,
        url: str | None = None,
        status_code: int | None = None,
        **kwargs: object,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message, url=url, status_code=status_code, **kwargs)


class InvalidUriError(EtcdError):
    """An endpoint or endpoint/path combination is not a valid absolute URI."""

    kind = "invalid_uri"
    message = "Invalid URI"

    def __init__(self, message: str | None = None, *, uri: str | None = None) -> None:
        self.uri = uri
        super().__init__(message, uri=uri)


# ---------------------------------------------------------------------------
# Store error payload
# ---------------------------------------------------------------------------


class ApiErrorPayload(BaseModel):
    """Error body returned by etcd, e.g. {"errorCode":100,"message":"Key not found"}."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    error_code: int = Field(alias="errorCode")
    message: str
    cause: str | None = None
    index: int | None = None


# ---------------------------------------------------------------------------
# Classifiers
# ---------------------------------------------------------------------------


def classify_transport_failure(url: str, exc: Exception) -> EtcdError:
    """Map an exception raised before any HTTP response arrived to an error kind."""
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return InvalidUriError(f"Invalid URI {url!r}: {exc}", uri=url)
    description = str(exc) or exc.__class__.__name__
    if isinstance(exc, httpx.DecodingError):
        # Content-Encoding could not be undone; the member did answer
        return DecodeError(f"Undecodable response from {url}: {description}", url=url)
    return TransportError(
        f"Request to {url} failed: {description}",
        url=url,
        cause=exc.__class__.__name__,
    )


def classify_http_failure(url: str, status_code: int, body: bytes) -> EtcdError:
    """Map a non-success HTTP response to ApiError or DecodeError."""
    try:
        payload = ApiErrorPayload.model_validate_json(body)
    except ValidationError:
        return DecodeError(
            f"Status {status_code} from {url} carried no etcd error payload",
            url=url,
            status_code=status_code,
        )
    return ApiError(
        payload.message,
        code=payload.error_code,
        status_code=status_code,
        cause=payload.cause,
        index=payload.index,
    )


def decode_failure(url: str, status_code: int, exc: ValidationError) -> DecodeError:
    """Wrap a schema mismatch on a successful response."""
    return DecodeError(
        f"Response from {url} did not match the expected schema "
        f"({exc.error_count()} errors)",
        url=url,
        status_code=status_code,
    )
