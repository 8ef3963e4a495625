"""Request templates and URI construction for cluster endpoints."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from etcd_client.errors import InvalidUriError

_ALLOWED_SCHEMES = {"http", "https"}


@dataclass(frozen=True)
class EtcdRequest:
    """One fully-formed request against one endpoint.

    ``form`` is sent url-encoded (etcd v2 key writes), ``json`` as a JSON body.
    At most one of them is set.
    """

    method: str
    url: str
    params: Mapping[str, str] | None = None
    form: Mapping[str, str] | None = None
    json: Any = None


# Endpoint -> request; must not perform I/O
RequestBuilder = Callable[[str], EtcdRequest]


def _validate(uri: str) -> None:
    if not uri or any(ch.isspace() for ch in uri):
        raise InvalidUriError(f"Invalid URI {uri!r}", uri=uri)
    try:
        parsed = urlparse(uri)
        parsed.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise InvalidUriError(f"Invalid URI {uri!r}: {exc}", uri=uri) from exc
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES:
        raise InvalidUriError(f"Unsupported scheme in URI {uri!r}", uri=uri)
    if not parsed.hostname:
        raise InvalidUriError(f"Missing host in URI {uri!r}", uri=uri)


def normalize_endpoint(endpoint: str) -> str:
    """Validate an endpoint base URI and make sure it ends with a slash."""
    endpoint = endpoint.strip()
    _validate(endpoint)
    if urlparse(endpoint).query or urlparse(endpoint).fragment:
        raise InvalidUriError(
            f"Endpoint {endpoint!r} must not carry a query or fragment", uri=endpoint
        )
    return endpoint if endpoint.endswith("/") else f"{endpoint}/"


def build_uri(endpoint: str, path: str) -> str:
    """Join an endpoint and an API path into an absolute URI.

    Raises ``InvalidUriError`` if the result is not a valid http(s) URI.
    """
    base = endpoint if endpoint.endswith("/") else f"{endpoint}/"
    uri = f"{base}{path.lstrip('/')}"
    _validate(uri)
    return uri


def for_path(
    method: str,
    path: str,
    *,
    params: Mapping[str, str] | None = None,
    form: Mapping[str, str] | None = None,
    json: Any = None,
) -> RequestBuilder:
    """Return a builder issuing the same request against any endpoint."""

    def build(endpoint: str) -> EtcdRequest:
        return EtcdRequest(
            method=method,
            url=build_uri(endpoint, path),
            params=params,
            form=form,
            json=json,
        )

    return build
