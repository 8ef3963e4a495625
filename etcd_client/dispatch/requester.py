"""Single-endpoint requester.

Performs exactly one HTTP request against one endpoint and turns the outcome
into either a Response envelope or one classified EtcdError. It never retries;
failover and fan-out are the dispatchers' job.
"""

from __future__ import annotations

import logging
import time
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from etcd_client.dispatch.headers import cluster_info_from_headers
from etcd_client.dispatch.request import EtcdRequest
from etcd_client.errors import (
    classify_http_failure,
    classify_transport_failure,
    decode_failure,
)
from etcd_client.models.responses import Response

logger = logging.getLogger(__name__)

T = TypeVar("T")

_adapters: dict[object, TypeAdapter] = {}


def _adapter_for(model: type[T]) -> TypeAdapter[T]:
    adapter = _adapters.get(model)
    if adapter is None:
        adapter = TypeAdapter(model)
        _adapters[model] = adapter
    return adapter


async def request_once(
    http: httpx.AsyncClient,
    request: EtcdRequest,
    model: type[T],
) -> Response[T]:
    """Send ``request`` once and decode the body as ``model``.

    Raises
    ------
    TransportError
        No response was received (connect failure, timeout, TLS error).
    InvalidUriError
        The transport rejected the URL before sending anything.
    ApiError
        Non-success status with an etcd error payload.
    DecodeError
        Non-success status without an error payload, or a success body that
        does not match ``model``.
    """
    started = time.monotonic()
    try:
        response = await http.request(
            request.method,
            request.url,
            params=request.params,
            data=request.form,
            json=request.json,
        )
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        error = classify_transport_failure(request.url, exc)
        logger.debug(
            "%s %s failed before a response: %s",
            request.method,
            request.url,
            exc,
            extra={"endpoint": request.url, "method": request.method, "error_kind": error.kind},
        )
        raise error from exc

    duration_ms = round((time.monotonic() - started) * 1000, 2)
    extra = {
        "endpoint": request.url,
        "method": request.method,
        "status_code": response.status_code,
        "duration_ms": duration_ms,
    }

    if not response.is_success:
        error = classify_http_failure(request.url, response.status_code, response.content)
        logger.debug(
            "%s %s returned %d",
            request.method,
            request.url,
            response.status_code,
            extra={**extra, "error_kind": error.kind},
        )
        raise error

    try:
        data = _adapter_for(model).validate_json(response.content)
    except ValidationError as exc:
        logger.error(
            "Schema mismatch decoding %s from %s",
            getattr(model, "__name__", model),
            request.url,
            extra={**extra, "error_kind": "decode"},
        )
        raise decode_failure(request.url, response.status_code, exc) from exc

    logger.debug("%s %s -> %d", request.method, request.url, response.status_code, extra=extra)
    return Response(data=data, cluster_info=cluster_info_from_headers(response.headers))
