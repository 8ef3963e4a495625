"""Failover dispatcher: try endpoints in order until one answers.

Only transport failures move on to the next endpoint. An ApiError or
DecodeError reflects the request or the schema, not the member that served
it, so it is raised immediately and no further endpoints are contacted.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

import httpx

from etcd_client.dispatch.request import RequestBuilder
from etcd_client.dispatch.requester import request_once
from etcd_client.errors import TransportError
from etcd_client.models.responses import Response

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def dispatch_failover(
    http: httpx.AsyncClient,
    endpoints: Sequence[str],
    build_request: RequestBuilder,
    model: type[T],
) -> Response[T]:
    """Return the first successful response, trying ``endpoints`` in order.

    Every request is built before the first attempt, so an ``InvalidUriError``
    is raised without contacting any endpoint. If every endpoint fails with a
    ``TransportError``, the last one is raised.
    """
    if not endpoints:
        raise ValueError("At least one endpoint is required")

    requests = [build_request(endpoint) for endpoint in endpoints]
    last_error: TransportError | None = None

    for attempt, request in enumerate(requests, start=1):
        try:
            return await request_once(http, request, model)
        except TransportError as exc:
            last_error = exc
            logger.warning(
                "Endpoint unreachable (attempt %d/%d): %s",
                attempt,
                len(requests),
                exc,
                extra={
                    "endpoint": request.url,
                    "method": request.method,
                    "attempt": attempt,
                    "error_kind": exc.kind,
                },
            )

    logger.error(
        "All %d endpoints unreachable",
        len(requests),
        extra={"endpoint": requests[-1].url, "error_kind": "transport"},
    )
    assert last_error is not None
    raise last_error
