"""Fan-out dispatcher: query every endpoint at once.

One task is started per endpoint, so concurrency equals the endpoint count.
Outcomes are yielded as they complete, one per endpoint, each either a
Response or the EtcdError that endpoint produced. Errors never cancel
siblings and never end the iteration early.

Closing the iterator before it is exhausted cancels the requests still in
flight.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from typing import TypeVar, Union

import httpx

from etcd_client.dispatch.request import RequestBuilder
from etcd_client.dispatch.requester import request_once
from etcd_client.errors import EtcdError
from etcd_client.models.responses import Response

logger = logging.getLogger(__name__)

T = TypeVar("T")

FanOutResult = Union[Response, EtcdError]


async def _attempt(
    http: httpx.AsyncClient,
    endpoint: str,
    build_request: RequestBuilder,
    model: type[T],
) -> FanOutResult:
    try:
        request = build_request(endpoint)
        return await request_once(http, request, model)
    except EtcdError as exc:
        logger.debug(
            "Fan-out request to %s failed: %s",
            endpoint,
            exc,
            extra={"endpoint": endpoint, "error_kind": exc.kind},
        )
        return exc


async def dispatch_fanout(
    http: httpx.AsyncClient,
    endpoints: Sequence[str],
    build_request: RequestBuilder,
    model: type[T],
) -> AsyncIterator[FanOutResult]:
    """Yield one outcome per endpoint, in completion order."""
    tasks = [
        asyncio.ensure_future(_attempt(http, endpoint, build_request, model))
        for endpoint in endpoints
    ]
    try:
        for next_done in asyncio.as_completed(tasks):
            yield await next_done
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug("Fan-out abandoned with %d requests in flight", len(pending))
