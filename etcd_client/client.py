"""HTTP client for an etcd cluster.

The client owns the configured endpoint list and one pooled
``httpx.AsyncClient``. All API calls go through either ``failover`` (any
reachable member will do) or ``fan_out`` (every member's answer is wanted).
"""

from __future__ import annotations

import logging
import ssl
from collections.abc import AsyncIterator, Sequence
from typing import TypeVar

import httpx

from etcd_client.config.cluster_file import load_cluster_file
from etcd_client.config.settings import EtcdSettings
from etcd_client.dispatch.failover import dispatch_failover
from etcd_client.dispatch.fanout import FanOutResult, dispatch_fanout
from etcd_client.dispatch.request import RequestBuilder, for_path, normalize_endpoint
from etcd_client.models.responses import Health, Response, VersionInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EtcdClient:
    """Client for etcd's v2 HTTP API.

    Parameters
    ----------
    endpoints:
        Base URIs of cluster members, in failover priority order
        (e.g. ["http://etcd1:2379", "http://etcd2:2379"]).
    username, password:
        HTTP basic auth credentials, sent with every request when set.
    timeout_seconds:
        Overall per-request timeout (default 5).
    connect_timeout_seconds:
        Connection timeout (default 2).
    follow_redirects:
        Follow redirects to the leader (default True).
    verify:
        TLS verification: True, False or an ``ssl.SSLContext``.
    transport:
        Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        endpoints: Sequence[str] | str,
        *,
        username: str | None = None,
        password: str | None = None,
        timeout_seconds: float = 5.0,
        connect_timeout_seconds: float = 2.0,
        follow_redirects: bool = True,
        verify: ssl.SSLContext | bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if isinstance(endpoints, str):
            endpoints = [endpoints]
        if not endpoints:
            raise ValueError("At least one endpoint is required")

        self._endpoints: tuple[str, ...] = tuple(normalize_endpoint(e) for e in endpoints)

        auth = httpx.BasicAuth(username, password or "") if username is not None else None
        self._http = httpx.AsyncClient(
            auth=auth,
            timeout=httpx.Timeout(timeout_seconds, connect=connect_timeout_seconds),
            follow_redirects=follow_redirects,
            verify=verify,
            transport=transport,
        )
        logger.info("etcd client initialized with %d endpoints", len(self._endpoints))

    @classmethod
    def from_settings(
        cls,
        settings: EtcdSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> EtcdClient:
        """Build a client from ``EtcdSettings``, applying its cluster file if any."""
        endpoints = list(settings.endpoints)
        timeout_seconds = settings.timeout_seconds

        if settings.cluster_file:
            cluster = load_cluster_file(settings.cluster_file)
            if cluster is not None:
                endpoints = cluster.endpoints
                timeout_seconds = cluster.timeout_seconds or timeout_seconds

        return cls(
            endpoints,
            username=settings.username,
            password=settings.password,
            timeout_seconds=timeout_seconds,
            connect_timeout_seconds=settings.connect_timeout_seconds,
            follow_redirects=settings.follow_redirects,
            verify=_ssl_context(settings),
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Properties / lifecycle
    # ------------------------------------------------------------------

    @property
    def endpoints(self) -> tuple[str, ...]:
        return self._endpoints

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> EtcdClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def failover(self, build_request: RequestBuilder, model: type[T]) -> Response[T]:
        """Send to the endpoints in order until one answers."""
        return await dispatch_failover(self._http, self._endpoints, build_request, model)

    def fan_out(self, build_request: RequestBuilder, model: type[T]) -> AsyncIterator[FanOutResult]:
        """Send to every endpoint at once; iterate outcomes as they complete."""
        return dispatch_fanout(self._http, self._endpoints, build_request, model)

    # ------------------------------------------------------------------
    # Cluster-wide queries
    # ------------------------------------------------------------------

    def health(self) -> AsyncIterator[FanOutResult]:
        """Ask every member for its health (GET /health)."""
        return self.fan_out(for_path("GET", "health"), Health)

    def versions(self) -> AsyncIterator[FanOutResult]:
        """Ask every member for its server and cluster version (GET /version)."""
        return self.fan_out(for_path("GET", "version"), VersionInfo)


def _ssl_context(settings: EtcdSettings) -> ssl.SSLContext | bool:
    """Build a TLS context from settings, or True for system defaults."""
    if not (settings.ca_cert_path or settings.client_cert_path):
        return True
    context = ssl.create_default_context(cafile=settings.ca_cert_path)
    if settings.client_cert_path:
        context.load_cert_chain(settings.client_cert_path, settings.client_key_path)
    return context
