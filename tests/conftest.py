"""Shared test fixtures and hypothesis strategies for the etcd client test suite."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Union

import httpx
import pytest
from hypothesis import strategies as st

from etcd_client.client import EtcdClient


# ---------------------------------------------------------------------------
# Keep the developer's environment out of EtcdSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_etcd_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("ETCD_CLIENT_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Fake cluster
# ---------------------------------------------------------------------------

Behaviour = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class FakeCluster:
    """Routes requests by host to canned responses, recording every call.

    A behaviour is an ``httpx.Response``, an exception to raise (e.g.
    ``httpx.ConnectError``) or a callable (sync or async) taking the request.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Behaviour] = {}
        self.calls: list[httpx.Request] = []

    def on(self, host: str, behaviour: Behaviour) -> FakeCluster:
        self.routes[host] = behaviour
        return self

    @property
    def hosts_called(self) -> list[str]:
        return [request.url.host for request in self.calls]

    def handler(self, request: httpx.Request):
        self.calls.append(request)
        behaviour = self.routes.get(request.url.host)
        if behaviour is None:
            raise httpx.ConnectError(f"No route to {request.url.host}", request=request)
        if isinstance(behaviour, Exception):
            raise behaviour
        if callable(behaviour):
            return behaviour(request)
        return behaviour

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self, hosts: list[str], **kwargs: object) -> EtcdClient:
        endpoints = [f"http://{host}:2379" for host in hosts]
        return EtcdClient(endpoints, transport=self.transport(), **kwargs)


def json_response(
    status_code: int,
    body: object,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    return httpx.Response(status_code, json=body, headers=headers)


@pytest.fixture
def cluster() -> FakeCluster:
    return FakeCluster()


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------

def self_stats_body(name: str) -> dict:
    return {
        "id": f"id-{name}",
        "name": name,
        "leaderInfo": {
            "leader": "id-leader",
            "startTime": "2024-01-01T00:00:00Z",
            "uptime": "1h2m3s",
        },
        "recvAppendRequestCnt": 10,
        "recvBandwidthRate": 512.5,
        "recvPkgRate": 3.25,
        "sendAppendRequestCnt": 0,
        "startTime": "2024-01-01T00:00:00Z",
        "state": "StateFollower",
    }


@pytest.fixture
def store_stats_body() -> dict:
    return {
        "compareAndDeleteFail": 0,
        "compareAndDeleteSuccess": 1,
        "compareAndSwapFail": 2,
        "compareAndSwapSuccess": 3,
        "createFail": 4,
        "createSuccess": 5,
        "deleteFail": 6,
        "deleteSuccess": 7,
        "expireCount": 8,
        "getsFail": 9,
        "getsSuccess": 10,
        "setsFail": 11,
        "setsSuccess": 12,
        "updateFail": 13,
        "updateSuccess": 14,
        "watchers": 15,
    }


@pytest.fixture
def leader_stats_body() -> dict:
    return {
        "leader": "id-leader",
        "followers": {
            "id-b": {
                "counts": {"fail": 0, "success": 42},
                "latency": {
                    "average": 0.002,
                    "current": 0.001,
                    "maximum": 0.01,
                    "minimum": 0.0005,
                    "standardDeviation": 0.0007,
                },
            }
        },
    }


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

# Distinct member host names
host_lists = st.lists(
    st.from_regex(r"etcd[a-z]{1,6}", fullmatch=True),
    min_size=1,
    max_size=8,
    unique=True,
)

# Outcome per endpoint: "ok", "transport", "api", "decode"
outcomes = st.sampled_from(["ok", "transport", "api", "decode"])

unsigned_ints = st.integers(min_value=0, max_value=2**64 - 1)
