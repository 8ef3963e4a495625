"""Unit tests for EtcdClient construction and cluster-wide queries."""

from __future__ import annotations

import base64

import httpx
import pytest

from conftest import FakeCluster, json_response
from etcd_client.client import EtcdClient
from etcd_client.config.settings import EtcdSettings
from etcd_client.errors import InvalidUriError, TransportError
from etcd_client.models.responses import Health, Response, VersionInfo


class TestConstruction:
    def test_normalizes_endpoints(self) -> None:
        client = EtcdClient(["http://a:2379", "https://b:2379/"])
        assert client.endpoints == ("http://a:2379/", "https://b:2379/")

    def test_accepts_single_endpoint_string(self) -> None:
        client = EtcdClient("http://a:2379")
        assert client.endpoints == ("http://a:2379/",)

    def test_rejects_empty_endpoint_list(self) -> None:
        with pytest.raises(ValueError, match="At least one endpoint"):
            EtcdClient([])

    def test_rejects_malformed_endpoint(self) -> None:
        with pytest.raises(InvalidUriError):
            EtcdClient(["http://a:2379", "not a uri"])

    def test_endpoints_are_immutable(self) -> None:
        client = EtcdClient(["http://a:2379"])
        assert isinstance(client.endpoints, tuple)


class TestFromSettings:
    def test_uses_settings_endpoints(self) -> None:
        settings = EtcdSettings(endpoints=["http://e1:2379", "http://e2:2379"])
        client = EtcdClient.from_settings(settings)
        assert client.endpoints == ("http://e1:2379/", "http://e2:2379/")

    def test_cluster_file_overrides_endpoints(self, tmp_path) -> None:
        path = tmp_path / "cluster.yaml"
        path.write_text("endpoints:\n  - http://f1:2379\n  - http://f2:2379\n", encoding="utf-8")

        settings = EtcdSettings(endpoints=["http://e1:2379"], cluster_file=str(path))
        client = EtcdClient.from_settings(settings)

        assert client.endpoints == ("http://f1:2379/", "http://f2:2379/")

    def test_missing_cluster_file_keeps_settings(self, tmp_path) -> None:
        settings = EtcdSettings(
            endpoints=["http://e1:2379"], cluster_file=str(tmp_path / "missing.yaml")
        )
        client = EtcdClient.from_settings(settings)
        assert client.endpoints == ("http://e1:2379/",)

    @pytest.mark.asyncio
    async def test_basic_auth_header_sent(self, cluster: FakeCluster) -> None:
        cluster.on("a", json_response(200, {"health": "true"}))
        settings = EtcdSettings(endpoints=["http://a:2379"], username="root", password="pw")

        async with EtcdClient.from_settings(settings, transport=cluster.transport()) as client:
            results = [r async for r in client.health()]

        assert isinstance(results[0], Response)
        expected = "Basic " + base64.b64encode(b"root:pw").decode()
        assert cluster.calls[0].headers["Authorization"] == expected


class TestClusterQueries:
    @pytest.mark.asyncio
    async def test_health_queries_every_member(self, cluster: FakeCluster) -> None:
        cluster.on("a", json_response(200, {"health": "true"}))
        cluster.on("b", json_response(200, {"health": "false"}))

        async with cluster.client(["a", "b"]) as client:
            results = [r async for r in client.health()]

        assert len(results) == 2
        by_health = sorted(r.data.is_healthy for r in results)
        assert by_health == [False, True]
        assert all(isinstance(r.data, Health) for r in results)
        assert {req.url.path for req in cluster.calls} == {"/health"}

    @pytest.mark.asyncio
    async def test_versions(self, cluster: FakeCluster) -> None:
        cluster.on("a", json_response(200, {"etcdserver": "2.3.8", "etcdcluster": "2.3.0"}))
        cluster.on("b", httpx.ConnectError("refused"))

        async with cluster.client(["a", "b"]) as client:
            results = [r async for r in client.versions()]

        successes = [r for r in results if isinstance(r, Response)]
        failures = [r for r in results if isinstance(r, TransportError)]
        assert len(successes) == 1
        assert len(failures) == 1
        assert successes[0].data == VersionInfo(server_version="2.3.8", cluster_version="2.3.0")

    @pytest.mark.asyncio
    async def test_close_releases_transport(self, cluster: FakeCluster) -> None:
        client = cluster.client(["a"])
        await client.aclose()
        assert client._http.is_closed
