"""etcd's statistics API.

Leader statistics come from whichever member answers first; member and store
statistics are gathered from every configured member.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from etcd_client.client import EtcdClient
from etcd_client.dispatch.fanout import FanOutResult
from etcd_client.dispatch.request import for_path
from etcd_client.models.responses import Response
from etcd_client.models.stats import LeaderStats, SelfStats, StoreStats


async def leader_stats(client: EtcdClient) -> Response[LeaderStats]:
    """Return statistics about the leader member of the cluster.

    A follower answers with a non-success status, surfaced as an error.
    """
    return await client.failover(for_path("GET", "v2/stats/leader"), LeaderStats)


def self_stats(client: EtcdClient) -> AsyncIterator[FanOutResult]:
    """Yield statistics about each configured member, as they arrive."""
    return client.fan_out(for_path("GET", "v2/stats/self"), SelfStats)


def store_stats(client: EtcdClient) -> AsyncIterator[FanOutResult]:
    """Yield store operation counts from each configured member, as they arrive."""
    return client.fan_out(for_path("GET", "v2/stats/store"), StoreStats)
