"""etcd's cluster membership API."""

from __future__ import annotations

from etcd_client.client import EtcdClient
from etcd_client.dispatch.request import for_path
from etcd_client.models.members import MemberList
from etcd_client.models.responses import Response


async def list_members(client: EtcdClient) -> Response[MemberList]:
    """List the members of the cluster as seen by the first reachable endpoint."""
    return await client.failover(for_path("GET", "v2/members"), MemberList)
