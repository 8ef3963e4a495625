"""etcd's primary key-value API: plain get, set and delete.

Keys are absolute paths ("/foo/bar"); a missing leading slash is added.
"""

from __future__ import annotations

from urllib.parse import quote

from etcd_client.client import EtcdClient
from etcd_client.dispatch.request import for_path
from etcd_client.models.kv import KeyValueInfo
from etcd_client.models.responses import Response


def _key_path(key: str) -> str:
    if not key.startswith("/"):
        key = f"/{key}"
    return f"v2/keys{quote(key, safe='/')}"


async def get(
    client: EtcdClient,
    key: str,
    *,
    recursive: bool = False,
    sort: bool = False,
) -> Response[KeyValueInfo]:
    """Get the node at ``key``; directories list their children.

    Raises ``ApiError`` with code 100 if the key does not exist.
    """
    params: dict[str, str] = {}
    if recursive:
        params["recursive"] = "true"
    if sort:
        params["sorted"] = "true"
    return await client.failover(
        for_path("GET", _key_path(key), params=params or None),
        KeyValueInfo,
    )


async def set(client: EtcdClient, key: str, value: str) -> Response[KeyValueInfo]:
    """Set ``key`` to ``value``, creating it if needed."""
    return await client.failover(
        for_path("PUT", _key_path(key), form={"value": value}),
        KeyValueInfo,
    )


async def delete(
    client: EtcdClient,
    key: str,
    *,
    recursive: bool = False,
) -> Response[KeyValueInfo]:
    """Delete ``key``. Directories need ``recursive=True``."""
    params = {"recursive": "true", "dir": "true"} if recursive else None
    return await client.failover(
        for_path("DELETE", _key_path(key), params=params),
        KeyValueInfo,
    )
