"""Client for etcd's v2 HTTP API with endpoint failover and fan-out."""

from etcd_client.client import EtcdClient
from etcd_client.config import EtcdSettings
from etcd_client.errors import (
    ApiError,
    DecodeError,
    EtcdError,
    InvalidUriError,
    TransportError,
)
from etcd_client.models import ClusterInfo, Health, Response, VersionInfo

__all__ = [
    "ApiError",
    "ClusterInfo",
    "DecodeError",
    "EtcdClient",
    "EtcdError",
    "EtcdSettings",
    "Health",
    "InvalidUriError",
    "Response",
    "TransportError",
    "VersionInfo",
]
