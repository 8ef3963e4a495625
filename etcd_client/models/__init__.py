"""Public models for the etcd client."""

from etcd_client.models.kv import Action, KeyValueInfo, Node
from etcd_client.models.members import Member, MemberList
from etcd_client.models.responses import ClusterInfo, Health, Response, VersionInfo
from etcd_client.models.stats import (
    CountStats,
    FollowerStats,
    LatencyStats,
    LeaderInfo,
    LeaderStats,
    SelfStats,
    StoreStats,
)

__all__ = [
    "Action",
    "ClusterInfo",
    "CountStats",
    "FollowerStats",
    "Health",
    "KeyValueInfo",
    "LatencyStats",
    "LeaderInfo",
    "LeaderStats",
    "Member",
    "MemberList",
    "Node",
    "Response",
    "SelfStats",
    "StoreStats",
    "VersionInfo",
]
