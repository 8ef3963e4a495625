"""Endpoint-resilient request dispatch."""

from etcd_client.dispatch.failover import dispatch_failover
from etcd_client.dispatch.fanout import FanOutResult, dispatch_fanout
from etcd_client.dispatch.headers import cluster_info_from_headers
from etcd_client.dispatch.request import (
    EtcdRequest,
    RequestBuilder,
    build_uri,
    for_path,
    normalize_endpoint,
)
from etcd_client.dispatch.requester import request_once

__all__ = [
    "EtcdRequest",
    "FanOutResult",
    "RequestBuilder",
    "build_uri",
    "cluster_info_from_headers",
    "dispatch_failover",
    "dispatch_fanout",
    "for_path",
    "normalize_endpoint",
    "request_once",
]
