"""Thin API modules: each builds a request and hands it to the dispatcher."""

from etcd_client.api import kv, members, stats

__all__ = ["kv", "members", "stats"]
