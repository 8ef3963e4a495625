"""Configuration module: settings and cluster files."""

from etcd_client.config.cluster_file import ClusterFile, load_cluster_file
from etcd_client.config.settings import EtcdSettings

__all__ = [
    "ClusterFile",
    "EtcdSettings",
    "load_cluster_file",
]
