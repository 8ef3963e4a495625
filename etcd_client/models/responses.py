"""Response envelope returned by every successful etcd call.

Each envelope pairs the decoded payload with cluster metadata read from the
response headers:
{ data: T, cluster_info: { cluster_id, index, raft_index, raft_term } }
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ClusterInfo(BaseModel):
    """Cluster metadata from X-Etcd-* / X-Raft-* headers. All fields optional."""

    model_config = ConfigDict(frozen=True)

    cluster_id: str | None = None
    index: int | None = None
    raft_index: int | None = None
    raft_term: int | None = None


class Response(BaseModel, Generic[T]):
    """A decoded payload plus the cluster metadata of the member that served it."""

    model_config = ConfigDict(frozen=True)

    data: T
    cluster_info: ClusterInfo = ClusterInfo()


class Health(BaseModel):
    """Body of GET /health."""

    health: str

    @property
    def is_healthy(self) -> bool:
        return self.health == "true"


class VersionInfo(BaseModel):
    """Body of GET /version."""

    model_config = ConfigDict(populate_by_name=True)

    cluster_version: str = Field(alias="etcdcluster")
    server_version: str = Field(alias="etcdserver")
