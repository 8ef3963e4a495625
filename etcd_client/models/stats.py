"""Schemas for etcd's statistics API (v2/stats/*).

Field names follow Python conventions; the store's camelCase names are kept
as aliases so bodies decode as-is.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _StatsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CountStats(_StatsModel):
    """Raft RPC success/failure counts for one follower."""

    fail: int = Field(ge=0)
    success: int = Field(ge=0)


class LatencyStats(_StatsModel):
    """Network latency to a follower, in seconds."""

    average: float
    current: float
    maximum: float
    minimum: float
    standard_deviation: float = Field(alias="standardDeviation")


class FollowerStats(_StatsModel):
    """Health of a single follower as seen by the leader."""

    counts: CountStats
    latency: LatencyStats


class LeaderStats(_StatsModel):
    """Statistics reported by the cluster leader."""

    leader: str
    followers: dict[str, FollowerStats] = Field(default_factory=dict)


class LeaderInfo(_StatsModel):
    """What a member knows about the current leader."""

    id: str = Field(alias="leader")
    start_time: str = Field(alias="startTime")
    uptime: str


class SelfStats(_StatsModel):
    """Statistics about a single cluster member."""

    id: str
    name: str
    leader_info: LeaderInfo = Field(alias="leaderInfo")
    received_append_request_count: int = Field(alias="recvAppendRequestCnt", ge=0)
    received_bandwidth_rate: float | None = Field(default=None, alias="recvBandwidthRate")
    received_package_rate: float | None = Field(default=None, alias="recvPkgRate")
    sent_append_request_count: int = Field(alias="sendAppendRequestCnt", ge=0)
    sent_bandwidth_rate: float | None = Field(default=None, alias="sendBandwidthRate")
    sent_package_rate: float | None = Field(default=None, alias="sendPkgRate")
    start_time: str = Field(alias="startTime")
    state: str


class StoreStats(_StatsModel):
    """Counts of operations handled by a member's store."""

    compare_and_delete_fail: int = Field(alias="compareAndDeleteFail", ge=0)
    compare_and_delete_success: int = Field(alias="compareAndDeleteSuccess", ge=0)
    compare_and_swap_fail: int = Field(alias="compareAndSwapFail", ge=0)
    compare_and_swap_success: int = Field(alias="compareAndSwapSuccess", ge=0)
    create_fail: int = Field(alias="createFail", ge=0)
    create_success: int = Field(alias="createSuccess", ge=0)
    delete_fail: int = Field(alias="deleteFail", ge=0)
    delete_success: int = Field(alias="deleteSuccess", ge=0)
    expire_count: int = Field(alias="expireCount", ge=0)
    get_fail: int = Field(alias="getsFail", ge=0)
    get_success: int = Field(alias="getsSuccess", ge=0)
    set_fail: int = Field(alias="setsFail", ge=0)
    set_success: int = Field(alias="setsSuccess", ge=0)
    update_fail: int = Field(alias="updateFail", ge=0)
    update_success: int = Field(alias="updateSuccess", ge=0)
    watchers: int = Field(ge=0)
