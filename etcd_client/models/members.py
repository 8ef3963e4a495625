"""Schemas for etcd's cluster membership API (v2/members)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Member(BaseModel):
    """A single cluster member."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str = ""
    peer_urls: list[str] = Field(default_factory=list, alias="peerURLs")
    client_urls: list[str] = Field(default_factory=list, alias="clientURLs")


class MemberList(BaseModel):
    """Body of GET v2/members."""

    members: list[Member] = Field(default_factory=list)
