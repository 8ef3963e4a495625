"""Schemas for etcd's key-value API (v2/keys)."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Action(str, Enum):
    """The operation etcd reports having performed."""

    COMPARE_AND_DELETE = "compareAndDelete"
    COMPARE_AND_SWAP = "compareAndSwap"
    CREATE = "create"
    DELETE = "delete"
    EXPIRE = "expire"
    GET = "get"
    SET = "set"
    UPDATE = "update"


class Node(BaseModel):
    """A key or directory in the store."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key: str | None = None
    value: str | None = None
    dir: bool | None = None
    nodes: list[Node] | None = None
    created_index: int | None = Field(default=None, alias="createdIndex")
    modified_index: int | None = Field(default=None, alias="modifiedIndex")
    expiration: str | None = None
    ttl: int | None = None


class KeyValueInfo(BaseModel):
    """Body of a key-value API response."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    action: Action
    node: Node
    prev_node: Node | None = Field(default=None, alias="prevNode")
