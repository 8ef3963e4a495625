"""Pydantic Settings for the etcd client.

All environment variables use the ETCD_CLIENT_ prefix.
Example: ETCD_CLIENT_ENDPOINTS='["http://etcd1:2379","http://etcd2:2379"]'
"""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class EtcdSettings(BaseSettings):
    """etcd client configuration validated from environment variables."""

    # Cluster
    endpoints: list[str] = Field(default_factory=lambda: ["http://127.0.0.1:2379"])
    cluster_file: str | None = None  # YAML file overriding endpoints

    # Transport
    timeout_seconds: float = Field(default=5.0, gt=0)
    connect_timeout_seconds: float = Field(default=2.0, gt=0)
    follow_redirects: bool = True  # v2 writes to followers redirect to the leader

    # Basic auth
    username: str | None = None
    password: str | None = None

    # TLS
    ca_cert_path: str | None = None
    client_cert_path: str | None = None
    client_key_path: str | None = None

    log_level: str = "INFO"

    model_config = {"env_prefix": "ETCD_CLIENT_"}

    @field_validator("endpoints")
    @classmethod
    def _require_endpoints(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one endpoint is required")
        return value

    @model_validator(mode="after")
    def _check_pairs(self) -> EtcdSettings:
        if (self.username is None) != (self.password is None):
            raise ValueError("username and password must be set together")
        if self.client_key_path and not self.client_cert_path:
            raise ValueError("client_key_path requires client_cert_path")
        return self
