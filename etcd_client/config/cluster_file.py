"""Cluster file model and YAML loader.

A cluster file lists the members a client should talk to, for example:

    endpoints:
      - http://etcd1:2379
      - http://etcd2:2379
    timeout_seconds: 3
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class ClusterFile(BaseModel):
    """Endpoints and transport overrides read from YAML."""

    endpoints: list[str] = Field(min_length=1)
    timeout_seconds: float | None = Field(default=None, gt=0)


def load_cluster_file(yaml_path: str) -> ClusterFile | None:
    """Parse a cluster YAML file.

    Returns None (and logs why) if the file is missing, is not valid YAML or
    does not describe at least one endpoint.
    """
    path = Path(yaml_path)

    if not path.exists():
        logger.warning("Cluster file not found at %s, using configured endpoints", yaml_path)
        return None

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse cluster file at %s: %s", yaml_path, exc)
        return None

    if not isinstance(raw, dict) or "endpoints" not in raw:
        logger.warning("Cluster file %s has no 'endpoints' key, using configured endpoints", yaml_path)
        return None

    try:
        return ClusterFile.model_validate(raw)
    except ValidationError as exc:
        logger.error("Invalid cluster file %s: %s", yaml_path, exc)
        return None
