"""Cluster status check: ``python -m etcd_client``.

Reads EtcdSettings from the environment, asks every configured member for its
health and version, prints a JSON summary and exits non-zero unless every
member reported healthy.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from etcd_client.client import EtcdClient
from etcd_client.config.settings import EtcdSettings
from etcd_client.errors import EtcdError
from etcd_client.logging_config import configure_logging

logger = logging.getLogger(__name__)


async def cluster_status(client: EtcdClient) -> dict:
    """Summarise health and versions across every member of ``client``."""
    summary: dict = {
        "endpoints": len(client.endpoints),
        "healthy": 0,
        "unhealthy": 0,
        "versions": [],
        "errors": [],
    }

    async for result in client.health():
        if isinstance(result, EtcdError):
            summary["errors"].append({"kind": result.kind, "message": str(result)})
        elif result.data.is_healthy:
            summary["healthy"] += 1
        else:
            summary["unhealthy"] += 1

    async for result in client.versions():
        if isinstance(result, EtcdError):
            continue
        summary["versions"].append(result.data.model_dump())

    return summary


async def _main() -> int:
    settings = EtcdSettings()
    configure_logging(settings.log_level)

    async with EtcdClient.from_settings(settings) as client:
        summary = await cluster_status(client)

    print(json.dumps(summary, indent=2))
    if summary["healthy"] != summary["endpoints"]:
        logger.warning("%d of %d members healthy", summary["healthy"], summary["endpoints"])
        return 1
    return 0


def run() -> None:
    sys.exit(asyncio.run(_main()))


if __name__ == "__main__":
    run()
