"""Header to ClusterInfo mapping.

etcd attaches cluster metadata to every response. Each header is optional;
a missing or unparseable value leaves the matching field unset and never
fails the request.
"""

from __future__ import annotations

from collections.abc import Mapping

from etcd_client.models.responses import ClusterInfo

CLUSTER_ID_HEADER = "X-Etcd-Cluster-Id"
# First parseable value wins
INDEX_HEADERS = ("X-Etcd-Index", "X-Cluster-Index")
RAFT_INDEX_HEADER = "X-Raft-Index"
RAFT_TERM_HEADER = "X-Raft-Term"

_U64_MAX = 2**64 - 1


def parse_unsigned(raw: str | None) -> int | None:
    """Parse a header value as an unsigned integer, or None."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    return value if value <= _U64_MAX else None


def _get(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    # Plain dicts are case-sensitive; httpx.Headers is not
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def cluster_info_from_headers(headers: Mapping[str, str]) -> ClusterInfo:
    """Build ClusterInfo from response headers."""
    index = None
    for name in INDEX_HEADERS:
        index = parse_unsigned(_get(headers, name))
        if index is not None:
            break

    cluster_id = (_get(headers, CLUSTER_ID_HEADER) or "").strip()
    return ClusterInfo(
        cluster_id=cluster_id or None,
        index=index,
        raft_index=parse_unsigned(_get(headers, RAFT_INDEX_HEADER)),
        raft_term=parse_unsigned(_get(headers, RAFT_TERM_HEADER)),
    )
