"""ID generation and timestamp utilities."""

import uuid
from datetime import datetime, timedelta, timezone

# every node id handed out by this process
_issued_node_ids: set[str] = set()


def generate_node_id(kind: str) -> str:
    """Generate a node ID that has never been issued in this process.

    Format is ``<kind>-<16 hex chars>``, e.g. ``httpRequest-9f1c2b7a0d3e4f51``.
    """
    kind = getattr(kind, "value", kind)
    while True:
        node_id = f"{kind}-{uuid.uuid4().hex[:16]}"
        if node_id not in _issued_node_ids:
            _issued_node_ids.add(node_id)
            return node_id


def generate_design_id() -> str:
    """Generate a unique design ID (UUID4)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_timestamp() -> str:
    """Generate an ISO8601 UTC timestamp."""
    return utc_now().isoformat()


def next_timestamp(previous: datetime) -> datetime:
    """Current UTC time, bumped to stay strictly after ``previous``."""
    now = utc_now()
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now
