"""Utility functions for the API flow designer."""

from apiflow.utils.identifiers import (
    generate_design_id,
    generate_node_id,
    next_timestamp,
    utc_now,
    utc_timestamp,
)

__all__ = [
    "generate_design_id",
    "generate_node_id",
    "next_timestamp",
    "utc_now",
    "utc_timestamp",
]
