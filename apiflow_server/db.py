"""database initialization helpers."""

from apiflow_server.design_db import init_db as init_design_db


def init_all() -> None:
    """initialize all sqlite tables."""
    init_design_db()
