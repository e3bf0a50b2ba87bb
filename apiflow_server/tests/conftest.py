"""Shared fixtures: every test gets its own SQLite file."""

import pytest

from apiflow_server import design_db


@pytest.fixture(autouse=True)
def design_db_path(tmp_path, monkeypatch):
    path = tmp_path / "designs.db"
    monkeypatch.setattr(design_db, "DESIGN_DB_PATH", path)
    design_db.init_db()
    return path
