"""SQLite storage for design records.

``design_data`` is written as opaque JSON text; this module never looks
inside it.
"""

import json
import os
import sqlite3
from datetime import datetime
from pathlib import Path

from apiflow.models.design import DesignRecord


DEFAULT_DB_PATH = Path(__file__).parent / "data" / "apiflow.db"
DESIGN_DB_PATH = Path(os.getenv("DESIGN_DB_PATH", str(DEFAULT_DB_PATH)))


def _connect() -> sqlite3.Connection:
    DESIGN_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(DESIGN_DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def _to_text(moment: datetime) -> str:
    return moment.isoformat(timespec="microseconds")


def _row_to_record(row: sqlite3.Row) -> DesignRecord:
    return DesignRecord(
        id=row["id"],
        name=row["name"],
        design_data=json.loads(row["design_data"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def init_db() -> None:
    with _connect() as conn:
        conn.execute(
            """
            create table if not exists designs (
                id text primary key,
                name text not null,
                design_data text not null,
                created_at text not null,
                updated_at text not null
            )
            """
        )
        conn.execute(
            "create index if not exists idx_designs_created_at on designs(created_at)"
        )
        conn.commit()


def insert_design(record: DesignRecord) -> None:
    with _connect() as conn:
        conn.execute(
            """
            insert into designs (id, name, design_data, created_at, updated_at)
            values (?, ?, ?, ?, ?)
            """,
            (
                record.id,
                record.name,
                json.dumps(record.design_data),
                _to_text(record.created_at),
                _to_text(record.updated_at),
            ),
        )
        conn.commit()


def update_design(record: DesignRecord) -> bool:
    """overwrite name, data and updated_at; False if the row is gone."""
    with _connect() as conn:
        cursor = conn.execute(
            """
            update designs
            set name = ?,
                design_data = ?,
                updated_at = ?
            where id = ?
            """,
            (
                record.name,
                json.dumps(record.design_data),
                _to_text(record.updated_at),
                record.id,
            ),
        )
        conn.commit()
    return cursor.rowcount > 0


def get_design(design_id: str) -> DesignRecord | None:
    with _connect() as conn:
        row = conn.execute(
            "select * from designs where id = ?",
            (design_id,),
        ).fetchone()
    if not row:
        return None
    return _row_to_record(row)


def list_designs() -> list[DesignRecord]:
    """all designs, newest created first."""
    with _connect() as conn:
        rows = conn.execute(
            "select * from designs order by created_at desc, rowid desc"
        ).fetchall()
    return [_row_to_record(row) for row in rows]


def delete_design(design_id: str) -> bool:
    with _connect() as conn:
        cursor = conn.execute("delete from designs where id = ?", (design_id,))
        conn.commit()
    return cursor.rowcount > 0
