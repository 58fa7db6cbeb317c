"""Queries over an exported wall."""
from __future__ import annotations

from pathlib import Path

import duckdb
import pandas as pd


def messages_by_name(parquet_path: Path, name: str) -> pd.DataFrame:
    """All messages posted under `name`, oldest position first."""
    src = str(parquet_path).replace("'", "''")
    con = duckdb.connect(":memory:")
    try:
        con.execute(f"CREATE VIEW messages AS SELECT * FROM '{src}'")
        sql = """
        SELECT position, timestamp, name, message
        FROM messages
        WHERE name = ?
        ORDER BY position
        """
        return con.execute(sql, [name]).fetchdf()
    finally:
        con.close()
