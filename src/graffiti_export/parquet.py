from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from .frame import messages_frame

MESSAGES_FILE = "messages.parquet"

SCHEMA = pa.schema(
    [
        ("position", pa.int64()),
        ("timestamp", pa.int64()),
        ("name", pa.string()),
        ("message", pa.string()),
        ("name_hex", pa.string()),
        ("message_hex", pa.string()),
    ]
)


def export_messages(data, out_path: Path) -> Path | None:
    """Write out_path/messages.parquet. An empty wall writes nothing."""
    df = messages_frame(data)
    if df.empty:
        return None

    out_path = Path(out_path)
    out_path.mkdir(parents=True, exist_ok=True)
    target = out_path / MESSAGES_FILE

    table = pa.Table.from_pandas(df, schema=SCHEMA, preserve_index=False)
    pq.write_table(table, target)
    return target
