from __future__ import annotations

import pandas as pd

from graffiti_core.reader import iter_messages
from graffiti_core.text import unpack_field

COLUMNS = ["position", "timestamp", "name", "message", "name_hex", "message_hex"]


def messages_frame(data) -> pd.DataFrame:
    """One row per committed message, in wall order."""
    rows: list[dict] = []
    if len(data) == 0:
        return pd.DataFrame(rows, columns=COLUMNS)

    for index, record in iter_messages(data):
        rows.append(
            {
                "position": index,
                "timestamp": record.timestamp,
                "name": unpack_field(record.name),
                "message": unpack_field(record.message),
                "name_hex": record.name.hex(),
                "message_hex": record.message.hex(),
            }
        )
    return pd.DataFrame(rows, columns=COLUMNS)
