"""Graffiti Wall Export - parquet snapshots of a wall and queries over them."""
from .frame import messages_frame
from .parquet import export_messages
from .query import messages_by_name

__all__ = ["messages_frame", "export_messages", "messages_by_name"]
