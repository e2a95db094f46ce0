"""Audit-log operations for stackman workspaces."""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Iterable

from stackman import ids
from stackman.model.node import Node
from stackman.model.records import ActionType, HistoryItem


def record(ws: Node, action_type: ActionType, details: str) -> HistoryItem:
    """Append a new history entry and return it."""
    item = HistoryItem(
        id=ids.new_id(),
        timestamp=ids.now_ms(),
        action_type=action_type,
        details=details,
    )
    ws.history = (*(ws.history or ()), item)
    return item


def delete_history_item(ws: Node, item_id: str) -> None:
    """Remove one history entry. Deleting history is not itself recorded."""
    history = ws.history or ()
    kept = tuple(item for item in history if item.id != item_id)
    if len(kept) != len(history):
        ws.history = kept


def sorted_history(history: Iterable[HistoryItem]) -> list[HistoryItem]:
    """History in timestamp order; ties keep insertion order."""
    return sorted(history, key=lambda item: item.timestamp)


def day_key(timestamp: int) -> str:
    """Local calendar day of an epoch-ms timestamp, as YYYY/MM/DD."""
    return datetime.fromtimestamp(ids.ms_to_seconds(timestamp)).strftime("%Y/%m/%d")


def activity_by_day(history: Iterable[HistoryItem]) -> dict[str, int]:
    """Count history entries per local day, oldest day first."""
    counts = Counter(day_key(item.timestamp) for item in history)
    return dict(sorted(counts.items()))
