"""Shared helpers for CLI command handlers."""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import datetime
from typing import Callable

from stackman import config, ids
from stackman.model.archive import find_archived_task
from stackman.model.node import Node
from stackman.model.records import ArchivedTask, HistoryItem, Stack, Task
from stackman.model.stack import find_stack
from stackman.model.task import find_task
from stackman.store import Store
from stackman.sync import Persister, load_workspace


def open_store(args) -> Store:
    return Store(config.db_path(args.home))


def run_session(args, action: Callable[[Node], int]) -> int:
    """Load the workspace, run action against it, and flush writes.

    action mutates the workspace through the model functions; the
    persister mirrors those changes to the store before this returns.
    """

    async def session() -> int:
        store = open_store(args)
        ws = await load_workspace(store)
        persister = Persister(store)
        persister.attach(ws)
        try:
            return action(ws)
        finally:
            await persister.close()

    return asyncio.run(session())


def find_stack_or_die(ws: Node, stack_id: str, json_mode: bool) -> Stack:
    """Lookup stack by id. Exit 1 listing available stacks if not found."""
    stack = find_stack(ws, stack_id)
    if stack is not None:
        return stack
    available = [f"  {s.id}  {s.title}" for s in ws.stacks]
    error(f"Stack '{stack_id}' not found. Available:\n" + "\n".join(available), json_mode)


def find_task_or_die(ws: Node, task_id: str, json_mode: bool) -> Task:
    """Lookup task by id. Exit 1 if not found."""
    task = find_task(ws, task_id)
    if task is not None:
        return task
    error(f"Task '{task_id}' not found.", json_mode)


def find_archived_or_die(ws: Node, task_id: str, json_mode: bool) -> ArchivedTask:
    """Lookup archived task by id. Exit 1 if not found."""
    archived = find_archived_task(ws, task_id)
    if archived is not None:
        return archived
    error(f"Archived task '{task_id}' not found.", json_mode)


def parse_when(text: str, json_mode: bool) -> int:
    """Parse an ISO date or datetime (local time) into epoch milliseconds."""
    try:
        return ids.seconds_to_ms(datetime.fromisoformat(text).timestamp())
    except ValueError:
        error(f"Invalid date '{text}', expected ISO format like 2026-01-31 or 2026-01-31T17:00.", json_mode)


def format_when(ms: int | None) -> str:
    if ms is None:
        return ""
    return datetime.fromtimestamp(ids.ms_to_seconds(ms)).strftime("%Y-%m-%d %H:%M")


def time_left(due_ms: int, now: int | None = None) -> str:
    """Coarse time until a due date: "3d", "5h", "12m", or "Overdue"."""
    if now is None:
        now = ids.now_ms()
    diff = due_ms - now
    if diff <= 0:
        return "Overdue"
    seconds = diff // 1000
    if seconds >= 86400:
        return f"{seconds // 86400}d"
    if seconds >= 3600:
        return f"{seconds // 3600}h"
    return f"{seconds // 60}m"


def history_line(item: HistoryItem) -> str:
    return f"{format_when(item.timestamp)}  {item.action_type.value:<13} {item.details}"


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
