"""Soft-delete archive operations for stackman workspaces."""

from __future__ import annotations

from stackman import ids
from stackman.model.history import record
from stackman.model.node import Node
from stackman.model.records import ActionType, ArchivedTask, HistoryItem
from stackman.model.reorder import find_task_stack
from stackman.model.stack import attach_task, detach_task, find_stack, stack_title
from stackman.model.task import find_task


def find_archived_task(ws: Node, task_id: str) -> ArchivedTask | None:
    """Look up an archived task by id."""
    for archived in ws.archived_tasks or ():
        if archived.id == task_id:
            return archived
    return None


def archive_task(ws: Node, task_id: str) -> HistoryItem | None:
    """Move a task out of its stack and into the archive."""
    task = find_task(ws, task_id)
    if task is None:
        return None
    stack = find_task_stack(ws.stacks or (), task_id)
    item = record(ws, ActionType.ARCHIVE_TASK, f'Archived task "{task.title}" from "{stack_title(stack)}"')
    archived = ArchivedTask.from_task(
        task,
        original_stack_id=stack.id if stack is not None else "",
        archived_at=ids.now_ms(),
    )
    ws.archived_tasks = (*(ws.archived_tasks or ()), archived)
    ws.tasks = tuple(t for t in ws.tasks if t.id != task_id)
    ws.stacks = detach_task(ws.stacks or (), task_id)
    return item


def restore_archived_task(ws: Node, task_id: str) -> HistoryItem | None:
    """Bring an archived task back as a live task.

    It goes to the end of its original stack if that still exists, else
    to the end of the first stack. With no stacks at all the task is
    restored without a lane and is listed by orphaned_tasks().
    """
    archived = find_archived_task(ws, task_id)
    if archived is None:
        return None

    task = archived.to_task()
    item = record(ws, ActionType.ADD_TASK, f'Restored task "{task.title}" from archive')
    ws.archived_tasks = tuple(a for a in ws.archived_tasks if a.id != task_id)
    ws.tasks = (*(ws.tasks or ()), task)

    stacks = ws.stacks or ()
    target = find_stack(ws, archived.original_stack_id)
    if target is None and stacks:
        target = stacks[0]
    if target is not None:
        ws.stacks = attach_task(stacks, target.id, task.id)
    return item


def delete_archived_task(ws: Node, task_id: str) -> None:
    """Permanently remove an archived task. Not recorded in history."""
    archived = ws.archived_tasks or ()
    kept = tuple(a for a in archived if a.id != task_id)
    if len(kept) != len(archived):
        ws.archived_tasks = kept
