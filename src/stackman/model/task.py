"""Task mutation operations for stackman workspaces."""

from __future__ import annotations

from dataclasses import replace

from stackman import ids
from stackman.model.history import record
from stackman.model.node import Node
from stackman.model.records import ActionType, HistoryItem, Task
from stackman.model.reorder import find_task_stack
from stackman.model.stack import attach_task, detach_task, find_stack, stack_title


def find_task(ws: Node, task_id: str) -> Task | None:
    """Look up a task by id."""
    for task in ws.tasks or ():
        if task.id == task_id:
            return task
    return None


def add_task(
    ws: Node,
    stack_id: str,
    title: str,
    description: str = "",
    due_date: int | None = None,
) -> Task | None:
    """Create a task at the top of a stack.

    Returns the new Task, or None if the stack doesn't exist.
    """
    stack = find_stack(ws, stack_id)
    if stack is None:
        return None

    task = Task(
        id=ids.new_id(),
        title=title,
        description=description,
        is_finished=False,
        created_at=ids.now_ms(),
        due_date=due_date,
    )
    record(ws, ActionType.ADD_TASK, f'Added "{title}" to {stack_title(stack)}')
    ws.tasks = (*(ws.tasks or ()), task)
    ws.stacks = attach_task(ws.stacks, stack_id, task.id, position=0)
    return task


def update_task(
    ws: Node,
    task_id: str,
    title: str,
    description: str,
    due_date: int | None = None,
) -> HistoryItem | None:
    """Replace a task's title, description and due date.

    History is only recorded if one of them actually changed.
    """
    task = find_task(ws, task_id)
    if task is None:
        return None
    updated = replace(task, title=title, description=description, due_date=due_date)
    if updated == task:
        return None
    item = record(ws, ActionType.UPDATE_TASK, f'Updated details for "{task.title}"')
    ws.tasks = tuple(updated if t.id == task_id else t for t in ws.tasks)
    return item


def toggle_task_status(ws: Node, task_id: str) -> HistoryItem | None:
    """Flip a task between finished and unfinished."""
    task = find_task(ws, task_id)
    if task is None:
        return None
    state = "complete" if not task.is_finished else "incomplete"
    item = record(ws, ActionType.UPDATE_STATUS, f'Marked "{task.title}" as {state}')
    ws.tasks = tuple(replace(t, is_finished=not t.is_finished) if t.id == task_id else t for t in ws.tasks)
    return item


def delete_task(ws: Node, task_id: str) -> HistoryItem | None:
    """Destroy a task and drop it from whichever stack holds it."""
    task = find_task(ws, task_id)
    if task is None:
        return None
    stack = find_task_stack(ws.stacks or (), task_id)
    item = record(ws, ActionType.DELETE_TASK, f'Deleted task "{task.title}" from "{stack_title(stack)}"')
    ws.tasks = tuple(t for t in ws.tasks if t.id != task_id)
    ws.stacks = detach_task(ws.stacks or (), task_id)
    return item
