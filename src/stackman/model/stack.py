"""Stack mutation operations for stackman workspaces."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from stackman import ids
from stackman.model.history import record
from stackman.model.node import Node
from stackman.model.records import ActionType, HistoryItem, Stack, Task
from stackman.model.reorder import find_task_stack


def find_stack(ws: Node, stack_id: str) -> Stack | None:
    """Look up a stack by id."""
    for stack in ws.stacks or ():
        if stack.id == stack_id:
            return stack
    return None


def stack_title(stack: Stack | None) -> str:
    """Title for history text, or a generic word when there is no stack."""
    return stack.title if stack is not None and stack.title else "stack"


def detach_task(stacks: Sequence[Stack], task_id: str) -> tuple[Stack, ...]:
    """Remove task_id from every stack that holds it."""
    return tuple(
        replace(stack, task_ids=tuple(t for t in stack.task_ids if t != task_id)) if task_id in stack.task_ids else stack
        for stack in stacks
    )


def attach_task(
    stacks: Sequence[Stack],
    stack_id: str,
    task_id: str,
    position: int | None = None,
) -> tuple[Stack, ...]:
    """Place task_id in stack_id at position (None appends).

    The id is removed from any other stack in the same pass, so a task is
    never in two lanes. Unknown stack_id leaves the stacks unchanged.
    """
    if not any(stack.id == stack_id for stack in stacks):
        return tuple(stacks)
    attached = []
    for stack in detach_task(stacks, task_id):
        if stack.id == stack_id:
            task_ids = list(stack.task_ids)
            insert_pos = min(position, len(task_ids)) if position is not None else len(task_ids)
            task_ids.insert(insert_pos, task_id)
            stack = replace(stack, task_ids=tuple(task_ids))
        attached.append(stack)
    return tuple(attached)


def add_stack(ws: Node, title: str) -> Stack:
    """Append a new empty stack. Returns the created Stack."""
    record(ws, ActionType.ADD_STACK, f'Created new stack "{title}"')
    stack = Stack(id=ids.new_id(), title=title)
    ws.stacks = (*(ws.stacks or ()), stack)
    return stack


def rename_stack(ws: Node, stack_id: str, new_title: str) -> HistoryItem | None:
    """Rename a stack. Only records history when the title changes."""
    stack = find_stack(ws, stack_id)
    if stack is None:
        return None
    item = None
    if stack.title != new_title:
        item = record(ws, ActionType.UPDATE_STACK, f'Renamed stack "{stack.title}" to "{new_title}"')
    ws.stacks = tuple(replace(s, title=new_title) if s.id == stack_id else s for s in ws.stacks)
    return item


def delete_stack(ws: Node, stack_id: str) -> HistoryItem | None:
    """Remove a stack from the board.

    Its task ids go with it; the task records stay in ws.tasks and show
    up in orphaned_tasks() until deleted or re-homed.
    """
    stack = find_stack(ws, stack_id)
    if stack is None:
        return None
    item = record(ws, ActionType.DELETE_STACK, f'Deleted stack "{stack.title}"')
    ws.stacks = tuple(s for s in ws.stacks if s.id != stack_id)
    return item


def orphaned_tasks(ws: Node) -> list[Task]:
    """Tasks not held by any stack."""
    stacks = ws.stacks or ()
    return [task for task in ws.tasks or () if find_task_stack(stacks, task.id) is None]
