"""Drag session bookkeeping: live preview and history on drop.

A gesture is start -> zero or more over -> end. The start position is
kept in a single transient slot on the workspace so the drop can be
described in history; the slot is never persisted and ordering does not
depend on it.
"""

from __future__ import annotations

from dataclasses import dataclass

from stackman.model.history import record
from stackman.model.node import Node
from stackman.model.records import ActionType, HistoryItem
from stackman.model.reorder import STACK, TASK, DragOperation, find_task_stack, move_items, stack_index
from stackman.model.task import find_task


@dataclass(frozen=True)
class DragStart:
    """Where the dragged item was when the gesture began."""

    index: int
    stack_id: str | None = None
    stack_title: str | None = None


def drag_start(ws: Node, operation: DragOperation) -> None:
    """Remember the source's starting position."""
    source = operation.source
    stacks = ws.stacks or ()
    start = None
    if source is not None and source.type == STACK:
        index = stack_index(stacks, source.id)
        if index != -1:
            start = DragStart(index=index)
    elif source is not None and source.type == TASK:
        stack = find_task_stack(stacks, source.id)
        if stack is not None:
            start = DragStart(
                index=stack.task_ids.index(source.id),
                stack_id=stack.id,
                stack_title=stack.title,
            )
    ws.drag = start


def drag_over(ws: Node, operation: DragOperation) -> None:
    """Apply the hovered move as a live preview."""
    ws.stacks = move_items(ws.stacks or (), operation)


def drag_end(ws: Node, operation: DragOperation) -> HistoryItem | None:
    """Finish a gesture and record the move if anything changed.

    The ordering itself was already applied by drag_over. The start
    slot is cleared whatever happens.
    """
    start: DragStart | None = ws.drag
    ws.drag = None

    source, target = operation.source, operation.target
    if source is None or target is None or start is None:
        return None

    stacks = ws.stacks or ()
    if source.type == STACK:
        new_index = stack_index(stacks, source.id)
        if new_index == -1 or new_index == start.index:
            return None
        stack = stacks[new_index]
        return record(
            ws,
            ActionType.MOVE_STACK,
            f'Reordered stack "{stack.title}" from index {start.index} to {new_index}',
        )

    if source.type == TASK:
        task = find_task(ws, source.id)
        new_stack = find_task_stack(stacks, source.id)
        if task is None or new_stack is None:
            return None
        new_index = new_stack.task_ids.index(source.id)
        if start.stack_id == new_stack.id:
            if new_index == start.index:
                return None
            return record(
                ws,
                ActionType.MOVE_TASK,
                f'Moved task "{task.title}" in "{new_stack.title}" from index {start.index} to {new_index}',
            )
        return record(
            ws,
            ActionType.MOVE_TASK,
            f'Moved task "{task.title}" from "{start.stack_title}" index {start.index} '
            f'to "{new_stack.title}" index {new_index}',
        )

    return None
