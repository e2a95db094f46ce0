"""Interpret drag gestures as reorderings of stacks and their tasks.

The engine is a pure function: given the ordered stacks and a drag
operation it returns a new tuple of stacks, or the input unchanged when
the operation can't be resolved. It is safe to call on every drag-over
notification; once a move has been applied, applying the same operation
again resolves to equal indices and leaves the stacks as they are.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from stackman.model.records import Stack

STACK = "Stack"
TASK = "Task"


@dataclass(frozen=True)
class DragItem:
    """One end of a drag: what kind of thing and its id."""

    type: str
    id: str


@dataclass(frozen=True)
class DragOperation:
    """A dragged source hovering over, or dropped onto, a target."""

    source: DragItem | None = None
    target: DragItem | None = None


def array_move(items: Sequence, from_index: int, to_index: int) -> tuple:
    """Return items with the element at from_index moved to to_index."""
    moved = list(items)
    moved.insert(to_index, moved.pop(from_index))
    return tuple(moved)


def stack_index(stacks: Sequence[Stack], stack_id: str) -> int:
    """Index of the stack with stack_id, or -1."""
    for i, stack in enumerate(stacks):
        if stack.id == stack_id:
            return i
    return -1


def find_task_stack(stacks: Sequence[Stack], task_id: str) -> Stack | None:
    """Find the stack whose task_ids contains task_id."""
    for stack in stacks:
        if task_id in stack.task_ids:
            return stack
    return None


def _move_stack(stacks: tuple[Stack, ...], source: DragItem, target: DragItem) -> tuple[Stack, ...]:
    source_index = stack_index(stacks, source.id)
    if source_index == -1:
        return stacks

    if target.type == STACK:
        target_stack_id = target.id
    elif target.type == TASK:
        # A lane dropped onto another lane's body goes next to that lane
        owner = find_task_stack(stacks, target.id)
        if owner is None:
            return stacks
        target_stack_id = owner.id
    else:
        return stacks

    target_index = stack_index(stacks, target_stack_id)
    if target_index == -1 or source_index == target_index:
        return stacks
    return array_move(stacks, source_index, target_index)


def _move_task(stacks: tuple[Stack, ...], source: DragItem, target: DragItem) -> tuple[Stack, ...]:
    source_stack = find_task_stack(stacks, source.id)
    if source_stack is None:
        return stacks
    source_index = source_stack.task_ids.index(source.id)

    if target.type == STACK:
        target_index = stack_index(stacks, target.id)
        if target_index == -1:
            return stacks
        target_stack = stacks[target_index]
        insert_at = len(target_stack.task_ids)
    elif target.type == TASK:
        target_stack = find_task_stack(stacks, target.id)
        if target_stack is None:
            return stacks
        insert_at = target_stack.task_ids.index(target.id)
    else:
        return stacks

    if source_stack.id == target_stack.id:
        if source_index == insert_at:
            return stacks
        task_ids = array_move(source_stack.task_ids, source_index, insert_at)
        if task_ids == source_stack.task_ids:
            return stacks
        return tuple(
            Stack(stack.id, stack.title, task_ids) if stack.id == source_stack.id else stack for stack in stacks
        )

    source_ids = list(source_stack.task_ids)
    del source_ids[source_index]
    target_ids = list(target_stack.task_ids)
    target_ids.insert(insert_at, source.id)

    # Both lanes change in the same snapshot
    moved = []
    for stack in stacks:
        if stack.id == source_stack.id:
            stack = Stack(stack.id, stack.title, tuple(source_ids))
        elif stack.id == target_stack.id:
            stack = Stack(stack.id, stack.title, tuple(target_ids))
        moved.append(stack)
    return tuple(moved)


def move_items(stacks: Sequence[Stack], operation: DragOperation | None) -> tuple[Stack, ...]:
    """Apply a drag operation to the stacks.

    Returns the input (as a tuple) when the operation has no source or
    target, names an unknown type, or refers to ids that aren't present.
    """
    stacks = tuple(stacks)
    if operation is None or operation.source is None or operation.target is None:
        return stacks

    source, target = operation.source, operation.target
    if source.type == STACK:
        return _move_stack(stacks, source, target)
    if source.type == TASK:
        return _move_task(stacks, source, target)
    return stacks
