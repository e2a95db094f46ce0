"""Reactive workspace model."""

from stackman.model.archive import archive_task, delete_archived_task, find_archived_task, restore_archived_task
from stackman.model.drag import DragStart, drag_end, drag_over, drag_start
from stackman.model.history import activity_by_day, delete_history_item, sorted_history
from stackman.model.node import Node
from stackman.model.records import ActionType, ArchivedTask, HistoryItem, Stack, Task
from stackman.model.reorder import DragItem, DragOperation, array_move, find_task_stack, move_items
from stackman.model.stack import add_stack, delete_stack, find_stack, orphaned_tasks, rename_stack
from stackman.model.task import add_task, delete_task, find_task, toggle_task_status, update_task
from stackman.model.workspace import new_workspace, seed_workspace

__all__ = [
    "ActionType",
    "ArchivedTask",
    "DragItem",
    "DragOperation",
    "DragStart",
    "HistoryItem",
    "Node",
    "Stack",
    "Task",
    "activity_by_day",
    "add_stack",
    "add_task",
    "archive_task",
    "array_move",
    "delete_archived_task",
    "delete_history_item",
    "delete_stack",
    "delete_task",
    "drag_end",
    "drag_over",
    "drag_start",
    "find_archived_task",
    "find_stack",
    "find_task",
    "find_task_stack",
    "move_items",
    "new_workspace",
    "orphaned_tasks",
    "rename_stack",
    "restore_archived_task",
    "seed_workspace",
    "sorted_history",
    "toggle_task_status",
    "update_task",
]
