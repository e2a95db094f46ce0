"""Immutable records held by a workspace."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(str, Enum):
    """Kinds of history entries."""

    ADD_TASK = "ADD_TASK"
    UPDATE_TASK = "UPDATE_TASK"
    UPDATE_STATUS = "UPDATE_STATUS"
    ADD_STACK = "ADD_STACK"
    DELETE_STACK = "DELETE_STACK"
    UPDATE_STACK = "UPDATE_STACK"
    MOVE_STACK = "MOVE_STACK"
    MOVE_TASK = "MOVE_TASK"
    DELETE_TASK = "DELETE_TASK"
    ARCHIVE_TASK = "ARCHIVE_TASK"


@dataclass(frozen=True)
class Task:
    """A work item. Its position lives in the owning stack's task_ids."""

    id: str
    title: str
    description: str = ""
    is_finished: bool = False
    created_at: int = 0
    due_date: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "is_finished": self.is_finished,
            "created_at": self.created_at,
        }
        if self.due_date is not None:
            data["due_date"] = self.due_date
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            is_finished=bool(data.get("is_finished", False)),
            created_at=int(data.get("created_at", 0)),
            due_date=data.get("due_date"),
        )


@dataclass(frozen=True)
class Stack:
    """A named lane. task_ids is the lane's visible order."""

    id: str
    title: str
    task_ids: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "task_ids": list(self.task_ids)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Stack:
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            task_ids=tuple(data.get("task_ids", ())),
        )


@dataclass(frozen=True)
class ArchivedTask:
    """A soft-deleted task with the stack it was archived from.

    original_stack_id may name a stack that no longer exists, or be empty
    when the task was not in any stack.
    """

    id: str
    title: str
    description: str
    is_finished: bool
    created_at: int
    original_stack_id: str
    archived_at: int
    due_date: int | None = None

    @classmethod
    def from_task(cls, task: Task, original_stack_id: str, archived_at: int) -> ArchivedTask:
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            is_finished=task.is_finished,
            created_at=task.created_at,
            original_stack_id=original_stack_id,
            archived_at=archived_at,
            due_date=task.due_date,
        )

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            is_finished=self.is_finished,
            created_at=self.created_at,
            due_date=self.due_date,
        )

    def to_dict(self) -> dict[str, Any]:
        data = self.to_task().to_dict()
        data["original_stack_id"] = self.original_stack_id
        data["archived_at"] = self.archived_at
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArchivedTask:
        task = Task.from_dict(data)
        return cls.from_task(
            task,
            original_stack_id=data.get("original_stack_id", ""),
            archived_at=int(data.get("archived_at", 0)),
        )


@dataclass(frozen=True)
class HistoryItem:
    """One audit-log entry."""

    id: str
    timestamp: int
    action_type: ActionType
    details: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "action_type": self.action_type.value,
            "details": self.details,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryItem:
        return cls(
            id=data["id"],
            timestamp=int(data["timestamp"]),
            action_type=ActionType(data["action_type"]),
            details=data.get("details", ""),
        )


RECORD_TYPES = {
    "tasks": Task,
    "stacks": Stack,
    "history": HistoryItem,
    "archived_tasks": ArchivedTask,
}
