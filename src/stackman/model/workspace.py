"""Build workspace nodes: empty, hydrated from stored data, or seeded."""

from __future__ import annotations

from typing import Any, Iterable

from stackman.constants import BACKGROUND_IMAGE
from stackman.model.node import Node
from stackman.model.records import RECORD_TYPES, ArchivedTask, HistoryItem, Stack, Task

DEFAULT_STACKS = (
    Stack(id="s1", title="Do Today", task_ids=("a", "b")),
    Stack(id="s2", title="Stagnant", task_ids=("c",)),
    Stack(id="s3", title="Done", task_ids=("d",)),
)

DEFAULT_TASKS = (
    Task(
        id="a",
        title="This is the most prioritized task",
        description="Please Please Please",
        created_at=1763712401,
    ),
    Task(
        id="b",
        title="Another important task",
        description="Get this done soon",
        created_at=1763712402,
    ),
    Task(
        id="c",
        title="Stagnant task example",
        description="This one is stuck",
        created_at=1763712403,
    ),
    Task(
        id="d",
        title="Completed task",
        description="This task is finished",
        is_finished=True,
        created_at=1763712404,
    ),
)


def new_workspace(
    tasks: Iterable[Task] = (),
    stacks: Iterable[Stack] = (),
    history: Iterable[HistoryItem] = (),
    archived_tasks: Iterable[ArchivedTask] = (),
    background_image: bytes | str | None = None,
) -> Node:
    """Create a workspace node holding the given collections."""
    return Node(
        tasks=tuple(tasks),
        stacks=tuple(stacks),
        history=tuple(history),
        archived_tasks=tuple(archived_tasks),
        background_image=background_image,
    )


def seed_workspace() -> Node:
    """The first-run workspace: three stacks and four example tasks."""
    return new_workspace(tasks=DEFAULT_TASKS, stacks=DEFAULT_STACKS)


def workspace_from_data(data: dict[str, Any]) -> Node:
    """Hydrate a workspace from stored collections of plain dicts."""
    collections = {name: tuple(cls.from_dict(row) for row in data.get(name, ())) for name, cls in RECORD_TYPES.items()}
    return new_workspace(background_image=data.get(BACKGROUND_IMAGE), **collections)


def workspace_to_data(ws: Node) -> dict[str, Any]:
    """Flatten a workspace's collections to lists of plain dicts."""
    data: dict[str, Any] = {name: [rec.to_dict() for rec in getattr(ws, name) or ()] for name in RECORD_TYPES}
    data[BACKGROUND_IMAGE] = ws.background_image
    return data
