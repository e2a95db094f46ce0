"""Shared fixtures for model tests."""

import pytest

from stackman.model.records import Stack, Task
from stackman.model.workspace import new_workspace


def _tasks(*task_ids):
    return [Task(id=tid, title=f"Task {tid}", created_at=i) for i, tid in enumerate(task_ids)]


@pytest.fixture
def ws(fixed_ids):
    """Workspace: A [t1, t2, t3], B [t4, t6], C [t5]."""
    return new_workspace(
        tasks=_tasks("t1", "t2", "t3", "t4", "t5", "t6"),
        stacks=[
            Stack("s1", "A", ("t1", "t2", "t3")),
            Stack("s2", "B", ("t4", "t6")),
            Stack("s3", "C", ("t5",)),
        ],
    )


@pytest.fixture
def make_ws(fixed_ids):
    """Build a workspace from {stack_id: (title, [task ids])}."""

    def build(layout, extra_tasks=()):
        stacks = [Stack(sid, title, tuple(tids)) for sid, (title, tids) in layout.items()]
        task_ids = [tid for _, tids in layout.values() for tid in tids] + list(extra_tasks)
        return new_workspace(tasks=_tasks(*task_ids), stacks=stacks)

    return build
