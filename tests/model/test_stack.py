"""Tests for stack mutation operations."""

from stackman.model.records import ActionType, Stack
from stackman.model.stack import (
    add_stack,
    attach_task,
    delete_stack,
    detach_task,
    find_stack,
    orphaned_tasks,
    rename_stack,
)
from stackman.model.task import find_task


def test_add_stack_appends(ws):
    stack = add_stack(ws, "Later")
    assert ws.stacks[-1] == stack
    assert stack.task_ids == ()
    assert [s.title for s in ws.stacks] == ["A", "B", "C", "Later"]


def test_add_stack_records_history(ws):
    add_stack(ws, "Later")
    assert len(ws.history) == 1
    assert ws.history[0].action_type == ActionType.ADD_STACK
    assert ws.history[0].details == 'Created new stack "Later"'


def test_add_stack_ids_are_unique(ws):
    first = add_stack(ws, "X")
    second = add_stack(ws, "X")
    assert first.id != second.id


def test_rename_stack(ws):
    item = rename_stack(ws, "s1", "Today")
    assert find_stack(ws, "s1").title == "Today"
    assert item.action_type == ActionType.UPDATE_STACK
    assert item.details == 'Renamed stack "A" to "Today"'


def test_rename_stack_same_title_no_history(ws):
    assert rename_stack(ws, "s1", "A") is None
    assert ws.history == ()


def test_rename_missing_stack_is_noop(ws):
    before = ws.stacks
    assert rename_stack(ws, "nope", "X") is None
    assert ws.stacks == before
    assert ws.history == ()


def test_delete_stack(ws):
    item = delete_stack(ws, "s2")
    assert [s.id for s in ws.stacks] == ["s1", "s3"]
    assert item.action_type == ActionType.DELETE_STACK
    assert item.details == 'Deleted stack "B"'


def test_delete_stack_keeps_task_records(ws):
    delete_stack(ws, "s3")
    assert find_task(ws, "t5") is not None
    assert [t.id for t in orphaned_tasks(ws)] == ["t5"]


def test_delete_missing_stack_is_noop(ws):
    assert delete_stack(ws, "nope") is None
    assert len(ws.stacks) == 3
    assert ws.history == ()


def test_orphaned_tasks_empty_when_all_placed(ws):
    assert orphaned_tasks(ws) == []


def test_detach_task_removes_from_every_stack():
    stacks = (Stack("s1", "A", ("t1", "t2")), Stack("s2", "B", ("t1",)))
    result = detach_task(stacks, "t1")
    assert [s.task_ids for s in result] == [("t2",), ()]


def test_detach_unknown_task_keeps_stacks():
    stacks = (Stack("s1", "A", ("t1",)),)
    assert detach_task(stacks, "t9") == stacks


def test_attach_task_prepends():
    stacks = (Stack("s1", "A", ("t1",)),)
    assert attach_task(stacks, "s1", "t2", position=0)[0].task_ids == ("t2", "t1")


def test_attach_task_appends_by_default():
    stacks = (Stack("s1", "A", ("t1",)),)
    assert attach_task(stacks, "s1", "t2")[0].task_ids == ("t1", "t2")


def test_attach_task_clamps_position():
    stacks = (Stack("s1", "A", ("t1",)),)
    assert attach_task(stacks, "s1", "t2", position=10)[0].task_ids == ("t1", "t2")


def test_attach_task_moves_out_of_other_stacks():
    stacks = (Stack("s1", "A", ("t1", "t2")), Stack("s2", "B", ()))
    result = attach_task(stacks, "s2", "t1")
    assert [s.task_ids for s in result] == [("t2",), ("t1",)]


def test_attach_task_unknown_stack_is_noop():
    stacks = (Stack("s1", "A", ("t1",)),)
    assert attach_task(stacks, "nope", "t1") == stacks
