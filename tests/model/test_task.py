"""Tests for task mutation operations."""

from stackman.model.records import ActionType
from stackman.model.stack import find_stack
from stackman.model.task import add_task, delete_task, find_task, toggle_task_status, update_task


def test_add_task_prepends(ws):
    task = add_task(ws, "s1", "Ship release")
    assert find_stack(ws, "s1").task_ids[0] == task.id
    assert find_stack(ws, "s1").task_ids[1:] == ("t1", "t2", "t3")


def test_add_task_records_one_history_item(ws):
    add_task(ws, "s1", "Ship release")
    assert len(ws.history) == 1
    item = ws.history[0]
    assert item.action_type == ActionType.ADD_TASK
    assert item.details == 'Added "Ship release" to A'


def test_add_task_fields(ws):
    task = add_task(ws, "s2", "Ship", "notes", due_date=123)
    assert find_task(ws, task.id) == task
    assert task.description == "notes"
    assert task.due_date == 123
    assert task.is_finished is False
    assert task.created_at > 0


def test_add_task_missing_stack_is_noop(ws):
    before = (ws.tasks, ws.stacks)
    assert add_task(ws, "nope", "Ship") is None
    assert (ws.tasks, ws.stacks) == before
    assert ws.history == ()


def test_update_task(ws):
    item = update_task(ws, "t1", "Renamed", "new body", due_date=50)
    task = find_task(ws, "t1")
    assert (task.title, task.description, task.due_date) == ("Renamed", "new body", 50)
    assert item.action_type == ActionType.UPDATE_TASK
    assert item.details == 'Updated details for "Task t1"'


def test_update_task_unchanged_records_nothing(ws):
    task = find_task(ws, "t1")
    assert update_task(ws, "t1", task.title, task.description, task.due_date) is None
    assert ws.history == ()


def test_update_task_due_date_only(ws):
    task = find_task(ws, "t1")
    assert update_task(ws, "t1", task.title, task.description, 10) is not None
    assert find_task(ws, "t1").due_date == 10


def test_update_task_keeps_position(ws):
    update_task(ws, "t2", "X", "")
    assert find_stack(ws, "s1").task_ids == ("t1", "t2", "t3")


def test_update_missing_task_is_noop(ws):
    before = ws.tasks
    assert update_task(ws, "nope", "X", "") is None
    assert ws.tasks == before
    assert ws.history == ()


def test_toggle_task_status(ws):
    item = toggle_task_status(ws, "t1")
    assert find_task(ws, "t1").is_finished is True
    assert item.action_type == ActionType.UPDATE_STATUS
    assert item.details == 'Marked "Task t1" as complete'


def test_toggle_back_to_incomplete(ws):
    toggle_task_status(ws, "t1")
    item = toggle_task_status(ws, "t1")
    assert find_task(ws, "t1").is_finished is False
    assert item.details == 'Marked "Task t1" as incomplete'
    assert len(ws.history) == 2


def test_toggle_missing_task_is_noop(ws):
    assert toggle_task_status(ws, "nope") is None
    assert ws.history == ()


def test_delete_task(ws):
    item = delete_task(ws, "t2")
    assert find_task(ws, "t2") is None
    assert find_stack(ws, "s1").task_ids == ("t1", "t3")
    assert item.action_type == ActionType.DELETE_TASK
    assert item.details == 'Deleted task "Task t2" from "A"'


def test_delete_orphaned_task(ws):
    ws.stacks = tuple(s for s in ws.stacks if s.id != "s3")
    item = delete_task(ws, "t5")
    assert find_task(ws, "t5") is None
    assert item.details == 'Deleted task "Task t5" from "stack"'


def test_delete_missing_task_is_noop(ws):
    before = (ws.tasks, ws.stacks)
    assert delete_task(ws, "nope") is None
    assert (ws.tasks, ws.stacks) == before
    assert ws.history == ()
