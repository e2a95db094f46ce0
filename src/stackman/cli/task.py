"""Handlers for 'stackman task' commands."""

from stackman.cli._common import (
    error,
    find_stack_or_die,
    find_task_or_die,
    format_when,
    output_json,
    output_result,
    parse_when,
    run_session,
    time_left,
)
from stackman.model.archive import archive_task
from stackman.model.drag import drag_end, drag_over, drag_start
from stackman.model.reorder import STACK, TASK, DragItem, DragOperation, find_task_stack
from stackman.model.stack import orphaned_tasks
from stackman.model.task import add_task, delete_task, find_task, toggle_task_status, update_task


def _task_dict(task, stack=None) -> dict:
    data = task.to_dict()
    if stack is not None:
        data["stack"] = {"id": stack.id, "title": stack.title}
    return data


def _task_line(task) -> str:
    mark = "x" if task.is_finished else " "
    due = ""
    if task.due_date is not None:
        due = f"  (due {format_when(task.due_date)}, {time_left(task.due_date)})"
    return f"  [{mark}] {task.id}  {task.title}{due}"


def task_list(args) -> int:
    """List tasks grouped by stack, then any orphaned tasks."""

    def action(ws) -> int:
        groups = []
        for stack in ws.stacks:
            if args.stack and stack.id != args.stack:
                continue
            tasks = [t for t in (find_task(ws, tid) for tid in stack.task_ids) if t is not None]
            groups.append((stack, tasks))
        orphans = [] if args.stack else orphaned_tasks(ws)

        if args.json:
            items = [_task_dict(t, stack) for stack, tasks in groups for t in tasks]
            items.extend(_task_dict(t) for t in orphans)
            output_json(items)
        else:
            for stack, tasks in groups:
                print(f"{stack.id}  {stack.title}")
                for task in tasks:
                    print(_task_line(task))
            if orphans:
                print("(no stack)")
                for task in orphans:
                    print(_task_line(task))
        return 0

    return run_session(args, action)


def task_add(args) -> int:
    """Create a task at the top of a stack."""

    def action(ws) -> int:
        stack = find_stack_or_die(ws, args.stack, args.json)
        due = parse_when(args.due, args.json) if args.due else None
        task = add_task(ws, stack.id, args.title, args.description, due)
        output_result(
            _task_dict(task, stack),
            f"Created task {task.id} in {stack.title}",
            args.json,
        )
        return 0

    return run_session(args, action)


def task_edit(args) -> int:
    """Change a task's title, description or due date."""

    def action(ws) -> int:
        task = find_task_or_die(ws, args.id, args.json)
        title = args.title if args.title is not None else task.title
        description = args.description if args.description is not None else task.description
        if args.no_due:
            due = None
        elif args.due:
            due = parse_when(args.due, args.json)
        else:
            due = task.due_date
        item = update_task(ws, task.id, title, description, due)
        output_result(
            {"id": task.id, "changed": item is not None},
            f"Updated task {task.id}" if item else f"Task {task.id} unchanged",
            args.json,
        )
        return 0

    return run_session(args, action)


def task_toggle(args) -> int:
    """Mark a task complete or incomplete."""

    def action(ws) -> int:
        task = find_task_or_die(ws, args.id, args.json)
        toggle_task_status(ws, task.id)
        finished = find_task(ws, task.id).is_finished
        output_result(
            {"id": task.id, "is_finished": finished},
            f"Task {task.id} marked {'complete' if finished else 'incomplete'}",
            args.json,
        )
        return 0

    return run_session(args, action)


def task_delete(args) -> int:
    """Delete a task permanently."""

    def action(ws) -> int:
        task = find_task_or_die(ws, args.id, args.json)
        delete_task(ws, task.id)
        output_result({"id": task.id}, f"Deleted task {task.id}", args.json)
        return 0

    return run_session(args, action)


def task_archive(args) -> int:
    """Move a task to the archive."""

    def action(ws) -> int:
        task = find_task_or_die(ws, args.id, args.json)
        archive_task(ws, task.id)
        output_result({"id": task.id}, f"Archived task {task.id}", args.json)
        return 0

    return run_session(args, action)


def task_move(args) -> int:
    """Drag a task onto another task or onto a stack."""

    def action(ws) -> int:
        task = find_task_or_die(ws, args.id, args.json)
        if find_task_stack(ws.stacks, task.id) is None:
            error(f"Task '{task.id}' is not in any stack.", args.json)
        if args.over_stack:
            find_stack_or_die(ws, args.over_stack, args.json)
            target = DragItem(STACK, args.over_stack)
        else:
            if find_task_stack(ws.stacks, args.over_task) is None:
                error(f"Task '{args.over_task}' is not in any stack.", args.json)
            target = DragItem(TASK, args.over_task)

        operation = DragOperation(DragItem(TASK, task.id), target)
        drag_start(ws, operation)
        drag_over(ws, operation)
        item = drag_end(ws, operation)

        stack = find_task_stack(ws.stacks, task.id)
        position = stack.task_ids.index(task.id)
        output_result(
            {"id": task.id, "stack": stack.id, "position": position + 1, "moved": item is not None},
            f"Moved task {task.id} to {stack.title} position {position + 1}" if item else "Task not moved",
            args.json,
        )
        return 0

    return run_session(args, action)
