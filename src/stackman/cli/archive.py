"""Handlers for 'stackman archive' commands."""

from stackman.cli._common import find_archived_or_die, format_when, output_json, output_result, run_session
from stackman.model.archive import delete_archived_task, restore_archived_task
from stackman.model.reorder import find_task_stack


def archive_list(args) -> int:
    """List archived tasks, most recently archived first."""

    def action(ws) -> int:
        archived = sorted(ws.archived_tasks, key=lambda a: a.archived_at, reverse=True)
        if args.json:
            output_json([a.to_dict() for a in archived])
        else:
            for a in archived:
                print(f"{a.id}  {a.title:<24} archived {format_when(a.archived_at)}")
        return 0

    return run_session(args, action)


def archive_restore(args) -> int:
    """Restore an archived task to its stack."""

    def action(ws) -> int:
        archived = find_archived_or_die(ws, args.id, args.json)
        restore_archived_task(ws, archived.id)
        stack = find_task_stack(ws.stacks, archived.id)
        if stack is None:
            text = f"Restored task {archived.id} (no stack to hold it)"
        else:
            text = f"Restored task {archived.id} to {stack.title}"
        output_result(
            {"id": archived.id, "stack": stack.id if stack else None},
            text,
            args.json,
        )
        return 0

    return run_session(args, action)


def archive_delete(args) -> int:
    """Permanently delete an archived task."""

    def action(ws) -> int:
        archived = find_archived_or_die(ws, args.id, args.json)
        delete_archived_task(ws, archived.id)
        output_result({"id": archived.id}, f"Deleted archived task {archived.id}", args.json)
        return 0

    return run_session(args, action)
