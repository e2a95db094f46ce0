"""Handlers for 'stackman stack' commands."""

from stackman.cli._common import find_stack_or_die, output_json, output_result, run_session
from stackman.model.drag import drag_end, drag_over, drag_start
from stackman.model.reorder import STACK, DragItem, DragOperation
from stackman.model.stack import add_stack, delete_stack, rename_stack


def stack_list(args) -> int:
    """List stacks in lane order."""

    def action(ws) -> int:
        items = [{"id": s.id, "title": s.title, "tasks": len(s.task_ids)} for s in ws.stacks]
        if args.json:
            output_json(items)
        else:
            for s in items:
                tasks = "task" if s["tasks"] == 1 else "tasks"
                print(f"{s['id']}  {s['title']:<16} {s['tasks']} {tasks}")
        return 0

    return run_session(args, action)


def stack_add(args) -> int:
    """Append a new stack."""

    def action(ws) -> int:
        stack = add_stack(ws, args.title)
        output_result(
            {"id": stack.id, "title": stack.title},
            f"Created stack {stack.id}: {stack.title}",
            args.json,
        )
        return 0

    return run_session(args, action)


def stack_rename(args) -> int:
    """Rename a stack."""

    def action(ws) -> int:
        stack = find_stack_or_die(ws, args.id, args.json)
        rename_stack(ws, stack.id, args.title)
        output_result(
            {"id": stack.id, "title": args.title},
            f"Renamed stack {stack.id} to {args.title}",
            args.json,
        )
        return 0

    return run_session(args, action)


def stack_delete(args) -> int:
    """Delete a stack. Its tasks are kept and become orphaned."""

    def action(ws) -> int:
        stack = find_stack_or_die(ws, args.id, args.json)
        delete_stack(ws, stack.id)
        orphaned = list(stack.task_ids)
        text = f"Deleted stack {stack.id}"
        if orphaned:
            text += f" ({len(orphaned)} orphaned task{'s' if len(orphaned) != 1 else ''})"
        output_result({"id": stack.id, "orphaned": orphaned}, text, args.json)
        return 0

    return run_session(args, action)


def stack_move(args) -> int:
    """Drag a stack onto another stack's position."""

    def action(ws) -> int:
        stack = find_stack_or_die(ws, args.id, args.json)
        find_stack_or_die(ws, args.over, args.json)
        operation = DragOperation(DragItem(STACK, stack.id), DragItem(STACK, args.over))
        drag_start(ws, operation)
        drag_over(ws, operation)
        item = drag_end(ws, operation)
        position = [s.id for s in ws.stacks].index(stack.id)
        output_result(
            {"id": stack.id, "position": position + 1, "moved": item is not None},
            f"Moved stack {stack.id} to position {position + 1}" if item else "Stack not moved",
            args.json,
        )
        return 0

    return run_session(args, action)
