"""Handlers for 'stackman history' commands."""

from stackman.cli._common import (
    error,
    history_line,
    open_store,
    output_json,
    output_result,
    parse_when,
    run_session,
)
from stackman.model.history import activity_by_day, delete_history_item
from stackman.model.records import HistoryItem


def history_list(args) -> int:
    """Show history oldest first, or per-day activity counts.

    Reads straight from the store's timestamp index; listing doesn't
    need a live workspace.
    """
    since = parse_when(args.since, args.json) if args.since else 0
    items = [HistoryItem.from_dict(row) for row in open_store(args).history_since(since)]

    if args.by_day:
        counts = activity_by_day(items)
        if args.json:
            output_json(counts)
        else:
            for day, count in counts.items():
                print(f"{day}  {count}")
        return 0

    if args.json:
        output_json([item.to_dict() for item in items])
    else:
        for item in items:
            print(f"{item.id}  {history_line(item)}")
    return 0


def history_delete(args) -> int:
    """Delete one history entry."""

    def action(ws) -> int:
        if not any(item.id == args.id for item in ws.history):
            error(f"History item '{args.id}' not found.", args.json)
        delete_history_item(ws, args.id)
        output_result({"id": args.id}, f"Deleted history item {args.id}", args.json)
        return 0

    return run_session(args, action)
