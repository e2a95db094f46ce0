"""CLI argument parser and dispatch for stackman."""

import argparse

from stackman.cli.archive import archive_delete, archive_list, archive_restore
from stackman.cli.history import history_delete, history_list
from stackman.cli.prefs import prefs_set, prefs_show, wipe
from stackman.cli.stack import stack_add, stack_delete, stack_list, stack_move, stack_rename
from stackman.cli.task import task_add, task_archive, task_delete, task_edit, task_list, task_move, task_toggle


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--home", default=None, help="Data directory (default: $STACKMAN_HOME or ~/.local/share/stackman)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    parser = argparse.ArgumentParser(
        prog="stackman",
        description="Stacks of tasks, kept locally",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- stack ---
    stack_p = nouns.add_parser("stack", help="Stack operations", parents=[common])
    stack_verbs = stack_p.add_subparsers(dest="verb")

    stack_list_p = stack_verbs.add_parser("list", help="List stacks", parents=[common])
    stack_list_p.set_defaults(func=stack_list)

    stack_add_p = stack_verbs.add_parser("add", help="Create a stack", parents=[common])
    stack_add_p.add_argument("title", help="Stack title")
    stack_add_p.set_defaults(func=stack_add)

    stack_rename_p = stack_verbs.add_parser("rename", help="Rename a stack", parents=[common])
    stack_rename_p.add_argument("id", help="Stack ID")
    stack_rename_p.add_argument("title", help="New title")
    stack_rename_p.set_defaults(func=stack_rename)

    stack_delete_p = stack_verbs.add_parser("delete", help="Delete a stack", parents=[common])
    stack_delete_p.add_argument("id", help="Stack ID")
    stack_delete_p.set_defaults(func=stack_delete)

    stack_move_p = stack_verbs.add_parser("move", help="Move a stack onto another's position", parents=[common])
    stack_move_p.add_argument("id", help="Stack ID")
    stack_move_p.add_argument("--over", required=True, help="Target stack ID")
    stack_move_p.set_defaults(func=stack_move)

    # stack with no verb = list
    stack_p.set_defaults(func=stack_list)

    # --- task ---
    task_p = nouns.add_parser("task", help="Task operations", parents=[common])
    task_verbs = task_p.add_subparsers(dest="verb")

    task_list_p = task_verbs.add_parser("list", help="List tasks", parents=[common])
    task_list_p.add_argument("--stack", dest="stack", help="Only this stack")
    task_list_p.set_defaults(func=task_list)

    task_add_p = task_verbs.add_parser("add", help="Create a task", parents=[common])
    task_add_p.add_argument("stack", help="Stack ID")
    task_add_p.add_argument("title", help="Task title")
    task_add_p.add_argument("--description", default="", help="Task description")
    task_add_p.add_argument("--due", help="Due date (ISO format)")
    task_add_p.set_defaults(func=task_add)

    task_edit_p = task_verbs.add_parser("edit", help="Edit a task", parents=[common])
    task_edit_p.add_argument("id", help="Task ID")
    task_edit_p.add_argument("--title", help="New title")
    task_edit_p.add_argument("--description", help="New description")
    due_group = task_edit_p.add_mutually_exclusive_group()
    due_group.add_argument("--due", help="New due date (ISO format)")
    due_group.add_argument("--no-due", action="store_true", help="Clear the due date")
    task_edit_p.set_defaults(func=task_edit)

    task_toggle_p = task_verbs.add_parser("toggle", help="Toggle complete", parents=[common])
    task_toggle_p.add_argument("id", help="Task ID")
    task_toggle_p.set_defaults(func=task_toggle)

    task_delete_p = task_verbs.add_parser("delete", help="Delete a task", parents=[common])
    task_delete_p.add_argument("id", help="Task ID")
    task_delete_p.set_defaults(func=task_delete)

    task_archive_p = task_verbs.add_parser("archive", help="Archive a task", parents=[common])
    task_archive_p.add_argument("id", help="Task ID")
    task_archive_p.set_defaults(func=task_archive)

    task_move_p = task_verbs.add_parser("move", help="Move a task", parents=[common])
    task_move_p.add_argument("id", help="Task ID")
    target_group = task_move_p.add_mutually_exclusive_group(required=True)
    target_group.add_argument("--over-task", dest="over_task", help="Take this task's position")
    target_group.add_argument("--over-stack", dest="over_stack", help="Append to this stack")
    task_move_p.set_defaults(func=task_move)

    # task with no verb = list
    task_p.set_defaults(func=task_list, stack=None)

    # --- archive ---
    archive_p = nouns.add_parser("archive", help="Archived tasks", parents=[common])
    archive_verbs = archive_p.add_subparsers(dest="verb")

    archive_list_p = archive_verbs.add_parser("list", help="List archived tasks", parents=[common])
    archive_list_p.set_defaults(func=archive_list)

    archive_restore_p = archive_verbs.add_parser("restore", help="Restore an archived task", parents=[common])
    archive_restore_p.add_argument("id", help="Task ID")
    archive_restore_p.set_defaults(func=archive_restore)

    archive_delete_p = archive_verbs.add_parser("delete", help="Delete an archived task", parents=[common])
    archive_delete_p.add_argument("id", help="Task ID")
    archive_delete_p.set_defaults(func=archive_delete)

    archive_p.set_defaults(func=archive_list)

    # --- history ---
    history_p = nouns.add_parser("history", help="Activity history", parents=[common])
    history_verbs = history_p.add_subparsers(dest="verb")

    history_list_p = history_verbs.add_parser("list", help="Show history", parents=[common])
    history_list_p.add_argument("--since", help="Only entries from this date (ISO format)")
    history_list_p.add_argument("--by-day", dest="by_day", action="store_true", help="Count entries per day")
    history_list_p.set_defaults(func=history_list)

    history_delete_p = history_verbs.add_parser("delete", help="Delete a history entry", parents=[common])
    history_delete_p.add_argument("id", help="History item ID")
    history_delete_p.set_defaults(func=history_delete)

    history_p.set_defaults(func=history_list, since=None, by_day=False)

    # --- prefs ---
    prefs_p = nouns.add_parser("prefs", help="Display preferences", parents=[common])
    prefs_verbs = prefs_p.add_subparsers(dest="verb")

    prefs_show_p = prefs_verbs.add_parser("show", help="Show preferences", parents=[common])
    prefs_show_p.set_defaults(func=prefs_show)

    prefs_set_p = prefs_verbs.add_parser("set", help="Set a preference", parents=[common])
    prefs_set_p.add_argument("key", help="Preference name")
    prefs_set_p.add_argument("value", help="New value")
    prefs_set_p.set_defaults(func=prefs_set)

    prefs_p.set_defaults(func=prefs_show)

    # --- wipe ---
    wipe_p = nouns.add_parser("wipe", help="Delete all data and preferences", parents=[common])
    wipe_p.add_argument("--yes", action="store_true", help="Confirm deletion")
    wipe_p.set_defaults(func=wipe)

    return parser
