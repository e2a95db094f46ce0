"""Handlers for 'stackman prefs' and 'stackman wipe'."""

import asyncio
from dataclasses import asdict

from stackman import config
from stackman.cli._common import error, open_store, output_json, output_result
from stackman.sync import wipe_workspace


def prefs_show(args) -> int:
    """Print display preferences."""
    prefs = config.load_preferences(config.preferences_path(args.home))
    if args.json:
        output_json(asdict(prefs))
    else:
        for name, value in asdict(prefs).items():
            print(f"{name:<13} {value}")
    return 0


def prefs_set(args) -> int:
    """Set one display preference."""
    path = config.preferences_path(args.home)
    prefs = config.load_preferences(path)
    try:
        config.set_preference(prefs, args.key, args.value)
    except KeyError:
        error(f"Unknown preference '{args.key}'. Known: {', '.join(config.preference_names())}", args.json)
    except ValueError as e:
        error(str(e), args.json)
    config.save_preferences(prefs, path)
    value = getattr(prefs, args.key)
    output_result({args.key: value}, f"{args.key} = {value}", args.json)
    return 0


def wipe(args) -> int:
    """Delete all stored data and preferences."""
    if not args.yes:
        error("Refusing to delete everything without --yes.", args.json)
    store = open_store(args)
    asyncio.run(wipe_workspace(store, config.preferences_path(args.home)))
    output_result(
        {"wiped": str(store.db_path)},
        f"Deleted {store.db_path}; the default workspace is recreated on next use",
        args.json,
    )
    return 0
