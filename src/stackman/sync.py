"""Background persistence: mirror a workspace into the store.

Startup runs load_workspace() once. After that the store only follows
the in-memory workspace: each collection has its own channel that
watches one workspace key and replaces the stored collection whenever
the value changes. A channel writes in the order changes were made and
never lets a later write overtake an earlier one; different channels are
independent of each other. All store I/O runs via asyncio.to_thread so
mutations never wait on disk.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable

from stackman.constants import BACKGROUND_IMAGE, COLLECTIONS
from stackman.model.node import Node
from stackman.model.workspace import seed_workspace, workspace_from_data, workspace_to_data
from stackman.store import Store

logger = logging.getLogger(__name__)


async def load_workspace(store: Store) -> Node:
    """Load the workspace, seeding the default board on first run.

    A store that can't be read, or holds rows that don't decode into
    records, is logged and treated as empty, so the session starts from
    the seed instead of failing.
    """
    try:
        data = await asyncio.to_thread(store.load_all)
        if data.get("tasks") or data.get("stacks"):
            return workspace_from_data(data)
    except asyncio.CancelledError:
        raise
    except Exception:
        logger.exception("loading workspace from %s failed", store.db_path)

    logger.info("empty store, seeding default workspace")
    ws = seed_workspace()
    seed = workspace_to_data(ws)
    try:
        await asyncio.to_thread(store.replace, "stacks", seed["stacks"])
        await asyncio.to_thread(store.replace, "tasks", seed["tasks"])
    except asyncio.CancelledError:
        raise
    except Exception:
        logger.exception("saving seed workspace failed")
    return ws


class Channel:
    """Serialized writer for one workspace key.

    Values pushed are written one at a time, in push order, by a single
    worker task. With skip_first the first pushed value is dropped.
    """

    def __init__(self, name: str, write: Callable[[Any], None], skip_first: bool = False):
        self.name = name
        self._write = write
        self._skip_first = skip_first
        self._queue: asyncio.Queue = asyncio.Queue()
        self._worker: asyncio.Task | None = None

    def start(self) -> None:
        """Start the worker. Must be called with a running event loop."""
        if self._worker is None:
            self._worker = asyncio.create_task(self._run(), name=f"sync-{self.name}")

    def push(self, value: Any) -> None:
        if self._skip_first:
            self._skip_first = False
            logger.debug("%s: skipping first settle", self.name)
            return
        self._queue.put_nowait(value)

    async def _run(self) -> None:
        while True:
            value = await self._queue.get()
            try:
                await asyncio.to_thread(self._write, value)
            except Exception:
                logger.exception("saving %s failed", self.name)
            finally:
                self._queue.task_done()

    async def drain(self) -> None:
        """Wait until every pushed value has been written (or failed)."""
        await self._queue.join()

    async def stop(self) -> None:
        if self._worker is None:
            return
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None


class Persister:
    """Watches a workspace and keeps the store in step with it."""

    def __init__(self, store: Store):
        self.store = store
        self.channels: dict[str, Channel] = {
            name: Channel(name, self._collection_writer(name), skip_first=name == "stacks") for name in COLLECTIONS
        }
        self.channels[BACKGROUND_IMAGE] = Channel(BACKGROUND_IMAGE, self._write_background)
        self._unwatch: list[Callable[[], None]] = []

    def _collection_writer(self, name: str) -> Callable[[Any], None]:
        def write(records) -> None:
            self.store.replace(name, [r.to_dict() for r in records or ()])

        return write

    def _write_background(self, value: bytes | str | None) -> None:
        if value is None:
            self.store.delete_asset(BACKGROUND_IMAGE)
        else:
            self.store.put_asset(BACKGROUND_IMAGE, value)

    def attach(self, ws: Node) -> None:
        """Start mirroring ws.

        Each collection channel immediately gets the current value as its
        first settle; the stacks channel skips that one, since the
        hydrated or seeded stacks are already stored.
        """
        for name, channel in self.channels.items():
            channel.start()
            self._unwatch.append(ws.watch(name, self._on_change))
        for name in COLLECTIONS:
            self.channels[name].push(getattr(ws, name) or ())

    def _on_change(self, node: Node, key: str, old: Any, new: Any) -> None:
        self.channels[key].push(new)

    async def drain(self) -> None:
        """Wait for every queued write on every channel."""
        await asyncio.gather(*(channel.drain() for channel in self.channels.values()))

    async def close(self) -> None:
        """Flush pending writes, stop watching and stop the workers."""
        await self.drain()
        for unwatch in self._unwatch:
            unwatch()
        self._unwatch.clear()
        for channel in self.channels.values():
            await channel.stop()


async def wipe_workspace(store: Store, preferences_path: Path | None = None) -> None:
    """Delete everything: the store file and the preferences file.

    The caller should restart afterwards so first-run seeding happens.
    """
    await asyncio.to_thread(store.wipe)
    if preferences_path is not None:
        preferences_path.unlink(missing_ok=True)
