"""Directory Watcher — block until the first filesystem change.

One watchdog observer is registered per directory. Each listener can deliver
a single event; listeners race inside an asyncio task group to fill a
single-slot queue, and whichever lands first ends the wait. All remaining
listeners are cancelled and every observer is stopped, no draining.

There is no debounce: a burst of changes (e.g. find & replace over several
files) shows up as separate first events if the caller loops.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from pageslug.config import get_config
from pageslug.errors import ArgumentError, FileAccessError

logger = logging.getLogger(__name__)


class WatchTarget(BaseModel):
    """A directory to watch."""
    path: str
    recursive: bool = False

    @classmethod
    def parse(cls, arg: str) -> "WatchTarget":
        """Parse a command line argument; a "/..." suffix means recursive."""
        suffix = get_config().watch.recursive_suffix
        if arg.endswith(suffix):
            return cls(path=arg[: -len(suffix)] or os.sep, recursive=True)
        return cls(path=arg)


class WatchEvent(BaseModel):
    """The first change observed under a watched directory."""
    event_type: str
    src_path: str
    dest_path: str = ""
    is_directory: bool = False
    watched: str = Field(..., description="Watched directory that reported the event")

    def __str__(self) -> str:
        moved = f" -> {self.dest_path}" if self.dest_path else ""
        return f"{self.event_type} {self.src_path}{moved} (in {self.watched})"


def _fs_str(value) -> str:
    if isinstance(value, bytes):
        return os.fsdecode(value)
    return value or ""


class _FirstEventHandler(FileSystemEventHandler):
    """Hands the first change event over to the event loop."""

    def __init__(self, listener: "_Listener"):
        self.listener = listener

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type in self.listener.ignored_event_types:
            return
        self.listener.loop.call_soon_threadsafe(self.listener.deliver, event)


class _Listener:
    """One observer watching one directory, delivering at most one event."""

    def __init__(self, target: WatchTarget, loop: asyncio.AbstractEventLoop):
        config = get_config().watch
        self.target = target
        self.loop = loop
        self.ignored_event_types = frozenset(config.ignored_event_types)
        self.join_timeout = config.join_timeout_seconds
        self.future: asyncio.Future[WatchEvent] = loop.create_future()
        self.observer = Observer()
        self.started = False

    def start(self) -> None:
        path = self.target.path
        if not os.path.isdir(path):
            raise FileAccessError(path, "Watch directory does not exist")
        try:
            self.observer.schedule(_FirstEventHandler(self), path, recursive=self.target.recursive)
            self.observer.start()
        except OSError as e:
            raise FileAccessError(path, f"Cannot watch directory ({e.strerror or e})") from e
        self.started = True
        logger.debug("Watching %r (recursive=%s)", path, self.target.recursive)

    def deliver(self, event: FileSystemEvent) -> None:
        if self.future.done():
            return
        self.future.set_result(WatchEvent(
            event_type=event.event_type,
            src_path=_fs_str(event.src_path),
            dest_path=_fs_str(getattr(event, "dest_path", "")),
            is_directory=event.is_directory,
            watched=self.target.path,
        ))

    async def report(self, completed: asyncio.Queue[WatchEvent]) -> None:
        event = await self.future
        if not completed.full():
            completed.put_nowait(event)

    def stop(self) -> None:
        if self.started:
            self.observer.stop()

    def join(self) -> None:
        if self.started:
            self.observer.join(self.join_timeout)
            self.started = False


def _join_all(listeners: Iterable[_Listener]) -> None:
    for listener in listeners:
        listener.join()


class DirectoryWatcher:
    """Waits for the first filesystem event under any of its targets."""

    def __init__(self, targets: Sequence[WatchTarget]):
        if not targets:
            raise ArgumentError("One or more watch directories must be specified")
        self.targets = list(targets)

    @classmethod
    def from_args(cls, args: Iterable[str]) -> "DirectoryWatcher":
        return cls([WatchTarget.parse(arg) for arg in args])

    async def wait_for_event(self) -> WatchEvent:
        """Block until any watched directory reports a change."""
        loop = asyncio.get_running_loop()
        listeners = [_Listener(target, loop) for target in self.targets]
        try:
            # register everything before waiting so a bad directory fails fast
            for listener in listeners:
                listener.start()

            completed: asyncio.Queue[WatchEvent] = asyncio.Queue(maxsize=1)
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(listener.report(completed)) for listener in listeners]
                event = await completed.get()
                for task in tasks:
                    task.cancel()
        finally:
            # signal every observer first, then wait for their threads off the loop
            for listener in listeners:
                listener.stop()
            await asyncio.to_thread(_join_all, listeners)

        logger.info("Event: %s", event)
        return event


def watch_directories(args: Iterable[str]) -> WatchEvent:
    """Synchronous entry point: watch ``args`` until the first change."""
    watcher = DirectoryWatcher.from_args(args)
    return asyncio.run(watcher.wait_for_event())
