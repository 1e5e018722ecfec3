"""Task store - single owner of the quest collection."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from typing import Callable

from .core.persona import Persona, personality
from .core.seed import sample_tasks
from .core.tasks import DecodeError, TaskItem, decode_tasks, encode_tasks
from .ports import TaskBlobStore

logger = logging.getLogger(__name__)

Listener = Callable[[tuple[TaskItem, ...]], None]


class TaskStore:
    """
    In-memory task collection with write-behind persistence.

    All mutations are serialized by one lock and return immediately. Each
    one hands an immutable snapshot to a single background writer, so
    snapshots reach the blob store in the order they were taken.
    Reads never touch the blob store.
    """

    def __init__(
        self,
        blob_store: TaskBlobStore,
        clock: Callable[[], datetime] = datetime.now,
        seed_demo_data: bool = True,
    ):
        self.blob_store = blob_store
        self._clock = clock
        self._lock = threading.Lock()
        self._listeners: list[Listener] = []
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="questlog-save")
        self._last_write: Future | None = None
        self._closed = False

        self._items: list[TaskItem] = self._load()
        if not self._items and seed_demo_data:
            logger.info("Task collection empty, seeding demonstration quests")
            self._items = sample_tasks(self._clock())
            self._schedule_save(tuple(self._items))

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # -- loading / persistence --

    def _load(self) -> list[TaskItem]:
        """Decode the stored collection, falling back to empty on any failure."""
        try:
            blob = self.blob_store.load()
        except OSError as e:
            logger.warning(f"Could not read task data, starting empty: {e}")
            return []
        if not blob:
            return []
        try:
            return decode_tasks(blob)
        except DecodeError as e:
            logger.warning(f"Discarding unreadable task data: {e}")
            return []

    def _schedule_save(self, snapshot: tuple[TaskItem, ...]) -> None:
        """Queue a write. Caller holds the lock."""
        if self._closed:
            # Writer is gone; every queued write has drained, so writing inline keeps order.
            logger.debug("Store closed, persisting %d tasks inline", len(snapshot))
            self._write(snapshot)
            return
        self._last_write = self._executor.submit(self._write, snapshot)

    def _write(self, snapshot: tuple[TaskItem, ...]) -> None:
        try:
            self.blob_store.save(encode_tasks(snapshot))
        except Exception:
            logger.exception("Failed to persist %d tasks", len(snapshot))

    def flush(self, timeout: float | None = None) -> None:
        """Block until every write submitted so far has finished."""
        with self._lock:
            pending = self._last_write
        if pending is not None:
            pending.result(timeout=timeout)

    def close(self) -> None:
        """
        Finish pending writes and stop the writer thread.

        Safe to call more than once. Mutations after close are saved on the
        calling thread.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=True)

    # -- change notification --

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with the new snapshot after every change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, items: list[TaskItem]) -> None:
        """Install a new collection. Caller holds the lock."""
        self._items = items
        self._schedule_save(tuple(items))

    def _notify(self, snapshot: tuple[TaskItem, ...]) -> None:
        for listener in list(self._listeners):
            listener(snapshot)

    # -- reads --

    @property
    def tasks(self) -> tuple[TaskItem, ...]:
        """Current collection, in insertion order."""
        with self._lock:
            return tuple(self._items)

    def get(self, task_id: str) -> TaskItem | None:
        with self._lock:
            return next((t for t in self._items if t.id == task_id), None)

    def _index_of(self, task_id: str) -> int | None:
        return next((i for i, t in enumerate(self._items) if t.id == task_id), None)

    # -- mutations --

    def add(
        self,
        title: str,
        deadline: datetime | None = None,
        is_urgent: bool = False,
        is_important: bool = False,
    ) -> TaskItem:
        """Append a new open task."""
        task = TaskItem.create(
            title,
            deadline=deadline,
            is_urgent=is_urgent,
            is_important=is_important,
            now=self._clock(),
        )
        with self._lock:
            self._commit(self._items + [task])
            snapshot = tuple(self._items)
        logger.debug(f"Added task {task.id}")
        self._notify(snapshot)
        return task

    def update(
        self,
        task_id: str,
        title: str,
        deadline: datetime,
        is_urgent: bool,
        is_important: bool,
    ) -> TaskItem | None:
        """Replace the editable fields of a task. Unknown ids are ignored."""
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            items = list(self._items)
            items[index] = items[index].edited(title, deadline, is_urgent, is_important)
            self._commit(items)
            updated = items[index]
            snapshot = tuple(items)
        self._notify(snapshot)
        return updated

    def delete(self, task_id: str) -> bool:
        """Remove a task. Returns False if no task had that id."""
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return False
            items = self._items[:index] + self._items[index + 1 :]
            self._commit(items)
            snapshot = tuple(items)
        self._notify(snapshot)
        return True

    def toggle_completion(self, task_id: str) -> TaskItem | None:
        """Flip a task between open and completed. Unknown ids are ignored."""
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            items = list(self._items)
            items[index] = items[index].toggled(self._clock())
            self._commit(items)
            toggled = items[index]
            snapshot = tuple(items)
        self._notify(snapshot)
        return toggled

    def reset_all(self) -> None:
        """Drop every task. Irreversible."""
        with self._lock:
            self._commit([])
        logger.info("All tasks deleted")
        self._notify(())

    # -- derived --

    def personality(self) -> Persona:
        return personality(self.tasks)
