"""Tests for the task store."""

import logging
import threading
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from questlog.adapters.memory_blob import MemoryBlobStore
from questlog.core.persona import DEFAULT_PERSONA
from questlog.core.tasks import Quadrant, SortMode, TaskItem, decode_tasks, encode_tasks
from questlog.core.views import active_list
from questlog.store import TaskStore


class FakeClock:
    """Clock that moves one minute forward on every reading."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 1, 15, 9, 0))


@pytest.fixture
def backing():
    return {}


@pytest.fixture
def store(backing, clock):
    s = TaskStore(MemoryBlobStore(backing), clock=clock, seed_demo_data=False)
    yield s
    s.close()


def persisted(backing) -> list[TaskItem]:
    return decode_tasks(backing["TodoItems"])


class TestLoad:
    def test_seeds_empty_store(self, backing, clock):
        with TaskStore(MemoryBlobStore(backing), clock=clock) as store:
            tasks = store.tasks
            store.flush()
            assert len(tasks) == 12
            for quadrant in Quadrant:
                assert sum(1 for t in tasks if t.quadrant is quadrant) == 3
            assert persisted(backing) == list(tasks)

    def test_loads_existing_without_seeding(self, backing, clock):
        existing = [TaskItem.create("Only quest", now=datetime(2025, 1, 1))]
        backing["TodoItems"] = encode_tasks(existing)
        with TaskStore(MemoryBlobStore(backing), clock=clock) as store:
            assert list(store.tasks) == existing

    def test_corrupt_data_starts_empty(self, backing, clock, caplog):
        backing["TodoItems"] = b"{garbage"
        with caplog.at_level(logging.WARNING, logger="questlog.store"):
            with TaskStore(MemoryBlobStore(backing), clock=clock, seed_demo_data=False) as store:
                assert store.tasks == ()
        assert "Discarding unreadable task data" in caplog.text

    def test_corrupt_data_gets_seeded(self, backing, clock):
        backing["TodoItems"] = b'[{"id": 1}]'
        with TaskStore(MemoryBlobStore(backing), clock=clock) as store:
            assert len(store.tasks) == 12

    def test_offset_timestamps_mix_with_new_tasks(self, backing, clock):
        backing["TodoItems"] = (
            b'[{"id": "A", "title": "Imported", "createdAt": "2025-01-01T09:00:00+00:00"}]'
        )
        with TaskStore(MemoryBlobStore(backing), clock=clock, seed_demo_data=False) as store:
            store.add("New")
            titles = [t.title for t in active_list(store.tasks, SortMode.CREATED_TIME)]
        assert titles == ["New", "Imported"]

    def test_read_error_starts_empty(self, clock):
        blob_store = MagicMock()
        blob_store.load.side_effect = OSError("disk gone")
        with TaskStore(blob_store, clock=clock, seed_demo_data=False) as store:
            assert store.tasks == ()


class TestMutations:
    def test_add(self, store, clock):
        deadline = datetime(2025, 1, 20)
        task = store.add("Slay dragon", deadline, is_urgent=True, is_important=True)

        assert store.tasks == (task,)
        assert task.is_completed is False
        assert task.completed_at is None
        assert task.created_at == clock.current
        assert task.deadline == deadline
        assert task.quadrant is Quadrant.DO_NOW

    def test_add_accepts_empty_title(self, store):
        task = store.add("")
        assert store.get(task.id) == task

    def test_update_preserves_identity(self, store):
        task = store.add("Old", datetime(2025, 1, 20))
        updated = store.update(task.id, "New", datetime(2025, 2, 1), True, False)

        assert updated.id == task.id
        assert updated.created_at == task.created_at
        assert updated.title == "New"
        assert updated.deadline == datetime(2025, 2, 1)
        assert updated.is_urgent is True
        assert updated.is_important is False
        assert store.get(task.id) == updated

    def test_update_keeps_completion(self, store):
        task = store.add("Quest")
        done = store.toggle_completion(task.id)
        updated = store.update(task.id, "Renamed", task.deadline, False, False)
        assert updated.is_completed is True
        assert updated.completed_at == done.completed_at

    def test_update_unknown_id_is_noop(self, store):
        store.add("Quest")
        before = store.tasks
        assert store.update("missing", "x", datetime(2025, 1, 1), True, True) is None
        assert store.tasks == before

    def test_delete(self, store):
        keep = store.add("Keep")
        drop = store.add("Drop")
        assert store.delete(drop.id) is True
        assert store.tasks == (keep,)

    def test_delete_unknown_id_is_noop(self, store):
        store.add("Quest")
        before = store.tasks
        assert store.delete("missing") is False
        assert store.tasks == before

    def test_toggle_round_trip_moves_completed_at(self, store):
        task = store.add("Quest")
        first = store.toggle_completion(task.id)
        undone = store.toggle_completion(task.id)
        second = store.toggle_completion(task.id)

        assert first.is_completed is True
        assert undone.is_completed is False
        assert undone.completed_at is None
        assert second.is_completed is True
        assert second.completed_at != first.completed_at
        assert second.completed_at > first.completed_at

    def test_toggle_unknown_id_is_noop(self, store):
        assert store.toggle_completion("missing") is None
        assert store.tasks == ()

    def test_reset_all(self, store):
        task = store.add("Quest")
        store.toggle_completion(task.id)
        store.reset_all()
        assert store.tasks == ()
        assert store.personality() == DEFAULT_PERSONA

    def test_insertion_order_kept(self, store):
        titles = ["one", "two", "three"]
        for title in titles:
            store.add(title)
        assert [t.title for t in store.tasks] == titles


class TestPersonality:
    def test_default_when_nothing_done(self, store):
        store.add("Quest", is_urgent=True)
        assert store.personality() == DEFAULT_PERSONA

    def test_uses_completed_tasks(self, store):
        for _ in range(2):
            store.toggle_completion(store.add("Later").id)
        store.toggle_completion(store.add("Delegate", is_urgent=True).id)
        assert store.personality().title_key == "TITLE_POTATO_MODE"


class TestPersistence:
    def test_every_mutation_persisted(self, store, backing):
        task = store.add("Quest")
        store.flush()
        assert persisted(backing) == [task]

        store.toggle_completion(task.id)
        store.flush()
        assert persisted(backing)[0].is_completed is True

        store.delete(task.id)
        store.flush()
        assert persisted(backing) == []

    def test_last_submission_wins(self, store, backing):
        for i in range(50):
            store.add(f"Quest {i}")
        store.flush()
        assert persisted(backing) == list(store.tasks)

    def test_reload_round_trip(self, store, backing, clock):
        store.add("First", datetime(2025, 1, 20), is_important=True)
        store.toggle_completion(store.add("Second").id)
        store.flush()

        with TaskStore(MemoryBlobStore(backing), clock=clock) as reloaded:
            assert reloaded.tasks == store.tasks

    def test_write_failure_is_logged_not_raised(self, clock, caplog):
        blob_store = MagicMock()
        blob_store.load.return_value = None
        blob_store.save.side_effect = OSError("read-only")
        with caplog.at_level(logging.ERROR, logger="questlog.store"):
            with TaskStore(blob_store, clock=clock, seed_demo_data=False) as store:
                store.add("Quest")
                store.flush()
                assert len(store.tasks) == 1
        assert "Failed to persist 1 tasks" in caplog.text

    def test_mutation_after_close_is_saved(self, store, backing):
        store.add("early")
        store.close()

        seen = []
        store.subscribe(seen.append)
        late = store.add("late")

        assert [t.title for t in store.tasks] == ["early", "late"]
        assert [t.title for t in persisted(backing)] == ["early", "late"]
        assert seen == [store.tasks]

        store.delete(late.id)
        store.flush()
        assert [t.title for t in persisted(backing)] == ["early"]

    def test_close_twice(self, store, backing):
        store.add("Quest")
        store.close()
        store.close()
        assert len(persisted(backing)) == 1

    def test_concurrent_adds_not_lost(self, store, backing):
        def worker(n):
            for i in range(25):
                store.add(f"{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        store.flush()

        assert len(store.tasks) == 200
        assert len({t.id for t in store.tasks}) == 200
        assert persisted(backing) == list(store.tasks)


class TestSubscribe:
    def test_listener_gets_snapshots(self, store):
        seen = []
        store.subscribe(seen.append)
        task = store.add("Quest")
        store.toggle_completion(task.id)
        store.reset_all()

        assert len(seen) == 3
        assert seen[0] == (task,)
        assert seen[1][0].is_completed is True
        assert seen[2] == ()

    def test_no_notification_for_noop(self, store):
        seen = []
        store.subscribe(seen.append)
        store.delete("missing")
        store.update("missing", "x", datetime(2025, 1, 1), False, False)
        store.toggle_completion("missing")
        assert seen == []

    def test_unsubscribe(self, store):
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        store.add("Quest")
        assert seen == []
