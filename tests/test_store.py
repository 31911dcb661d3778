from datetime import datetime

import pytest

from adhd_os import seed
from adhd_os.adapters.json_adapter import JsonFileRepository
from adhd_os.repository import InMemoryRepository
from adhd_os.schema import AnxietyLog, TimeBlock
from adhd_os.store import AppState, Store, add_time_block, set_actual_minutes, toggle_complete


def test_toggle_complete_is_pure():
    state = AppState(tasks=tuple(seed.seed_tasks()))
    updated = toggle_complete(state, "1")

    assert updated.tasks[0].completed
    assert not state.tasks[0].completed
    assert updated.tasks[1:] == state.tasks[1:]


def test_set_actual_minutes():
    state = AppState(tasks=tuple(seed.seed_tasks()))
    updated = set_actual_minutes(state, "3", 120)
    assert updated.tasks[2].actual_minutes == 120

    with pytest.raises(ValueError):
        set_actual_minutes(state, "3", -5)
    with pytest.raises(KeyError):
        set_actual_minutes(state, "missing", 5)


def test_add_time_block_keeps_insertion_order():
    block = TimeBlock("9", "Buffer", "15:00", "15:30", "2025-07-18", "buffer")
    state = add_time_block(AppState(time_blocks=tuple(seed.seed_time_blocks())), block)
    assert state.time_blocks[-1] == block
    assert len(state.time_blocks) == 4


def test_store_writes_through_to_repositories():
    tasks = InMemoryRepository(seed.seed_tasks())
    blocks = InMemoryRepository(seed.seed_time_blocks())
    logs = InMemoryRepository()
    reflections = InMemoryRepository()
    store = Store(tasks, blocks, logs, reflections)

    store.toggle_complete("4")
    store.set_actual_minutes("1", 50)
    log = AnxietyLog("7", "Noise", 6, "Quick Walk", "Better", False, datetime(2025, 7, 18, 12, 0))
    store.add_anxiety_log(log)

    assert tasks.list()[3].completed
    assert tasks.list()[0].actual_minutes == 50
    assert logs.list() == [log]
    assert store.state.anxiety_logs == (log,)


def test_replace_time_blocks_only_creates_new_blocks():
    store = Store.in_memory()
    new_block = TimeBlock("99", "Deep work", "14:00", "16:00", "2025-07-18", "focus")

    store.replace_time_blocks([*store.state.time_blocks, new_block])
    store.replace_time_blocks([*store.state.time_blocks])

    assert [block.id for block in store.state.time_blocks] == ["1", "2", "3", "99"]


def test_in_memory_repository_errors():
    repo = InMemoryRepository(seed.seed_time_blocks())
    with pytest.raises(ValueError):
        repo.create(seed.seed_time_blocks()[0])
    with pytest.raises(KeyError):
        repo.update(TimeBlock("missing", "x", "09:00", "10:00", "2025-07-18"))


def test_unseeded_store_is_empty():
    assert Store.in_memory(seeded=False).state == AppState()


def test_failed_task_write_leaves_state_unchanged(tmp_path):
    tasks = JsonFileRepository(tmp_path / "tasks.json", "tasks")
    tasks.initialize(seed.seed_tasks())
    store = Store(tasks, InMemoryRepository(), InMemoryRepository(), InMemoryRepository())
    before = store.state
    (tmp_path / "tasks.json").unlink()

    with pytest.raises(KeyError):
        store.toggle_complete("1")
    with pytest.raises(KeyError):
        store.set_actual_minutes("1", 50)

    assert store.state == before
