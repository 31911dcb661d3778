"""Application state owner and its pure update functions."""

from __future__ import annotations

from dataclasses import dataclass, replace

from adhd_os import seed
from adhd_os.repository import InMemoryRepository, Repository
from adhd_os.schema import AnxietyLog, DailyReflection, Task, TimeBlock


@dataclass(frozen=True)
class AppState:
    """Every collection the dashboard shows, in display order."""

    tasks: tuple[Task, ...] = ()
    time_blocks: tuple[TimeBlock, ...] = ()
    anxiety_logs: tuple[AnxietyLog, ...] = ()
    reflections: tuple[DailyReflection, ...] = ()


def _find_task(state: AppState, task_id: str) -> Task:
    for task in state.tasks:
        if task.id == task_id:
            return task
    raise KeyError(task_id)


def _replace_task(state: AppState, updated: Task) -> AppState:
    tasks = tuple(updated if task.id == updated.id else task for task in state.tasks)
    return replace(state, tasks=tasks)


def toggle_complete(state: AppState, task_id: str) -> AppState:
    task = _find_task(state, task_id)
    return _replace_task(state, replace(task, completed=not task.completed))


def set_actual_minutes(state: AppState, task_id: str, minutes: int) -> AppState:
    if minutes < 0:
        raise ValueError(f"actual minutes must not be negative, got {minutes}")
    task = _find_task(state, task_id)
    return _replace_task(state, replace(task, actual_minutes=minutes))


def add_time_block(state: AppState, block: TimeBlock) -> AppState:
    return replace(state, time_blocks=(*state.time_blocks, block))


def add_anxiety_log(state: AppState, log: AnxietyLog) -> AppState:
    return replace(state, anxiety_logs=(*state.anxiety_logs, log))


def add_reflection(state: AppState, reflection: DailyReflection) -> AppState:
    return replace(state, reflections=(*state.reflections, reflection))


class Store:
    """Holds the current ``AppState`` and writes every change through to repositories."""

    def __init__(
        self,
        tasks: Repository[Task],
        time_blocks: Repository[TimeBlock],
        anxiety_logs: Repository[AnxietyLog],
        reflections: Repository[DailyReflection],
    ) -> None:
        self._tasks = tasks
        self._time_blocks = time_blocks
        self._anxiety_logs = anxiety_logs
        self._reflections = reflections
        self.state = AppState(
            tasks=tuple(tasks.list()),
            time_blocks=tuple(time_blocks.list()),
            anxiety_logs=tuple(anxiety_logs.list()),
            reflections=tuple(reflections.list()),
        )

    @classmethod
    def in_memory(cls, seeded: bool = True) -> Store:
        if not seeded:
            return cls(InMemoryRepository(), InMemoryRepository(), InMemoryRepository(), InMemoryRepository())
        return cls(
            InMemoryRepository(seed.seed_tasks()),
            InMemoryRepository(seed.seed_time_blocks()),
            InMemoryRepository(seed.seed_anxiety_logs()),
            InMemoryRepository(seed.seed_reflections()),
        )

    def toggle_complete(self, task_id: str) -> Task:
        state = toggle_complete(self.state, task_id)
        updated = self._tasks.update(_find_task(state, task_id))
        self.state = state
        return updated

    def set_actual_minutes(self, task_id: str, minutes: int) -> Task:
        state = set_actual_minutes(self.state, task_id, minutes)
        updated = self._tasks.update(_find_task(state, task_id))
        self.state = state
        return updated

    def replace_time_blocks(self, blocks: list[TimeBlock]) -> None:
        """Adopt a planner-produced block list, persisting any new blocks."""

        known = {block.id for block in self.state.time_blocks}
        for block in blocks:
            if block.id not in known:
                self.add_time_block(block)

    def add_time_block(self, block: TimeBlock) -> TimeBlock:
        created = self._time_blocks.create(block)
        self.state = add_time_block(self.state, created)
        return created

    def add_anxiety_log(self, log: AnxietyLog) -> AnxietyLog:
        created = self._anxiety_logs.create(log)
        self.state = add_anxiety_log(self.state, created)
        return created

    def add_reflection(self, reflection: DailyReflection) -> DailyReflection:
        created = self._reflections.create(reflection)
        self.state = add_reflection(self.state, created)
        return created
