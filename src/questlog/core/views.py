"""List projections for the quest screens - pure functions, no I/O."""

import locale
from dataclasses import dataclass, field
from typing import Iterable

from .tasks import Quadrant, SortMode, TaskItem


def _name_key(task: TaskItem) -> str:
    return locale.strxfrm(task.title.casefold())


def sort_tasks(
    tasks: Iterable[TaskItem],
    sort_mode: SortMode,
    by_completion: bool = False,
) -> list[TaskItem]:
    """
    Order tasks for display.

    CREATED_TIME: newest first (most recently completed first when
    `by_completion` is set). DUE_DATE: soonest day first. TASK_NAME:
    case-insensitive, locale-aware. All sorts are stable.

    Pure function - no I/O.
    """
    match sort_mode:
        case SortMode.CREATED_TIME if by_completion:
            return sorted(tasks, key=lambda t: t.completed_at or t.created_at, reverse=True)
        case SortMode.CREATED_TIME:
            return sorted(tasks, key=lambda t: t.created_at, reverse=True)
        case SortMode.DUE_DATE:
            return sorted(tasks, key=lambda t: t.due_day)
        case SortMode.TASK_NAME:
            return sorted(tasks, key=_name_key)
    raise ValueError(f"Unknown sort mode: {sort_mode!r}")


def active_list(tasks: Iterable[TaskItem], sort_mode: SortMode) -> list[TaskItem]:
    """Open quests in display order."""
    return sort_tasks([t for t in tasks if not t.is_completed], sort_mode)


def matrix_groups(
    tasks: Iterable[TaskItem],
    sort_mode: SortMode,
) -> dict[Quadrant, list[TaskItem]]:
    """
    Open quests grouped by quadrant.

    Every quadrant is present. Quadrants holding at least one quest come
    first, then the empty ones, each run in DO NOW, PLAN, DELEGATE, LATER order.
    """
    groups: dict[Quadrant, list[TaskItem]] = {q: [] for q in Quadrant}
    for task in tasks:
        if not task.is_completed:
            groups[task.quadrant].append(task)

    ordered = [q for q in Quadrant if groups[q]] + [q for q in Quadrant if not groups[q]]
    return {q: sort_tasks(groups[q], sort_mode) for q in ordered}


def completed_list(tasks: Iterable[TaskItem], sort_mode: SortMode) -> list[TaskItem]:
    """Finished quests; "Created Time" means most recently finished first."""
    return sort_tasks([t for t in tasks if t.is_completed], sort_mode, by_completion=True)


@dataclass
class TaskCounts:
    """Summary figures for the settings panel."""

    total: int = 0
    active: int = 0
    completed: int = 0
    completed_by_quadrant: dict[Quadrant, int] = field(
        default_factory=lambda: {q: 0 for q in Quadrant}
    )


def task_counts(tasks: Iterable[TaskItem]) -> TaskCounts:
    counts = TaskCounts()
    for task in tasks:
        counts.total += 1
        if task.is_completed:
            counts.completed += 1
            counts.completed_by_quadrant[task.quadrant] += 1
        else:
            counts.active += 1
    return counts
