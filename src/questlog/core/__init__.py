"""Functional core - pure business logic with no I/O."""

from .tasks import (
    DecodeError,
    Quadrant,
    SortMode,
    TaskItem,
    decode_tasks,
    encode_tasks,
    quadrant_for,
)
from .views import TaskCounts, active_list, completed_list, matrix_groups, sort_tasks, task_counts
from .persona import DEFAULT_PERSONA, PERSONA_TABLE, Persona, personality, rank_quadrants
from .seed import sample_tasks

__all__ = [
    # Tasks
    "DecodeError",
    "Quadrant",
    "SortMode",
    "TaskItem",
    "decode_tasks",
    "encode_tasks",
    "quadrant_for",
    # Views
    "TaskCounts",
    "active_list",
    "completed_list",
    "matrix_groups",
    "sort_tasks",
    "task_counts",
    # Persona
    "DEFAULT_PERSONA",
    "PERSONA_TABLE",
    "Persona",
    "personality",
    "rank_quadrants",
    # Seed
    "sample_tasks",
]
