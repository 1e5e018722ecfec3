"""Demonstration quests for a fresh board."""

from datetime import datetime, timedelta

from .tasks import TaskItem

# (title, offset from now, urgent, important)
SAMPLES: list[tuple[str, timedelta, bool, bool]] = [
    # Do Now
    ("Fix Crash Bug", timedelta(hours=1), True, True),
    ("Submit App Review", timedelta(days=1), True, True),
    ("Pay Server Bill", timedelta(hours=12), True, True),
    # Plan
    ("Learn Animation Basics", timedelta(days=7), False, True),
    ("Design New Icon", timedelta(days=3), False, True),
    ("Plan Marketing Strategy", timedelta(days=10), False, True),
    # Delegate
    ("Return Mom's Call", timedelta(minutes=30), True, False),
    ("Reply to Comments", timedelta(hours=2), True, False),
    ("Buy Coffee Beans", timedelta(hours=5), True, False),
    # Later
    ("Watch Cat Videos", timedelta(days=2), False, False),
    ("Organize Desktop Icons", timedelta(days=5), False, False),
    ("Browse Reddit", timedelta(days=1), False, False),
]


def sample_tasks(now: datetime | None = None) -> list[TaskItem]:
    """Three quests per quadrant, deadlines relative to `now`."""
    now = now or datetime.now()
    return [
        TaskItem.create(
            title,
            deadline=now + offset,
            is_urgent=urgent,
            is_important=important,
            now=now,
        )
        for title, offset, urgent, important in SAMPLES
    ]
