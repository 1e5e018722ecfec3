"""Pure task domain logic - no I/O dependencies."""

import json
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum


class DecodeError(ValueError):
    """Raised when a persisted task blob cannot be decoded."""

    pass


class Quadrant(Enum):
    """
    Eisenhower quadrant, derived from the urgent/important flags.

    Declaration order is the fixed presentation and tie-break order.
    """

    DO_NOW = "DO NOW"
    PLAN = "PLAN"
    DELEGATE = "DELEGATE"
    LATER = "LATER"

    @property
    def label_key(self) -> str:
        """Localization key for the quadrant heading."""
        return {
            Quadrant.DO_NOW: "Do Now",
            Quadrant.PLAN: "Plan",
            Quadrant.DELEGATE: "Delegate",
            Quadrant.LATER: "Later",
        }[self]


class SortMode(Enum):
    """Sort key selector for the list projections."""

    CREATED_TIME = "Created Time"
    DUE_DATE = "Due Date"
    TASK_NAME = "Task Name"

    @classmethod
    def parse(cls, value: str) -> "SortMode":
        """Accept either the display value or the member name, any case."""
        needle = value.strip().lower().replace("-", "_")
        for mode in cls:
            if needle in (mode.value.lower(), mode.name.lower(), mode.value.lower().replace(" ", "_")):
                return mode
        raise ValueError(f"Unknown sort mode: {value!r}")


def quadrant_for(is_urgent: bool, is_important: bool) -> Quadrant:
    """
    Eisenhower classification.

    Urgent + Important -> DO NOW
    Not Urgent + Important -> PLAN
    Urgent + Not Important -> DELEGATE
    Not Urgent + Not Important -> LATER
    """
    if is_urgent and is_important:
        return Quadrant.DO_NOW
    elif not is_urgent and is_important:
        return Quadrant.PLAN
    elif is_urgent and not is_important:
        return Quadrant.DELEGATE
    else:
        return Quadrant.LATER


def _new_id() -> str:
    return str(uuid.uuid4()).upper()


@dataclass(frozen=True)
class TaskItem:
    """A single quest on the board."""

    title: str
    id: str = field(default_factory=_new_id)
    is_completed: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    deadline: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None
    is_urgent: bool = False
    is_important: bool = False

    @property
    def quadrant(self) -> Quadrant:
        return quadrant_for(self.is_urgent, self.is_important)

    @property
    def due_day(self):
        """Deadline with the time of day dropped."""
        return self.deadline.date()

    @classmethod
    def create(
        cls,
        title: str,
        deadline: datetime | None = None,
        is_urgent: bool = False,
        is_important: bool = False,
        now: datetime | None = None,
    ) -> "TaskItem":
        """Build a fresh, not yet completed task stamped with `now`."""
        now = now or datetime.now()
        return cls(
            title=title,
            created_at=now,
            deadline=deadline or now,
            is_urgent=is_urgent,
            is_important=is_important,
        )

    def edited(
        self,
        title: str,
        deadline: datetime,
        is_urgent: bool,
        is_important: bool,
    ) -> "TaskItem":
        """Copy with the editable fields replaced; identity and completion kept."""
        return replace(
            self,
            title=title,
            deadline=deadline,
            is_urgent=is_urgent,
            is_important=is_important,
        )

    def toggled(self, now: datetime | None = None) -> "TaskItem":
        """Copy with completion flipped and completed_at kept in step."""
        if self.is_completed:
            return replace(self, is_completed=False, completed_at=None)
        return replace(self, is_completed=True, completed_at=now or datetime.now())

    def to_record(self) -> dict:
        """Serialize to the persisted record layout."""
        return {
            "id": self.id,
            "title": self.title,
            "isCompleted": self.is_completed,
            "createdAt": self.created_at.isoformat(),
            "deadline": self.deadline.isoformat(),
            "completedAt": self.completed_at.isoformat() if self.completed_at else None,
            "isUrgent": self.is_urgent,
            "isImportant": self.is_important,
        }

    @classmethod
    def from_record(cls, data: dict) -> "TaskItem":
        """Create TaskItem from a persisted record."""
        if not isinstance(data, dict):
            raise DecodeError(f"Expected an object, got {type(data).__name__}")
        try:
            task_id = data["id"]
            title = data["title"]
            created_at = _parse_timestamp(data["createdAt"])
        except KeyError as e:
            raise DecodeError(f"Missing field {e.args[0]!r}") from e
        if not isinstance(task_id, str) or not isinstance(title, str):
            raise DecodeError("Fields 'id' and 'title' must be strings")

        is_completed = _parse_bool(data, "isCompleted")
        completed_at = None
        if is_completed:
            if data.get("completedAt") is None:
                raise DecodeError(f"Completed task {task_id} has no completedAt")
            completed_at = _parse_timestamp(data["completedAt"])

        deadline = data.get("deadline")
        return cls(
            id=task_id,
            title=title,
            is_completed=is_completed,
            created_at=created_at,
            deadline=_parse_timestamp(deadline) if deadline is not None else created_at,
            completed_at=completed_at,
            is_urgent=_parse_bool(data, "isUrgent"),
            is_important=_parse_bool(data, "isImportant"),
        )


def _parse_bool(data: dict, key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise DecodeError(f"Field {key!r} must be a boolean")
    return value


def _parse_timestamp(value) -> datetime:
    """ISO-8601 string or epoch seconds, as naive local time."""
    if isinstance(value, bool):
        raise DecodeError(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value)
        except (OverflowError, OSError, ValueError) as e:
            raise DecodeError(f"Invalid timestamp: {value!r}") from e
    if not isinstance(value, str):
        raise DecodeError(f"Invalid timestamp: {value!r}")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise DecodeError(f"Invalid timestamp: {value!r}") from e
    # Tasks are stamped with naive local time; offsets must not leak in.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def encode_tasks(tasks) -> bytes:
    """Serialize a task collection to the persisted JSON blob."""
    return json.dumps([t.to_record() for t in tasks], ensure_ascii=False).encode("utf-8")


def decode_tasks(blob: bytes | str) -> list[TaskItem]:
    """
    Parse a persisted JSON blob back into tasks.

    Raises DecodeError on anything that is not a well-formed task array.
    """
    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Corrupt task data: {e}") from e
    if not isinstance(data, list):
        raise DecodeError("Task data must be a JSON array")
    return [TaskItem.from_record(item) for item in data]


def tomorrow(now: datetime | None = None) -> datetime:
    """Default deadline offered by the editor."""
    return (now or datetime.now()) + timedelta(days=1)
