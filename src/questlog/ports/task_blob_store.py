"""Task blob storage interface."""

from typing import Protocol


class TaskBlobStore(Protocol):
    """Interface for persisting the serialized task collection under one key."""

    def load(self) -> bytes | None:
        """Read the stored blob. Returns None if nothing has been saved."""
        ...

    def save(self, blob: bytes) -> None:
        """Write/overwrite the stored blob."""
        ...
