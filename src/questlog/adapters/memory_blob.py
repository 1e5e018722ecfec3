"""In-memory task blob storage adapter."""

DEFAULT_KEY = "TodoItems"


class MemoryBlobStore:
    """
    Dictionary-backed blob storage.

    Implements TaskBlobStore protocol. Several stores may share one
    `backing` dict to simulate a key-value store that outlives them.
    """

    def __init__(self, backing: dict[str, bytes] | None = None, key: str = DEFAULT_KEY):
        self.backing = backing if backing is not None else {}
        self.key = key

    def load(self) -> bytes | None:
        return self.backing.get(self.key)

    def save(self, blob: bytes) -> None:
        self.backing[self.key] = blob
