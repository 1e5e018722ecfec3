"""File-based task blob storage adapter."""

import os
from pathlib import Path


class FileBlobStore:
    """
    File-based blob storage.

    Implements TaskBlobStore protocol. The whole collection lives in one
    JSON file; writes go to a sibling temp file and are swapped in with
    os.replace so a reader never sees a half-written blob.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> bytes | None:
        """Read the stored blob. Returns None if the file does not exist."""
        if not self.path.exists():
            return None
        return self.path.read_bytes()

    def save(self, blob: bytes) -> None:
        """Write/overwrite the stored blob."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(f".{self.path.name}.tmp")
        tmp.write_bytes(blob)
        os.replace(tmp, self.path)
