"""Adapters - I/O implementations of ports."""

from .file_blob import FileBlobStore
from .memory_blob import MemoryBlobStore

__all__ = [
    "FileBlobStore",
    "MemoryBlobStore",
]
