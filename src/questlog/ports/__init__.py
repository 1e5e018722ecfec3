"""Ports - interfaces/protocols for external dependencies."""

from .task_blob_store import TaskBlobStore

__all__ = [
    "TaskBlobStore",
]
