"""Thread pool used for extraction and probing."""

from .pool import WorkerPool

__all__ = ["WorkerPool"]
