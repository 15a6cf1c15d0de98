"""Core runtime helpers for docdiff."""

from .async_utils import DiffRunner, run_sync

__all__ = ["DiffRunner", "run_sync"]
