"""Synchronization domain exports."""

from .edit_coalescing import CallLaterScheduler, CancellableHandle, EditCoalescer
from .sync_controller import SyncController
from .sync_states import EchoSuppression, SyncRole

__all__ = [
    "CallLaterScheduler",
    "CancellableHandle",
    "EchoSuppression",
    "EditCoalescer",
    "SyncController",
    "SyncRole",
]
