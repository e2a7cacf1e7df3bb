"""Observable collection stores, one per domain."""

from .base import MutationKind, ObservableStore, StoreState
from .chat import ChatStore
from .connections import ConnectionStore
from .jobs import JobStore
from .notifications import NotificationStore
from .posts import PostStore, ReportReason

__all__ = [
    "ChatStore",
    "ConnectionStore",
    "JobStore",
    "MutationKind",
    "NotificationStore",
    "ObservableStore",
    "PostStore",
    "ReportReason",
    "StoreState",
]
