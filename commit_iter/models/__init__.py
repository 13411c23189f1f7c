"""Models for the application."""

from .change_store import (
    ChangeStore,
    StoreKey,
    initial_message_key,
    iteration_index_key,
    iteration_message_key,
)
from .file_event_bus import FileEventBus
from .git_repository import GitRepository
from .repository_registry import RepositoryRegistry
from .repository_session import InitializationState, RepositorySession
from .state_store import JsonStateStore, MemoryStateStore

__all__ = [
    "ChangeStore",
    "FileEventBus",
    "GitRepository",
    "InitializationState",
    "JsonStateStore",
    "MemoryStateStore",
    "RepositoryRegistry",
    "RepositorySession",
    "StoreKey",
    "initial_message_key",
    "iteration_index_key",
    "iteration_message_key",
]
