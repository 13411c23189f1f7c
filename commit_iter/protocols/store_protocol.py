"""Persistent key-value store protocol."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PersistentStoreProtocol(Protocol):
    """Workspace-scoped key-value store, durable across sessions."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def update(self, key: str, value: Any) -> None:
        ...
