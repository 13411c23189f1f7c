"""Typed access to the per-repository iteration state."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..protocols.store_protocol import PersistentStoreProtocol
from ..schemas import normalize_path


class StoreKey(BaseModel):
    """A persisted key: namespace, name and optionally a repository identity."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str
    repository: Optional[str] = None

    def __str__(self) -> str:
        if self.repository is None:
            return f"{self.namespace}:{self.name}"
        return f"{self.namespace}:{self.name}_{self.repository}"


def iteration_message_key(namespace: str, repository: str) -> StoreKey:
    return StoreKey(namespace=namespace, name="iteration_message", repository=repository)


def iteration_index_key(namespace: str, repository: str) -> StoreKey:
    return StoreKey(namespace=namespace, name="iteration_index", repository=repository)


def initial_message_key(namespace: str) -> StoreKey:
    return StoreKey(namespace=namespace, name="initial_message")


class ChangeStore:
    """Pending change sets and iteration messages, keyed by repository.

    Pure data access: callers decide when to read and write.
    """

    def __init__(self, store: PersistentStoreProtocol, namespace: str):
        self.store = store
        self.namespace = namespace

    def get_pending_changes(self, repository: str) -> List[str]:
        value = self.store.get(str(iteration_index_key(self.namespace, repository)))
        return list(value or [])

    def set_pending_changes(self, repository: str, paths: List[str]) -> None:
        unique = list(dict.fromkeys(normalize_path(p) for p in paths))
        self.store.update(str(iteration_index_key(self.namespace, repository)), unique)

    def get_iteration_message(self, repository: str) -> Optional[str]:
        value = self.store.get(str(iteration_message_key(self.namespace, repository)))
        return value or None

    def set_iteration_message(self, repository: str, message: str) -> None:
        self.store.update(
            str(iteration_message_key(self.namespace, repository)), message
        )

    def get_initial_message(self) -> Optional[str]:
        return self.store.get(str(initial_message_key(self.namespace))) or None

    def set_initial_message(self, message: str) -> None:
        self.store.update(str(initial_message_key(self.namespace)), message)

    def clear_initial_message(self) -> None:
        self.store.update(str(initial_message_key(self.namespace)), None)
