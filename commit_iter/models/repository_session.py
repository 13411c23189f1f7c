"""Per-repository initialization state for one activation of the extension."""

from enum import Enum
from typing import Dict


class InitializationState(str, Enum):
    PENDING = "pending"  # not walked through initialization, or no message
    SEEDED = "seeded"  # initial message recorded, not yet handed to iteration
    READY = "ready"  # clean tree at last check, or seeded and handed over


class RepositorySession:
    """Owns the initialization flags of every repository seen this session.

    Created at activation and discarded at deactivation; never persisted.
    """

    def __init__(self):
        self._states: Dict[str, InitializationState] = {}
        self.active = True

    def state(self, repository: str) -> InitializationState:
        return self._states.get(repository, InitializationState.PENDING)

    def is_initialized(self, repository: str) -> bool:
        return self.state(repository) is InitializationState.READY

    def mark_ready(self, repository: str) -> None:
        self._states[repository] = InitializationState.READY

    def mark_seeded(self, repository: str) -> None:
        self._states[repository] = InitializationState.SEEDED

    def mark_pending(self, repository: str) -> None:
        self._states[repository] = InitializationState.PENDING

    def discard(self) -> None:
        self._states.clear()
        self.active = False
