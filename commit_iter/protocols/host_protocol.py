"""Host editor protocols."""

from typing import Awaitable, Callable, Protocol, runtime_checkable

from ..schemas import FileEvent
from .prompt_protocol import PromptServiceProtocol
from .repository_protocol import RepositorySetProtocol
from .store_protocol import PersistentStoreProtocol

FileEventHandler = Callable[[FileEvent], Awaitable[None]]


@runtime_checkable
class FileEventSourceProtocol(Protocol):
    """Emits save, change, delete, rename and create events."""

    def subscribe(self, handler: FileEventHandler) -> Callable[[], None]:
        """Register a handler. Returns an unsubscribe callable."""
        ...


@runtime_checkable
class HostProtocol(Protocol):
    """Everything the extension needs from the editor."""

    @property
    def store(self) -> PersistentStoreProtocol:
        ...

    @property
    def prompts(self) -> PromptServiceProtocol:
        ...

    @property
    def file_events(self) -> FileEventSourceProtocol:
        ...

    async def get_git_api(self) -> RepositorySetProtocol:
        """Locate and activate the version-control integration.

        Raises HostDependencyUnavailableError when it cannot be obtained.
        """
        ...
