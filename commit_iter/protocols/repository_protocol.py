"""Repository protocol interfaces."""

from typing import Awaitable, Callable, List, Protocol, runtime_checkable

from ..schemas import WorkingTreeChange


@runtime_checkable
class RepositoryProtocol(Protocol):
    """A working copy as exposed by the host's version-control integration."""

    @property
    def root(self) -> str:
        """Repository identity (its root location)."""
        ...

    @property
    def selected(self) -> bool:
        """Whether the repository is currently selected in the host UI."""
        ...

    @property
    def working_tree_changes(self) -> List[WorkingTreeChange]:
        """Working tree changes as of the last status refresh."""
        ...

    message_input: str

    async def status(self) -> None:
        """Refresh the working tree change list."""
        ...


RepositoryListener = Callable[[RepositoryProtocol], Awaitable[None]]


@runtime_checkable
class RepositorySetProtocol(Protocol):
    """All repositories known to the host."""

    @property
    def repositories(self) -> List[RepositoryProtocol]:
        ...

    def on_did_open_repository(
        self, listener: RepositoryListener
    ) -> Callable[[], None]:
        """Subscribe to repository discovery. Returns an unsubscribe callable."""
        ...
