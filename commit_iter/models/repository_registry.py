from typing import Callable, List

import structlog

from ..protocols.repository_protocol import RepositoryListener, RepositoryProtocol

logger = structlog.get_logger(__name__)


class RepositoryRegistry:
    """In-process set of open repositories with discovery subscriptions."""

    def __init__(self):
        self._repositories: List[RepositoryProtocol] = []
        self._listeners: List[RepositoryListener] = []

    @property
    def repositories(self) -> List[RepositoryProtocol]:
        return list(self._repositories)

    def on_did_open_repository(
        self, listener: RepositoryListener
    ) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def open(self, repository: RepositoryProtocol) -> None:
        """Register a repository and notify listeners, in subscription order."""
        if any(r.root == repository.root for r in self._repositories):
            logger.debug("repository_already_open", repository=repository.root)
            return

        self._repositories.append(repository)
        logger.info("repository_opened", repository=repository.root)
        for listener in list(self._listeners):
            await listener(repository)

    def close(self, root: str) -> None:
        self._repositories = [r for r in self._repositories if r.root != root]
