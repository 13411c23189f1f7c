import asyncio
from typing import Awaitable, Callable

import structlog

from ..models import ChangeStore, InitializationState, RepositorySession
from ..protocols.repository_protocol import RepositoryProtocol, RepositorySetProtocol
from .initialization import InitializationWorkflow
from .revert import RevertRoutine

logger = structlog.get_logger(__name__)

RepositoryCallback = Callable[[RepositoryProtocol], Awaitable[None]]


class DispatchGate:
    """Routes every file event to each repository's current workflow.

    Repositories are processed concurrently over a snapshot of the host's
    repository list. Nothing is atomic across repositories.
    """

    def __init__(
        self,
        repositories: RepositorySetProtocol,
        session: RepositorySession,
        change_store: ChangeStore,
        initialization: InitializationWorkflow,
        revert_routine: RevertRoutine,
    ):
        self.repositories = repositories
        self.session = session
        self.change_store = change_store
        self.initialization = initialization
        self.revert_routine = revert_routine

    async def for_each_repository(self, callback: RepositoryCallback) -> None:
        snapshot = self.repositories.repositories
        results = await asyncio.gather(
            *(self._dispatch(repo, callback) for repo in snapshot),
            return_exceptions=True,
        )
        for repo, result in zip(snapshot, results):
            if isinstance(result, Exception):
                logger.error(
                    "dispatch_failed",
                    repository=repo.root,
                    error=str(result),
                    exc_info=result,
                )

    async def _dispatch(
        self, repo: RepositoryProtocol, callback: RepositoryCallback
    ) -> None:
        await repo.status()

        if self.session.state(repo.root) is InitializationState.SEEDED:
            # The seeded message now lives in the repository itself
            self.session.mark_ready(repo.root)
            self.change_store.clear_initial_message()

        if self.session.is_initialized(repo.root):
            if repo.working_tree_changes:
                await callback(repo)
            else:
                self.revert_routine.revert(repo)
        else:
            await self.initialization.initialize(repo)
